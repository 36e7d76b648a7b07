"""
Thin Film Optical Simulation Example

This example demonstrates how to drive the single-sample kernel from a small
spectral loop. The example simulates a two-layer antireflection coating
(TiO2 / MgF2) on a glass substrate in air, plus a thin absorbing chromium
film on the same substrate.

The calculation shows:
1. How to describe a stack with Layer and Medium records
2. How to evaluate it once per wavelength with Model
3. How to request only part of the observables with OutputRequest
4. How to turn a cosine back into an angle with the complex acos

Stack structure: Air | TiO2 | MgF2 | Glass substrate
"""

import math

from torch_thinfilm import Layer, Medium, Model, OutputRequest, acos


def antireflection_spectrum(angle_deg=0.0, design_wavelength=550.0):
    """
    Reflectance and transmittance of a quarter/quarter AR coating.

    Parameters:
        angle_deg (float): Incident angle in degrees
        design_wavelength (float): Wavelength (nm) where both films are quarter waves

    Returns:
        list: (wavelength, reflectance, transmittance, absorptance) tuples
    """
    air = Medium(1.0, name="Air")
    glass = Medium(1.52, name="Glass")
    tio2 = Layer(design_wavelength / (4 * 2.35), 2.35, name="TiO2")
    mgf2 = Layer(design_wavelength / (4 * 1.38), 1.38, name="MgF2")

    model = Model(env=air, structure=[tio2, mgf2], subs=glass)
    print(model)

    cos_theta = math.cos(math.radians(angle_deg))
    rows = []
    for wavelength in range(400, 801, 50):
        # unpolarized light: average of the two pure polarizations
        res_p = model(cos_theta, float(wavelength), 0.0)
        res_s = model(cos_theta, float(wavelength), math.pi / 2)
        reflectance = (res_p.reflectance + res_s.reflectance) / 2.0
        transmittance = (res_p.transmittance + res_s.transmittance) / 2.0
        rows.append((wavelength, reflectance, transmittance, 1.0 - reflectance - transmittance))
    return rows


def chromium_ellipsometry(angle_deg=70.0, wavelength=632.8):
    """psi/delta of 10 nm of chromium on glass, without the photometric outputs."""
    model = Model(
        env=1.0,
        structure=[Layer.from_nk(10.0, 3.2, 3.5, name="Cr")],
        subs=1.52,
    )
    request = OutputRequest(reflectance=False, transmittance=False,
                            absorptance=False, ellipsometry=True)
    res = model(math.cos(math.radians(angle_deg)), wavelength, math.pi / 4, request)
    return math.degrees(res.psi), math.degrees(res.delta)


def refraction_angle(angle_deg=45.0, n_in=1.0, n_out=1.52):
    """Angle inside the substrate, recovered from the generalized Snell cosine."""
    cos_in = math.cos(math.radians(angle_deg))
    cos_out = math.sqrt(1 - (1 - cos_in**2) * (n_in / n_out) ** 2)
    return math.degrees(acos(cos_out).real.item())


if __name__ == "__main__":
    print("AR coating at normal incidence")
    for wl, r, t, a in antireflection_spectrum():
        print(f"  {wl:4d} nm  R={r:.4f}  T={t:.4f}  A={a:+.1e}")

    psi, delta = chromium_ellipsometry()
    print(f"Cr 10 nm on glass at 70°: psi={psi:.2f}°, delta={delta:.2f}°")
    print(f"45° in air refracts to {refraction_angle():.2f}° in glass")
