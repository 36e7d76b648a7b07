"""
Authors:
    Sergei Rodionov, Daniele Veraldi
Date:
    2025-06-09
License:
    MIT, Open Source

================================================================================
Module: layer.py
================================================================================
Description:
    This module defines the data records used to describe a multilayer stack:
    finite-thickness films and the two semi-infinite media (incident and
    exit) that enclose them.

    Both are plain immutable values. They carry a single complex refractive
    index, dispersion is the caller's business: build new records for every
    wavelength you evaluate.

Key Components:
    - `Layer`: thin film with a thickness and a complex refractive index.
    - `Medium`: semi-infinite incident or exit medium (no thickness).

Conventions:
    - refractive index stored as n - 1j*k, e.g. ``complex(1.5, -0.001)``
    - the phase of a layer is δ = -2π·N·d·cos(θ)/λ; with that sign a
      negative imaginary part makes the field grow across the layer. The
      sign of the imaginary part is taken as given, pass whichever sign
      gives the attenuation your convention expects
    - thickness uses the same unit as the wavelength
    - thickness 0 is allowed and behaves as if the layer were absent
    - values are not validated: negative thicknesses or gain media are
      passed through to the arithmetic unchanged

Example:
    >>> from torch_thinfilm import Layer, Medium
    >>> air = Medium(1.0, name='Air')
    >>> glass = Medium(1.52, name='BK7')
    >>> mgf2 = Layer(thickness=99.6, refractive_index=1.38, name='MgF2')
    >>> absorber = Layer.from_nk(20.0, n=2.1, k=0.05)
    >>> absorber.refractive_index
    (2.1-0.05j)
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Layer:
    """
    One thin film of the stack.

    Parameters
    ----------
    thickness : float
        Physical thickness, same unit as the wavelength.
    refractive_index : complex
        Complex index, sign of the imaginary part used as given.
    name : str | None
        Optional label for display.
    """

    thickness: float
    refractive_index: complex
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "thickness", float(self.thickness))
        object.__setattr__(self, "refractive_index", complex(self.refractive_index))

    @classmethod
    def from_nk(cls, thickness: float, n: float, k: float = 0.0, *, name: str | None = None) -> Layer:
        """
        Build a layer storing ``complex(n, -k)``.

        The sign is stored as given, no check is made that it attenuates
        under the phase convention of the kernel.
        """
        return cls(thickness, complex(n, -k), name=name)

    @property
    def is_absorbing(self) -> bool:
        return self.refractive_index.imag != 0.0

    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name is not None else ""
        return f"Layer({label}d={self.thickness:g}, n={self.refractive_index})"


@dataclass(frozen=True)
class Medium:
    """
    Semi-infinite incident or exit medium.

    Parameters
    ----------
    refractive_index : complex
        Complex index, sign of the imaginary part used as given.
    name : str | None
        Optional label for display.
    """

    refractive_index: complex
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "refractive_index", complex(self.refractive_index))

    @classmethod
    def from_nk(cls, n: float, k: float = 0.0, *, name: str | None = None) -> Medium:
        """Build a medium storing ``complex(n, -k)``, sign taken as given."""
        return cls(complex(n, -k), name=name)

    @property
    def is_absorbing(self) -> bool:
        return self.refractive_index.imag != 0.0

    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name is not None else ""
        return f"Medium({label}n={self.refractive_index})"


def as_medium(medium: Medium | complex | float) -> Medium:
    """Accept a bare index wherever a medium is expected."""
    if isinstance(medium, Medium):
        return medium
    return Medium(medium)
