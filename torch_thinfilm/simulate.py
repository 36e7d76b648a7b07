"""
Authors:
    Sergei Rodionov, Daniele Veraldi
Date:
    2025-06-09
License:
    MIT, Open Source

================================================================================
Module: simulate.py
================================================================================
Description:
    This module implements the characteristic-matrix calculation of the
    optical response of a planar multilayer: reflectance, transmittance,
    absorptance and the ellipsometric angles psi/delta, for one wavelength,
    one angle of incidence and an arbitrary linear polarization.

    For each polarization (p and s) the admittances of the incident and exit
    media are computed, the characteristic matrices of all layers are
    multiplied in stack order, and the observables are extracted from

        ( B )   ( m11  m12 ) ( 1      )
        (   ) = (          ) (        )
        ( C )   ( m21  m22 ) ( Y_exit )

        r   = (B - C/Y_inc) / (B + C/Y_inc)
        t_s = 2 / (B + C/Y_inc)
        t_p = 2 / (B + C/Y_inc) · cos(θ_inc) / cos(θ_exit)
        T   = cos²φ·|t_p|² + sin²φ·|t_s|²

    A linear polarization at angle φ is treated as the incoherent power
    mixture  cos²φ·X_p + sin²φ·X_s.

    References:

    - Macleod, H. A. (2010). Thin-Film Optical Filters, 4th ed., Ch. 2.

Key Components:
    - `simulate`: the computation entry point.
    - `OutputRequest`: which observables to produce.
    - `SimulationResult`: the populated observables and coefficients.
    - `AbsorbingIncidentMediumWarning`: advisory issued when transmittance
      is requested with an absorbing incident medium.

Conventions:
    - propagation from the incident medium towards the exit medium
    - refractive index defined as n - 1j*k, phase δ = -2π·N·d·cos(θ)/λ; the
      sign of the imaginary part is used as given
    - wavelength and thicknesses share one length unit
    - angle of incidence given through its (complex) cosine
    - polarization angle in radians, 0 is p and π/2 is s
    - inputs are not validated, invalid physics shows up as NaN/inf or as
      values outside [0, 1]

Example:
    >>> from torch_thinfilm import Layer, simulate
    >>> res = simulate(1.0, 550.0, 0.0, 1.0, 1.52,
    ...                [Layer(99.6, 1.38)])
    >>> round(res.reflectance, 4)    # doctest: +SKIP
    0.0126
================================================================================
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field, replace
from typing import Iterable, NamedTuple

import torch

from .char_matrix import (
    CharacteristicMatrix,
    Pol,
    admittance,
    layer_matrix,
    phase_thickness,
    snell_cos,
)
from .layer import Layer, Medium, as_medium

logger = logging.getLogger(__name__)

_COMPLEX_OF = {torch.float32: torch.complex64, torch.float64: torch.complex128}


class AbsorbingIncidentMediumWarning(UserWarning):
    """The transmittance formula only holds for a non-absorbing incident medium."""


@dataclass(frozen=True)
class OutputRequest:
    """
    Observables to compute.

    Transmittance is only produced together with reflectance and absorptance
    only together with transmittance. psi and delta always come as a pair.
    A dependent observable whose prerequisite is not requested stays
    ``None`` in the result.
    """

    reflectance: bool = True
    transmittance: bool = True
    absorptance: bool = True
    ellipsometry: bool = True

    @classmethod
    def all(cls) -> OutputRequest:
        return cls()

    @classmethod
    def none(cls) -> OutputRequest:
        return cls(False, False, False, False)

    def effective(self) -> OutputRequest:
        """The request with every unsatisfiable flag cleared."""
        transmittance = self.transmittance and self.reflectance
        return replace(
            self,
            transmittance=transmittance,
            absorptance=self.absorptance and transmittance,
        )


@dataclass(frozen=True)
class SimulationResult:
    """
    Outcome of one :func:`simulate` call.

    Attributes:
        reflectance (float | None): polarization-weighted reflectance.
        transmittance (float | None): polarization-weighted transmittance.
        absorptance (float | None): ``1 - R - T``, not clamped.
        psi (float | None): ellipsometric angle psi in radians.
        delta (float | None): ellipsometric angle delta in radians.
        r_p, r_s (complex): amplitude reflection coefficients.
        t_p, t_s (complex | None): amplitude transmission coefficients,
            only when transmittance was computed.
        diagnostics (tuple[str, ...]): advisory messages raised during the call.
    """

    reflectance: float | None = None
    transmittance: float | None = None
    absorptance: float | None = None
    psi: float | None = None
    delta: float | None = None
    r_p: complex = 0j
    r_s: complex = 0j
    t_p: complex | None = None
    t_s: complex | None = None
    diagnostics: tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, float]:
        """Populated observables only."""
        names = ("reflectance", "transmittance", "absorptance", "psi", "delta")
        return {n: getattr(self, n) for n in names if getattr(self, n) is not None}


class _LayerTerms(NamedTuple):
    n: torch.Tensor
    cos_theta: torch.Tensor
    delta: torch.Tensor


class _Response(NamedTuple):
    r: torch.Tensor
    t_tangential: torch.Tensor


def _fold(
    pol: Pol,
    terms: list[_LayerTerms],
    n_incident: torch.Tensor,
    cos_incident: torch.Tensor,
    n_exit: torch.Tensor,
    cos_exit: torch.Tensor,
) -> _Response:
    """Multiply the layer matrices of one polarization and extract r and t."""
    eta_incident = admittance(n_incident, cos_incident, pol)
    eta_exit = admittance(n_exit, cos_exit, pol)

    product = CharacteristicMatrix.identity(dtype=cos_incident.dtype, device=cos_incident.device)
    for term in terms:
        eta_layer = admittance(term.n, term.cos_theta, pol)
        # order matters: the product is not commutative
        product = product.combine(layer_matrix(term.delta, eta_layer))

    b = product.m11 + product.m12 * eta_exit
    c = product.m21 + product.m22 * eta_exit
    denominator = b + c / eta_incident

    r = (b - c / eta_incident) / denominator
    return _Response(r, 2.0 / denominator)


def simulate(
    cos_theta: complex | torch.Tensor,
    wavelength: float,
    polarization: float,
    n_incident: Medium | complex,
    n_exit: Medium | complex,
    layers: Iterable[Layer] = (),
    request: OutputRequest | None = None,
    *,
    dtype: torch.dtype = torch.float64,
    device: torch.device = torch.device("cpu"),
    stacklevel: int = 2,
) -> SimulationResult:
    """
    Optical response of a multilayer for one wavelength and angle.

    Parameters
    ----------
    cos_theta : complex | torch.Tensor
        Cosine of the angle of incidence in the incident medium. Complex to
        allow absorbing incident media.
    wavelength : float
        Vacuum wavelength, same unit as the layer thicknesses.
    polarization : float
        Angle of the linear polarization in radians, 0 is p and π/2 is s.
    n_incident, n_exit : Medium | complex
        Semi-infinite media on the incidence and exit side.
    layers : Iterable[Layer]
        The films, from the incident side to the exit side. May be empty.
    request : OutputRequest | None
        Observables to compute, everything when ``None``.
    dtype : torch.dtype, default ``torch.float64``
        ``float32`` or ``float64``; determines the complex precision
        internally (``complex64`` / ``complex128``).
    device : torch.device, default ``cpu``
        Where the intermediate tensors live.
    stacklevel : int, default 2
        Passed to ``warnings.warn`` for the absorbing incident medium
        advisory, so wrappers can attribute it to their own caller.

    Returns
    -------
    SimulationResult
        Requested observables, ``None`` for those not computed.

    Notes
    -----
    Grazing incidence (``cos_theta == 0``) divides by zero in the p
    admittance and yields NaN/inf. Nothing is clamped.
    """
    if dtype not in _COMPLEX_OF:
        raise TypeError(f"dtype must be float32 or float64, got {dtype!s}")
    c_dtype = _COMPLEX_OF[dtype]

    incident = as_medium(n_incident)
    exit_ = as_medium(n_exit)
    layers = list(layers)
    for i, layer in enumerate(layers):
        if not isinstance(layer, Layer):
            raise TypeError(f"layers[{i}] must be a Layer, got {type(layer).__name__}")

    wanted = (request if request is not None else OutputRequest.all()).effective()
    logger.debug(
        "simulate: %d layer(s), wavelength=%g, polarization=%g, request=%s",
        len(layers), wavelength, polarization, wanted,
    )

    def as_complex(value) -> torch.Tensor:
        return torch.as_tensor(value, dtype=c_dtype, device=device)

    cos_incident = as_complex(cos_theta)
    n_inc = as_complex(incident.refractive_index)
    n_ext = as_complex(exit_.refractive_index)

    # exit and layer cosines straight from the incident cosine
    cos_exit = snell_cos(cos_incident, n_inc, n_ext)
    terms = []
    for layer in layers:
        n_l = as_complex(layer.refractive_index)
        cos_l = snell_cos(cos_incident, n_inc, n_l)
        terms.append(_LayerTerms(n_l, cos_l, phase_thickness(n_l, layer.thickness, cos_l, wavelength)))

    resp_p = _fold("p", terms, n_inc, cos_incident, n_ext, cos_exit)
    resp_s = _fold("s", terms, n_inc, cos_incident, n_ext, cos_exit)

    angle = torch.as_tensor(polarization, dtype=dtype, device=device)
    weight_p = torch.cos(angle) ** 2
    weight_s = torch.sin(angle) ** 2

    values: dict = {
        "r_p": complex(resp_p.r.item()),
        "r_s": complex(resp_s.r.item()),
    }
    diagnostics: list[str] = []

    if wanted.reflectance:
        reflectance = weight_p * resp_p.r.abs() ** 2 + weight_s * resp_s.r.abs() ** 2
        values["reflectance"] = reflectance.item()

        if wanted.transmittance:
            if incident.is_absorbing:
                message = (
                    "transmittance may be inaccurate: the incident medium is absorbing "
                    f"(n_incident = {incident.refractive_index})"
                )
                warnings.warn(message, AbsorbingIncidentMediumWarning, stacklevel=stacklevel)
                diagnostics.append(message)

            t_p = resp_p.t_tangential * cos_incident / cos_exit
            t_s = resp_s.t_tangential
            values["t_p"] = complex(t_p.item())
            values["t_s"] = complex(t_s.item())

            transmittance = weight_p * t_p.abs() ** 2 + weight_s * t_s.abs() ** 2
            values["transmittance"] = transmittance.item()

            if wanted.absorptance:
                values["absorptance"] = 1.0 - values["reflectance"] - values["transmittance"]

    if wanted.ellipsometry:
        values["psi"] = torch.atan2(resp_p.r.abs(), resp_s.r.abs()).item()
        values["delta"] = (torch.angle(resp_p.r) - torch.angle(resp_s.r)).item()

    return SimulationResult(diagnostics=tuple(diagnostics), **values)
