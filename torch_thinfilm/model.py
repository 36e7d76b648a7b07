"""
Authors:
    Sergei Rodionov, Daniele Veraldi
Date:
    2025-06-09
License:
    MIT, Open Source

================================================================================
Module: model.py
================================================================================
Description:
    This module defines a thin convenience wrapper around :func:`simulate`.
    A `Model` keeps the incident medium, the ordered film stack and the exit
    medium together so that a driver (spectral sweep, fitting loop) can
    evaluate the same structure repeatedly without passing it every time.

    The model is immutable and holds no state between evaluations: every
    call runs one independent simulation.

Key Components:
    - `Model`: incident medium + structure + exit medium.
    - `__call__`: one simulation for a (cos θ, λ, polarization) sample.

Conventions:
    - Optical wave propagates from `env` (incident) to `subs` (exit).
    - Wavelengths and layer thicknesses share one length unit.

Example:
    >>> import math
    >>> from torch_thinfilm import Layer, Medium, Model
    >>> model = Model(env=Medium(1.0, name='Air'),
    ...               structure=[Layer(68.75, 2.0, name='quarter-wave')],
    ...               subs=Medium(1.5, name='Glass'))
    >>> res = model(cos_theta=1.0, wavelength=550.0, polarization=0.0)
    >>> r_s = model.reflectance(math.cos(math.radians(45)), 550.0, math.pi / 2)
================================================================================
"""

from __future__ import annotations

from typing import Iterable

import torch

from .layer import Layer, Medium, as_medium
from .simulate import OutputRequest, SimulationResult, simulate


class Model:
    """
    Multilayer structure ready for evaluation.

    Parameters
    ----------
    env : Medium | complex
        Incident medium.
    structure : Iterable[Layer]
        Films between env and substrate, incident side first.
    subs : Medium | complex
        Exit medium.
    dtype : torch.dtype, default ``torch.float64``
        Either ``float32`` or ``float64``; determines the complex
        precision internally (``complex64`` / ``complex128``).
    device : torch.device, default ``cpu``
        Where all tensors live.
    """

    def __init__(
        self,
        env: Medium | complex,
        structure: Iterable[Layer],
        subs: Medium | complex,
        *,
        dtype: torch.dtype = torch.float64,
        device: torch.device = torch.device("cpu"),
    ) -> None:
        # --------------------- validate dtype --------------------------------
        if dtype not in (torch.float32, torch.float64):
            raise TypeError(f"dtype must be float32 or float64, got {dtype!s}")

        # --------------------- validate layer roles --------------------------
        structure = tuple(structure)
        for i, lyr in enumerate(structure):
            if not isinstance(lyr, Layer):
                raise TypeError(
                    f"structure[{i}] must be a Layer, got {type(lyr).__name__}"
                )

        self._env = as_medium(env)
        self._subs = as_medium(subs)
        self._structure = structure
        self._dtype = dtype
        self._device = device

    # ----------------------------------------------------------------- API --
    @property
    def env(self) -> Medium:
        return self._env

    @property
    def subs(self) -> Medium:
        return self._subs

    @property
    def structure(self) -> tuple[Layer, ...]:
        return self._structure

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def device(self) -> torch.device:
        return self._device

    def with_layers(self, structure: Iterable[Layer]) -> Model:
        """Same media and configuration, different film stack."""
        return Model(self._env, structure, self._subs, dtype=self._dtype, device=self._device)

    def __repr__(self) -> str:
        structure_repr = f"[{', '.join(repr(layer) for layer in self._structure)}]"
        return (
            f"Model(\n"
            f"  Environment: {self._env!r},\n"
            f"  Structure: {structure_repr} (n={len(self._structure)} layers),\n"
            f"  Substrate: {self._subs!r},\n"
            f"  Dtype: {self._dtype}, Device: {self._device}\n"
            f")"
        )

    # --------------------------------------------------------------------- call
    def __call__(
        self,
        cos_theta: complex | torch.Tensor,
        wavelength: float,
        polarization: float,
        request: OutputRequest | None = None,
    ) -> SimulationResult:
        """
        Evaluate the structure for one sample.

        Parameters:
            cos_theta : complex | torch.Tensor
            Cosine of the angle of incidence in `env`.
            wavelength : float
            Wavelength, same unit as the layer thicknesses.
            polarization : float
            Polarization angle in radians (0 = p, π/2 = s).
            request : OutputRequest | None
            Observables to compute, everything when ``None``.
        """
        return simulate(
            cos_theta,
            wavelength,
            polarization,
            self._env,
            self._subs,
            self._structure,
            request,
            dtype=self._dtype,
            device=self._device,
            stacklevel=3,
        )

    def reflectance(
        self,
        cos_theta: complex | torch.Tensor,
        wavelength: float,
        polarization: float,
    ) -> float:
        request = OutputRequest(reflectance=True, transmittance=False,
                                absorptance=False, ellipsometry=False)
        return self(cos_theta, wavelength, polarization, request).reflectance
