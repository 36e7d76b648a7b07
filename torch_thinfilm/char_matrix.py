"""
Authors:
    Sergei Rodionov, Daniele Veraldi
Date:
    2025-06-09
License:
    MIT, Open Source

================================================================================
Module: char_matrix.py
================================================================================
Description:
    This module implements the characteristic matrix (Abelès matrix) of a
    homogeneous, isotropic thin film together with the helpers needed to
    build it: the generalized Snell relation, the tilted optical admittance
    and the phase thickness of a layer.

    All theoretical foundations are discussed in:

    - Macleod, H. A. (2010). Thin-Film Optical Filters, 4th ed., Ch. 2.

    - Abelès, F. (1950). Ann. Phys. Paris, 12e série, 5, 596–640.

    The cosine of the propagation angle inside every medium is obtained
    directly from the cosine in the incident medium, never from an explicit
    complex angle. This avoids the branch cut ambiguity of the complex
    arcsine for absorbing media and evanescent waves.

Key Components:
    - `CharacteristicMatrix`: immutable 2×2 complex matrix with `combine`.
    - `snell_cos`: cosine of the propagation angle in a given medium.
    - `admittance`: tilted admittance for 'p' or 's' polarization.
    - `phase_thickness`: phase δ accumulated across one layer.
    - `layer_matrix`: characteristic matrix of one layer.

Conventions:
    - propagation from the incident medium towards the exit medium
    - refractive index defined as n - 1j*k, the sign of k is not checked
    - wavelength and thickness share one length unit
    - no normalization of matrix entries: strongly absorbing or very thick
      stacks can overflow, this is left to the caller

Example:
    >>> import torch
    >>> from torch_thinfilm.char_matrix import CharacteristicMatrix
    >>> eye = CharacteristicMatrix.identity()
    >>> m = CharacteristicMatrix.from_entries(1, 2j, 3j, 1)
    >>> torch.equal((eye @ m).data, m.data)
    True
================================================================================
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

import torch

Pol = Literal["s", "p"]

ONE_I = 1j


@dataclass(frozen=True, eq=False)
class CharacteristicMatrix:
    """
    2×2 complex characteristic matrix.

        ( m11   m12 )
        (           )
        ( m21   m22 )

    Combination is the matrix product: ``a.combine(b)`` is the matrix seen
    after going through the element ``a`` and then through ``b``.

    Attributes:
        data (torch.Tensor): complex tensor of shape ``(2, 2)``.
    """

    data: torch.Tensor

    def __post_init__(self) -> None:
        if self.data.shape != (2, 2):
            raise ValueError(
                f"a characteristic matrix must have shape (2, 2), got {tuple(self.data.shape)}"
            )
        if not self.data.dtype.is_complex:
            raise TypeError(f"a characteristic matrix must be complex, got {self.data.dtype}")

    # ---------- constructors ----------------------------------------------
    @classmethod
    def identity(
        cls,
        dtype: torch.dtype = torch.complex128,
        device: torch.device = torch.device("cpu"),
    ) -> CharacteristicMatrix:
        """Matrix of an element with no optical effect."""
        return cls(torch.eye(2, dtype=dtype, device=device))

    @classmethod
    def from_entries(
        cls,
        m11: complex | torch.Tensor,
        m12: complex | torch.Tensor,
        m21: complex | torch.Tensor,
        m22: complex | torch.Tensor,
        *,
        dtype: torch.dtype = torch.complex128,
        device: torch.device = torch.device("cpu"),
    ) -> CharacteristicMatrix:
        entries = [
            torch.as_tensor(m, dtype=dtype, device=device).reshape(())
            for m in (m11, m12, m21, m22)
        ]
        return cls(torch.stack(entries).reshape(2, 2))

    # ---------- entries ---------------------------------------------------
    @property
    def m11(self) -> torch.Tensor:
        return self.data[0, 0]

    @property
    def m12(self) -> torch.Tensor:
        return self.data[0, 1]

    @property
    def m21(self) -> torch.Tensor:
        return self.data[1, 0]

    @property
    def m22(self) -> torch.Tensor:
        return self.data[1, 1]

    @property
    def dtype(self) -> torch.dtype:
        return self.data.dtype

    @property
    def device(self) -> torch.device:
        return self.data.device

    # ---------- algebra ---------------------------------------------------
    def combine(self, other: CharacteristicMatrix) -> CharacteristicMatrix:
        """Matrix product ``self · other`` as a new matrix."""
        return CharacteristicMatrix(self.data @ other.data)

    def __matmul__(self, other: CharacteristicMatrix) -> CharacteristicMatrix:
        if not isinstance(other, CharacteristicMatrix):
            return NotImplemented
        return self.combine(other)

    def __repr__(self) -> str:
        rows = self.data.tolist()
        return f"CharacteristicMatrix({rows!r})"


def snell_cos(
    cos_incident: torch.Tensor,
    n_incident: torch.Tensor,
    n: torch.Tensor,
) -> torch.Tensor:
    """
    Cosine of the propagation angle in a medium of index ``n``.

    From  sqrt(1 - c0²)·n0 = sqrt(1 - c1²)·n1  solved for c1:

        c1 = sqrt(1 - (1 - c0²)·(n0/n1)²)

    The principal square root is used as is, no branch selection.
    """
    ratio = n_incident / n
    return torch.sqrt(1.0 - (1.0 - cos_incident * cos_incident) * ratio * ratio)


def admittance(n: torch.Tensor, cos_theta: torch.Tensor, pol: Pol) -> torch.Tensor:
    """
    Tilted optical admittance in units of the free-space admittance.

        Y_p = n / cos(θ)
        Y_s = n · cos(θ)
    """
    if pol == "p":
        return n / cos_theta
    elif pol == "s":
        return n * cos_theta
    else:
        raise ValueError(f"Invalid polarization: {pol}")


def phase_thickness(
    n: torch.Tensor,
    thickness: float | torch.Tensor,
    cos_theta: torch.Tensor,
    wavelength: float | torch.Tensor,
) -> torch.Tensor:
    """Phase δ = -2π·n·d·cos(θ)/λ of one layer."""
    return -2.0 * math.pi * n * thickness * cos_theta / wavelength


def layer_matrix(delta: torch.Tensor, eta: torch.Tensor) -> CharacteristicMatrix:
    """
    Characteristic matrix of a single layer.

        ( cos δ          i·sin δ / Y )
        (                            )
        ( i·sin δ · Y    cos δ       )

    Parameters:
        delta : torch.Tensor
        Phase thickness of the layer (0-d, complex).
        eta : torch.Tensor
        Admittance of the layer for the polarization being propagated.
    """
    c = torch.cos(delta)
    s = torch.sin(delta) * ONE_I
    return CharacteristicMatrix(
        torch.stack([torch.stack([c, s / eta]), torch.stack([s * eta, c])])
    )
