"""
Authors:
    Sergei Rodionov, Daniele Veraldi
Date:
    2025-06-09
License:
    MIT, Open Source

================================================================================
Module: complex_trig.py
================================================================================
Description:
    Arcsine and arccosine extended to complex arguments through the principal
    logarithm. They are not used by the simulation itself; they are provided
    for callers that need to turn a (possibly complex) cosine or sine returned
    by, or fed into, the kernel back into an angle.

        asin(z) = -i·log(i·z + sqrt(1 - z²))
        acos(z) = -i·log(z + sqrt(z² - 1))

Conventions:
    - principal branch of ``torch.log`` and ``torch.sqrt`` throughout
    - defined for every complex number, nothing is raised

Example:
    >>> from torch_thinfilm.complex_trig import acos
    >>> acos(0.5).real            # doctest: +SKIP
    tensor(1.0472, dtype=torch.float64)
================================================================================
"""

from __future__ import annotations

import torch

ONE_I = 1j


def _as_complex(z: complex | torch.Tensor, dtype: torch.dtype) -> torch.Tensor:
    if isinstance(z, torch.Tensor):
        return z.to(dtype=dtype)
    return torch.as_tensor(complex(z), dtype=dtype)


def asin(z: complex | torch.Tensor, *, dtype: torch.dtype = torch.complex128) -> torch.Tensor:
    """
    Complex arcsine, ``-i·log(i·z + sqrt(1 - z²))``.

    Parameters:
        z : complex | torch.Tensor
        Argument, any shape when a tensor is given.
        dtype : torch.dtype
        Complex dtype of the result.
    """
    z = _as_complex(z, dtype)
    return -ONE_I * torch.log(ONE_I * z + torch.sqrt(1.0 - z * z))


def acos(z: complex | torch.Tensor, *, dtype: torch.dtype = torch.complex128) -> torch.Tensor:
    """
    Complex arccosine, ``-i·log(z + sqrt(z² - 1))``.

    Parameters:
        z : complex | torch.Tensor
        Argument, any shape when a tensor is given.
        dtype : torch.dtype
        Complex dtype of the result.
    """
    z = _as_complex(z, dtype)
    return -ONE_I * torch.log(z + torch.sqrt(z * z - 1.0))
