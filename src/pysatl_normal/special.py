"""
Special Functions
=================

Standard normal CDF and its inverse, plus the precision helpers the normal
distribution needs to stay generic over the floating dtype.

- :func:`phi` — standard normal CDF, ``scipy.special.ndtr``.
- :func:`inv_phi` — its inverse, ``scipy.special.ndtri``.
- :func:`exp` — ``numpy.exp``.

Notes
-----
All functions are numpy ufuncs: scalars in, numpy scalars out; arrays in,
arrays out. None of them raise on out-of-domain input. ``inv_phi(0)`` is
``-inf``, ``inv_phi(1)`` is ``inf`` and ``inv_phi(p)`` is ``nan`` for ``p``
outside ``[0, 1]``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import cache
from typing import Any

import numpy as np
from scipy.special import ndtr, ndtri

from pysatl_normal.types import FloatDType

DEFAULT_DTYPE: FloatDType = np.float64
"""Floating precision used when none is requested."""

SUPPORTED_DTYPES: tuple[FloatDType, ...] = (np.float32, np.float64)
"""Floating precisions with native ``ndtr``/``ndtri`` loops."""

phi = ndtr
inv_phi = ndtri
exp = np.exp


def resolve_dtype(dtype: Any = None) -> FloatDType:
    """
    Normalize a dtype-like value to one of :data:`SUPPORTED_DTYPES`.

    Parameters
    ----------
    dtype : dtype-like, optional
        ``numpy.float32``, ``numpy.float64``, ``float``, ``"float32"``, etc.
        ``None`` selects :data:`DEFAULT_DTYPE`.

    Returns
    -------
    type
        The numpy scalar type.

    Raises
    ------
    TypeError
        If the dtype is not a supported floating type.
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as exc:
        raise TypeError(f"Unsupported floating dtype: {dtype!r}") from exc
    for supported in SUPPORTED_DTYPES:
        if scalar_type is supported:
            return supported
    raise TypeError(
        f"Unsupported floating dtype: {dtype!r}. "
        f"Expected one of {[t.__name__ for t in SUPPORTED_DTYPES]}"
    )


@cache
def max_digits10(dtype: FloatDType) -> int:
    """
    Decimal digits needed to print any value of the dtype and read it back
    unchanged (17 for float64, 9 for float32).
    """
    return math.ceil((np.finfo(dtype).nmant + 1) * math.log10(2)) + 1


@cache
def mantissa_bits(dtype: FloatDType) -> int:
    """Explicit mantissa width of the dtype (52 for float64, 23 for float32)."""
    return int(np.finfo(dtype).nmant)


@cache
def one_over_sqrt_2pi(dtype: FloatDType) -> np.floating[Any]:
    """Constant ``1 / sqrt(2 * pi)`` in the given dtype."""
    return dtype(1.0 / math.sqrt(2.0 * math.pi))


__all__ = [
    "DEFAULT_DTYPE",
    "SUPPORTED_DTYPES",
    "phi",
    "inv_phi",
    "exp",
    "resolve_dtype",
    "max_digits10",
    "mantissa_bits",
    "one_over_sqrt_2pi",
]
