"""
Uniform Sources
===============

The distribution never owns a random engine. It consumes uniform draws from a
caller-supplied :class:`UniformSource`, one draw per variate.

- :class:`UniformSource` — protocol: a zero-argument callable returning a
  float in ``(0, 1)``.
- :class:`GeneratorUniformSource` — adapter over :class:`numpy.random.Generator`
  that yields values strictly inside ``(0, 1)``.

Notes
-----
Seeding, stream splitting and jump-ahead belong to the engine. Use
:class:`numpy.random.SeedSequence` (``spawn``) to build independent sources
for concurrent callers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_normal.special import mantissa_bits, resolve_dtype

if TYPE_CHECKING:
    from typing import Any

    from pysatl_normal.types import FloatDType


@runtime_checkable
class UniformSource[F: float | np.floating[Any]](Protocol):
    """
    Sequential generator of independent U(0, 1) draws.

    Each call must advance the source's state by exactly one step and be
    deterministic given that state. Exact ``0`` or ``1`` are tolerated by the
    consumers (they map to infinite variates).
    """

    def __call__(self) -> F: ...


class GeneratorUniformSource:
    """
    Open-interval uniform source backed by a numpy ``Generator``.

    Every call draws one integer ``k`` uniformly from ``[0, 2**m)``, where ``m``
    is the mantissa width of ``dtype``, and returns ``(k + 0.5) / 2**m``.
    The result is therefore never ``0`` or ``1`` and is exactly representable
    in ``dtype``.

    Parameters
    ----------
    generator : numpy.random.Generator, optional
        Engine to draw from. A fresh ``numpy.random.default_rng()`` is used
        when omitted.
    dtype : dtype-like, default numpy.float64
        Precision of the returned draws.
    """

    __slots__ = ("_generator", "_dtype", "_bins", "_scale")

    def __init__(
        self, generator: np.random.Generator | None = None, dtype: Any = None
    ) -> None:
        self._generator = np.random.default_rng() if generator is None else generator
        self._dtype: FloatDType = resolve_dtype(dtype)
        bits = mantissa_bits(self._dtype)
        self._bins = 1 << bits
        self._scale = 2.0**-bits

    @classmethod
    def from_seed(cls, seed: int | None = None, dtype: Any = None) -> GeneratorUniformSource:
        """Build a source over ``numpy.random.default_rng(seed)``."""
        return cls(np.random.default_rng(seed), dtype=dtype)

    @property
    def dtype(self) -> FloatDType:
        """Precision of the returned draws."""
        return self._dtype

    @property
    def generator(self) -> np.random.Generator:
        """The wrapped engine."""
        return self._generator

    def __call__(self) -> np.floating[Any]:
        k = int(self._generator.integers(0, self._bins))
        return self._dtype((k + 0.5) * self._scale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self._dtype.__name__})"


__all__ = [
    "UniformSource",
    "GeneratorUniformSource",
]
