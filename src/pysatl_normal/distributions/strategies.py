"""
Sampling Strategies
===================

- :class:`SamplingStrategy` — draws a batch of variates from a distribution.
- :class:`InverseTransformSamplingStrategy` — draws ``(n, 1)`` variates by
  calling the distribution's single-draw ``sample`` ``n`` times.

Notes
-----
Strategies are stateless. The uniform source is supplied per call, so a batch
of ``n`` variates advances the source by exactly ``n`` steps, and the result is
identical to ``n`` consecutive ``sample`` calls on the same source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_normal.sources import GeneratorUniformSource

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from pysatl_normal.sources import UniformSource

    from .distribution import Distribution


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self, n: int, distr: Distribution, source: UniformSource[Any] | None = None
    ) -> Sample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler using inverse transform sampling.

    The strategy delegates every variate to ``distr.sample(source)``, which
    maps one uniform draw through the inverse CDF.
    """

    def sample(
        self, n: int, distr: Distribution, source: UniformSource[Any] | None = None
    ) -> ArraySample:
        """
        Draw ``n`` variates.

        Parameters
        ----------
        n : int
            Number of variates.
        distr : Distribution
            Distribution to sample from.
        source : UniformSource, optional
            Uniform draws. When omitted, a :class:`GeneratorUniformSource` over
            an unseeded ``numpy.random.default_rng()`` is used, in the
            distribution's dtype.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)`` in the distribution's dtype.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        if source is None:
            source = GeneratorUniformSource(dtype=distr.dtype)
        vals = np.empty((n, 1), dtype=distr.dtype)
        for i in range(n):
            vals[i, 0] = distr.sample(source)
        return ArraySample(vals)


__all__ = [
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
