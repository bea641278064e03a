"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol shared by the
sampling strategies and by every concrete distribution.

Notes
-----
- ``sample`` consumes exactly one draw from the uniform source.
- ``reset`` exists so that generic code can treat stateful and stateless
  distributions alike; stateless distributions implement it as a no-op.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_normal.types import CharacteristicName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_normal.distributions.sampling import ArraySample
    from pysatl_normal.distributions.strategies import SamplingStrategy
    from pysatl_normal.distributions.support import Support
    from pysatl_normal.sources import UniformSource
    from pysatl_normal.types import FloatDType


@runtime_checkable
class Distribution(Protocol):
    """Public univariate distribution interface used by sampling strategies."""

    @property
    def dtype(self) -> FloatDType: ...

    @property
    def support(self) -> Support: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def reset(self) -> None: ...

    def sample(self, source: UniformSource[Any]) -> Any: ...

    def pdf(self, x: Any) -> Any: ...

    def cdf(self, x: Any) -> Any: ...

    def icdf(self, p: Any) -> Any: ...

    def min(self) -> Any: ...

    def max(self) -> Any: ...

    def serialize(self) -> str: ...

    def calculate_characteristic(self, characteristic_name: str, value: Any) -> Any:
        """
        Evaluate an analytical characteristic by name.

        Raises
        ------
        ValueError
            If ``characteristic_name`` is not a :class:`CharacteristicName`.
        """
        method = getattr(self, CharacteristicName(characteristic_name).value)
        return method(value)

    def draw(self, n: int, source: UniformSource[Any] | None = None) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, source=source)
