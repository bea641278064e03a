"""
Distribution supports.

The normal distribution is supported on the whole real line; its quantiles
at probability 0 and 1 are the infinite endpoints, which lie outside the
open support.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pysatl_normal.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Support):
    """
    The open real line ``(-inf, inf)``.

    A point is contained if and only if it is finite.
    """

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie in the support.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for finite points, False for infinities and ``nan``.
        """
        result = np.isfinite(x)
        if np.ndim(result) == 0:
            return bool(result)
        return cast("BoolArray", result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ContinuousSupport)

    def __hash__(self) -> int:
        return hash(ContinuousSupport)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = [
    "Support",
    "ContinuousSupport",
]
