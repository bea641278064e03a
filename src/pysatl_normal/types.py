"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Normal.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

FloatDType = type[np.float32] | type[np.float64]
"""Type alias for the supported floating precisions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type ParametrizationName = str
"""Type alias for parametrization names."""

type TextTag = str
"""Type alias for the tag that opens a serialized distribution (e.g. 'normal')."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the analytical characteristics a distribution exposes.

    Each value is also the name of the distribution method that evaluates it.
    """

    PDF = "pdf"
    CDF = "cdf"
    ICDF = "icdf"


class DistributionName(StrEnum):
    NORMAL = "normal"


__all__ = [
    "FloatDType",
    "ParametrizationName",
    "TextTag",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "DistributionName",
]
