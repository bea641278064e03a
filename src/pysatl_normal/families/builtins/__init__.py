"""
Built-in distributions for PySATL Normal.

This package contains the distributions that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_normal.families.builtins.continuous import (
    NormalDistribution,
    NormalParameters,
    configure_normal_family,
)

__all__ = [
    "NormalDistribution",
    "NormalParameters",
    "configure_normal_family",
]
