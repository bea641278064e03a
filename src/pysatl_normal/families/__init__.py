"""
Families package: parametrizations, the built-in distributions and the
register that maps serialized text tags to distribution classes.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import NormalDistribution, NormalParameters
from .configuration import (
    configure_distribution_register,
    parse_distribution,
    reset_distribution_register,
)
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import DistributionRegister

__all__ = [
    "DistributionRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "NormalDistribution",
    "NormalParameters",
    "constraint",
    "parametrization",
    "configure_distribution_register",
    "reset_distribution_register",
    "parse_distribution",
]
