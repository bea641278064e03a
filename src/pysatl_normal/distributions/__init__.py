"""
Distributions subpackage

Interfaces and default implementations shared by PySATL Normal distributions:

- distribution protocol (:mod:`.distribution`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import InverseTransformSamplingStrategy, SamplingStrategy
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
    # support
    "Support",
    "ContinuousSupport",
]
