"""
PySATL Normal
=============

Normal distribution sampled by inverse transform from caller-supplied uniform
sources, generic over the floating precision, with exact-equality parameter
objects and a canonical text format.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .sources import GeneratorUniformSource, UniformSource
from .special import DEFAULT_DTYPE
from .textio import ParseError
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-normal")
__all__ = [
    "__version__",
    "DEFAULT_DTYPE",
    "GeneratorUniformSource",
    "UniformSource",
    "ParseError",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
