"""
Distribution Register Configuration
===================================

This module fills the global :class:`DistributionRegister` with the built-in
distributions and reads tagged distribution text:

- :func:`configure_distribution_register` — registers the built-ins once.
- :func:`parse_distribution` — parses ``[<tag> ...]`` with the class
  registered for ``<tag>``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_normal.families.builtins import configure_normal_family
from pysatl_normal.families.registry import DistributionRegister
from pysatl_normal.textio import ParseError, TextScanner

if TYPE_CHECKING:
    from typing import Any

    from pysatl_normal.distributions.distribution import Distribution

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_distribution_register() -> DistributionRegister:
    """
    Register all built-in distributions in the global register.

    Returns
    -------
    DistributionRegister
        The global register of distributions.
    """
    configure_normal_family()
    register = DistributionRegister()
    logger.debug("Configured distribution register with tags %s", register.tags())
    return register


def reset_distribution_register() -> None:
    """
    Reset the cached distribution register.
    """
    configure_distribution_register.cache_clear()
    DistributionRegister._reset()


def parse_distribution(text: str, *, dtype: Any = None) -> Distribution:
    """
    Parse tagged distribution text such as ``[normal (0.0 1.0)]``.

    Parameters
    ----------
    text : str
        Serialized distribution, optionally surrounded by whitespace.
    dtype : dtype-like, default numpy.float64
        Precision of the result.

    Returns
    -------
    Distribution
        Instance of the class registered for the tag.

    Raises
    ------
    ParseError
        If the text is malformed or its tag is not registered.
    """
    register = configure_distribution_register()
    scanner = TextScanner(text)
    try:
        scanner.skip_spaces()
        scanner.expect("[")
        tag = scanner.read_word()
        if not register.contains(tag):
            raise scanner.error(f"Unknown distribution tag {tag!r}")
        return register.get(tag).parse(text, dtype=dtype)
    except ParseError as exc:
        logger.debug("Rejected distribution text: %s", exc)
        raise
