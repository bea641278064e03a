"""
Global register of distributions by text tag using singleton pattern.

Every serialized distribution opens with ``[<tag> ``. This module maintains the
mapping from tags to distribution classes, so that text written by any
registered distribution can be read back without knowing its type in advance.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import Any, ClassVar

    from pysatl_normal.distributions.distribution import Distribution
    from pysatl_normal.types import TextTag

logger = logging.getLogger(__name__)


class TaggedDistributionClass(Protocol):
    """A distribution class that can be parsed from its tagged text form."""

    __text_tag__: ClassVar[TextTag]

    def parse(self, text: str, *, dtype: Any = None) -> Distribution: ...


class DistributionRegister:
    """
    Singleton register of distribution classes keyed by text tag.
    """

    _instance: ClassVar[DistributionRegister | None] = None
    _registered: dict[TextTag, TaggedDistributionClass]

    def __new__(cls) -> DistributionRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered = {}
        return cls._instance

    @classmethod
    def contains(cls, tag: TextTag) -> bool:
        return tag in cls()._registered

    @classmethod
    def tags(cls) -> list[TextTag]:
        return sorted(cls()._registered)

    @classmethod
    def get(cls, tag: TextTag) -> TaggedDistributionClass:
        """
        Retrieve a distribution class by tag.

        Raises
        ------
        ValueError
            If no class is registered under ``tag``.
        """
        self = cls()
        if tag not in self._registered:
            raise ValueError(f"No distribution {tag} found in register")
        return self._registered[tag]

    @classmethod
    def register(cls, distribution_class: TaggedDistributionClass) -> None:
        """
        Register a distribution class under its ``__text_tag__``.

        Registering the same class twice is ignored with a warning.

        Raises
        ------
        ValueError
            If a different class is already registered under the same tag.
        """
        self = cls()
        tag = distribution_class.__text_tag__
        registered = self._registered.get(tag)
        if registered is distribution_class:
            warnings.warn(
                f"Distribution {tag} have been already registered. Ignoring",
                UserWarning,
                stacklevel=2,
            )
            return
        if registered is not None:
            raise ValueError(f"Distribution {tag} already found in register")
        self._registered[tag] = distribution_class
        logger.debug("Registered distribution %r for tag %r", distribution_class, tag)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
