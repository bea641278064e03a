"""
Canonical Text Format
=====================

Helpers shared by the ``serialize``/``parse`` pairs of parameter objects and
distributions:

- :func:`format_scalar` — fixed-notation scalar with ``max_digits10 + 1``
  fractional digits of the dtype.
- :class:`TextScanner` — forward-only cursor that reads literals and scalars
  with the same rules as formatted C++ stream extraction.
- :class:`ParseError` — raised when text does not match the expected form.

Notes
-----
Literal delimiters are matched character by character, with no whitespace
skipping. Scalars skip leading whitespace. ``inf`` and ``nan`` are not scalars
in this grammar.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
from typing import TYPE_CHECKING

import numpy as np

from pysatl_normal.special import max_digits10

if TYPE_CHECKING:
    from typing import Any

    from pysatl_normal.types import FloatDType

_SCALAR = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class ParseError(ValueError):
    """
    Text does not follow the canonical format.

    Parameters
    ----------
    message : str
        What was expected.
    text : str
        The text being parsed.
    position : int
        Offset in ``text`` where scanning failed.
    """

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(f"{message} at position {position} in {text!r}")
        self.text = text
        self.position = position


def format_scalar(value: Any, dtype: FloatDType) -> str:
    """
    Print ``value`` in fixed notation with ``max_digits10(dtype) + 1`` decimals.

    Trailing zeros are kept so that every scalar of a dtype has the same
    number of fractional digits. Reading the text back gives the same value
    for magnitudes of at least ``0.01``; smaller magnitudes keep fewer
    significant digits, and values under half of ``10**-(max_digits10 + 1)``
    print as zero.
    """
    return np.format_float_positional(
        dtype(value), precision=max_digits10(dtype) + 1, unique=False, trim="k"
    )


class TextScanner:
    """
    Forward-only cursor over a string.

    Parameters
    ----------
    text : str
        Text to scan.
    position : int, default 0
        Starting offset.
    """

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position

    def error(self, message: str) -> ParseError:
        """Build a :class:`ParseError` at the current position."""
        return ParseError(message, self.text, self.position)

    def skip_spaces(self) -> None:
        """Advance past any whitespace."""
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def expect(self, literal: str) -> None:
        """
        Consume ``literal`` exactly.

        Raises
        ------
        ParseError
            If the text at the cursor does not start with ``literal``.
        """
        if not self.text.startswith(literal, self.position):
            raise self.error(f"Expected {literal!r}")
        self.position += len(literal)

    def read_scalar(self, dtype: FloatDType) -> np.floating[Any]:
        """
        Consume a decimal scalar, skipping leading whitespace.

        Raises
        ------
        ParseError
            If no scalar starts at the cursor.
        """
        self.skip_spaces()
        match = _SCALAR.match(self.text, self.position)
        if match is None:
            raise self.error("Expected a decimal scalar")
        self.position = match.end()
        return dtype(match.group())

    def read_word(self) -> str:
        """Consume a run of alphanumeric characters (possibly empty)."""
        start = self.position
        while self.position < len(self.text) and self.text[self.position].isalnum():
            self.position += 1
        return self.text[start : self.position]

    def expect_end(self) -> None:
        """
        Allow only trailing whitespace.

        Raises
        ------
        ParseError
            If anything else remains.
        """
        self.skip_spaces()
        if self.position != len(self.text):
            raise self.error("Unexpected trailing text")


__all__ = [
    "ParseError",
    "TextScanner",
    "format_scalar",
]
