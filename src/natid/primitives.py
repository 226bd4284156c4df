"""
Numeric-string predicates and strict digit parsing.

Python's ``int()`` and ``str.isdigit()`` accept far more than ASCII digits
(Arabic-Indic digits, superscripts, underscores, surrounding whitespace).
Identifier checksums must only ever see ``0-9``, so everything here works on
an explicit ASCII alphabet and raises ``DigitParseError`` instead of guessing.
"""

from __future__ import annotations

import re
from typing import List

DIGITS = "0123456789"

_NUMERIC = re.compile(r"[+-]?(?:[0-9]*\.)?[0-9]+", re.ASCII)
_NUMERIC_NO_SYMBOLS = re.compile(r"[0-9]+", re.ASCII)


class DigitParseError(ValueError):
    """Raised when a character outside 0-9 reaches arithmetic."""


def is_numeric(text: str, no_symbols: bool = False) -> bool:
    """True if ``text`` is a plain decimal number (optionally digits only)."""
    pattern = _NUMERIC_NO_SYMBOLS if no_symbols else _NUMERIC
    return pattern.fullmatch(text) is not None


def parse_digit(ch: str) -> int:
    if len(ch) != 1 or ch not in DIGITS:
        raise DigitParseError(f"not a digit: {ch!r}")
    return ord(ch) - 48


def parse_digits(text: str) -> List[int]:
    """Split ``text`` into a list of ints; any non-digit raises."""
    return [parse_digit(ch) for ch in text]


def parse_int(text: str) -> int:
    """Parse a non-empty run of ASCII digits as a base-10 integer."""
    if not text or _NUMERIC_NO_SYMBOLS.fullmatch(text) is None:
        raise DigitParseError(f"not a digit string: {text!r}")
    return int(text)


def digits_only(text: str) -> str:
    """Keep only the ASCII digits of ``text``."""
    return "".join(ch for ch in text if ch in DIGITS)
