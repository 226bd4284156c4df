"""
String date predicate used by the birthdate checks.

``is_date_valid("1990/02/29", "YYYY/MM/DD")`` answers one question: do the
fields of the string line up with the format tokens, and do they name a real
calendar day? Two-digit years pivot on the current year: values below the
current two-digit year are 20xx, everything else 19xx.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, Optional, Sequence

from .primitives import is_numeric

DEFAULT_FORMAT = "YYYY/MM/DD"
DEFAULT_DELIMITERS = ("/", "-")

_VALID_FORMAT = re.compile(
    r"(?:y{4}|y{2})[./-]m{1,2}[./-]d{1,2}"
    r"|m{1,2}[./-]d{1,2}[./-](?:y{4}|y{2})"
    r"|d{1,2}[./-]m{1,2}[./-](?:y{4}|y{2})",
    re.I,
)


def is_valid_format(fmt: str) -> bool:
    return _VALID_FORMAT.fullmatch(fmt) is not None


def _first_present(delimiters: Sequence[str], text: str) -> Optional[str]:
    return next((d for d in delimiters if d in text), None)


def is_date_valid(
    candidate: str,
    fmt: str = DEFAULT_FORMAT,
    *,
    delimiters: Sequence[str] = DEFAULT_DELIMITERS,
    strict: bool = False,
    today: Optional[date] = None,
) -> bool:
    """
    Check that ``candidate`` is a real date written in ``fmt``.

    Each field must have exactly the length of its format token (``MM`` needs
    ``05``, not ``5``). In strict mode the whole string must also match the
    format length and use the format's own delimiter.
    """
    if not isinstance(candidate, str) or not is_valid_format(fmt):
        return False
    if strict and len(candidate) != len(fmt):
        return False

    format_delimiter = _first_present(delimiters, fmt)
    if format_delimiter is None:
        return False
    date_delimiter = format_delimiter if strict else _first_present(delimiters, candidate)
    if date_delimiter is None:
        return False

    words = candidate.split(date_delimiter)
    tokens = fmt.lower().split(format_delimiter)
    if len(words) != len(tokens):
        return False

    fields: Dict[str, str] = {}
    for word, token in zip(words, tokens):
        if not word or len(word) != len(token):
            return False
        fields[token[0]] = word

    if not all(is_numeric(word, no_symbols=True) for word in fields.values()):
        return False
    year, month, day = int(fields["y"]), int(fields["m"]), int(fields["d"])

    if len(fields["y"]) == 2:
        pivot = (today or date.today()).year % 100
        year += 2000 if year < pivot else 1900

    try:
        date(year, month, day)
    except ValueError:
        return False
    return True
