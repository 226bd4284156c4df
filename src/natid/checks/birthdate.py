"""
Birth dates embedded in identifiers.

Many personal numbers start with the holder's birth date, with the century
squeezed into some other field: an offset added to the month (Bulgaria,
Poland), a leading century digit (Estonia, Romania), or a separator symbol
(Finland). This module only decodes digits and centuries; whether the result
is a real calendar day is left to ``natid.dates.is_date_valid``.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Tuple

from ..dates import is_date_valid
from ..primitives import is_numeric

# (candidate, two-digit year, raw month) -> (full year, month), or None when no case applies.
CenturyRule = Callable[[str, int, int], Optional[Tuple[int, int]]]


def birthdate_ok(year: int, month: int, day: int, *, short: bool = False) -> bool:
    """Format the triple zero-padded and hand it to the date predicate."""
    if min(year, month, day) < 0:
        return False
    if short:
        return is_date_valid(f"{year % 100:02d}/{month:02d}/{day:02d}", "YY/MM/DD")
    return is_date_valid(f"{year:04d}/{month:02d}/{day:02d}", "YYYY/MM/DD")


def month_offset(*steps: Tuple[int, int]) -> CenturyRule:
    """
    Century encoded as an offset added to the month.

    ``steps`` are ``(threshold, century)`` pairs tried in order; the first
    threshold the month exceeds wins and is subtracted from the month.
    """

    def rule(candidate: str, yy: int, month: int) -> Optional[Tuple[int, int]]:
        for threshold, century in steps:
            if month > threshold:
                return century + yy, month - threshold
        return None

    return rule


def century_marker(
    position: int, centuries: Mapping[str, int], default: Optional[int] = None
) -> CenturyRule:
    """Century read from the single character at ``position`` (a digit or a symbol)."""

    def rule(candidate: str, yy: int, month: int) -> Optional[Tuple[int, int]]:
        century = centuries.get(candidate[position:position + 1], default)
        if century is None:
            return None
        return century + yy, month

    return rule


def check_birthdate(
    candidate: str,
    *,
    year: slice,
    month: slice,
    day: slice,
    century: Optional[CenturyRule] = None,
) -> bool:
    """
    Extract and validate the birth date stored in ``candidate``.

    Without a century rule the year slice is used as written (four digits,
    or two digits checked as ``YY``).
    """
    fields = (candidate[year], candidate[month], candidate[day])
    if not all(is_numeric(f, no_symbols=True) for f in fields):
        return False
    yy, mm, dd = (int(f) for f in fields)

    if century is None:
        return birthdate_ok(yy, mm, dd, short=len(candidate[year]) == 2)

    decoded = century(candidate, yy, mm)
    if decoded is None:
        return False
    full_year, mm = decoded
    return birthdate_ok(full_year, mm, dd)
