"""
VAT number checks for the few countries whose pattern is not enough.

Most entries in vat.yaml are structure-only: the country prefix is optional
and the number has a fixed shape. Australia, Switzerland and Portugal publish
a check digit algorithm; those live here.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..checks.algorithms import weighted_mod, weighted_sum
from ..primitives import digits_only, parse_digits
from .tax_id import PT_NIF_WEIGHTS

_ABN_WEIGHTS = (10, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19)
_CH_UID_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4)


def _strip_prefix(candidate: str, prefix: str) -> str:
    return candidate[len(prefix):] if candidate.startswith(prefix) else candidate


def au_abn(candidate: str) -> bool:
    """Australian Business Number: subtract 1 from the first digit, weighted sum divisible by 89."""
    digits = parse_digits(_strip_prefix(candidate, "AU"))
    if digits[0] == 0:
        return False
    digits[0] -= 1
    acc = weighted_sum(digits, _ABN_WEIGHTS)
    return acc != 0 and acc % 89 == 0


def ch_uid(candidate: str) -> bool:
    """Swiss UID (CHE-123.456.789 MWST): mod 11 check over the nine digits."""
    return weighted_mod(
        digits_only(candidate), _CH_UID_WEIGHTS, 11, complement=True, exceptions={11: 0}
    )


def pt_nif(candidate: str) -> bool:
    return weighted_mod(
        _strip_prefix(candidate, "PT"),
        PT_NIF_WEIGHTS,
        11,
        complement=True,
        exceptions={10: 0, 11: 0},
    )


CHECKS: Dict[str, Callable[[str], bool]] = {
    "au_abn": au_abn,
    "ch_uid": ch_uid,
    "pt_nif": pt_nif,
}
