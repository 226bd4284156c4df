"""
Checksum algorithms shared by the per-locale rules.

Why this file exists
--------------------
A structural pattern by itself accepts too much: any ten digits look like a
Bulgarian EGN. The functions here are the arithmetic half of each rule. They
reject the overwhelming majority of mistyped identifiers without any lookup.

Design principles
-----------------
- **Pure functions**: no state, easy to test in isolation.
- **Fast**: O(n) over the candidate string.
- **Total**: a character outside 0-9 makes the check return ``False``; nothing
  here raises on odd input, even though callers only pass structurally valid
  candidates.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Mapping, Optional, Sequence, TypeVar

from ..primitives import DigitParseError, parse_digits, parse_int

F = TypeVar("F", bound=Callable[..., bool])


def total(fn: F) -> F:
    """Turn a ``DigitParseError`` raised inside ``fn`` into ``False``."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except DigitParseError:
            return False

    return wrapper  # type: ignore[return-value]


def normalize_spaces_dashes(s: str) -> str:
    """
    Remove spaces and dashes from a string.

    Used before the standalone Luhn check so grouped card-style input
    ("4111-1111 1111-1111") reaches the algorithm as bare digits.
    """
    return s.replace(" ", "").replace("-", "")


# ---- Luhn ---------------------------------------------------------------------------------


@total
def luhn(s: str) -> bool:
    """
    Validate a digit string with the Luhn ("mod 10") checksum.

    Digits are processed right to left and every second one is doubled; a
    doubled value above 9 contributes the sum of its digits (value - 9).
    Separators are not tolerated here; strip them first.
    """
    digits = parse_digits(s)
    if not digits:
        return False

    acc = 0
    for i, d in enumerate(reversed(digits)):
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        acc += d
    return acc % 10 == 0


def luhn_number(s: str) -> bool:
    """Luhn check that first drops spaces and dashes."""
    return luhn(normalize_spaces_dashes(s))


# ---- Verhoeff -----------------------------------------------------------------------------

# Multiplication table of the dihedral group D5.
_VERHOEFF_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Position-dependent permutations; row i % 8 applies to the i-th digit from the right.
_VERHOEFF_P = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)


@total
def verhoeff(s: str) -> bool:
    """
    Validate a digit string (check digit last) with the Verhoeff algorithm.

    Unlike Luhn, Verhoeff catches every single-digit error and every swap of
    two adjacent digits.
    """
    digits = parse_digits(s)
    if not digits:
        return False

    c = 0
    for i, d in enumerate(reversed(digits)):
        c = _VERHOEFF_D[c][_VERHOEFF_P[i % 8][d]]
    return c == 0


# ---- ISO 7064 -----------------------------------------------------------------------------


@total
def iso7064_mod11_10(s: str) -> bool:
    """ISO 7064 MOD 11,10 over all digits but the last, which is the check digit."""
    digits = parse_digits(s)
    if len(digits) < 2:
        return False

    product = 10
    for d in digits[:-1]:
        step = (d + product) % 10 or 10
        product = (step * 2) % 11
    check = 0 if product == 1 else 11 - product
    return check == digits[-1]


def mod97(s: str) -> int:
    """
    Remainder of a (possibly very long) digit string modulo 97.

    The string is consumed in 7-digit chunks with the running remainder
    carried in front of the next chunk, so no huge integers are built.
    Raises ``DigitParseError`` on non-digits.
    """
    parse_int(s)
    rem = 0
    for i in range(0, len(s), 7):
        rem = int(str(rem) + s[i : i + 7]) % 97
    return rem


@total
def iso7064_mod97_10(s: str, rotate: int = 4, residue: int = 1) -> bool:
    """
    ISO 7064 MOD 97-10 over an alphanumeric string.

    Steps:
      1) Uppercase.
      2) Move the first ``rotate`` chars to the end (4 for IBAN, 0 for none).
      3) Replace letters A..Z with 10..35.
      4) Reduce mod 97; the result must equal ``residue`` (1 for IBAN).
    """
    s = s.upper()
    if len(s) <= rotate:
        return False
    rearr = s[rotate:] + s[:rotate]

    chunks = []
    for ch in rearr:
        if "0" <= ch <= "9":
            chunks.append(ch)
        elif "A" <= ch <= "Z":
            chunks.append(str(ord(ch) - 55))  # ord('A') == 65 -> 10
        else:
            return False
    return mod97("".join(chunks)) == residue


# ---- Weighted sums ------------------------------------------------------------------------


def weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    return sum(d * w for d, w in zip(digits, weights))


def descending_weights(start: int, count: int) -> list[int]:
    """``descending_weights(9, 8) == [9, 8, 7, 6, 5, 4, 3, 2]``."""
    return list(range(start, start - count, -1))


@total
def weighted_mod(
    s: str,
    weights: Sequence[int],
    modulus: int,
    *,
    complement: bool = False,
    exceptions: Optional[Mapping[int, Optional[int]]] = None,
) -> bool:
    """
    Generic weighted check: ``sum(d[i] * w[i]) mod N`` against the check digit.

    The weights cover the leading ``len(weights)`` digits; the digit right
    after them is the check digit. With ``complement`` the computed value is
    ``N - r``. ``exceptions`` remaps a computed value to the check digit it
    stands for (``{10: 0}``), or to ``None`` when no check digit is valid.
    """
    digits = parse_digits(s)
    if len(digits) <= len(weights):
        return False

    value = weighted_sum(digits, weights) % modulus
    if complement:
        value = modulus - value
    if exceptions and value in exceptions:
        expected = exceptions[value]
        if expected is None:
            return False
        value = expected
    return digits[len(weights)] == value
