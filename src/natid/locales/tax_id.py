"""
Hand-written tax identification number checks (``custom:`` entries of tax_id.yaml).

EU and UK algorithms follow the public DG TAXUD "TIN algorithms" document;
the rest come from the issuing administrations. Each function receives a
candidate that already matched its locale's pattern (after sanitization) and
returns a bool. ``DigitParseError`` raised from a helper is turned into
``False`` by the ``Custom`` variant wrapping these functions.

Locales whose check is a plain algorithm (Luhn, ISO 7064, a weighted sum) are
configured directly in the YAML pack and have no function here.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Dict, Optional

from ..checks.algorithms import (
    descending_weights,
    iso7064_mod11_10,
    luhn,
    mod97,
    verhoeff,
    weighted_mod,
    weighted_sum,
)
from ..checks.birthdate import birthdate_ok, century_marker, check_birthdate, month_offset
from ..primitives import DIGITS, parse_digit, parse_digits, parse_int

_NON_WORD = re.compile(r"\W", re.ASCII)


def _drop_separator(tin: str) -> str:
    """Remove the first non-word character (the optional ``/`` or ``-``)."""
    return _NON_WORD.sub("", tin, count=1)


# ---- bg-BG: EGN ---------------------------------------------------------------------------

_BG_WEIGHTS = (2, 4, 8, 5, 10, 9, 7, 3, 6)


def bg_bg(tin: str) -> bool:
    if not check_birthdate(
        tin,
        year=slice(0, 2),
        month=slice(2, 4),
        day=slice(4, 6),
        century=month_offset((40, 2000), (20, 1800), (0, 1900)),
    ):
        return False
    return weighted_mod(tin, _BG_WEIGHTS, 11, exceptions={10: 0})


# ---- cs-CZ: rodné číslo -------------------------------------------------------------------


def cs_cz(tin: str) -> bool:
    tin = _drop_separator(tin)
    yy = parse_int(tin[:2])
    if len(tin) == 10:
        full_year = 2000 + yy if yy < 54 else 1900 + yy
    else:
        # nine-digit numbers predate 1954 and never used serial 000
        if tin[6:] == "000" or yy >= 54:
            return False
        full_year = 1900 + yy

    month = parse_int(tin[2:4])
    if month > 50:
        month -= 50
    if month > 20:
        # month + 20 was only introduced in 2004
        if full_year < 2004:
            return False
        month -= 20
    if not birthdate_ok(full_year, month, parse_int(tin[4:6])):
        return False

    if len(tin) == 10 and parse_int(tin) % 11 != 0:
        # up to 1985 a remainder of 10 was written as check digit 0
        if full_year < 1986 and parse_int(tin[:9]) % 11 == 10:
            return tin[9] == "0"
        return False
    return True


# ---- de-DE: Steuer-IdNr. ------------------------------------------------------------------


def de_de(tin: str) -> bool:
    body = parse_digits(tin[:-1])
    positions = [[j for j, other in enumerate(body) if other == d] for d in body]

    # exactly one digit appears twice or three times
    repeated = [p for p in positions if len(p) > 1]
    if len(repeated) not in (2, 3):
        return False

    # a tripled digit may not fill three neighbouring positions
    tripled = next((p for p in positions if len(p) == 3), None)
    if tripled is not None and tripled[2] - tripled[0] == 2:
        return False
    return iso7064_mod11_10(tin)


# ---- dk-DK: CPR-nummer --------------------------------------------------------------------

_DK_WEIGHTS = (4, 3, 2, 7, 6, 5, 4, 3, 2)


def _dk_year(yy: int, century_digit: str) -> Optional[int]:
    if century_digit in "0123":
        return 1900 + yy
    if century_digit in "49":
        return 2000 + yy if yy < 37 else 1900 + yy
    if yy < 37:
        return 2000 + yy
    if yy > 58:
        return 1800 + yy
    return None


def dk_dk(tin: str) -> bool:
    tin = _drop_separator(tin)
    year = _dk_year(parse_int(tin[4:6]), tin[6])
    if year is None or not birthdate_ok(year, parse_int(tin[2:4]), parse_int(tin[0:2])):
        return False
    return weighted_mod(tin, _DK_WEIGHTS, 11, complement=True, exceptions={11: 0, 10: None})


# ---- el-CY: AFM ---------------------------------------------------------------------------


def el_cy(tin: str) -> bool:
    digits = parse_digits(tin[:8])
    acc = sum(digits[1::2])
    for d in digits[0::2]:
        if d < 2:
            acc += 1 - d
        else:
            acc += 2 * (d - 2) + 5
            if d > 4:
                acc += 2
    return chr(acc % 26 + 65) == tin[8]


# ---- en-IE: PPS No ------------------------------------------------------------------------


def en_ie(tin: str) -> bool:
    tin = tin.upper()
    acc = weighted_sum(parse_digits(tin[:7]), descending_weights(8, 7))
    if len(tin) == 9 and tin[8] != "W":
        acc += (ord(tin[8]) - 64) * 9

    acc %= 23
    return tin[7] == ("W" if acc == 0 else chr(64 + acc))


# ---- en-US: EIN ---------------------------------------------------------------------------

# Valid IRS campus prefixes.
US_CAMPUS_PREFIXES: Dict[str, tuple] = {
    "andover": ("10", "12"),
    "atlanta": ("60", "67"),
    "austin": ("50", "53"),
    "brookhaven": (
        "01", "02", "03", "04", "05", "06", "11", "13", "14", "16", "21", "22",
        "23", "25", "34", "51", "52", "54", "55", "56", "57", "58", "59", "65",
    ),
    "cincinnati": ("30", "32", "35", "36", "37", "38", "61"),
    "fresno": ("15", "24"),
    "internet": ("20", "26", "27", "45", "46", "47"),
    "kansas": ("40", "44"),
    "memphis": ("94", "95"),
    "ogden": ("80", "90"),
    "philadelphia": (
        "33", "39", "41", "42", "43", "46", "48", "62", "63", "64", "66", "68",
        "71", "72", "73", "74", "75", "76", "77", "81", "82", "83", "84", "85",
        "86", "87", "88", "91", "92", "93", "98", "99",
    ),
    "sba": ("31",),
}

_US_PREFIXES = frozenset(p for prefixes in US_CAMPUS_PREFIXES.values() for p in prefixes)


def en_us(tin: str) -> bool:
    return tin[:2] in _US_PREFIXES


# ---- es-ES: DNI / NIE ---------------------------------------------------------------------

ES_CONTROL_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"


def es_es(tin: str) -> bool:
    chars = tin.upper()
    if chars[0] not in DIGITS and len(chars) > 1:
        # NIE: Y -> 1, Z -> 2, any other leading letter -> 0
        chars = {"Y": "1", "Z": "2"}.get(chars[0], "0") + chars[1:]
    else:
        chars = chars.zfill(9)
    return chars[8] == ES_CONTROL_LETTERS[parse_int(chars[:8]) % 23]


# ---- et-EE / lt-LT: isikukood -------------------------------------------------------------

_EE_CENTURIES = {"1": 1800, "2": 1800, "3": 1900, "4": 1900}


def et_ee(tin: str) -> bool:
    if not check_birthdate(
        tin,
        year=slice(1, 3),
        month=slice(3, 5),
        day=slice(5, 7),
        century=century_marker(0, _EE_CENTURIES, default=2000),
    ):
        return False

    digits = parse_digits(tin)
    first = weighted_sum(digits, (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)) % 11
    if first != 10:
        return digits[10] == first
    second = weighted_sum(digits, (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)) % 11
    return digits[10] == (0 if second == 10 else second)


# ---- fi-FI: henkilötunnus -----------------------------------------------------------------

FI_CHECK_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"


def fi_fi(tin: str) -> bool:
    tin = tin.upper()
    if not check_birthdate(
        tin,
        year=slice(4, 6),
        month=slice(2, 4),
        day=slice(0, 2),
        century=century_marker(6, {"+": 1800, "-": 1900}, default=2000),
    ):
        return False
    return FI_CHECK_CHARS[parse_int(tin[:6] + tin[7:10]) % 31] == tin[10]


# ---- fr-BE / nl-BE: numéro national -------------------------------------------------------


def fr_be(tin: str) -> bool:
    # 00 month and day are issued when the birth date is unknown
    if tin[2:6] != "0000" and not check_birthdate(
        tin, year=slice(0, 2), month=slice(2, 4), day=slice(4, 6)
    ):
        return False

    check = parse_int(tin[9:11])
    # people born from 2000 on are checked with a leading 2
    return check in (97 - mod97(tin[:9]), 97 - mod97("2" + tin[:9]))


# ---- fr-FR: numéro SPI --------------------------------------------------------------------


def fr_fr(tin: str) -> bool:
    tin = "".join(tin.split())
    return parse_int(tin[:10]) % 511 == parse_int(tin[10:13])


# ---- fr-LU / lb-LU: matricule -------------------------------------------------------------


def fr_lu(tin: str) -> bool:
    if not check_birthdate(tin, year=slice(0, 4), month=slice(4, 6), day=slice(6, 8)):
        return False
    # digit 12 is a Luhn check over the first eleven, digit 13 a Verhoeff check
    if not luhn(tin[:12]):
        return False
    return verhoeff(tin[:11] + tin[12])


# ---- it-IT: codice fiscale ----------------------------------------------------------------

_IT_OMOCODE = dict(zip("LMNPQRSTUV", DIGITS))
_IT_MONTHS = dict(zip("ABCDEHLMPRST", range(1, 13)))
_IT_NUMERIC_POSITIONS = (6, 7, 9, 10, 12, 13, 14)
_IT_ODD_VALUES = {
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15, "H": 17, "I": 19,
    "J": 21, "K": 2, "L": 4, "M": 18, "N": 20, "O": 11, "P": 3, "Q": 6, "R": 8,
    "S": 12, "T": 14, "U": 16, "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15, "7": 17, "8": 19, "9": 21,
}


def _it_name_ok(name: str) -> bool:
    """
    Consonants come first, then vowels, then X padding.

    Once a vowel appears only vowels (or X) may follow; once an X follows a
    vowel only X may follow.
    """
    vowel = False
    padding = False
    for i, ch in enumerate(name[:3]):
        if not vowel and ch in "AEIOU":
            vowel = True
        elif not padding and vowel and ch == "X":
            padding = True
        elif i > 0:
            if vowel and not padding and ch not in "AEIOU":
                return False
            if padding and ch != "X":
                return False
    return True


def it_it(tin: str) -> bool:
    chars = list(tin.upper())
    if not (_it_name_ok("".join(chars[0:3])) and _it_name_ok("".join(chars[3:6]))):
        return False

    for i in _IT_NUMERIC_POSITIONS:
        chars[i] = _IT_OMOCODE.get(chars[i], chars[i])

    day = parse_int(chars[9] + chars[10])
    if day > 40:
        day -= 40
    if not birthdate_ok(parse_int(chars[6] + chars[7]), _IT_MONTHS[chars[8]], day, short=True):
        return False

    acc = 0
    for ch in chars[1:15:2]:
        acc += parse_digit(ch) if ch in DIGITS else ord(ch) - 65
    for ch in chars[0:15:2]:
        acc += _IT_ODD_VALUES[ch]
    return chr(65 + acc % 26) == chars[15]


# ---- lv-LV: personas kods -----------------------------------------------------------------

_LV_WEIGHTS = (1, 6, 3, 7, 9, 10, 5, 8, 4, 2)


def lv_lv(tin: str) -> bool:
    tin = _drop_separator(tin)
    # codes issued since 2017-07-01 start with 32 and carry neither date nor check digit
    if tin[:2] == "32":
        return True

    # month 00 marks an unknown birth date
    if tin[2:4] != "00" and not check_birthdate(
        tin,
        year=slice(4, 6),
        month=slice(2, 4),
        day=slice(0, 2),
        century=century_marker(6, {"0": 1800, "1": 1900}, default=2000),
    ):
        return False

    digits = parse_digits(tin)
    return digits[10] == (1101 - weighted_sum(digits, _LV_WEIGHTS)) % 11


# ---- mt-MT: identity card number ----------------------------------------------------------


def mt_mt(tin: str) -> bool:
    if len(tin) == 9:
        # unique taxpayer reference; no published check
        return True

    chars = tin.upper().zfill(8)
    if chars[7] in "AP":
        return parse_digit(chars[6]) != 0

    first = parse_int(chars[:5])
    return first <= 32000 and first != parse_int(chars[5:7])


# ---- pl-PL: NIP / PESEL -------------------------------------------------------------------

_PL_NIP_WEIGHTS = (6, 5, 7, 2, 3, 4, 5, 6, 7)
_PL_PESEL_WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)


def pl_pl(tin: str) -> bool:
    if len(tin) == 10:
        return weighted_mod(tin, _PL_NIP_WEIGHTS, 11, exceptions={10: None})

    if not check_birthdate(
        tin,
        year=slice(0, 2),
        month=slice(2, 4),
        day=slice(4, 6),
        century=month_offset((80, 1800), (60, 2200), (40, 2100), (20, 2000), (0, 1900)),
    ):
        return False
    return weighted_mod(tin, _PL_PESEL_WEIGHTS, 10, complement=True, exceptions={10: 0})


# ---- pt-BR: CPF / CNPJ --------------------------------------------------------------------


def _cnpj_weights(count: int) -> list:
    weights = []
    pos = count - 7
    for _ in range(count):
        weights.append(pos)
        pos -= 1
        if pos < 2:
            pos = 9
    return weights


def pt_br(tin: str) -> bool:
    # repeated-digit numbers pass the arithmetic but are never issued
    if len(set(tin)) == 1:
        return False
    digits = parse_digits(tin)

    if len(tin) == 11:
        for n in (9, 10):
            r = weighted_sum(digits, descending_weights(n + 1, n)) * 10 % 11
            if r % 10 != digits[n]:
                return False
        return True

    for n in (12, 13):
        r = weighted_sum(digits, _cnpj_weights(n)) % 11
        if (0 if r < 2 else 11 - r) != digits[n]:
            return False
    return True


# ---- pt-PT: NIF ---------------------------------------------------------------------------

# pt-PT itself is a plain weighted rule in tax_id.yaml; the VAT check reuses the weights.
PT_NIF_WEIGHTS = tuple(descending_weights(9, 8))


# ---- ro-RO: CNP ---------------------------------------------------------------------------

_RO_CENTURIES = {"1": 1900, "2": 1900, "3": 1800, "4": 1800, "5": 2000, "6": 2000}
_RO_WEIGHTS = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)


def ro_ro(tin: str) -> bool:
    if tin[:4] == "9000":
        # CIF-style numbers; no check known
        return True

    yy, month, day = parse_int(tin[1:3]), parse_int(tin[3:5]), parse_int(tin[5:7])
    century = _RO_CENTURIES.get(tin[0])
    if century is None:
        # residents (7, 8) and foreigners (9) carry no century
        dated = birthdate_ok(yy, month, day, short=True)
    else:
        dated = birthdate_ok(century + yy, month, day)
    if not dated:
        return False
    return weighted_mod(tin, _RO_WEIGHTS, 11, exceptions={10: 1})


# ---- sk-SK: rodné číslo -------------------------------------------------------------------


def sk_sk(tin: str) -> bool:
    # post-1954 numbers may be pseudo-random BIČ values; only the old form is checkable
    if len(tin) != 9:
        return True
    if tin[6:] == "000":
        return False

    yy = parse_int(tin[:2])
    if yy > 53:
        return False
    month = parse_int(tin[2:4])
    if month > 50:
        month -= 50
    return birthdate_ok(1900 + yy, month, parse_int(tin[4:6]))


# ---- sv-SE: personnummer / samordningsnummer ----------------------------------------------


def sv_se(tin: str, today: Optional[date] = None) -> bool:
    long_form = len(tin) > 11
    short = tin[2:] if long_form else tin

    month = parse_int(short[2:4])
    day = parse_int(short[4:6])
    full_year: Optional[int] = None
    if long_form:
        full_year = parse_int(tin[:4])
    elif len(tin) == 11 and day < 60:
        # the separator encodes the century: '+' once the holder turns 100
        current = (today or date.today()).year
        yy = parse_int(tin[:2])
        if tin[6] == "-":
            full_year = current // 100 * 100 + yy
            if full_year > current:
                full_year -= 100
        else:
            full_year = (current // 100 - 1) * 100 + yy
            if current - full_year < 100:
                return False

    # coordination numbers add 60 to the day
    if day > 60:
        day -= 60
    if full_year is None:
        dated = birthdate_ok(parse_int(tin[:2]), month, day, short=True)
    else:
        dated = birthdate_ok(full_year, month, day)
    if not dated:
        return False

    return luhn(_drop_separator(short))


# ---- uk-UA: RNOKPP ------------------------------------------------------------------------

_UA_WEIGHTS = (-1, 5, 7, 9, 4, 6, 10, 5, 7)


def uk_ua(tin: str) -> bool:
    # the first five digits count days since 1899-12-31; zero encodes no birth date
    if parse_int(tin[:5]) == 0:
        return False

    digits = parse_digits(tin)
    acc = weighted_sum(digits, _UA_WEIGHTS)
    if acc < 0:
        return False
    acc %= 11
    return digits[9] == (0 if acc == 10 else acc)


CHECKS: Dict[str, Callable[[str], bool]] = {
    "bg_bg": bg_bg,
    "cs_cz": cs_cz,
    "de_de": de_de,
    "dk_dk": dk_dk,
    "el_cy": el_cy,
    "en_ie": en_ie,
    "en_us": en_us,
    "es_es": es_es,
    "et_ee": et_ee,
    "fi_fi": fi_fi,
    "fr_be": fr_be,
    "fr_fr": fr_fr,
    "fr_lu": fr_lu,
    "it_it": it_it,
    "lv_lv": lv_lv,
    "mt_mt": mt_mt,
    "pl_pl": pl_pl,
    "pt_br": pt_br,
    "ro_ro": ro_ro,
    "sk_sk": sk_sk,
    "sv_se": sv_se,
    "uk_ua": uk_ua,
}
