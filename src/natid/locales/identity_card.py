"""
National identity card checks (``custom:`` entries of identity_card.yaml).

Poland, Thailand and Israel are plain weighted/Luhn rules configured in the
YAML pack; Sri Lanka, Libya, Tunisia and Pakistan are structure only.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Dict

from ..checks.algorithms import descending_weights, verhoeff, weighted_mod, weighted_sum
from ..checks.birthdate import birthdate_ok
from ..primitives import DIGITS, parse_digit, parse_digits, parse_int
from .tax_id import ES_CONTROL_LETTERS, FI_CHECK_CHARS


def es_dni(candidate: str) -> bool:
    number = candidate[:-1].translate(str.maketrans("XYZ", "012"))
    return candidate[-1] == ES_CONTROL_LETTERS[parse_int(number) % 23]


def fi_hetu(candidate: str) -> bool:
    number = parse_int(candidate[:6]) * 1000 + parse_int(candidate[7:10])
    return FI_CHECK_CHARS[number % 31] == candidate[10]


def in_aadhaar(candidate: str) -> bool:
    return verhoeff("".join(candidate.split()))


def ir_melli(candidate: str) -> bool:
    # digits 4-9 are the serial; an all-zero serial is never issued
    if parse_int(candidate[3:9]) == 0:
        return False
    return weighted_mod(
        candidate, descending_weights(10, 9), 11, complement=True, exceptions={11: 0, 10: 1}
    )


def it_cie(candidate: str) -> bool:
    # specimen number printed on sample cards
    return candidate != "CA00000AA"


_NO_K1_WEIGHTS = (3, 7, 6, 1, 8, 9, 4, 5, 2)
_NO_K2_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def no_fodselsnummer(candidate: str) -> bool:
    if candidate == "00000000000":
        return False
    f = parse_digits(candidate)
    k1 = (11 - weighted_sum(f, _NO_K1_WEIGHTS) % 11) % 11
    k2 = (11 - weighted_sum(f[:9] + [k1], _NO_K2_WEIGHTS) % 11) % 11
    return k1 == f[9] and k2 == f[10]


# ---- zh-CN: resident identity card --------------------------------------------------------

ZH_CN_REGIONS = frozenset({
    "11",  # 北京
    "12",  # 天津
    "13",  # 河北
    "14",  # 山西
    "15",  # 内蒙古
    "21",  # 辽宁
    "22",  # 吉林
    "23",  # 黑龙江
    "31",  # 上海
    "32",  # 江苏
    "33",  # 浙江
    "34",  # 安徽
    "35",  # 福建
    "36",  # 江西
    "37",  # 山东
    "41",  # 河南
    "42",  # 湖北
    "43",  # 湖南
    "44",  # 广东
    "45",  # 广西
    "46",  # 海南
    "50",  # 重庆
    "51",  # 四川
    "52",  # 贵州
    "53",  # 云南
    "54",  # 西藏
    "61",  # 陕西
    "62",  # 甘肃
    "63",  # 青海
    "64",  # 宁夏
    "65",  # 新疆
    "71",  # 台湾
    "81",  # 香港
    "82",  # 澳门
    "91",  # 国外
})

_ZH_CN_WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
_ZH_CN_PARITY = "10X98765432"


def _zh_cn_birthday_ok(year: int, month: int, day: int) -> bool:
    if not birthdate_ok(year, month, day):
        return False
    return date(year, month, day) <= date.today()


def zh_cn(candidate: str) -> bool:
    if candidate[:2] not in ZH_CN_REGIONS:
        return False

    if len(candidate) == 15:
        # first-generation cards: two-digit year, always 19xx, no parity digit
        return _zh_cn_birthday_ok(
            1900 + parse_int(candidate[6:8]), parse_int(candidate[8:10]), parse_int(candidate[10:12])
        )

    if not _zh_cn_birthday_ok(
        parse_int(candidate[6:10]), parse_int(candidate[10:12]), parse_int(candidate[12:14])
    ):
        return False
    parity = weighted_sum(parse_digits(candidate[:17]), _ZH_CN_WEIGHTS) % 11
    return _ZH_CN_PARITY[parity] == candidate[17].upper()


# ---- zh-HK: HKID --------------------------------------------------------------------------

_HK_BRACKETS = re.compile(r"[\[\]()]")


def zh_hk(candidate: str) -> bool:
    hkid = _HK_BRACKETS.sub("", candidate)
    if len(hkid) == 8:
        # single-letter prefix: pad with the value of a leading space
        hkid = "3" + hkid

    acc = 0
    for i, ch in enumerate(hkid[:8]):
        value = parse_digit(ch) if ch in DIGITS else (ord(ch) - 55) % 11
        acc += value * (9 - i)
    acc %= 11

    if acc == 0:
        expected = "0"
    elif acc == 1:
        expected = "A"
    else:
        expected = str(11 - acc)
    return expected == hkid[-1]


# ---- zh-TW: national identification card --------------------------------------------------

_TW_LETTER_CODES = {
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15, "G": 16, "H": 17,
    "I": 34, "J": 18, "K": 19, "L": 20, "M": 21, "N": 22, "O": 35, "P": 23,
    "Q": 24, "R": 25, "S": 26, "T": 27, "U": 28, "V": 29, "W": 32, "X": 30,
    "Y": 31, "Z": 33,
}


def zh_tw(candidate: str) -> bool:
    code = _TW_LETTER_CODES[candidate[0]]
    acc = (code % 10) * 9 + code // 10

    digits = parse_digits(candidate[1:])
    for i, d in enumerate(digits[:8], start=1):
        acc += d * (9 - i)
    return (10 - acc % 10 - digits[8]) % 10 == 0


CHECKS: Dict[str, Callable[[str], bool]] = {
    "es_dni": es_dni,
    "fi_hetu": fi_hetu,
    "in_aadhaar": in_aadhaar,
    "ir_melli": ir_melli,
    "it_cie": it_cie,
    "no_fodselsnummer": no_fodselsnummer,
    "zh_cn": zh_cn,
    "zh_hk": zh_hk,
    "zh_tw": zh_tw,
}
