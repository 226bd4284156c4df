import pytest

from natid import UnsupportedLocale, supported_locales, validate_identity_card
from natid.locales.identity_card import zh_cn

VALID = [
    ("PL", "99012229019"),
    ("PL", "02070803628"),
    ("ES", "99999999R"),
    ("ES", " x1234567l "),
    ("FI", "131052-308T"),
    ("IN", "499118665246"),
    ("IN", "4991 1866 5246"),
    ("IR", "0499370899"),
    ("IT", "CA79382RA"),
    ("NO", "12345678911"),
    ("TH", "1101700230708"),
    ("LK", "722222222V"),
    ("LK", "722222222v"),
    ("LK", "199222222222"),
    ("he-IL", "219472156"),
    ("he-IL", " 219472156"),
    ("ar-LY", "119803455876"),
    ("ar-TN", "09958092"),
    ("zh-CN", "110000199001010013"),
    ("zh-CN", "110000900101001"),
    ("zh-HK", "OV290326[A]"),
    ("zh-HK", "OV290326(A)"),
    ("zh-HK", "ov290326a"),
    ("zh-HK", "A123456(3)"),
    ("zh-TW", "A123456789"),
    ("zh-TW", " a123456789"),
    ("PK", "12345-1234567-1"),
]

INVALID = [
    ("PL", "99012229018"),
    ("PL", "9901222901"),
    ("ES", "99999999T"),
    ("FI", "131052-308U"),
    ("IN", "499118665247"),
    ("IN", "099118665246"),
    ("IR", "0499370898"),
    ("IR", "0490000009"),
    ("IT", "CA00000AA"),
    ("IT", "CA79382R"),
    ("NO", "12345678912"),
    ("NO", "00000000000"),
    ("TH", "1101700230709"),
    ("LK", "022222222V"),
    ("he-IL", "219472157"),
    ("ar-LY", "319803455876"),
    ("ar-TN", "0995809"),
    ("zh-CN", "110000199001010014"),
    ("zh-CN", "100000199001010013"),
    ("zh-CN", "110000199002300013"),
    ("zh-HK", "A123456(4)"),
    ("zh-HK", "A1234567"),
    ("zh-TW", "A123456788"),
    ("PK", "82345-1234567-1"),
    ("PK", "12345-1234567-0"),
]


@pytest.mark.parametrize("locale,candidate", VALID)
def test_valid_identity_cards(locale, candidate):
    assert validate_identity_card(candidate, locale)


@pytest.mark.parametrize("locale,candidate", INVALID)
def test_invalid_identity_cards(locale, candidate):
    assert not validate_identity_card(candidate, locale)


def test_zh_cn_rejects_future_birth_dates():
    assert not zh_cn("110000209901010013")


@pytest.mark.parametrize("locale,candidate", VALID)
def test_any_mode_accepts_whatever_some_locale_accepts(locale, candidate):
    assert validate_identity_card(candidate, "any")


def test_any_mode_exhaustion_is_false_not_an_error():
    assert not validate_identity_card("definitely not an id", "any")
    assert not validate_identity_card("", "any")


def test_any_is_the_default():
    assert validate_identity_card("219472156")


def test_unknown_locale_is_fatal():
    with pytest.raises(UnsupportedLocale) as excinfo:
        validate_identity_card("99012229019", "xx-XX")
    assert str(excinfo.value) == "Invalid locale 'xx-XX'"


def test_supported_locales_in_registration_order():
    assert supported_locales("identity_card") == [
        "PL", "ES", "FI", "IN", "IR", "IT", "NO", "TH", "LK",
        "he-IL", "ar-LY", "ar-TN", "zh-CN", "zh-HK", "zh-TW", "PK",
    ]
