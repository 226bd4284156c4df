from datetime import date

import pytest

from natid import UnsupportedLocale, validate_tax_id
from natid.locales.tax_id import sv_se

VALID = [
    ("bg-BG", "7501010010"),
    ("bg-BG", "7521010014"),
    ("bg-BG", "7541010019"),
    ("cs-CZ", "530121999"),
    ("cs-CZ", "530121/999"),
    ("cs-CZ", "5301219990"),
    ("de-AT", "931736581"),
    ("de-AT", "93-173/6581"),
    ("de-DE", "26954371827"),
    ("de-DE", "659/299/7048/9"),
    ("dk-DK", "010111-1113"),
    ("dk-DK", "0101110117"),
    ("el-CY", "00123123T"),
    ("el-CY", "99652156X"),
    ("el-GR", "758426713"),
    ("en-CA", "521719666"),
    ("en-CA", "000000000"),
    ("fr-CA", "521719666"),
    ("en-GB", "1234567890"),
    ("en-GB", "AA123456A"),
    ("en-GB", "AA123456 "),
    ("en-IE", "1234567T"),
    ("en-IE", "1234567t"),
    ("en-IE", "1234567TW"),
    ("en-IE", "1234577W"),
    ("en-IE", "1234577IA"),
    ("en-US", "01-1234567"),
    ("en-US", "01 1234567"),
    ("en-US", "011234567"),
    ("es-AR", "20271633638"),
    ("es-AR", "23274986069"),
    ("es-AR", "20000003000"),
    ("es-ES", "54237A"),
    ("es-ES", "00054237A"),
    ("es-ES", "X1234567L"),
    ("es-ES", "Z1234567R"),
    ("et-EE", "10001010080"),
    ("et-EE", "37102250382"),
    ("lt-LT", "37102250382"),
    ("fi-FI", "131052-308T"),
    ("fi-FI", "131052A308T"),
    ("fr-BE", "00012511119"),
    ("fr-BE", "00-01-25/111-19"),
    ("nl-BE", "00012511119"),
    ("fr-FR", "3023217600053"),
    ("fr-FR", "30 23 217 600 053"),
    ("fr-LU", "1893120105732"),
    ("lb-LU", "1893120105732"),
    ("hr-HR", "94577403194"),
    ("hu-HU", "8071592153"),
    ("it-IT", "RSSMRA85T10A562S"),
    ("lv-LV", "01011012344"),
    ("lv-LV", "010110-12344"),
    ("lv-LV", "32579461005"),
    ("mt-MT", "1234567A"),
    ("mt-MT", "34567A"),
    ("mt-MT", "882345608"),
    ("nl-NL", "174559434"),
    ("pl-PL", "2234567895"),
    ("pl-PL", "02070803628"),
    ("pl-PL", "02870803622"),
    ("pl-PL", "90010100030"),
    ("pt-BR", "35161990910"),
    ("pt-BR", "05423994000172"),
    ("pt-PT", "299999998"),
    ("ro-RO", "1800101221144"),
    ("ro-RO", "9000123456789"),
    ("sk-SK", "530121615"),
    ("sk-SK", "5301219990"),
    ("sl-SI", "15012557"),
    ("sv-SE", "6408233234"),
    ("sv-SE", "640823-3234"),
    ("sv-SE", "19640823-3234"),
    ("sv-SE", "196408233234"),
    ("sv-SE", "640883-3231"),
    ("uk-UA", "3006321856"),
]

INVALID = [
    ("bg-BG", "7501010011"),
    ("bg-BG", "7533010010"),
    ("cs-CZ", "532421999"),
    ("cs-CZ", "530121000"),
    ("de-AT", "931736582"),
    ("de-DE", "26954371828"),
    ("de-DE", "11111111111"),
    ("de-DE", "01234567890"),
    ("dk-DK", "010111-1114"),
    ("dk-DK", "320111-1113"),
    ("el-CY", "00123123A"),
    ("el-GR", "758426714"),
    ("el-GR", "558426713"),
    ("en-CA", "521719667"),
    ("en-GB", "GB123456A"),
    ("en-GB", "DA123456A"),
    ("en-GB", "AO123456A"),
    ("en-IE", "1234567TA"),
    ("en-US", "07-1234567"),
    ("en-US", "28-1234567"),
    ("en-US", "01_1234567"),
    ("es-AR", "20271633639"),
    ("es-AR", "21271633638"),
    ("es-AR", "x20271633638"),
    ("es-ES", "54237B"),
    ("es-ES", "X1234567I"),
    ("et-EE", "37102250381"),
    ("fi-FI", "131052-308U"),
    ("fi-FI", "311152-308T"),
    ("fr-BE", "00012511118"),
    ("fr-FR", "3023217600054"),
    ("fr-FR", "4023217600053"),
    ("fr-LU", "1893120105733"),
    ("fr-LU", "1893130105732"),
    ("hr-HR", "94577403195"),
    ("hu-HU", "8071592154"),
    ("hu-HU", "7071592153"),
    ("it-IT", "RSSMRA85T10A562T"),
    ("it-IT", "RSSMRA85T10A562"),
    ("lv-LV", "01011012345"),
    ("mt-MT", "1234560A"),
    ("mt-MT", "912345608"),
    ("nl-NL", "174559435"),
    ("pl-PL", "2234567896"),
    ("pl-PL", "02070803629"),
    ("pt-BR", "11111111111"),
    ("pt-BR", "35161990911"),
    ("pt-BR", "05423994000173"),
    ("pt-PT", "299999999"),
    ("ro-RO", "1800101221145"),
    ("ro-RO", "1801301221144"),
    ("sk-SK", "540121615"),
    ("sk-SK", "530121000"),
    ("sl-SI", "15012558"),
    ("sl-SI", "05012557"),
    ("sv-SE", "640823-3235"),
    ("sv-SE", "640823+3234"),
    ("uk-UA", "0000000000"),
    ("uk-UA", "3006321857"),
]


@pytest.mark.parametrize("locale,candidate", VALID)
def test_valid_tax_ids(locale, candidate):
    assert validate_tax_id(candidate, locale)


@pytest.mark.parametrize("locale,candidate", INVALID)
def test_invalid_tax_ids(locale, candidate):
    assert not validate_tax_id(candidate, locale)


def test_default_locale_is_en_us():
    assert validate_tax_id("01-1234567")
    assert not validate_tax_id("07-1234567")


def test_aliases_give_identical_verdicts():
    for alias, target in [("lb-LU", "fr-LU"), ("lt-LT", "et-EE"), ("nl-BE", "fr-BE"), ("fr-CA", "en-CA")]:
        for _, candidate in VALID + INVALID:
            assert validate_tax_id(candidate, alias) == validate_tax_id(candidate, target)


def test_non_ascii_digits_never_validate():
    assert not validate_tax_id("٣٠٠٦٣٢١٨٥٦", "uk-UA")
    assert not validate_tax_id("３００６３２１８５６", "uk-UA")


def test_impossible_birth_date_fails_even_with_matching_checksum():
    # 1900-02-29, with a correct check digit
    assert not validate_tax_id("0002290001", "bg-BG")


def test_unknown_locale_is_fatal():
    with pytest.raises(UnsupportedLocale) as excinfo:
        validate_tax_id("123", "xx-XX")
    assert str(excinfo.value) == "Invalid locale 'xx-XX'"
    assert excinfo.value.kind == "tax_id"
    assert excinfo.value.locale == "xx-XX"


def test_any_is_not_a_tax_id_locale():
    with pytest.raises(UnsupportedLocale):
        validate_tax_id("01-1234567", "any")


def test_non_string_candidate_raises_type_error():
    with pytest.raises(TypeError):
        validate_tax_id(123456789, "en-CA")


def test_sv_se_centenarian_separator():
    assert sv_se("640823+3234", today=date(2070, 1, 1))
    assert not sv_se("640823+3234", today=date(2026, 1, 1))
