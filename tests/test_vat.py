import pytest

from natid import UnsupportedLocale, supported_locales, validate_vat
from natid.locales.vat import au_abn, ch_uid, pt_nif

VALID = [
    ("AT", "ATU12345678"),
    ("AT", "U12345678"),
    ("BE", "BE0123456789"),
    ("DE", "DE123456789"),
    ("ES", "ESX1234567R"),
    ("FR", "FRAB123456789"),
    ("IE", "IE1234567AW"),
    ("NL", "NL123456789B01"),
    ("PL", "PL123-456-78-90"),
    ("PL", "123-45-67-890"),
    ("SE", "SE123456789012"),
    ("NO", "123456789MVA"),
    ("BY", "УНП 123456789"),
    ("GB", "GB999 9999 00"),
    ("GB", "GB999999999 999"),
    ("GB", "GBGD001"),
    ("GB", "GBHA599"),
    ("ID", "12.345.678.9-012.345"),
    ("BR", "01.234.567/8901-23"),
    ("CL", "12345678-9"),
    ("DO", "1-23-45678-9"),
    ("VE", "J-123456789"),
    ("HN", ""),
    ("HN", "HN"),
    ("AU", "51824753556"),
    ("AU", "AU51824753556"),
    ("CH", "CHE-116.281.710 MWST"),
    ("CH", "CHE116281710"),
    ("CH", "116 281 710 TVA"),
    ("PT", "PT299999998"),
    ("PT", "299999998"),
]

INVALID = [
    ("AT", "AT12345678"),
    ("DE", "DE12345678"),
    ("NL", "NL123456789A01"),
    ("NO", "123456789"),
    ("GB", "999999999"),
    ("GB", "GB999 9999 97"),
    ("GB", "GBGD501"),
    ("HN", "HN1"),
    ("AU", "51824753557"),
    ("AU", "01824753556"),
    ("CH", "CHE-116.281.711 MWST"),
    ("CH", "CHE-116.281.710 VAT"),
    ("PT", "PT299999999"),
    ("PT", "PT29999999"),
]


@pytest.mark.parametrize("country,candidate", VALID)
def test_valid_vat_numbers(country, candidate):
    assert validate_vat(candidate, country)


@pytest.mark.parametrize("country,candidate", INVALID)
def test_invalid_vat_numbers(country, candidate):
    assert not validate_vat(candidate, country)


def test_checksum_functions_directly():
    assert au_abn("51824753556")
    assert ch_uid("CHE-116.281.710")
    assert pt_nif("PT299999998")


def test_unknown_country_code():
    with pytest.raises(UnsupportedLocale) as excinfo:
        validate_vat("XX123", "XX")
    assert str(excinfo.value) == "Invalid country code: 'XX'"


def test_country_codes_are_case_sensitive():
    with pytest.raises(UnsupportedLocale):
        validate_vat("DE123456789", "de")


def test_country_code_must_be_a_string():
    with pytest.raises(TypeError):
        validate_vat("DE123456789", None)


def test_every_eu_member_is_supported():
    eu = "AT BE BG HR CY CZ DK EE FI FR DE EL HU IE IT LV LT LU MT NL PL PT RO SK SI ES SE".split()
    assert set(eu) <= set(supported_locales("vat"))
