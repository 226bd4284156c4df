import pytest

from natid.primitives import DigitParseError, digits_only, is_numeric, parse_digits, parse_int


def test_parse_int_accepts_ascii_digits_only():
    assert parse_int("007") == 7
    for bad in ["", " 7", "7_000", "٣", "²", "-1", "+1"]:
        with pytest.raises(DigitParseError):
            parse_int(bad)


def test_parse_digits():
    assert parse_digits("0409") == [0, 4, 0, 9]
    with pytest.raises(DigitParseError):
        parse_digits("04O9")


def test_digit_parse_error_is_a_value_error():
    assert issubclass(DigitParseError, ValueError)


def test_is_numeric():
    assert is_numeric("1.5")
    assert is_numeric("-.5")
    assert not is_numeric("1.5", no_symbols=True)
    assert is_numeric("15", no_symbols=True)
    assert not is_numeric("١٥")


def test_digits_only():
    assert digits_only("CHE-116.281.710 MWST") == "116281710"
