from datetime import date

from natid.dates import is_date_valid, is_valid_format


def test_calendar_rules():
    assert is_date_valid("2020/02/29")
    assert not is_date_valid("2019/02/29")
    assert not is_date_valid("2021/04/31")
    assert not is_date_valid("2021/13/01")
    assert not is_date_valid("0000/01/01")


def test_fields_must_match_token_length():
    assert not is_date_valid("2020/2/29")
    assert not is_date_valid("20/02/29", "YYYY/MM/DD")


def test_other_orderings_and_delimiters():
    assert is_date_valid("29-02-2020", "DD-MM-YYYY")
    assert is_date_valid("02/29/2020", "MM/DD/YYYY")
    assert not is_date_valid("29.02.2020", "DD-MM-YYYY")


def test_two_digit_year_pivot():
    # 1900 is not a leap year, 2000 is
    assert is_date_valid("00/02/29", "YY/MM/DD", today=date(1999, 6, 1))
    assert not is_date_valid("00/02/29", "YY/MM/DD", today=date(2000, 6, 1))


def test_strict_mode():
    assert is_date_valid("2020-02-29", "YYYY/MM/DD")
    assert not is_date_valid("2020-02-29", "YYYY/MM/DD", strict=True)
    assert is_date_valid("2020/02/29", "YYYY/MM/DD", strict=True)


def test_format_validation():
    assert is_valid_format("YYYY/MM/DD")
    assert is_valid_format("dd.mm.yy")
    assert not is_valid_format("MM/DD")
    assert not is_date_valid("2020/02/29", "MM/DD")


def test_non_numeric_fields():
    assert not is_date_valid("2020/0a/29")
    assert not is_date_valid("٢٠٢٠/02/29")


def test_fields_must_be_ascii_digits():
    assert not is_date_valid("2020/+2/01")
    assert not is_date_valid("２０２０/02/01")
    assert not is_date_valid("2020/0 /01")
