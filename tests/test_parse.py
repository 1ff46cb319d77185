import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parse import InputError, is_int, parse_arguments, parse_int


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649"])
def test_parse_int_out_of_range(text):
    with pytest.raises(InputError):
        parse_int(text)


@pytest.mark.parametrize("text", ["abc", "+1", "1.5", " 1", "12a"])
def test_parse_int_rejects_other_characters(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_parse_int_rejects_long_text():
    with pytest.raises(InputError):
        parse_int("000000000001")


def test_parse_int_reads_leading_value():
    assert parse_int("7-3") == 7


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number
    assert is_int(str(number))


def test_is_int_false_for_bad_text():
    assert is_int("x") is False
    assert is_int("99999999999") is False


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_duplicates_by_value():
    with pytest.raises(InputError):
        parse_arguments(["5", "05"])


def test_parse_arguments_rejects_invalid():
    with pytest.raises(InputError):
        parse_arguments(["1", "two"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["nope"])