import pytest

from fmtprint.numbers import atoi, itoa, natoi, to_base

HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
DECIMAL = "0123456789"


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_accepts_only_one_sign():
    assert atoi("+-5") == 0


def test_natoi_respects_limit():
    assert natoi("12345", 3) == 123
    assert natoi("12345", 0) == 0
    assert natoi("  99", 2) == 0


def test_natoi_limit_beyond_length_reads_everything():
    assert natoi("678", 100) == atoi("678")


@pytest.mark.parametrize("number", [0, 1, -1, 10, -2147483648, 2147483647, 9876543210])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number
    assert int(itoa(number)) == number


def test_itoa_negative_has_single_leading_minus():
    text = itoa(-305)
    assert text.startswith("-")
    assert text.count("-") == 1


def test_to_base_zero():
    assert to_base(0, HEX) == "0"
    assert to_base(0, DECIMAL) == "0"


@pytest.mark.parametrize("number", [1, 15, 16, 255, 4096, 4294967295, 2**64 - 1])
def test_to_base_round_trips(number):
    assert int(to_base(number, HEX), 16) == number
    assert int(to_base(number, DECIMAL), 10) == number
    assert to_base(number, UPPER_HEX) == to_base(number, HEX).upper()


def test_to_base_binary_round_trip():
    assert int(to_base(1234, "01"), 2) == 1234


def test_to_base_wraps_negative_to_unsigned():
    assert to_base(-1, HEX) == "f" * 16


def test_to_base_rejects_short_digit_sets():
    with pytest.raises(ValueError):
        to_base(5, "0")
    with pytest.raises(ValueError):
        to_base(5, "")