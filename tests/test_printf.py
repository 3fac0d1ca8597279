import io

import pytest

from foxmaze.printf import HEX_LOWER, HEX_UPPER, format_text, itoa, printf, to_base


def test_plain_text_passes_through():
    assert format_text("Steps Taken: ") == "Steps Taken: "


def test_decimal_conversions():
    assert format_text("Steps Taken: %i\n", 42) == "Steps Taken: 42\n"
    assert format_text("%d", -17) == "-17"


def test_int_minimum_printed():
    assert format_text("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_text("%d", 2**32 + 5) == "5"


def test_unsigned_of_negative():
    assert format_text("%u", -1) == "4294967295"


def test_unsigned_zero():
    assert format_text("%u", 0) == "0"


def test_char_and_percent():
    assert format_text("%c%%%c", "a", ord("b")) == "a%b"


def test_string_and_null():
    assert format_text("[%s]", "fox") == "[fox]"
    assert format_text("%s", None) == "(null)"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(value):
    assert int(format_text("%x", value), 16) == value
    assert format_text("%X", value) == format_text("%x", value).upper()


def test_hex_lowercase_letters():
    assert format_text("%x", 255) == "ff"


def test_pointer_prefix_and_value():
    result = format_text("%p", 0xDEAD)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 0xDEAD
    assert format_text("%p", None) == "0x0"


def test_unknown_conversion_and_trailing_percent_are_dropped():
    assert format_text("a%qb") == "ab"
    assert format_text("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_text("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Collectables Left: %i\n", 3, stream=stream)
    assert stream.getvalue() == "Collectables Left: 3\n"
    assert count == len(stream.getvalue())


@pytest.mark.parametrize("value", [0, 7, 10, 12345, 2**40])
def test_to_base_round_trip(value):
    assert int(to_base(value, "0123456789"), 10) == value
    assert int(to_base(value, HEX_LOWER), 16) == value
    assert to_base(value, HEX_UPPER) == to_base(value, HEX_LOWER).upper()


def test_to_base_rejects_bad_alphabet_and_negative():
    with pytest.raises(ValueError):
        to_base(5, "")
    with pytest.raises(ValueError):
        to_base(5, "0")
    with pytest.raises(ValueError):
        to_base(-1, HEX_LOWER)


@pytest.mark.parametrize("value", [0, 9, -9, 2147483647, -2147483648])
def test_itoa_round_trip(value):
    assert int(itoa(value)) == value