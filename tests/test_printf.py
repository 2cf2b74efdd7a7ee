import io

import pytest
from hypothesis import given, strategies as st

from ftprintf.convert import format_hex, format_pointer, format_unsigned
from ftprintf.printf import format_conversion, printf, sprintf


def test_plain_text_unchanged():
    assert sprintf("hello") == "hello"


@given(st.text().filter(lambda t: "%" not in t))
def test_text_without_percent_is_identity(text):
    assert sprintf(text) == text


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"


def test_percent_escape():
    assert sprintf("%%") == "%"


def test_trailing_percent_is_literal():
    assert sprintf("abc%") == "abc%"


def test_int_min():
    assert sprintf("%d", -2147483648) == "-2147483648"


def test_char_from_string_and_code():
    assert sprintf("%c%c", "x", ord("y")) == "x" + "y"


def test_string_conversion():
    assert sprintf("[%s]", "abc") == "[" + "abc" + "]"


def test_unknown_specifier_prints_nothing_and_takes_no_argument():
    assert sprintf("a%yb") == "ab"
    assert sprintf("%y%d", 7) == sprintf("%d", 7)


def test_hex_pair():
    assert sprintf("%x and %X", 255, 255) == format_hex(255) + " and " + format_hex(255, True)


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_matches_convert(address):
    assert sprintf("%p", address) == format_pointer(address)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned_matches_convert(n):
    assert sprintf("%u", n) == format_unsigned(n)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_signed_round_trip(n):
    assert int(sprintf("%i", n)) == n
    assert sprintf("%d", n) == sprintf("%i", n)


def test_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_wrong_string_type():
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_negative_unsigned_rejected():
    with pytest.raises(OverflowError):
        sprintf("%u", -1)


def test_format_conversion_consumes_one_argument():
    args = iter(["abc", "rest"])
    assert format_conversion("s", args) == "abc"
    assert next(args) == "rest"


def test_format_conversion_percent_takes_nothing():
    args = iter(["kept"])
    assert format_conversion("%", args) == "%"
    assert next(args) == "kept"


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s-%d", "ab", 12, file=buf)
    assert buf.getvalue() == sprintf("%s-%d", "ab", 12)
    assert count == len(buf.getvalue())


def test_printf_counts_nul_character():
    buf = io.StringIO()
    assert printf("%c", 0, file=buf) == 1
    assert buf.getvalue() == "\0"


def test_printf_default_stdout(capsys):
    count = printf("%s", None)
    out = capsys.readouterr().out
    assert out == "(null)"
    assert count == len(out)