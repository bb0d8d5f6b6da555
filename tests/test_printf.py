import io

import pytest

from pixelkit.printf import format_printf, ft_printf, put_line, put_number, to_hex


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**40 + 7])
def test_to_hex_round_trip(n):
    assert int(to_hex(n), 16) == n
    assert int(to_hex(n, upper=True), 16) == n


def test_to_hex_case():
    text = to_hex(0xABCDEF)
    assert text == text.lower()
    assert to_hex(0xABCDEF, upper=True) == text.upper()


def test_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        to_hex(-1)


def test_plain_text_and_percent():
    assert format_printf("hello %% world") == "hello % world"


def test_string_and_char():
    assert format_printf("%s-%c", "abc", "z") == "abc-z"
    assert format_printf("%c", 65) == "A"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_decimal_wraps_to_int():
    assert int(format_printf("%d", 42)) == 42
    assert int(format_printf("%i", -7)) == -7
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_conversions():
    assert int(format_printf("%x", 3054), 16) == 3054
    lower = format_printf("%x", 48879)
    assert format_printf("%X", 48879) == lower.upper()
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_pointer():
    assert format_printf("%p", None) == "0x0"
    text = format_printf("%p", 4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096


def test_unknown_specifier_is_dropped():
    assert format_printf("a%qb") == "ab"


def test_trailing_percent_is_ignored():
    assert format_printf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_ft_printf_writes_and_counts():
    out = io.StringIO()
    count = ft_printf("%s=%d", "x", 12, stream=out)
    assert out.getvalue() == "x=12"
    assert count == len(out.getvalue())


def test_ft_printf_null_count():
    out = io.StringIO()
    assert ft_printf("%s", None, stream=out) == len("(null)")


def test_put_number():
    out = io.StringIO()
    put_number(-42, out)
    assert int(out.getvalue()) == -42


def test_put_number_min_int():
    out = io.StringIO()
    put_number(-(2**31), out)
    assert int(out.getvalue()) == -(2**31)


def test_put_line():
    out = io.StringIO()
    put_line("abc", out)
    assert out.getvalue() == "abc\n"