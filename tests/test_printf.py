import pytest

from sigtalk.printf import FormatOptions, format_string, printf


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", 0),
        ("%d", -2147483648),
        ("%5d", -42),
        ("%-5d", 42),
        ("%05d", -42),
        ("%05d", 42),
        ("%.3d", 5),
        ("%8.3d", 5),
        ("%.5d", -42),
        ("%+d", 5),
        ("%+d", -5),
        ("% d", 5),
        ("%u", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 3054),
        ("%05x", 255),
        ("%x", 0),
        ("%s", "hello"),
        ("%10s", "hello"),
        ("%-10s", "hello"),
        ("%.2s", "hello"),
        ("%c", "A"),
        ("%c", 65),
        ("%5c", "A"),
        ("%-5c", "A"),
    ],
)
def test_matches_standard_formatting(fmt, value):
    assert format_string(fmt, value) == fmt % value


def test_literal_text_and_percent():
    assert format_string("100%% done") == "100%% done" % ()


def test_multiple_directives_in_order():
    result = format_string("%s=%d (%x)", "n", 31, 31)
    assert result == "%s=%d (%x)" % ("n", 31, 31)


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_string_with_precision_truncates():
    assert format_string("%.3s", None) == "(null)"[:3]


def test_width_counts_full_string_before_precision():
    result = format_string("%10.2s", "hello")
    assert result == " " * (10 - len("hello")) + "he"


def test_pointer_formatting():
    assert format_string("%p", 255) == "%#x" % 255
    assert format_string("%p", None) == "0x0"


def test_pointer_width_pads_left():
    result = format_string("%20p", 4096)
    assert len(result) == 20
    assert result.strip() == "%#x" % 4096


def test_pointer_offset_pads_right():
    result = format_string("%-20p", 4096)
    assert len(result) == 20
    assert result.rstrip() == "%#x" % 4096


def test_sharp_has_no_effect_on_zero():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_zero_with_zero_precision_prints_nothing():
    assert format_string("%.0d", 0) == ""


def test_zero_with_zero_precision_and_width_is_blank():
    result = format_string("%5.0d", 0)
    assert result == " " * 5


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**31) == format_string("%d", -(2**31))
    assert format_string("%d", 2**32 + 7) == format_string("%d", 7)


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "%u" % (2**32 - 1)
    assert format_string("%x", -1) == "%x" % (2**32 - 1)


def test_unknown_conversion_is_dropped_without_consuming_argument():
    assert format_string("a%zb") == "ab"
    assert format_string("%z%d", 7) == str(7)


def test_trailing_percent_is_ignored():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2) == format_string("%d", 1)


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_string_rejects_non_string():
    with pytest.raises(TypeError):
        format_string("%s", 12)


def test_format_options_defaults_are_off():
    opt = FormatOptions()
    assert (opt.sharp, opt.dot, opt.zero, opt.minus) == (False, False, False, False)
    assert (opt.min_width, opt.precision, opt.offset, opt.zero_offset) == (0, 0, 0, 0)


def test_printf_writes_to_stdout_and_returns_count(capfd):
    count = printf("pid: %d\n", 1234)
    out = capfd.readouterr().out
    assert out == format_string("pid: %d\n", 1234)
    assert count == len(out)


def test_printf_empty_output(capfd):
    count = printf("%.0d", 0)
    assert capfd.readouterr().out == ""
    assert count == 0