"""A small printf-style formatter with its own flag and padding rules.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x``, ``%X`` and ``%%``. Flags ``#``, space, ``+``, ``0``, ``-`` and ``.``
are accepted, along with a minimum field width. ``0``, ``-`` and ``.`` each
take the digits that follow them as their value. Unknown conversions are
dropped from the output without consuming an argument.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sigtalk.fdio import put_str

_DIRECTIVE = re.compile(r"%([0-9# +.\-]*)(.?)", re.DOTALL)
_SPEC_PART = re.compile(r"[# +]|[0.\-][0-9]*|[1-9][0-9]*")

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass
class FormatOptions:
    """Flags and numbers parsed from one conversion specification."""

    sharp: bool = False
    space: bool = False
    plus: bool = False
    min_width: int = 0
    minus: bool = False
    dot: bool = False
    precision: int = 0
    offset: int = 0
    zero: bool = False
    zero_offset: int = 0


def _parse_options(spec: str) -> FormatOptions:
    opt = FormatOptions()
    for part in _SPEC_PART.findall(spec):
        head, number = part[0], part[1:]
        value = int(number) if number else 0
        if head == "#":
            opt.sharp = True
        elif head == " ":
            opt.space = True
        elif head == "+":
            opt.plus = True
        elif head == "0":
            opt.zero = True
            opt.zero_offset = value
        elif head == "-":
            opt.minus = True
            opt.offset = value
        elif head == ".":
            opt.dot = True
            opt.precision = value
        else:
            opt.min_width = int(part)
    return opt


def _signed32(value: Any) -> int:
    value = operator.index(value) & _MASK32
    return value - (1 << 32) if value >= 1 << 31 else value


def _layout(opt: FormatOptions) -> tuple[str, int]:
    """Return the padding character and the effective field width."""
    fill = " " if not opt.zero or (opt.dot and opt.zero_offset > opt.precision) else "0"
    width = opt.zero_offset if opt.zero else opt.min_width
    if opt.precision > width:
        width = opt.precision
    return fill, width


def _body(value: int, digits: str, length: int, width: int, opt: FormatOptions) -> str:
    """The digits of a number, with the special cases for a zero value."""
    if value == 0 and width and width < length:
        return " "
    if value == 0 and opt.dot and not opt.precision:
        return " " if width >= length else ""
    return digits


def _format_char(arg: Any, opt: FormatOptions) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        ch = arg
    else:
        ch = chr(operator.index(arg) & 0xFF)
    return (" " * (opt.min_width - 1) + ch).ljust(opt.offset)


def _format_str(arg: Any, opt: FormatOptions) -> str:
    if arg is not None and not isinstance(arg, str):
        raise TypeError(f"%s expects a string or None, got {type(arg).__name__}")
    text = "(null)" if arg is None else arg
    out = " " * (opt.min_width - len(text))
    out += text[: opt.precision] if opt.dot else text
    return out.ljust(opt.offset)


def _format_pointer(arg: Any, opt: FormatOptions) -> str:
    address = 0 if arg is None else operator.index(arg) & _MASK64
    digits = format(address, "x")
    out = " " * (opt.min_width - len(digits) - 2) + "0x" + digits
    return out.ljust(opt.offset)


def _format_signed(arg: Any, opt: FormatOptions) -> str:
    value = _signed32(arg)
    length = len(str(value))
    len_prec = max(length, opt.precision)
    if value < 0 and opt.zero_offset > length and opt.precision > length:
        len_prec += 1
    if value < 0 and opt.dot and opt.precision < opt.zero_offset:
        length += 1
    fill, width = _layout(opt)
    out = " " * (width - len_prec) if fill == " " else ""
    if value < 0:
        out += "-"
        value = -value
        length -= 2 if opt.dot else 1
    elif opt.space and not opt.plus and not opt.dot:
        out += " "
    elif opt.plus and not opt.dot:
        out += "+"
    out += "0" * (width - length - len(out))
    out += _body(value, str(value), length, width, opt)
    return out.ljust(opt.offset)


def _format_unsigned(value: int, digits: str, opt: FormatOptions, marker: str = "") -> str:
    length = len(digits)
    len_prec = max(length, opt.precision)
    fill, width = _layout(opt)
    out = fill * (width - len_prec)
    out += "0" * (width - length - len(out))
    if marker and value:
        out += marker
    out += _body(value, digits, length, width, opt)
    return out.ljust(opt.offset)


def _format_decimal(arg: Any, opt: FormatOptions) -> str:
    value = operator.index(arg) & _MASK32
    return _format_unsigned(value, str(value), opt)


def _format_hex(upper: bool) -> Callable[[Any, FormatOptions], str]:
    def convert(arg: Any, opt: FormatOptions) -> str:
        value = operator.index(arg) & _MASK32
        digits = format(value, "X" if upper else "x")
        marker = ("0X" if upper else "0x") if opt.sharp else ""
        return _format_unsigned(value, digits, opt, marker)

    return convert


_CONVERTERS: dict[str, Callable[[Any, FormatOptions], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_decimal,
    "x": _format_hex(False),
    "X": _format_hex(True),
}


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text.

    Raises ``TypeError`` when the format asks for more arguments than given;
    surplus arguments are ignored.
    """
    remaining = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def replace(match: re.Match[str]) -> str:
        conversion = match.group(2)
        if conversion == "%":
            return "%"
        converter = _CONVERTERS.get(conversion)
        if converter is None:
            return ""
        return converter(take(), _parse_options(match.group(1)))

    return _DIRECTIVE.sub(replace, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Format like :func:`format_string`, write to standard output (fd 1).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    put_str(text, 1)
    return len(text)