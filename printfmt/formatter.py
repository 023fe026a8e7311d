"""The format-string driver: scans text and expands each conversion."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from printfmt.flags import Flags, parse_flags
from printfmt.numeric import format_decimal, format_hex, format_unsigned
from printfmt.text import format_char, format_pointer, format_string


def _next(args: Iterator[object], conversion: str) -> object:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for '%{conversion}' in format") from None


def _as_char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("'%c' needs a single character")
        return value
    return chr(int(value) % 256)  # type: ignore[call-overload]


def _as_int(value: object) -> int:
    return int(value)  # type: ignore[call-overload]


def convert(conversion: str, args: Iterator[object], flags: Flags) -> str:
    """Expand one conversion character, taking its value from ``args``.

    An unknown conversion character expands to nothing.
    """
    if conversion == "c":
        return format_char(_as_char(_next(args, conversion)), flags)
    if conversion == "s":
        value = _next(args, conversion)
        return format_string(None if value is None else str(value), flags)
    if conversion in ("d", "i"):
        return format_decimal(_as_int(_next(args, conversion)), flags)
    if conversion == "u":
        return format_unsigned(_as_int(_next(args, conversion)), flags)
    if conversion in ("x", "X"):
        return format_hex(_as_int(_next(args, conversion)), conversion == "X", flags)
    if conversion == "p":
        value = _next(args, conversion)
        return format_pointer(None if value is None else _as_int(value), flags)
    if conversion == "%":
        return format_char("%", flags)
    return ""


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with every conversion expanded from ``args``."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    parts: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        ch = fmt[pos]
        if ch == "%" and pos + 1 < end:
            flags, pos = parse_flags(fmt, pos + 1, values)
            if pos >= end:
                break
            parts.append(convert(fmt[pos], values, flags))
        else:
            parts.append(ch)
        pos += 1
    return "".join(parts)


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the expanded ``fmt`` to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)