"""Formatted conversions for characters, strings and pointers."""

from __future__ import annotations

from printfmt.digits import hex_len, hex_to_str, to_uint64
from printfmt.flags import Flags
from printfmt.padding import NULL_TEXT, pad, take
from printfmt.plain import NIL_TEXT


def format_char(c: str, flags: Flags) -> str:
    """Lay out one character within the field width."""
    if len(c) != 1:
        raise ValueError("format_char needs exactly one character")
    padding = pad(" ", flags.width - 1) if flags.width > 1 else ""
    return c + padding if flags.minus else padding + c


def _string_padding(text: str, flags: Flags) -> int:
    # The shown length is taken from the precision whenever it does not
    # exceed the string length, whether or not a precision was given.
    total = flags.precision if flags.precision <= len(text) else len(text)
    return flags.width - total if flags.width > total else 0


def format_string(text: str | None, flags: Flags) -> str:
    """Lay out a string, cut to the precision and padded with spaces."""
    if text is None:
        text = NULL_TEXT
    padding = pad(" ", _string_padding(text, flags))
    body = take(text, flags.precision if flags.dot else -1)
    return body + padding if flags.minus else padding + body


def format_pointer(address: int | None, flags: Flags) -> str:
    """Lay out a pointer as ``0x`` and hex digits, or ``(nil)`` for a null one."""
    if not address:
        return NIL_TEXT
    n = to_uint64(address)
    digits = hex_to_str(n)
    length = hex_len(n)
    pad_zero = flags.precision - length if flags.precision > length else 0
    total = length + pad_zero + 2
    pad_spaces = flags.width - total if flags.width > total else 0
    if flags.minus:
        return "0x" + pad("0", pad_zero) + digits + pad(" ", pad_spaces)
    if not flags.zero or flags.dot:
        return pad(" ", pad_spaces) + "0x" + pad("0", pad_zero) + digits
    return "0x" + pad("0", pad_spaces) + digits