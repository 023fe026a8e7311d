"""Conversions without flags: characters, strings, integers and pointers."""

from __future__ import annotations

from printfmt.digits import hex_to_str, int_to_str, to_uint32, to_uint64, unsigned_to_str
from printfmt.padding import NULL_TEXT

NIL_TEXT = "(nil)"


def char(c: str) -> str:
    """Return the single character ``c``."""
    if len(c) != 1:
        raise ValueError("char needs exactly one character")
    return c


def string(text: str | None) -> str:
    """Return ``text``, or ``(null)`` when it is missing."""
    return NULL_TEXT if text is None else text


def decimal(n: int) -> str:
    """Decimal text of ``n`` as a signed 32-bit integer."""
    return int_to_str(n)


def unsigned(n: int) -> str:
    """Decimal text of ``n`` as an unsigned 32-bit integer."""
    return unsigned_to_str(n)


def hex_digits(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``n`` as an unsigned 32-bit integer."""
    return hex_to_str(to_uint32(n), upper)


def pointer(address: int | None) -> str:
    """Return ``0x`` and the hex digits of ``address``, or ``(nil)`` for a null one."""
    if not address:
        return NIL_TEXT
    return "0x" + hex_to_str(to_uint64(address))