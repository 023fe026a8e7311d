"""Formatted conversions for signed, unsigned and hexadecimal integers."""

from __future__ import annotations

from printfmt.digits import hex_len, hex_to_str, int_len, to_int32, to_uint32, unsigned_len, unsigned_to_str
from printfmt.flags import Flags
from printfmt.padding import number_prefix, pad, sign


def _zero_padding(length: int, flags: Flags) -> int:
    return flags.precision - length if flags.precision > length else 0


def format_decimal(n: int, flags: Flags) -> str:
    """Lay out ``n`` as a signed 32-bit decimal under ``flags``."""
    n = to_int32(n)
    if n == 0 and flags.dot and flags.precision == 0:
        return ""
    is_negative = n < 0
    digits = str(abs(n))
    length = int_len(n) - 1 if is_negative else int_len(n)
    pad_zero = _zero_padding(length, flags)
    total = length + pad_zero
    if is_negative or flags.plus or flags.space:
        total += 1
    pad_spaces = flags.width - total if flags.width > total else 0
    if not flags.minus:
        return number_prefix(pad_zero, pad_spaces, is_negative, flags) + digits
    return sign(is_negative, flags) + pad("0", pad_zero) + digits + pad(" ", pad_spaces)


def format_unsigned(n: int, flags: Flags) -> str:
    """Lay out ``n`` as an unsigned 32-bit decimal under ``flags``."""
    n = to_uint32(n)
    if n == 0 and flags.dot and flags.precision == 0:
        return ""
    digits = unsigned_to_str(n)
    pad_zero = _zero_padding(unsigned_len(n), flags)
    total = len(digits) + pad_zero
    pad_spaces = flags.width - total if flags.width > total else 0
    if flags.minus:
        return pad("0", pad_zero) + digits + pad(" ", pad_spaces)
    if not flags.zero or flags.dot:
        return pad(" ", pad_spaces) + pad("0", pad_zero) + digits
    return pad("0", pad_spaces) + digits


def _hex_space_padding(n: int, total: int, flags: Flags) -> int:
    if flags.hash and flags.width > total + 2 and n != 0:
        return flags.width - total - 2
    if (not flags.hash and flags.width > total) or n == 0:
        return flags.width - total
    return 0


def format_hex(n: int, upper: bool, flags: Flags) -> str:
    """Lay out ``n`` as unsigned 32-bit hexadecimal under ``flags``."""
    n = to_uint32(n)
    if n == 0 and flags.dot and flags.precision == 0:
        return ""
    digits = hex_to_str(n, upper)
    pad_zero = _zero_padding(hex_len(n), flags)
    total = len(digits) + pad_zero
    pad_spaces = _hex_space_padding(n, total, flags)
    prefix = ("0X" if upper else "0x") if flags.hash and n != 0 else ""
    if flags.minus:
        return prefix + pad("0", pad_zero) + digits + pad(" ", pad_spaces)
    if not flags.zero or flags.dot:
        return pad(" ", pad_spaces) + prefix + pad("0", pad_zero) + digits
    return prefix + pad("0", pad_spaces) + digits