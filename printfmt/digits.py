"""Fixed-width integer wrapping and digit strings in base 10 and 16."""

from __future__ import annotations

_INT32_MOD = 1 << 32
_INT64_MOD = 1 << 64


def to_int32(n: int) -> int:
    """Wrap ``n`` into the signed 32-bit range."""
    n %= _INT32_MOD
    return n - _INT32_MOD if n >= 1 << 31 else n


def to_uint32(n: int) -> int:
    """Wrap ``n`` into the unsigned 32-bit range."""
    return n % _INT32_MOD


def to_uint64(n: int) -> int:
    """Wrap ``n`` into the unsigned 64-bit range."""
    return n % _INT64_MOD


def int_to_str(n: int) -> str:
    """Decimal text of ``n`` taken as a signed 32-bit integer."""
    return str(to_int32(n))


def unsigned_to_str(n: int) -> str:
    """Decimal text of ``n`` taken as an unsigned 32-bit integer."""
    return str(to_uint32(n))


def hex_to_str(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of the non-negative integer ``n``, without prefix."""
    if n < 0:
        raise ValueError("hex_to_str needs a non-negative integer")
    return format(n, "X" if upper else "x")


def int_len(n: int) -> int:
    """Length of the decimal text of ``n`` as signed 32-bit, sign included."""
    return len(int_to_str(n))


def unsigned_len(n: int) -> int:
    """Number of decimal digits of ``n`` as unsigned 32-bit."""
    return len(unsigned_to_str(n))


def hex_len(n: int) -> int:
    """Number of hexadecimal digits of the non-negative integer ``n``."""
    return len(hex_to_str(n))