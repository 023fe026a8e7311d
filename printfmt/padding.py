"""Padding, sign and truncation helpers shared by the formatted conversions."""

from __future__ import annotations

from printfmt.flags import Flags

NULL_TEXT = "(null)"


def pad(char: str, count: int) -> str:
    """Return ``char`` repeated ``count`` times, or nothing if ``count`` is not positive."""
    return char * max(count, 0)


def sign(is_negative: bool, flags: Flags) -> str:
    """Return the sign character a number gets under ``flags``."""
    if is_negative:
        return "-"
    if flags.plus:
        return "+"
    if flags.space:
        return " "
    return ""


def number_prefix(pad_zero: int, pad_spaces: int, is_negative: bool, flags: Flags) -> str:
    """Return what goes before the digits of a right-aligned signed number."""
    if not flags.zero or flags.dot:
        return pad(" ", pad_spaces) + sign(is_negative, flags) + pad("0", pad_zero)
    return sign(is_negative, flags) + pad("0", pad_spaces)


def take(text: str | None, limit: int) -> str:
    """Return at most ``limit`` characters of ``text``; a negative limit means all.

    A missing text reads as ``(null)``.
    """
    if text is None:
        text = NULL_TEXT
    if limit < 0:
        return text
    return text[:limit]