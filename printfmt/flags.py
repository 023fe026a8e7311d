"""Conversion flags and the parser for the part of a spec between '%' and the conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_FLAG_CHARS = "-0#+ "


@dataclass
class Flags:
    """Options that govern how one conversion is laid out."""

    minus: bool = False
    zero: bool = False
    width: int = 0
    precision: int = 0
    dot: bool = False
    hash: bool = False
    plus: bool = False
    space: bool = False

    def sanitize(self) -> None:
        """Drop flags that another flag overrides."""
        if self.minus:
            self.zero = False
        if self.plus:
            self.space = False
        if self.dot:
            self.zero = False


def leading_int(text: str) -> int:
    """Return the value of the run of ASCII digits that starts ``text``, or 0."""
    digits = []
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return int("".join(digits)) if digits else 0


def _skip_digits(spec: str, pos: int) -> int:
    while pos < len(spec) and "0" <= spec[pos] <= "9":
        pos += 1
    return pos


def _next_arg(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for '*' in format") from None
    return int(value)  # type: ignore[call-overload]


def _is_spec_char(ch: str) -> bool:
    return ch in _FLAG_CHARS or ch in ".*" or "0" <= ch <= "9"


def parse_flags(spec: str, pos: int, args: Iterator[object]) -> tuple[Flags, int]:
    """Parse flags, width and precision in ``spec`` starting at ``pos``.

    ``args`` supplies the values for any '*'. Returns the flags and the index
    of the first character after them (the conversion character, if any).
    """
    flags = Flags()
    while pos < len(spec) and _is_spec_char(spec[pos]):
        ch = spec[pos]
        if ch in _FLAG_CHARS:
            if ch == "-":
                flags.minus = True
            elif ch == "0":
                flags.zero = True
            elif ch == "#":
                flags.hash = True
            elif ch == "+":
                flags.plus = True
            else:
                flags.space = True
            pos += 1
        elif ch == ".":
            flags.dot = True
            pos += 1
            if pos < len(spec) and spec[pos] == "*":
                flags.precision = _next_arg(args)
                if flags.precision < 0:
                    flags.dot = False
                pos += 1
            else:
                flags.precision = leading_int(spec[pos:])
                pos = _skip_digits(spec, pos)
        elif ch == "*":
            flags.width = _next_arg(args)
            pos += 1
        else:
            flags.width = leading_int(spec[pos:])
            pos = _skip_digits(spec, pos)
    flags.sanitize()
    return flags, pos