# printfmt

A compact printf-style formatter. It handles a fixed set of conversions and
flags, treating integers as 32-bit values and addresses as 64-bit values.

## Conversions

| Spec       | Argument           | Output                                             |
|------------|--------------------|----------------------------------------------------|
| `%c`       | one-character str or int | the character (an int is taken modulo 256)   |
| `%s`       | any value or `None`| `str()` of the value, or `(null)` for `None`       |
| `%d`, `%i` | int                | signed 32-bit decimal                              |
| `%u`       | int                | unsigned 32-bit decimal                            |
| `%x`, `%X` | int                | unsigned 32-bit hexadecimal, lower/upper case      |
| `%p`       | int or `None`      | `0x` and hex digits; `(nil)` for `None` or 0       |
| `%%`       | none               | a literal `%`                                      |

Flags `-`, `0`, `#`, `+` and space are accepted, as are a field width and a
`.precision`. Either may be `*`, which takes the value from the next
argument; a negative `*` precision is ignored. `-` cancels `0`, `+` cancels
space, and a precision cancels `0`.

An unknown conversion character expands to nothing. A `%` at the very end of
the format is written as is.

For `%s`, a width given without a precision pads by the whole width rather
than by the width less the string length.

## Usage

```python
from printfmt.formatter import sprintf, printf

sprintf("%5d|%s|%#x", 42, "ab", 255)     # '   42|ab|0xff'
sprintf("%.3s", "abcdef")                 # 'abc'
sprintf("%+.4d", 7)                       # '+0007'
sprintf("%*d", 6, -3)                     # '    -3'

count = printf("hello %s\n", "world")     # writes to stdout, returns 12
```

`printf` writes to standard output by default; pass `file=` to send the text
to another text stream. It returns the number of characters written.

Too few arguments for the conversions (or for a `*`) raise `ValueError`; a
format of `None` raises `TypeError`.

## Modules

- `printfmt.formatter`: `sprintf`, `printf`, and `convert`, which expands a
  single conversion character.
- `printfmt.flags`: the `Flags` dataclass and `parse_flags`, which reads the
  flags, width and precision of one conversion.
- `printfmt.numeric`: `format_decimal`, `format_unsigned`, `format_hex`.
- `printfmt.text`: `format_char`, `format_string`, `format_pointer`.
- `printfmt.plain`: unflagged conversions (`char`, `string`, `decimal`,
  `unsigned`, `hex_digits`, `pointer`).
- `printfmt.padding` and `printfmt.digits`: padding, sign, truncation,
  fixed-width wrapping and digit-string helpers.

The package is a library only; it installs no command.

## Development

```
pip install -e .[test]
pytest
```