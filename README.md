# ftprintf

A small, dependency-free printf-style formatter, plus helpers for
characters, byte buffers, strings and writing to text streams.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`ftprintf.printf` understands these conversions:

| Spec      | Argument                         | Output                                             |
|-----------|----------------------------------|----------------------------------------------------|
| `%c`      | int or one-character str         | the character; an int is taken modulo 256          |
| `%s`      | str or `None`                    | the string, or `(null)` for `None`                 |
| `%p`      | int address or `None`            | `0x` and lowercase hex, or `(nil)` for `None` or 0 |
| `%d` `%i` | int                              | signed decimal (32-bit range)                      |
| `%u`      | int                              | unsigned decimal (32-bit range)                    |
| `%x` `%X` | int                              | lowercase / uppercase hex (32-bit range)           |
| `%%`      | none                             | a literal `%`                                      |

Any other character after `%` is dropped: it prints nothing and takes no
argument. A `%` at the very end of the format string is printed as it is.

```python
from ftprintf.printf import printf, sprintf

text = sprintf("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

count = printf("%u%%\n", 99)   # writes "99%\n" to stdout, returns 4
```

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, file=None)` writes it to `file` (standard output by
  default) and returns the number of characters written.
- `format_conversion(specifier, args)` renders a single conversion, taking
  its argument from the iterable `args` when it needs one.

Running out of arguments raises `TypeError`. A number outside the range of
its conversion raises `OverflowError`; an argument of the wrong type raises
`TypeError`.

There are no flags, field widths, precisions or length modifiers.

## Conversions

`ftprintf.convert` provides the number conversions on their own:

- `format_signed(n)`: decimal text of a 32-bit signed integer.
- `format_unsigned(n)`: decimal text of a 32-bit unsigned integer.
- `format_hex(n, uppercase=False)`: hex text of a 32-bit unsigned integer.
- `format_pointer(address)`: `0x` plus lowercase hex, or `(nil)`.
- `to_hex(n, uppercase=False)`: hex digits of a 64-bit unsigned value.

## Helpers

- `ftprintf.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`. Each takes an int code or a
  one-character string; the case converters return the same kind they got.
- `ftprintf.memory`: in-place byte-buffer operations `bzero`, `memset`,
  `memcpy`, `memmove` (offsets within one buffer, overlap handled), plus
  `calloc`, `memchr` (returns an index or `None`) and `memcmp`. A count
  past the end of a buffer, or negative, raises `ValueError`.
- `ftprintf.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim`, `substr`. Searches return an index or `None`;
  `strlcpy` and `strlcat` return the resulting text together with the
  length the full result would have had.
- `ftprintf.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, which
  write to a given text stream or to standard output.

## What it does not do

This is a library only: it installs no command-line program.