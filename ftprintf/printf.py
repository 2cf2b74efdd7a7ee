"""A small printf: ``%c %s %p %d %i %u %x %X %%`` with no flags, widths or
precisions.

An unknown conversion prints nothing and takes no argument; a ``%`` at the
very end of the format is printed as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Optional, TextIO

from ftprintf.convert import format_hex, format_pointer, format_signed, format_unsigned


def _take(specifier: str, args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{specifier}") from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%c expects an int or a one-character str, got {type(value).__name__}")
    return chr(value & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def format_conversion(specifier: str, args: Iterable[Any]) -> str:
    """Render one conversion, taking its argument from *args* if it needs one.

    Pass an iterator to have the argument consumed from it.
    """
    it = iter(args)
    if specifier == "%":
        return "%"
    if specifier == "c":
        return _format_char(_take(specifier, it))
    if specifier == "s":
        return _format_string(_take(specifier, it))
    if specifier == "p":
        return format_pointer(_take(specifier, it))
    if specifier == "u":
        return format_unsigned(_take(specifier, it))
    if specifier in ("d", "i"):
        return format_signed(_take(specifier, it))
    if specifier == "x":
        return format_hex(_take(specifier, it))
    if specifier == "X":
        return format_hex(_take(specifier, it), True)
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions filled in from *args*."""
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            specifier = next(chars, None)
            if specifier is not None:
                pieces.append(format_conversion(specifier, values))
                continue
        pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default) and
    return the number of characters written."""
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)