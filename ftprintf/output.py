"""Write characters, strings, lines and integers to a text stream.

Each function writes to *stream*, or to standard output when no stream
is given.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftprintf.strings import itoa

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is taken modulo 256."""
    _target(stream).write(_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *s*; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline; an empty string writes nothing."""
    if not s:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(itoa(n))