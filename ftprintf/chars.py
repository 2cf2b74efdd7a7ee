"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
The case converters give back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, codes 32 through 126."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; leave anything else as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _UPPER_TO_LOWER
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; leave anything else as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _UPPER_TO_LOWER
    return _same_kind(c, code)