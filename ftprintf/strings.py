"""String helpers: number parsing and formatting, searching, slicing,
splitting, trimming and bounded copies.

Positions are returned as indices into the string, or None where nothing
was found.  Functions that fill a fixed-size destination return the new
text together with the length the full result would have had.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

CharLike = Union[int, str]
T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_SPACE = " \t\n\v\f\r"


def _as_char(c: CharLike) -> str:
    """Return *c* as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, **values: int) -> None:
    for label, value in values.items():
        if value < 0:
            raise ValueError(f"{name}: {label} must not be negative, got {value}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit.  A string with no digits
    gives 0.
    """
    text = s.lstrip(_ATOI_SPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa: expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"itoa: {n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str, c: CharLike) -> list[str]:
    """Split *s* on the separator *c*, dropping empty pieces."""
    sep = _as_char(c)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def striteri(s: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` on each item of *s* in place.

    A value returned by *f* replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin: both strings are required")
    return s1 + s2


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a destination of *size* slots, one kept for the
    terminator.

    Returns the copied text and the length of *src*.
    """
    _check_non_negative("strlcpy", size=size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a destination of *size* slots, one kept
    for the terminator.

    Returns the resulting text and the length the full concatenation
    would have.  If *size* does not exceed ``len(dst)`` nothing is
    appended and the length returned is ``size + len(src)``.
    """
    _check_non_negative("strlcat", size=size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference of the first differing character codes, a
    missing character counting as 0, or 0 when the spans match.
    """
    _check_non_negative("strncmp", n=n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first *needle* lying wholly within the first *length*
    characters of *haystack*, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative("strnstr", length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if s is None or charset is None:
        raise TypeError("strtrim: both the string and the character set are required")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("substr", start=start, length=length)
    if start >= len(s):
        return ""
    return s[start:start + length]