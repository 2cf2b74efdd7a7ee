"""Text conversions of numbers used by the formatter: signed and unsigned
decimal, hexadecimal and pointer notation."""

from __future__ import annotations

from typing import Optional

from ftprintf.strings import itoa

HEX_BASE_LOWER = "0123456789abcdef"
HEX_BASE_UPPER = "0123456789ABCDEF"

UINT_MAX = 2**32 - 1
ULONG_MAX = 2**64 - 1


def _check_unsigned(name: str, n: int, limit: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name}: expected an int, got {type(n).__name__}")
    if not 0 <= n <= limit:
        raise OverflowError(f"{name}: {n} is outside 0..{limit}")


def to_hex(n: int, uppercase: bool = False) -> str:
    """Hexadecimal digits of a 64-bit unsigned value, without a prefix."""
    _check_unsigned("to_hex", n, ULONG_MAX)
    base = HEX_BASE_UPPER if uppercase else HEX_BASE_LOWER
    digits = []
    while True:
        n, rem = divmod(n, 16)
        digits.append(base[rem])
        if n == 0:
            break
    return "".join(reversed(digits))


def format_signed(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    return itoa(n)


def format_unsigned(n: int) -> str:
    """Decimal text of a 32-bit unsigned integer."""
    _check_unsigned("format_unsigned", n, UINT_MAX)
    return str(n)


def format_hex(n: int, uppercase: bool = False) -> str:
    """Hexadecimal text of a 32-bit unsigned integer."""
    _check_unsigned("format_hex", n, UINT_MAX)
    return to_hex(n, uppercase)


def format_pointer(address: Optional[int]) -> str:
    """Pointer notation: ``0x`` and lowercase hex, or ``(nil)`` for null."""
    if address is None or address == 0:
        return "(nil)"
    return "0x" + to_hex(address)