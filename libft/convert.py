"""Conversions between decimal text and integers."""

from __future__ import annotations

from libft.ctype import isdigit

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \f\n\r\t\v"


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, then at most one ``+`` or ``-`` sign is
    read, then digits up to the first non-digit. Text without digits
    gives ``0``.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for ch in rest:
        if not isdigit(ch):
            break
        total = total * 10 + ord(ch) - ord("0")
    return total * sign


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer.

    Raises ``OverflowError`` when ``n`` does not fit in 32 bits.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits