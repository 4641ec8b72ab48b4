"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classification functions return ``bool``; the case
conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import overload

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: str | int) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


@overload
def toupper(c: str) -> str: ...
@overload
def toupper(c: int) -> int: ...


def toupper(c: str | int) -> str | int:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def tolower(c: str) -> str: ...
@overload
def tolower(c: int) -> int: ...


def tolower(c: str | int) -> str | int:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code