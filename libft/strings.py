"""String searching, comparison, copying and splitting.

Positions are returned as indices into the searched string, and ``None``
stands for "not found". Searching for ``"\\0"`` finds the end of the
string, as a terminator would be found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from libft.ctype import isprint

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; ``len(s)`` for ``"\\0"``; else None."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; ``len(s)`` for ``"\\0"``; else None."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first mismatch,
    or ``0`` when the compared parts are equal. A string that ends early
    compares as if followed by ``"\\0"``.
    """
    _check_non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, keeping one for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer nothing is appended and the length
    reported is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``."""
    _check_non_negative("length", length)
    if not little:
        return 0
    if len(little) > length:
        return None
    index = big[:length].find(little)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces.

    A word is counted only once it holds a printable character; the
    result holds that many pieces, taken in order.
    """
    _check_char(sep)
    pieces = [piece for piece in s.split(sep) if piece]
    words = sum(1 for piece in pieces if any(isprint(ch) for ch in piece))
    return pieces[:words]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(buffer: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Replace each element of ``buffer`` in place with ``f(index, element)``.

    Processing stops at the first terminator element (``"\\0"`` or ``0``).
    """
    for i, value in enumerate(buffer):
        if value == _NUL or value == 0:
            break
        buffer[i] = f(i, value)