"""Writing characters, strings and numbers to file descriptors.

Text is encoded as UTF-8. Errors from the underlying ``os.write`` call
propagate as ``OSError``.
"""

from __future__ import annotations

import os

from libft.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer ``n`` to ``fd``.

    Raises ``OverflowError`` when ``n`` does not fit in 32 bits.
    """
    putstr_fd(itoa(n), fd)