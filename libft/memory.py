"""Byte-buffer operations: search, compare, copy, fill and allocate.

Buffers are bytes-like objects; functions that write need a mutable one
such as ``bytearray`` or a writable ``memoryview``. Byte values given as
integers are reduced to their low eight bits, so ``0x141`` stands for
``0x41``. A count that reaches past the end of a buffer raises
``ValueError``.
"""

from __future__ import annotations

from typing import Union

from libft.convert import INT_MAX

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]


def _check_count(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _check_span(what: str, buffer: BytesLike, start: int, n: int) -> None:
    _check_count("n", n)
    if start < 0:
        raise ValueError(f"{what} offset must not be negative, got {start}")
    if start + n > len(buffer):
        raise ValueError(
            f"{what} holds {len(buffer)} bytes; {n} requested from offset {start}"
        )


def memchr(data: BytesLike, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, else None."""
    _check_span("data", data, 0, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first pair of bytes that differ, or
    ``0`` when the compared parts are equal.
    """
    _check_span("first buffer", a, 0, n)
    _check_span("second buffer", b, 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: MutableBytes, src: BytesLike, n: int) -> MutableBytes:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dest``.

    Returns ``dest``.
    """
    _check_span("destination", dest, 0, n)
    _check_span("source", src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: MutableBytes, dest: int, src: int, n: int) -> MutableBytes:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside. Returns ``buffer``.
    """
    _check_span("destination", buffer, dest, n)
    _check_span("source", buffer, src, n)
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memset(buffer: MutableBytes, c: int, n: int) -> MutableBytes:
    """Fill the first ``n`` bytes of ``buffer`` with the byte ``c``.

    Returns ``buffer``.
    """
    _check_span("buffer", buffer, 0, n)
    buffer[:n] = bytes((c & 0xFF,)) * n
    return buffer


def bzero(buffer: MutableBytes, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer for ``nmemb`` elements of ``size`` bytes.

    An empty request gives an empty buffer. A request whose total would
    exceed the largest 32-bit signed integer raises ``MemoryError``.
    """
    _check_count("nmemb", nmemb)
    _check_count("size", size)
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > INT_MAX // size:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)