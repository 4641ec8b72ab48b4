# libft

A small library of everyday helpers. It is pure Python and needs nothing outside the standard library.

## Modules

- `libft.ctype` covers character classification and case conversion.
  - `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint` follow ASCII rules and return `bool`.
  - `toupper` and `tolower` return a value of the same kind they were given.
  - Every function accepts either a single-character string or an integer code.
- `libft.convert` converts between integers and decimal text.
  - `atoi` reads an optionally signed decimal prefix after leading whitespace. It returns `0` when the text has no digits.
  - `itoa` returns the decimal text of a 32-bit signed integer. It raises `OverflowError` for values outside that range.
  - The module also defines the constants `INT_MIN` and `INT_MAX`.
- `libft.strings` holds the string operations. Positions come back as indices, and `None` means "not found".
  - Searching: `strchr`, `strrchr` and `strnstr`. Searching for `"\0"` finds the end of the string.
  - Comparing: `strncmp` returns the difference of the first mismatched character codes.
  - Copying: `strlcpy` and `strlcat` each return a `(text, length)` pair. The length is the one the operation tried to create.
  - Slicing and joining: `substr` and `strjoin`.
  - Trimming and splitting: `strtrim`, and `split`, which drops empty pieces.
  - Index-aware mapping: `strmapi` builds a new string. `striteri` changes a mutable sequence in place and stops at a `"\0"` or `0` element.
- `libft.memory` works on bytes-like buffers.
  - Searching and comparing: `memchr` and `memcmp`.
  - Copying: `memcpy`, and `memmove`, which copies within one buffer and allows the regions to overlap.
  - Filling: `memset` and `bzero`.
  - Allocation: `calloc` returns a zero-filled `bytearray`. It raises `MemoryError` when the total size would exceed `INT_MAX`.
  - A count that reaches past the end of a buffer raises `ValueError`.
- `libft.output` writes UTF-8 text to a file descriptor with `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
- `libft.linkedlist` provides a singly linked list: `LinkedList` holds `Node` objects.
  - Adding: `push_front` and `append`.
  - Inspecting: `last`, `len()` and iteration.
  - Removing: `remove_first` and `clear`. Both take an optional `delete` callback.
  - Applying functions: `iterate`, and `map`, which needs both a mapping function and a `delete` callback.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
from libft.convert import atoi, itoa
from libft.strings import split, strtrim
from libft.linkedlist import LinkedList

atoi("   -42abc")             # -42
itoa(-2147483648)             # "-2147483648"
split("  hello world  ", " ") # ["hello", "world"]
strtrim("xxhixx", "x")        # "hi"

items = LinkedList([1, 2, 3])
items.append(4)
items.push_front(0)
len(items)                                        # 5
list(items.map(lambda x: x * 10, lambda _: None)) # [0, 10, 20, 30, 40]
```

## Scope

This package is a library only. It has no command-line program.

## Running the tests

```
pytest
```