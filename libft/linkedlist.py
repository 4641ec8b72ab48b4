"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One element of a linked list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, content: Any) -> Node:
        """Insert ``content`` at the back and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Node | None:
        """The last node of the list, or None when the list is empty."""
        return self._tail

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the first node and return its content.

        When ``delete`` is given it is called with the content first.
        Raises ``IndexError`` on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("remove_first from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """Return a new list holding ``f(content)`` for every node.

        If ``f`` raises, ``delete`` is called on every content already
        produced, in order, and the exception propagates.
        """
        if not callable(f) or not callable(delete):
            raise TypeError("map needs a callable f and a callable delete")
        result = LinkedList()
        try:
            for content in self:
                result.append(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result