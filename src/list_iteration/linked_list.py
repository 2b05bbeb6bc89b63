"""A plain doubly linked list of Python objects.

Positional access walks the node chain from whichever end is closer, so
``ll[i]`` costs O(n). That is the whole reason this type exists: looping
over it by index is quadratic, while iterating it directly is linear.
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator


class Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any, prev: Node | None = None, next: Node | None = None):
        self.value = value
        self.prev = prev
        self.next = next


class LinkedList:
    """Doubly linked list supporting append, clear, len, indexing and iteration."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self.first: Node | None = None
        self.last: Node | None = None
        self._size = 0
        if iterable is not None:
            for v in iterable:
                self.append(v)

    def append(self, value: Any) -> None:
        prev = self.last
        self.last = Node(value, prev, None)

        if prev is None:
            self.first = self.last
        else:
            prev.next = self.last
        self._size += 1

    def clear(self) -> None:
        # Unlink every node so reference cycles don't linger until a GC pass.
        node = self.first
        while node is not None:
            nxt = node.next
            node.prev = node.next = None
            node = nxt
        self.first = self.last = None
        self._size = 0

    def _node_at(self, index: int) -> Node:
        if index < (self._size >> 1):
            node = self.first
            for _ in range(index):
                node = node.next
        else:
            node = self.last
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __getitem__(self, index: int) -> Any:
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(
                f"LinkedList indices must be integers, not {type(index).__name__}"
            ) from None
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("LinkedList index out of range")
        return self._node_at(index).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.first
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.last
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
