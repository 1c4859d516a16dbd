"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class DoublyNode:
    """One node of a doubly linked list."""

    value: int
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A list of nodes linked both forwards and backwards."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> DoublyNode:
        """Add value after the tail and return its node."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1
        return node

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def forward(self) -> list[int]:
        """Return the values from head to tail."""
        return list(self)

    def backward(self) -> list[int]:
        """Return the values from tail to head."""
        return list(reversed(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.forward()!r})"