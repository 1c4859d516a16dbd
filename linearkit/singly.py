"""A singly linked list supporting insertion at either end or at a position, and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class SinglyNode:
    """One node of a singly linked list."""

    value: int
    next: SinglyNode | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A chain of nodes, each linked to the one after it."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: SinglyNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> SinglyNode:
        """Return the node at a 0-based index, which must be in range."""
        node = self.head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: int) -> SinglyNode:
        """Insert value before the head and return its node."""
        node = SinglyNode(value, self.head)
        self.head = node
        self._size += 1
        return node

    def append(self, value: int) -> SinglyNode:
        """Insert value after the last node and return its node."""
        if self.head is None:
            return self.push_front(value)
        last = self._node_at(self._size - 1)
        node = SinglyNode(value)
        last.next = node
        self._size += 1
        return node

    def insert_at(self, value: int, position: int) -> SinglyNode:
        """Insert value so that it ends up at a 1-based position.

        The position may be one past the last node. Raises IndexError otherwise.
        """
        if position < 1 or position > self._size + 1:
            raise IndexError("Position out of bounds")
        if position == 1:
            return self.push_front(value)
        previous = self._node_at(position - 2)
        node = SinglyNode(value, previous.next)
        previous.next = node
        self._size += 1
        return node

    def delete_at(self, position: int) -> int:
        """Remove the node at a 1-based position and return its value.

        Raises IndexError when no node is at that position.
        """
        if position < 1 or position > self._size:
            raise IndexError(f"invalid position {position} for {self._size} nodes")
        if position == 1:
            assert self.head is not None
            removed = self.head
            self.head = removed.next
        else:
            previous = self._node_at(position - 2)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"