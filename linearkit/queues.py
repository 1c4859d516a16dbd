"""A linear (non-circular) bounded queue of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator


class QueueError(Exception):
    """Base class for queue errors."""


class QueueOverflow(QueueError):
    """Raised when enqueueing into a full queue."""


class QueueUnderflow(QueueError):
    """Raised when reading from an empty queue."""


class LinearQueue:
    """A queue whose slots are used up front to back and never wrap around.

    Every enqueue consumes one of ``capacity`` slots. With ``reset_when_empty``
    the slots are reclaimed as soon as the queue becomes empty; without it a
    queue that has taken ``capacity`` values stays full for good.
    """

    def __init__(self, capacity: int = 1000, reset_when_empty: bool = True) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.reset_when_empty = reset_when_empty
        self._items: deque[int] = deque()
        self._used = 0

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._used == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def enqueue(self, value: int) -> None:
        """Add value at the rear; raise QueueOverflow when no slot is left."""
        if self.is_full():
            raise QueueOverflow("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> int:
        """Remove and return the front value; raise QueueUnderflow when empty."""
        if self.is_empty():
            raise QueueUnderflow("queue is empty")
        value = self._items.popleft()
        if self.reset_when_empty and not self._items:
            self._used = 0
        return value

    def peek(self) -> int:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueUnderflow("queue is empty")
        return self._items[0]


_MENU = (
    "\nQueue Menu\n"
    "1. isfull\n"
    "2. isempty\n"
    "3. enqueue\n"
    "4. dequeue\n"
    "5. peek\n"
    "6. display\n"
    "7. exit\n"
    "Enter the choice menu: "
)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError from None
    return int(token)


def _run(queue: LinearQueue, tokens: Iterator[str]) -> None:
    while True:
        print(_MENU, end="", flush=True)
        try:
            choice = _read(tokens)
        except ValueError:
            print("Invalid choice. Please try again.")
            continue
        if choice == 1:
            print("Queue is full" if queue.is_full() else "Queue is not full")
        elif choice == 2:
            print("Queue is empty" if queue.is_empty() else "Queue is not empty")
        elif choice == 3:
            print("Enter the enqueue value: ", end="", flush=True)
            try:
                queue.enqueue(_read(tokens))
            except QueueOverflow:
                print("Queue is Overflow")
            except ValueError:
                print("Invalid number")
        elif choice == 4:
            try:
                print(f"Enter the dequeue value: {queue.dequeue()}")
            except QueueUnderflow:
                print("Queue is Underflow")
        elif choice == 5:
            try:
                print(f"Enter the peek value: {queue.peek()}")
            except QueueUnderflow:
                print("Queue is Empty")
        elif choice == 6:
            if queue.is_empty():
                print("Queue is empty")
            else:
                print("Queue elements: " + " ".join(str(item) for item in queue))
        elif choice == 7:
            print("Exiting...")
            return
        else:
            print("Invalid choice. Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive linear queue.")
    parser.add_argument("--capacity", type=int, default=1000, help="number of slots")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="reclaim all slots whenever the queue becomes empty",
    )
    args = parser.parse_args(argv)
    queue = LinearQueue(args.capacity, reset_when_empty=args.reset)
    try:
        _run(queue, _tokens())
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())