"""A fixed-capacity stack of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator


class StackError(Exception):
    """Base class for stack errors."""


class StackOverflow(StackError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(StackError):
    """Raised when reading from an empty stack."""


class FixedStack:
    """A stack backed by a fixed number of slots, unused slots holding 0."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots = [0] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._top == -1

    def is_full(self) -> bool:
        return self._top == self.capacity - 1

    def __len__(self) -> int:
        return self._top + 1

    def push(self, value: int) -> None:
        """Put value on top; raise StackOverflow when full."""
        if self.is_full():
            raise StackOverflow("stack is full")
        self._top += 1
        self._slots[self._top] = value

    def pop(self) -> int:
        """Remove and return the top value, clearing its slot to 0."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        value = self._slots[self._top]
        self._slots[self._top] = 0
        self._top -= 1
        return value

    def _check_position(self, position: int) -> None:
        if position < 0 or position > self._top:
            raise IndexError(f"invalid position {position}")

    def peek(self, position: int | None = None) -> int:
        """Return the value at a 0-based position from the bottom, or the top value."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        if position is None:
            return self._slots[self._top]
        self._check_position(position)
        return self._slots[position]

    def change(self, position: int, value: int) -> None:
        """Overwrite the value at an occupied 0-based position."""
        self._check_position(position)
        self._slots[position] = value

    def slots(self) -> list[int]:
        """Return every slot from the highest to the lowest, empty ones as 0."""
        return self._slots[::-1]


_MENU = (
    "What operation do you want to perform? Select option number. Enter 0 to exit.\n"
    "1. push()\n"
    "2. pop()\n"
    "3. isEmpty()\n"
    "4. isFull()\n"
    "5. peek()\n"
    "6. count()\n"
    "7. change()\n"
    "8. display()\n"
    "9. Clear Screen()\n"
)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str = "") -> int:
    if prompt:
        print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError from None
    return int(token)


def _run(stack: FixedStack, tokens: Iterator[str]) -> None:
    while True:
        print(_MENU)
        try:
            option = _ask(tokens)
        except ValueError:
            print("Enter proper option number")
            continue
        if option == 0:
            return
        try:
            if option == 1:
                stack.push(_ask(tokens, "Enter an item to push in the stack: "))
            elif option == 2:
                print(f"Pop function called - popped value: {stack.pop()}")
            elif option == 3:
                print("Stack is Empty" if stack.is_empty() else "Stack is not Empty")
            elif option == 4:
                print("Stack is Full" if stack.is_full() else "Stack is not Full")
            elif option == 5:
                position = _ask(tokens, "Enter the position of item you want to peek: ")
                value = stack.peek(position)
                print(
                    f"Peek function called - value at position {position} is {value}"
                )
            elif option == 6:
                print(
                    "Count function called - Number of items in the stack: "
                    f"{len(stack)}"
                )
            elif option == 7:
                print("Change function called - ")
                position = _ask(tokens, "Enter position of item you want to change: ")
                value = _ask(tokens, "Enter value of item you want to change: ")
                stack.change(position, value)
                print(f"Value changed at location {position}")
            elif option == 8:
                print("Display function called - ")
                print("All values in the stack are: ")
                for slot in stack.slots():
                    print(slot)
            elif option == 9:
                print("\033[2J\033[H", end="", flush=True)
            else:
                print("Enter proper option number")
        except StackOverflow:
            print("Stack is overflow")
        except StackUnderflow:
            print("Stack is underflow")
        except IndexError:
            print("Invalid position")
        except ValueError:
            print("Invalid number")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive fixed-size stack.")
    parser.add_argument("--capacity", type=int, default=5, help="number of slots")
    args = parser.parse_args(argv)
    stack = FixedStack(args.capacity)
    try:
        _run(stack, _tokens())
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())