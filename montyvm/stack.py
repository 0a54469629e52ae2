"""The data store of the Monty machine: a stack that can also act as a queue."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterator

_DIGITS = frozenset("0123456789")


class StackError(Exception):
    """Raised when an operation cannot be carried out on the current stack."""


class Mode(enum.Enum):
    """Where newly pushed values go: on top (LIFO) or at the bottom (FIFO)."""

    STACK = "stack"
    QUEUE = "queue"


def is_integer(text: str) -> bool:
    """Return True if *text* is an optional leading '-' followed by digits."""
    body = text[1:] if text.startswith("-") and len(text) > 1 else text
    return all(char in _DIGITS for char in body)


def _to_int32(value: int) -> int:
    """Wrap *value* into the range of a signed 32-bit integer."""
    return (value + 0x80000000) % 0x100000000 - 0x80000000


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


class MontyStack:
    """Integer container whose top is the first element when iterated."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()
        self.mode = Mode.STACK

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def push(self, value: int) -> None:
        """Add *value* on top in stack mode, at the bottom in queue mode."""
        value = _to_int32(int(value))
        if self.mode is Mode.STACK:
            self._items.appendleft(value)
        else:
            self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackError("can't pop an empty stack")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackError("stack empty")
        return self._items[0]

    def _require_two(self, name: str) -> None:
        if len(self._items) <= 1:
            raise StackError(f"can't {name}, stack too short")

    def swap(self) -> None:
        """Exchange the top two values."""
        self._require_two("swap")
        top = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(top)
        self._items.appendleft(second)

    def _combine(self, name: str, operation) -> None:
        self._require_two(name)
        top = self._items[0]
        second = self._items[1]
        result = operation(second, top)
        self._items.popleft()
        self._items[0] = _to_int32(result)

    def add(self) -> None:
        """Replace the top two values by their sum."""
        self._combine("add", lambda second, top: second + top)

    def sub(self) -> None:
        """Replace the top two values by the second minus the top."""
        self._combine("sub", lambda second, top: second - top)

    def mul(self) -> None:
        """Replace the top two values by their product."""
        self._combine("mul", lambda second, top: second * top)

    def div(self) -> None:
        """Replace the top two values by the second divided by the top."""
        self._require_two("div")
        if self._items[0] == 0:
            raise StackError("division by zero")
        self._combine("div", _trunc_div)

    def mod(self) -> None:
        """Replace the top two values by the remainder of second by top."""
        self._require_two("mod")
        if self._items[0] == 0:
            raise StackError("division by zero")
        self._combine(
            "mod", lambda second, top: second - top * _trunc_div(second, top)
        )

    def rotl(self) -> None:
        """Move the top value to the bottom."""
        if len(self._items) > 1:
            self._items.rotate(-1)

    def rotr(self) -> None:
        """Move the bottom value to the top."""
        if len(self._items) > 1:
            self._items.rotate(1)

    def use_stack(self) -> None:
        """Switch to LIFO pushing."""
        self.mode = Mode.STACK

    def use_queue(self) -> None:
        """Switch to FIFO pushing."""
        self.mode = Mode.QUEUE