"""Stack drills: a bounded stack, two stacks in one array and list-based recursions.

Functions taking a ``stack`` treat a list as a stack whose top is its last item.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "BoundedStack",
    "TwoStacks",
    "delete_middle",
    "insert_at_bottom",
    "reverse_stack",
    "sort_stack",
]


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when taking from an empty stack."""


class BoundedStack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value``; raise :class:`StackOverflowError` when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return whether the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


class TwoStacks:
    """Two stacks sharing one fixed array, growing towards each other."""

    def __init__(self, size: int = 3) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _check_room(self) -> None:
        if self._top2 - self._top1 <= 1:
            raise StackOverflowError("shared array is full")

    def push1(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        self._check_room()
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        self._check_room()
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        if self._top1 == -1:
            raise StackUnderflowError("first stack is empty")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        if self._top2 == self.size:
            raise StackUnderflowError("second stack is empty")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the middle item of ``stack``.

    Counting from the top starting at 0, the item at ``len(stack) // 2`` goes.
    """
    if not stack:
        raise StackUnderflowError("stack is empty")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def insert_at_bottom(stack: list[Any], value: Any) -> None:
    """Place ``value`` beneath every item of ``stack``."""
    if not stack:
        stack.append(value)
        return
    top = stack.pop()
    insert_at_bottom(stack, value)
    stack.append(top)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse ``stack`` in place so its bottom becomes its top."""
    if not stack:
        return
    top = stack.pop()
    reverse_stack(stack)
    insert_at_bottom(stack, top)


def _sorted_insert(stack: list[Any], value: Any) -> None:
    if not stack or stack[-1] < value:
        stack.append(value)
        return
    top = stack.pop()
    _sorted_insert(stack, value)
    stack.append(top)


def sort_stack(stack: list[Any]) -> None:
    """Sort ``stack`` in place so that the largest item is on top."""
    if not stack:
        return
    top = stack.pop()
    sort_stack(stack)
    _sorted_insert(stack, top)