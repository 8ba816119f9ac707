"""A singly linked list with insertion, deletion, reversal and loop detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False, repr=False)
class Node:
    """One cell of a linked list; nodes compare and hash by identity."""

    value: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList:
    """A singly linked list that tracks both its head and its tail.

    Positions are 1-based. The tail's ``next`` pointer may be redirected with
    :meth:`close_loop`; iteration still stops at the tail, so a list with a
    loop can be inspected safely.
    """

    def __init__(self) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> LinkedList:
        """Build a list holding ``values`` in order."""
        linked = cls()
        for value in values:
            linked.add_at_end(value)
        return linked

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            if node is self.tail:
                return
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(f"position {position} is past the end of the list")

    def _require_no_loop(self) -> None:
        if self.has_loop():
            raise ValueError("the list contains a loop")

    def add_at_begin(self, value: Any) -> Node:
        """Insert ``value`` before the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        return node

    def add_at_end(self, value: Any) -> Node:
        """Append ``value`` after the tail and return its node."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        return node

    def insert_at(self, position: int, value: Any) -> Node:
        """Insert ``value`` so that it ends up at ``position`` and return its node.

        ``position`` may be one past the last element, which appends.
        """
        if position < 1:
            raise IndexError("positions start at 1")
        if position == 1:
            return self.add_at_begin(value)
        previous = self._node_at(position - 1)
        if previous is self.tail:
            return self.add_at_end(value)
        node = Node(value, previous.next)
        previous.next = node
        return node

    def delete_at(self, position: int) -> Any:
        """Remove the element at ``position`` and return its value."""
        if position < 1:
            raise IndexError("positions start at 1")
        if position == 1:
            node = self.head
            if node is None:
                raise IndexError("delete from an empty list")
            if node is self.tail:
                self.head = self.tail = None
            else:
                self.head = node.next
            node.next = None
            return node.value
        previous = self._node_at(position - 1)
        if previous is self.tail:
            raise IndexError(f"position {position} is past the end of the list")
        node = previous.next
        previous.next = node.next
        if node is self.tail:
            self.tail = previous
        node.next = None
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._require_no_loop()
        previous = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head, self.tail = self.tail, self.head

    def reverse_in_groups(self, k: int) -> None:
        """Reverse every run of ``k`` nodes in place; a short last run is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        self._require_no_loop()
        new_head = None
        previous_tail = None
        current = self.head
        while current is not None:
            group_head = current
            previous = None
            for _ in range(k):
                if current is None:
                    break
                following = current.next
                current.next = previous
                previous = current
                current = following
            if previous_tail is None:
                new_head = previous
            else:
                previous_tail.next = previous
            previous_tail = group_head
        self.head = new_head
        self.tail = previous_tail

    def close_loop(self, node: Node | None) -> None:
        """Point the tail at ``node``, which must belong to the list.

        Passing ``None`` opens a previously closed loop.
        """
        if node is None:
            if self.tail is not None:
                self.tail.next = None
            return
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")
        self.tail.next = node

    def has_loop(self) -> bool:
        """Return whether following ``next`` pointers ever revisits a node."""
        seen: set[Node] = set()
        node = self.head
        while node is not None:
            if node in seen:
                return True
            seen.add(node)
            node = node.next
        return False

    def _meeting_point(self) -> Node | None:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def has_loop_floyd(self) -> bool:
        """Return whether the list has a loop, using a slow and a fast pointer."""
        return self._meeting_point() is not None

    def loop_start(self) -> Node | None:
        """Return the node where the loop begins, or ``None`` without a loop."""
        meeting = self._meeting_point()
        if meeting is None:
            return None
        node = self.head
        while node is not meeting:
            node = node.next
            meeting = meeting.next
        return node

    def is_circular(self) -> bool:
        """Return whether the tail links back to the head."""
        return self.head is not None and self.tail.next is self.head

    def is_palindrome(self) -> bool:
        """Return whether the values read the same in both directions."""
        values = list(self)
        return values == values[::-1]