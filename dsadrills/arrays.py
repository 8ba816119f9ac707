"""Array drills: in-place reordering, aggregates, search and a greedy match."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TypeVar

__all__ = [
    "reverse_in_place",
    "swap_alternate",
    "min_max",
    "array_sum",
    "contains",
    "catch_thieves",
]

T = TypeVar("T")


def reverse_in_place(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place."""
    items[:] = items[::-1]


def swap_alternate(items: MutableSequence[T]) -> None:
    """Swap each element at an even index with its right neighbour, in place.

    A trailing element without a neighbour stays where it is.
    """
    paired = len(items) - len(items) % 2
    items[0:paired:2], items[1:paired:2] = items[1:paired:2], items[0:paired:2]


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest value as ``(minimum, maximum)``."""
    values = list(values)
    if not values:
        raise ValueError("min_max() needs at least one value")
    return min(values), max(values)


def array_sum(values: Iterable[int]) -> int:
    """Return the sum of ``values``."""
    return sum(values)


def contains(values: Iterable[T], key: T) -> bool:
    """Return whether ``key`` occurs among ``values``."""
    return any(value == key for value in values)


def catch_thieves(cells: Sequence[str], k: int) -> int:
    """Return how many thieves can be caught.

    ``cells`` holds ``'P'`` for a policeman and ``'T'`` for a thief. Each
    policeman catches at most one thief no more than ``k`` cells away.
    """
    police = [i for i, cell in enumerate(cells) if cell == "P"]
    thieves = [i for i, cell in enumerate(cells) if cell == "T"]
    caught = 0
    t = p = 0
    while t < len(thieves) and p < len(police):
        if abs(thieves[t] - police[p]) <= k:
            caught += 1
            t += 1
            p += 1
        elif thieves[t] < police[p]:
            t += 1
        else:
            p += 1
    return caught