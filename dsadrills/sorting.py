"""In-place merge sort and quick sort over mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = ["merge", "merge_sort", "partition", "quick_sort"]


def _check_bounds(items: MutableSequence[Any], start: int, end: int) -> None:
    if not 0 <= start <= end < len(items):
        raise IndexError(
            f"range [{start}, {end}] is outside a sequence of length {len(items)}"
        )


def merge(items: MutableSequence[Any], start: int, end: int) -> None:
    """Merge the two sorted halves of ``items[start:end + 1]`` in place.

    The halves split at ``(start + end) // 2``, which belongs to the left half.
    When two values compare equal the one from the right half goes first.
    """
    _check_bounds(items, start, end)
    mid = (start + end) // 2
    left = list(items[start : mid + 1])
    right = list(items[mid + 1 : end + 1])

    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[start : end + 1] = merged


def _merge_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    if start >= end:
        return
    mid = (start + end) // 2
    _merge_sort(items, start, mid)
    _merge_sort(items, mid + 1, end)
    merge(items, start, end)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in ascending order in place using merge sort."""
    if items:
        _merge_sort(items, 0, len(items) - 1)


def partition(items: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``items[start:end + 1]`` around its first element.

    The pivot is moved to its final sorted position, every value not greater
    than the pivot ends up to its left and every greater value to its right.
    Returns the pivot's new index.
    """
    _check_bounds(items, start, end)
    pivot = items[start]
    smaller = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + smaller
    items[start], items[pivot_index] = items[pivot_index], items[start]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot and i < pivot_index:
            i += 1
        while items[j] > pivot and j > pivot_index:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in ascending order in place using quick sort."""
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))