"""String drills: bracket checks, reversal, delimited reads and pair input."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TextIO

__all__ = [
    "is_valid_brackets",
    "has_redundant_brackets",
    "reverse_string",
    "reverse_with_stack",
    "is_palindrome_string",
    "read_until",
    "swap_steps",
    "read_pairs",
]

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


def is_valid_brackets(s: str) -> bool:
    """Return whether ``s`` is a well-nested sequence of (), {} and [].

    Every character that is not an opening bracket is treated as a closing
    one, so any other character makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def has_redundant_brackets(s: str) -> bool:
    """Return whether some pair of parentheses in ``s`` encloses no operator."""
    stack: list[str] = []
    for ch in s:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while stack and stack[-1] != "(":
                if stack.pop() in _OPERATORS:
                    redundant = False
            if stack:
                stack.pop()
            if redundant:
                return True
    return False


def reverse_string(s: str) -> str:
    """Return ``s`` reversed."""
    return s[::-1]


def reverse_with_stack(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place by pushing every item onto a stack."""
    stack = list(chars)
    for index in range(len(chars)):
        chars[index] = stack.pop()


def is_palindrome_string(s: str) -> bool:
    """Return whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def read_until(stream: TextIO, delimiter: str = "$") -> str:
    """Read from ``stream`` up to ``delimiter`` or end of input.

    The delimiter is consumed but not included in the result.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = []
    while (ch := stream.read(1)) and ch != delimiter:
        parts.append(ch)
    return "".join(parts)


def swap_steps(s: str) -> list[tuple[str, str]]:
    """Return the character pairs swapped, outermost first, when reversing ``s``."""
    half = len(s) // 2
    return list(zip(s[:half], reversed(s[len(s) - half :])))


def read_pairs(tokens: Iterable[str | int] | str) -> list[tuple[int, int]]:
    """Read integer pairs from ``tokens`` until the pair ``(-1, -1)``.

    Reading also stops at the first token that is not an integer or when the
    tokens run out; an incomplete final pair is dropped. A string is split on
    whitespace.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    numbers = iter(tokens)
    pairs: list[tuple[int, int]] = []
    while True:
        try:
            x = int(next(numbers))
            y = int(next(numbers))
        except (StopIteration, ValueError, TypeError):
            return pairs
        if x == -1 and y == -1:
            return pairs
        pairs.append((x, y))