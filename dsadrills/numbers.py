"""Small number drills: sequences, primes, combinatorics and digit tricks."""

from __future__ import annotations

import math
from enum import Enum

__all__ = [
    "CharKind",
    "fibonacci",
    "fibonacci_after_seed",
    "is_prime",
    "factorial",
    "n_cr",
    "power",
    "is_power_of_two",
    "classify_char",
    "sum_to",
    "subtract_product_and_sum",
    "reverse_digits",
    "is_palindrome_number",
    "square_pattern",
]


class CharKind(Enum):
    """The class an ASCII character falls into."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    INVALID = "invalid"


def _fibonacci_terms():
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci terms, starting from 0."""
    terms = _fibonacci_terms()
    return [next(terms) for _ in range(max(n, 0))]


def fibonacci_after_seed(n: int) -> list[int]:
    """Return the seed terms 0 and 1 followed by ``n`` further terms."""
    return fibonacci(max(n, 0) + 2)


def is_prime(n: int) -> bool:
    """Return whether ``n`` has no divisor between 2 and ``n - 1``.

    Values below 2 have no such divisor and are therefore reported as prime.
    """
    if n < 4:
        return True
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def factorial(n: int) -> int:
    """Return ``n!``; values of ``n`` below 1 give 1."""
    return math.prod(range(1, n + 1))


def n_cr(n: int, r: int) -> int:
    """Return ``n! / ((n - r)! * r!)`` using integer division."""
    return factorial(n) // (factorial(n - r) * factorial(r))


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def is_power_of_two(n: int) -> bool:
    """Return whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def classify_char(ch: str) -> CharKind:
    """Classify a single character as ASCII lower case, upper case or digit."""
    if len(ch) != 1:
        raise ValueError("expected exactly one character")
    if "a" <= ch <= "z":
        return CharKind.LOWER
    if "A" <= ch <= "Z":
        return CharKind.UPPER
    if "0" <= ch <= "9":
        return CharKind.DIGIT
    return CharKind.INVALID


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``; values below 1 give 0."""
    return n * (n + 1) // 2 if n > 0 else 0


def _signed_digits(n: int) -> list[int]:
    sign = -1 if n < 0 else 1
    return [sign * int(d) for d in str(abs(n))] if n else []


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum.

    Digits of a negative number carry its sign, and 0 has no digits.
    """
    digits = _signed_digits(n)
    return math.prod(digits) - sum(digits)


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Return whether ``n`` reads the same with its digits reversed."""
    return reverse_digits(n) == n


def square_pattern(n: int) -> str:
    """Return an ``n`` by ``n`` square of stars, one row per line."""
    return ("*" * n + "\n") * max(n, 0)