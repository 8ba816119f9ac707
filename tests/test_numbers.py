import pytest

from dsadrills.numbers import (
    CharKind,
    classify_char,
    factorial,
    fibonacci,
    fibonacci_after_seed,
    is_palindrome_number,
    is_power_of_two,
    is_prime,
    n_cr,
    power,
    reverse_digits,
    square_pattern,
    subtract_product_and_sum,
    sum_to,
)


def test_fibonacci_starts_with_seed():
    assert fibonacci(2) == [0, 1]
    assert fibonacci(0) == []
    assert fibonacci(-3) == []


@pytest.mark.parametrize("n", [3, 10, 25])
def test_fibonacci_recurrence(n):
    terms = fibonacci(n)
    assert len(terms) == n
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


@pytest.mark.parametrize("n", [0, 1, 7, 20])
def test_fibonacci_after_seed_has_two_extra_terms(n):
    assert fibonacci_after_seed(n) == fibonacci(n + 2)
    assert fibonacci_after_seed(n)[:2] == [0, 1]


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97])
def test_primes(p):
    assert is_prime(p) is True


@pytest.mark.parametrize("p,q", [(2, 2), (3, 5), (7, 11), (13, 13)])
def test_products_are_not_prime(p, q):
    assert is_prime(p * q) is False


def test_small_values_have_no_divisor():
    assert is_prime(1) is True
    assert is_prime(0) is True


@pytest.mark.parametrize("n", [1, 2, 5, 12])
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_zero():
    assert factorial(0) == 1


@pytest.mark.parametrize("n", [1, 4, 6, 10])
def test_n_cr_identities(n):
    assert n_cr(n, 0) == 1
    assert n_cr(n, n) == 1
    assert n_cr(n, 1) == n
    for r in range(n + 1):
        assert n_cr(n, r) == n_cr(n, n - r)
    for r in range(1, n):
        assert n_cr(n, r) == n_cr(n - 1, r - 1) + n_cr(n - 1, r)


def test_power_worked_example():
    assert power(2, 10) == 1024


@pytest.mark.parametrize("base", [-3, 0, 1, 2, 7])
@pytest.mark.parametrize("exponent", [0, 1, 2, 5, 13])
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@pytest.mark.parametrize("k", range(0, 20))
def test_powers_of_two(k):
    assert is_power_of_two(power(2, k)) is True


@pytest.mark.parametrize("k", range(1, 12))
def test_one_more_than_power_of_two(k):
    assert is_power_of_two(2**k + 1) is False


@pytest.mark.parametrize("n", [0, -1, -8])
def test_non_positive_not_power_of_two(n):
    assert is_power_of_two(n) is False


@pytest.mark.parametrize(
    "ch,kind",
    [
        ("a", CharKind.LOWER),
        ("z", CharKind.LOWER),
        ("A", CharKind.UPPER),
        ("Z", CharKind.UPPER),
        ("0", CharKind.DIGIT),
        ("9", CharKind.DIGIT),
        ("$", CharKind.INVALID),
        ("é", CharKind.INVALID),
    ],
)
def test_classify_char(ch, kind):
    assert classify_char(ch) is kind


@pytest.mark.parametrize("text", ["", "ab"])
def test_classify_char_needs_one_character(text):
    with pytest.raises(ValueError):
        classify_char(text)


@pytest.mark.parametrize("n", [1, 2, 10, 100])
def test_sum_to_step(n):
    assert sum_to(n) - sum_to(n - 1) == n


def test_sum_to_non_positive():
    assert sum_to(0) == 0
    assert sum_to(-5) == 0


def test_subtract_product_and_sum_example():
    assert subtract_product_and_sum(234) == 15


def test_subtract_product_and_sum_of_zero():
    assert subtract_product_and_sum(0) == 1


@pytest.mark.parametrize("d", range(1, 10))
def test_single_digit_cancels(d):
    assert subtract_product_and_sum(d) == 0


@pytest.mark.parametrize("n", [12, 345, 9081, 7])
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n
    assert reverse_digits(-n) == -reverse_digits(n)


@pytest.mark.parametrize("n,expected", [(121, True), (12321, True), (7, True), (123, False)])
def test_is_palindrome_number(n, expected):
    assert is_palindrome_number(n) is expected


@pytest.mark.parametrize("n", [1, 3, 6])
def test_square_pattern_shape(n):
    lines = square_pattern(n).splitlines()
    assert len(lines) == n
    assert all(line == "*" * n for line in lines)
    assert square_pattern(n).endswith("\n")


def test_square_pattern_empty():
    assert square_pattern(0) == ""