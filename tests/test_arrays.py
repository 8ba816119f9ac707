import pytest

from dsadrills.arrays import (
    array_sum,
    catch_thieves,
    contains,
    min_max,
    reverse_in_place,
    swap_alternate,
)


@pytest.mark.parametrize("values", [[1, 4, 0, 5, -2, 15], [2, 6, 3, 9, 4], [], [42]])
def test_reverse_in_place(values):
    items = list(values)
    assert reverse_in_place(items) is None
    assert items == values[::-1]
    reverse_in_place(items)
    assert items == values


def test_swap_alternate_even_example():
    items = [5, 2, 9, 4, 7, 6, 1, 0]
    swap_alternate(items)
    assert items == [2, 5, 4, 9, 6, 7, 0, 1]


@pytest.mark.parametrize("values", [[11, 33, 9, 76, 43], [5, 2, 9, 4, 7, 6, 1, 0], [], [8]])
def test_swap_alternate_invariants(values):
    items = list(values)
    swap_alternate(items)
    assert sorted(items) == sorted(values)
    if len(values) % 2:
        assert items[-1] == values[-1]
    for i in range(0, len(values) - 1, 2):
        assert items[i] == values[i + 1]
        assert items[i + 1] == values[i]
    swap_alternate(items)
    assert items == values


@pytest.mark.parametrize("values", [[3], [5, -1, 7, 7, 0], [-4, -9, -2]])
def test_min_max(values):
    smallest, largest = min_max(values)
    assert smallest in values and largest in values
    assert all(smallest <= v <= largest for v in values)


def test_min_max_accepts_iterator():
    assert min_max(iter([2, 8, 5])) == (2, 8)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_array_sum():
    first, second = [1, 2, 3], [-7, 10]
    assert array_sum([]) == 0
    assert array_sum(first + second) == array_sum(first) + array_sum(second)
    assert array_sum([5]) == 5


SEARCH_DATA = [25, 7, -2, 10, 22, -2, 0, 5, 22, 1]


@pytest.mark.parametrize("key", SEARCH_DATA)
def test_contains_present(key):
    assert contains(SEARCH_DATA, key) is True


@pytest.mark.parametrize("key", [99, -3, 6])
def test_contains_absent(key):
    assert contains(SEARCH_DATA, key) is False


def test_catch_thieves_examples():
    assert catch_thieves(["P", "T", "T", "P", "T"], 1) == 2
    assert catch_thieves(["T", "T", "P", "P", "T", "P"], 2) == 3


@pytest.mark.parametrize(
    "cells",
    [list("PTTPT"), list("TTPPTP"), list("PPPP"), list("TTTT"), list("TPTPTPTP")],
)
@pytest.mark.parametrize("k", [1, 2, 5])
def test_catch_thieves_bounded(cells, k):
    caught = catch_thieves(cells, k)
    assert 0 <= caught <= min(cells.count("P"), cells.count("T"))


def test_catch_thieves_needs_both_sides():
    assert catch_thieves(list("PPPP"), 3) == 0
    assert catch_thieves(list("TTTT"), 3) == 0
    assert catch_thieves([], 1) == 0


def test_catch_thieves_zero_range():
    assert catch_thieves(list("PTPT"), 0) == 0


def test_catch_thieves_grows_with_range():
    cells = list("PTTPT")
    counts = [catch_thieves(cells, k) for k in range(6)]
    assert counts == sorted(counts)