import random

import pytest

from ninetools.pmerge import (
    build_main_chain,
    build_pending,
    find_duplicate,
    ford_johnson_sort,
    group_pairs,
    insert_pending,
    is_sorted,
    jacobsthal,
    merge,
    merge_sort,
    order_pairs,
)


def test_jacobsthal_sequence():
    assert [jacobsthal(n) for n in range(9)] == [0, 1, 1, 3, 5, 11, 21, 43, 85]


def test_jacobsthal_negative_is_zero():
    assert jacobsthal(-4) == jacobsthal(0)


@pytest.mark.parametrize("n", range(2, 20))
def test_jacobsthal_recurrence(n):
    assert jacobsthal(n) == jacobsthal(n - 1) + 2 * jacobsthal(n - 2)


def test_find_duplicate():
    assert find_duplicate([3, 1, 3, 7]) == 3
    assert find_duplicate([5, 2, 9]) is None


def test_find_duplicate_returns_smallest():
    assert find_duplicate([8, 4, 8, 4]) == 4


def test_is_sorted():
    assert is_sorted([1, 2, 2, 5])
    assert is_sorted([])
    assert not is_sorted([3, 5, 9, 7, 4])


def test_group_pairs():
    assert group_pairs([3, 5, 9, 7]) == [(3, 5), (9, 7)]


def test_group_pairs_odd_raises():
    with pytest.raises(ValueError):
        group_pairs([1, 2, 3])


def test_order_pairs():
    assert order_pairs([(3, 5), (9, 7)]) == [(5, 3), (9, 7)]


def test_merge_ties_take_right_first():
    assert merge([(2, 0)], [(2, 1)]) == [(2, 1), (2, 0)]


def test_merge_sort_orders_by_first():
    pairs = [(9, 7), (5, 3), (12, 1), (6, 0)]
    result = merge_sort(pairs)
    assert [p[0] for p in result] == sorted(p[0] for p in pairs)
    assert sorted(result) == sorted(pairs)


def test_chain_and_pending():
    pairs = [(5, 3), (9, 7)]
    assert build_main_chain(pairs) == [3, 5, 9]
    assert build_pending(pairs) == [7]
    assert build_main_chain([]) == []
    assert build_pending([]) == []


def test_insert_pending_keeps_order():
    chain = [1, 4, 9, 16, 25]
    pending = [20, 2, 8, 30, 0, 12, 5]
    result = insert_pending(chain, pending)
    assert result == sorted(chain + pending)
    assert chain == [1, 4, 9, 16, 25]


def test_sort_makefile_example():
    values = [3, 5, 9, 7, 4]
    assert ford_johnson_sort(values) == sorted(values)
    assert values == [3, 5, 9, 7, 4]


@pytest.mark.parametrize("size", list(range(0, 40)) + [3000])
def test_sort_random(size):
    rng = random.Random(size)
    values = rng.sample(range(100000), size)
    assert ford_johnson_sort(values) == sorted(values)


def test_sort_with_duplicates():
    rng = random.Random(7)
    values = [rng.randrange(10) for _ in range(101)]
    assert ford_johnson_sort(values) == sorted(values)


def test_single_value():
    assert ford_johnson_sort([42]) == [42]