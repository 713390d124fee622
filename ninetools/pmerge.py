"""Merge-insertion (Ford-Johnson style) sorting of integer sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence

Pair = tuple[int, int]


def jacobsthal(n: int) -> int:
    """Return the ``n``-th Jacobsthal number (0, 1, 1, 3, 5, 11, ...)."""
    if n <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, current + 2 * previous
    return current


def find_duplicate(values: Iterable[int]) -> int | None:
    """Return the smallest repeated value, or ``None`` if all are distinct."""
    ordered = sorted(values)
    for left, right in zip(ordered, ordered[1:]):
        if left == right:
            return left
    return None


def is_sorted(values: Sequence[int]) -> bool:
    """True when ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def group_pairs(values: Sequence[int]) -> list[Pair]:
    """Group consecutive values into pairs; the length must be even."""
    if len(values) % 2:
        raise ValueError("cannot pair an odd number of values")
    items = iter(values)
    return list(zip(items, items))


def order_pairs(pairs: Iterable[Pair]) -> list[Pair]:
    """Put the larger element of each pair first."""
    return [(a, b) if a >= b else (b, a) for a, b in pairs]


def merge(left: Sequence[Pair], right: Sequence[Pair]) -> list[Pair]:
    """Merge two lists ordered by their first elements; ties take from the right."""
    merged: list[Pair] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i][0] < right[j][0]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(pairs: Sequence[Pair]) -> list[Pair]:
    """Sort pairs by their first element with a top-down merge sort."""
    if len(pairs) <= 1:
        return list(pairs)
    mid = len(pairs) // 2
    return merge(merge_sort(pairs[:mid]), merge_sort(pairs[mid:]))


def build_main_chain(pairs: Sequence[Pair]) -> list[int]:
    """The first pair's smaller element followed by every larger element."""
    if not pairs:
        return []
    return [pairs[0][1]] + [larger for larger, _ in pairs]


def build_pending(pairs: Sequence[Pair]) -> list[int]:
    """The smaller elements of every pair but the first."""
    return [smaller for _, smaller in pairs[1:]]


def insert_pending(chain: Sequence[int], pending: Sequence[int]) -> list[int]:
    """Binary-insert ``pending`` into the sorted ``chain``.

    Elements at Jacobsthal indices (starting from J(3)) go first, the rest in order.
    """
    result = list(chain)
    inserted: set[int] = set()
    n = 3
    while True:
        index = jacobsthal(n)
        n += 1
        if index >= len(pending):
            break
        bisect.insort_left(result, pending[index])
        inserted.add(index)
    for index, value in enumerate(pending):
        if index not in inserted:
            bisect.insort_left(result, value)
    return result


def ford_johnson_sort(values: Sequence[int]) -> list[int]:
    """Return ``values`` sorted in ascending order by merge insertion."""
    items = list(values)
    straggler = items.pop() if len(items) % 2 else None
    pairs = merge_sort(order_pairs(group_pairs(items)))
    result = insert_pending(build_main_chain(pairs), build_pending(pairs))
    if straggler is not None:
        bisect.insort_left(result, straggler)
    return result