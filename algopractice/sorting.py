"""Sorting exercises: merge sort, quick sort, inversions, heap order and special sorts."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from itertools import combinations

from algopractice.searching import partition


def _merge(left: list, right: list) -> tuple[list, int]:
    """Merge two ascending lists; also count pairs where a right item precedes left ones."""
    merged = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            inversions += len(left) - i
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(values: list) -> tuple[list, int]:
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged, cross = _merge(left, right)
    return merged, left_count + right_count + cross


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list using merge sort."""
    return _sort_and_count(list(values))[0]


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list using quick sort with the last element as pivot."""
    work = list(values)

    def _sort(start: int, end: int) -> None:
        while start < end:
            pivot = partition(work, start, end)
            if pivot - start < end - pivot:
                _sort(start, pivot - 1)
                start = pivot + 1
            else:
                _sort(pivot + 1, end)
                end = pivot - 1

    _sort(0, len(work) - 1)
    return work


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` via merge sort."""
    return _sort_and_count(list(values))[1]


def count_inversions_brute(values: Sequence[int]) -> int:
    """Count inversions by checking every pair."""
    return sum(1 for a, b in combinations(values, 2) if a > b)


class _Descending:
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __lt__(self, other: "_Descending") -> bool:
        return other.value < self.value


def heap_ordered(values: Iterable, descending: bool = False) -> list:
    """Return the values in the order they leave a min-heap (or max-heap)."""
    if descending:
        heap = [_Descending(v) for v in values]
        heapq.heapify(heap)
        return [heapq.heappop(heap).value for _ in range(len(heap))]
    heap = list(values)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence holding only 0, 1 and 2 by counting."""
    counts = Counter(values)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"unexpected values: {sorted(unexpected)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def _concat_order(x: str, y: str) -> int:
    if x + y < y + x:
        return -1
    if y + x < x + y:
        return 1
    return 0


def smallest_concatenation(words: Iterable[str]) -> str:
    """Return the lexicographically smallest string formed by joining all words."""
    return "".join(sorted(words, key=cmp_to_key(_concat_order)))