"""Searching exercises: binary search variants, placement search, square root, selection."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or ``None`` if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return None


def rotated_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in a rotated ascending sequence, or ``None``."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= key <= values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] <= key <= values[end]:
            start = mid + 1
        else:
            end = mid - 1
    return None


def _occurrence(values: Sequence[int], key: int, *, leftmost: bool) -> int | None:
    start, end = 0, len(values) - 1
    found = None
    while start <= end:
        mid = (start + end) // 2
        if values[mid] == key:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif values[mid] > key:
            end = mid - 1
        else:
            start = mid + 1
    return found


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the lowest index of ``key`` in ascending ``values``, or ``None``."""
    return _occurrence(values, key, leftmost=True)


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the highest index of ``key`` in ascending ``values``, or ``None``."""
    return _occurrence(values, key, leftmost=False)


def frequency(values: Sequence[int], key: int) -> int:
    """Return how many times ``key`` occurs in ascending ``values``."""
    first = first_occurrence(values, key)
    if first is None:
        return 0
    return last_occurrence(values, key) - first + 1


def can_place_birds(nests: Sequence[int], birds: int, separation: int) -> bool:
    """Tell whether ``birds`` birds fit in sorted ``nests`` at least ``separation`` apart."""
    if not nests:
        raise ValueError("no nests given")
    placed = 1
    location = nests[0]
    for current in nests[1:]:
        if current - location >= separation:
            placed += 1
            location = current
            if placed == birds:
                return True
    return False


def max_min_separation(nests: Sequence[int], birds: int) -> int | None:
    """Return the largest minimum separation for placing the birds, or ``None``."""
    if not nests:
        raise ValueError("no nests given")
    ordered = sorted(nests)
    low, high = 0, ordered[-1] - ordered[0]
    best = None
    while low <= high:
        mid = (low + high) // 2
        if can_place_birds(ordered, birds, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def square_root(number: int, places: int) -> float:
    """Return the square root of ``number`` truncated to ``places`` decimal places."""
    if number < 0:
        raise ValueError("square root of a negative number")
    low, high = 0, number
    answer = 0.0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == number:
            return float(mid)
        if square < number:
            answer = float(mid)
            low = mid + 1
        else:
            high = mid - 1

    step = 0.1
    for _ in range(places):
        while answer * answer <= number:
            answer += step
        answer -= step
        step /= 10.0
    return answer


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` around its last element, in place.

    Returns the final index of the pivot; smaller elements end up before it.
    """
    pivot = values[end]
    boundary = start - 1
    for index in range(start, end):
        if values[index] < pivot:
            boundary += 1
            values[boundary], values[index] = values[index], values[boundary]
    values[boundary + 1], values[end] = values[end], values[boundary + 1]
    return boundary + 1


def quickselect(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest element (counting from 0)."""
    if not 0 <= k < len(values):
        raise IndexError("k is out of range")
    work = list(values)
    start, end = 0, len(work) - 1
    while True:
        pivot_index = partition(work, start, end)
        if pivot_index == k:
            return work[pivot_index]
        if k < pivot_index:
            end = pivot_index - 1
        else:
            start = pivot_index + 1