"""Array exercises: reversal, rotation, extremes, subarrays and set operations."""

from __future__ import annotations

from collections.abc import Sequence


def reverse_array(values: Sequence[int]) -> list[int]:
    """Return the elements of ``values`` in reverse order."""
    result = list(values)
    start, end = 0, len(result) - 1
    while start < end:
        result[start], result[end] = result[end], result[start]
        start += 1
        end -= 1
    return result


def rotate_right(values: Sequence[int]) -> list[int]:
    """Rotate the sequence one place to the right; the last element comes first."""
    if not values:
        return []
    return [values[-1], *values[:-1]]


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(minimum, maximum)`` of a non-empty sequence."""
    if not values:
        raise ValueError("min_max() needs at least one value")
    if len(values) == 1:
        return values[0], values[0]
    first, second = values[0], values[1]
    low, high = (second, first) if first > second else (first, second)
    for value in values[2:]:
        if value > high:
            high = value
        elif value < low:
            low = value
    return low, high


def shift_negatives_left(values: Sequence[int]) -> list[int]:
    """Move negative numbers to the front using two pointers from both ends."""
    result = list(values)
    left, right = 0, len(result) - 1
    while left <= right:
        lval, rval = result[left], result[right]
        if lval < 0 and rval < 0:
            left += 1
        elif lval > 0 and rval < 0:
            result[left], result[right] = rval, lval
            left += 1
            right -= 1
        elif lval > 0 and rval > 0:
            right -= 1
        else:
            left += 1
            right -= 1
    return result


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are given, most significant first."""
    if not digits:
        raise ValueError("plus_one() needs at least one digit")
    result = list(digits)
    carry = 1
    for index in reversed(range(len(result))):
        if carry != 1:
            break
        total = result[index] + 1
        carry, result[index] = divmod(total, 10)
    if carry == 1:
        result.insert(0, 1)
    return result


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``values``."""
    if not values:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct elements of both sequences in ascending order."""
    return sorted({*first, *second})


def intersection_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common elements of two ascending sequences, pairing duplicates."""
    common = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            common.append(second[j])
            i += 1
            j += 1
    return common


def windows_with_sum(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return inclusive ``(start, end)`` index pairs of windows summing to ``target``.

    A sliding window is grown to the right and shrunk from the left while its
    sum exceeds the target; this assumes non-negative values.
    """
    found = []
    start = 0
    total = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start <= end:
            total -= values[start]
            start += 1
        if total == target:
            found.append((start, end))
    return found