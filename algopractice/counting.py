"""Counting and heap exercises over points, values, cars and ropes."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class Car:
    """A cab identified by name at grid position ``(x, y)``."""

    name: str
    x: int
    y: int

    def distance_squared(self) -> int:
        """Return the squared distance from the origin."""
        return self.x * self.x + self.y * self.y


def count_rectangles(points: Iterable[tuple[int, int]]) -> int:
    """Count axis-aligned rectangles whose four corners are among the points."""
    unique = sorted({(x, y) for x, y in points})
    lookup = set(unique)
    found = 0
    for (x1, y1), (x2, y2) in combinations(unique, 2):
        if x1 == x2 or y1 == y2:
            continue
        if (x1, y2) in lookup and (x2, y1) in lookup:
            found += 1
    return found // 2


def count_right_triangles(points: Iterable[tuple[int, int]]) -> int:
    """Count right triangles with axis-parallel legs whose corners are among the points."""
    pts = [(x, y) for x, y in points]
    freq_x = Counter(x for x, _ in pts)
    freq_y = Counter(y for _, y in pts)
    return sum((freq_x[x] - 1) * (freq_y[y] - 1) for x, y in pts)


def count_gp_triplets(values: Sequence[int], ratio: int) -> int:
    """Count index triples ``i < j < k`` forming a geometric progression with ``ratio``."""
    if ratio == 0:
        raise ValueError("ratio must not be zero")
    right = Counter(values)
    left: Counter[int] = Counter()
    total = 0
    for value in values:
        right[value] -= 1
        if value % ratio == 0:
            total += left[value // ratio] * right[value * ratio]
        left[value] += 1
    return total


def longest_band(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    present = set(values)
    if not present:
        raise ValueError("longest_band() needs at least one value")
    best = 1
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def nearest_cars(cars: Iterable[Car], k: int) -> list[Car]:
    """Return the ``k`` cars nearest the origin, nearest first."""
    cars = list(cars)
    if not 0 <= k <= len(cars):
        raise ValueError("k must be between 0 and the number of cars")
    if k == 0:
        return []
    heap = [(-car.distance_squared(), -index, car) for index, car in enumerate(cars[:k])]
    heapq.heapify(heap)
    for index, car in enumerate(cars[k:], start=k):
        distance = car.distance_squared()
        if distance < -heap[0][0]:
            heapq.heapreplace(heap, (-distance, -index, car))
    return [car for _, _, car in sorted(heap, reverse=True)]


def min_rope_cost(ropes: Iterable[int]) -> int:
    """Return the least total cost of joining all ropes, paying each joined length."""
    heap = list(ropes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost