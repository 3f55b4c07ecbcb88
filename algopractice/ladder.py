"""Ways to climb a ladder taking between 1 and ``max_jump`` steps at a time."""

from __future__ import annotations

from functools import lru_cache


def count_ways(steps: int, max_jump: int = 3) -> int:
    """Count the ways to climb ``steps`` steps by plain recursion."""
    if steps < 0:
        return 0
    if steps == 0:
        return 1
    return sum(count_ways(steps - jump, max_jump) for jump in range(1, max_jump + 1))


def count_ways_memo(steps: int, max_jump: int = 3) -> int:
    """Count the ways to climb ``steps`` steps by memoised recursion."""

    @lru_cache(maxsize=None)
    def ways(remaining: int) -> int:
        if remaining < 0:
            return 0
        if remaining == 0:
            return 1
        return sum(ways(remaining - jump) for jump in range(1, max_jump + 1))

    return ways(steps)


def count_ways_dp(steps: int, max_jump: int = 3) -> int:
    """Count the ways to climb ``steps`` steps with a bottom-up table."""
    if steps < 0:
        return 0
    table = [1] + [0] * steps
    for step in range(1, steps + 1):
        table[step] = sum(table[jump_from] for jump_from in range(max(0, step - max_jump), step))
    return table[steps]