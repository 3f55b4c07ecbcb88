"""Printable patterns and short number sequences: triangles, FizzBuzz, Fibonacci, clock time."""

from __future__ import annotations

from itertools import count


def star_triangle(rows: int) -> list[str]:
    """Return a left-aligned triangle of stars, one line per row."""
    return ["* " * (row + 1) for row in range(rows)]


def right_aligned_triangle(rows: int) -> list[str]:
    """Return a triangle of stars whose rows end in the same column."""
    return [
        " " * (2 * rows - 2 - 2 * row) + "* " * (row + 1)
        for row in range(rows)
    ]


def pyramid(rows: int) -> list[str]:
    """Return a centred pyramid of stars."""
    return [" " * (2 * rows - 2 - row) + "* " * (row + 1) for row in range(rows)]


def number_rows(rows: int) -> list[str]:
    """Return rows where row ``n`` repeats the number ``n`` exactly ``n`` times."""
    return [f"{number} " * number for number in range(1, rows + 1)]


def number_sequence(rows: int) -> list[str]:
    """Return a triangle filled with consecutive numbers starting at 1."""
    numbers = count(1)
    return ["".join(f"{next(numbers)} " for _ in range(row + 1)) for row in range(rows)]


def letter_rows(rows: int) -> list[str]:
    """Return rows where each row repeats one letter, starting at ``A``."""
    return [f"{chr(ord('A') + row)} " * (row + 1) for row in range(rows)]


def letter_sequence(rows: int) -> list[str]:
    """Return a triangle filled with consecutive letters starting at ``A``."""
    codes = count(ord("A"))
    return ["".join(f"{chr(next(codes))} " for _ in range(row + 1)) for row in range(rows)]


def fizzbuzz(limit: int) -> list[str]:
    """Return the FizzBuzz words for the numbers 1 to ``limit``."""
    words = []
    for number in range(1, limit + 1):
        if number % 15 == 0:
            words.append("FizzBuzz")
        elif number % 5 == 0:
            words.append("Buzz")
        elif number % 3 == 0:
            words.append("Fizz")
        else:
            words.append(str(number))
    return words


def fibonacci_series(terms: int) -> list[int]:
    """Return the first ``terms`` Fibonacci numbers; the first two are always given."""
    series = [0, 1]
    while len(series) < terms:
        series.append(series[-1] + series[-2])
    return series


def digital_time(minutes: int) -> str:
    """Format a count of minutes as ``H:MM``."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    hours, rest = divmod(minutes, 60)
    return f"{hours}:{rest:02d}"