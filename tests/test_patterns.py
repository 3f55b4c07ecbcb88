import pytest

from algopractice.patterns import (
    digital_time,
    fibonacci_series,
    fizzbuzz,
    letter_rows,
    letter_sequence,
    number_rows,
    number_sequence,
    pyramid,
    right_aligned_triangle,
    star_triangle,
)


@pytest.mark.parametrize("rows", [1, 3, 6])
def test_star_triangle_row_counts(rows):
    lines = star_triangle(rows)
    assert len(lines) == rows
    assert [line.count("*") for line in lines] == list(range(1, rows + 1))
    assert all(set(line) <= {"*", " "} for line in lines)


def test_star_triangle_empty():
    assert star_triangle(0) == []


@pytest.mark.parametrize("rows", [1, 4, 7])
def test_right_aligned_lines_have_equal_length(rows):
    lines = right_aligned_triangle(rows)
    assert len({len(line) for line in lines}) == 1
    assert [line.count("*") for line in lines] == list(range(1, rows + 1))
    assert lines[-1] == star_triangle(rows)[-1]


@pytest.mark.parametrize("rows", [2, 5])
def test_pyramid_indentation_shrinks_by_one(rows):
    lines = pyramid(rows)
    indents = [len(line) - len(line.lstrip(" ")) for line in lines]
    assert [a - b for a, b in zip(indents, indents[1:])] == [1] * (rows - 1)
    assert [line.strip().split() for line in lines] == [
        line.strip().split() for line in star_triangle(rows)
    ]


def test_number_rows_repeat_row_number():
    lines = number_rows(5)
    for number, line in enumerate(lines, start=1):
        assert line.split() == [str(number)] * number


def test_number_sequence_is_consecutive():
    lines = number_sequence(5)
    flat = [int(token) for line in lines for token in line.split()]
    assert flat == list(range(1, len(flat) + 1))
    assert [len(line.split()) for line in lines] == [1, 2, 3, 4, 5]


def test_letter_rows_start_at_a():
    lines = letter_rows(4)
    assert lines[0] == "A "
    for index, line in enumerate(lines):
        assert set(line.split()) == {chr(ord("A") + index)}
        assert len(line.split()) == index + 1


def test_letter_sequence_is_consecutive():
    lines = letter_sequence(4)
    flat = [token for line in lines for token in line.split()]
    assert [ord(ch) for ch in flat] == list(range(ord("A"), ord("A") + len(flat)))


def test_fizzbuzz_words():
    words = fizzbuzz(15)
    assert len(words) == 15
    assert words[2] == "Fizz"
    assert words[4] == "Buzz"
    assert words[14] == "FizzBuzz"
    assert words[0] == "1"


def test_fizzbuzz_numbers_kept_when_not_divisible():
    for number, word in enumerate(fizzbuzz(40), start=1):
        if number % 3 and number % 5:
            assert word == str(number)


def test_fibonacci_recurrence():
    series = fibonacci_series(12)
    assert len(series) == 12
    assert series[:2] == [0, 1]
    for a, b, c in zip(series, series[1:], series[2:]):
        assert c == a + b


@pytest.mark.parametrize("terms", [0, 1, 2])
def test_fibonacci_always_gives_first_two(terms):
    assert fibonacci_series(terms) == [0, 1]


def test_digital_time_pads_minutes():
    assert digital_time(65) == "1:05"


@pytest.mark.parametrize("minutes", [0, 9, 59, 60, 600, 1439])
def test_digital_time_round_trip(minutes):
    hours, rest = digital_time(minutes).split(":")
    assert len(rest) == 2
    assert int(hours) * 60 + int(rest) == minutes


def test_digital_time_rejects_negative():
    with pytest.raises(ValueError):
        digital_time(-1)