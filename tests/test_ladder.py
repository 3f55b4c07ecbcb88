import pytest

from algopractice.ladder import count_ways, count_ways_dp, count_ways_memo


def test_known_value():
    assert count_ways(4, 3) == 7
    assert count_ways_memo(4, 3) == 7
    assert count_ways_dp(4, 3) == 7


def test_zero_steps_has_one_way():
    assert count_ways(0, 3) == 1
    assert count_ways_memo(0, 3) == 1
    assert count_ways_dp(0, 3) == 1


def test_negative_steps_have_no_way():
    assert count_ways(-2, 3) == 0
    assert count_ways_memo(-2, 3) == 0
    assert count_ways_dp(-2, 3) == 0


def test_single_jump_has_one_way():
    assert count_ways(9, 1) == 1
    assert count_ways_memo(9, 1) == 1
    assert count_ways_dp(9, 1) == 1


@pytest.mark.parametrize("steps", range(0, 15))
@pytest.mark.parametrize("max_jump", [1, 2, 3, 4])
def test_implementations_agree(steps, max_jump):
    expected = count_ways(steps, max_jump)
    assert count_ways_memo(steps, max_jump) == expected
    assert count_ways_dp(steps, max_jump) == expected


@pytest.mark.parametrize("max_jump", [2, 3, 5])
def test_recurrence(max_jump):
    for steps in range(max_jump, 20):
        previous = sum(count_ways_dp(steps - j, max_jump) for j in range(1, max_jump + 1))
        assert count_ways_dp(steps, max_jump) == previous


def test_default_max_jump_is_three():
    assert count_ways(10) == count_ways(10, 3)
    assert count_ways_dp(10) == count_ways_memo(10, 3)


def test_large_jump_limit_gives_powers_of_two():
    for steps in range(1, 12):
        assert count_ways_dp(steps, steps) == 2 ** (steps - 1)