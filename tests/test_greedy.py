import pytest
from hypothesis import given, strategies as st

from algokit.greedy import (
    group_the_people,
    largest_number,
    monotone_increasing_digits,
    monotone_increasing_digits_brute,
)


@st.composite
def valid_group_sizes(draw):
    sizes = draw(st.lists(st.integers(1, 4), max_size=6))
    flat = [size for size in sizes for _ in range(size)]
    return draw(st.permutations(flat))


@given(valid_group_sizes())
def test_groups_cover_everyone_once(sizes):
    groups = group_the_people(sizes)
    members = sorted(person for group in groups for person in group)
    assert members == list(range(len(sizes)))


@given(valid_group_sizes())
def test_group_sizes_match_members(sizes):
    for group in group_the_people(sizes):
        assert all(sizes[person] == len(group) for person in group)


def test_leftover_people_dropped():
    groups = group_the_people([2, 2, 2])
    assert len(groups) == 1
    assert len(groups[0]) == 2


def test_zero_group_size_rejected():
    with pytest.raises(ValueError):
        group_the_people([1, 0])


def test_largest_number_example():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"


def test_largest_number_all_zero():
    assert largest_number([0, 0]) == "0"


def test_largest_number_empty_rejected():
    with pytest.raises(ValueError):
        largest_number([])


@given(st.lists(st.integers(1, 1000), min_size=1, max_size=8))
def test_largest_number_uses_every_digit(nums):
    result = largest_number(nums)
    assert sorted(result) == sorted("".join(map(str, nums)))


@given(st.lists(st.integers(1, 1000), min_size=2, max_size=6))
def test_largest_number_beats_input_order(nums):
    assert int(largest_number(nums)) >= int("".join(map(str, nums)))


def test_monotone_examples():
    assert monotone_increasing_digits(10) == 9
    assert monotone_increasing_digits(332) == 299


def test_monotone_keeps_monotone_number():
    assert monotone_increasing_digits(1234) == 1234


@given(st.integers(0, 3000))
def test_monotone_matches_brute_force(n):
    assert monotone_increasing_digits(n) == monotone_increasing_digits_brute(n)


@given(st.integers(0, 10**9))
def test_monotone_properties(n):
    result = monotone_increasing_digits(n)
    assert result <= n
    digits = str(result)
    assert all(a <= b for a, b in zip(digits, digits[1:]))


def test_brute_zero():
    assert monotone_increasing_digits_brute(0) == 0


@pytest.mark.parametrize("func", [monotone_increasing_digits, monotone_increasing_digits_brute])
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-1)