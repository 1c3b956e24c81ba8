import pytest
from hypothesis import given, strategies as st

from algokit.strings import (
    find_the_difference,
    longest_common_prefix,
    unique_morse_representations,
    zigzag_convert,
)

lower = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=15)


def test_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_common_prefix_empty_list():
    assert longest_common_prefix([]) == ""


def test_common_prefix_single_string():
    assert longest_common_prefix(["alone"]) == "alone"


@given(st.lists(st.text(alphabet="ab", max_size=6), min_size=1, max_size=5))
def test_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    n = len(prefix)
    if n < min(map(len, strs)):
        assert len({s[n] for s in strs}) > 1


@given(lower, st.characters(min_codepoint=97, max_codepoint=122), st.integers(0, 100))
def test_difference_found(s, extra, position):
    p = position % (len(s) + 1)
    t = s[:p] + extra + s[p:]
    assert find_the_difference(s, t) == extra


def test_difference_missing_rejected():
    with pytest.raises(ValueError):
        find_the_difference("abc", "cba")


def test_morse_example():
    assert unique_morse_representations(["gin", "zen", "gig", "msg"]) == 2


def test_morse_duplicates_count_once():
    assert unique_morse_representations(["hello", "hello"]) == 1


def test_morse_empty():
    assert unique_morse_representations([]) == 0


def test_morse_rejects_non_letters():
    with pytest.raises(ValueError):
        unique_morse_representations(["Abc"])


@given(st.lists(lower, max_size=8))
def test_morse_count_bounded_by_distinct_words(words):
    assert unique_morse_representations(words) <= len(set(words))


def test_zigzag_example():
    assert zigzag_convert("PAYPALISHIRING", 3) == "PAHNAPLSIIGYIR"


def test_zigzag_single_row_unchanged():
    assert zigzag_convert("PAYPALISHIRING", 1) == "PAYPALISHIRING"


@given(lower)
def test_zigzag_many_rows_unchanged(s):
    assert zigzag_convert(s, len(s) + 1) == s


@given(lower)
def test_zigzag_two_rows_splits_even_and_odd(s):
    assert zigzag_convert(s, 2) == s[::2] + s[1::2]


@given(lower, st.integers(1, 6))
def test_zigzag_is_permutation(s, rows):
    assert sorted(zigzag_convert(s, rows)) == sorted(s)