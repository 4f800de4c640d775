import pytest

from dynprog.palindromes import (
    count_substrings,
    longest_palindrome,
    longest_palindrome_subseq,
    longest_palindrome_tabulated,
    min_insertions,
    min_insertions_tabulated,
)

SAMPLES = ["a", "ab", "aa", "babad", "cbbd", "racecar", "abcda", "leetcode", "mbadm", "zzazz"]


def test_longest_palindrome_subseq_example():
    assert longest_palindrome_subseq("bbbab") == 4


@pytest.mark.parametrize("s", ["racecar", "abba", "x", ""])
def test_longest_palindrome_subseq_of_palindrome_is_whole(s):
    assert longest_palindrome_subseq(s) == len(s)


@pytest.mark.parametrize("s", SAMPLES)
def test_subseq_and_insertions_complement(s):
    assert longest_palindrome_subseq(s) + min_insertions(s) == len(s)


@pytest.mark.parametrize("finder", [longest_palindrome, longest_palindrome_tabulated])
@pytest.mark.parametrize("s", SAMPLES)
def test_longest_palindrome_is_palindromic_substring(finder, s):
    result = finder(s)
    assert result == result[::-1]
    assert result in s


@pytest.mark.parametrize("s", SAMPLES)
def test_longest_palindrome_versions_same_length(s):
    assert len(longest_palindrome(s)) == len(longest_palindrome_tabulated(s))


def test_longest_palindrome_tie_breaking():
    assert longest_palindrome("babad") == "bab"
    assert longest_palindrome_tabulated("babad") == "aba"
    assert longest_palindrome("abc") == "a"
    assert longest_palindrome_tabulated("abc") == "c"


@pytest.mark.parametrize("finder", [longest_palindrome, longest_palindrome_tabulated])
@pytest.mark.parametrize("s", ["", "q"])
def test_longest_palindrome_short_inputs_returned(finder, s):
    assert finder(s) == s


@pytest.mark.parametrize("s", ["racecar", "abba", "z"])
def test_min_insertions_of_palindrome_is_zero(s):
    assert min_insertions(s) == 0
    assert min_insertions_tabulated(s) == 0


@pytest.mark.parametrize("s", SAMPLES)
def test_min_insertions_versions_agree(s):
    assert min_insertions(s) == min_insertions_tabulated(s)


def test_min_insertions_empty():
    assert min_insertions("") == 0
    with pytest.raises(ValueError):
        min_insertions_tabulated("")


def test_min_insertions_distinct_characters():
    s = "abcd"
    assert min_insertions(s) == len(s) - 1


def test_count_substrings_short_inputs():
    assert count_substrings("") == 1
    assert count_substrings("a") == 1


def test_count_substrings_example():
    assert count_substrings("aaa") == 6


def test_count_substrings_distinct_characters():
    s = "abcdef"
    assert count_substrings(s) == len(s)


@pytest.mark.parametrize("s", SAMPLES[1:])
def test_count_substrings_at_least_length(s):
    assert count_substrings(s) >= len(s)
    assert count_substrings(s) <= len(s) * (len(s) + 1) // 2