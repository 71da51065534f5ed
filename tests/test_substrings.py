from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from seqalgos.substrings import (
    find_anagrams,
    is_vowel,
    length_of_longest_substring,
    max_vowels,
    min_window,
)

small_text = st.text(alphabet="abcde", max_size=20)


def test_longest_substring_example():
    assert length_of_longest_substring("pwwkew") == 3


def test_longest_substring_empty():
    assert not length_of_longest_substring("")


def test_longest_substring_repeated_char():
    assert length_of_longest_substring("aaaa") == len(set("aaaa"))


@given(small_text)
def test_longest_substring_is_attained(s):
    n = length_of_longest_substring(s)
    assert n <= len(set(s))
    windows = [s[i:i + n] for i in range(len(s) - n + 1)]
    assert any(len(set(w)) == n for w in windows)
    longer = [s[i:i + n + 1] for i in range(len(s) - n)]
    assert all(len(set(w)) < n + 1 for w in longer)


def test_find_anagrams_example():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]


def test_find_anagrams_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_anagrams("abc", "")


def test_find_anagrams_pattern_longer_than_text():
    assert find_anagrams("ab", "abc") == []


@given(small_text, st.text(alphabet="abcde", min_size=1, max_size=4))
def test_find_anagrams_matches_definition(s, p):
    result = find_anagrams(s, p)
    assert result == sorted(result)
    expected = {i for i in range(len(s) - len(p) + 1) if sorted(s[i:i + len(p)]) == sorted(p)}
    assert set(result) == expected


def test_min_window_no_match():
    assert min_window("a", "aa") == ""


def test_min_window_classic():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_min_window_empty_target():
    assert min_window("abc", "") == ""


@given(st.text(alphabet="abcAB", max_size=15), st.text(alphabet="abcAB", min_size=1, max_size=4))
def test_min_window_covers_target(s, t):
    result = min_window(s, t)
    need = Counter(t)
    if result:
        assert result in s
        assert not need - Counter(result)
        # Dropping either end must break the cover.
        assert need - Counter(result[1:])
        assert need - Counter(result[:-1])
    else:
        assert need - Counter(s)


def test_is_vowel():
    assert all(is_vowel(c) for c in "aeiou")
    assert not any(is_vowel(c) for c in "bcdyAEIOU")


@given(st.text(alphabet="abeiouxz", min_size=1, max_size=20))
def test_max_vowels_whole_string(s):
    assert max_vowels(s, len(s)) == sum(c in "aeiou" for c in s)


@given(st.text(alphabet="abeiouxz", min_size=1, max_size=20), st.integers(min_value=1, max_value=20))
def test_max_vowels_matches_best_window(s, k):
    result = max_vowels(s, k)
    counts = [sum(c in "aeiou" for c in s[i:i + k]) for i in range(max(1, len(s) - k + 1))]
    assert result == max(counts)
    assert result <= min(k, len(s))


def test_max_vowels_empty():
    assert not max_vowels("", 3)