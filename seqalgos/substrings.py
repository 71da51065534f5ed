"""Sliding-window algorithms over strings."""

from __future__ import annotations

from collections import Counter

_VOWELS = frozenset("aeiou")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    window: set[str] = set()
    left = 0
    best = 0
    for ch in s:
        while ch in window:
            window.discard(s[left])
            left += 1
        window.add(ch)
        best = max(best, len(window))
    return best


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of all anagrams of ``p`` within ``s``."""
    if not p:
        raise ValueError("pattern must not be empty")
    width = len(p)
    wanted = Counter(p)
    window: Counter[str] = Counter()
    result = []
    for index, ch in enumerate(s):
        window[ch] += 1
        if index >= width:
            gone = s[index - width]
            window[gone] -= 1
            if not window[gone]:
                del window[gone]
        if index >= width - 1 and window == wanted:
            result.append(index - width + 1)
    return result


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Ties go to the leftmost window; an empty string means there is none.
    """
    need = Counter(t)
    have: Counter[str] = Counter()
    missing = len(t)
    right = 0
    best: tuple[int, int] | None = None
    for left, ch in enumerate(s):
        while right < len(s) and missing:
            added = s[right]
            have[added] += 1
            if have[added] <= need[added]:
                missing -= 1
            right += 1
        if missing:
            break
        if best is None or right - left < best[1] - best[0]:
            best = (left, right)
        have[ch] -= 1
        if have[ch] < need[ch]:
            missing += 1
    if best is None:
        return ""
    return s[best[0]:best[1]]


def is_vowel(c: str) -> bool:
    """Return whether ``c`` is a lower-case English vowel."""
    return c in _VOWELS


def max_vowels(s: str, k: int) -> int:
    """Return the most vowels found in any substring of length ``k``."""
    flags = [is_vowel(ch) for ch in s]
    width = max(k, 1)
    count = 0
    best = 0
    for index, flag in enumerate(flags):
        count += flag
        if index >= width:
            count -= flags[index - width]
        best = max(best, count)
    return best