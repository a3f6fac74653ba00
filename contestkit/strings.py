"""String problems: sliding windows, run-length checks and counting puzzles."""

from collections import Counter
from itertools import groupby


def _runs(text):
    """Return the run-length encoding of ``text`` as (char, length) pairs."""
    return [(char, sum(1 for _ in group)) for char, group in groupby(text)]


def typing_cost(s):
    """Cost of typing a binary string after reversing its first ``1..10..0`` block.

    The first character costs 1 (2 if it is ``'1'``), a repeated character
    costs 1 and a change of character costs 2.
    """
    hold = s.find("1")
    if hold != -1:
        zero = s.find("0", hold)
        if zero != -1:
            right = len(s) - len(s[zero:].lstrip("0"))
            s = s[:hold] + s[hold:right][::-1] + s[right:]
    cost = 2 if s.startswith("1") else 1
    cost += sum(1 if a == b else 2 for a, b in zip(s, s[1:]))
    return cost


def count_erase_results(s):
    """Sum over every prefix of the number of distinct characters in it."""
    seen = set()
    total = 0
    for char in s:
        seen.add(char)
        total += len(seen)
    return total


def min_deletions_expensive(digits):
    """Fewest digits to delete so the number is as expensive as possible."""
    trailing_zeros = len(digits) - len(digits.rstrip("0"))
    non_zero = sum(1 for d in digits if d != "0")
    return trailing_zeros + non_zero - 1


def longest_repeating_replacement(s, k):
    """Longest substring that becomes one repeated letter after ``k`` changes."""
    counts = Counter()
    left = 0
    best = 0
    most_frequent = 0
    for right, char in enumerate(s):
        counts[char] += 1
        most_frequent = max(most_frequent, counts[char])
        width = right - left + 1
        if width - most_frequent <= k:
            best = max(best, width)
        else:
            counts[s[left]] -= 1
            left += 1
    return best


def longest_unique_substring(s):
    """Length of the longest substring without repeated characters."""
    window = set()
    left = 0
    best = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best


def minimum_window_substring(s, t):
    """Shortest substring of ``s`` holding every character of ``t``, or ``""``."""
    need = Counter(t)
    if not need:
        return ""
    window = Counter()
    have = 0
    best = None
    left = 0
    for right, char in enumerate(s):
        window[char] += 1
        if char in need and window[char] == need[char]:
            have += 1
        while have == len(need):
            if best is None or right - left + 1 < best[1] - best[0]:
                best = (left, right + 1)
            out = s[left]
            window[out] -= 1
            if out in need and window[out] < need[out]:
                have -= 1
            left += 1
    if best is None:
        return ""
    return s[best[0]:best[1]]


def contains_permutation(pattern, text):
    """Whether some substring of ``text`` is an anagram of ``pattern``."""
    size = len(pattern)
    if size == 0 or size > len(text):
        return False
    need = Counter(pattern)
    window = Counter(text[:size])
    if window == need:
        return True
    for incoming, outgoing in zip(text[size:], text):
        window[incoming] += 1
        window[outgoing] -= 1
        if window[outgoing] == 0:
            del window[outgoing]
        if window == need:
            return True
    return False


def max_ones_rectangle(s):
    """Largest all-ones rectangle in the grid of cyclic shifts of ``s``."""
    doubled = s + s
    longest = max((length for char, length in _runs(doubled) if char == "1"), default=0)
    size = len(s)
    if longest > size:
        return size * size
    return ((longest + 1) // 2) * ((longest + 2) // 2)


def doctor_count(s):
    """Total number of ones over all strings made by flipping one position."""
    ones = s.count("1")
    return sum(ones - 1 if char == "1" else ones + 1 for char in s)


def can_type_with_double_keys(p, s):
    """Whether ``s`` can result from typing ``p`` where each key may double."""
    if not len(p) <= len(s) <= 2 * len(p):
        return False
    runs_p = _runs(p)
    runs_s = _runs(s)
    if len(runs_p) != len(runs_s):
        return False
    return all(
        cp == cs and cnt_p <= cnt_s <= 2 * cnt_p
        for (cp, cnt_p), (cs, cnt_s) in zip(runs_p, runs_s)
    )


def is_reverse_better(s, k):
    """Whether ``s`` can be made lexicographically smaller than its reverse."""
    if not s:
        return False
    if k > 0 and any(char > s[0] for char in s):
        return True
    return s[::-1] > s