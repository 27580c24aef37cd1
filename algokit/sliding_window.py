"""Sliding-window and prefix-sum counting over sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def _drop(counts: Counter, item: Hashable) -> None:
    counts[item] -= 1
    if counts[item] == 0:
        del counts[item]


def _at_most_distinct(nums: Sequence[int], k: int) -> int:
    counts: Counter = Counter()
    left = 0
    total = 0
    for right, value in enumerate(nums):
        counts[value] += 1
        while len(counts) > k:
            _drop(counts, nums[left])
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays holding exactly ``k`` distinct values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return _at_most_distinct(nums, k) - _at_most_distinct(nums, k - 1)


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Length of the longest run of ones after flipping at most ``k`` zeroes."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = 0
    zeroes = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeroes += 1
        if zeroes > k:
            if nums[left] == 0:
                zeroes -= 1
            left += 1
        if zeroes <= k:
            best = max(best, right - left + 1)
    return best


def count_at_most_odd(nums: Sequence[int], k: int) -> int:
    """Count subarrays holding at most ``k`` odd numbers."""
    if k < 0:
        return 0
    left = 0
    odd = 0
    total = 0
    for right, value in enumerate(nums):
        if value % 2:
            odd += 1
        while odd > k:
            if nums[left] % 2:
                odd -= 1
            left += 1
        total += right - left + 1
    return total


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Count subarrays holding exactly ``k`` odd numbers."""
    return count_at_most_odd(nums, k) - count_at_most_odd(nums, k - 1)


def number_of_substrings(s: str) -> int:
    """Count substrings that contain three distinct characters (``a``, ``b`` and ``c``)."""
    counts: Counter = Counter()
    left = 0
    total = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while len(counts) == 3:
            total += len(s) - right
            _drop(counts, s[left])
            left += 1
    return total


def max_score(card_points: Sequence[int], k: int) -> int:
    """Best total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError("k must lie between 0 and the number of cards")
    total = sum(card_points[:k])
    best = total
    for from_left, from_right in zip(reversed(card_points[:k]), reversed(card_points)):
        total += from_right - from_left
        best = max(best, total)
    return best


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        if char in last_seen:
            left = max(left, last_seen[char] + 1)
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest substring of one repeated letter after at most ``k`` replacements."""
    counts: Counter = Counter()
    left = 0
    best = 0
    max_freq = 0
    for right, char in enumerate(s):
        counts[char] += 1
        max_freq = max(max_freq, counts[char])
        if (right - left + 1) - max_freq > k:
            counts[s[left]] -= 1
            max_freq = 0
            left += 1
        if (right - left + 1) - max_freq <= k:
            best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` containing every character of ``t`` with multiplicity."""
    if not t or len(s) < len(t):
        return ""
    need = Counter(t)
    missing = len(t)
    left = 0
    best: tuple[int, int] | None = None
    for right, char in enumerate(s):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]


def _count_sum(nums: Sequence[int], target: int) -> int:
    seen: Counter = Counter({0: 1})
    running = 0
    count = 0
    for value in nums:
        running += value
        count += seen[running - target]
        seen[running] += 1
    return count


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Count subarrays of a binary array whose sum is ``goal``."""
    return _count_sum(nums, goal)


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count subarrays whose sum is ``k``."""
    return _count_sum(nums, k)