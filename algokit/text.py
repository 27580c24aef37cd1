"""String problems: brackets, anagrams, palindromes, digit removal and parsing."""

from __future__ import annotations

import re
import string
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_ALNUM = frozenset(string.ascii_letters + string.digits)
_VOWELS = frozenset("aeiouAEIOU")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive group of a balanced string."""
    result = []
    depth = 0
    for char in s:
        if char == "(":
            if depth > 0:
                result.append(char)
            depth += 1
        else:
            depth -= 1
            if depth > 0:
                result.append(char)
    return "".join(result)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("no strings given")
    low, high = min(strs), max(strs)
    length = next(
        (i for i, (a, b) in enumerate(zip(low, high)) if a != b),
        min(len(low), len(high)),
    )
    return low[:length]


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by the matching kind in order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack.pop():
            return False
    return not stack


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    seen_s: dict[str, int] = {}
    seen_t: dict[str, int] = {}
    for index, (a, b) in enumerate(zip(s, t)):
        if seen_s.get(a) != seen_t.get(b):
            return False
        seen_s[a] = seen_t[b] = index
    return True


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def find_words_containing(words: Iterable[str], x: str) -> list[int]:
    """Indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]


def is_valid_word(word: str) -> bool:
    """At least three ASCII letters or digits, with a vowel and a consonant."""
    if len(word) < 3 or not all(char in _ALNUM for char in word):
        return False
    letters = [char for char in word if char.isalpha()]
    vowels = sum(char in _VOWELS for char in letters)
    return vowels >= 1 and len(letters) - vowels >= 1


def reverse_string(s: list[str]) -> None:
    """Reverse a list of characters in place."""
    s.reverse()


def possible_string_count(word: str) -> int:
    """Number of strings the user may have meant, with at most one key held too long."""
    return 1 + sum(a == b for a, b in zip(word, word[1:]))


def remove_k_digits(num: str, k: int) -> str:
    """Smallest number left after deleting ``k`` digits from ``num``."""
    if k < 0:
        raise ValueError("k must not be negative")
    kept: list[str] = []
    for digit in num:
        while kept and k > 0 and kept[-1] > digit:
            kept.pop()
            k -= 1
        kept.append(digit)
    if k > 0:
        del kept[max(len(kept) - k, 0):]
    return "".join(kept).lstrip("0") or "0"


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    best_start, best_len = 0, min(len(s), 1)
    for i in range(len(s)):
        for left, right in ((i, i), (i, i + 1)):
            while left >= 0 and right < len(s) and s[left] == s[right]:
                left -= 1
                right += 1
            length = right - left - 1
            if length > best_len:
                best_start, best_len = left + 1, length
    return s[best_start:best_start + best_len]


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.group(1), match.group(2)
    # Anything with more than ten significant digits clamps anyway.
    value = int(digits.lstrip("0")[:11] or "0")
    if sign == "-":
        value = -value
    return max(_INT_MIN, min(_INT_MAX, value))