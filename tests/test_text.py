import pytest

from algokit.text import (
    find_words_containing,
    group_anagrams,
    is_anagram,
    is_isomorphic,
    is_valid_parentheses,
    is_valid_word,
    longest_common_prefix,
    longest_palindrome,
    my_atoi,
    possible_string_count,
    remove_k_digits,
    remove_outer_parentheses,
    reverse_string,
)


@pytest.mark.parametrize("inner", ["", "()", "()()", "(())", "(()())"])
def test_remove_outer_single_group(inner):
    assert remove_outer_parentheses("(" + inner + ")") == inner


def test_remove_outer_several_groups():
    first, second = "()()", "(())"
    assert remove_outer_parentheses("(" + first + ")(" + second + ")") == first + second


def test_longest_common_prefix_shared():
    prefix = "ab"
    assert longest_common_prefix([prefix + "x", prefix + "yz", prefix]) == prefix


def test_longest_common_prefix_none_shared():
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[()]}", ""])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text)


@pytest.mark.parametrize("text", ["(]", "(", ")", "([)]", "]["])
def test_invalid_parentheses(text):
    assert not is_valid_parentheses(text)


def test_isomorphic():
    assert is_isomorphic("egg", "add")
    assert is_isomorphic("paper", "title")
    assert not is_isomorphic("foo", "bar")
    assert not is_isomorphic("badc", "baba")
    assert not is_isomorphic("ab", "abc")


def test_anagram():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("a", "aa")


def test_find_words_containing_partitions_indices():
    words = ["leet", "code", "abc", "xyz", "aaa"]
    found = find_words_containing(words, "a")
    assert all("a" in words[i] for i in found)
    assert all("a" not in words[i] for i in range(len(words)) if i not in found)
    assert found == sorted(found)


def test_find_words_containing_all():
    words = ["ex", "ye", "e"]
    assert find_words_containing(words, "e") == list(range(len(words)))


def test_valid_word():
    assert is_valid_word("234Adas")
    assert not is_valid_word("b3")
    assert not is_valid_word("a3$e")
    assert not is_valid_word("aei1")
    assert not is_valid_word("bcd")


def test_reverse_string_in_place():
    chars = list("hello")
    original = chars.copy()
    reverse_string(chars)
    assert chars == original[::-1]
    reverse_string(chars)
    assert chars == original


def test_possible_string_count():
    assert possible_string_count("abcd") == 1
    assert possible_string_count("a" * 5) == 5


def test_remove_k_digits_example():
    assert remove_k_digits("1432219", 3) == "1219"


def test_remove_k_digits_all_removed():
    assert remove_k_digits("10", 2) == "0"
    assert remove_k_digits("12345", 5) == "0"


def test_remove_k_digits_none_removed():
    assert remove_k_digits("12345", 0) == "12345"


def test_remove_k_digits_length_and_subsequence():
    num = "9876512345"
    k = 4
    result = remove_k_digits(num, k)
    assert len(result) == len(num) - k
    remaining = iter(num)
    assert all(digit in remaining for digit in result)


def test_remove_k_digits_negative_raises():
    with pytest.raises(ValueError):
        remove_k_digits("123", -1)


def test_group_anagrams_invariants():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    for group in groups:
        assert all(is_anagram(group[0], w) for w in group)
    firsts = [group[0] for group in groups]
    assert all(not is_anagram(a, b) for i, a in enumerate(firsts) for b in firsts[i + 1:])


def test_longest_palindrome_embedded():
    core = "racecar"
    assert longest_palindrome("xy" + core + "z") == core


def test_longest_palindrome_trivial():
    assert longest_palindrome("") == ""
    assert longest_palindrome("abc") == "a"


def test_longest_palindrome_is_palindrome():
    text = "babad"
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    assert len(result) == 3


def test_atoi_basic():
    assert my_atoi("42") == 42
    assert my_atoi("   -42") == -42
    assert my_atoi("+1") == 1
    assert my_atoi("4193 with words") == 4193


def test_atoi_no_number():
    assert my_atoi("words 987") == 0
    assert my_atoi("") == 0
    assert my_atoi("  +-12") == 0


def test_atoi_clamps():
    assert my_atoi("91283472332") == 2**31 - 1
    assert my_atoi("-91283472332") == -(2**31)
    assert my_atoi("-2147483648") == -(2**31)
    assert my_atoi("9" * 5000) == 2**31 - 1