from collections import Counter

import pytest

from contestkit.strings import (
    can_type_with_double_keys,
    contains_permutation,
    count_erase_results,
    doctor_count,
    is_reverse_better,
    longest_repeating_replacement,
    longest_unique_substring,
    max_ones_rectangle,
    min_deletions_expensive,
    minimum_window_substring,
    typing_cost,
)


@pytest.mark.parametrize("s", ["0", "000", "0000000"])
def test_typing_cost_all_zeros_is_length(s):
    assert typing_cost(s) == len(s)


@pytest.mark.parametrize("s", ["1", "11", "11111"])
def test_typing_cost_all_ones_is_length_plus_one(s):
    assert typing_cost(s) == len(s) + 1


def test_typing_cost_reversal_matches_reversed_input():
    assert typing_cost("10") == typing_cost("01")


@pytest.mark.parametrize("s", ["0101", "1100", "010110", "1"])
def test_typing_cost_at_least_length(s):
    assert typing_cost(s) >= len(s)


def test_count_erase_results_repeated_letter():
    s = "aaaaa"
    assert count_erase_results(s) == len(s)


def test_count_erase_results_distinct_letters():
    s = "abcde"
    assert count_erase_results(s) == sum(range(1, len(s) + 1))


def test_count_erase_results_prefix_monotone():
    s = "abacabad"
    assert count_erase_results(s) > count_erase_results(s[:-1])


def test_min_deletions_expensive_no_zeros():
    digits = "12345"
    assert min_deletions_expensive(digits) == len(digits) - 1


def test_min_deletions_expensive_trailing_zeros():
    digits = "9000"
    assert min_deletions_expensive(digits) == len(digits) - 1


def test_min_deletions_expensive_ignores_inner_zero_shape():
    assert min_deletions_expensive("00100") == min_deletions_expensive("100")


def test_longest_repeating_replacement_classic():
    assert longest_repeating_replacement("AABABBA", 1) == 4


def test_longest_repeating_replacement_large_k():
    s = "ABCDE"
    assert longest_repeating_replacement(s, len(s)) == len(s)


def test_longest_repeating_replacement_uniform():
    s = "zzzz"
    assert longest_repeating_replacement(s, 0) == len(s)


def test_longest_unique_substring_classic():
    assert longest_unique_substring("abcabcbb") == 3


def test_longest_unique_substring_repeated_block():
    block = "qwerty"
    assert longest_unique_substring(block * 3) == len(block)


def test_minimum_window_substring_classic():
    assert minimum_window_substring("ADOBECODEBANC", "ABC") == "BANC"


def test_minimum_window_substring_contains_target():
    s, t = "xxaybbzaxyc", "abc"
    result = minimum_window_substring(s, t)
    assert result in s
    assert not Counter(t) - Counter(result)


def test_minimum_window_substring_missing():
    assert minimum_window_substring("aaaa", "ab") == ""


def test_minimum_window_substring_whole_string():
    assert minimum_window_substring("ab", "ba") == "ab"


def test_contains_permutation_found():
    assert contains_permutation("ab", "eidbaooo")


def test_contains_permutation_absent():
    assert not contains_permutation("ab", "eidboaoo")


def test_contains_permutation_pattern_longer():
    assert not contains_permutation("abcd", "abc")


def test_contains_permutation_empty_pattern():
    assert not contains_permutation("", "abc")


def test_max_ones_rectangle_all_ones():
    s = "1111"
    assert max_ones_rectangle(s) == len(s) ** 2


@pytest.mark.parametrize("rotation", ["1011", "0111", "1110"])
def test_max_ones_rectangle_rotation_invariant(rotation):
    assert max_ones_rectangle(rotation) == max_ones_rectangle("1101")


def test_doctor_count_all_zeros():
    s = "0000"
    assert doctor_count(s) == len(s)


def test_doctor_count_all_ones():
    s = "111"
    assert doctor_count(s) == len(s) * (len(s) - 1)


def test_doctor_count_order_independent():
    assert doctor_count("0101") == doctor_count("1100")


def test_can_type_same_string():
    assert can_type_with_double_keys("hello", "hello")


def test_can_type_doubled_keys():
    assert can_type_with_double_keys("ab", "aabb")


def test_can_type_too_many_repeats():
    assert not can_type_with_double_keys("ab", "aaab")


def test_can_type_wrong_order():
    assert not can_type_with_double_keys("ab", "ba")


def test_can_type_too_long():
    assert not can_type_with_double_keys("a", "aaa")


def test_is_reverse_better_with_swap():
    assert is_reverse_better("ab", 1)


def test_is_reverse_better_palindrome():
    assert not is_reverse_better("aba", 0)


def test_is_reverse_better_already_smaller():
    assert is_reverse_better("ab", 0)


def test_is_reverse_better_no_larger_char():
    assert not is_reverse_better("ba", 1)