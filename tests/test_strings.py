import pytest

from algobook.strings import (
    AhoCorasick,
    edit_distance,
    kmp,
    kmp_table,
    longest_common_subsequence,
    shortest_prefix,
)


def _occurrences(text, pattern):
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def _is_subsequence(sub, text):
    it = iter(text)
    return all(c in it for c in sub)


@pytest.mark.parametrize(
    "patterns, text",
    [
        (["he", "she", "his", "hers"], "ushers"),
        (["a", "aa", "aaa"], "aaaaa"),
        (["abc", "bc", "c", "xyz"], "abcabcxbc"),
    ],
)
def test_aho_corasick_matches_all_occurrences(patterns, text):
    found = AhoCorasick(patterns).find(text)
    assert [sorted(f) for f in found] == [_occurrences(text, p) for p in patterns]


def test_aho_corasick_no_match():
    assert AhoCorasick(["abc", "zz"]).find("qqqq") == [[], []]


def test_aho_corasick_custom_alphabet():
    automaton = AhoCorasick(["01", "10"], "0", "1")
    assert automaton.find("0110") == [_occurrences("0110", "01"), _occurrences("0110", "10")]


def test_aho_corasick_rejects_foreign_character():
    with pytest.raises(ValueError):
        AhoCorasick(["ab"]).find("aB")


def test_aho_corasick_next_state_from_root_on_unknown_stays_at_root():
    automaton = AhoCorasick(["ab"])
    assert automaton.next_state(0, "z") == 0
    first = automaton.next_state(0, "a")
    assert automaton.next_state(first, "b") != first
    assert automaton.find("ab") == [[0]]


def test_edit_distance_worked_example():
    assert edit_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("a, b", [("flaw", "lawn"), ("", "abc"), ("same", "same")])
def test_edit_distance_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_bounds():
    assert edit_distance("word", "word") == 0
    assert edit_distance("", "hello") == len("hello")
    assert edit_distance("abc", "") == len("abc")


def test_kmp_table_shape():
    pattern = "abacabab"
    table = kmp_table(pattern)
    assert len(table) == len(pattern) + 1
    assert table[0] == -1


@pytest.mark.parametrize(
    "text, pattern",
    [("abxabcabcaby", "abcaby"), ("aaaaab", "aab"), ("hello", "xyz"), ("abc", "abc"), ("ab", "abc")],
)
def test_kmp_agrees_with_find(text, pattern):
    assert kmp(text, pattern) == text.find(pattern)


def test_shortest_prefix():
    assert shortest_prefix("abcde", ["abc", "ab", "abcd"]) == len("ab")
    assert shortest_prefix("abcde", ["x", "abd"]) is None
    assert shortest_prefix("ab", ["abc"]) is None


def test_lcs_simple():
    assert longest_common_subsequence("abcde", "ace") == "ace"


def test_lcs_is_common_subsequence():
    a, b = "AGGTAB", "GXTXAYB"
    result = longest_common_subsequence(a, b)
    assert len(result) == 4
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)


def test_lcs_empty():
    assert longest_common_subsequence("abc", "xyz") == ""
    assert longest_common_subsequence("", "abc") == ""