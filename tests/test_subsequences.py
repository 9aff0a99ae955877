from hypothesis import given
from hypothesis import strategies as st

from algokit.subsequences import (
    longest_common_subsequence,
    longest_common_subsequence_table,
    longest_palindromic_subsequence,
)

_text = st.text(alphabet="abc", max_size=12)


def test_worked_examples():
    assert longest_common_subsequence("abcde", "ace") == 3
    assert longest_common_subsequence_table("abcde", "ace") == 3
    assert longest_palindromic_subsequence("bbbab") == 4


@given(_text, _text)
def test_both_lcs_versions_agree(a, b):
    assert longest_common_subsequence(a, b) == longest_common_subsequence_table(a, b)


@given(_text, _text)
def test_lcs_is_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result <= min(len(a), len(b))


@given(_text)
def test_lcs_with_itself_and_empty(a):
    assert longest_common_subsequence(a, a) == len(a)
    assert longest_common_subsequence(a, "") == 0
    assert longest_common_subsequence_table("", a) == 0


@given(_text)
def test_palindrome_equals_lcs_with_reverse(s):
    assert longest_palindromic_subsequence(s) == longest_common_subsequence(s, s[::-1])


@given(_text)
def test_palindrome_of_palindrome_is_whole(s):
    word = s + s[::-1]
    assert longest_palindromic_subsequence(word) == len(word)


def test_palindrome_empty():
    assert longest_palindromic_subsequence("") == 0