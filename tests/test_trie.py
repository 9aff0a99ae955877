import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.trie import Trie, TrieNode, build_trie

words_strategy = st.lists(st.text(alphabet="abcde", max_size=6), max_size=15)


def test_insert_search_and_prefix_example():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_missing_prefix_is_rejected():
    trie = Trie()
    trie.insert("hello")
    assert trie.starts_with("help") is False
    assert trie.search("hello!") is False


def test_empty_prefix_always_matches():
    trie = Trie()
    assert trie.starts_with("") is True
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True


def test_contains_uses_search():
    trie = Trie()
    trie.insert("word")
    assert "word" in trie
    assert "wor" not in trie
    assert 5 not in trie


@given(words_strategy)
def test_every_prefix_of_an_inserted_word_matches(words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    for word in words:
        for end in range(len(word) + 1):
            assert trie.starts_with(word[:end])


def _collect(node: TrieNode, prefix: str = "") -> set[str]:
    found = {prefix} if node.is_word else set()
    for ch, child in node.children.items():
        found |= _collect(child, prefix + ch)
    return found


@given(words_strategy)
def test_build_trie_holds_exactly_the_words(words):
    root = build_trie(words)
    assert _collect(root) == set(words)


def test_build_trie_shares_prefixes():
    root = build_trie(["car", "cat"])
    assert list(root.children) == ["c"]
    node = root.children["c"].children["a"]
    assert sorted(node.children) == ["r", "t"]
    assert node.is_word is False


@pytest.mark.parametrize("word", ["Ünïcode", "MiXeD", "with space"])
def test_any_characters_are_accepted(word):
    trie = Trie()
    trie.insert(word)
    assert trie.search(word)