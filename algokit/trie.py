"""Prefix trees for word lookup and prefix queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False, slots=True)
class TrieNode:
    """A trie node: its children by character and whether a word ends here."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False


def _walk(root: TrieNode, text: str) -> TrieNode | None:
    node = root
    for ch in text:
        child = node.children.get(ch)
        if child is None:
            return None
        node = child
    return node


def _add(root: TrieNode, word: str) -> TrieNode:
    node = root
    for ch in word:
        node = node.children.setdefault(ch, TrieNode())
    node.is_word = True
    return node


class Trie:
    """A set of words that answers exact and prefix lookups."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _add(self.root, word)

    def search(self, word: str) -> bool:
        """True if ``word`` was inserted."""
        node = _walk(self.root, word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word starts with ``prefix``."""
        return _walk(self.root, prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def build_trie(words: Iterable[str]) -> TrieNode:
    """Build a trie from ``words`` and return its root node."""
    root = TrieNode()
    for word in words:
        _add(root, word)
    return root