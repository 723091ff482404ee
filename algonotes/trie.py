"""A prefix tree over words of capital letters A to Z."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_uppercase)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """Stores words made of the letters A-Z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    @staticmethod
    def _check(word: str) -> None:
        bad = set(word) - _ALPHABET
        if bad:
            raise ValueError(f"words may only hold letters A-Z, got {sorted(bad)}")

    def _find(self, word: str) -> _TrieNode | None:
        self._check(word)
        node = self._root
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        self._check(word)
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not removed since."""
        node = self._find(word)
        return node is not None and node.terminal

    def remove(self, word: str) -> None:
        """Unmark ``word``; a word that is not stored is ignored."""
        node = self._find(word)
        if node is not None:
            node.terminal = False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)