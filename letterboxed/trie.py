from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger("letterboxed")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Dictionary index answering exact-word and prefix queries.

    Every entry is stored, short ones included, so prefix answers are exact.
    ``min_length`` only applies to :meth:`is_word`.
    """

    def __init__(self, min_length: int = 3):
        self.root = TrieNode()
        self.min_length = min_length
        self._size = 0

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find_node(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def is_word(self, s: str) -> bool:
        if len(s) < self.min_length:
            return False
        node = self.find_node(s)
        return node is not None and node.is_word

    def is_prefix(self, s: str) -> bool:
        if not self._size:
            return False
        # Every node lies on the path to at least one entry
        return self.find_node(s) is not None

    def __contains__(self, s: str) -> bool:
        node = self.find_node(s)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size


def load_words(path: str) -> set[str]:
    """Read one token per line, keeping ASCII-alphabetic tokens, lowercased."""
    words: set[str] = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and word.isascii() and word.isalpha():
                words.add(word.lower())
    return words


def build_trie(words: Iterable[str], min_length: int = 3) -> Trie:
    trie = Trie(min_length)
    for word in words:
        trie.insert(word)
    return trie


def load_trie(path: str, min_length: int = 3) -> Trie:
    words = load_words(path)
    logger.info("Loaded %d dictionary words from %s", len(words), path)
    return build_trie(words, min_length)
