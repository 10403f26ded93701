from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from letterboxed.letter_graph import LetterGraph, LetterNode
from letterboxed.trie import Trie, TrieNode

logger = logging.getLogger("letterboxed")


@dataclass(frozen=True)
class Word:
    """A dictionary word realized as a specific walk over the box.

    Identity is the node sequence: the same spelling walked two ways gives
    two distinct words.
    """
    text: str = field(compare=False)
    nodes: tuple[LetterNode, ...]

    @property
    def coverage(self) -> frozenset[LetterNode]:
        return frozenset(self.nodes)

    @property
    def first(self) -> LetterNode:
        return self.nodes[0]

    @property
    def last(self) -> LetterNode:
        return self.nodes[-1]

    def as_pair(self) -> tuple[str, list[tuple[int, int]]]:
        return self.text, [node.key for node in self.nodes]


def _walk_from(graph: LetterGraph, trie: Trie, start: LetterNode) -> list[Word]:
    """Depth-first walk from one start node, descending the trie in step.

    Walks may revisit letters, so depth is bounded by the longest dictionary
    prefix the walk keeps matching rather than by the size of the box.
    """
    found: list[Word] = []
    seen: set[tuple[LetterNode, ...]] = set()

    first = trie.root.children.get(start.letter)
    if first is None:
        return found

    stack: list[tuple[tuple[LetterNode, ...], TrieNode]] = [((start,), first)]
    while stack:
        path, node = stack.pop()
        if path in seen:
            continue
        seen.add(path)

        if node.is_word and len(path) >= trie.min_length:
            found.append(Word("".join(n.letter for n in path), path))

        # Reversed so neighbors are explored in graph order
        for neighbor in reversed(graph.neighbors(path[-1])):
            child = node.children.get(neighbor.letter)
            if child is not None:
                stack.append((path + (neighbor,), child))
    return found


def find_words(graph: LetterGraph, trie: Trie) -> list[Word]:
    """Find every walk on the box that spells a dictionary word."""
    words: dict[Word, None] = {}
    for start in graph.nodes:
        branch = _walk_from(graph, trie, start)
        logger.debug("start=%s%d:%s words=%d", start.side, start.position, start.letter, len(branch))
        words.update(dict.fromkeys(branch))
    return list(words)


def filter_dominated(words: Sequence[Word]) -> list[Word]:
    """Drop words whose coverage is contained in another word's coverage.

    When several words cover exactly the same letters, the first one in
    input order is kept.
    """
    by_coverage: dict[frozenset[LetterNode], Word] = {}
    for word in words:
        by_coverage.setdefault(word.coverage, word)

    # Largest first: anything dominating a set is at least as large
    candidates = sorted(by_coverage, key=len, reverse=True)
    kept: list[frozenset[LetterNode]] = []
    for coverage in candidates:
        if not any(coverage < other for other in kept):
            kept.append(coverage)

    survivors = {by_coverage[coverage] for coverage in kept}
    return [word for word in by_coverage.values() if word in survivors]
