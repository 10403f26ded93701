from __future__ import annotations

from collections import defaultdict
from typing import Iterator, Sequence

from letterboxed.letter_graph import LetterNode
from letterboxed.words import Word


class WordGraph:
    """Directed graph over words; X -> Y when X ends where Y starts."""

    def __init__(self, words: list[Word], successors: dict[Word, list[Word]]):
        self.words = words
        self._successors = successors

    def successors(self, word: Word) -> list[Word]:
        return self._successors.get(word, [])

    def edges(self) -> Iterator[tuple[Word, Word]]:
        for word in self.words:
            for successor in self.successors(word):
                yield word, successor

    @property
    def edge_count(self) -> int:
        return sum(len(s) for s in self._successors.values())

    def __len__(self) -> int:
        return len(self.words)


def build_word_graph(words: Sequence[Word]) -> WordGraph:
    starting_at: dict[LetterNode, list[Word]] = defaultdict(list)
    for word in words:
        starting_at[word.first].append(word)

    successors: dict[Word, list[Word]] = {}
    for word in words:
        successors[word] = [nxt for nxt in starting_at.get(word.last, []) if nxt != word]
    return WordGraph(list(words), successors)
