from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from letterboxed.letter_graph import LetterNode, build_letter_graph
from letterboxed.metrics import StageTimer
from letterboxed.trie import Trie
from letterboxed.word_graph import WordGraph, build_word_graph
from letterboxed.words import Word, filter_dominated, find_words

logger = logging.getLogger("letterboxed")

MAX_CHAIN_LENGTH = 25


class SearchOverflow(RuntimeError):
    """A word chain grew past the hard cap; the search space was not pruned enough."""

    def __init__(self, limit: int, length: int):
        super().__init__(f"word chain of length {length} exceeds the limit of {limit}")
        self.limit = limit
        self.length = length


@dataclass(frozen=True)
class Solution:
    words: tuple[Word, ...]
    covered: int

    @property
    def texts(self) -> list[str]:
        return [w.text for w in self.words]

    def as_pairs(self) -> list[tuple[str, list[tuple[int, int]]]]:
        return [w.as_pair() for w in self.words]

    def to_dict(self) -> dict:
        return {
            "words": [{"word": text, "nodes": [list(k) for k in keys]} for text, keys in self.as_pairs()],
            "covered": self.covered,
        }

    def __len__(self) -> int:
        return len(self.words)


def _explore_from(graph: WordGraph, start: Word, letter_count: int, max_chain_length: int) -> list[Solution]:
    solutions: list[Solution] = []
    seen: set[tuple[Word, ...]] = set()

    stack: list[tuple[tuple[Word, ...], frozenset[LetterNode], Word]] = [((), frozenset(), start)]
    while stack:
        chain, covered, word = stack.pop()
        if len(chain) >= max_chain_length:
            raise SearchOverflow(max_chain_length, len(chain) + 1)

        # A word adding no new letter is never worth including
        if word.coverage <= covered:
            continue

        chain = chain + (word,)
        if chain in seen:
            continue
        seen.add(chain)

        covered = covered | word.coverage
        if len(covered) >= letter_count:
            solutions.append(Solution(chain, len(covered)))
            continue

        for successor in reversed(graph.successors(word)):
            stack.append((chain, covered, successor))
    return solutions


def find_solutions(graph: WordGraph, letter_count: int, max_chain_length: int = MAX_CHAIN_LENGTH) -> list[Solution]:
    """Find word chains covering every letter of the box.

    Each chain stops as soon as it covers the box, so no proper prefix of a
    returned chain is itself a solution. Raises SearchOverflow if a chain
    would grow past ``max_chain_length``.
    """
    solutions: list[Solution] = []
    for start in graph.words:
        solutions.extend(_explore_from(graph, start, letter_count, max_chain_length))
    return solutions


def rank_solutions(solutions: Sequence[Solution], top: int | None = None) -> list[Solution]:
    if top is not None and top < 1:
        raise ValueError(f"top must be at least 1, got {top}")
    ranked = sorted(solutions, key=len)
    return ranked[:top] if top is not None else ranked


@dataclass
class SolveResult:
    letter_count: int
    word_count: int
    filtered_count: int
    solution_count: int
    solutions: list[Solution]
    timings: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "letter_count": self.letter_count,
            "word_count": self.word_count,
            "filtered_count": self.filtered_count,
            "solution_count": self.solution_count,
            "solutions": [s.to_dict() for s in self.solutions],
            "stage_timings": self.timings,
        }


def solve(
    sides: Sequence[Sequence[str]],
    trie: Trie,
    *,
    max_chain_length: int = MAX_CHAIN_LENGTH,
    top: int | None = 3,
) -> SolveResult:
    """Run the whole pipeline for one box and return the best ``top`` chains."""
    if top is not None and top < 1:
        raise ValueError(f"top must be at least 1, got {top}")
    timer = StageTimer()

    with timer.stage("letter_graph"):
        graph = build_letter_graph(sides)
        timer.count("letter_graph", graph.letter_count)

    with timer.stage("find_words"):
        words = find_words(graph, trie)
        timer.count("find_words", len(words))
    logger.info("Found %d valid words", len(words))

    with timer.stage("filter_words"):
        filtered = filter_dominated(words)
        timer.count("filter_words", len(filtered))
    logger.info("Filtered down to %d optimal words", len(filtered))

    with timer.stage("word_graph"):
        word_graph = build_word_graph(filtered)
        timer.count("word_graph", word_graph.edge_count)
    logger.debug("Word graph has %d nodes and %d edges", len(word_graph), word_graph.edge_count)

    with timer.stage("find_solutions"):
        solutions = find_solutions(word_graph, graph.letter_count, max_chain_length)
        timer.count("find_solutions", len(solutions))
    logger.info("Found %d solutions", len(solutions))

    return SolveResult(
        letter_count=graph.letter_count,
        word_count=len(words),
        filtered_count=len(filtered),
        solution_count=len(solutions),
        solutions=rank_solutions(solutions, top),
        timings=timer.summary(),
    )
