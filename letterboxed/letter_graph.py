from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Sequence


@dataclass(frozen=True, order=True)
class LetterNode:
    """One letter occurrence on the box, identified by (side, position)."""
    side: int
    position: int
    letter: str = field(compare=False)

    @property
    def key(self) -> tuple[int, int]:
        return (self.side, self.position)


class LetterGraph:
    """Undirected graph linking every letter to every letter on another side."""

    def __init__(self, nodes: list[LetterNode], adjacency: dict[LetterNode, tuple[LetterNode, ...]]):
        self.nodes = nodes
        self._adjacency = adjacency

    def neighbors(self, node: LetterNode) -> tuple[LetterNode, ...]:
        return self._adjacency.get(node, ())

    def has_edge(self, a: LetterNode, b: LetterNode) -> bool:
        return b in self._adjacency.get(a, ())

    def edges(self) -> Iterator[tuple[LetterNode, LetterNode]]:
        for node in self.nodes:
            for other in self._adjacency[node]:
                if node < other:
                    yield node, other

    @property
    def letter_count(self) -> int:
        return len(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


def build_letter_graph(sides: Sequence[Sequence[str]]) -> LetterGraph:
    nodes = [
        LetterNode(side, position, letter)
        for side, letters in enumerate(sides)
        for position, letter in enumerate(letters)
    ]
    adjacency = {
        node: tuple(other for other in nodes if other.side != node.side)
        for node in nodes
    }
    return LetterGraph(nodes, adjacency)


def parse_box(text: str) -> list[list[str]]:
    """Parse a box string like ``"era lch yik tnp"`` or ``"era/lch/yik/tnp"``."""
    return [list(side.lower()) for side in re.split(r"[\s/]+", text.strip()) if side]
