from letterboxed.letter_graph import LetterNode, build_letter_graph
from letterboxed.trie import build_trie
from letterboxed.words import Word, filter_dominated, find_words

BOX = [
    ["e", "r", "a"],
    ["l", "c", "h"],
    ["y", "i", "k"],
    ["t", "n", "p"],
]

WORDS = ["thin", "thick", "lyric", "near", "yacht", "era", "lyre", "hike",
         "pike", "tiny", "tray", "chin", "clay", "pint", "thyme", "relic"]


def _find(sides, words):
    return find_words(build_letter_graph(sides), build_trie(words))


def test_words_are_walks_on_the_box():
    graph = build_letter_graph(BOX)
    words = find_words(graph, build_trie(WORDS))
    assert words
    for w in words:
        assert len(w.text) == len(w.nodes)
        assert len(w.text) >= 3
        assert "".join(n.letter for n in w.nodes) == w.text
        for a, b in zip(w.nodes, w.nodes[1:]):
            assert graph.has_edge(a, b)


def test_same_side_letters_rejected():
    texts = {w.text for w in _find(BOX, WORDS)}
    assert {"thin", "thick", "lyric"} <= texts
    # e/r/a share a side, c/h share a side
    assert "near" not in texts
    assert "era" not in texts
    assert "yacht" not in texts


def test_two_sided_box():
    # a and b share a side, so does c and d: every letter must alternate
    words = _find([["a", "b"], ["c", "d"]], ["abc", "cda", "abcd"])
    assert words == []

    words = _find([["a", "b"], ["c", "d"]], ["acb", "cad", "acbd", "ab"])
    assert sorted(w.text for w in words) == ["acb", "acbd", "cad"]
    acb = next(w for w in words if w.text == "acb")
    assert [n.key for n in acb.nodes] == [(0, 0), (1, 0), (0, 1)]


def test_same_spelling_different_walks():
    words = _find([["a"], ["b"], ["a"]], ["aba"])
    assert len(words) == 4
    assert {w.text for w in words} == {"aba"}
    assert len({w.nodes for w in words}) == 4


def test_letters_can_repeat_in_a_walk():
    words = _find([["a"], ["a"]], ["aaa"])
    assert sorted(tuple(n.side for n in w.nodes) for w in words) == [(0, 1, 0), (1, 0, 1)]


def test_empty_inputs():
    assert _find([], ["cat"]) == []
    assert _find([[], []], ["cat"]) == []
    assert _find(BOX, []) == []


def test_cat_dominated_by_cats():
    words = _find([["c", "s"], ["a"], ["t"]], ["cat", "cats"])
    assert sorted(w.text for w in words) == ["cat", "cats"]
    assert [w.text for w in filter_dominated(words)] == ["cats"]


def test_filter_is_idempotent():
    words = _find(BOX, WORDS)
    once = filter_dominated(words)
    assert filter_dominated(once) == once
    assert len(once) <= len(words)


def test_no_survivor_dominated():
    survivors = filter_dominated(_find(BOX, WORDS))
    for x in survivors:
        for y in survivors:
            assert not x.coverage < y.coverage


def test_equal_coverage_keeps_first():
    n1, n2, n3 = LetterNode(0, 0, "x"), LetterNode(1, 0, "y"), LetterNode(2, 0, "z")
    w1 = Word("xyz", (n1, n2, n3))
    w2 = Word("zyx", (n3, n2, n1))
    assert filter_dominated([w1, w2]) == [w1]
    assert filter_dominated([w2, w1]) == [w2]


def test_partial_overlap_survives():
    n1, n2, n3, n4 = (LetterNode(i, 0, c) for i, c in enumerate("wxyz"))
    w1 = Word("wxy", (n1, n2, n3))
    w2 = Word("wxz", (n1, n2, n4))
    assert filter_dominated([w1, w2]) == [w1, w2]


def test_repeated_walks_collapse_to_widest():
    words = _find([["a"], ["b"], ["a"]], ["aba"])
    survivors = filter_dominated(words)
    assert len(survivors) == 1
    assert [n.key for n in survivors[0].nodes] == [(0, 0), (1, 0), (2, 0)]
