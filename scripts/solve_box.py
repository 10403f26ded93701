"""
Solve a Letter Boxed puzzle from the command line.

Usage:
    python -m scripts.solve_box [--dictionary PATH] [--box "era lch yik tnp"] [--top N]

Examples:
    python -m scripts.solve_box
    python -m scripts.solve_box --box "era/lch/yik/tnp" --top 5
    python -m scripts.solve_box --dictionary /usr/share/dict/words

Prints how many words fit the box, how many survive the dominance filter,
how many covering chains were found and the best few of them.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from letterboxed.letter_graph import parse_box
from letterboxed.settings import settings
from letterboxed.solver import SearchOverflow, solve
from letterboxed.trie import load_trie

logger = logging.getLogger("letterboxed")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def format_solution(solution) -> str:
    parts = []
    for text, keys in solution.as_pairs():
        path = " -> ".join(f"{side}{pos}:{letter}" for (side, pos), letter in zip(keys, text))
        parts.append(f"{text} [{path}]")
    return "  " + ", ".join(parts)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Letter Boxed Solver")
    parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help="Path to dictionary file with one word per line")
    parser.add_argument("--box", default=settings.BOX_LAYOUT,
                        help="Box sides separated by spaces or '/', e.g. \"era lch yik tnp\"")
    parser.add_argument("--top", type=positive_int, default=settings.TOP_SOLUTIONS,
                        help="Number of solutions to show")
    parser.add_argument("--max-chain-length", type=positive_int, default=settings.MAX_CHAIN_LENGTH,
                        help="Abort the search if a word chain grows past this length")
    parser.add_argument("--min-word-length", type=positive_int, default=settings.MIN_WORD_LENGTH)
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    trie = load_trie(args.dictionary, args.min_word_length)
    sides = parse_box(args.box)

    try:
        result = solve(sides, trie, max_chain_length=args.max_chain_length, top=args.top)
    except SearchOverflow as e:
        logger.error("Search aborted: %s", e)
        return 1

    print("Found", result.word_count, "valid words")
    print("Filtered down to", result.filtered_count, "optimal words")
    print("Found", result.solution_count, "solutions")
    print("Showing the", args.top, "best solutions")
    for solution in result.solutions:
        print(format_solution(solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
