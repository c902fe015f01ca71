#!/usr/bin/env python3
"""Suggest the next guess from what is known so far.

Usage:
    python3 solve.py .....                       # first guess
    python3 solve.py ....e ar crane slate        # 'e' last, 'a'/'r' present
    python3 solve.py f.... --strategy frequency --top 10
"""

from __future__ import annotations

import argparse
import sys

from knowledge import Knowledge
from lexicon import load_disallowed, load_words
from strategies import find_strategy
from strategy import GameConfig
from wordle_env import EmptyCandidateSetError


def suggest(
    knowledge: Knowledge,
    words: list[str],
    strategy_name: str = "entropy",
    top: int = 5,
    opener: str | None = "raise",
    verbose: bool = False,
) -> list[tuple[str, float]]:
    """Rank up to *top* guesses for *knowledge*, best first."""
    strat = find_strategy(strategy_name)(verbose=verbose)
    strat.begin_game(GameConfig(
        word_length=len(knowledge),
        vocabulary=tuple(words),
        opener=opener,
    ))
    return strat.rank_guesses(knowledge, limit=top)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Word-guessing solver: suggest the next guess",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python3 solve.py .....                        # nothing known yet
  python3 solve.py ....e ar crane slate         # known hit, present letters, tries
  python3 solve.py f.... -w words.txt --top 10  # custom word list
""",
    )
    parser.add_argument("pattern",
                        help="Known positions and word length, '.' for unknown "
                             "(e.g. 'f....' for a five-letter word starting with f)")
    parser.add_argument("chars", nargs="?", default="",
                        help="Letters known to appear in the word, in any order")
    parser.add_argument("tried", nargs="*", default=[],
                        help="Previous guesses (used to derive absent letters and misses)")
    parser.add_argument("-w", "--wordlist", default=None,
                        help="Word list to draw guesses from "
                             "(default: $WORDLIST or /usr/share/dict/words)")
    parser.add_argument("-d", "--disallowed", default="disallowed",
                        help="File of words the game rejects (default: disallowed)")
    parser.add_argument("--strategy", default="entropy", help="Strategy name (default: entropy)")
    parser.add_argument("--top", type=int, default=5, help="Number of ranked guesses to print")
    parser.add_argument("--no-opener", action="store_true",
                        help="Score the first guess instead of using the fixed opener")
    parser.add_argument("--quiet", action="store_true", help="Only print the next guess")
    args = parser.parse_args()

    try:
        knowledge = Knowledge.from_tries(args.pattern, args.chars, args.tried)
        words = load_words(
            args.wordlist,
            word_length=len(args.pattern),
            disallowed=load_disallowed(args.disallowed),
        )
        ranked = suggest(
            knowledge,
            words,
            strategy_name=args.strategy,
            top=max(1, args.top),
            opener=None if args.no_opener else "raise",
            verbose=not args.quiet,
        )
    except EmptyCandidateSetError as exc:
        print(f"No candidates left: {exc}", file=sys.stderr)
        sys.exit(2)
    except (KeyError, FileNotFoundError, ValueError) as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    if not args.quiet and len(ranked) > 1:
        print("Ranked guesses:")
        for word, score in ranked:
            print(f"  {word}  {score:.3f}")
    print(f"Next guess: {ranked[0][0]}")


if __name__ == "__main__":
    main()
