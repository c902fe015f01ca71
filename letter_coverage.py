#!/usr/bin/env python3
"""Letter-frequency table and greedy coverage guesses for a word list.

Letters are worth points equal to their number of appearances in the word
list; the guesses printed are picked one by one to cover as many points of
not-yet-covered letters as possible.

Usage:
    python3 letter_coverage.py /usr/share/dict/words
    python3 letter_coverage.py words.txt tares arose --length 5 --entropy
"""

from __future__ import annotations

import argparse
import sys

from lexicon import load_words
from scoring import char_freq, coverage_guesses, show_freq
from strategies.entropy_strat import best_opener


def main() -> None:
    parser = argparse.ArgumentParser(description="Letter coverage report for a word list")
    parser.add_argument("wordlist", help="Word list file, one word per line")
    parser.add_argument("disallowed", nargs="*", default=[],
                        help="Words to leave out")
    parser.add_argument("--length", type=int, default=5, help="Word length (default: 5)")
    parser.add_argument("--entropy", action="store_true",
                        help="Also compute the highest-entropy opener (slow on big lists)")
    args = parser.parse_args()

    try:
        words = load_words(args.wordlist, word_length=args.length, disallowed=args.disallowed)
    except (FileNotFoundError, ValueError) as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)

    print(f"{len(words)} words of length {args.length}\n")
    freq = char_freq(words)
    show_freq(freq)

    for guess in coverage_guesses(words, freq):
        print(guess)

    if args.entropy:
        word, h = best_opener(words)
        print(f"\nBest entropy opener: {word} (H = {h:.4f} bits)")


if __name__ == "__main__":
    main()
