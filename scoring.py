"""Letter-frequency scoring and greedy letter-coverage guesses."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Sequence

from wordle_env import NoWordsSuppliedError, check_length


def char_freq(words: Iterable[str]) -> Counter[str]:
    """Count every letter occurrence across *words* (repeats included)."""
    freq: Counter[str] = Counter()
    for w in words:
        freq.update(w)
    return freq


def word_score(word: str, freq: Mapping[str, int], covered: Iterable[str] = ()) -> int:
    """Frequency points of the unique letters of *word* not yet covered."""
    covered = set(covered)
    return sum(freq.get(ch, 0) for ch in set(word) if ch not in covered)


def coverage_guesses(
    words: Sequence[str],
    freq: Mapping[str, int],
    covered: Iterable[str] | None = None,
) -> list[str]:
    """Greedily pick words until their letters span the frequency alphabet.

    Each round takes the highest scoring word (the earliest one in *words*
    on ties) and adds its letters to the covered set.  Stops early when no
    word brings any new points.  *covered* is copied, never mutated.
    """
    if not words:
        raise NoWordsSuppliedError("coverage_guesses needs at least one word")

    covered = set(covered or ())
    alphabet = set(freq)
    picks: list[str] = []

    while not alphabet <= covered:
        best = max(words, key=lambda w: word_score(w, freq, covered))
        if word_score(best, freq, covered) == 0:
            break
        picks.append(best)
        covered.update(best)

    return picks


def freq_scored_guesses(
    words: Sequence[str],
    freq: Mapping[str, int],
    covered: Iterable[str] = (),
) -> list[tuple[str, int]]:
    """All words with their score, best first (ties keep list order)."""
    covered = set(covered)
    scored = [(w, word_score(w, freq, covered)) for w in words]
    scored.sort(key=lambda ws: -ws[1])
    return scored


def ranked_letters(freq: Mapping[str, int]) -> list[tuple[str, int]]:
    return sorted(freq.items(), key=lambda kv: (-kv[1], kv[0]))


def show_freq(freq: Mapping[str, int]) -> None:
    print("Letter | Count")
    for letter, count in ranked_letters(freq):
        print(f"{letter:<7}| {count}")
    print()


def hamming(a: str, b: str) -> int:
    check_length(a, len(b))
    return sum(1 for x, y in zip(a, b) if x != y)
