"""Wordle environment: letter outcomes, pattern encoding and the error types."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

import numpy as np


# Feedback encoding:
# 2 = hit     (correct letter, correct position)
# 1 = present (letter occurs somewhere else in the answer)
# 0 = absent  (letter does not occur in the answer)
#
# Presence is a plain containment test: a repeated guess letter is marked
# present at every misplaced position, whatever the answer's letter count.


class LengthMismatchError(ValueError):
    """A pattern, guess or answer does not have the session's word length."""


class NoWordsSuppliedError(ValueError):
    """The word list is empty."""


class EmptyCandidateSetError(RuntimeError):
    """Filtering eliminated every word of the list."""


class LetterOutcome(IntEnum):
    ABSENT = 0
    PRESENT = 1
    HIT = 2


_SYMBOLS = {LetterOutcome.HIT: "=", LetterOutcome.PRESENT: "-", LetterOutcome.ABSENT: "_"}


def check_length(word: str, length: int, what: str = "word") -> None:
    if len(word) != length:
        raise LengthMismatchError(
            f"{what} {word!r} has length {len(word)}, expected {length}"
        )


def classify(guess: str, answer: str) -> tuple[LetterOutcome, ...]:
    """Return the per-position outcome of *guess* against *answer*."""
    check_length(guess, len(answer), "guess")

    outcomes = []
    for g, a in zip(guess, answer):
        if g == a:
            outcomes.append(LetterOutcome.HIT)
        elif g in answer:
            outcomes.append(LetterOutcome.PRESENT)
        else:
            outcomes.append(LetterOutcome.ABSENT)
    return tuple(outcomes)


def encode_pattern(outcomes: Iterable[int]) -> int:
    """Encode an outcome tuple as a single integer for fast hashing."""
    val = 0
    for i, c in enumerate(outcomes):
        val += int(c) * (3 ** i)
    return val


def pattern_string(outcomes: Iterable[int]) -> str:
    return "".join(_SYMBOLS[LetterOutcome(c)] for c in outcomes)


# ------------------------------------------------------------------
# Vectorised pattern table
# ------------------------------------------------------------------

def _letter_codes(words: Sequence[str]) -> np.ndarray:
    """Words as an (n, L) array of letter codes (0-25 for a-z)."""
    if not words:
        return np.zeros((0, 0), dtype=np.uint8)
    raw = "".join(words).encode("ascii")
    codes = np.frombuffer(raw, dtype=np.uint8) - ord("a")
    return codes.reshape(len(words), len(words[0]))


def pattern_matrix(
    guesses: Sequence[str],
    answers: Sequence[str],
    chunk_size: int = 128,
) -> np.ndarray:
    """Encoded patterns for every (guess, answer) pair.

    Returns an array of shape ``(len(guesses), len(answers))`` whose entry
    ``[i, j]`` equals ``encode_pattern(classify(guesses[i], answers[j]))``.
    Guesses are processed in chunks to bound memory.
    """
    if not guesses or not answers:
        return np.zeros((len(guesses), len(answers)), dtype=np.uint16)
    length = len(answers[0])
    for w in guesses:
        check_length(w, length, "guess")
    for w in answers:
        check_length(w, length, "answer")

    dtype = np.uint8 if 3 ** length <= 256 else (np.uint16 if 3 ** length <= 65536 else np.uint32)
    g_codes = _letter_codes(guesses)
    a_codes = _letter_codes(answers)

    # contains[j, c] is True when answer j has letter c anywhere
    contains = np.zeros((len(answers), 26), dtype=bool)
    rows = np.repeat(np.arange(len(answers)), length)
    contains[rows, a_codes.ravel()] = True

    weights = (3 ** np.arange(length)).astype(np.int64)
    out = np.empty((len(guesses), len(answers)), dtype=dtype)

    for start in range(0, len(guesses), chunk_size):
        chunk = g_codes[start:start + chunk_size]
        hits = chunk[:, None, :] == a_codes[None, :, :]
        # present[i, j, k]: guess i's k-th letter occurs in answer j
        present = contains[:, chunk].transpose(1, 0, 2)
        outcome = np.where(hits, 2, np.where(present, 1, 0))
        out[start:start + chunk_size] = (outcome @ weights).astype(dtype)

    return out
