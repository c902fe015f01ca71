"""Entropy strategy: maximise expected information gain per guess.

The pattern of every (guess, answer) pair of the vocabulary is computed once
per vocabulary with numpy; each turn then only gathers the candidate columns
and measures how evenly every guess splits them.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

import numpy as np

from knowledge import Knowledge
from strategy import Strategy, GameConfig
from wordle_env import NoWordsSuppliedError, classify, encode_pattern, pattern_matrix


def entropy_from_counts(counts) -> float:
    """Shannon entropy, in bits, of a histogram of pattern counts."""
    c = np.sort(np.asarray(counts, dtype=np.float64))
    c = c[c > 0]
    if c.size == 0:
        return 0.0
    p = c / c.sum()
    h = float(-(p * np.log2(p)).sum())
    return h if h > 0 else 0.0


def entropy_of_guess(guess: str, candidates: Sequence[str]) -> float:
    """Expected information (bits) from the outcome of *guess*."""
    pattern_counts = Counter(encode_pattern(classify(guess, c)) for c in candidates)
    return entropy_from_counts(list(pattern_counts.values()))


def _row_entropies(codes: np.ndarray, chunk_size: int = 1024) -> np.ndarray:
    """Entropy of each row's pattern distribution.

    Only the patterns that occur are counted: each row is sorted and its
    runs of equal codes are the bucket sizes.  Rows are processed in chunks
    so memory stays proportional to the rows × columns of one chunk.
    """
    n_rows, n_cols = codes.shape
    out = np.zeros(n_rows, dtype=np.float64)
    if n_cols == 0:
        return out

    for start in range(0, n_rows, chunk_size):
        block = np.sort(codes[start:start + chunk_size], axis=1)
        rows = block.shape[0]

        # A run starts at column 0 and wherever the code changes.
        starts_mask = np.ones(block.shape, dtype=bool)
        starts_mask[:, 1:] = block[:, 1:] != block[:, :-1]
        starts = np.flatnonzero(starts_mask)
        sizes = np.diff(np.append(starts, block.size))
        row_of = starts // n_cols

        # Sorted sizes within each row make equal distributions sum to
        # bit-identical floats.
        order = np.lexsort((sizes, row_of))
        p = sizes[order] / n_cols
        terms = p * np.log2(p)
        first = np.searchsorted(row_of[order], np.arange(rows))
        out[start:start + rows] = np.maximum(-np.add.reduceat(terms, first), 0.0)

    return out


def best_opener(vocabulary: Sequence[str]) -> tuple[str, float]:
    """Compute the highest-entropy first guess from scratch."""
    if not vocabulary:
        raise NoWordsSuppliedError("vocabulary is empty")
    codes = pattern_matrix(vocabulary, vocabulary)
    h = _row_entropies(codes)
    best = int(np.argmax(h))
    return vocabulary[best], float(h[best])


class EntropyStrategy(Strategy):
    """Select the guess that maximises Shannon entropy of the outcome partition.

    Ties go to the word that comes first in the vocabulary.  While nothing
    is known yet the configured opener is returned without scoring.
    """

    def __init__(self, verbose: bool = False) -> None:
        super().__init__(verbose)
        self._matrix_vocab: tuple[str, ...] | None = None
        self._matrix: np.ndarray | None = None
        self._index: dict[str, int] = {}

    @property
    def name(self) -> str:
        return "Entropy"

    def begin_game(self, config: GameConfig) -> None:
        super().begin_game(config)
        if self._matrix_vocab != config.vocabulary:
            self._matrix = pattern_matrix(config.vocabulary, config.vocabulary)
            self._matrix_vocab = config.vocabulary
            self._index = {w: i for i, w in enumerate(config.vocabulary)}

    def guess_entropies(self, candidates: Sequence[str]) -> np.ndarray:
        """Entropy of every vocabulary word over *candidates*."""
        cols = np.fromiter(
            (self._index[c] for c in candidates), dtype=np.intp, count=len(candidates)
        )
        return _row_entropies(self._matrix[:, cols])

    def rank_guesses(
        self, knowledge: Knowledge, limit: int | None = None
    ) -> list[tuple[str, float]]:
        candidates = self._candidates(knowledge)
        vocab = self.config.vocabulary

        if len(candidates) < 3:
            return [(w, entropy_of_guess(w, candidates)) for w in candidates][:limit]

        opener = self.config.opener
        if (
            len(candidates) == len(vocab)
            and opener is not None
            and len(opener) == self.config.word_length
        ):
            if opener in self._index:
                row = self._matrix[[self._index[opener]]]
                h = float(_row_entropies(row)[0])
            else:
                h = entropy_of_guess(opener, candidates)
            if self.verbose:
                print(f"{opener}: H = {h}")
            return [(opener, h)]

        h = self.guess_entropies(candidates)
        order = np.argsort(-h, kind="stable")
        if limit is not None:
            order = order[:limit]
        ranked = [(vocab[i], float(h[i])) for i in order]

        if self.verbose:
            best, best_h = ranked[0]
            print(f"{best}: H = {best_h}")
        return ranked
