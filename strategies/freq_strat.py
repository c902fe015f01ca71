"""Frequency strategy: cover the most common unknown letters of the candidates."""

from __future__ import annotations

from itertools import groupby

from knowledge import Knowledge
from scoring import char_freq, freq_scored_guesses, hamming, word_score
from strategy import Strategy


class FreqStrategy(Strategy):
    """Guess the word whose unseen letters carry the most frequency points.

    Letter frequencies come from the remaining candidates, but every word of
    the vocabulary may be guessed: a non-candidate can still split the
    candidates well.  Among the words tied for the top score, the one
    closest (Hamming distance) to some candidate wins, since its letters are
    more likely to land on a confirmable position.
    """

    @property
    def name(self) -> str:
        return "Frequency"

    def rank_guesses(
        self, knowledge: Knowledge, limit: int | None = None
    ) -> list[tuple[str, float]]:
        candidates = self._candidates(knowledge)
        if self.verbose and len(candidates) < 100:
            for w in candidates:
                print(f"  {w}")
        freq = char_freq(candidates)
        covered = knowledge.get_covered()

        # Few enough left: just answer.
        if len(candidates) < 3:
            return [(w, float(word_score(w, freq, covered))) for w in candidates][:limit]

        scored = freq_scored_guesses(self.config.vocabulary, freq, covered)

        ranked: list[tuple[str, float]] = []
        for _, band in groupby(scored, key=lambda ws: ws[1]):
            band = sorted(band, key=lambda ws: _nearest(ws[0], candidates))
            ranked.extend((w, float(s)) for w, s in band)
            if limit is not None and len(ranked) >= limit:
                break

        if self.verbose:
            print("Guesses:")
            for w, _ in ranked[:5]:
                print(f"  {w}")

        return ranked[:limit]


def _nearest(word: str, candidates: list[str]) -> int:
    return min(hamming(word, c) for c in candidates)
