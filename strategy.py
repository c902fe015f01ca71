"""Abstract base class for guessing strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from knowledge import Knowledge, filter_candidates
from wordle_env import EmptyCandidateSetError, LengthMismatchError, NoWordsSuppliedError

_LOWERCASE_WORD = re.compile(r"[a-z]+")


@dataclass(frozen=True)
class GameConfig:
    """All information a strategy receives before it starts guessing.

    Attributes
    ----------
    word_length : int
        Number of letters in each word.
    vocabulary : tuple[str, ...]
        Every word the strategy may guess, in tie-break order.  The secret
        word is always drawn from this set.
    max_guesses : int
        Attempt budget per game (typically 6).
    opener : str or None
        Fixed first guess used while nothing is known yet.  ``None`` makes
        strategies that support it compute the opener from scratch.
    """

    word_length: int
    vocabulary: tuple[str, ...]
    max_guesses: int = 6
    opener: str | None = "raise"

    def __post_init__(self) -> None:
        if not self.vocabulary:
            raise NoWordsSuppliedError("vocabulary is empty")
        bad = [w for w in self.vocabulary if len(w) != self.word_length]
        if bad:
            raise LengthMismatchError(
                f"Words with wrong length (expected {self.word_length}): {bad[:5]}"
            )
        bad = [w for w in self.vocabulary if not _LOWERCASE_WORD.fullmatch(w)]
        if bad:
            raise ValueError(f"Words must be lowercase a-z only: {bad[:5]}")


class Strategy(ABC):
    """Interface that every guessing strategy implements.

    Parameters
    ----------
    verbose : bool
        Print candidate counts and score tables while guessing.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._config: GameConfig | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name (used in reports and lookups)."""
        ...

    def begin_game(self, config: GameConfig) -> None:
        """Called before the first guess of each game.

        Use this for precomputation over the vocabulary.  Subclasses that
        override it must call the base implementation.
        """
        self._config = config

    @property
    def config(self) -> GameConfig:
        if self._config is None:
            raise RuntimeError("Call begin_game() before guessing")
        return self._config

    @abstractmethod
    def rank_guesses(
        self, knowledge: Knowledge, limit: int | None = None
    ) -> list[tuple[str, float]]:
        """Return up to *limit* ``(guess, score)`` pairs, best first."""
        ...

    def next_guess(self, knowledge: Knowledge) -> str:
        return self.rank_guesses(knowledge, limit=1)[0][0]

    def _candidates(self, knowledge: Knowledge) -> list[str]:
        candidates = filter_candidates(knowledge, self.config.vocabulary)
        if not candidates:
            raise EmptyCandidateSetError(
                f"no word in the vocabulary fits {knowledge!r}"
            )
        if self.verbose:
            print(f"Candidates: {len(candidates)}")
        return candidates
