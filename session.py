"""A single guessing game: a strategy guesses until it solves or runs out."""

from __future__ import annotations

from enum import Enum

from knowledge import Knowledge
from wordle_env import EmptyCandidateSetError, LetterOutcome, check_length, classify


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class WordleSession:
    """A single guessing session driven by a strategy.

    Parameters
    ----------
    strategy : Strategy
        Proposes guesses; ``begin_game`` must already have been called.
    answer : str
        The secret word.
    max_guesses : int
        Attempt budget; the session is exhausted once it is spent.
    """

    def __init__(self, strategy, answer: str, max_guesses: int = 6) -> None:
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be positive, got {max_guesses}")
        self._strategy = strategy
        self._answer = answer
        self._max_guesses = max_guesses
        self._knowledge = Knowledge(len(answer))
        self._history: list[tuple[str, tuple[LetterOutcome, ...]]] = []
        self._attempts = 0
        self._state = SessionState.IN_PROGRESS

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def step(self) -> SessionState:
        """Ask the strategy for one guess and absorb its outcome.

        Raises
        ------
        RuntimeError
            If the session already reached a terminal state.
        LengthMismatchError
            If the strategy proposes a word of the wrong length.
        """
        if self._state is not SessionState.IN_PROGRESS:
            raise RuntimeError("Session is already over")

        try:
            word = self._strategy.next_guess(self._knowledge)
        except EmptyCandidateSetError:
            self._state = SessionState.EXHAUSTED
            return self._state

        check_length(word, len(self._answer), "guess")
        self._attempts += 1
        self._history.append((word, classify(word, self._answer)))

        if word == self._answer:
            self._state = SessionState.SOLVED
        else:
            self._knowledge.learn(word, self._answer)
            if self._attempts >= self._max_guesses:
                self._state = SessionState.EXHAUSTED
        return self._state

    def play(self) -> SessionState:
        while self._state is SessionState.IN_PROGRESS:
            self.step()
        return self._state

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def solved(self) -> bool:
        return self._state is SessionState.SOLVED

    @property
    def knowledge(self) -> Knowledge:
        return self._knowledge

    @property
    def history(self) -> list[tuple[str, tuple[LetterOutcome, ...]]]:
        return list(self._history)

    @property
    def max_guesses(self) -> int:
        return self._max_guesses
