"""Accumulated knowledge about the secret word, and candidate filtering."""

from __future__ import annotations

from typing import Iterable, Sequence

from wordle_env import LetterOutcome, check_length, classify


class Knowledge:
    """Everything learned about the answer so far in one guessing session.

    Attributes (read-only views)
    ----------------------------
    pattern : tuple[str | None, ...]
        Confirmed letter per position, ``None`` where unknown.
    present : frozenset[str]
        Letters known to occur in the answer.
    absent : frozenset[str]
        Letters known not to occur in the answer.
    misses : tuple[frozenset[str], ...]
        Per position, present letters known not to sit there.
    """

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError(f"word length must be positive, got {length}")
        self._pattern: list[str | None] = [None] * length
        self._present: set[str] = set()
        self._absent: set[str] = set()
        self._misses: list[set[str]] = [set() for _ in range(length)]

    @classmethod
    def from_tries(
        cls,
        pattern: str,
        present_chars: str = "",
        tries: Iterable[str] = (),
    ) -> Knowledge:
        """Rebuild knowledge from what a player typed in.

        *pattern* holds confirmed letters and ``.`` for unknown positions;
        its length is the word length.  *present_chars* lists letters known
        to be somewhere in the word.  Each tried word then contributes a miss
        for every known letter not confirmed at that position, and marks
        every other letter absent.
        """
        ret = cls(len(pattern))
        for i, ch in enumerate(pattern):
            if ch == ".":
                continue
            if not ("a" <= ch <= "z"):
                raise ValueError(f"invalid pattern character {ch!r} in {pattern!r}")
            ret.add_hit(ch, i)

        known = set(present_chars) | {ch for ch in pattern if ch != "."}

        for word in tries:
            check_length(word, len(pattern), "tried word")
            for i, ch in enumerate(word):
                if ch in known:
                    if ret._pattern[i] != ch:
                        ret.add_miss(ch, i)
                else:
                    ret.add_absent(ch)

        return ret

    def copy(self) -> Knowledge:
        ret = Knowledge(len(self._pattern))
        ret._pattern = list(self._pattern)
        ret._present = set(self._present)
        ret._absent = set(self._absent)
        ret._misses = [set(m) for m in self._misses]
        return ret

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._pattern)

    def is_empty(self) -> bool:
        return (
            all(x is None for x in self._pattern)
            and not self._present
            and not self._absent
            and not any(self._misses)
        )

    def fits(self, ch: str, at: int) -> bool:
        """Could letter *ch* legally occupy position *at*?"""
        known = self._pattern[at]
        if known is not None:
            return known == ch
        if ch in self._present:
            return ch not in self._misses[at]
        return ch not in self._absent

    def check_word(self, word: str) -> bool:
        if len(word) != len(self._pattern):
            return False
        if not all(self.fits(ch, i) for i, ch in enumerate(word)):
            return False
        # Each letter fits, but does the word use everything we know is there?
        return self._present.issubset(word)

    def filter(self, words: Iterable[str]) -> list[str]:
        return [w for w in words if self.check_word(w)]

    def get_covered(self) -> set[str]:
        """Letters whose presence is already settled (present or absent)."""
        return self._present | self._absent

    def get_absent(self) -> set[str]:
        return set(self._absent)

    @property
    def pattern(self) -> tuple[str | None, ...]:
        return tuple(self._pattern)

    @property
    def present(self) -> frozenset[str]:
        return frozenset(self._present)

    @property
    def absent(self) -> frozenset[str]:
        return frozenset(self._absent)

    @property
    def misses(self) -> tuple[frozenset[str], ...]:
        return tuple(frozenset(m) for m in self._misses)

    def pattern_string(self) -> str:
        return "".join(ch or "." for ch in self._pattern)

    def __repr__(self) -> str:
        return (
            f"Knowledge(pattern={self.pattern_string()!r}, "
            f"present={''.join(sorted(self._present))!r}, "
            f"absent={''.join(sorted(self._absent))!r})"
        )

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def add_hit(self, ch: str, at: int) -> None:
        self._pattern[at] = ch
        self._present.add(ch)
        self._absent.discard(ch)
        self._misses[at].discard(ch)
        self._deduce()

    def add_miss(self, ch: str, at: int) -> None:
        if self._pattern[at] == ch:
            raise ValueError(f"{ch!r} is a confirmed hit at position {at}")
        self._misses[at].add(ch)
        self._present.add(ch)
        self._absent.discard(ch)
        self._deduce()

    def add_absent(self, ch: str) -> None:
        # A letter seen in the answer stays present.
        if ch not in self._present:
            self._absent.add(ch)

    def learn(self, guess: str, answer: str) -> None:
        """Fold the outcome of *guess* against *answer* into this knowledge."""
        check_length(guess, len(self._pattern), "guess")
        check_length(answer, len(self._pattern), "answer")

        for i, (ch, outcome) in enumerate(zip(guess, classify(guess, answer))):
            if outcome is LetterOutcome.HIT:
                self.add_hit(ch, i)
            elif outcome is LetterOutcome.PRESENT:
                self.add_miss(ch, i)
            else:
                self.add_absent(ch)

    def _deduce(self) -> None:
        """Promote present letters that have a single open position to hits."""
        changed = True
        while changed:
            changed = False
            for ch in sorted(self._present):
                if ch in self._pattern:
                    continue
                slots = [
                    i for i, known in enumerate(self._pattern)
                    if known is None and ch not in self._misses[i]
                ]
                if len(slots) == 1:
                    self._pattern[slots[0]] = ch
                    changed = True


def filter_candidates(knowledge: Knowledge, words: Sequence[str]) -> list[str]:
    """Keep only the words still consistent with *knowledge*, in order."""
    return knowledge.filter(words)
