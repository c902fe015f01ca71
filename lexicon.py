"""Word-list loading utilities.

Word lists are plain text, one word per line (``/usr/share/dict/words``
style).  Only all-lowercase ``a-z`` words of the requested length are kept,
which drops proper names and words with punctuation.  A separate list of
disallowed words (words the game rejects) can be subtracted.
"""

from __future__ import annotations

import os
import re
import unicodedata
from pathlib import Path
from typing import Iterable

from wordle_env import NoWordsSuppliedError

DEFAULT_WORDLIST = "/usr/share/dict/words"
WORDLIST_ENV = "WORDLIST"


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in nfkd if unicodedata.category(ch) != "Mn")


def resolve_wordlist(path: str | None = None) -> Path:
    """Explicit *path*, else ``$WORDLIST``, else the system dictionary."""
    if path is not None:
        return Path(path)
    return Path(os.environ.get(WORDLIST_ENV, DEFAULT_WORDLIST))


def read_lines(path: str | Path) -> list[str]:
    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(f"Word list not found: {src}")
    return src.read_text(encoding="utf-8", errors="replace").splitlines()


def load_disallowed(path: str | Path | None) -> set[str]:
    """Words the game refuses; a missing file means none."""
    if path is None or not Path(path).exists():
        return set()
    return {line.strip() for line in read_lines(path) if line.strip()}


def valid_words(
    words: Iterable[str],
    word_length: int,
    disallowed: Iterable[str] = (),
) -> list[str]:
    """Keep lowercase ``a-z`` words of *word_length* not in *disallowed*.

    Order is preserved and duplicates are dropped.
    """
    pattern = re.compile(rf"^[a-z]{{{word_length}}}$")
    banned = set(disallowed)
    seen: set[str] = set()
    out: list[str] = []
    for raw in words:
        w = _strip_accents(raw.strip())
        if not w or w in seen or w in banned:
            continue
        if pattern.match(w):
            seen.add(w)
            out.append(w)
    return out


def load_words(
    path: str | Path | None = None,
    word_length: int = 5,
    disallowed: Iterable[str] = (),
) -> list[str]:
    """Load the sorted list of playable words.

    Parameters
    ----------
    path : str, Path or None
        Word list file.  None resolves through :func:`resolve_wordlist`.
    word_length : int
        Only keep words of this exact length.
    disallowed : iterable of str
        Words to leave out.

    Raises
    ------
    FileNotFoundError
        If the word list does not exist.
    NoWordsSuppliedError
        If no word of the requested length survives.
    """
    src = resolve_wordlist(None if path is None else str(path))
    words = valid_words(read_lines(src), word_length, disallowed)
    if not words:
        raise NoWordsSuppliedError(f"No {word_length}-letter words found in {src}")
    words.sort()
    return words
