from __future__ import annotations

from itertools import product

import pytest

from knowledge import Knowledge, filter_candidates
from wordle_env import LengthMismatchError

WORDS = [
    "crane", "trace", "slate", "shale", "plate", "brace", "grace",
    "geese", "those", "eerie", "pause", "stale", "least", "react",
]


def test_empty_knowledge_accepts_everything_of_the_right_length():
    k = Knowledge(5)
    assert k.is_empty()
    assert all(k.check_word(w) for w in WORDS)
    assert not k.check_word("cranes")
    assert k.filter(WORDS) == WORDS


def test_from_own_hits_accepts_the_answer():
    for answer in WORDS:
        k = Knowledge(len(answer))
        for i, ch in enumerate(answer):
            k.add_hit(ch, i)
        assert k.check_word(answer)
        assert Knowledge.from_tries(answer).check_word(answer)


def test_pattern_from_tries(scenario_words):
    k = Knowledge.from_tries("....e", "", [])
    assert k.pattern == (None, None, None, None, "e")
    assert k.present == {"e"}
    assert filter_candidates(k, scenario_words) == scenario_words


def test_from_tries_derives_misses_and_absent_letters():
    k = Knowledge.from_tries("....e", "a", ["crane"])
    assert k.absent == {"c", "r", "n"}
    assert k.present == {"a", "e"}
    assert "a" in k.misses[2]
    assert not k.check_word("trace")
    assert k.filter(["slate", "plate", "shale", "least"]) == []
    assert k.check_word("abbse") is True


def test_from_tries_keeps_hit_letters_out_of_absent():
    k = Knowledge.from_tries("....e", "", ["eerie"])
    assert k.present == {"e"}
    assert k.absent == {"r", "i"}
    assert not (k.present & k.absent)
    assert k.misses[0] == {"e"} and k.misses[1] == {"e"}
    assert "e" not in k.misses[4]


def test_from_tries_validation():
    with pytest.raises(ValueError):
        Knowledge.from_tries("..?..")
    with pytest.raises(LengthMismatchError):
        Knowledge.from_tries(".....", "", ["toolong"])


def test_learn_crane_against_trace():
    k = Knowledge(5)
    k.learn("crane", "trace")
    # 'c' missed position 0 and only position 3 is still open for it.
    assert k.pattern_string() == ".race"
    assert k.present == {"c", "r", "a", "e"}
    assert k.absent == {"n"}
    assert k.check_word("trace")
    assert k.check_word("brace")
    assert not k.check_word("crane")
    assert not k.fits("c", 0)
    assert k.fits("t", 0)
    assert not k.fits("n", 0)


def test_deduction_by_elimination():
    k = Knowledge(3)
    k.add_miss("a", 0)
    assert k.pattern == (None, None, None)
    k.add_miss("a", 1)
    assert k.pattern == (None, None, "a")
    assert "a" not in k.misses[2]


def test_absent_never_overrides_present():
    k = Knowledge(5)
    k.add_miss("e", 0)
    k.add_absent("e")
    assert "e" in k.present
    assert "e" not in k.absent


def test_add_miss_on_own_hit_is_rejected():
    k = Knowledge(5)
    k.add_hit("e", 4)
    with pytest.raises(ValueError):
        k.add_miss("e", 4)


def test_learn_length_mismatch_leaves_knowledge_untouched():
    k = Knowledge(5)
    with pytest.raises(LengthMismatchError):
        k.learn("cranes", "traces")
    with pytest.raises(LengthMismatchError):
        k.learn("crane", "traces")
    assert k.is_empty()


def test_relearning_is_idempotent():
    for guess in WORDS:
        for answer in WORDS:
            k = Knowledge(5)
            k.learn(guess, answer)
            once = k.filter(WORDS)
            covered = k.get_covered()
            k.learn(guess, answer)
            assert k.filter(WORDS) == once
            assert k.get_covered() == covered


def test_learning_only_shrinks_the_candidate_set():
    for first in WORDS:
        for answer in WORDS:
            k = Knowledge(5)
            k.learn(first, answer)
            before = set(k.filter(WORDS))
            for guess in WORDS:
                nxt = k.copy()
                nxt.learn(guess, answer)
                after = set(nxt.filter(WORDS))
                assert after <= before
                assert answer in after


def test_copy_is_independent():
    k = Knowledge(5)
    k.learn("crane", "trace")
    c = k.copy()
    c.learn("slate", "trace")
    assert "s" in c.absent
    assert "s" not in k.absent


def test_accessors():
    k = Knowledge(5)
    k.learn("crane", "trace")
    assert k.get_covered() == {"c", "r", "a", "e", "n"}
    assert k.get_absent() == {"n"}
    assert len(k) == 5
    assert "Knowledge(pattern='.race'" in repr(k)


def _check_with_learned_hits(k, hits, word):
    # Same rules as check_word, but only the hits seen in feedback are fixed.
    if not k.present <= set(word):
        return False
    for i, ch in enumerate(word):
        if i in hits:
            if ch != hits[i]:
                return False
        elif ch in k.present:
            if ch in k.misses[i]:
                return False
        elif ch in k.absent:
            return False
    return True


def test_deduced_hits_never_change_which_words_fit():
    promoted = 0
    for answer in WORDS:
        for guesses in product(WORDS, repeat=2):
            k = Knowledge(5)
            hits = {}
            for guess in guesses:
                k.learn(guess, answer)
                hits.update((i, a) for i, (g, a) in enumerate(zip(guess, answer)) if g == a)
            promoted += sum(
                1 for i, ch in enumerate(k.pattern) if ch is not None and i not in hits
            )
            for word in WORDS:
                assert k.check_word(word) == _check_with_learned_hits(k, hits, word), (
                    guesses, answer, word,
                )
    assert promoted > 0
