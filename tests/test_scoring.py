from __future__ import annotations

import pytest

from knowledge import Knowledge
from scoring import (
    char_freq,
    coverage_guesses,
    freq_scored_guesses,
    hamming,
    ranked_letters,
    show_freq,
    word_score,
)
from wordle_env import LengthMismatchError, NoWordsSuppliedError


def test_char_freq_counts_every_occurrence(scenario_words):
    freq = char_freq(scenario_words)
    assert freq == {
        "a": 5, "e": 5, "l": 3, "t": 3, "r": 2,
        "s": 2, "c": 2, "n": 1, "h": 1, "p": 1,
    }
    assert char_freq(["geese"])["e"] == 3


def test_ranked_letters(scenario_words):
    ranked = ranked_letters(char_freq(scenario_words))
    counts = [c for _, c in ranked]
    assert counts == sorted(counts, reverse=True)
    assert [l for l, _ in ranked[:4]] == ["a", "e", "l", "t"]
    assert {l for l, _ in ranked[-3:]} == {"n", "h", "p"}


def test_word_score_counts_unique_uncovered_letters():
    freq = {"g": 1, "e": 3, "s": 2}
    assert word_score("geese", freq) == 6
    assert word_score("geese", freq, {"e"}) == 3
    assert word_score("zzzzz", freq) == 0


def test_top_coverage_guess_for_known_last_letter(scenario_words):
    k = Knowledge.from_tries("....e", "", [])
    freq = char_freq(k.filter(scenario_words))
    picks = coverage_guesses(scenario_words, freq, k.get_covered())
    assert picks[0] == "slate"
    assert word_score("slate", freq, k.get_covered()) == 13


def test_coverage_guesses_span_the_alphabet(scenario_words):
    freq = char_freq(scenario_words)
    covered = set()
    picks = coverage_guesses(scenario_words, freq, covered)
    assert picks == ["slate", "crane", "shale", "plate"]
    assert set("".join(picks)) >= set(freq)
    assert covered == set()


def test_coverage_guesses_stop_when_words_run_out():
    assert coverage_guesses(["ab"], {"a": 1, "b": 1, "z": 5}) == ["ab"]
    with pytest.raises(NoWordsSuppliedError):
        coverage_guesses([], {"a": 1})


def test_freq_scored_guesses_sorted_and_stable(scenario_words):
    scored = freq_scored_guesses(scenario_words, char_freq(scenario_words))
    assert scored == [
        ("slate", 18), ("trace", 17), ("plate", 17), ("shale", 16), ("crane", 15),
    ]


def test_hamming():
    assert hamming("crane", "trace") == 2
    assert hamming("slate", "slate") == 0
    with pytest.raises(LengthMismatchError):
        hamming("crane", "cranes")


def test_show_freq(capsys, scenario_words):
    show_freq(char_freq(scenario_words))
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Letter | Count"
    assert out[1] == "a      | 5"
    assert out[2] == "e      | 5"
