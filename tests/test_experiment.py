from __future__ import annotations

from pathlib import Path

import pytest

from experiment import GameResult, plot_distribution, run_experiment, summarize
from lexicon import load_words

DICT = Path("/usr/share/dict/words")


def test_run_experiment_inline(scenario_words):
    results = run_experiment(
        "entropy", scenario_words, num_games=5, seed=1, opener=None, workers=1,
    )
    assert sorted(r.secret for r in results) == sorted(scenario_words)
    assert all(r.solved for r in results)
    assert all(r.guesses[-1] == r.secret for r in results)
    assert all(len(r.guesses) == r.num_guesses for r in results)


def test_run_experiment_is_reproducible(scenario_words):
    a = run_experiment("frequency", scenario_words, num_games=3, seed=7, workers=1)
    b = run_experiment("frequency", scenario_words, num_games=3, seed=7, workers=1)
    assert a == b


def test_summarize_counts_failures_as_one_past_the_budget():
    results = [
        GameResult(secret="crane", solved=True, num_guesses=3),
        GameResult(secret="trace", solved=False, num_guesses=6),
    ]
    summary = summarize(results, "Entropy", max_guesses=6)
    assert summary.games == 2
    assert summary.solved == 1
    assert summary.failures == 1
    assert summary.mean_guesses == pytest.approx(5.0)
    assert summary.failure_rate == pytest.approx(0.5)
    assert summary.guess_distribution == {"3": 1, "failed": 1}


def test_plot_distribution(tmp_path, scenario_words):
    results = [GameResult(secret=w, solved=True, num_guesses=i + 1) for i, w in enumerate(scenario_words)]
    dest = plot_distribution(results, "Entropy", tmp_path / "hist.png")
    assert dest.exists()


@pytest.mark.slow
@pytest.mark.skipif(not DICT.exists(), reason="system dictionary not installed")
def test_entropy_average_guesses_on_system_dictionary():
    words = load_words(DICT, 5)
    results = run_experiment("entropy", words, num_games=500, seed=2022)
    summary = summarize(results, "Entropy")
    print(f"{summary.games} words. Average attempts {summary.mean_guesses}. "
          f"{summary.failures} failures.")
    assert summary.mean_guesses < 4.1
    assert summary.failure_rate < 0.001
