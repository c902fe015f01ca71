#!/usr/bin/env python3
"""Play many games with one strategy and measure how many guesses it needs.

Features:
  - Samples secret words from the vocabulary with a fixed seed.
  - Plays them in parallel worker processes (independent sessions).
  - Outputs a summary, a JSON report and a histogram.

Usage:
    python3 experiment.py --strategy entropy --num-games 500
    python3 experiment.py --strategy frequency --words words.txt --verbose
"""

from __future__ import annotations

import argparse
import json
import os
import random
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass, field
from pathlib import Path

from lexicon import load_words
from session import WordleSession
from strategies import find_strategy
from strategy import GameConfig
from wordle_env import pattern_string

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    secret: str
    solved: bool
    num_guesses: int
    guesses: list[str] = field(default_factory=list)


@dataclass
class ExperimentSummary:
    strategy: str
    games: int
    solved: int
    failures: int
    mean_guesses: float
    failure_rate: float
    guess_distribution: dict[str, int]

    def print_summary(self) -> None:
        print(f"\n=== {self.strategy} — {self.games} games ===")
        if not self.games:
            return
        print(f"  Solved: {self.solved}/{self.games} ({100 * self.solved / self.games:.1f}%)")
        print(f"  Mean guesses: {self.mean_guesses:.3f} (failures count as max + 1)")
        print(f"  Failures: {self.failures} ({100 * self.failure_rate:.2f}%)")
        for k, v in self.guess_distribution.items():
            print(f"    {k:>6}: {v}")


def summarize(results: list[GameResult], strategy_name: str, max_guesses: int = 6) -> ExperimentSummary:
    """Aggregate per-game results.  A failed game counts ``max_guesses + 1``."""
    n = len(results)
    solved = sum(1 for r in results if r.solved)
    total = sum(r.num_guesses if r.solved else max_guesses + 1 for r in results)

    dist: dict[str, int] = {}
    for r in sorted(results, key=lambda r: (not r.solved, r.num_guesses)):
        key = str(r.num_guesses) if r.solved else "failed"
        dist[key] = dist.get(key, 0) + 1

    return ExperimentSummary(
        strategy=strategy_name,
        games=n,
        solved=solved,
        failures=n - solved,
        mean_guesses=total / n if n else 0.0,
        failure_rate=(n - solved) / n if n else 0.0,
        guess_distribution=dist,
    )


# ------------------------------------------------------------------
# Worker function (runs in a child process)
# ------------------------------------------------------------------

def play_games(
    strategy_name: str,
    config: GameConfig,
    secrets: list[str],
    verbose: bool = False,
) -> list[GameResult]:
    """Play every secret with a fresh session of one strategy instance."""
    strat = find_strategy(strategy_name)()
    strat.begin_game(config)

    results: list[GameResult] = []
    for secret in secrets:
        session = WordleSession(strat, secret, max_guesses=config.max_guesses)
        session.play()
        guesses = [g for g, _ in session.history]
        results.append(GameResult(
            secret=secret,
            solved=session.solved,
            num_guesses=session.attempts,
            guesses=guesses,
        ))

        if verbose:
            print(f"\n--- Secret: {secret} ---")
            for i, (g, pat) in enumerate(session.history, 1):
                print(f"  Guess {i}: {g}  {pattern_string(pat)}")
            status = "SOLVED" if session.solved else "FAILED"
            print(f"  -> {status} in {session.attempts} guesses")

    return results


# ------------------------------------------------------------------
# Experiment runner
# ------------------------------------------------------------------

def run_experiment(
    strategy_name: str,
    vocabulary: list[str],
    num_games: int = 500,
    seed: int = 42,
    max_guesses: int = 6,
    opener: str | None = "raise",
    workers: int | None = None,
    verbose: bool = False,
) -> list[GameResult]:
    """Play *num_games* random secrets and return the per-game results.

    Secrets are split into one chunk per worker; every worker builds its own
    strategy, so no state is shared between processes.  ``workers=1`` plays
    everything in this process.
    """
    config = GameConfig(
        word_length=len(vocabulary[0]) if vocabulary else 0,
        vocabulary=tuple(vocabulary),
        max_guesses=max_guesses,
        opener=opener,
    )
    rng = random.Random(seed)
    secrets = rng.sample(vocabulary, min(num_games, len(vocabulary)))

    if workers is None:
        workers = min(os.cpu_count() or 4, 8)
    workers = max(1, min(workers, len(secrets)))

    if workers == 1:
        return play_games(strategy_name, config, secrets, verbose=verbose)

    chunks = [secrets[i::workers] for i in range(workers)]
    results: list[GameResult] = []
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(play_games, strategy_name, config, chunk, verbose): i
            for i, chunk in enumerate(chunks)
        }
        for fut in as_completed(futures):
            results.extend(fut.result())

    order = {s: i for i, s in enumerate(secrets)}
    results.sort(key=lambda r: order[r.secret])
    return results


def plot_distribution(results: list[GameResult], strategy_name: str, path: Path | None = None) -> Path:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    guesses = [r.num_guesses for r in results]
    mx = max(guesses) if guesses else 6
    bins = list(range(1, mx + 2))

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(guesses, bins=bins, edgecolor="black", align="left")
    ax.set_title(f"{strategy_name} — guess distribution")
    ax.set_xlabel("Guesses")
    ax.set_ylabel("Count")
    fig.tight_layout()

    dest = path or RESULTS_DIR / f"experiment_{strategy_name.lower()}.png"
    dest.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(dest, dpi=150)
    plt.close(fig)
    return dest


def main() -> None:
    parser = argparse.ArgumentParser(description="Single-strategy guessing experiment")
    parser.add_argument("--strategy", type=str, default="entropy", help="Strategy name")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list (default: $WORDLIST or /usr/share/dict/words)")
    parser.add_argument("--length", type=int, default=5, help="Word length")
    parser.add_argument("--max-guesses", type=int, default=6, help="Max guesses per game")
    parser.add_argument("--num-games", type=int, default=500, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--opener", type=str, default="raise",
                        help="Fixed first guess ('' to compute it)")
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers (default: auto)")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--plot", type=str, default=None, help="Save plot to this path")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args()

    try:
        find_strategy(args.strategy)
        words = load_words(args.words, word_length=args.length)
    except (KeyError, FileNotFoundError, ValueError) as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    print(f"Vocabulary: {len(words)} words of length {args.length}")

    t0 = time.time()
    results = run_experiment(
        strategy_name=args.strategy,
        vocabulary=words,
        num_games=args.num_games,
        seed=args.seed,
        max_guesses=args.max_guesses,
        opener=args.opener or None,
        workers=args.workers,
        verbose=args.verbose,
    )
    elapsed = time.time() - t0

    summary = summarize(results, args.strategy, args.max_guesses)
    summary.print_summary()
    total_guesses = sum(r.num_guesses for r in results)
    if total_guesses:
        print(f"  {total_guesses} guesses in {elapsed:.1f}s "
              f"({1e6 * elapsed / total_guesses:.0f} µs/guess)")

    plot_path = Path(args.plot) if args.plot else None
    dest = plot_distribution(results, summary.strategy, plot_path)
    print(f"Plot saved to {dest}")

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{args.strategy.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "config": {
            "strategy": args.strategy,
            "word_length": args.length,
            "max_guesses": args.max_guesses,
            "num_games": args.num_games,
            "seed": args.seed,
            "opener": args.opener or None,
        },
        "summary": asdict(summary),
        "games": [asdict(r) for r in results],
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
