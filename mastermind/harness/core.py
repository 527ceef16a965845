"""
Self-play harness core primitives.

- run_case:  play one silent computer-vs-computer game against a known secret.
- run_batch: run many secrets in sequence (optionally a sample prefix).
- summarize: reduce a batch to guess-count statistics.

These functions are UI-agnostic so they can be reused by the benchmark CLI,
a notebook, or tests without changes. They share the state transitions of the
interactive game, so a benchmark measures exactly what the player faces.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple

import numpy as np

from mastermind.engine import Score, score
from mastermind.engine.codespace import ALPHABET_SIZE, CODE_LENGTH
from mastermind.game.states import AwaitingGuess, Won, apply_score, start_computer_game


def run_case(
        solver,
        secret: str,
        *,
        N: int = CODE_LENGTH,
        k: int = ALPHABET_SIZE,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver cracks `secret`.

    There is no turn budget: every wrong guess leaves the candidate list
    strictly smaller, so the game always ends.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, Score)]), secret (str)
    """
    solver.reset(N=N, k=k, seed=seed)

    history: List[Tuple[str, Score]] = []
    state = start_computer_game(k, N)

    t0 = time.perf_counter()
    while isinstance(state, AwaitingGuess):
        guess = solver.next_guess({"turn": state.turn, "candidates": state.candidates, "N": N})
        observed = score(secret, guess)
        history.append((guess, observed))
        state = apply_score(state, guess, observed, N)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": isinstance(state, Won), "guesses": len(history), "time_ms": dt,
        "history": history, "secret": secret,
    }


def run_batch(
        solver,
        secrets: Iterable[str],
        *,
        N: int = CODE_LENGTH,
        k: int = ALPHABET_SIZE,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = [s for s in secrets if len(s) == N]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, N=N, k=k, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Guess-count statistics for a batch:
      games, success_rate, mean, median, max, histogram (index = guesses).
    """
    if not results:
        return {"games": 0, "success_rate": 0.0, "mean": 0.0, "median": 0.0,
                "max": 0, "histogram": []}

    guesses = np.array([r["guesses"] for r in results], dtype=int)
    success = np.array([r["success"] for r in results], dtype=bool)
    return {
        "games": int(guesses.size),
        "success_rate": float(success.mean()),
        "mean": float(guesses.mean()),
        "median": float(np.median(guesses)),
        "max": int(guesses.max()),
        "histogram": np.bincount(guesses).tolist(),
    }


def pretty_summary(solver_id: str, summary: Dict) -> str:
    """One-line human summary, e.g. for the benchmark CLI."""
    hist = " ".join(f"{i}:{c}" for i, c in enumerate(summary["histogram"]) if c)
    return (
        f"[{solver_id}] games={summary['games']} "
        f"success={summary['success_rate']:.1%} "
        f"mean={summary['mean']:.3f} median={summary['median']:.1f} "
        f"max={summary['max']} | {hist}"
    )
