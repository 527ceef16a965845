"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - A baseline for the self-play benchmark; it does not try to maximize
    information gain.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "turn":       1-based turn number
                - "candidates": current consistent code list (List[str])
                - "N":          code length

        Returns:
            A single guess string of length N.
        """
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates left to guess from")

        i = self.rng.randrange(len(candidates))
        return candidates[i]
