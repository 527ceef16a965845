"""
First Consistent solver.

Strategy:
  - Play the head of the CURRENT candidate list. The list keeps the code
    space generation order, so the first guess is the opening code ("abcd")
    and every later guess is the earliest code still consistent with all
    feedback.

This is the computer player used by the interactive game.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class FirstConsistentSolver(BaseSolver):
    id = "first_consistent"
    name = "First Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates left to guess from")
        return candidates[0]
