"""
Candidate filtering given game history.

Given:
  - a pool of codes (initially the whole code space)
  - a history of (guess, Score) pairs
  - code length N

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the computer's only learning step: there is no ranking of guesses,
just pruning of everything the feedback rules out.
"""

from typing import Iterable, List, Tuple

from .scoring import Score, score

# History is a sequence of (guess, Score) tuples.
History = Iterable[Tuple[str, Score]]


def filter_candidates(codes: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only codes (length == N) that would produce exactly the recorded
    score for every (guess, score) in `history`.

    Args:
      codes   : iterable of candidate codes
      history : iterable of (guess, Score) seen so far
      N       : expected code length

    Returns:
      List[str] of consistent candidates (order preserved as in `codes`).
      The input is never mutated.
    """
    history = list(history)
    out: List[str] = []

    for c in codes:
        if len(c) != N:
            continue

        # A candidate survives only if, were it the secret, every past
        # guess would have scored exactly as observed.
        if all(score(c, g) == observed for g, observed in history):
            out.append(c)

    return out
