"""
Mastermind scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - right : peg of the correct colour in the correct position
  - wrong : peg of a correct colour in the wrong position

This implementation is:
  - length-aware (any code length)
  - duplicate-safe (each secret peg is consumed by at most one guess peg)
  - symmetric (score(a, b) == score(b, a))

Algorithm (two-pass):
  1) First pass counts exact matches and collects the leftover pegs of
     both codes.
  2) 'wrong' is the size of the multiset intersection of the leftovers.
"""

from collections import Counter
from typing import NamedTuple


class Score(NamedTuple):
    right: int
    wrong: int


def score(secret: str, guess: str) -> Score:
    """
    Compute Mastermind feedback for `guess` against `secret`.

    Preconditions:
      - len(secret) == len(guess)

    Examples:
      score("abcd", "abcd") -> Score(right=4, wrong=0)
      score("abcd", "aaab") -> Score(right=1, wrong=1)
    """
    assert len(secret) == len(guess), "Secret and guess must be the same length"

    right = 0
    secret_left: Counter = Counter()
    guess_left: Counter = Counter()

    # Pass 1: exact matches; everything else goes into the leftover pools.
    for s, g in zip(secret, guess):
        if s == g:
            right += 1
        else:
            secret_left[s] += 1
            guess_left[g] += 1

    # Pass 2: Counter '&' keeps min(count) per peg value.
    wrong = sum((secret_left & guess_left).values())

    return Score(right, wrong)
