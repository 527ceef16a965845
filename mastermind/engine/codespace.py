"""
The space of possible secret codes.

Conventions:
  - a peg is one lowercase letter drawn from the first k letters of a..z
  - a code is a plain string of exactly n pegs (pegs may repeat)

The generated ordering matters to the computer player: it always plays the
head of the (filtered) candidate list, so the first element doubles as the
opening guess. That opening guess is the alphabet cycled to fill n slots
("abcd" for the classic 6-colour / 4-peg game), followed by every other code
in lexicographic order.
"""

from __future__ import annotations

import random
import string
from itertools import product
from typing import List

# Fixed scheme for the classic game.
ALPHABET_SIZE = 6
CODE_LENGTH = 4


def alphabet(k: int = ALPHABET_SIZE) -> str:
    """Return the first k peg symbols, e.g. alphabet(6) -> "abcdef"."""
    if not 2 <= k <= len(string.ascii_lowercase):
        raise ValueError(f"alphabet size must be between 2 and 26; got {k}")
    return string.ascii_lowercase[:k]


def opening_code(k: int = ALPHABET_SIZE, n: int = CODE_LENGTH) -> str:
    """
    Cyclic fill of the alphabet: "abcd" for (6, 4), "abab" for (2, 4).
    Note this is not the lexicographically smallest code ("aaaa").
    """
    symbols = alphabet(k)
    return "".join(symbols[i % k] for i in range(n))


def generate_all(k: int = ALPHABET_SIZE, n: int = CODE_LENGTH) -> List[str]:
    """
    Enumerate all k**n codes, opening code first.

    Returns:
      List[str] with no duplicates; the order is deterministic so that
      computer play is reproducible.
    """
    opening = opening_code(k, n)
    out: List[str] = [opening]
    for pegs in product(alphabet(k), repeat=n):
        code = "".join(pegs)
        if code != opening:
            out.append(code)
    return out


def random_code(rng: random.Random, k: int = ALPHABET_SIZE, n: int = CODE_LENGTH) -> str:
    """Draw n independent pegs from the alphabet with the given RNG."""
    symbols = alphabet(k)
    return "".join(rng.choice(symbols) for _ in range(n))
