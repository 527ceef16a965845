"""
Game states and the pure transitions between them.

Computer-guessing modes hold AwaitingGuess(turn, candidates); the
human-guessing mode holds AwaitingScore(turn, secret). Won, Cheated and Quit
are terminal. The transitions here do no I/O so the driver loops stay thin.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from mastermind.engine import Score, filter_candidates, score
from mastermind.engine.codespace import ALPHABET_SIZE, CODE_LENGTH, generate_all, random_code
from mastermind.engine.validation import validate_guess

log = logging.getLogger(__name__)


@dataclass
class AwaitingGuess:
    turn: int
    candidates: List[str]


@dataclass
class AwaitingScore:
    turn: int
    secret: str


@dataclass
class Won:
    turn: int
    code: str


@dataclass
class Cheated:
    turn: int


@dataclass
class Quit:
    turn: int


ComputerState = Union[AwaitingGuess, Won, Cheated, Quit]
HumanState = Union[AwaitingScore, Won, Quit]


def start_computer_game(k: int = ALPHABET_SIZE, n: int = CODE_LENGTH) -> AwaitingGuess:
    """Turn 1 with the full code space as candidates."""
    return AwaitingGuess(turn=1, candidates=generate_all(k, n))


def start_human_game(rng: random.Random, k: int = ALPHABET_SIZE,
                     n: int = CODE_LENGTH) -> AwaitingScore:
    """Turn 1 against a freshly drawn secret."""
    return AwaitingScore(turn=1, secret=random_code(rng, k, n))


def apply_score(state: AwaitingGuess, guess: str, observed: Score, N: int) -> ComputerState:
    """
    Advance a computer-guessing game after `guess` was scored `observed`.

    - right == N          -> Won
    - no survivors        -> Cheated (the score contradicts every candidate)
    - otherwise           -> AwaitingGuess(turn + 1, survivors)

    The played guess is always dropped from the survivors; it has been tried
    and did not win.
    """
    if observed.right == N:
        log.info("won on turn %d with %s", state.turn, guess)
        return Won(turn=state.turn, code=guess)

    survivors = filter_candidates(state.candidates, [(guess, observed)], N)
    survivors = [c for c in survivors if c != guess]
    log.debug("turn %d: %s scored %d%d, %d -> %d candidates",
              state.turn, guess, observed.right, observed.wrong,
              len(state.candidates), len(survivors))

    if not survivors:
        log.info("candidate space exhausted on turn %d: inconsistent score", state.turn)
        return Cheated(turn=state.turn)

    return AwaitingGuess(turn=state.turn + 1, candidates=survivors)


def apply_guess(state: AwaitingScore, guess: str,
                N: int) -> Tuple[HumanState, Optional[Score]]:
    """
    Score a human guess against the secret.

    Returns (next_state, score). A guess of the wrong length leaves the state
    (and the turn counter) unchanged and returns None as the score.
    """
    if not validate_guess(guess, N):
        return state, None

    result = score(state.secret, guess)
    if result.right == N:
        log.info("human won on turn %d", state.turn)
        return Won(turn=state.turn, code=guess), result

    return AwaitingScore(turn=state.turn + 1, secret=state.secret), result
