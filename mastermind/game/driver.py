"""
Turn loops for the three game modes and the main menu.

  - H: the human guesses a computer-chosen secret
  - C: the computer guesses a secret the human keeps in their head; the
       human scores each guess as two digits ("right" then "wrong")
  - B: the computer plays itself against a random secret

All I/O goes through a Console so the loops can be driven by scripted input
in tests. Every read blocks for exactly one line; malformed lines re-prompt at
the same turn number.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from mastermind.engine import parse_score, score
from mastermind.engine.codespace import ALPHABET_SIZE, CODE_LENGTH, random_code
from mastermind.solvers import DEFAULT_SOLVER, BaseSolver, create_solver
from .states import (
    AwaitingGuess,
    AwaitingScore,
    ComputerState,
    HumanState,
    Quit,
    Won,
    apply_guess,
    apply_score,
    start_computer_game,
    start_human_game,
)

log = logging.getLogger(__name__)

MENU_PROMPT = "(H)uman guesses, (C)omputer guesses, (B)oth computer, (Q)uit: "


@dataclass
class Console:
    """Line-oriented terminal: read(prompt) -> line, write(text)."""
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print


def _state_for_solver(state: AwaitingGuess, N: int) -> dict:
    return {"turn": state.turn, "candidates": state.candidates, "N": N}


def play_human_guesses(
        console: Console,
        rng: random.Random,
        *,
        k: int = ALPHABET_SIZE,
        n: int = CODE_LENGTH,
        secret: Optional[str] = None,
) -> HumanState:
    """
    Human guesses a secret drawn from `rng` (or the given `secret`).
    Wrong-length lines re-prompt silently at the same turn.
    """
    if secret is None:
        state = start_human_game(rng, k, n)
    else:
        state = AwaitingScore(turn=1, secret=secret)

    while isinstance(state, AwaitingScore):
        try:
            line = console.read(f"Human turn {state.turn}: ")
        except EOFError:
            return Quit(turn=state.turn)

        state, result = apply_guess(state, line, n)
        if result is None:
            continue
        console.write(f"score: {result.right}-{result.wrong}")

    console.write(f"Congratulations, you cracked the code in {state.turn} turns!")
    return state


def play_computer_guesses(
        console: Console,
        solver: BaseSolver,
        *,
        k: int = ALPHABET_SIZE,
        n: int = CODE_LENGTH,
) -> ComputerState:
    """
    Computer guesses the human's secret. Each turn prints the guess and reads
    a two-digit score; unparsable scores re-prompt with the same guess.
    """
    solver.reset(N=n, k=k)
    state: ComputerState = start_computer_game(k, n)

    while isinstance(state, AwaitingGuess):
        guess = solver.next_guess(_state_for_solver(state, n))

        observed = None
        while observed is None:
            try:
                line = console.read(f"Computer turn {state.turn}: {guess} => ")
            except EOFError:
                return Quit(turn=state.turn)
            observed = parse_score(line, n)

        state = apply_score(state, guess, observed, n)

    if isinstance(state, Won):
        console.write(f"I cracked your code {state.code} in {state.turn} turns!")
    else:
        console.write("No code fits the scores you gave. You cheated!")
    return state


def play_self(
        console: Console,
        solver: BaseSolver,
        rng: random.Random,
        *,
        k: int = ALPHABET_SIZE,
        n: int = CODE_LENGTH,
        secret: Optional[str] = None,
) -> ComputerState:
    """
    Computer against computer: scores come from the Scorer, not from input,
    so there is no re-prompt path and no way to cheat.
    """
    if secret is None:
        secret = random_code(rng, k, n)
    solver.reset(N=n, k=k, seed=rng.randrange(2 ** 31))
    state: ComputerState = start_computer_game(k, n)

    while isinstance(state, AwaitingGuess):
        guess = solver.next_guess(_state_for_solver(state, n))
        observed = score(secret, guess)
        console.write(f"Computer turn {state.turn}: {guess} => {observed.right}{observed.wrong}")
        state = apply_score(state, guess, observed, n)

    # A truthful scorer always keeps the secret among the candidates.
    assert isinstance(state, Won), f"self-play ended in {state!r}"
    console.write(f"Computer cracked {secret} in {state.turn} turns.")
    return state


def main_menu(
        console: Console,
        rng: random.Random,
        *,
        k: int = ALPHABET_SIZE,
        n: int = CODE_LENGTH,
) -> int:
    """
    Loop over the H / C / B / Q menu until the player quits (or input ends).
    The computer always plays the first consistent candidate.
    Returns the process exit code.
    """
    solver = create_solver(DEFAULT_SOLVER)

    while True:
        try:
            choice = console.read(MENU_PROMPT).strip().upper()
        except EOFError:
            return 0

        if choice == "Q":
            return 0
        elif choice == "H":
            final = play_human_guesses(console, rng, k=k, n=n)
        elif choice == "C":
            final = play_computer_guesses(console, solver, k=k, n=n)
        elif choice == "B":
            final = play_self(console, solver, rng, k=k, n=n)
        else:
            continue

        log.debug("mode %s ended in %s", choice, type(final).__name__)
