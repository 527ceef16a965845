from .states import (
    AwaitingGuess, AwaitingScore, Won, Cheated, Quit,
    apply_guess, apply_score, start_computer_game, start_human_game,
)
from .driver import Console, main_menu, play_computer_guesses, play_human_guesses, play_self

__all__ = [
    "AwaitingGuess", "AwaitingScore", "Won", "Cheated", "Quit",
    "apply_guess", "apply_score", "start_computer_game", "start_human_game",
    "Console", "main_menu", "play_computer_guesses", "play_human_guesses", "play_self",
]
