from .scoring import Score, score
from .constraints import filter_candidates
from .validation import parse_score, validate_guess
from .codespace import ALPHABET_SIZE, CODE_LENGTH, generate_all, opening_code, random_code

__all__ = [
    "Score", "score", "filter_candidates", "parse_score", "validate_guess",
    "ALPHABET_SIZE", "CODE_LENGTH", "generate_all", "opening_code", "random_code",
]
