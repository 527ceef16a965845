"""
Lightweight input validation for the interactive modes.

This module answers two questions:
  - "Is this line an acceptable guess?" (human-guesses mode)
  - "Is this line a well-formed score?" (computer-guesses mode)

Neither raises on bad input; callers re-prompt on a negative answer.
"""

from typing import Optional

from .scoring import Score

_DIGITS = "0123456789"


def validate_guess(text: str, N: int) -> bool:
    """
    Return True if `text` has the shape of a guess.

    Only the length is checked: the raw line must be exactly N characters.
    """
    if not isinstance(text, str):
        return False
    return len(text) == N


def parse_score(text: str, N: int) -> Optional[Score]:
    """
    Decode a human-entered score such as "12" (1 right, 2 wrong).

    Valid input is exactly two ASCII digits, each in 0..N, whose sum is at
    most N. Anything else returns None.

    Examples (N=4):
      parse_score("22", 4) -> Score(right=2, wrong=2)
      parse_score("40", 4) -> Score(right=4, wrong=0)
      parse_score("50", 4) -> None
      parse_score("5a", 4) -> None
    """
    if not isinstance(text, str) or len(text) != 2:
        return None

    # str.isdigit() accepts non-ASCII digits, so check membership explicitly.
    if text[0] not in _DIGITS or text[1] not in _DIGITS:
        return None

    right, wrong = int(text[0]), int(text[1])
    if right > N or wrong > N or right + wrong > N:
        return None

    return Score(right, wrong)
