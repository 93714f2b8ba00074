# Area: Match
"""
wordmatch._match.validation — Player ID and guess validation
============================================================

Player IDs must be non-empty and alphanumeric. Guesses must be a single
non-empty word of letters; they are stripped and lowercased so that
matching is case-insensitive.
"""

from __future__ import annotations
import re
from typing import Any, Optional

from ..errors import InvalidGuessError, InvalidPlayerIdError

PLAYER_ID_PATTERN = re.compile(r"[A-Za-z0-9]+")
GUESS_PATTERN = re.compile(r"[A-Za-z]+")


def is_valid_player_id(player_id: Any) -> bool:
    return isinstance(player_id, str) and PLAYER_ID_PATTERN.fullmatch(player_id) is not None


def validate_player_id(player_id: Any) -> str:
    """Return ``player_id`` unchanged, or raise InvalidPlayerIdError."""
    if not is_valid_player_id(player_id):
        raise InvalidPlayerIdError(player_id)
    return player_id


def normalize_guess(guess: Any, player_id: Optional[str] = None) -> str:
    """
    Validate a guess and return its canonical (lowercase) form.

    Raises:
        InvalidGuessError: If the guess is not a string, is empty,
            or contains anything other than letters
    """
    if not isinstance(guess, str):
        raise InvalidGuessError(guess, "guess must be a string", player_id)
    word = guess.strip()
    if not word:
        raise InvalidGuessError(guess, "guess is empty", player_id)
    if GUESS_PATTERN.fullmatch(word) is None:
        raise InvalidGuessError(guess, "guess must contain only letters", player_id)
    return word.lower()
