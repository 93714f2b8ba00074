"""
wordmatch.types — TypedDict shapes handed to the outer layer
============================================================

These document the exact structure of the dictionaries produced by
``RoundResult.to_dict()``, ``Match.snapshot()`` and
``WordMatchError.to_dict()``. An HTTP layer
can serialize them to JSON unchanged.

    >>> RoundResultDict.__annotations__
    {'round_number': int, 'outcome': str, 'is_match': bool, ...}
"""

from typing import List, Optional, TypedDict


class RoundResultDict(TypedDict):
    """Result of one round, as reported to every player in the match.

    Fields
    ------
    round_number : int
        1-based round counter within the current rematch cycle.
    outcome : str
        One of "matched", "mismatched", "abandoned", "timed_out".
    is_match : bool
        True iff every player submitted the same word.
    guesses : List[str]
        Submitted words in player registration order. Players who did
        not submit in an abandoned or timed-out round contribute "".
    matching_word : Optional[str]
        The shared word when is_match is True, else None.
    rounds_played : int
        Completed rounds so far in this rematch cycle.
    """
    round_number: int
    outcome: str
    is_match: bool
    guesses: List[str]
    matching_word: Optional[str]
    rounds_played: int


class PlayerSnapshot(TypedDict):
    """Per-player progress within the current round."""
    player_id: str
    has_submitted: bool
    voted_rematch: bool


class MatchSnapshot(TypedDict):
    """Serializable view of a match, without the current round's words."""
    match_id: str
    capacity: int
    status: str
    round_number: int
    rounds_played: int
    previous_guesses: List[str]
    players: List[PlayerSnapshot]


class ErrorDict(TypedDict):
    """A rejected player action."""
    kind: str
    message: str
    player_id: Optional[str]
