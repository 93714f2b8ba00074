# Area: Match
"""
wordmatch._match.round_result — Round result dataclass
======================================================

Defines the RoundResult that every player's ``submit_word`` wait
resolves to once a round ends.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..types import RoundResultDict
from .enums import RoundOutcome


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of one round, shared by every player in the match.

    Attributes:
        round_number: 1-based round counter within the current rematch cycle
        outcome: How the round ended
        guesses: Submitted words in player registration order
            ("" for a player who had not submitted)
        rounds_played: Completed rounds so far in this rematch cycle
    """

    round_number: int
    outcome: RoundOutcome
    guesses: List[str]
    rounds_played: int

    @property
    def is_match(self) -> bool:
        return self.outcome is RoundOutcome.MATCHED

    @property
    def matching_word(self) -> Optional[str]:
        return self.guesses[0] if self.is_match else None

    def to_dict(self) -> RoundResultDict:
        return {
            "round_number": self.round_number,
            "outcome": self.outcome.value,
            "is_match": self.is_match,
            "guesses": list(self.guesses),
            "matching_word": self.matching_word,
            "rounds_played": self.rounds_played,
        }
