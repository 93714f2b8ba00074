# Area: Match
"""
wordmatch._match.enums — Match state machine enums
==================================================

Defines the match status and the possible outcomes of a round.
"""

from enum import Enum


class MatchStatus(Enum):
    """
    Status of a match.

    State transitions:
    IN_PROGRESS -> FINISHED     (a round where every guess is identical)
    FINISHED -> IN_PROGRESS     (every registered player voted for a rematch)
    """
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class RoundOutcome(Enum):
    """How a round ended."""
    MATCHED = "matched"          # every player submitted the same word
    MISMATCHED = "mismatched"    # all submitted, at least two words differ
    ABANDONED = "abandoned"      # a player left before the round completed
    TIMED_OUT = "timed_out"      # the round deadline expired first
