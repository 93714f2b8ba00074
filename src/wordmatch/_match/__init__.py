# Area: Match
"""
Match engine - Coordination of a single group of players.

This package handles:
- Player registration and departure
- Per-round guess collection and rendezvous
- Match detection and guess history
- Rematch voting
"""

from .enums import MatchStatus, RoundOutcome
from .gate import RendezvousGate, completed_handle
from .round_result import RoundResult
from .round_timer import RoundTimer
from .validation import normalize_guess, validate_player_id, is_valid_player_id
from .match import Match

__all__ = [
    "MatchStatus",
    "RoundOutcome",
    "RendezvousGate",
    "completed_handle",
    "RoundResult",
    "RoundTimer",
    "normalize_guess",
    "validate_player_id",
    "is_valid_player_id",
    "Match",
]
