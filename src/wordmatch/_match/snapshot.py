# Area: Match
"""
wordmatch._match.snapshot — Match state snapshot builder
========================================================

Builds a serializable view of a match for logging and status polling.
The current round's words are never included.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..types import MatchSnapshot, PlayerSnapshot

if TYPE_CHECKING:
    from .match import Match


def build_match_snapshot(match: "Match") -> MatchSnapshot:
    """Build serializable match snapshot."""
    return {
        "match_id": match.match_id,
        "capacity": match.capacity,
        "status": match.status.value,
        "round_number": match.round_number,
        "rounds_played": match.rounds_played,
        "previous_guesses": sorted(match.previous_guesses),
        "players": [_player_snapshot(match, pid) for pid in match.player_ids],
    }


def _player_snapshot(match: "Match", player_id: str) -> PlayerSnapshot:
    return {
        "player_id": player_id,
        "has_submitted": match.has_submitted(player_id),
        "voted_rematch": match.has_voted(player_id),
    }
