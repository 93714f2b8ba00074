"""
wordmatch.errors — Custom exception classes
===========================================

Defines the exception hierarchy raised by Match and Matchmaker.
Each exception stores the offending identifier so the caller can
render a specific message.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from .error_formatter import format_error_block


class WordMatchError(Exception):
    """Base exception for all rejected player actions."""

    kind = "WORD_MATCH_ERROR"

    def __init__(self, message: str, player_id: Optional[str] = None):
        self.player_id = player_id
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": str(self),
            "player_id": self.player_id,
        }

    def format_error_log(self) -> str:
        return format_error_block(
            title="PLAYER ACTION REJECTED",
            error_type=self.kind,
            details=self._details(),
        )

    def _details(self) -> Dict[str, Any]:
        return {"player_id": self.player_id}


class DuplicatePlayerError(WordMatchError):
    """Raised when a player ID is registered twice."""

    kind = "DUPLICATE_PLAYER"

    def __init__(self, player_id: str):
        super().__init__(f"Player '{player_id}' is already registered", player_id)


class MatchFullError(WordMatchError):
    """Raised when registering into a match that already has `capacity` players."""

    kind = "MATCH_FULL"

    def __init__(self, player_id: str, capacity: int):
        self.capacity = capacity
        super().__init__(
            f"Cannot register '{player_id}': match already has {capacity} players",
            player_id,
        )

    def _details(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "capacity": self.capacity}


class NotRegisteredError(WordMatchError):
    """Raised when acting as a player who is not in the match."""

    kind = "NOT_REGISTERED"

    def __init__(self, player_id: str):
        super().__init__(f"Player '{player_id}' is not registered", player_id)


class RepeatedGuessError(WordMatchError):
    """Raised when a word was already guessed in an earlier round."""

    kind = "REPEATED_GUESS"

    def __init__(self, player_id: str, guess: str):
        self.guess = guess
        super().__init__(
            f"'{guess}' has already been guessed in this match", player_id
        )

    def _details(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "guess": self.guess}


class NotFinishedError(WordMatchError):
    """Raised when a rematch is requested before the match has concluded."""

    kind = "NOT_FINISHED"

    def __init__(self, player_id: str):
        super().__init__(
            f"Player '{player_id}' cannot vote for a rematch: match is still in progress",
            player_id,
        )


class InvalidGuessError(WordMatchError):
    """Raised when a guess is empty or contains anything but letters."""

    kind = "INVALID_GUESS"

    def __init__(self, guess: Any, reason: str, player_id: Optional[str] = None):
        self.guess = guess
        self.reason = reason
        super().__init__(f"Invalid guess {guess!r}: {reason}", player_id)

    def _details(self) -> Dict[str, Any]:
        return {"player_id": self.player_id, "guess": self.guess, "reason": self.reason}


class InvalidPlayerIdError(WordMatchError):
    """Raised when a player ID is empty or not alphanumeric."""

    kind = "INVALID_PLAYER_ID"

    def __init__(self, player_id: Any):
        super().__init__(
            f"Invalid player ID {player_id!r}: must be non-empty and alphanumeric",
            player_id if isinstance(player_id, str) else None,
        )


class MatchNotReadyError(WordMatchError):
    """Raised when a guess is submitted before the match is full."""

    kind = "MATCH_NOT_READY"

    def __init__(self, player_id: str, players: int, capacity: int):
        self.players = players
        self.capacity = capacity
        super().__init__(
            f"Match is waiting for players ({players}/{capacity})", player_id
        )

    def _details(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "players": self.players,
            "capacity": self.capacity,
        }


class MatchFinishedError(WordMatchError):
    """Raised when a guess is submitted after a match result, before a rematch."""

    kind = "MATCH_FINISHED"

    def __init__(self, player_id: str):
        super().__init__(
            f"Match is finished; '{player_id}' must vote for a rematch first",
            player_id,
        )


class AlreadySubmittedError(WordMatchError):
    """Raised when a player submits twice in the same round."""

    kind = "ALREADY_SUBMITTED"

    def __init__(self, player_id: str):
        super().__init__(
            f"Player '{player_id}' has already submitted a guess this round",
            player_id,
        )


class AlreadyVotedError(WordMatchError):
    """Raised when a player votes twice in the same rematch cycle."""

    kind = "ALREADY_VOTED"

    def __init__(self, player_id: str):
        super().__init__(
            f"Player '{player_id}' has already voted on this rematch", player_id
        )


class GateReusedError(RuntimeError):
    """
    Raised when arriving on a rendezvous gate that released and was not reset.

    This is an internal consistency failure, not a player error, so it
    does not derive from WordMatchError.
    """

    kind = "GATE_REUSED"

    def __init__(self, gate_name: str, target: int):
        self.gate_name = gate_name
        self.target = target
        super().__init__(
            f"Gate '{gate_name}' already released all {target} arrivals; "
            f"reset() must be called before arriving again"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            title="INTERNAL CONSISTENCY FAILURE",
            error_type=self.kind,
            details={"gate": self.gate_name, "target": self.target},
        )
