# Area: Lobby
"""
wordmatch._lobby.matchmaker — Player-to-match assignment
========================================================

Owns the process-wide table from player ID to the Match that player is
seated in, plus the queue of matches still waiting for players. This is
the object an HTTP layer holds: one per process, passed in explicitly.

Seating a player (validate, pick a match, register, record) runs with no
await in between, so under asyncio two concurrent joins for the same ID
cannot both succeed.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..config import MatchSettings
from ..errors import DuplicatePlayerError, NotRegisteredError
from ..types import MatchSnapshot
from .._match.enums import MatchStatus
from .._match.match import Match
from .._match.round_result import RoundResult
from .._match.validation import normalize_guess, validate_player_id

logger = logging.getLogger("wordmatch.lobby")


class Matchmaker:
    """
    Seats players into matches of ``settings.capacity`` and routes their
    actions to the right Match.

    Attributes:
        settings: Capacity and round timeout applied to every new match
    """

    def __init__(self, settings: Optional[MatchSettings] = None):
        self.settings = settings or MatchSettings()
        self._seats: Dict[str, Match] = {}
        self._matches: Dict[str, Match] = {}
        self._waiting: List[Match] = []
        self._next_match_number = 1

    # ── Accessors ────────────────────────────────────────────

    def match_for(self, player_id: str) -> Optional[Match]:
        return self._seats.get(player_id)

    @property
    def active_matches(self) -> List[Match]:
        return list(self._matches.values())

    @property
    def waiting_players(self) -> List[str]:
        return [pid for match in self._waiting for pid in match.player_ids]

    def snapshot(self) -> List[MatchSnapshot]:
        return [match.snapshot() for match in self._matches.values()]

    # ── Seating ──────────────────────────────────────────────

    def join(self, player_id: str) -> Match:
        """
        Seat a player in the first match waiting for players, creating a
        new match when none is waiting.

        Raises:
            InvalidPlayerIdError: If the ID is empty or not alphanumeric
            DuplicatePlayerError: If the player is already seated anywhere
        """
        validate_player_id(player_id)
        if player_id in self._seats:
            raise DuplicatePlayerError(player_id)

        match = self._waiting[0] if self._waiting else self._new_match()
        match.register_player(player_id)
        self._seats[player_id] = match
        if match.is_full:
            self._waiting.remove(match)
        logger.info("Seated %s in match %s", player_id, match.match_id)
        return match

    async def join_and_wait(self, player_id: str) -> Match:
        """Seat a player and wait until their match is full."""
        match = self.join(player_id)
        await match.registration_handle(player_id)
        return match

    def leave(self, player_id: str) -> None:
        """
        Remove a player from their match (disconnect or quit).

        Raises:
            NotRegisteredError: If the player is not seated
        """
        match = self._require_seat(player_id)
        match.unregister_player(player_id)
        del self._seats[player_id]
        logger.info("%s left match %s", player_id, match.match_id)

        if match.is_empty:
            self._drop(match)
        elif match.status is MatchStatus.IN_PROGRESS and match not in self._waiting:
            self._waiting.append(match)

    # ── Player actions ───────────────────────────────────────

    async def submit(self, player_id: str, guess: str) -> RoundResult:
        """
        Validate and submit a guess, then wait for the round result.

        Raises:
            NotRegisteredError: If the player is not seated
            InvalidGuessError: If the guess is not a single word of letters
            plus everything ``Match.submit_word`` raises
        """
        match = self._require_seat(player_id)
        word = normalize_guess(guess, player_id)
        return await match.submit_word(player_id, word)

    async def play_again(self, player_id: str, play_again: bool = True) -> bool:
        """
        Vote on a rematch. When the rematch is declined the player gives
        up their seat and is free to join again; the match closes once
        its last player has gone.
        """
        match = self._require_seat(player_id)
        agreed = await match.rematch(player_id, play_again)
        if not agreed:
            self._release_seat(player_id, match)
        return agreed

    # ── Internals ────────────────────────────────────────────

    def _require_seat(self, player_id: str) -> Match:
        match = self._seats.get(player_id)
        if match is None:
            raise NotRegisteredError(player_id)
        return match

    def _new_match(self) -> Match:
        match = Match(
            capacity=self.settings.capacity,
            match_id=f"M{self._next_match_number:04d}",
            round_timeout_seconds=self.settings.round_timeout_seconds,
        )
        self._next_match_number += 1
        self._matches[match.match_id] = match
        self._waiting.append(match)
        logger.info("Opened match %s (capacity %d)", match.match_id, match.capacity)
        return match

    def _drop(self, match: Match) -> None:
        self._matches.pop(match.match_id, None)
        if match in self._waiting:
            self._waiting.remove(match)
        logger.info("Closed match %s", match.match_id)

    def _release_seat(self, player_id: str, match: Match) -> None:
        """Free a seat in a match whose rematch was declined."""
        if player_id in match.player_ids:
            match.unregister_player(player_id)
        if self._seats.get(player_id) is match:
            del self._seats[player_id]
        if match.is_empty:
            self._drop(match)
