# Area: Match
"""
wordmatch._match.match — Match coordination engine
==================================================

Tracks one group of ``capacity`` players across many rounds. Each round
collects one word per player; every ``submit_word`` wait resolves only
when the last player has submitted, and all of them receive the same
RoundResult. A round where every word is identical finishes the match;
a unanimous rematch vote starts it over with a clean guess history.

Three RendezvousGates drive the waits: the fill gate (match is full),
the round gate (every player submitted) and the rematch gate (every
player voted yes).

All mutations happen synchronously between awaits. A multi-threaded
host must guard each Match instance with its own lock.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Dict, List, Optional, Set

from .._shared.logging_config import MatchLogAdapter
from ..errors import (
    AlreadySubmittedError,
    AlreadyVotedError,
    DuplicatePlayerError,
    MatchFinishedError,
    MatchFullError,
    MatchNotReadyError,
    NotFinishedError,
    NotRegisteredError,
    RepeatedGuessError,
)
from ..types import MatchSnapshot
from .enums import MatchStatus, RoundOutcome
from .gate import RendezvousGate, completed_handle
from .round_result import RoundResult
from .round_timer import RoundTimer
from .snapshot import build_match_snapshot
from .validation import normalize_guess, validate_player_id

logger = logging.getLogger("wordmatch.match")


class Match:
    """
    A word-guessing match among exactly ``capacity`` players.

    Usage
    -----
        match = Match(capacity=2)
        ready_a = match.register_player("alice")
        ready_b = match.register_player("bob")
        await ready_a                       # ["alice", "bob"]

        result = await asyncio.gather(
            match.submit_word("alice", "Cat"),
            match.submit_word("bob", "cat"),
        )                                   # both RoundResult(is_match=True)

        await asyncio.gather(match.rematch("alice"), match.rematch("bob"))
    """

    def __init__(
        self,
        capacity: int = 2,
        match_id: Optional[str] = None,
        round_timeout_seconds: Optional[float] = None,
    ):
        if capacity < 1:
            raise ValueError(f"Match capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.match_id = match_id or uuid.uuid4().hex[:8]
        self._log = MatchLogAdapter(logger, {"match_id": self.match_id})
        self.status = MatchStatus.IN_PROGRESS

        # Insertion order is registration order; results list guesses in it
        self._current_guess: Dict[str, str] = {}
        self._previous_guesses: Set[str] = set()
        self._round_guess_count = 0
        self._total_guesses_submitted = 0
        self._round_number = 1
        self._rematch_votes: Dict[str, bool] = {}
        self._rematch_declined_by: Optional[str] = None

        self._fill_handles: Dict[str, asyncio.Future] = {}
        self._fill_gate: RendezvousGate[List[str]] = RendezvousGate(
            capacity, name=f"{self.match_id}:fill", on_release=self._on_full,
        )
        self._round_gate: RendezvousGate[RoundResult] = RendezvousGate(
            capacity, name=f"{self.match_id}:round", on_release=self.check_for_match,
        )
        self._rematch_gate: RendezvousGate[bool] = RendezvousGate(
            capacity, name=f"{self.match_id}:rematch", on_release=self._on_rematch_agreed,
        )
        self._round_timer = RoundTimer(round_timeout_seconds, self._on_round_timeout)

    # ── Read-only accessors ──────────────────────────────────

    @property
    def number_of_players(self) -> int:
        return len(self._current_guess)

    @property
    def player_ids(self) -> List[str]:
        """Registered player IDs in registration order (a copy)."""
        return list(self._current_guess)

    @property
    def previous_guesses(self) -> Set[str]:
        """Every distinct word submitted since the match (re)started (a copy)."""
        return set(self._previous_guesses)

    @property
    def total_guesses_submitted(self) -> int:
        return self._total_guesses_submitted

    @property
    def rounds_played(self) -> int:
        return self._total_guesses_submitted // self.capacity

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def round_guess_count(self) -> int:
        return self._round_guess_count

    @property
    def is_full(self) -> bool:
        return len(self._current_guess) == self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._current_guess

    @property
    def rematch_declined_by(self) -> Optional[str]:
        return self._rematch_declined_by

    def has_submitted(self, player_id: str) -> bool:
        self._require_registered(player_id)
        return bool(self._current_guess[player_id])

    def has_voted(self, player_id: str) -> bool:
        self._require_registered(player_id)
        return player_id in self._rematch_votes

    def registration_handle(self, player_id: str) -> asyncio.Future:
        """Return the wait handle that resolves once the match is full."""
        self._require_registered(player_id)
        return self._fill_handles[player_id]

    def get_opponent(self, player_id: str) -> str:
        """
        Return the other player's ID, or "" while waiting for them.

        Raises:
            NotRegisteredError: If ``player_id`` is not in the match
            ValueError: If the match is not a two-player match
        """
        self._require_registered(player_id)
        if self.capacity != 2:
            raise ValueError(
                f"get_opponent() needs a two-player match (capacity={self.capacity}); "
                f"use opponents()"
            )
        others = self.opponents(player_id)
        return others[0] if others else ""

    def opponents(self, player_id: str) -> List[str]:
        """Return every other registered player, in registration order."""
        self._require_registered(player_id)
        return [pid for pid in self._current_guess if pid != player_id]

    def snapshot(self) -> MatchSnapshot:
        return build_match_snapshot(self)

    # ── Registration ─────────────────────────────────────────

    def register_player(self, player_id: str) -> asyncio.Future:
        """
        Add a player. The returned handle resolves to the list of player
        IDs once the match reaches ``capacity`` players.

        Raises:
            InvalidPlayerIdError: If the ID is empty or not alphanumeric
            DuplicatePlayerError: If the ID is already registered
            MatchFullError: If the match already has ``capacity`` players
            MatchFinishedError: If the match has finished and not been rematched
        """
        validate_player_id(player_id)
        if player_id in self._current_guess:
            raise DuplicatePlayerError(player_id)
        if self.is_full:
            raise MatchFullError(player_id, self.capacity)
        if self.status is MatchStatus.FINISHED:
            raise MatchFinishedError(player_id)

        self._current_guess[player_id] = ""
        self._log.info(
            "Registered %s (%d/%d)",
            player_id, len(self._current_guess), self.capacity,
        )
        # arrive() may release the gate and call _on_full immediately
        self._fill_handles[player_id] = self._fill_gate.arrive()
        return self._fill_handles[player_id]

    def unregister_player(self, player_id: str) -> None:
        """
        Remove a player who left or disconnected.

        An open round is abandoned: every pending ``submit_word`` wait
        resolves with outcome ABANDONED. A pending rematch vote resolves
        to False. If the match was full, it reopens for registration.

        Raises:
            NotRegisteredError: If ``player_id`` is not in the match
        """
        self._require_registered(player_id)

        if self._round_guess_count > 0:
            self._force_round(RoundOutcome.ABANDONED)
        if self.status is MatchStatus.FINISHED:
            self._decline_rematch(player_id)

        was_full = self.is_full
        del self._current_guess[player_id]
        self._rematch_votes.pop(player_id, None)
        handle = self._fill_handles.pop(player_id)
        self._log.info(
            "Unregistered %s (%d/%d)",
            player_id, len(self._current_guess), self.capacity,
        )

        if was_full:
            self._rearm_fill_gate()
        else:
            self._fill_gate.withdraw(handle)

    # ── Rounds ───────────────────────────────────────────────

    def submit_word(self, player_id: str, guess: str) -> asyncio.Future:
        """
        Submit this round's guess. The returned handle resolves to the
        round's RoundResult once every player has submitted.

        Raises:
            NotRegisteredError: If ``player_id`` is not in the match
            InvalidGuessError: If the guess is empty or not letters only
            MatchFinishedError: If the match finished and no rematch was agreed
            MatchNotReadyError: If the match is not full yet
            AlreadySubmittedError: If the player already submitted this round
            RepeatedGuessError: If the word was guessed in an earlier round
        """
        self._require_registered(player_id)
        word = normalize_guess(guess, player_id)
        if self.status is MatchStatus.FINISHED:
            raise MatchFinishedError(player_id)
        if not self.is_full:
            raise MatchNotReadyError(player_id, len(self._current_guess), self.capacity)
        if self._current_guess[player_id]:
            raise AlreadySubmittedError(player_id)
        # Two players agreeing within one round is the point of the game
        if word in self._previous_guesses and word not in self._current_guess.values():
            raise RepeatedGuessError(player_id, word)

        self._current_guess[player_id] = word
        self._previous_guesses.add(word)
        self._total_guesses_submitted += 1
        self._round_guess_count += 1
        self._log.info(
            "Round %d: %s submitted (%d/%d)",
            self._round_number, player_id,
            self._round_guess_count, self.capacity,
        )
        if self._round_guess_count == 1:
            self._round_timer.start()

        handle = self._round_gate.arrive()
        if self._round_gate.released:
            self._round_gate.reset()
        return handle

    def check_for_match(self) -> RoundResult:
        """
        Resolve the current round. Called by the round gate when the last
        guess arrives; raises RuntimeError if the round is incomplete.
        """
        if self._round_guess_count != self.capacity:
            raise RuntimeError(
                f"Round {self._round_number} is incomplete "
                f"({self._round_guess_count}/{self.capacity} guesses)"
            )
        guesses = list(self._current_guess.values())
        is_match = all(word == guesses[0] for word in guesses)
        outcome = RoundOutcome.MATCHED if is_match else RoundOutcome.MISMATCHED
        result = self._finish_round(outcome, guesses)

        if is_match:
            self._advance_status(MatchStatus.FINISHED)
            self._rematch_votes.clear()
            self._rematch_declined_by = None
        return result

    # ── Rematch ──────────────────────────────────────────────

    def rematch(self, player_id: str, play_again: bool = True) -> asyncio.Future:
        """
        Vote on a rematch after the match finished.

        The handle resolves to True once every player voted yes, or to
        False as soon as any player votes no or leaves.

        Raises:
            NotFinishedError: If the match is still in progress
            NotRegisteredError: If ``player_id`` is not in the match
            AlreadyVotedError: If the player already voted this cycle
        """
        if self.status is not MatchStatus.FINISHED:
            raise NotFinishedError(player_id)
        self._require_registered(player_id)
        if self._rematch_declined_by is not None:
            return completed_handle(False)
        if player_id in self._rematch_votes:
            raise AlreadyVotedError(player_id)

        self._rematch_votes[player_id] = play_again
        self._log.info(
            "%s voted %s on rematch",
            player_id, "yes" if play_again else "no",
        )
        if not play_again:
            self._decline_rematch(player_id)
            return completed_handle(False)

        handle = self._rematch_gate.arrive()
        if self._rematch_gate.released:
            self._rematch_gate.reset()
        return handle

    # ── Internals ────────────────────────────────────────────

    def _require_registered(self, player_id: str) -> None:
        if player_id not in self._current_guess:
            raise NotRegisteredError(player_id)

    def _advance_status(self, new_status: MatchStatus) -> None:
        self._log.info("Status: %s → %s", self.status.value, new_status.value)
        self.status = new_status

    def _on_full(self) -> List[str]:
        self._log.info("Match is full: %s", ", ".join(self._current_guess))
        return list(self._current_guess)

    def _rearm_fill_gate(self) -> None:
        """Re-open a previously full match; remaining players re-arrive."""
        self._fill_gate.reset()
        for pid in self._current_guess:
            self._fill_handles[pid] = self._fill_gate.arrive()

    def _finish_round(self, outcome: RoundOutcome, guesses: List[str]) -> RoundResult:
        self._round_timer.cancel()
        result = RoundResult(
            round_number=self._round_number,
            outcome=outcome,
            guesses=guesses,
            rounds_played=self.rounds_played,
        )
        for pid in self._current_guess:
            self._current_guess[pid] = ""
        self._round_guess_count = 0
        self._round_number += 1
        log = self._log.warning if outcome in (RoundOutcome.ABANDONED, RoundOutcome.TIMED_OUT) else self._log.info
        log("Round %d %s: %s", result.round_number, outcome.value, guesses)
        return result

    def _force_round(self, outcome: RoundOutcome) -> None:
        """End an open round early, resolving every pending submission."""
        result = self._finish_round(outcome, list(self._current_guess.values()))
        self._round_gate.release(result)
        self._round_gate.reset()

    def _on_round_timeout(self) -> None:
        if self._round_guess_count > 0:
            self._force_round(RoundOutcome.TIMED_OUT)

    def _decline_rematch(self, player_id: str) -> None:
        if self._rematch_declined_by is not None:
            return
        self._rematch_declined_by = player_id
        self._log.info("Rematch declined by %s", player_id)
        self._rematch_gate.release(False)
        self._rematch_gate.reset()

    def _on_rematch_agreed(self) -> bool:
        self._previous_guesses.clear()
        self._total_guesses_submitted = 0
        self._round_guess_count = 0
        self._round_number = 1
        for pid in self._current_guess:
            self._current_guess[pid] = ""
        self._rematch_votes.clear()
        if self._round_gate.released:
            self._round_gate.reset()
        self._advance_status(MatchStatus.IN_PROGRESS)
        return True
