# Area: Lobby Tests
"""Tests for Matchmaker — seating players and routing their actions."""

import asyncio

import pytest

from wordmatch._lobby.matchmaker import Matchmaker
from wordmatch._match.enums import MatchStatus, RoundOutcome
from wordmatch.config import MatchSettings
from wordmatch.errors import (
    DuplicatePlayerError,
    InvalidGuessError,
    InvalidPlayerIdError,
    NotRegisteredError,
)


class TestSeating:
    """join() fills one match before opening the next."""

    def test_pairs_players_in_arrival_order(self):
        async def scenario():
            lobby = Matchmaker()
            first = lobby.join("alice")
            second = lobby.join("bob")
            third = lobby.join("carol")
            return lobby, first, second, third

        lobby, first, second, third = asyncio.run(scenario())
        assert first is second
        assert third is not first
        assert first.player_ids == ["alice", "bob"]
        assert lobby.match_for("carol") is third
        assert lobby.waiting_players == ["carol"]
        assert len(lobby.active_matches) == 2

    def test_duplicate_join_rejected_across_matches(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            lobby.join("bob")
            with pytest.raises(DuplicatePlayerError):
                lobby.join("alice")
            assert lobby.waiting_players == []

        asyncio.run(scenario())

    def test_invalid_player_id(self):
        lobby = Matchmaker()
        with pytest.raises(InvalidPlayerIdError):
            lobby.join("not valid!")
        assert lobby.active_matches == []

    def test_join_and_wait(self):
        async def scenario():
            lobby = Matchmaker()
            return await asyncio.gather(
                lobby.join_and_wait("alice"), lobby.join_and_wait("bob"),
            )

        first, second = asyncio.run(scenario())
        assert first is second
        assert first.is_full

    def test_capacity_from_settings(self):
        async def scenario():
            lobby = Matchmaker(MatchSettings(capacity=3))
            matches = {id(lobby.join(pid)) for pid in ("a", "b", "c")}
            assert len(matches) == 1
            assert lobby.match_for("a").capacity == 3

        asyncio.run(scenario())


class TestPlayerActions:
    """submit / play_again delegate to the player's match."""

    def test_submit_round(self):
        async def scenario():
            lobby = Matchmaker()
            await asyncio.gather(lobby.join_and_wait("alice"), lobby.join_and_wait("bob"))
            return await asyncio.gather(
                lobby.submit("alice", "Ocean"), lobby.submit("bob", "ocean"),
            )

        results = asyncio.run(scenario())
        assert results[0].is_match is True
        assert results[0].matching_word == "ocean"

    def test_submit_unknown_player(self):
        async def scenario():
            with pytest.raises(NotRegisteredError):
                await Matchmaker().submit("ghost", "cat")

        asyncio.run(scenario())

    def test_submit_invalid_guess(self):
        async def scenario():
            lobby = Matchmaker()
            match = lobby.join("alice")
            lobby.join("bob")
            with pytest.raises(InvalidGuessError):
                await lobby.submit("alice", "two words")
            assert match.total_guesses_submitted == 0

        asyncio.run(scenario())

    def test_unanimous_rematch_keeps_seats(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            match = lobby.join("bob")
            await asyncio.gather(lobby.submit("alice", "cat"), lobby.submit("bob", "cat"))
            agreed = await asyncio.gather(
                lobby.play_again("alice"), lobby.play_again("bob"),
            )
            return lobby, match, agreed

        lobby, match, agreed = asyncio.run(scenario())
        assert agreed == [True, True]
        assert match.status == MatchStatus.IN_PROGRESS
        assert lobby.match_for("alice") is match

    def test_declined_rematch_frees_seats(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            lobby.join("bob")
            await asyncio.gather(lobby.submit("alice", "cat"), lobby.submit("bob", "cat"))
            agreed = await asyncio.gather(
                lobby.play_again("alice", True), lobby.play_again("bob", False),
            )
            assert lobby.match_for("alice") is None
            assert lobby.match_for("bob") is None
            assert lobby.active_matches == []

            # Both are free to join a fresh match
            fresh = lobby.join("alice")
            assert fresh.player_ids == ["alice"]
            return agreed

        assert asyncio.run(scenario()) == [False, False]

    def test_decliner_leaves_before_other_votes(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            match = lobby.join("bob")
            await asyncio.gather(lobby.submit("alice", "cat"), lobby.submit("bob", "cat"))
            assert await lobby.play_again("bob", False) is False
            assert lobby.match_for("bob") is None
            assert lobby.active_matches == [match]
            assert await lobby.play_again("alice", True) is False
            assert lobby.active_matches == []

        asyncio.run(scenario())

    def test_decliner_then_other_leaves_closes_match(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            match = lobby.join("bob")
            await asyncio.gather(lobby.submit("alice", "cat"), lobby.submit("bob", "cat"))
            assert await lobby.play_again("bob", False) is False
            assert match.player_ids == ["alice"]
            lobby.leave("alice")
            assert lobby.active_matches == []
            assert lobby.snapshot() == []
            assert lobby.waiting_players == []
            assert lobby.match_for("alice") is None

        asyncio.run(scenario())


class TestLeaving:
    """leave() reopens or closes matches."""

    def test_leave_unknown_player(self):
        with pytest.raises(NotRegisteredError):
            Matchmaker().leave("ghost")

    def test_leave_reopens_full_match(self):
        async def scenario():
            lobby = Matchmaker()
            match = lobby.join("alice")
            lobby.join("bob")
            lobby.leave("bob")
            assert lobby.waiting_players == ["alice"]
            assert lobby.join("carol") is match
            assert match.player_ids == ["alice", "carol"]

        asyncio.run(scenario())

    def test_leave_mid_round_abandons(self):
        async def scenario():
            lobby = Matchmaker()
            await asyncio.gather(lobby.join_and_wait("alice"), lobby.join_and_wait("bob"))
            waiting = asyncio.ensure_future(lobby.submit("alice", "cat"))
            await asyncio.sleep(0)
            lobby.leave("bob")
            return await waiting

        assert asyncio.run(scenario()).outcome == RoundOutcome.ABANDONED

    def test_last_player_leaving_closes_match(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            lobby.leave("alice")
            assert lobby.active_matches == []
            assert lobby.waiting_players == []
            assert lobby.match_for("alice") is None

        asyncio.run(scenario())

    def test_snapshot_lists_matches(self):
        async def scenario():
            lobby = Matchmaker()
            lobby.join("alice")
            return lobby.snapshot()

        snapshots = asyncio.run(scenario())
        assert len(snapshots) == 1
        assert snapshots[0]["match_id"] == "M0001"
        assert snapshots[0]["players"][0]["player_id"] == "alice"
