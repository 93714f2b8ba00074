# Area: Match Tests
"""Tests for Match registration, accessors and opponent lookup."""

import asyncio

import pytest

from wordmatch._match.match import Match
from wordmatch._match.enums import MatchStatus
from wordmatch.errors import (
    DuplicatePlayerError,
    InvalidPlayerIdError,
    MatchFinishedError,
    MatchFullError,
    NotRegisteredError,
)


class TestRegistration:
    """registerPlayer fills the match up to capacity."""

    def test_new_match_is_empty(self):
        match = Match()
        assert match.capacity == 2
        assert match.number_of_players == 0
        assert match.player_ids == []
        assert match.status == MatchStatus.IN_PROGRESS

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            Match(capacity=0)

    def test_single_player_waits_for_opponent(self):
        async def scenario():
            match = Match()
            ready = match.register_player("BobSmithson")
            assert match.player_ids == ["BobSmithson"]
            await asyncio.sleep(0)
            assert not ready.done()

        asyncio.run(scenario())

    def test_second_player_releases_both(self):
        async def scenario():
            match = Match()
            ready1 = match.register_player("BobSmithson")
            ready2 = match.register_player("JackJohn")
            assert match.is_full
            return await ready1, await ready2

        first, second = asyncio.run(scenario())
        assert first == ["BobSmithson", "JackJohn"]
        assert second == first

    def test_third_player_rejected(self):
        """The (capacity+1)th registration fails and changes nothing."""
        async def scenario():
            match = Match()
            match.register_player("BobSmithson")
            match.register_player("JackJohn")
            with pytest.raises(MatchFullError) as exc_info:
                match.register_player("LucyLove")
            assert exc_info.value.capacity == 2
            assert match.number_of_players == 2
            assert match.player_ids == ["BobSmithson", "JackJohn"]

        asyncio.run(scenario())

    def test_duplicate_registration_rejected(self):
        async def scenario():
            match = Match()
            match.register_player("BobSmithson")
            with pytest.raises(DuplicatePlayerError) as exc_info:
                match.register_player("BobSmithson")
            assert exc_info.value.player_id == "BobSmithson"
            assert match.number_of_players == 1

        asyncio.run(scenario())

    @pytest.mark.parametrize("player_id", ["", "Bob.Smith", "Bob Smithson", None, 42])
    def test_invalid_player_id_rejected(self, player_id):
        match = Match()
        with pytest.raises(InvalidPlayerIdError):
            match.register_player(player_id)
        assert match.number_of_players == 0

    def test_capacity_three(self):
        async def scenario():
            match = Match(capacity=3)
            handles = [match.register_player(pid) for pid in ("a", "b")]
            assert not any(h.done() for h in handles)
            handles.append(match.register_player("c"))
            return await asyncio.gather(*handles)

        results = asyncio.run(scenario())
        assert results == [["a", "b", "c"]] * 3

    def test_registration_handle_returns_stored_wait(self):
        async def scenario():
            match = Match()
            ready = match.register_player("alice")
            assert match.registration_handle("alice") is ready
            with pytest.raises(NotRegisteredError):
                match.registration_handle("bob")

        asyncio.run(scenario())

    def test_cannot_join_finished_match(self):
        async def scenario():
            match = Match()
            match.register_player("alice")
            match.register_player("bob")
            await asyncio.gather(
                match.submit_word("alice", "cat"), match.submit_word("bob", "cat"),
            )
            match.unregister_player("bob")
            with pytest.raises(MatchFinishedError):
                match.register_player("carol")

        asyncio.run(scenario())


class TestAccessors:
    """Read-only accessors return copies."""

    def test_player_ids_is_a_copy(self):
        async def scenario():
            match = Match()
            match.register_player("alice")
            ids = match.player_ids
            ids.append("mallory")
            assert match.player_ids == ["alice"]

        asyncio.run(scenario())

    def test_previous_guesses_is_a_copy(self):
        async def scenario():
            match = Match()
            match.register_player("alice")
            match.register_player("bob")
            await asyncio.gather(
                match.submit_word("alice", "cat"), match.submit_word("bob", "dog"),
            )
            guesses = match.previous_guesses
            guesses.add("fish")
            assert match.previous_guesses == {"cat", "dog"}

        asyncio.run(scenario())


class TestOpponents:
    """getOpponent for two players, opponents() for any capacity."""

    def test_get_opponent_both_ways(self):
        async def scenario():
            match = Match()
            match.register_player("alice")
            match.register_player("bob")
            assert match.get_opponent("alice") == "bob"
            assert match.get_opponent("bob") == "alice"

        asyncio.run(scenario())

    def test_get_opponent_empty_while_waiting(self):
        async def scenario():
            match = Match()
            match.register_player("alice")
            assert match.get_opponent("alice") == ""

        asyncio.run(scenario())

    def test_get_opponent_unregistered(self):
        with pytest.raises(NotRegisteredError):
            Match().get_opponent("ghost")

    def test_get_opponent_needs_two_player_match(self):
        async def scenario():
            match = Match(capacity=3)
            match.register_player("alice")
            with pytest.raises(ValueError):
                match.get_opponent("alice")

        asyncio.run(scenario())

    def test_opponents_in_registration_order(self):
        async def scenario():
            match = Match(capacity=3)
            for pid in ("alice", "bob", "carol"):
                match.register_player(pid)
            assert match.opponents("bob") == ["alice", "carol"]

        asyncio.run(scenario())
