# Area: Demo Tests
"""Tests for DemoPlayer and run_demo_session."""

import asyncio

from wordmatch._lobby.matchmaker import Matchmaker
from wordmatch._match.enums import RoundOutcome
from wordmatch._match.round_result import RoundResult
from wordmatch.config import MatchSettings
from wordmatch.demo_players import DemoPlayer, run_demo_session


class TestDemoPlayer:

    def test_never_picks_forbidden_word(self):
        player = DemoPlayer("bot1", vocabulary=["cat", "dog", "fish"], seed=3)
        for _ in range(20):
            assert player.next_guess({"cat", "dog"}) == "fish"

    def test_vocabulary_exhausted(self):
        player = DemoPlayer("bot1", vocabulary=["cat"])
        assert player.next_guess({"cat"}) is None

    def test_same_history_same_pick(self):
        """Bots converge once they have seen the same round."""
        previous = RoundResult(
            round_number=1, outcome=RoundOutcome.MISMATCHED,
            guesses=["stone", "river"], rounds_played=1,
        )
        a = DemoPlayer("bot1", seed=1)
        b = DemoPlayer("bot2", seed=99)
        a.observe(previous)
        b.observe(previous)
        forbidden = {"stone", "river"}
        assert a.next_guess(forbidden) == b.next_guess(forbidden)

    def test_vocabulary_lowercased(self):
        player = DemoPlayer("bot1", vocabulary=["Ocean"])
        assert player.next_guess(set()) == "ocean"


class TestRunDemoSession:

    def test_two_bots_reach_a_match(self):
        lobby = Matchmaker()
        players = [DemoPlayer("bot1", seed=1), DemoPlayer("bot2", seed=2)]
        results = asyncio.run(run_demo_session(lobby, players, max_rounds=10))
        assert results[-1].is_match is True
        assert len(results) <= 2
        # Everyone declined the rematch, so the lobby is empty again
        assert lobby.active_matches == []

    def test_three_bots(self):
        lobby = Matchmaker(MatchSettings(capacity=3))
        players = [DemoPlayer(f"bot{i}", seed=i) for i in (1, 2, 3)]
        results = asyncio.run(run_demo_session(lobby, players, max_rounds=10))
        assert results[-1].is_match is True
        assert len(results[-1].guesses) == 3

    def test_gives_up_after_max_rounds(self):
        lobby = Matchmaker()
        players = [
            DemoPlayer("bot1", vocabulary=["apple", "bread"], seed=1),
            DemoPlayer("bot2", vocabulary=["cloud", "dream"], seed=1),
        ]
        results = asyncio.run(run_demo_session(lobby, players, max_rounds=1))
        assert len(results) == 1
        assert results[0].is_match is False
        assert lobby.active_matches == []
