# Area: Shared
"""
wordmatch.demo_players — Scripted players for demo sessions
===========================================================

A ready-to-use bot that plays through a Matchmaker exactly like a
remote player would: join, submit one word per round, vote on a rematch.

The first round is a random pick. After that every bot prefers the
unused word sharing the most letters with the previous round's guesses,
so bots with the same vocabulary tend to converge.

Usage:
    from wordmatch import Matchmaker, DemoPlayer, run_demo_session

    players = [DemoPlayer("alice", seed=1), DemoPlayer("bob", seed=2)]
    results = asyncio.run(run_demo_session(Matchmaker(), players, max_rounds=10))
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Iterable, List, Optional, Set

from ._lobby.matchmaker import Matchmaker
from ._match.enums import MatchStatus
from ._match.round_result import RoundResult

logger = logging.getLogger("wordmatch.demo")

DEFAULT_VOCABULARY = (
    "apple", "bread", "cloud", "dream", "earth", "flame", "grape", "heart",
    "light", "music", "night", "ocean", "plant", "river", "stone", "storm",
    "tiger", "water", "forest", "garden",
)


class DemoPlayer:
    """
    Bot player with a fixed vocabulary.

    Attributes:
        player_id: Alphanumeric ID used to join
    """

    def __init__(
        self,
        player_id: str,
        vocabulary: Optional[Iterable[str]] = None,
        seed: Optional[int] = None,
    ):
        self.player_id = player_id
        self._vocabulary = sorted({w.lower() for w in (vocabulary or DEFAULT_VOCABULARY)})
        self._rng = random.Random(seed)
        self._last_guesses: List[str] = []

    def next_guess(self, forbidden: Set[str]) -> Optional[str]:
        """Pick a word not in ``forbidden``; None when the vocabulary is spent."""
        candidates = [w for w in self._vocabulary if w not in forbidden]
        if not candidates:
            return None
        if not self._last_guesses:
            return self._rng.choice(candidates)
        return max(candidates, key=lambda w: (self._affinity(w), [-ord(c) for c in w]))

    def observe(self, result: RoundResult) -> None:
        """Remember the round's words for the next pick."""
        self._last_guesses = [g for g in result.guesses if g]

    def _affinity(self, word: str) -> int:
        letters = set(word)
        return sum(len(letters & set(guess)) for guess in self._last_guesses)


async def run_demo_session(
    matchmaker: Matchmaker,
    players: List[DemoPlayer],
    max_rounds: int,
) -> List[RoundResult]:
    """
    Seat ``players`` in one match and play until their words match or
    ``max_rounds`` rounds have been played. Everyone then declines the
    rematch (or leaves, if no match happened).

    Returns the RoundResult of every round played.
    """
    matches = await asyncio.gather(
        *(matchmaker.join_and_wait(p.player_id) for p in players)
    )
    match = matches[0]
    logger.info("Demo match %s: %s", match.match_id, ", ".join(match.player_ids))

    results: List[RoundResult] = []
    for _ in range(max_rounds):
        forbidden = match.previous_guesses
        picks = [p.next_guess(forbidden) for p in players]
        if any(word is None for word in picks):
            logger.info("Demo vocabulary exhausted after %d rounds", len(results))
            break
        round_results = await asyncio.gather(
            *(matchmaker.submit(p.player_id, word) for p, word in zip(players, picks))
        )
        result = round_results[0]
        for p in players:
            p.observe(result)
        results.append(result)
        if result.is_match:
            break

    if match.status is MatchStatus.FINISHED:
        await asyncio.gather(
            *(matchmaker.play_again(p.player_id, False) for p in players)
        )
    else:
        for p in players:
            matchmaker.leave(p.player_id)
    return results
