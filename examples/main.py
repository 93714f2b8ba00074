"""
main.py — Drive a Matchmaker the way a web server would
========================================================

Each coroutine below stands in for one player's sequence of HTTP
requests: register, submit guesses until the round result says the
words matched, then vote on a rematch.

    python main.py
"""

import asyncio
import logging

from wordmatch import Matchmaker, MatchSettings, WordMatchError

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# Words each player will try, in order
SCRIPTS = {
    "alice": ["ocean", "Wave", "surf", "beach"],
    "bob": ["sky", "water", "surf", "sand"],
}


async def player(lobby: Matchmaker, player_id: str, words):
    match = await lobby.join_and_wait(player_id)
    print(f"{player_id} is playing against {match.get_opponent(player_id)}")

    for word in words:
        try:
            result = await lobby.submit(player_id, word)
        except WordMatchError as exc:
            # What an HTTP layer would return as a 4xx body
            print(f"{player_id}: rejected {exc.to_dict()}")
            continue
        print(f"{player_id}: round {result.round_number} -> {result.guesses}")
        if result.is_match:
            break

    again = await lobby.play_again(player_id, play_again=False)
    print(f"{player_id}: rematch={again}")


async def main():
    lobby = Matchmaker(MatchSettings(capacity=2, round_timeout_seconds=30))
    await asyncio.gather(*(player(lobby, pid, words) for pid, words in SCRIPTS.items()))


if __name__ == "__main__":
    asyncio.run(main())
