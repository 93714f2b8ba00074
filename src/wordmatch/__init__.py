"""
wordmatch — Word-guessing match coordination engine
===================================================

Pairs players into matches of a word-guessing game and coordinates
their turns: each round collects one word per player, every player's
submission waits until the whole match has submitted, and a round
where all words are identical ends the match with an offer to rematch.

Quick Start:
    from wordmatch import Matchmaker, MatchSettings

    lobby = Matchmaker(MatchSettings(capacity=2))

    # in each player's request handler
    match = await lobby.join_and_wait("alice")
    result = await lobby.submit("alice", "ocean")
    if result.is_match:
        again = await lobby.play_again("alice", True)

Single match, no lobby:
    from wordmatch import Match

    match = Match(capacity=2)
    match.register_player("alice")
    match.register_player("bob")
    a, b = await asyncio.gather(
        match.submit_word("alice", "cat"),
        match.submit_word("bob", "Cat"),
    )
    assert a.is_match and a == b

Errors
------
Every rejected action raises a WordMatchError subclass carrying a
``kind`` and the offending player ID; ``to_dict()`` gives an ErrorDict
an HTTP layer can return as-is.
"""

from ._match import (
    Match,
    MatchStatus,
    RendezvousGate,
    RoundOutcome,
    RoundResult,
)
from ._lobby import Matchmaker
from .config import MatchSettings, load_settings
from .demo_players import DemoPlayer, run_demo_session
from .errors import (
    WordMatchError,
    DuplicatePlayerError,
    MatchFullError,
    NotRegisteredError,
    RepeatedGuessError,
    NotFinishedError,
    InvalidGuessError,
    InvalidPlayerIdError,
    MatchNotReadyError,
    MatchFinishedError,
    AlreadySubmittedError,
    AlreadyVotedError,
    GateReusedError,
)
from .types import (
    RoundResultDict,
    MatchSnapshot,
    PlayerSnapshot,
    ErrorDict,
)

__all__ = [
    # Main classes
    "Match",
    "Matchmaker",
    "RendezvousGate",
    "MatchSettings",
    "load_settings",
    "DemoPlayer",
    "run_demo_session",
    # Enums and results
    "MatchStatus",
    "RoundOutcome",
    "RoundResult",
    # Errors
    "WordMatchError",
    "DuplicatePlayerError",
    "MatchFullError",
    "NotRegisteredError",
    "RepeatedGuessError",
    "NotFinishedError",
    "InvalidGuessError",
    "InvalidPlayerIdError",
    "MatchNotReadyError",
    "MatchFinishedError",
    "AlreadySubmittedError",
    "AlreadyVotedError",
    "GateReusedError",
    # Dict shapes
    "RoundResultDict",
    "MatchSnapshot",
    "PlayerSnapshot",
    "ErrorDict",
]
__version__ = "1.0.0"
