# Area: Shared
"""
wordmatch.cli — Command-line interface
======================================

Runs a local demo session between bot players. The match engine itself
is a library; embed a Matchmaker in your server to serve real players.

Usage:
    python -m wordmatch --demo                      # two bots
    python -m wordmatch --demo --capacity 3         # three bots
    python -m wordmatch --demo --config config.json

Settings can also come from WORDMATCH_* environment variables or a
.env file (see wordmatch.config).
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import MatchSettings, load_settings
from .demo_players import DemoPlayer, run_demo_session
from .errors import GateReusedError
from ._lobby.matchmaker import Matchmaker
from ._match.round_result import RoundResult
from ._shared.logging_config import log_internal_error, setup_logging

logger = logging.getLogger("wordmatch.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Word match - run a demo session between bot players",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordmatch --demo
  python -m wordmatch --demo --capacity 3 --rounds 15
  WORDMATCH_ROUND_TIMEOUT=30 python -m wordmatch --demo
        """,
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Play a session between bot players",
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--capacity", type=int, help="Players per match")
    parser.add_argument("--rounds", type=int, help="Give up after this many rounds")
    parser.add_argument("--seed", type=int, default=None, help="Seed for bot word choice")
    parser.add_argument("--log-file", type=str, help="JSON log file path")
    parser.add_argument("--log-level", type=str, help="Logging level")
    return parser.parse_args(argv)


def build_players(capacity: int, seed: Optional[int]) -> List[DemoPlayer]:
    return [
        DemoPlayer(f"bot{i}", seed=None if seed is None else seed + i)
        for i in range(1, capacity + 1)
    ]


def summarize(results: List[RoundResult]) -> str:
    if not results:
        return "No rounds were played."
    last = results[-1]
    if last.is_match:
        return (f"Matched on \"{last.matching_word}\" "
                f"after {last.rounds_played} round(s)!")
    return f"No match after {len(results)} round(s)."


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        settings: MatchSettings = load_settings(
            args.config,
            overrides={
                "capacity": args.capacity,
                "demo_rounds": args.rounds,
                "log_file": args.log_file,
                "log_level": args.log_level,
            },
        )
    except ValidationError as exc:
        print(f"Error: invalid settings\n{exc}", file=sys.stderr)
        return 1

    if not args.demo:
        print("Error: only --demo sessions run from the command line.", file=sys.stderr)
        print("Embed wordmatch.Matchmaker in your server for real players.", file=sys.stderr)
        return 1

    setup_logging(log_file_path=settings.log_file, level=settings.log_level_number)
    players = build_players(settings.capacity, args.seed)
    try:
        results = asyncio.run(
            run_demo_session(Matchmaker(settings), players, settings.demo_rounds)
        )
    except GateReusedError as exc:
        log_internal_error(exc)
        logger.critical("Session terminated due to internal error")
        return 1

    for result in results:
        print(f"Round {result.round_number}: {', '.join(result.guesses)} "
              f"({result.outcome.value})")
    print(summarize(results))
    return 0
