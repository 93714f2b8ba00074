# Area: Lobby
"""
Lobby - Matchmaking across many concurrent matches.
"""

from .matchmaker import Matchmaker

__all__ = ["Matchmaker"]
