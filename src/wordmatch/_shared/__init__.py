# Area: Shared
"""Shared infrastructure used across the package."""

from .logging_config import MatchLogAdapter, setup_logging, log_internal_error

__all__ = ["MatchLogAdapter", "setup_logging", "log_internal_error"]
