# Area: Match
"""
wordmatch._match.round_timer — Per-round deadline
=================================================

Starts when the first guess of a round arrives. If the round has not
completed when it expires, the owning Match force-resolves the round
as timed out.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger("wordmatch.round_timer")


class RoundTimer:
    """Schedules ``on_expire`` on the running loop after ``seconds``."""

    def __init__(self, seconds: Optional[float], on_expire: Callable[[], None]):
        self.seconds = seconds
        self._on_expire = on_expire
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def enabled(self) -> bool:
        return self.seconds is not None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Start (or restart) the deadline. No-op when disabled."""
        if not self.enabled:
            return
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.seconds, self._fire)
        logger.debug("Round deadline set (%.1fs)", self.seconds)

    def cancel(self) -> None:
        """Cancel the pending deadline. No-op if not running."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Round deadline cancelled")

    def _fire(self) -> None:
        self._handle = None
        logger.info("Round deadline expired after %.1fs", self.seconds)
        self._on_expire()
