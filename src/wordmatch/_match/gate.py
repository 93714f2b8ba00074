# Area: Match
"""
wordmatch._match.gate — One-shot rendezvous barrier
===================================================

A RendezvousGate lets ``target`` independent coroutines synchronize on a
shared point. Each caller obtains a wait handle from ``arrive()``; the
arrival that reaches the target computes the release value and resolves
every handle with it in the same call.

Concurrency note
----------------
The count-check-and-release logic in ``arrive()`` contains no await, so
under asyncio no two arrivals can interleave. A multi-threaded host must
serialize ``arrive()``, ``release()``, ``withdraw()`` and ``reset()`` with
one lock per owning Match.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from ..errors import GateReusedError

logger = logging.getLogger("wordmatch.gate")

T = TypeVar("T")


def completed_handle(value: Any) -> "asyncio.Future[Any]":
    """Return a wait handle that is already resolved with ``value``."""
    handle = asyncio.get_running_loop().create_future()
    handle.set_result(value)
    return handle


class RendezvousGate(Generic[T]):
    """
    Single-use barrier for ``target`` arrivals.

    Attributes:
        name: Label used in logs and errors
        target: Number of arrivals that releases the gate
    """

    def __init__(
        self,
        target: int,
        name: str = "gate",
        on_release: Optional[Callable[[], T]] = None,
    ):
        if target < 1:
            raise ValueError(f"Gate target must be positive, got {target}")
        self.name = name
        self.target = target
        self._on_release = on_release
        self._handles: List["asyncio.Future[T]"] = []
        self._released = False

    @property
    def arrivals(self) -> int:
        return len(self._handles)

    @property
    def released(self) -> bool:
        return self._released

    @property
    def outstanding(self) -> int:
        """Arrivals still needed before the gate releases."""
        return 0 if self._released else self.target - len(self._handles)

    def arrive(self) -> "asyncio.Future[T]":
        """
        Register one arrival and return its wait handle.

        When this arrival reaches the target, the release value is
        computed and every handle (this one included) is resolved before
        the call returns.

        Raises:
            GateReusedError: If the gate already released this cycle
        """
        if self._released:
            raise GateReusedError(self.name, self.target)

        handle: "asyncio.Future[T]" = asyncio.get_running_loop().create_future()
        self._handles.append(handle)
        logger.debug(
            "Gate '%s': arrival %d/%d", self.name, len(self._handles), self.target
        )

        if len(self._handles) == self.target:
            value = self._on_release() if self._on_release is not None else None
            self._resolve_all(value)
        return handle

    def release(self, value: T) -> None:
        """
        Force-release the gate early, resolving every pending handle with
        ``value``. Used for abandoned rounds, timeouts and declined rematches.
        """
        if self._released:
            raise GateReusedError(self.name, self.target)
        logger.debug(
            "Gate '%s': forced release with %d/%d arrivals",
            self.name, len(self._handles), self.target,
        )
        self._resolve_all(value)

    def withdraw(self, handle: "asyncio.Future[T]") -> None:
        """Remove a pending arrival and cancel its handle. No-op if unknown."""
        if self._released or handle not in self._handles:
            return
        self._handles.remove(handle)
        handle.cancel()
        logger.debug(
            "Gate '%s': arrival withdrawn, %d/%d",
            self.name, len(self._handles), self.target,
        )

    def reset(self) -> None:
        """
        Return the gate to its empty state for the next cycle.

        Raises:
            RuntimeError: If the gate has not released yet
        """
        if not self._released:
            raise RuntimeError(
                f"Gate '{self.name}' reset before release "
                f"({len(self._handles)}/{self.target} arrivals)"
            )
        self._handles = []
        self._released = False

    def _resolve_all(self, value: Optional[T]) -> None:
        self._released = True
        for handle in self._handles:
            # A caller may have cancelled its own wait
            if not handle.done():
                handle.set_result(value)
        logger.debug("Gate '%s': released", self.name)
