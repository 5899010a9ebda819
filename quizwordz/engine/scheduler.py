"""
Deferred callbacks on a virtual clock.

Nothing here sleeps or spawns threads. Time only moves when `advance()` is
called, and every callback due by then runs in time order on the caller's
thread. Tests drive it directly; the CLI feeds it wall-clock deltas.
"""

import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple


logger = logging.getLogger(__name__)

COMPACT_MIN = 16  # Queue size that triggers dropping cancelled entries


class ScheduledCall:
    """Handle for a pending callback. Cancelling it guarantees it never runs."""

    def __init__(self, when: float, callback: Callable[[], None], name: str = ""):
        self.when = when
        self.callback = callback
        self.name = name or getattr(callback, "__name__", "callback")
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"<ScheduledCall {self.name} at {self.when:.2f} {state}>"


class Scheduler:
    """
    Virtual-clock scheduler.

    Attributes:
        now: Current virtual time in seconds
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()
        self._compact_at = COMPACT_MIN

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> ScheduledCall:
        """
        Schedule `callback` to run `delay` seconds from now.

        Args:
            delay: Seconds from the current virtual time (must be >= 0)
            callback: Zero-argument callable
            name: Label used in logs and repr

        Returns:
            A ScheduledCall that can be cancelled
        """
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        if len(self._queue) >= self._compact_at:
            self._compact()
        call = ScheduledCall(self.now + delay, callback, name)
        # Counter keeps callbacks due at the same instant in scheduling order
        heapq.heappush(self._queue, (call.when, next(self._counter), call))
        return call

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, running every callback that comes due.

        Callbacks scheduled by other callbacks also run if they fall inside
        the window.

        Returns:
            Number of callbacks run
        """
        if seconds < 0:
            raise ValueError(f"cannot move the clock backwards ({seconds})")
        target = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = when
            call.fired = True
            logger.debug("Running %r", call)
            call.callback()
            ran += 1
        self.now = target
        return ran

    def _compact(self) -> None:
        """Drop cancelled entries so repeated cancels do not grow the queue."""
        self._queue = [entry for entry in self._queue if not entry[2].cancelled]
        heapq.heapify(self._queue)
        self._compact_at = max(COMPACT_MIN, 2 * len(self._queue))

    def cancel_all(self) -> None:
        """Cancel every pending callback."""
        for _, _, call in self._queue:
            call.cancel()
        self._queue.clear()

    def __len__(self) -> int:
        """Entries in the queue, cancelled ones included until they are dropped."""
        return len(self._queue)

    @property
    def pending(self) -> List[ScheduledCall]:
        """Pending callbacks in the order they will run."""
        return [call for _, _, call in sorted(self._queue) if call.pending]

    def next_due(self) -> Optional[float]:
        for call in self.pending:
            return call.when
        return None
