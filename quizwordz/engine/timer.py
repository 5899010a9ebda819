"""Pausable countdown for a round."""

import logging
from typing import Callable, Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import TimerState
from .scheduler import Scheduler, ScheduledCall


logger = logging.getLogger(__name__)

TIME_LIMIT = 240  # 4 minutes
TICK_SECONDS = 1.0


class RoundTimer(BaseModel):
    """
    Counts elapsed seconds up to a limit, one tick per second.

    RUNNING and PAUSED toggle freely; EXPIRED (limit reached) and STOPPED
    (round solved) are final.

    Attributes:
        scheduler: Clock driving the ticks
        limit_seconds: Round length
        elapsed_seconds: Whole seconds counted so far
        state: Current timer state
        on_expire: Called once when the limit is reached
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    scheduler: Scheduler
    limit_seconds: int = Field(default=TIME_LIMIT, gt=0)
    elapsed_seconds: int = Field(default=0, ge=0)
    state: TimerState = "RUNNING"
    on_expire: Optional[Callable[[], None]] = None
    _tick_call: Optional[ScheduledCall] = None
    _paused_remaining: Optional[float] = None

    @property
    def time_left(self) -> int:
        return self.limit_seconds - self.elapsed_seconds

    @property
    def is_final(self) -> bool:
        return self.state in ("EXPIRED", "STOPPED")

    def start(self) -> None:
        """Reset to zero and start ticking."""
        self._cancel_tick()
        self._paused_remaining = None
        self.elapsed_seconds = 0
        self.state = "RUNNING"
        self._schedule_tick()

    def tick(self) -> None:
        """Count one second; expire when the limit is reached."""
        self._tick_call = None
        if self.state != "RUNNING":
            return
        if self.elapsed_seconds + 1 >= self.limit_seconds:
            self.elapsed_seconds = self.limit_seconds
            self.state = "EXPIRED"
            logger.info("Timer expired after %d seconds", self.limit_seconds)
            if self.on_expire is not None:
                self.on_expire()
            return
        self.elapsed_seconds += 1
        self._schedule_tick()

    def pause(self) -> bool:
        """Stop ticking until resumed. Returns False if not running."""
        if self.state != "RUNNING":
            return False
        # Keep the unused part of the current second for resume
        if self._tick_call is not None:
            self._paused_remaining = self._tick_call.when - self.scheduler.now
        self._cancel_tick()
        self.state = "PAUSED"
        return True

    def resume(self) -> bool:
        """Resume ticking after a pause. Returns False if not paused."""
        if self.state != "PAUSED":
            return False
        self.state = "RUNNING"
        remaining = self._paused_remaining
        self._paused_remaining = None
        self._schedule_tick(TICK_SECONDS if remaining is None else remaining)
        return True

    def stop(self) -> None:
        """Freeze the timer for good because the round was solved."""
        if self.is_final:
            return
        self._cancel_tick()
        self.state = "STOPPED"

    def cancel(self) -> None:
        """Drop any in-flight tick without changing state."""
        self._cancel_tick()

    def _schedule_tick(self, delay: float = TICK_SECONDS) -> None:
        self._tick_call = self.scheduler.call_later(delay, self.tick, name="tick")

    def _cancel_tick(self) -> None:
        if self._tick_call is not None:
            self._tick_call.cancel()
            self._tick_call = None
