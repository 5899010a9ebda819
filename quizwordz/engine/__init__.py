"""Puzzle grid engine for QuizWordz."""

from .errors import GridCorruption
from .models import (
    ActionKind,
    ActionOutcome,
    TimerState,
    RoundPhase,
    GridState,
    SelectionState,
    HintState,
    RoundState,
    Action,
    ActionResult,
    RoundOutcome,
    RoundSnapshot,
)
from .scheduler import Scheduler, ScheduledCall
from .grid import initialize, pin_word, reshuffle_active, find_word_positions
from .selection import SelectionMachine
from .assist import AssistEngine
from .timer import RoundTimer, TIME_LIMIT
from .round import Round

__all__ = [
    "GridCorruption",
    "ActionKind",
    "ActionOutcome",
    "TimerState",
    "RoundPhase",
    "GridState",
    "SelectionState",
    "HintState",
    "RoundState",
    "Action",
    "ActionResult",
    "RoundOutcome",
    "RoundSnapshot",
    "Scheduler",
    "ScheduledCall",
    "initialize",
    "pin_word",
    "reshuffle_active",
    "find_word_positions",
    "SelectionMachine",
    "AssistEngine",
    "RoundTimer",
    "TIME_LIMIT",
    "Round",
]
