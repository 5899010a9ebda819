"""
Pydantic models for the puzzle engine.

State bundles (grid, selection, hint), the actions a player can apply, and
the read-only snapshot handed to the presentation layer. The logic classes
(SelectionMachine, AssistEngine, RoundTimer, Round) live in their own files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, model_validator

from ..catalog.models import WordSetDefinition, WORD_LENGTH


# Type aliases
ActionKind = Literal["SELECT", "HINT", "SOLVE", "SHUFFLE", "PAUSE"]
ActionOutcome = Literal[
    "selected",
    "deselected",
    "solved",
    "invalid",
    "hinted",
    "shuffled",
    "paused",
    "resumed",
    "ignored",
]
TimerState = Literal["RUNNING", "PAUSED", "EXPIRED", "STOPPED"]
RoundPhase = Literal["PLAYING", "PAUSED", "FINISHING", "COMPLETE", "TIMED_OUT"]


class GridState(BaseModel):
    """
    The 25 letters on the board and how many words are pinned.

    Positions below `prefix_length` hold solved words in solve order; the
    rest form the active zone.
    """
    letters: List[str] = Field(default_factory=list)
    solved_word_count: int = Field(default=0, ge=0, le=5)

    @property
    def prefix_length(self) -> int:
        return self.solved_word_count * WORD_LENGTH

    @property
    def active_indices(self) -> List[int]:
        return list(range(self.prefix_length, len(self.letters)))

    def is_solved(self, position: int) -> bool:
        return position < self.prefix_length

    def in_active_zone(self, position: int) -> bool:
        return self.prefix_length <= position < len(self.letters)


class SelectionState(BaseModel):
    """Cells chosen for the current attempt, in the order they were chosen."""
    selected_positions: List[int] = Field(default_factory=list)
    error_flag: bool = False

    @property
    def is_evaluating(self) -> bool:
        """Five cells chosen and the attempt not yet cleared."""
        return len(self.selected_positions) == WORD_LENGTH

    def clear(self) -> None:
        self.selected_positions = []
        self.error_flag = False


class HintState(BaseModel):
    """A transient highlight on one cell."""
    highlighted_index: Optional[int] = None
    duration_seconds: float = 2.0


class RoundState(BaseModel):
    """Everything that changes during one round."""
    definition: WordSetDefinition
    grid: GridState = Field(default_factory=GridState)
    selection: SelectionState = Field(default_factory=SelectionState)
    hint: HintState = Field(default_factory=HintState)
    solved_words: List[str] = Field(default_factory=list)

    @property
    def remaining_words(self) -> List[str]:
        """Definition words not yet solved, in definition order."""
        return [w for w in self.definition.words if w not in self.solved_words]

    @property
    def is_solved(self) -> bool:
        return not self.remaining_words


class Action(BaseModel):
    """One player input applied to a round."""
    kind: ActionKind
    position: Optional[int] = None  # Cell index, SELECT only

    @model_validator(mode="after")
    def _check_position(self) -> "Action":
        if self.kind == "SELECT" and self.position is None:
            raise ValueError("SELECT requires a position")
        return self

    @classmethod
    def select(cls, position: int) -> "Action":
        return cls(kind="SELECT", position=position)

    @classmethod
    def hint(cls) -> "Action":
        return cls(kind="HINT")

    @classmethod
    def solve(cls) -> "Action":
        return cls(kind="SOLVE")

    @classmethod
    def shuffle(cls) -> "Action":
        return cls(kind="SHUFFLE")

    @classmethod
    def toggle_pause(cls) -> "Action":
        return cls(kind="PAUSE")


class ActionResult(BaseModel):
    """What applying an action did."""
    action: Action
    outcome: ActionOutcome
    word: Optional[str] = None  # Candidate or solved word
    position: Optional[int] = None  # Highlighted cell for HINT

    @property
    def accepted(self) -> bool:
        return self.outcome != "ignored"


class RoundOutcome(BaseModel):
    """Terminal result of a round."""
    set_id: str
    theme: str
    solved_words: List[str] = Field(default_factory=list)
    time_taken: int = 0
    timed_out: bool = False


class RoundSnapshot(BaseModel):
    """Read-only view of a round for the presentation layer."""
    set_id: str
    theme: str
    set_number: int
    total_sets: int
    letters: List[str]
    solved_prefix_length: int
    solved_words: List[str]
    selected_positions: List[int]
    error_flag: bool
    highlighted_index: Optional[int] = None
    elapsed_seconds: int
    time_left: int
    low_time: bool
    timer_state: TimerState
    phase: RoundPhase
    outcome: Optional[RoundOutcome] = None
