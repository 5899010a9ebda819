"""
Selection state machine.

Idle (nothing chosen) -> Selecting (1-4 cells) -> Evaluating (5 cells) -> Idle.
A correct word is pinned at once; a wrong one shows an error for a moment
before the selection is dropped.
"""

import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict

from ..catalog.models import WORD_LENGTH
from . import grid
from .models import Action, ActionResult, RoundState
from .scheduler import Scheduler, ScheduledCall


logger = logging.getLogger(__name__)


class SelectionMachine(BaseModel):
    """
    Tracks the cells chosen for the current attempt and checks completed
    attempts against the remaining words.

    Attributes:
        state: The round state shared with the other components
        scheduler: Clock used for the error display delay
        error_display_seconds: How long a wrong attempt stays on screen
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    state: RoundState
    scheduler: Scheduler
    error_display_seconds: float = 1.0
    _error_call: Optional[ScheduledCall] = None

    @property
    def phase(self) -> str:
        count = len(self.state.selection.selected_positions)
        if count == 0:
            return "IDLE"
        if count < WORD_LENGTH:
            return "SELECTING"
        return "EVALUATING"

    def select(self, position: int) -> ActionResult:
        """
        Toggle `position` in the current selection.

        Choosing a fifth cell evaluates the attempt. Cells in the solved
        prefix or off the board are ignored, as is any input while an
        attempt is being evaluated.
        """
        action = Action.select(position)
        selection = self.state.selection

        if not self.state.grid.in_active_zone(position) or selection.is_evaluating:
            return ActionResult(action=action, outcome="ignored")

        if position in selection.selected_positions:
            selection.selected_positions.remove(position)
            return ActionResult(action=action, outcome="deselected")

        selection.selected_positions.append(position)
        if len(selection.selected_positions) < WORD_LENGTH:
            return ActionResult(action=action, outcome="selected")

        letters = self.state.grid.letters
        candidate = "".join(letters[i] for i in selection.selected_positions)
        if candidate in self.state.remaining_words:
            self.commit(candidate)
            return ActionResult(action=action, outcome="solved", word=candidate)

        logger.debug("Rejected attempt %s", candidate)
        selection.error_flag = True
        self._error_call = self.scheduler.call_later(
            self.error_display_seconds, self.clear, name="clear_error"
        )
        return ActionResult(action=action, outcome="invalid", word=candidate)

    def commit(self, word: str) -> None:
        """
        Record `word` as solved: pin it, add it to the solved list, and drop
        the current selection.
        """
        grid.pin(self.state.grid, word)
        self.state.solved_words.append(word)
        self.clear()
        logger.info(
            "Solved %s (%d/%d)",
            word, len(self.state.solved_words), len(self.state.definition.words),
        )

    def clear(self) -> None:
        """Drop the selection and error cue, cancelling any pending clear."""
        if self._error_call is not None:
            self._error_call.cancel()
            self._error_call = None
        self.state.selection.clear()
