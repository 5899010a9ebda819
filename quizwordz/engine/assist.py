"""Hint and Solve assistance."""

import logging
import random
from typing import Optional
from pydantic import BaseModel, ConfigDict

from .models import Action, ActionResult, RoundState
from .scheduler import Scheduler, ScheduledCall
from .selection import SelectionMachine


logger = logging.getLogger(__name__)


class AssistEngine(BaseModel):
    """
    Hints and auto-solves over the remaining words.

    Both pick uniformly among words not yet solved, so a solved word is never
    offered again.

    Attributes:
        state: The round state shared with the other components
        selection: Selection machine whose success path `solve` reuses
        scheduler: Clock used for hint expiry
        rng: Random source for picking words
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    state: RoundState
    selection: SelectionMachine
    scheduler: Scheduler
    rng: random.Random
    _hint_call: Optional[ScheduledCall] = None

    def hint(self) -> ActionResult:
        """
        Highlight the first letter of a random remaining word.

        The lowest-index active cell holding that letter is highlighted for
        `state.hint.duration_seconds`. Issuing another hint replaces this one.
        """
        action = Action.hint()
        remaining = self.state.remaining_words
        if not remaining:
            return ActionResult(action=action, outcome="ignored")

        word = self.rng.choice(remaining)
        grid = self.state.grid
        index = next(
            (i for i in grid.active_indices if grid.letters[i] == word[0]),
            None,
        )

        self.clear_hint()
        if index is None:
            logger.warning("Hint letter %r for %s not in the active zone", word[0], word)
            return ActionResult(action=action, outcome="hinted", word=word)

        self.state.hint.highlighted_index = index
        self._hint_call = self.scheduler.call_later(
            self.state.hint.duration_seconds, self.clear_hint, name="clear_hint"
        )
        return ActionResult(action=action, outcome="hinted", word=word, position=index)

    def solve(self) -> ActionResult:
        """Solve a random remaining word exactly as a correct selection would."""
        action = Action.solve()
        remaining = self.state.remaining_words
        if not remaining:
            return ActionResult(action=action, outcome="ignored")

        word = self.rng.choice(remaining)
        self.selection.commit(word)
        self.clear_hint()
        return ActionResult(action=action, outcome="solved", word=word)

    def clear_hint(self) -> None:
        """Remove the highlight and cancel its pending expiry."""
        if self._hint_call is not None:
            self._hint_call.cancel()
            self._hint_call = None
        self.state.hint.highlighted_index = None
