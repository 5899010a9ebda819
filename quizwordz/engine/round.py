import logging
import random
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..catalog import Catalog, WordSetDefinition
from ..config import GameConfig
from ..share import SharePayload, build_share_payload
from . import grid
from .assist import AssistEngine
from .models import (
    Action,
    ActionResult,
    HintState,
    RoundOutcome,
    RoundPhase,
    RoundSnapshot,
    RoundState,
)
from .scheduler import Scheduler, ScheduledCall
from .selection import SelectionMachine
from .timer import RoundTimer


logger = logging.getLogger(__name__)


class Round(BaseModel):
    """
    Top-level orchestrator for one round of play.

    Owns the round state, the selection machine, the assist engine and the
    timer, applies player actions one at a time, and publishes snapshots for
    the presentation layer.

    Attributes:
        catalog: Word sets to draw from
        config: Game configuration
        scheduler: Clock for every deferred callback of the round
        state: Grid, selection, hint and solved words
        timer: Countdown for the round
        outcome: Final result, set once it is surfaced
        time_taken: Seconds on the clock when the last word was solved
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    catalog: Catalog
    config: GameConfig = Field(default_factory=GameConfig)
    scheduler: Scheduler = Field(default_factory=Scheduler)
    state: Optional[RoundState] = None
    timer: Optional[RoundTimer] = None
    selection: Optional[SelectionMachine] = None
    assist: Optional[AssistEngine] = None
    outcome: Optional[RoundOutcome] = None
    time_taken: Optional[int] = None
    _rng: Optional[random.Random] = None
    _reveal_call: Optional[ScheduledCall] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        catalog: Optional[Catalog] = None,
        config: Optional[GameConfig] = None,
        set_id: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        **config_kwargs: Any
    ) -> "Round":
        """
        Factory method to create a round and start it.

        Args:
            catalog: Word sets (defaults to the bundled catalog, or the one
                named by `config.catalog_path`)
            config: Optional GameConfig instance
            set_id: Word set to play; unknown or missing ids pick at random
            scheduler: Clock to use (a fresh virtual clock by default)
            **config_kwargs: Config parameters if config not provided

        Returns:
            A Round that has already started
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if catalog is None:
            if config.catalog_path:
                catalog = Catalog.load(config.catalog_path)
            else:
                catalog = Catalog.default()

        game = cls(catalog=catalog, config=config, scheduler=scheduler or Scheduler())
        game.start_round(catalog.choose(set_id, game._rng))
        return game

    @property
    def definition(self) -> WordSetDefinition:
        if self.state is None:
            raise ValueError("Round not started. Call start_round() first.")
        return self.state.definition

    @property
    def is_finished(self) -> bool:
        return self.timer is not None and self.timer.is_final

    @property
    def phase(self) -> RoundPhase:
        if self.outcome is not None:
            return "TIMED_OUT" if self.outcome.timed_out else "COMPLETE"
        if self.timer.state == "STOPPED":
            return "FINISHING"
        if self.timer.state == "PAUSED":
            return "PAUSED"
        return "PLAYING"

    def start_round(self, definition: WordSetDefinition) -> None:
        """
        Begin a fresh round on `definition`.

        Everything from a previous round is discarded and its pending
        callbacks are cancelled.
        """
        self._cancel_pending()

        state = RoundState(
            definition=definition,
            grid=grid.create_grid(definition.words, self._rng),
            hint=HintState(duration_seconds=self.config.hint_display_seconds),
        )
        self.state = state
        self.selection = SelectionMachine(
            state=state,
            scheduler=self.scheduler,
            error_display_seconds=self.config.error_display_seconds,
        )
        self.assist = AssistEngine(
            state=state,
            selection=self.selection,
            scheduler=self.scheduler,
            rng=self._rng,
        )
        self.timer = RoundTimer(
            scheduler=self.scheduler,
            limit_seconds=self.config.time_limit_seconds,
            on_expire=self._handle_expiry,
        )
        self.outcome = None
        self.time_taken = None
        self.timer.start()
        logger.info("Started round %r (%s)", definition.id, definition.theme)

    def play_again(self) -> None:
        """Start a new round on a different, randomly chosen word set."""
        current = self.state.definition.id if self.state else None
        self.start_round(self.catalog.choose_other(current, self._rng))

    def apply_action(self, action: Action) -> ActionResult:
        """
        Apply one player action.

        Every state change the action causes happens before this returns.
        Actions that make no sense right now (a solved cell, hinting with
        nothing left, anything while paused or after the round ended) are
        ignored rather than treated as errors.

        Args:
            action: The action to apply

        Returns:
            ActionResult describing what happened
        """
        if self.state is None:
            raise ValueError("Round not started. Call start_round() first.")

        if action.kind == "PAUSE":
            return self._toggle_pause(action)

        if self.is_finished or self.timer.state == "PAUSED":
            return ActionResult(action=action, outcome="ignored")

        if action.kind == "SELECT":
            result = self.selection.select(action.position)
            if result.accepted:
                self.assist.clear_hint()
        elif action.kind == "HINT":
            result = self.assist.hint()
        elif action.kind == "SOLVE":
            result = self.assist.solve()
        else:
            result = self._shuffle(action)

        if result.outcome == "solved":
            self.assist.clear_hint()
            if self.state.is_solved:
                self._finish()

        return result

    def advance(self, seconds: float) -> int:
        """Let `seconds` of game time pass. Returns the callbacks run."""
        return self.scheduler.advance(seconds)

    def current_snapshot(self) -> RoundSnapshot:
        """Read-only view of the round for display."""
        if self.state is None:
            raise ValueError("Round not started. Call start_round() first.")

        state = self.state
        return RoundSnapshot(
            set_id=state.definition.id,
            theme=state.definition.theme,
            set_number=self.catalog.index_of(state.definition.id) + 1,
            total_sets=len(self.catalog),
            letters=list(state.grid.letters),
            solved_prefix_length=state.grid.prefix_length,
            solved_words=list(state.solved_words),
            selected_positions=list(state.selection.selected_positions),
            error_flag=state.selection.error_flag,
            highlighted_index=state.hint.highlighted_index,
            elapsed_seconds=self.timer.elapsed_seconds,
            time_left=self.timer.time_left,
            low_time=self.timer.time_left <= self.config.low_time_seconds,
            timer_state=self.timer.state,
            phase=self.phase,
            outcome=self.outcome.model_copy(deep=True) if self.outcome else None,
        )

    def share_payload(self) -> SharePayload:
        """
        Share data for the finished round.

        Raises:
            ValueError: If the round has no outcome yet
        """
        if self.outcome is None:
            raise ValueError("Round has not finished yet")
        outcome = self.outcome
        return build_share_payload(
            outcome.set_id, outcome.theme, outcome.time_taken, self.config.share_base_url
        )

    def share_message(self) -> str:
        return self.share_payload().message()

    def get_state(self) -> Dict:
        """
        Get the current round state as a dictionary.

        Useful for serialization and logging.
        """
        return self.current_snapshot().model_dump()

    def _toggle_pause(self, action: Action) -> ActionResult:
        if self.timer.pause():
            # A highlight must not outlive the pause that hides the grid
            self.assist.clear_hint()
            return ActionResult(action=action, outcome="paused")
        if self.timer.resume():
            return ActionResult(action=action, outcome="resumed")
        return ActionResult(action=action, outcome="ignored")

    def _shuffle(self, action: Action) -> ActionResult:
        grid.reshuffle(self.state.grid, self._rng)
        self.selection.clear()
        self.assist.clear_hint()
        return ActionResult(action=action, outcome="shuffled")

    def _finish(self) -> None:
        """Stop the clock on the last solve and reveal the outcome shortly after."""
        self.timer.stop()
        self.time_taken = self.timer.elapsed_seconds
        logger.info(
            "Round %r solved in %d seconds", self.state.definition.id, self.time_taken
        )
        self._reveal_call = self.scheduler.call_later(
            self.config.reveal_delay_seconds, self._reveal, name="reveal_outcome"
        )

    def _reveal(self) -> None:
        self._reveal_call = None
        self.outcome = RoundOutcome(
            set_id=self.state.definition.id,
            theme=self.state.definition.theme,
            solved_words=list(self.state.solved_words),
            time_taken=self.time_taken,
            timed_out=False,
        )

    def _handle_expiry(self) -> None:
        self.assist.clear_hint()
        self.time_taken = self.timer.limit_seconds
        logger.info(
            "Round %r timed out with %d/%d words",
            self.state.definition.id,
            len(self.state.solved_words),
            len(self.state.definition.words),
        )
        self.outcome = RoundOutcome(
            set_id=self.state.definition.id,
            theme=self.state.definition.theme,
            solved_words=list(self.state.solved_words),
            time_taken=self.time_taken,
            timed_out=True,
        )

    def _cancel_pending(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
        if self.selection is not None:
            self.selection.clear()
        if self.assist is not None:
            self.assist.clear_hint()
        if self._reveal_call is not None:
            self._reveal_call.cancel()
            self._reveal_call = None
