"""Plain-text rendering of round snapshots for the terminal."""

from typing import List

from .catalog.models import WORD_LENGTH
from .engine.models import RoundSnapshot
from .share import format_time


def render_cell(snapshot: RoundSnapshot, index: int) -> str:
    """
    Render one cell as four characters.

    Markers: `=A=` solved, `[A]` selected, `!A!` wrong attempt, `*A*` hint.
    """
    letter = snapshot.letters[index]
    if index < snapshot.solved_prefix_length:
        return f"={letter}= "
    if index in snapshot.selected_positions:
        return f"!{letter}! " if snapshot.error_flag else f"[{letter}] "
    if index == snapshot.highlighted_index:
        return f"*{letter}* "
    return f" {letter}  "


def render_grid(snapshot: RoundSnapshot) -> str:
    """Render the 5x5 grid with 1-based cell numbers beside each row."""
    if snapshot.phase == "PAUSED":
        return "\n".join(["", "      Game Paused", ""])

    lines: List[str] = []
    for row in range(len(snapshot.letters) // WORD_LENGTH):
        start = row * WORD_LENGTH
        cells = "".join(render_cell(snapshot, i) for i in range(start, start + WORD_LENGTH))
        lines.append(f"{start + 1:>2}-{start + WORD_LENGTH:<2} {cells.rstrip()}")
    return "\n".join(lines)


def render_status(snapshot: RoundSnapshot) -> str:
    """Theme, timer and progress lines shown above the grid."""
    clock = format_time(snapshot.time_left)
    if snapshot.low_time:
        clock += " (hurry!)"
    lines = [
        f"Find five 5-letter words about: {snapshot.theme}",
        f"Set {snapshot.set_number} of {snapshot.total_sets}    Time left: {clock}",
        f"Solved: {', '.join(snapshot.solved_words) if snapshot.solved_words else '-'}",
    ]
    return "\n".join(lines)


def render_outcome(snapshot: RoundSnapshot) -> str:
    """Summary shown once the round outcome is surfaced."""
    outcome = snapshot.outcome
    if outcome is None:
        return ""
    if outcome.timed_out:
        header = "Time's up!"
    else:
        header = f"Well done! You found all five words in {format_time(outcome.time_taken)}."
    found = ", ".join(outcome.solved_words) if outcome.solved_words else "none"
    return "\n".join([header, f"Theme: {outcome.theme}", f"Words found: {found}"])


def render(snapshot: RoundSnapshot) -> str:
    parts = [render_status(snapshot), "", render_grid(snapshot)]
    if snapshot.outcome is not None:
        parts.extend(["", render_outcome(snapshot)])
    return "\n".join(parts)
