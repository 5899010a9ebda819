"""
Main entry point for playing QuizWordz in a terminal.

Usage:
    python -m quizwordz.main
    python -m quizwordz.main --set colors --seed 42
    python -m quizwordz.main --config config.yaml --verbose
"""

import argparse
import logging
import sys
import time
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .config import GameConfig, load_config
from .engine import Action, ActionResult, Round
from .preferences import PreferenceStore
from .render import render


Command = Literal["DARK", "SHARE", "AGAIN", "QUIT", "HELP", "LOOK"]

COMMANDS = {
    "hint": Action.hint,
    "h": Action.hint,
    "solve": Action.solve,
    "shuffle": Action.shuffle,
    "s": Action.shuffle,
    "pause": Action.toggle_pause,
    "resume": Action.toggle_pause,
    "p": Action.toggle_pause,
}

FRONT_END_COMMANDS = {
    "dark": "DARK",
    "share": "SHARE",
    "again": "AGAIN",
    "quit": "QUIT",
    "q": "QUIT",
    "exit": "QUIT",
    "help": "HELP",
    "?": "HELP",
    "": "LOOK",
}

HELP_TEXT = """Commands:
  1-25 ...   select or deselect cells (several at once: 3 7 12 18 25)
  hint       highlight the first letter of a remaining word
  solve      reveal one remaining word
  shuffle    shuffle the unsolved letters
  pause      pause or resume the clock
  dark       toggle dark mode
  share      print the share message (after the round)
  again      play a different word set
  quit       leave the game"""


class ParsedCommand(BaseModel):
    """Parsed components of one line of player input."""
    actions: List[Action] = Field(default_factory=list)
    command: Optional[Command] = None
    error: Optional[str] = None
    raw_input: str = ""


def parse_command(text: str, cells: int = 25) -> ParsedCommand:
    """
    Parse a line of input.

    Cell numbers are 1-based on screen and converted to 0-based positions.

    Args:
        text: Raw input line
        cells: Number of cells on the board

    Returns:
        ParsedCommand with actions, a front-end command, or an error
    """
    result = ParsedCommand(raw_input=text)
    words = text.strip().lower().replace(",", " ").split()
    key = words[0] if words else ""

    if key in COMMANDS:
        result.actions = [COMMANDS[key]()]
        return result

    if key in FRONT_END_COMMANDS:
        result.command = FRONT_END_COMMANDS[key]
        return result

    if all(w.isdigit() for w in words):
        numbers = [int(w) for w in words]
        bad = [n for n in numbers if not 1 <= n <= cells]
        if bad:
            result.error = f"Cells are numbered 1-{cells}, got {bad[0]}"
            return result
        result.actions = [Action.select(n - 1) for n in numbers]
        return result

    result.error = f"Unknown command: {text.strip()!r} (type 'help')"
    return result


def describe(result: ActionResult) -> Optional[str]:
    """One-line feedback for an action, or None when nothing needs saying."""
    if result.outcome == "solved":
        return f"Solved: {result.word}"
    if result.outcome == "invalid":
        return f"{result.word} is not one of the words"
    if result.outcome == "paused":
        return "Paused"
    if result.outcome == "resumed":
        return "Resumed"
    if result.outcome == "ignored" and result.action.kind != "SELECT":
        return f"{result.action.kind.title()} is not available right now"
    return None


def play(game: Round, preferences: PreferenceStore, verbose: bool = False) -> None:
    """
    Run the interactive loop until the player quits.

    Wall-clock time between inputs is fed to the round's clock, so timers,
    hint expiry and error display follow real time.
    """
    last = time.monotonic()

    def catch_up() -> None:
        nonlocal last
        now = time.monotonic()
        game.advance(now - last)
        last = now

    print(f"Dark mode: {'on' if preferences.get_dark_mode() else 'off'}")
    print(HELP_TEXT)

    while True:
        print()
        print(render(game.current_snapshot()))
        try:
            line = input("> ")
        except EOFError:
            print()
            break
        catch_up()

        parsed = parse_command(line, cells=len(game.state.grid.letters))
        if parsed.error:
            print(parsed.error)
            continue

        if parsed.command == "QUIT":
            break
        if parsed.command == "HELP":
            print(HELP_TEXT)
        elif parsed.command == "DARK":
            enabled = preferences.toggle_dark_mode()
            print(f"Dark mode: {'on' if enabled else 'off'}")
        elif parsed.command == "SHARE":
            if game.outcome is None:
                print("Finish the round first")
            else:
                print(game.share_message())
        elif parsed.command == "AGAIN":
            game.play_again()
            last = time.monotonic()
            if verbose:
                print(f"New word set: {game.definition.id}")

        for action in parsed.actions:
            result = game.apply_action(action)
            message = describe(result)
            if message:
                print(message)

        if game.phase == "FINISHING":
            # Let the last pin show before the result appears
            time.sleep(game.config.reveal_delay_seconds)
            catch_up()


def main():
    parser = argparse.ArgumentParser(
        description="Play QuizWordz 5x5 in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  time_limit_seconds: 240
  seed: 42
  catalog_path: my_word_sets.yaml
  preferences_path: ~/.quizwordz/preferences.yaml
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--set",
        dest="set_id",
        help="Word set id to play (random if missing or unknown)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible shuffles"
    )
    parser.add_argument(
        "--catalog",
        help="Path to a YAML word set catalog"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print engine logs to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {}
        if args.seed is not None:
            overrides["seed"] = args.seed
        if args.catalog:
            overrides["catalog_path"] = args.catalog
        if overrides:
            config = config.model_copy(update=overrides)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        game = Round.create(config=config, set_id=args.set_id)
    except Exception as e:
        print(f"Error loading word sets: {e}", file=sys.stderr)
        return 1

    preferences = PreferenceStore(config.preferences_path)

    if args.verbose:
        print(f"Word set: {game.definition.id}")

    try:
        play(game, preferences, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    return 0


if __name__ == "__main__":
    sys.exit(main())
