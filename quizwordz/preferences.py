"""
Player preferences kept between sessions.

Only the dark-mode flag is stored. It is read once when the store is opened
and written back on every change. The engine never looks at it.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel


logger = logging.getLogger(__name__)


class Preferences(BaseModel):
    """Stored preference values."""
    dark_mode: bool = False


class PreferenceStore:
    """Get/set access to preferences backed by a YAML file."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self.preferences = self._read()

    def _read(self) -> Preferences:
        if not self.path.exists():
            return Preferences()
        with open(self.path) as f:
            data = yaml.safe_load(f) or {}
        return Preferences(**data)

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(self.preferences.model_dump(), f)
        logger.debug("Saved preferences to %s", self.path)

    def get_dark_mode(self) -> bool:
        return self.preferences.dark_mode

    def set_dark_mode(self, value: bool) -> None:
        self.preferences.dark_mode = bool(value)
        self._write()

    def toggle_dark_mode(self) -> bool:
        """Flip dark mode, persist it, and return the new value."""
        self.set_dark_mode(not self.preferences.dark_mode)
        return self.preferences.dark_mode
