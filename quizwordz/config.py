"""Game configuration."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Configuration for a play session."""
    time_limit_seconds: int = Field(default=240, gt=0)
    error_display_seconds: float = Field(default=1.0, ge=0)
    hint_display_seconds: float = Field(default=2.0, gt=0)
    reveal_delay_seconds: float = Field(default=1.0, gt=0)
    low_time_seconds: int = Field(default=30, ge=0)
    seed: Optional[int] = None
    catalog_path: Optional[str] = None  # Bundled catalog when unset
    share_base_url: str = "https://quizwordz.app/"
    preferences_path: str = "~/.quizwordz/preferences.yaml"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)
