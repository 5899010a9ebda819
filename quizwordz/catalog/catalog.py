"""
Catalog of word sets.

The engine only consumes definitions from here. Sets are loaded from a YAML
file shaped like:

    sets:
      - id: colors
        theme: Colors
        words: [BLACK, WHITE, GREEN, BROWN, AMBER]
"""

import logging
import random
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, field_validator

from .models import WordSetDefinition


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "word_sets.yaml"


class Catalog(BaseModel):
    """Ordered collection of word set definitions."""

    sets: List[WordSetDefinition]

    @field_validator("sets")
    @classmethod
    def _check_sets(cls, sets: List[WordSetDefinition]) -> List[WordSetDefinition]:
        if not sets:
            raise ValueError("catalog must contain at least one word set")
        ids = [s.id for s in sets]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate word set ids: {duplicates}")
        return sets

    @classmethod
    def load(cls, path: str | Path) -> "Catalog":
        """
        Load a catalog from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If any set is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        catalog = cls(**data)
        logger.debug("Loaded %d word sets from %s", len(catalog), path)
        return catalog

    @classmethod
    def default(cls) -> "Catalog":
        """The catalog bundled with the package."""
        return cls.load(DEFAULT_CATALOG_PATH)

    def __len__(self) -> int:
        return len(self.sets)

    def get(self, set_id: str) -> Optional[WordSetDefinition]:
        for definition in self.sets:
            if definition.id == set_id:
                return definition
        return None

    def index_of(self, set_id: str) -> int:
        """Position of a set in the catalog, or -1 if unknown."""
        for i, definition in enumerate(self.sets):
            if definition.id == set_id:
                return i
        return -1

    def choose(self, set_id: Optional[str], rng: random.Random) -> WordSetDefinition:
        """
        Pick the set named by `set_id`, falling back to a uniform random choice
        when the id is absent or unknown.
        """
        if set_id:
            definition = self.get(set_id)
            if definition is not None:
                return definition
            logger.info("Unknown word set id %r, choosing at random", set_id)
        return rng.choice(self.sets)

    def choose_other(self, exclude_id: Optional[str], rng: random.Random) -> WordSetDefinition:
        """Pick a random set different from `exclude_id` when the catalog allows it."""
        candidates = [s for s in self.sets if s.id != exclude_id]
        if not candidates:
            return rng.choice(self.sets)
        return rng.choice(candidates)
