"""Tests for word set definitions, the catalog, and game configuration."""

import random

import pytest
from pydantic import ValidationError

from quizwordz.catalog import Catalog, WordSetDefinition
from quizwordz.config import GameConfig, load_config

from conftest import COLORS, FRUITS


class TestWordSetDefinition:
    """Test validation of a single word set."""

    def test_valid_set(self):
        assert COLORS.letters == list("BLACKWHITEGREENBROWNAMBER")

    def test_words_uppercased(self):
        definition = WordSetDefinition(
            id="x", theme="X", words=["black", "white", "green", "brown", " amber "]
        )
        assert definition.words == ["BLACK", "WHITE", "GREEN", "BROWN", "AMBER"]

    def test_wrong_word_count(self):
        with pytest.raises(ValidationError):
            WordSetDefinition(id="x", theme="X", words=["BLACK", "WHITE", "GREEN", "BROWN"])

    def test_wrong_word_length(self):
        with pytest.raises(ValidationError):
            WordSetDefinition(id="x", theme="X", words=["BLACK", "WHITE", "GREEN", "BROWN", "RED"])

    def test_non_letters_rejected(self):
        with pytest.raises(ValidationError):
            WordSetDefinition(id="x", theme="X", words=["BLACK", "WHITE", "GREEN", "BROWN", "AMB3R"])

    def test_duplicate_words_rejected(self):
        with pytest.raises(ValidationError):
            WordSetDefinition(id="x", theme="X", words=["BLACK", "BLACK", "GREEN", "BROWN", "AMBER"])

    def test_frozen(self):
        with pytest.raises(ValidationError):
            COLORS.theme = "Other"


class TestCatalog:
    """Test lookup and random selection."""

    def test_get_and_index(self, catalog):
        assert catalog.get("t2") is FRUITS
        assert catalog.get("missing") is None
        assert catalog.index_of("t2") == 1
        assert catalog.index_of("missing") == -1
        assert len(catalog) == 2

    def test_choose_by_id(self, catalog):
        assert catalog.choose("t2", random.Random(0)) is FRUITS

    def test_choose_falls_back_to_random(self, catalog):
        rng = random.Random(0)
        picks = {catalog.choose(None, rng).id for _ in range(50)}
        assert picks == {"t1", "t2"}
        assert catalog.choose("unknown", rng).id in picks

    def test_choose_other(self, catalog):
        rng = random.Random(0)
        for _ in range(20):
            assert catalog.choose_other("t1", rng) is FRUITS

    def test_choose_other_single_set(self):
        catalog = Catalog(sets=[COLORS])
        assert catalog.choose_other("t1", random.Random(0)) is COLORS

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValidationError):
            Catalog(sets=[])

    def test_duplicate_ids_rejected(self):
        twin = WordSetDefinition(id="t1", theme="Fruits", words=FRUITS.words)
        with pytest.raises(ValidationError):
            Catalog(sets=[COLORS, twin])


class TestCatalogLoading:
    """Test reading catalogs from YAML."""

    def test_load(self, tmp_path):
        path = tmp_path / "sets.yaml"
        path.write_text(
            "sets:\n"
            "  - id: colors\n"
            "    theme: Colors\n"
            "    words: [black, white, green, brown, amber]\n"
        )
        catalog = Catalog.load(path)
        assert catalog.get("colors").words[0] == "BLACK"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Catalog.load(tmp_path / "nope.yaml")

    def test_empty_file_rejected(self, tmp_path):
        """A catalog file with no sets fails to load instead of loading empty."""
        path = tmp_path / "sets.yaml"
        path.write_text("")
        with pytest.raises(ValueError):
            Catalog.load(path)

    def test_empty_sets_list_rejected(self, tmp_path):
        path = tmp_path / "sets.yaml"
        path.write_text("sets: []\n")
        with pytest.raises(ValidationError):
            Catalog.load(path)

    def test_malformed_set(self, tmp_path):
        path = tmp_path / "sets.yaml"
        path.write_text("sets:\n  - id: bad\n    theme: Bad\n    words: [ONE, TWO]\n")
        with pytest.raises(ValidationError):
            Catalog.load(path)

    def test_bundled_catalog(self):
        catalog = Catalog.default()
        assert len(catalog) >= 10
        assert catalog.get("colors").theme == "Colors"


class TestGameConfig:
    """Test configuration defaults and loading."""

    def test_defaults(self):
        config = GameConfig()
        assert config.time_limit_seconds == 240
        assert config.error_display_seconds == 1.0
        assert config.hint_display_seconds == 2.0
        assert config.reveal_delay_seconds == 1.0

    def test_reveal_delay_must_be_positive(self):
        with pytest.raises(ValidationError):
            GameConfig(reveal_delay_seconds=0)

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("time_limit_seconds: 60\nseed: 9\n")
        config = load_config(str(path))
        assert config.time_limit_seconds == 60
        assert config.seed == 9

    def test_load_empty_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))
