import random

import pytest

from quizwordz.catalog import Catalog, WordSetDefinition
from quizwordz.config import GameConfig
from quizwordz.engine import Round, RoundState, Scheduler
from quizwordz.engine.grid import create_grid, find_word_positions


COLORS = WordSetDefinition(
    id="t1", theme="Colors", words=["BLACK", "WHITE", "GREEN", "BROWN", "AMBER"]
)
FRUITS = WordSetDefinition(
    id="t2", theme="Fruits", words=["APPLE", "GRAPE", "LEMON", "MANGO", "PEACH"]
)


def positions_for(state: RoundState, word: str):
    """Active-zone cells that currently spell `word`."""
    return find_word_positions(state.grid.letters, state.grid.solved_word_count, word)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def state():
    return RoundState(definition=COLORS, grid=create_grid(COLORS.words, random.Random(11)))


@pytest.fixture
def catalog():
    return Catalog(sets=[COLORS, FRUITS])


@pytest.fixture
def game(catalog):
    return Round.create(catalog=catalog, config=GameConfig(seed=5), set_id="t1")
