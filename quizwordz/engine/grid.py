"""
Grid arrangement: shuffling letters and pinning solved words.

The grid is a flat list of 25 letters read row by row. Solved words occupy a
prefix of the list, five letters each, in the order they were solved; the
remaining positions form the active zone. Repeated letters are told apart by
position only.
"""

import random
from typing import List, Sequence

from ..catalog.models import WORD_LENGTH
from .errors import GridCorruption
from .models import GridState


def initialize(words: Sequence[str], rng: random.Random) -> List[str]:
    """
    Concatenate the letters of all words and shuffle them uniformly.

    Args:
        words: The round's words
        rng: Random source (Fisher-Yates via `Random.shuffle`)

    Returns:
        A new list of letters
    """
    letters = list("".join(words))
    rng.shuffle(letters)
    return letters


def find_word_positions(letters: Sequence[str], solved_word_count: int, word: str) -> List[int]:
    """
    Locate `word` in the active zone, one position per character.

    Each character takes the lowest-index active position with that letter
    that has not already been taken by an earlier character of the word.

    Raises:
        GridCorruption: If some character has no free matching position
    """
    prefix = solved_word_count * WORD_LENGTH
    taken: List[int] = []
    for char in word:
        for i in range(prefix, len(letters)):
            if letters[i] == char and i not in taken:
                taken.append(i)
                break
        else:
            raise GridCorruption(word, list(letters), prefix)
    return taken


def pin_word(letters: Sequence[str], solved_word_count: int, word: str) -> List[str]:
    """
    Move a solved word into the next five slots of the solved prefix.

    The word's letters land in word order; the other active letters keep
    their relative order behind it.

    Returns:
        A new list of letters; the caller increments the solved count
    """
    prefix = solved_word_count * WORD_LENGTH
    positions = find_word_positions(letters, solved_word_count, word)
    rest = [letters[i] for i in range(prefix, len(letters)) if i not in positions]
    return list(letters[:prefix]) + [letters[i] for i in positions] + rest


def reshuffle_active(letters: Sequence[str], solved_word_count: int, rng: random.Random) -> List[str]:
    """Shuffle only the active zone; the solved prefix is left alone."""
    prefix = solved_word_count * WORD_LENGTH
    active = list(letters[prefix:])
    rng.shuffle(active)
    return list(letters[:prefix]) + active


def create_grid(words: Sequence[str], rng: random.Random) -> GridState:
    """Build a fresh, fully shuffled grid for a round."""
    return GridState(letters=initialize(words, rng), solved_word_count=0)


def pin(grid: GridState, word: str) -> None:
    """Pin `word` on `grid` in place."""
    grid.letters = pin_word(grid.letters, grid.solved_word_count, word)
    grid.solved_word_count += 1


def reshuffle(grid: GridState, rng: random.Random) -> None:
    """Reshuffle the active zone of `grid` in place."""
    grid.letters = reshuffle_active(grid.letters, grid.solved_word_count, rng)
