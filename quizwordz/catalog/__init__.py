"""Word set catalog for QuizWordz."""

from .models import WordSetDefinition, WORDS_PER_SET, WORD_LENGTH
from .catalog import Catalog, DEFAULT_CATALOG_PATH

__all__ = [
    "WordSetDefinition",
    "WORDS_PER_SET",
    "WORD_LENGTH",
    "Catalog",
    "DEFAULT_CATALOG_PATH",
]
