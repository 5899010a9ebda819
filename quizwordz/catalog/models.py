"""Data models for the word set catalog."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


WORDS_PER_SET = 5
WORD_LENGTH = 5


class WordSetDefinition(BaseModel):
    """One puzzle: a theme and five distinct 5-letter words."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    theme: str = Field(..., min_length=1)
    words: List[str]

    @field_validator("words", mode="before")
    @classmethod
    def _normalize_words(cls, value):
        if isinstance(value, (list, tuple)):
            return [w.strip().upper() if isinstance(w, str) else w for w in value]
        return value

    @field_validator("words")
    @classmethod
    def _check_words(cls, words: List[str]) -> List[str]:
        if len(words) != WORDS_PER_SET:
            raise ValueError(f"expected {WORDS_PER_SET} words, got {len(words)}")
        for word in words:
            if len(word) != WORD_LENGTH or not word.isalpha() or not word.isascii():
                raise ValueError(f"'{word}' is not a {WORD_LENGTH}-letter word")
        if len(set(words)) != len(words):
            raise ValueError(f"words must be distinct: {words}")
        return words

    @property
    def letters(self) -> List[str]:
        """All 25 letters of the set, in word order."""
        return list("".join(self.words))
