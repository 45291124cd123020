"""
Pydantic models for the environment layer.

This module contains the configuration and state snapshot models used by the
engine and the command-line front end. The engine itself lives in game.py.
"""

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field

from ..verifiers.data import (
    START_WORDS_FILE,
    DEFAULT_LANGUAGE,
    DEFAULT_DICTIONARY_SIZE,
    DEFAULT_MIN_ZIPF,
)
from ..verifiers.rules import MIN_WORD_LENGTH


class GameConfig(BaseModel):
    """Configuration for a game session."""
    start_words_path: Path = START_WORDS_FILE
    dictionary_path: Optional[Path] = None  # None: most frequent wordfreq words
    dictionary_size: int = Field(default=DEFAULT_DICTIONARY_SIZE, ge=1)
    min_zipf: float = DEFAULT_MIN_ZIPF
    language: str = DEFAULT_LANGUAGE
    min_word_length: int = Field(default=MIN_WORD_LENGTH, ge=1)
    points_per_letter: int = Field(default=10, ge=0)
    seed: Optional[int] = None


class RoundState(BaseModel):
    """Read-only snapshot of the current round."""
    root_word: str
    accepted_words: List[str] = Field(default_factory=list)  # Most recent first
    score: int = Field(default=0, ge=0)
    max_possible_words: int = Field(default=0, ge=0)
    round_number: int = Field(default=0, ge=0)

    @property
    def words_found(self) -> int:
        """Number of words accepted so far this round."""
        return len(self.accepted_words)
