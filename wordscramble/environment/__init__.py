"""Game environment for Word Scramble."""

from .models import GameConfig, RoundState
from .game import WordGameEngine, FALLBACK_ROOT_WORD

__all__ = [
    "GameConfig",
    "RoundState",
    "WordGameEngine",
    "FALLBACK_ROOT_WORD",
]
