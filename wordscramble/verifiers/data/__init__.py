"""Bundled word lists and dictionary lookups."""

from .wordlist import (
    check as check_word,
    load_word_list,
    WordOracle,
    WordListOracle,
    START_WORDS_FILE,
)
from .frequency import (
    WordfreqOracle,
    top_words,
    DEFAULT_LANGUAGE,
    DEFAULT_DICTIONARY_SIZE,
    DEFAULT_MIN_ZIPF,
)

__all__ = [
    "check_word",
    "load_word_list",
    "WordOracle",
    "WordListOracle",
    "WordfreqOracle",
    "top_words",
    "START_WORDS_FILE",
    "DEFAULT_LANGUAGE",
    "DEFAULT_DICTIONARY_SIZE",
    "DEFAULT_MIN_ZIPF",
]
