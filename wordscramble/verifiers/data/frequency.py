"""Dictionary lookups backed by wordfreq word frequencies."""

import logging
from typing import List

from wordfreq import available_languages, top_n_list, zipf_frequency

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_DICTIONARY_SIZE = 50000
# Zipf 2.0 is roughly once per hundred million words
DEFAULT_MIN_ZIPF = 2.0


def top_words(language: str = DEFAULT_LANGUAGE, n_top: int = DEFAULT_DICTIONARY_SIZE) -> List[str]:
    """The `n_top` most frequent purely alphabetic words in `language`."""
    words = [w.lower() for w in top_n_list(language, n_top) if w.isalpha()]
    logger.debug("Loaded %d %s words from wordfreq", len(words), language)
    return words


class WordfreqOracle(object):
    '''
    Dictionary oracle that recognizes a word when wordfreq has seen it often
    enough in the requested language.

    Only alphabetic words count; unsupported languages recognize nothing.
    '''
    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.min_zipf = min_zipf

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or not word.isalpha():
            return False
        if language.lower() not in available_languages():
            return False
        return zipf_frequency(word.lower(), language.lower()) >= self.min_zipf
