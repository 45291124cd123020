# This util loads newline-delimited word lists and answers dictionary lookups.
# The bundled start.txt (root words) lives next to this file; the default
# dictionary comes from wordfreq (see frequency.py).

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Protocol, Union, runtime_checkable

from ...errors import ResourceLoadError
from .frequency import WordfreqOracle, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent
START_WORDS_FILE = DATA_DIR / "start.txt"


def load_word_list(path: Union[str, Path]) -> List[str]:
    '''
    Reads a UTF-8, newline-separated word list.

    Entries are trimmed and lowercased; blank lines are dropped.
    Raises ResourceLoadError if the file is missing or unreadable.
    '''
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(path, str(e)) from e

    words = [line.strip().lower() for line in text.split("\n")]
    words = [w for w in words if w]
    logger.debug("Loaded %d words from %s", len(words), path)
    return words


@runtime_checkable
class WordOracle(Protocol):
    """Anything that can say whether a word is real in a given language."""

    def is_recognized(self, word: str, language: str) -> bool:
        ...


class WordListOracle(object):
    '''
    Dictionary oracle backed by an in-memory word list for a single language.

    Lookups are case-insensitive. Words asked about in any other language
    are not recognized.
    '''
    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: FrozenSet[str] = frozenset(w.strip().lower() for w in words if w.strip())

    @classmethod
    def from_file(cls, path: Union[str, Path], language: str = DEFAULT_LANGUAGE) -> "WordListOracle":
        return cls(load_word_list(path), language=language)

    def __len__(self):
        return len(self._words)

    def __contains__(self, word):
        return word.lower() in self._words

    def is_recognized(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language.lower() != self.language.lower():
            return False
        return word in self


_DEFAULT_ORACLE = None


def check(word, language=DEFAULT_LANGUAGE):
    '''
    Returns True if `word` is a recognized word in `language`.
    Returns False otherwise.
    '''
    global _DEFAULT_ORACLE
    if _DEFAULT_ORACLE is None:
        _DEFAULT_ORACLE = WordfreqOracle()
    return _DEFAULT_ORACLE.is_recognized(word, language)
