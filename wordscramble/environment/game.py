import logging
import random
from typing import Any, List, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict

from .models import GameConfig, RoundState
from ..verifiers.data import load_word_list, top_words, WordOracle, WordListOracle, WordfreqOracle
from ..verifiers.letters import is_letter_subset
from ..verifiers.models import SubmissionResult
from ..verifiers.rules import validate_submission, normalize_word

logger = logging.getLogger(__name__)


# Root word used when the start word list has no usable entries
FALLBACK_ROOT_WORD = "silkworm"


class WordGameEngine(BaseModel):
    """
    Manages the Word Scramble round state.

    Holds the root word and the words accepted so far, validates submissions
    and keeps the score. Not safe for concurrent use: callers must serialize
    calls to start_round and submit_word.

    Attributes:
        config: Game configuration (resource paths, language, scoring)
        oracle: WordOracle used to decide whether a word is real
        dictionary: Corpus scanned for the words derivable from each root
        root_word: The current root word ("" before the first round)
        accepted_words: Accepted words, most recent first
        score: Points scored this round
        max_possible_words: Number of dictionary words derivable from the root
        possible_words: The derivable words themselves, sorted
        round_number: Number of rounds started so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    oracle: Optional[WordOracle] = None
    dictionary: List[str] = Field(default_factory=list)
    root_word: str = ""
    accepted_words: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)
    max_possible_words: int = Field(default=0, ge=0)
    possible_words: List[str] = Field(default_factory=list)
    round_number: int = 0
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and default oracle after model creation."""
        self._rng = random.Random(self.config.seed)
        if self.oracle is None:
            self.oracle = self._default_oracle()

    def _default_oracle(self) -> WordOracle:
        """Oracle over our own dictionary when one was supplied, else wordfreq."""
        if self.dictionary:
            return WordListOracle(self.dictionary, language=self.config.language)
        return WordfreqOracle(min_zipf=self.config.min_zipf)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        oracle: Optional[WordOracle] = None,
        dictionary: Optional[Sequence[str]] = None,
        **config_kwargs: Any
    ) -> "WordGameEngine":
        """
        Factory method to create an engine with its dictionary loaded.

        Args:
            config: Optional GameConfig instance
            oracle: Optional WordOracle; defaults to wordfreq for the default
                corpus, otherwise to one backed by the dictionary itself
            dictionary: Optional corpus; defaults to config.dictionary_path,
                or the most frequent wordfreq words when that is unset
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new WordGameEngine with no round started

        Raises:
            ResourceLoadError: If the dictionary file cannot be loaded
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is not None:
            dictionary = [w.strip().lower() for w in dictionary if w.strip()]
        elif config.dictionary_path is not None:
            dictionary = load_word_list(config.dictionary_path)
        else:
            dictionary = top_words(config.language, config.dictionary_size)
            if oracle is None:
                oracle = WordfreqOracle(min_zipf=config.min_zipf)

        return cls(config=config, oracle=oracle, dictionary=list(dictionary))

    @property
    def has_round(self) -> bool:
        """Whether a round has been started."""
        return bool(self.root_word)

    @property
    def state(self) -> RoundState:
        """Snapshot of the current round."""
        return RoundState(
            root_word=self.root_word,
            accepted_words=list(self.accepted_words),
            score=self.score,
            max_possible_words=self.max_possible_words,
            round_number=self.round_number,
        )

    def start_round(self, start_words: Optional[Sequence[str]] = None) -> RoundState:
        """
        Start a new round with a randomly chosen root word.

        Args:
            start_words: Candidate root words; loaded from
                config.start_words_path when omitted

        Returns:
            Snapshot of the new round

        Raises:
            ResourceLoadError: If the start word list cannot be loaded. The
                current round is left untouched.
        """
        if start_words is None:
            start_words = load_word_list(self.config.start_words_path)

        candidates = [w.strip().lower() for w in start_words if w.strip()]
        if candidates:
            root = self._rng.choice(candidates)
        else:
            logger.warning("No start words available, using '%s'", FALLBACK_ROOT_WORD)
            root = FALLBACK_ROOT_WORD

        possible = self.find_possible_words(root)

        self.root_word = root
        self.accepted_words = []
        self.score = 0
        self.possible_words = possible
        self.max_possible_words = len(possible)
        self.round_number += 1

        logger.info(
            "Round %d started with '%s' (%d possible words)",
            self.round_number, root, self.max_possible_words,
        )
        for word in possible:
            logger.debug("  %s", word)

        return self.state

    def find_possible_words(self, root: str) -> List[str]:
        """
        Find every dictionary word that can be spelled from `root`.

        A word counts if it is long enough, is a letter subset of the root
        and is recognized by the oracle. Each word is counted once.
        """
        found = set()
        for word in self.dictionary:
            if word in found or len(word) < self.config.min_word_length:
                continue
            if is_letter_subset(word, root) and self.oracle.is_recognized(word, self.config.language):
                found.add(word)
        return sorted(found)

    def submit_word(self, candidate: str) -> SubmissionResult:
        """
        Submit a word for the current round.

        The word is trimmed and lowercased, then checked against the rules in
        order; the first failing rule is returned as the rejection. Accepted
        words go to the front of accepted_words and score
        points_per_letter for each letter.

        Raises:
            RuntimeError: If no round has been started
        """
        if not self.has_round:
            raise RuntimeError("No round in progress; call start_round() first")

        word = normalize_word(candidate)
        rejection = validate_submission(
            word,
            self.root_word,
            self.accepted_words,
            self.is_real_word,
            min_length=self.config.min_word_length,
        )
        if rejection is not None:
            logger.debug("Rejected '%s': %s", word, rejection.code)
            return SubmissionResult(accepted=False, word=word, rejection=rejection)

        points = len(word) * self.config.points_per_letter
        self.accepted_words.insert(0, word)
        self.score += points
        logger.debug("Accepted '%s' for %d points", word, points)
        return SubmissionResult(accepted=True, word=word, points=points)

    def is_original(self, word: str) -> bool:
        """Check the word has not been accepted this round."""
        return word not in self.accepted_words

    def is_possible(self, word: str) -> bool:
        """Check the word can be spelled from the root word's letters."""
        return is_letter_subset(word, self.root_word)

    def is_real_word(self, word: str) -> bool:
        """Ask the oracle whether the word is real in the configured language."""
        return self.oracle.is_recognized(word, self.config.language)
