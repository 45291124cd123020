"""Submission verification for Word Scramble."""

from .rules import validate_submission, build_rejection, normalize_word, MIN_WORD_LENGTH
from .letters import is_letter_subset
from .models import Rejection, RejectionCode, SubmissionResult
from .data import check_word, load_word_list, WordOracle, WordListOracle, WordfreqOracle

__all__ = [
    # Rules
    "validate_submission",
    "build_rejection",
    "normalize_word",
    "MIN_WORD_LENGTH",
    "is_letter_subset",
    # Models
    "Rejection",
    "RejectionCode",
    "SubmissionResult",
    # Dictionary
    "check_word",
    "load_word_list",
    "WordOracle",
    "WordListOracle",
    "WordfreqOracle",
]
