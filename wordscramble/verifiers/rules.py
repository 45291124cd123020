"""
Submission verification for Word Scramble.

Validates a candidate word, in order:
1. Length (at least MIN_WORD_LENGTH letters)
2. Not the root word itself
3. Originality (not already accepted this round)
4. Letter feasibility (spelled from the root's letters, respecting counts)
5. Word validity (recognized by the dictionary oracle)

Checks short-circuit: only the first failing rule is reported.
"""

from typing import Callable, Collection, Optional

from .letters import is_letter_subset
from .models import Rejection, RejectionCode


MIN_WORD_LENGTH = 3


def normalize_word(word: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return word.strip().lower()


def build_rejection(
    code: RejectionCode,
    root_word: str = "",
    min_length: int = MIN_WORD_LENGTH,
) -> Rejection:
    """Build the rejection for `code` with its display title and message."""
    if code == "TOO_SHORT":
        return Rejection(
            code=code,
            title="Word too short",
            message=f"Words must be at least {min_length} letters long",
        )
    if code == "IS_ROOT_WORD":
        return Rejection(
            code=code,
            title="That's the start word",
            message="You cannot use the start word itself.",
        )
    if code == "ALREADY_USED":
        return Rejection(
            code=code,
            title="Word used already",
            message="Be more original",
        )
    if code == "NOT_POSSIBLE":
        return Rejection(
            code=code,
            title="Word not possible",
            message=f"You can't spell that word from '{root_word}'!",
        )
    return Rejection(
        code=code,
        title="Word not recognized",
        message="You can't just make them up, you know!",
    )


def validate_submission(
    word: str,
    root_word: str,
    accepted_words: Collection[str],
    is_real_word: Callable[[str], bool],
    min_length: int = MIN_WORD_LENGTH,
) -> Optional[Rejection]:
    """
    Run the submission rules against an already-normalized word.

    Returns the first Rejection hit, or None if the word passes every rule.
    `is_real_word` is only consulted once all cheaper checks have passed.
    """
    if len(word) < min_length:
        return build_rejection("TOO_SHORT", min_length=min_length)

    if word == root_word.lower():
        return build_rejection("IS_ROOT_WORD")

    if word in accepted_words:
        return build_rejection("ALREADY_USED")

    if not is_letter_subset(word, root_word):
        return build_rejection("NOT_POSSIBLE", root_word)

    if not is_real_word(word):
        return build_rejection("NOT_REAL")

    return None
