"""Letter availability checks against a root word."""

from collections import Counter


def is_letter_subset(word: str, root: str) -> bool:
    """
    Returns True if every letter of `word` can be matched to a distinct
    occurrence of that letter in `root`.

    The root is treated as a multiset: a letter may be used at most as many
    times as it appears in the root.
    """
    remaining = Counter(root)
    for letter in word:
        if remaining[letter] == 0:
            return False
        remaining[letter] -= 1
    return True
