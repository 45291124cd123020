"""Exceptions raised by Word Scramble."""

from pathlib import Path
from typing import Union


class ResourceLoadError(Exception):
    """A bundled or configured word list could not be loaded."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Could not load word list from {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
