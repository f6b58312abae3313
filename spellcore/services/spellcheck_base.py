"""
Abstract base class for spelling detectors.
"""
import re
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from spellcore.schemas.spellcheck import Span


# Letters only (any script), with apostrophe-joined parts kept together ("don't")
WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


class SpellingDetectorError(RuntimeError):
    """Raised when a detector cannot be used (e.g. its dictionary failed to load)."""


class SpellingDetector(ABC):
    """
    Abstract base class for spelling detector implementations.

    A detector owns a dictionary and reports the spans of tokens it does not
    recognise. Words added with add_word() extend that dictionary for the
    lifetime of the detector; there is no removal.
    """

    @abstractmethod
    def check_spelling(self, text: str) -> List[Span]:
        """
        Find unrecognised tokens in text.

        Args:
            text: Text to check

        Returns:
            Spans of misspelled tokens in order of appearance (duplicates kept)
        """
        pass

    @abstractmethod
    def add_word(self, word: str) -> None:
        """Add a word to the custom dictionary."""
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if the dictionary is loaded and ready."""
        pass

    @abstractmethod
    def get_language(self) -> str:
        """Get the language code this detector handles (e.g., 'en')."""
        pass

    @abstractmethod
    def load(self) -> bool:
        """
        Load the dictionary.

        Returns:
            True if loaded successfully, False otherwise
        """
        pass


def tokenize(text: str) -> Iterator[Tuple[str, int, int]]:
    """
    Split text into word tokens with their offsets.

    Args:
        text: Text to tokenize

    Yields:
        (word, start, end) tuples preserving original case
    """
    for match in WORD_PATTERN.finditer(text):
        yield match.group(), match.start(), match.end()
