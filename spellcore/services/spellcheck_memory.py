"""
In-memory spelling detector backed by a plain word set.
Used in tests and by callers that ship their own vocabulary.
"""
from typing import Iterable, List, Optional

from spellcore.schemas.spellcheck import Span
from spellcore.services.spellcheck_base import SpellingDetector, tokenize
from spellcore.utils.logger import get_logger


logger = get_logger("services.spellcheck_memory")


class InMemorySpellingDetector(SpellingDetector):
    """Set-backed spelling detector with case-insensitive lookups."""

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        language: str = "en",
        min_word_length: int = 1,
    ):
        self._words = {word.lower() for word in (words or ())}
        self._language = language
        self._min_word_length = min_word_length
        logger.info(
            "In-memory spelling detector initialized",
            word_count=len(self._words),
            language=language,
        )

    @property
    def words(self) -> frozenset:
        """Snapshot of the current dictionary."""
        return frozenset(self._words)

    def check_spelling(self, text: str) -> List[Span]:
        return [
            Span(start=start, end=end)
            for word, start, end in tokenize(text)
            if len(word) >= self._min_word_length and word.lower() not in self._words
        ]

    def add_word(self, word: str) -> None:
        self._words.add(word.lower())

    def load(self) -> bool:
        return True

    def is_loaded(self) -> bool:
        return True

    def get_language(self) -> str:
        return self._language
