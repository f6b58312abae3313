"""
Spelling detector using SymSpellPy.

Loads a pickled dictionary if a cache is configured, otherwise a word list
file, otherwise the English frequency dictionary bundled with SymSpellPy.
"""
import hashlib
import pickle
import time
from importlib import resources
from pathlib import Path
from typing import List, Optional

from symspellpy import SymSpell

from spellcore.config import settings
from spellcore.schemas.spellcheck import Span
from spellcore.services.spellcheck_base import (
    SpellingDetector,
    SpellingDetectorError,
    tokenize,
)
from spellcore.utils.logger import get_logger


logger = get_logger("services.spellcheck_symspell")

BUNDLED_DICTIONARY = "frequency_dictionary_en_82_765.txt"
APOSTROPHES = ("'", "’")


class SymSpellSpellingDetector(SpellingDetector):
    """
    Spelling detector backed by a SymSpell dictionary.

    Lookups are case-insensitive: dictionary entries and custom words are
    stored lowercased, tokens are lowercased before lookup.
    """

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        cache_path: Optional[str] = None,
        language: Optional[str] = None,
        max_edit_distance: Optional[int] = None,
        prefix_length: Optional[int] = None,
        min_word_length: Optional[int] = None,
    ):
        """
        Initialize SymSpell spelling detector.

        Args:
            wordlist_path: Path to word list file (one word per line, optional count column)
            cache_path: Directory for the pickle cache (disabled when unset)
            language: Language code reported by get_language() (default from config)
            max_edit_distance: Max dictionary edit distance (default from config)
            prefix_length: SymSpell optimization parameter (default from config)
            min_word_length: Skip words shorter than this (default from config)
        """
        self._symspell: Optional[SymSpell] = None
        self._loaded = False

        wordlist_path = wordlist_path or settings.SPELLCHECK_WORDLIST_PATH
        cache_path = cache_path or settings.SPELLCHECK_CACHE_PATH
        self._wordlist_path = Path(wordlist_path) if wordlist_path else None
        self._language = language or settings.SPELLCHECK_LANGUAGE
        self._pickle_path = (
            Path(cache_path) / f"symspell_{self._language}_{self._dictionary_source()}.pkl"
            if cache_path else None
        )

        self._max_edit_distance = (
            max_edit_distance if max_edit_distance is not None else settings.SPELLCHECK_MAX_EDIT_DISTANCE
        )
        self._prefix_length = (
            prefix_length if prefix_length is not None else settings.SPELLCHECK_PREFIX_LENGTH
        )
        self._min_word_length = (
            min_word_length if min_word_length is not None else settings.SPELLCHECK_MIN_WORD_LENGTH
        )

        logger.info(
            "SymSpell spelling detector initialized",
            wordlist_path=str(self._wordlist_path) if self._wordlist_path else "<bundled>",
            pickle_path=str(self._pickle_path) if self._pickle_path else None,
            language=self._language,
            max_edit_distance=self._max_edit_distance,
            prefix_length=self._prefix_length,
            min_word_length=self._min_word_length,
        )

    def _dictionary_source(self) -> str:
        """Cache key for the dictionary source: "bundled" or word list stem plus path hash."""
        if self._wordlist_path is None:
            return "bundled"
        digest = hashlib.sha1(str(self._wordlist_path.resolve()).encode("utf-8")).hexdigest()[:10]
        return f"{self._wordlist_path.stem}_{digest}"

    @property
    def pickle_path(self) -> Optional[Path]:
        return self._pickle_path

    def load(self) -> bool:
        """
        Load dictionary from pickle, word list or bundled dictionary.

        Returns:
            True if loaded successfully, False otherwise
        """
        if self._loaded:
            return True

        # Try loading from pickle first (fast)
        if self._pickle_path is not None and self._pickle_path.exists():
            if self._load_from_pickle():
                return True

        if self._wordlist_path is not None:
            if not self._wordlist_path.exists():
                logger.error(
                    "Word list not found",
                    wordlist_path=str(self._wordlist_path),
                )
                return False
            return self._build_from_wordlist()

        return self._build_from_bundled()

    def _new_symspell(self) -> SymSpell:
        return SymSpell(
            max_dictionary_edit_distance=self._max_edit_distance,
            prefix_length=self._prefix_length,
        )

    def _load_from_pickle(self) -> bool:
        """Load SymSpell from pickle file."""
        try:
            start_time = time.time()

            with open(self._pickle_path, "rb") as f:
                self._symspell = pickle.load(f)

            self._loaded = True
            load_time = time.time() - start_time

            logger.info(
                "Dictionary loaded from pickle",
                load_time_seconds=round(load_time, 2),
                pickle_path=str(self._pickle_path),
            )
            return True

        except Exception as e:
            logger.error(
                "Failed to load pickle, will rebuild dictionary",
                error=str(e),
                pickle_path=str(self._pickle_path),
            )
            return False

    def _build_from_wordlist(self) -> bool:
        """Build SymSpell dictionary from word list and save pickle."""
        try:
            start_time = time.time()
            symspell = self._new_symspell()

            word_count = 0
            with open(self._wordlist_path, "r", encoding="utf-8") as f:
                for line in f:
                    parts = line.split()
                    if not parts:
                        continue
                    count = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else 1
                    symspell.create_dictionary_entry(parts[0].lower(), count)
                    word_count += 1

            if word_count == 0:
                logger.error(
                    "No words loaded from word list",
                    wordlist_path=str(self._wordlist_path),
                )
                return False

            logger.info(
                "Dictionary built from word list",
                word_count=word_count,
                build_time_seconds=round(time.time() - start_time, 2),
                wordlist_path=str(self._wordlist_path),
            )

        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to build dictionary from word list",
                error=str(e),
                wordlist_path=str(self._wordlist_path),
                exc_info=True,
            )
            return False

        self._symspell = symspell
        self._save_pickle()
        self._loaded = True
        return True

    def _build_from_bundled(self) -> bool:
        """Build SymSpell dictionary from the frequency list shipped with SymSpellPy."""
        start_time = time.time()
        symspell = self._new_symspell()

        with resources.as_file(resources.files("symspellpy") / BUNDLED_DICTIONARY) as path:
            if not symspell.load_dictionary(path, term_index=0, count_index=1):
                logger.error("Bundled SymSpellPy dictionary not found", dictionary=str(path))
                return False

        logger.info(
            "Dictionary built from bundled frequency list",
            word_count=len(symspell.words),
            build_time_seconds=round(time.time() - start_time, 2),
        )

        self._symspell = symspell
        self._save_pickle()
        self._loaded = True
        return True

    def _save_pickle(self) -> None:
        """Save SymSpell to pickle file for fast loading."""
        if self._pickle_path is None:
            return

        try:
            self._pickle_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self._pickle_path, "wb") as f:
                pickle.dump(self._symspell, f)

            logger.info(
                "Dictionary saved to pickle",
                pickle_path=str(self._pickle_path),
            )

        except OSError as e:
            logger.warning(
                "Failed to save pickle (will rebuild on next start)",
                error=str(e),
                pickle_path=str(self._pickle_path),
            )

    def _ensure_loaded(self) -> SymSpell:
        if not self._loaded and not self.load():
            raise SpellingDetectorError(
                f"Spelling dictionary for '{self._language}' could not be loaded"
            )
        return self._symspell

    def add_word(self, word: str) -> None:
        """Add a word to the custom dictionary (stored lowercased)."""
        symspell = self._ensure_loaded()
        symspell.create_dictionary_entry(word.lower(), 1)

    def check_spelling(self, text: str) -> List[Span]:
        """
        Check text for unrecognised words.

        Args:
            text: Text to check

        Returns:
            Spans of misspelled words in order of appearance
        """
        symspell = self._ensure_loaded()
        known = symspell.words

        spans = []
        for word, start, end in tokenize(text):
            if len(word) < self._min_word_length:
                continue
            if not self._is_known(word.lower(), known):
                spans.append(Span(start=start, end=end))

        return spans

    def _is_known(self, word: str, known) -> bool:
        """Look up a lowercased word; contractions pass if every part is known."""
        if word in known:
            return True

        for apostrophe in APOSTROPHES:
            if apostrophe in word:
                parts = [p for p in word.split(apostrophe) if len(p) >= self._min_word_length]
                return all(p in known for p in parts)

        return False

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._loaded

    def get_language(self) -> str:
        """Get language code."""
        return self._language
