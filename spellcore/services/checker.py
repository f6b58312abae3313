"""
Spelling checker: classifies misspellings into errors and warnings and
reports them through the caller's callbacks.
"""
from typing import Any, Callable, Iterable, List, Optional, Tuple

from spellcore.schemas.spellcheck import CheckResult
from spellcore.services.spellcheck import get_default_detector
from spellcore.services.spellcheck_base import SpellingDetector
from spellcore.utils.logger import get_logger
from spellcore.utils.text_filters import identity_filter
from spellcore.utils.validators import CheckerOptions, to_checker_options, validate_options


logger = get_logger("services.checker")


def _no_log(message: str) -> None:
    pass


def classify_words(
    words: Iterable[str],
    warn_words: Iterable[str],
) -> Tuple[List[str], List[str]]:
    """
    Split misspelled words into errors and warnings.

    Membership in warn_words is an exact, case-sensitive string match.
    Relative order is preserved within each group and duplicates are kept.

    Args:
        words: Misspelled words in detection order
        warn_words: Words to report as warnings instead of errors

    Returns:
        (errant_words, warning_words)
    """
    warn_set = set(warn_words)
    errant_words = []
    warning_words = []

    for word in words:
        if word in warn_set:
            warning_words.append(word)
        else:
            errant_words.append(word)

    return errant_words, warning_words


class SpellingChecker:
    """
    A configured checker bound to one set of options and one detector.

    Calling the instance is the same as calling check().
    """

    def __init__(self, options: CheckerOptions, detector: SpellingDetector):
        self._options = options
        self._detector = detector
        self._filter: Callable[[str], str] = (
            options.filter if options.filter is not None else identity_filter
        )
        self._warn_words = frozenset(options.warn_words)

    @property
    def options(self) -> CheckerOptions:
        return self._options

    @property
    def detector(self) -> SpellingDetector:
        return self._detector

    def incorrectly_spelled_words(self, text: str) -> List[str]:
        """Return the misspelled substrings of already-filtered text, in order."""
        return [span.extract(text) for span in self._detector.check_spelling(text)]

    def check(self, text: str) -> CheckResult:
        """
        Check text and report misspellings.

        errors() is called at most once with every non-warning word, then
        warnings() at most once with every warning word. Exceptions from the
        filter, the detector or either callback propagate to the caller.

        Args:
            text: Text to check

        Returns:
            CheckResult holding the same words passed to the callbacks
        """
        preprocessed = self._filter(text)
        result_words = self.incorrectly_spelled_words(preprocessed)

        if not result_words:
            return CheckResult()

        errant_words, warning_words = classify_words(result_words, self._warn_words)

        logger.debug(
            "Spelling issues found",
            error_count=len(errant_words),
            warning_count=len(warning_words),
            text_length=len(preprocessed),
        )

        if errant_words:
            self._options.errors(errant_words)

        if warning_words:
            self._options.warnings(warning_words)

        return CheckResult(error_words=errant_words, warning_words=warning_words)

    __call__ = check


def create_checker(
    options: Any,
    detector: Optional[SpellingDetector] = None,
    allow_empty_word_lists: Optional[bool] = None,
) -> SpellingChecker:
    """
    Validate options, seed the detector dictionary and return a checker.

    Validation happens before any side effect, so an invalid configuration
    never touches the dictionary or the log callback.

    Args:
        options: Mapping or CheckerOptions (errors, warnings, log, filter,
            valid_words, warn_words)
        detector: Detector to use; defaults to the process-wide detector,
            whose dictionary is shared by every checker that uses it
        allow_empty_word_lists: Accept empty word lists (default from config)

    Returns:
        SpellingChecker bound to the options

    Raises:
        CheckerConfigError: If the options are invalid
        SpellingDetectorError: If the default detector cannot be loaded
    """
    validate_options(options, allow_empty_word_lists=allow_empty_word_lists)
    resolved = to_checker_options(options)

    log = resolved.log if resolved.log is not None else _no_log
    if detector is None:
        detector = get_default_detector()

    for word in resolved.valid_words:
        detector.add_word(word)
        logger.debug("Added to custom dictionary", word=word)
        log(f"Added to custom dictionary: {word}")

    for word in resolved.warn_words:
        logger.debug("Added word to warning list", word=word)
        log(f"Added word to warning list: {word}")

    logger.info(
        "Spelling checker created",
        language=detector.get_language(),
        valid_word_count=len(resolved.valid_words),
        warn_word_count=len(resolved.warn_words),
        filtered=resolved.filter is not None,
    )

    return SpellingChecker(resolved, detector)
