"""
spellcore: classify spelling issues into errors and warnings.

Usage:
    >>> from spellcore import create_checker
    >>> checker = create_checker({
    ...     "errors": lambda words: print("Error:", ", ".join(words)),
    ...     "warnings": lambda words: print("Warning:", ", ".join(words)),
    ...     "warn_words": ["colour"],
    ... })
    >>> checker.check("Some colour and a typpo")
"""
from spellcore.schemas.spellcheck import CheckResult, Span
from spellcore.services.checker import SpellingChecker, classify_words, create_checker
from spellcore.services.spellcheck import (
    create_spelling_detector,
    get_default_detector,
    reset_default_detector,
)
from spellcore.services.spellcheck_base import SpellingDetector, SpellingDetectorError
from spellcore.services.spellcheck_memory import InMemorySpellingDetector
from spellcore.utils.text_filters import (
    compose_filters,
    fenced_code_filter,
    identity_filter,
    marker_filter,
)
from spellcore.utils.validators import (
    CheckerConfigError,
    CheckerOptions,
    ConfigMissingError,
    ConfigNotObjectError,
    EmptyWordListError,
    MissingCallbackError,
    NotAFunctionError,
    NotAnArrayError,
    NotNullOrFunctionError,
    validate_options,
)

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    "create_checker",
    "SpellingChecker",
    "classify_words",
    "CheckResult",
    "Span",
    # Detectors
    "SpellingDetector",
    "SpellingDetectorError",
    "InMemorySpellingDetector",
    "create_spelling_detector",
    "get_default_detector",
    "reset_default_detector",
    # Filters
    "identity_filter",
    "marker_filter",
    "fenced_code_filter",
    "compose_filters",
    # Options
    "CheckerOptions",
    "validate_options",
    "CheckerConfigError",
    "ConfigMissingError",
    "ConfigNotObjectError",
    "MissingCallbackError",
    "NotAFunctionError",
    "NotNullOrFunctionError",
    "NotAnArrayError",
    "EmptyWordListError",
]
