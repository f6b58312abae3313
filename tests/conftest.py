"""
Pytest configuration and fixtures for spellcore tests.
"""
import logging
import os
from unittest.mock import Mock

import pytest

# Pin environment-driven settings before spellcore is imported
os.environ["SPELLCHECK_PROVIDER"] = "symspell"
for name in ("SPELLCHECK_WORDLIST_PATH", "SPELLCHECK_CACHE_PATH", "SPELLCHECK_MIN_WORD_LENGTH"):
    os.environ.pop(name, None)
os.environ["SPELLCHECK_ALLOW_EMPTY_WORD_LISTS"] = "true"

from spellcore.services.spellcheck import reset_default_detector
from spellcore.services.spellcheck_memory import InMemorySpellingDetector


# Small vocabulary covering the sentences used across the suite
TEST_VOCABULARY = [
    "a", "about", "and", "are", "correctly", "fun", "is", "it", "of",
    "something", "spell", "the", "this", "text", "words", "with",
]


@pytest.fixture(autouse=True)
def reset_detector():
    """Never let a process-wide detector leak between tests."""
    reset_default_detector()
    yield
    reset_default_detector()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers installed by setup_logging() (CLI tests)."""
    package_logger = logging.getLogger("spellcore")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def memory_detector() -> InMemorySpellingDetector:
    """Isolated detector with a fixed vocabulary."""
    return InMemorySpellingDetector(words=TEST_VOCABULARY)


@pytest.fixture
def errors_mock() -> Mock:
    return Mock(name="errors")


@pytest.fixture
def warnings_mock() -> Mock:
    return Mock(name="warnings")


@pytest.fixture
def base_options(errors_mock, warnings_mock) -> dict:
    """Minimal valid options: both required callbacks, defaults elsewhere."""
    return {
        "errors": errors_mock,
        "warnings": warnings_mock,
    }
