"""
Unit tests for the spelling detector factory and process-wide singleton.
"""
from unittest.mock import MagicMock, patch

import pytest

from spellcore.services import spellcheck
from spellcore.services.spellcheck import (
    create_spelling_detector,
    get_default_detector,
    reset_default_detector,
)
from spellcore.services.spellcheck_base import SpellingDetectorError
from spellcore.services.spellcheck_memory import InMemorySpellingDetector
from spellcore.services.spellcheck_symspell import SymSpellSpellingDetector


class TestCreateSpellingDetector:
    """Tests for create_spelling_detector."""

    def test_symspell_provider(self):
        detector = create_spelling_detector("symspell")
        assert isinstance(detector, SymSpellSpellingDetector)
        assert detector.is_loaded() is False

    def test_memory_provider(self):
        detector = create_spelling_detector("memory")
        assert isinstance(detector, InMemorySpellingDetector)

    def test_provider_name_case_insensitive(self):
        assert isinstance(create_spelling_detector("MEMORY"), InMemorySpellingDetector)

    def test_provider_from_settings(self):
        mock_settings = MagicMock()
        mock_settings.SPELLCHECK_PROVIDER = "memory"
        mock_settings.SPELLCHECK_LANGUAGE = "en"
        with patch("spellcore.services.spellcheck.settings", mock_settings):
            assert isinstance(create_spelling_detector(), InMemorySpellingDetector)

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported spell-check provider: hunspell"):
            create_spelling_detector("hunspell")


class TestDefaultDetector:
    """Tests for the process-wide detector."""

    def test_created_once_and_shared(self):
        detector = InMemorySpellingDetector()
        with patch(
            "spellcore.services.spellcheck.create_spelling_detector",
            return_value=detector,
        ) as mock_create:
            first = get_default_detector()
            second = get_default_detector()

        assert first is second is detector
        mock_create.assert_called_once_with()

    def test_reset_drops_singleton(self):
        with patch(
            "spellcore.services.spellcheck.create_spelling_detector",
            side_effect=[InMemorySpellingDetector(), InMemorySpellingDetector()],
        ):
            first = get_default_detector()
            reset_default_detector()
            second = get_default_detector()

        assert first is not second

    def test_load_failure_raises_and_is_not_cached(self):
        failing = MagicMock()
        failing.load.return_value = False
        with patch(
            "spellcore.services.spellcheck.create_spelling_detector",
            return_value=failing,
        ):
            with pytest.raises(SpellingDetectorError):
                get_default_detector()

        assert spellcheck._default_detector is None
