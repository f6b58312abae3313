"""
Spelling detector factory and singleton management.
"""
from typing import Optional

from spellcore.config import settings
from spellcore.services.spellcheck_base import SpellingDetector, SpellingDetectorError
from spellcore.utils.logger import get_logger

logger = get_logger("services.spellcheck")

SUPPORTED_PROVIDERS = ("symspell", "memory")

# Process-wide detector shared by every checker created without an explicit one
_default_detector: Optional[SpellingDetector] = None


def create_spelling_detector(provider: Optional[str] = None) -> SpellingDetector:
    """
    Factory function to create a spelling detector for the given provider.

    Args:
        provider: Provider name ("symspell", "memory"). If None, uses settings.SPELLCHECK_PROVIDER

    Returns:
        SpellingDetector instance (not yet loaded)

    Raises:
        ValueError: If provider is not supported
    """
    if provider is None:
        provider = settings.SPELLCHECK_PROVIDER

    provider = provider.lower()

    if provider == "symspell":
        from spellcore.services.spellcheck_symspell import SymSpellSpellingDetector
        logger.info("Creating SymSpell spelling detector", language=settings.SPELLCHECK_LANGUAGE)
        return SymSpellSpellingDetector()
    elif provider == "memory":
        from spellcore.services.spellcheck_memory import InMemorySpellingDetector
        logger.info("Creating in-memory spelling detector", language=settings.SPELLCHECK_LANGUAGE)
        return InMemorySpellingDetector(language=settings.SPELLCHECK_LANGUAGE)
    else:
        raise ValueError(
            f"Unsupported spell-check provider: {provider}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )


def get_default_detector() -> SpellingDetector:
    """
    Get the process-wide spelling detector, initializing it on first use.

    Returns:
        Loaded SpellingDetector instance

    Raises:
        SpellingDetectorError: If the dictionary cannot be loaded
    """
    global _default_detector

    if _default_detector is not None:
        return _default_detector

    logger.info("Initializing default spelling detector...")
    detector = create_spelling_detector()

    if not detector.load():
        logger.warning("Failed to initialize default spelling detector")
        raise SpellingDetectorError(
            f"Default spelling detector ({settings.SPELLCHECK_PROVIDER}) failed to load"
        )

    logger.info("Default spelling detector initialized successfully")
    _default_detector = detector
    return _default_detector


def reset_default_detector() -> None:
    """Drop the process-wide detector so the next call builds a fresh one."""
    global _default_detector
    _default_detector = None
