"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Spell-check settings loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    APP_LOG_LEVEL: Optional[str] = None  # Overrides LOG_LEVEL for spellcore loggers
    SYMSPELLPY_LOG_LEVEL: Optional[str] = None

    # Detector Configuration
    SPELLCHECK_PROVIDER: str = "symspell"  # Options: symspell, memory
    SPELLCHECK_LANGUAGE: str = "en"
    SPELLCHECK_WORDLIST_PATH: Optional[str] = None  # None = SymSpellPy bundled English dictionary
    SPELLCHECK_CACHE_PATH: Optional[str] = None  # Pickle cache directory, None disables caching
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # Max edit distance for the SymSpell index (1-3)
    SPELLCHECK_PREFIX_LENGTH: int = 7  # SymSpell optimization parameter
    SPELLCHECK_MIN_WORD_LENGTH: int = 2  # Skip words shorter than this

    # Checker Configuration
    SPELLCHECK_ALLOW_EMPTY_WORD_LISTS: bool = True  # False rejects valid_words=[] / warn_words=[]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def app_log_level(self) -> str:
        """Effective log level for spellcore loggers."""
        return (self.APP_LOG_LEVEL or self.LOG_LEVEL).upper()


# Global settings instance
settings = Settings()
