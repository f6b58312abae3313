"""
Pydantic schemas for spell-check functionality.
"""
from typing import List

from pydantic import BaseModel, Field, model_validator


class Span(BaseModel):
    """A half-open character range [start, end) of an unrecognised token."""

    start: int = Field(ge=0, description="Offset of the first character")
    end: int = Field(ge=0, description="Offset one past the last character")

    @model_validator(mode="after")
    def check_order(self) -> "Span":
        if self.end < self.start:
            raise ValueError(f"Span end ({self.end}) precedes start ({self.start})")
        return self

    def extract(self, text: str) -> str:
        """Return the substring of text covered by this span."""
        return text[self.start:self.end]


class CheckResult(BaseModel):
    """Classified misspellings from a single check call."""

    error_words: List[str] = Field(
        default_factory=list,
        description="Misspelled words not on the warning list, in detection order"
    )
    warning_words: List[str] = Field(
        default_factory=list,
        description="Misspelled words found on the warning list, in detection order"
    )

    @property
    def has_errors(self) -> bool:
        return bool(self.error_words)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warning_words)
