"""
Pydantic schemas for spell-check results.
"""
from spellcore.schemas.spellcheck import CheckResult, Span

__all__ = [
    "CheckResult",
    "Span",
]
