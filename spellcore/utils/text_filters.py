"""
Text filters applied before spell-checking.

A filter is any callable taking the full text and returning the text to
check. Offsets need not be preserved: spans are computed on the filtered text.
"""
import re
from typing import Callable, Optional

TextFilter = Callable[[str], str]

DEFAULT_MARKER = "@!@"

# Fenced blocks first so their backticks are not treated as inline spans
FENCED_CODE_PATTERN = re.compile(r"^(```|~~~).*?^\1[^\n]*$", re.MULTILINE | re.DOTALL)
INLINE_CODE_PATTERN = re.compile(r"`[^`\n]+`")


def identity_filter(text: str) -> str:
    """Return text unchanged."""
    return text


def marker_filter(marker: str = DEFAULT_MARKER) -> TextFilter:
    """
    Build a filter that drops everything between a pair of markers.

    Matching is greedy within a line, so "a @!@x@!@ b @!@y@!@" loses
    everything from the first marker to the last one on that line.

    Args:
        marker: Literal marker string (default: "@!@")

    Returns:
        Filter function
    """
    if not marker:
        raise ValueError("Marker must be a non-empty string")

    escaped = re.escape(marker)
    pattern = re.compile(f"{escaped}.+{escaped}")

    def _filter(text: str) -> str:
        return pattern.sub("", text)

    return _filter


def fenced_code_filter() -> TextFilter:
    """Build a filter that removes Markdown fenced code blocks and inline code spans."""

    def _filter(text: str) -> str:
        text = FENCED_CODE_PATTERN.sub("", text)
        return INLINE_CODE_PATTERN.sub("", text)

    return _filter


def compose_filters(*filters: Optional[TextFilter]) -> TextFilter:
    """
    Chain filters left to right, skipping None entries.

    Example:
        >>> f = compose_filters(marker_filter(), None, str.lower)
        >>> f("Keep @!@drop@!@ THIS")
        'keep  this'
    """
    active = [f for f in filters if f is not None]
    if not active:
        return identity_filter

    def _filter(text: str) -> str:
        for f in active:
            text = f(text)
        return text

    return _filter
