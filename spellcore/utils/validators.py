"""
Checker option validation utilities.
"""
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Callable, Optional, Sequence

from spellcore.config import settings

# Callback fields in validation order; True means required
CALLBACK_FIELDS = {
    "errors": True,
    "warnings": True,
    "log": False,
    "filter": False,
}
WORD_LIST_FIELDS = ("valid_words", "warn_words")
ARRAY_TYPES = (list, tuple)


class CheckerConfigError(ValueError):
    """
    Base class for invalid checker options.

    Attributes:
        field: Name of the offending option, None for whole-object failures
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ConfigMissingError(CheckerConfigError):
    def __init__(self):
        super().__init__("No options specified.")


class ConfigNotObjectError(CheckerConfigError):
    def __init__(self):
        super().__init__("Non-object options specified.")


class MissingCallbackError(CheckerConfigError):
    def __init__(self, field: str):
        super().__init__(f"No {field} callback specified.", field)


class NotAFunctionError(CheckerConfigError):
    def __init__(self, field: str):
        super().__init__(f"{field.capitalize()} callback is not a function.", field)


class NotNullOrFunctionError(CheckerConfigError):
    def __init__(self, field: str):
        super().__init__(f"{field.capitalize()} callback is neither None nor a function.", field)


class NotAnArrayError(CheckerConfigError):
    def __init__(self, field: str):
        super().__init__(f"{field} is not an array.", field)


class EmptyWordListError(CheckerConfigError):
    def __init__(self, field: str):
        super().__init__(f"{field} array is empty.", field)


@dataclass(frozen=True)
class CheckerOptions:
    """Options for a spelling checker instance."""
    errors: Callable[[list], Any]
    warnings: Callable[[list], Any]
    log: Optional[Callable[[str], Any]] = None
    filter: Optional[Callable[[str], str]] = None
    valid_words: Sequence[str] = ()
    warn_words: Sequence[str] = ()


_MISSING = object()


def _option(options: Any, name: str) -> Any:
    """Read an option from a mapping or CheckerOptions, _MISSING if absent."""
    if isinstance(options, CheckerOptions):
        return getattr(options, name)
    return options.get(name, _MISSING)


def validate_options(options: Any, allow_empty_word_lists: Optional[bool] = None) -> None:
    """
    Validate checker options, stopping at the first problem.

    Checks, in order:
    - Options are present
    - Options are a mapping or CheckerOptions
    - errors and warnings callbacks are present and callable
    - log and filter are None or callable
    - valid_words and warn_words are lists or tuples

    Args:
        options: Mapping of option names or a CheckerOptions instance
        allow_empty_word_lists: Accept empty word lists (default from config)

    Raises:
        CheckerConfigError: Subclass naming the first invalid option
    """
    if allow_empty_word_lists is None:
        allow_empty_word_lists = settings.SPELLCHECK_ALLOW_EMPTY_WORD_LISTS

    if options is None:
        raise ConfigMissingError()

    if not isinstance(options, (Mapping, CheckerOptions)):
        raise ConfigNotObjectError()

    for name, required in CALLBACK_FIELDS.items():
        value = _option(options, name)
        if required:
            if value is _MISSING or (value is None and isinstance(options, CheckerOptions)):
                raise MissingCallbackError(name)
            if not callable(value):
                raise NotAFunctionError(name)
        elif value is not _MISSING and value is not None and not callable(value):
            raise NotNullOrFunctionError(name)

    for name in WORD_LIST_FIELDS:
        value = _option(options, name)
        if value is _MISSING or value is None:
            continue
        if not isinstance(value, ARRAY_TYPES):
            raise NotAnArrayError(name)
        if not value and not allow_empty_word_lists:
            raise EmptyWordListError(name)


def to_checker_options(options: Any) -> CheckerOptions:
    """
    Normalise validated options into a CheckerOptions instance.

    Unknown mapping keys are ignored; None word lists become empty tuples.
    """
    if isinstance(options, CheckerOptions):
        values = {f.name: getattr(options, f.name) for f in fields(CheckerOptions)}
    else:
        values = {f.name: options[f.name] for f in fields(CheckerOptions) if f.name in options}

    for name in WORD_LIST_FIELDS:
        values[name] = tuple(values.get(name) or ())

    return CheckerOptions(**values)
