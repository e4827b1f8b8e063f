"""
Requirement functions that raise when an argument check fails.

Each function returns the value it validated, so checks can be inlined:

    self.name = require_not_blank(name, "name")

Messages are built with :func:`requisites.string_formatter.format`, so
``{}`` and ``%s`` placeholders are both accepted in custom messages.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from pathlib import Path
from typing import Any, NoReturn, Optional, TypeVar

from requisites import checks, string_formatter
from requisites.checks import PathArg, Temporal
from requisites.errors import NullValueError, RequirementError, StateRequirementError, reject_iterator

logger = logging.getLogger("requisites.require")

T = TypeVar("T")


def _label(label: Optional[str], default: str) -> str:
    return default if checks.is_blank(label) else label


def _kind(value: Any) -> str:
    if isinstance(value, str):
        return "String"
    if isinstance(value, Mapping):
        return "Map"
    return "Collection"


def _temporal_kind(value: Temporal) -> str:
    return type(value).__name__.capitalize()


def _raise(error_type: type, template: str, *args: Any) -> NoReturn:
    message = string_formatter.format(template, *args)
    logger.debug("Requirement failed: %s", message)
    raise error_type(message)


# ----------------- Conditions -----------------


def require_true(condition: bool, message: Optional[str] = None, *args: Any) -> None:
    """Raise RequirementError unless ``condition`` is true.

    ``message`` may hold placeholders filled from ``args``.
    """
    if not condition:
        _raise(RequirementError, message or "Condition is false", *args)


def require_false(condition: bool, message: Optional[str] = None, *args: Any) -> None:
    if condition:
        _raise(RequirementError, message or "Condition is true", *args)


def require_state(condition: bool, message: Optional[str] = None, *args: Any) -> None:
    """Like :func:`require_true`, but raises StateRequirementError."""
    if not condition:
        _raise(StateRequirementError, message or "Condition is false", *args)


# ----------------- Null, empty and length -----------------


def require_not_null(value: Optional[T], label: Optional[str] = None) -> T:
    if value is None:
        _raise(NullValueError, "{} is null", _label(label, "Object"))
    return value


def require_not_empty(value: Optional[T], label: Optional[str] = None) -> T:
    require_not_null(value, _label(label, "Object"))
    reject_iterator(value)
    if checks.is_empty(value):
        _raise(RequirementError, "{} is empty", _label(label, _kind(value)))
    return value


def require_not_blank(value: Optional[str], label: Optional[str] = None) -> str:
    require_not_empty(value, _label(label, "String"))
    if value.isspace():
        _raise(RequirementError, "{} is blank", _label(label, "String"))
    return value


def require_length(value: Optional[T], length: int, label: Optional[str] = None) -> T:
    require_not_null(value, label)
    reject_iterator(value)
    if not checks.has_length(value, length):
        _raise(
            RequirementError,
            "{} has length {}, but required length is: {} - contains: {}",
            _label(label, _kind(value)), checks.length_of(value), length, value,
        )
    return value


def require_length_greater_than(
    value: Optional[T], min_length: int, label: Optional[str] = None
) -> T:
    require_not_null(value, label)
    reject_iterator(value)
    if not checks.has_length_greater_than(value, min_length):
        _raise(
            RequirementError,
            "{} has length {}, but minimum is: {} - contains: {}",
            _label(label, _kind(value)), checks.length_of(value), min_length + 1, value,
        )
    return value


def require_length_less_than(
    value: Optional[T], max_length: int, label: Optional[str] = None
) -> T:
    require_not_null(value, label)
    reject_iterator(value)
    if not checks.has_length_less_than(value, max_length):
        _raise(
            RequirementError,
            "{} has length {}, but maximum is: {} - contains: {}",
            _label(label, _kind(value)), checks.length_of(value), max_length - 1, value,
        )
    return value


def require_length_between(
    value: Optional[T], min_length: int, max_length: int, label: Optional[str] = None
) -> T:
    """Require ``min_length <= len(value) <= max_length``."""
    require_not_null(value, label)
    reject_iterator(value)
    if not checks.has_length_between(value, min_length, max_length):
        _raise(
            RequirementError,
            "{} has length {}, but must be between {} and {} - contains: {}",
            _label(label, _kind(value)), checks.length_of(value), min_length, max_length, value,
        )
    return value


# ----------------- Values -----------------


def require_value_greater_than(value: T, minimum: Any, label: Optional[str] = None) -> T:
    if not value > minimum:
        _raise(
            RequirementError,
            "{} is {}, but must be greater than: {}",
            _label(label, "Value"), value, minimum,
        )
    return value


def require_value_less_than(value: T, maximum: Any, label: Optional[str] = None) -> T:
    if not value < maximum:
        _raise(
            RequirementError,
            "{} is {}, but must be less than: {}",
            _label(label, "Value"), value, maximum,
        )
    return value


def require_value_between(
    value: T, minimum: Any, maximum: Any, label: Optional[str] = None
) -> T:
    if not minimum <= value <= maximum:
        _raise(
            RequirementError,
            "{} is {}, but must be between {} and {}",
            _label(label, "Value"), value, minimum, maximum,
        )
    return value


def require_duration_greater_than(
    duration: Optional[timedelta], minimum: timedelta, label: Optional[str] = None
) -> timedelta:
    require_not_null(duration, _label(label, "Duration"))
    if duration <= minimum:
        _raise(
            RequirementError,
            "{} is {}, but must be greater than: {}",
            _label(label, "Duration"), duration, minimum,
        )
    return duration


# ----------------- Paths -----------------


def require_path_exists(path: Optional[PathArg], label: Optional[str] = None) -> Path:
    require_not_null(path, _label(label, "Path"))
    if not checks.path_exists(path):
        _raise(RequirementError, "{} does not exist: {}", _label(label, "Path"), Path(path).absolute())
    return Path(path)


def require_path_not_exists(path: Optional[PathArg], label: Optional[str] = None) -> Path:
    require_not_null(path, _label(label, "Path"))
    if not checks.path_not_exists(path):
        _raise(RequirementError, "{} exists: {}", _label(label, "Path"), Path(path).absolute())
    return Path(path)


def require_regular_file(path: Optional[PathArg], label: Optional[str] = None) -> Path:
    require_not_null(path, _label(label, "File"))
    if not checks.is_regular_file(path):
        _raise(
            RequirementError, "{} is not a regular file: {}", _label(label, "File"), Path(path).absolute()
        )
    return Path(path)


def require_directory(path: Optional[PathArg], label: Optional[str] = None) -> Path:
    require_not_null(path, _label(label, "Directory"))
    if not checks.is_directory(path):
        _raise(
            RequirementError, "{} is not a directory: {}", _label(label, "Directory"), Path(path).absolute()
        )
    return Path(path)


# ----------------- Time -----------------


def require_future(value: Optional[Temporal], label: Optional[str] = None) -> Temporal:
    require_not_null(value, _label(label, "Date Time"))
    if not checks.is_now_or_future(value):
        _raise(RequirementError, "{} is not in the future: {}", _label(label, _temporal_kind(value)), value)
    return value


def require_past(value: Optional[Temporal], label: Optional[str] = None) -> Temporal:
    require_not_null(value, _label(label, "Date Time"))
    if not checks.is_now_or_past(value):
        _raise(RequirementError, "{} is not in the past: {}", _label(label, _temporal_kind(value)), value)
    return value
