"""
Checks that hand back the value when it qualifies, and None otherwise.

Useful for chaining with ``or``:

    port = check_min_max(parsed_port, 1, 65535) or DEFAULT_PORT
"""

from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Optional, TypeVar

from requisites import checks
from requisites.checks import PathArg
from requisites.errors import reject_iterator

T = TypeVar("T")


def check(obj: T, expression: bool) -> Optional[T]:
    return obj if expression else None


def check_not_null(obj: Optional[T]) -> Optional[T]:
    return obj


def check_not_empty(value: Optional[T]) -> Optional[T]:
    reject_iterator(value)
    return value if checks.is_not_empty(value) else None


def check_not_blank(value: Optional[str]) -> Optional[str]:
    return value if checks.is_not_blank(value) else None


def check_length(value: Optional[T], min_length: int, max_length: Optional[int] = None) -> Optional[T]:
    """Return ``value`` if its length is at least ``min_length`` (and at most ``max_length``)."""
    reject_iterator(value)
    if not checks.has_length_greater_or_equal_to(value, min_length):
        return None
    if max_length is not None and not checks.has_length_less_or_equal_to(value, max_length):
        return None
    return value


def check_min(value: Any, minimum: Any) -> Optional[Any]:
    return value if value is not None and value >= minimum else None


def check_max(value: Any, maximum: Any) -> Optional[Any]:
    return value if value is not None and value <= maximum else None


def check_min_max(value: Any, minimum: Any, maximum: Any) -> Optional[Any]:
    return check_max(check_min(value, minimum), maximum)


def _as_path(path: PathArg) -> Path:
    return path if isinstance(path, Path) else Path(path)


def check_regular_file(path: Optional[PathArg]) -> Optional[Path]:
    return _as_path(path) if checks.is_regular_file(path) else None


def check_directory(path: Optional[PathArg]) -> Optional[Path]:
    return _as_path(path) if checks.is_directory(path) else None


def check_exists(path: Optional[PathArg]) -> Optional[Path]:
    return _as_path(path) if checks.path_exists(path) else None


def check_not_exists(path: Optional[PathArg]) -> Optional[Path]:
    return _as_path(path) if checks.path_not_exists(path) else None


# ----------------- Parsing -----------------


def check_datetime(value: Optional[str], fmt: Optional[str] = None) -> Optional[datetime]:
    """Parse ``value`` as a datetime, ISO 8601 unless ``fmt`` is given.

    Returns None when the text does not parse.
    """
    if value is None:
        return None
    try:
        if fmt is None:
            return datetime.fromisoformat(value)
        return datetime.strptime(value, fmt)
    except ValueError:
        return None


def check_date(value: Optional[str], fmt: Optional[str] = None) -> Optional[date]:
    if value is None:
        return None
    try:
        if fmt is None:
            return date.fromisoformat(value)
        return datetime.strptime(value, fmt).date()
    except ValueError:
        return None


def check_time(value: Optional[str], fmt: Optional[str] = None) -> Optional[time]:
    if value is None:
        return None
    try:
        if fmt is None:
            return time.fromisoformat(value)
        return datetime.strptime(value, fmt).time()
    except ValueError:
        return None


def check_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse a UTC instant such as ``2024-01-02T03:04:05Z``.

    Only timezone-aware timestamps qualify.
    """
    if value is None:
        return None
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    parsed = check_datetime(text)
    if parsed is None or parsed.tzinfo is None:
        return None
    return parsed
