"""Pick the first qualifying value out of several candidates."""

from __future__ import annotations

from typing import Optional, TypeVar

from requisites import checks
from requisites.errors import fail, fail_null, reject_iterator

T = TypeVar("T")

ALL_PARAMETERS_ARE_NULL = "All parameters are null"
ALL_VALUES_ARE_EMPTY = "All values are empty"
ALL_STRINGS_ARE_BLANK = "All strings are blank"


def first_not_null(*values: Optional[T]) -> T:
    for value in values:
        if value is not None:
            return value
    fail_null(ALL_PARAMETERS_ARE_NULL)


def first_not_empty(*values: Optional[T]) -> T:
    """Return the first value that is not None and not empty."""
    for value in values:
        reject_iterator(value)
        if checks.is_not_empty(value):
            return value
    fail(ALL_VALUES_ARE_EMPTY)


def first_not_blank(*values: Optional[str]) -> str:
    for value in values:
        if checks.is_not_blank(value):
            return value
    fail(ALL_STRINGS_ARE_BLANK)
