"""
Requisites error types.
"""

from collections.abc import Iterator
from typing import Any, NoReturn

from requisites import string_formatter


class RequisitesError(Exception):
    """Base class for requirement failures raised by requisites"""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)


class RequirementError(RequisitesError, ValueError):
    """An argument did not satisfy a requirement"""


class StateRequirementError(RequisitesError, RuntimeError):
    """A state or logic condition did not hold"""


class NullValueError(RequirementError, TypeError):
    """A required value was None"""


def fail(msg: str, *args: Any) -> NoReturn:
    """Raise a RequirementError with a formatted message"""
    raise RequirementError(string_formatter.format(msg, *args))


def fail_state(msg: str, *args: Any) -> NoReturn:
    """Raise a StateRequirementError with a formatted message"""
    raise StateRequirementError(string_formatter.format(msg, *args))


def fail_null(msg: str, *args: Any) -> NoReturn:
    """Raise a NullValueError with a formatted message"""
    raise NullValueError(string_formatter.format(msg, *args))


def reject_iterator(value: Any) -> None:
    """Raise TypeError for one-shot iterators, which a length check would use up"""
    if isinstance(value, Iterator):
        raise TypeError(
            string_formatter.format(
                "Cannot check a {} without consuming it; pass a collection instead",
                type(value).__name__,
            )
        )
