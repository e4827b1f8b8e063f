"""
requisites - argument checks, requirements and a positional placeholder formatter.
"""

from requisites.errors import (
    NullValueError,
    RequirementError,
    RequisitesError,
    StateRequirementError,
)
from requisites.string_formatter import format
from requisites.version import __version__

__all__ = [
    "NullValueError",
    "RequirementError",
    "RequisitesError",
    "StateRequirementError",
    "format",
    "__version__",
]
