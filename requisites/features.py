"""
This module defines all requisites features using a unified registry system.
This module serves as the single source of truth for all features.
"""

from typing import (
    Dict,
    Any,
    Callable,
    List,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import logging

from requisites import string_formatter
from requisites.checks import NAMED_STRING_CHECKS

logger = logging.getLogger("requisites.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all requisites features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all requisites features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from requisites.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_format(
    template: Optional[str],
    args: Optional[List[Any]] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Substitute positional arguments into a template"""
    args = list(args or [])
    placeholders = string_formatter.count_placeholders(template)
    result = string_formatter.format(template, *args)
    logger.debug(
        "Formatted template with %d placeholders and %d arguments",
        placeholders,
        len(args),
    )
    return OperationResult[Dict[str, Any]].ok(
        {
            "result": result,
            "placeholders": placeholders,
            "arguments": len(args),
            "unconsumed": max(placeholders - len(args), 0),
        }
    )


def handle_check(
    check: str, value: Optional[str] = None, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Apply a named string check to a value"""
    predicate = NAMED_STRING_CHECKS.get(check)
    if predicate is None:
        return OperationResult[Dict[str, Any]].fail(
            string_formatter.format(
                "Unknown check: {} (available: {})",
                check,
                ", ".join(sorted(NAMED_STRING_CHECKS)),
            )
        )

    try:
        valid = predicate(value)
    except Exception as e:
        return OperationResult[Dict[str, Any]].fail(
            f"Check {check} failed: {str(e)}"
        )

    logger.debug("Check %s -> %s", check, valid)
    return OperationResult[Dict[str, Any]].ok(
        {"check": check, "value": value, "valid": valid}
    )


def handle_list_checks(**kwargs) -> OperationResult[Dict[str, Any]]:
    """Handle listing available named checks"""
    checks = {}
    for name, predicate in NAMED_STRING_CHECKS.items():
        description = "No description available"
        if predicate.__doc__:
            description = predicate.__doc__.strip().split("\n")[0]
        checks[name] = description

    return OperationResult[Dict[str, Any]].ok({"checks": checks})


# Register all features
version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the requisites version",
        handler=handle_version,
    )
)

format_feature = FeatureRegistry.register(
    Feature(
        name="format",
        description="Substitute {} and %s placeholders with positional arguments",
        handler=handle_format,
    )
)

check_feature = FeatureRegistry.register(
    Feature(
        name="check",
        description="Apply a named check to a string value",
        handler=handle_check,
    )
)

list_checks_feature = FeatureRegistry.register(
    Feature(
        name="list_checks",
        description="List available named checks",
        handler=handle_list_checks,
    )
)
