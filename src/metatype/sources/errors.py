"""Resolution errors raised by type sources.

Every error a ``TypeSource`` raises for a property it cannot resolve is
a ``PropertyResolutionError``, itself a ``LookupError``, so callers can
catch either.
"""
from __future__ import annotations


class PropertyResolutionError(LookupError):
    """Raised when a type source cannot determine a property's kind.

    Parameters
    ----------
    class_name:
        The class the lookup was made against.
    property_name:
        The property that could not be resolved.
    message:
        Human-readable explanation.
    """

    def __init__(self, class_name: str, property_name: str, message: str) -> None:
        self.class_name = class_name
        self.property_name = property_name
        super().__init__(message)


class ClassNotFoundError(PropertyResolutionError):
    """Raised when the class is not defined."""

    def __init__(self, class_name: str, property_name: str = "") -> None:
        super().__init__(
            class_name,
            property_name,
            f"Class {class_name!r} is not defined in the schema.",
        )


class PropertyNotFoundError(PropertyResolutionError):
    """Raised when the class exists but has no such property."""

    def __init__(self, class_name: str, property_name: str) -> None:
        super().__init__(
            class_name,
            property_name,
            f"Class {class_name!r} has no property {property_name!r}.",
        )


class InvalidDataTypeError(PropertyResolutionError):
    """Raised when a property's declared data type cannot be classified."""

    def __init__(self, class_name: str, property_name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            class_name,
            property_name,
            f"Cannot resolve the kind of {class_name}.{property_name}: {reason}",
        )
