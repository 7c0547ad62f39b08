"""Type source module.

Exports the ``TypeSource`` interface, its resolution errors, and the
built-in schema-backed and static implementations.
"""
from __future__ import annotations

from metatype.sources.base import TypeSource
from metatype.sources.errors import (
    ClassNotFoundError,
    InvalidDataTypeError,
    PropertyNotFoundError,
    PropertyResolutionError,
)
from metatype.sources.schema_source import SchemaTypeSource
from metatype.sources.static import StaticTypeSource

__all__ = [
    "TypeSource",
    "SchemaTypeSource",
    "StaticTypeSource",
    "PropertyResolutionError",
    "ClassNotFoundError",
    "PropertyNotFoundError",
    "InvalidDataTypeError",
]
