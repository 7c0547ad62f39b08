"""Type source backed by an in-memory ``Schema``.

Usage
-----
::

    from metatype.sources import SchemaTypeSource

    source = SchemaTypeSource.from_path("schema.yaml")
    kind = source.resolve_kind("City", "population")
"""
from __future__ import annotations

import logging
from pathlib import Path

from metatype.schema.kinds import DataTypeError, PropertyKind, classify_data_type
from metatype.schema.loader import load_schema
from metatype.schema.model import Schema
from metatype.sources.base import TypeSource
from metatype.sources.errors import (
    ClassNotFoundError,
    InvalidDataTypeError,
    PropertyNotFoundError,
)

logger = logging.getLogger(__name__)


class SchemaTypeSource(TypeSource):
    """Resolve property kinds from the declarations in a ``Schema``.

    Local reference targets are checked against the schema's classes;
    network references (``peer/Class``) are passed through unchecked.

    Parameters
    ----------
    schema:
        The schema to read declarations from.  It is never modified.
    """

    def __init__(self, schema: Schema) -> None:
        self._schema = schema
        self._class_names: frozenset[str] = frozenset(schema.class_names())

    @classmethod
    def from_path(cls, path: str | Path) -> "SchemaTypeSource":
        """Load a schema file and wrap it in a ``SchemaTypeSource``."""
        return cls(load_schema(path))

    @property
    def schema(self) -> Schema:
        """The schema this source reads from."""
        return self._schema

    def resolve_kind(self, class_name: str, property_name: str) -> PropertyKind:
        schema_class = self._schema.get_class(class_name)
        if schema_class is None:
            raise ClassNotFoundError(class_name, property_name)
        prop = schema_class.get_property(property_name)
        if prop is None:
            raise PropertyNotFoundError(class_name, property_name)

        try:
            kind = classify_data_type(prop.data_type, known_classes=self._class_names)
        except DataTypeError as exc:
            raise InvalidDataTypeError(class_name, property_name, str(exc)) from exc

        logger.debug("Resolved %s.%s as %r", class_name, property_name, kind)
        return kind

    def __repr__(self) -> str:
        return f"SchemaTypeSource(classes={self._schema.class_names()})"
