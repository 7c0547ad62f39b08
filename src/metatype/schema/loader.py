"""Loading a ``Schema`` from plain dicts, YAML or JSON.

Expected shape::

    classes:
      - class: City
        properties:
          - name: population
            dataType: [int]
          - name: InCountry
            dataType: [Country, WeaviateB/Country]
      - class: Country

Only the structure is checked here.  Data types are classified lazily
when a property is resolved.
"""
from __future__ import annotations

import logging
from pathlib import Path

from metatype.core.documents import parse_document, read_document
from metatype.schema.model import Schema, SchemaClass, SchemaProperty

logger = logging.getLogger(__name__)


class SchemaFormatError(ValueError):
    """Raised when a schema document does not have the expected shape."""


def schema_from_dict(data: object) -> Schema:
    """Build a ``Schema`` from its plain-dict form.

    Raises
    ------
    SchemaFormatError
        On a malformed document, a duplicate class name, or a duplicate
        property name within a class.
    """
    if not isinstance(data, dict):
        raise SchemaFormatError(f"Schema must be a mapping, got {type(data).__name__}")
    raw_classes = data.get("classes", [])
    if raw_classes is None:
        raw_classes = []
    if not isinstance(raw_classes, list):
        raise SchemaFormatError("'classes' must be a list")

    classes: list[SchemaClass] = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_classes):
        cls = _class_from_dict(raw, index)
        if cls.name in seen:
            raise SchemaFormatError(f"Duplicate class name {cls.name!r}")
        seen.add(cls.name)
        classes.append(cls)
    return Schema(classes=tuple(classes))


def _class_from_dict(data: object, index: int) -> SchemaClass:
    if not isinstance(data, dict):
        raise SchemaFormatError(f"Class #{index} must be a mapping")
    name = data.get("class")
    if not isinstance(name, str) or not name:
        raise SchemaFormatError(f"Class #{index} is missing a string 'class' entry")
    raw_properties = data.get("properties", [])
    if raw_properties is None:
        raw_properties = []
    if not isinstance(raw_properties, list):
        raise SchemaFormatError(f"'properties' of class {name!r} must be a list")

    properties: list[SchemaProperty] = []
    seen: set[str] = set()
    for raw in raw_properties:
        prop = _property_from_dict(raw, name)
        if prop.name in seen:
            raise SchemaFormatError(
                f"Duplicate property name {prop.name!r} in class {name!r}"
            )
        seen.add(prop.name)
        properties.append(prop)
    return SchemaClass(name=name, properties=tuple(properties))


def _property_from_dict(data: object, class_name: str) -> SchemaProperty:
    if not isinstance(data, dict):
        raise SchemaFormatError(f"Properties of class {class_name!r} must be mappings")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaFormatError(f"A property of class {class_name!r} has no string 'name'")
    data_type = data.get("dataType")
    if not isinstance(data_type, list) or not all(isinstance(t, str) for t in data_type):
        raise SchemaFormatError(
            f"'dataType' of {class_name}.{name} must be a list of strings"
        )
    return SchemaProperty(name=name, data_type=tuple(data_type))


def schema_to_dict(schema: Schema) -> dict[str, object]:
    """Serialize a ``Schema`` back to its plain-dict form."""
    return {
        "classes": [
            {
                "class": cls.name,
                "properties": [
                    {"name": p.name, "dataType": list(p.data_type)}
                    for p in cls.properties
                ],
            }
            for cls in schema.classes
        ]
    }


def parse_schema(text: str) -> Schema:
    """Parse a schema from YAML or JSON text."""
    return schema_from_dict(parse_document(text, SchemaFormatError))


def load_schema(path: str | Path) -> Schema:
    """Read a schema document from ``path``."""
    schema = schema_from_dict(read_document(path, SchemaFormatError))
    logger.debug("Loaded schema with %d class(es) from %s", len(schema), path)
    return schema
