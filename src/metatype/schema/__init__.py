"""Schema module.

Exports the schema model, its loader, and the property-kind types with
the data-type classifier.
"""
from __future__ import annotations

from metatype.schema.kinds import (
    CROSS_REF_TYPE,
    PRIMITIVE_TYPES,
    DataTypeError,
    PrimitiveKind,
    PropertyKind,
    ReferenceKind,
    classify_data_type,
    is_network_reference,
    is_primitive_type,
)
from metatype.schema.loader import (
    SchemaFormatError,
    load_schema,
    parse_schema,
    schema_from_dict,
    schema_to_dict,
)
from metatype.schema.model import Schema, SchemaClass, SchemaProperty

__all__ = [
    # Model
    "Schema",
    "SchemaClass",
    "SchemaProperty",
    # Kinds
    "CROSS_REF_TYPE",
    "PRIMITIVE_TYPES",
    "DataTypeError",
    "PrimitiveKind",
    "PropertyKind",
    "ReferenceKind",
    "classify_data_type",
    "is_network_reference",
    "is_primitive_type",
    # Loader
    "SchemaFormatError",
    "load_schema",
    "parse_schema",
    "schema_from_dict",
    "schema_to_dict",
]
