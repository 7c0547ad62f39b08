"""metatype — type annotations for aggregate ("meta") queries over a schema.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import metatype

    schema = metatype.load_schema("schema.yaml")
    query = metatype.load_query("query.yaml")

    annotations = metatype.inspect_types(query, schema)
    # {"InCountry": {"pointingTo": ["Country", "WeaviateB/Country"]},
    #  "population": {"type": "int"}}

    metatype.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from metatype.query.params import MetaQuery
    from metatype.schema.model import Schema
    from metatype.sources.base import TypeSource


def load_schema(path: str | Path) -> "Schema":
    """Load a schema from a YAML or JSON file.

    Raises
    ------
    metatype.schema.SchemaFormatError
        If the document is malformed.
    """
    from metatype.schema.loader import load_schema as _load_schema

    return _load_schema(path)


def load_query(path: str | Path) -> "MetaQuery":
    """Load a meta query from a YAML or JSON file.

    Raises
    ------
    metatype.query.QueryFormatError
        If the document is malformed or names an unknown analysis.
    """
    from metatype.query.loader import load_query as _load_query

    return _load_query(path)


def inspect_types(
    query: "MetaQuery", source: Union["TypeSource", "Schema"]
) -> dict[str, dict[str, Any]]:
    """Compute the type annotations requested by ``query``.

    Parameters
    ----------
    query:
        The meta query to annotate.
    source:
        A ``TypeSource``, or a ``Schema`` which is wrapped in a
        ``SchemaTypeSource``.

    Returns
    -------
    dict[str, dict[str, Any]]
        Property name to ``{"type": ..., "pointingTo": [...]}`` mapping.

    Raises
    ------
    metatype.sources.PropertyResolutionError
        If a property's kind cannot be resolved.
    """
    from metatype.inspector.inspector import inspect_types as _inspect_types
    from metatype.schema.model import Schema
    from metatype.sources.schema_source import SchemaTypeSource

    if isinstance(source, Schema):
        source = SchemaTypeSource(source)
    return _inspect_types(query, source)


__all__ = [
    "__version__",
    "load_schema",
    "load_query",
    "inspect_types",
]
