"""Loading meta queries from plain dicts, YAML or JSON.

Expected shape::

    class: City
    properties:
      - name: InCountry
        analyses: [pointingTo, count]
      - name: population
        analyses: [mean, type]
"""
from __future__ import annotations

from pathlib import Path

from metatype.core.documents import parse_document, read_document
from metatype.query.analysis import StatisticalAnalysis
from metatype.query.params import MetaProperty, MetaQuery


class QueryFormatError(ValueError):
    """Raised when a query document does not have the expected shape."""


def query_from_dict(data: object) -> MetaQuery:
    """Build a ``MetaQuery`` from its plain-dict form.

    Raises
    ------
    QueryFormatError
        If required keys are missing, values have the wrong type, or an
        analysis tag is unknown.
    """
    if not isinstance(data, dict):
        raise QueryFormatError(
            f"Query must be a mapping, got {type(data).__name__}"
        )
    class_name = data.get("class")
    if not isinstance(class_name, str):
        raise QueryFormatError("Query is missing a string 'class' entry")

    raw_properties = data.get("properties", [])
    if raw_properties is None:
        raw_properties = []
    if not isinstance(raw_properties, list):
        raise QueryFormatError("'properties' must be a list")

    return MetaQuery(
        class_name=class_name,
        properties=tuple(_property_from_dict(p, i) for i, p in enumerate(raw_properties)),
    )


def _property_from_dict(data: object, index: int) -> MetaProperty:
    if not isinstance(data, dict):
        raise QueryFormatError(f"Property #{index} must be a mapping")
    name = data.get("name")
    if not isinstance(name, str):
        raise QueryFormatError(f"Property #{index} is missing a string 'name'")
    tags = data.get("analyses", [])
    if tags is None:
        tags = []
    if not isinstance(tags, list):
        raise QueryFormatError(f"'analyses' of property {name!r} must be a list")

    analyses: list[StatisticalAnalysis] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise QueryFormatError(
                f"Analysis {tag!r} of property {name!r} must be a string"
            )
        try:
            analyses.append(StatisticalAnalysis.from_tag(tag))
        except ValueError as exc:
            raise QueryFormatError(f"Property {name!r}: {exc}") from None
    return MetaProperty(name=name, analyses=tuple(analyses))


def query_to_dict(query: MetaQuery) -> dict[str, object]:
    """Serialize a ``MetaQuery`` back to its plain-dict form."""
    return {
        "class": query.class_name,
        "properties": [
            {"name": p.name, "analyses": [a.value for a in p.analyses]}
            for p in query.properties
        ],
    }


def parse_query(text: str) -> MetaQuery:
    """Parse a query from YAML or JSON text."""
    return query_from_dict(parse_document(text, QueryFormatError))


def load_query(path: str | Path) -> MetaQuery:
    """Read a query document from ``path``."""
    return query_from_dict(read_document(path, QueryFormatError))
