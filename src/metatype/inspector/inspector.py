"""Type inspector: type annotations for meta queries.

A meta query can ask two type-related questions about a property: what
its type is (``type``) and, for reference properties, which classes it
may point to (``pointingTo``).  The ``TypeInspector`` answers only
those; numeric analyses such as ``count`` or ``mean`` requested on the
same property are ignored here and computed elsewhere.

The result maps property names to at most two keys::

    {
        "InCountry": {"type": "cref", "pointingTo": ["Country", "WeaviateB/Country"]},
        "population": {"type": "int"},
    }

Properties for which nothing type-related was requested, or for which
the request has no meaningful answer, are left out.

Usage
-----
::

    from metatype.inspector import TypeInspector
    from metatype.sources import SchemaTypeSource

    inspector = TypeInspector(SchemaTypeSource.from_path("schema.yaml"))
    annotations = inspector.process(query)
"""
from __future__ import annotations

import logging
from typing import Any

from metatype.query.analysis import StatisticalAnalysis
from metatype.query.params import MetaProperty, MetaQuery
from metatype.schema.kinds import CROSS_REF_TYPE, PrimitiveKind, PropertyKind, ReferenceKind
from metatype.sources.base import TypeSource

logger = logging.getLogger(__name__)

TYPE_KEY: str = "type"
POINTING_TO_KEY: str = "pointingTo"

Annotations = dict[str, dict[str, Any]]


class TypeInspector:
    """Builds type annotations for the properties of a meta query.

    The inspector holds no state besides its source, so one instance
    may serve concurrent calls if the source allows concurrent reads.

    Parameters
    ----------
    source:
        Resolves each property's kind.  Consulted at most once per
        property, and only for properties with a type-related request.
    """

    def __init__(self, source: TypeSource) -> None:
        self._source = source

    def process(self, query: MetaQuery) -> Annotations:
        """Return the type annotations requested by ``query``.

        Parameters
        ----------
        query:
            The meta query.  It is not modified.

        Returns
        -------
        Annotations
            Property name to annotation mapping; empty if no property
            produced an entry.

        Raises
        ------
        metatype.sources.errors.PropertyResolutionError
            If the source cannot resolve a property.  Processing stops
            at the first failure.
        """
        result: Annotations = {}
        for prop in query.properties:
            if prop.is_meta:
                logger.debug("Skipping reserved property %r", prop.name)
                continue
            if not prop.wants_type_info:
                logger.debug(
                    "Skipping %s.%s: no type-related analysis requested",
                    query.class_name,
                    prop.name,
                )
                continue

            kind = self._source.resolve_kind(query.class_name, prop.name)
            annotation = self._annotate(query.class_name, prop, kind)
            if annotation:
                result[prop.name] = annotation
        return result

    def _annotate(
        self, class_name: str, prop: MetaProperty, kind: PropertyKind
    ) -> dict[str, Any]:
        wants_type = prop.requests(StatisticalAnalysis.TYPE)
        wants_targets = prop.requests(StatisticalAnalysis.POINTING_TO)
        annotation: dict[str, Any] = {}

        if isinstance(kind, ReferenceKind):
            if wants_targets:
                annotation[POINTING_TO_KEY] = list(kind.targets)
            if wants_type:
                annotation[TYPE_KEY] = CROSS_REF_TYPE
        elif isinstance(kind, PrimitiveKind):
            if wants_targets:
                # TODO: report this as an unsupported combination once
                # callers can receive diagnostics alongside annotations.
                logger.debug(
                    "Ignoring %r on primitive property %s.%s",
                    StatisticalAnalysis.POINTING_TO.value,
                    class_name,
                    prop.name,
                )
            if wants_type:
                annotation[TYPE_KEY] = kind.data_type
        else:
            raise TypeError(f"Unknown property kind: {type(kind)}")
        return annotation


def inspect_types(query: MetaQuery, source: TypeSource) -> Annotations:
    """Convenience function: run a ``TypeInspector`` over ``query``.

    Parameters
    ----------
    query:
        The meta query to annotate.
    source:
        Resolves property kinds.

    Returns
    -------
    Annotations
        See ``TypeInspector.process``.
    """
    return TypeInspector(source).process(query)
