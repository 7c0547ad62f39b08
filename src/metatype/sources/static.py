"""Type source backed by a fixed table of kinds.

Useful for tests and for callers that already know their property
kinds and only need the inspector's formatting.
"""
from __future__ import annotations

from collections.abc import Mapping

from metatype.schema.kinds import PropertyKind
from metatype.sources.base import TypeSource
from metatype.sources.errors import ClassNotFoundError, PropertyNotFoundError


class StaticTypeSource(TypeSource):
    """Resolve kinds from a ``{class: {property: kind}}`` mapping."""

    def __init__(self, kinds: Mapping[str, Mapping[str, PropertyKind]]) -> None:
        self._kinds = {cls: dict(props) for cls, props in kinds.items()}

    def resolve_kind(self, class_name: str, property_name: str) -> PropertyKind:
        try:
            properties = self._kinds[class_name]
        except KeyError:
            raise ClassNotFoundError(class_name, property_name) from None
        try:
            return properties[property_name]
        except KeyError:
            raise PropertyNotFoundError(class_name, property_name) from None
