"""The ``TypeSource`` interface.

A type source answers a single question: what kind is property ``P`` of
class ``C``?  Implementations may read an in-memory schema, query a
remote database, or sit in front of a cache; the type inspector only
depends on this interface.  Implementations used from several threads
must be safe for concurrent reads.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from metatype.schema.kinds import PropertyKind


class TypeSource(ABC):
    """Resolves the kind of a class property."""

    @abstractmethod
    def resolve_kind(self, class_name: str, property_name: str) -> PropertyKind:
        """Return the kind of ``class_name.property_name``.

        Raises
        ------
        metatype.sources.errors.PropertyResolutionError
            If the class or property is unknown, or its kind cannot be
            determined.
        """
