"""In-memory schema model.

A ``Schema`` is an immutable collection of classes, each with its
declared properties.  It only stores declarations; interpretation of a
property's data type is left to ``metatype.schema.kinds``.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SchemaProperty:
    """A property declaration.

    Parameters
    ----------
    name:
        Property name, unique within its class.
    data_type:
        Declared data type entries, e.g. ``("int",)`` or
        ``("Country", "WeaviateB/Country")``.
    """

    name: str
    data_type: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SchemaClass:
    """A class declaration with its properties."""

    name: str
    properties: tuple[SchemaProperty, ...] = field(default=())

    def get_property(self, name: str) -> SchemaProperty | None:
        """Return the property called ``name``, or ``None``."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]


@dataclass(frozen=True, slots=True)
class Schema:
    """The set of classes known to a database."""

    classes: tuple[SchemaClass, ...] = field(default=())

    def get_class(self, name: str) -> SchemaClass | None:
        """Return the class called ``name``, or ``None``."""
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None

    def class_names(self) -> list[str]:
        """Return class names in declaration order."""
        return [c.name for c in self.classes]

    def __len__(self) -> int:
        return len(self.classes)
