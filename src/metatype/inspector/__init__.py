"""Type inspector module.

Exports the ``TypeInspector`` class and the ``inspect_types``
convenience function.
"""
from __future__ import annotations

from metatype.inspector.inspector import (
    POINTING_TO_KEY,
    TYPE_KEY,
    Annotations,
    TypeInspector,
    inspect_types,
)

__all__ = [
    "TypeInspector",
    "inspect_types",
    "Annotations",
    "TYPE_KEY",
    "POINTING_TO_KEY",
]
