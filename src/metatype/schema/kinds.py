"""Property kinds and data-type classification.

A schema property declares its data type as a list of strings.  Either
the list holds a single primitive token (``["int"]``), or it holds one
or more class names the property can reference
(``["Country", "WeaviateB/Country"]``).  ``classify_data_type`` turns
such a list into a ``PropertyKind``, the tagged union consumed by the
type inspector.
"""
from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Union

#: Primitive data-type tokens a property may declare.
PRIMITIVE_TYPES: frozenset[str] = frozenset(
    {
        "string",
        "text",
        "int",
        "number",
        "boolean",
        "date",
        "geoCoordinates",
        "phoneNumber",
    }
)

#: Type token reported for every reference ("cross-reference") property.
CROSS_REF_TYPE: str = "cref"


class DataTypeError(ValueError):
    """Raised when a declared data type cannot be classified."""


@dataclass(frozen=True, slots=True)
class PrimitiveKind:
    """A property holding a primitive value.

    Parameters
    ----------
    data_type:
        The primitive token, e.g. ``"int"`` or ``"string"``.
    """

    data_type: str


@dataclass(frozen=True, slots=True)
class ReferenceKind:
    """A property referencing instances of other classes.

    Parameters
    ----------
    targets:
        Class names the property may point to, in declaration order.
        Names of the form ``peer/Class`` refer to classes on a remote
        peer.
    """

    targets: tuple[str, ...]


PropertyKind = Union[PrimitiveKind, ReferenceKind]


def is_primitive_type(token: str) -> bool:
    """Return True if ``token`` is one of ``PRIMITIVE_TYPES``."""
    return token in PRIMITIVE_TYPES


def is_network_reference(name: str) -> bool:
    """Return True if ``name`` has the ``peer/Class`` form."""
    peer, sep, class_name = name.partition("/")
    return bool(sep) and bool(peer) and bool(class_name) and "/" not in class_name


def classify_data_type(
    data_type: Sequence[str],
    known_classes: Collection[str] | None = None,
) -> PropertyKind:
    """Classify a declared data type as primitive or reference.

    Parameters
    ----------
    data_type:
        The declared data type entries.
    known_classes:
        Class names defined locally.  When given, every local (non
        network) reference target must be a member.

    Returns
    -------
    PropertyKind
        ``PrimitiveKind`` for a single primitive token, ``ReferenceKind``
        for a list of class names.

    Raises
    ------
    DataTypeError
        If the list is empty, mixes primitive and reference entries,
        holds more than one primitive token, or references an unknown
        local class.
    """
    entries = list(data_type)
    if not entries:
        raise DataTypeError("Data type must not be empty")

    primitives = [e for e in entries if is_primitive_type(e)]
    if primitives:
        if len(entries) > 1:
            raise DataTypeError(
                f"Data type {entries!r} must be a single primitive type "
                "or a list of classes, not a mix"
            )
        return PrimitiveKind(data_type=entries[0])

    if known_classes is not None:
        for target in entries:
            if not is_network_reference(target) and target not in known_classes:
                raise DataTypeError(f"Data type {target!r} is not a known class")
    return ReferenceKind(targets=tuple(entries))
