"""Meta query parameters.

A ``MetaQuery`` names the class being aggregated over and lists the
properties the caller is interested in, each with the statistical
analyses requested for it.  Both types are frozen dataclasses so a query
can be shared between threads and is never mutated by its consumers.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from metatype.query.analysis import StatisticalAnalysis

#: Reserved property name for class-level meta information.  It is not a
#: schema property and is never resolved against a type source.
META_PROPERTY: str = "meta"


@dataclass(frozen=True, slots=True)
class MetaProperty:
    """A single property request within a meta query.

    Parameters
    ----------
    name:
        The property name as declared on the class.
    analyses:
        Requested analyses.  Order is irrelevant and duplicates are
        allowed; consumers decide per kind, not per occurrence.
    """

    name: str
    analyses: tuple[StatisticalAnalysis, ...] = field(default=())

    def requests(self, analysis: StatisticalAnalysis) -> bool:
        """Return True if ``analysis`` was requested at least once."""
        return analysis in self.analyses

    @property
    def wants_type_info(self) -> bool:
        """Return True if any requested analysis is type-related."""
        return any(a.is_type_related for a in self.analyses)

    @property
    def is_meta(self) -> bool:
        """Return True for the reserved class-level ``meta`` property."""
        return self.name == META_PROPERTY


@dataclass(frozen=True, slots=True)
class MetaQuery:
    """Parameters of an aggregate ("meta") query over one class.

    Parameters
    ----------
    class_name:
        Name of the class whose properties are inspected.
    properties:
        Property requests, in the order the caller supplied them.
    """

    class_name: str
    properties: tuple[MetaProperty, ...] = field(default=())

    def property_names(self) -> list[str]:
        """Return the requested property names in input order."""
        return [p.name for p in self.properties]
