"""Statistical analysis tags that a meta query may request per property.

The tag set is closed.  Each member is explicitly classified as
type-related or not in ``_TYPE_RELEVANCE``; only type-related analyses
are answered by the type inspector, the rest belong to the numeric
aggregation path.
"""
from __future__ import annotations

from enum import Enum


class StatisticalAnalysis(Enum):
    """Analysis kinds a caller can ask for on a single property.

    The member value is the tag as it appears in serialized queries.
    """

    COUNT = "count"
    SUM = "sum"
    MEAN = "mean"
    MAXIMUM = "maximum"
    MINIMUM = "minimum"
    MEDIAN = "median"
    MODE = "mode"
    TYPE = "type"
    POINTING_TO = "pointingTo"
    TOTAL_TRUE = "totalTrue"
    TOTAL_FALSE = "totalFalse"
    PERCENTAGE_TRUE = "percentageTrue"
    PERCENTAGE_FALSE = "percentageFalse"
    TOP_OCCURRENCES = "topOccurrences"

    @property
    def is_type_related(self) -> bool:
        """Return True if the type inspector answers this analysis."""
        return _TYPE_RELEVANCE[self]

    @classmethod
    def from_tag(cls, tag: str) -> "StatisticalAnalysis":
        """Look up a member by its serialized tag.

        Raises
        ------
        ValueError
            If ``tag`` does not name a known analysis.
        """
        try:
            return cls(tag)
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown statistical analysis {tag!r}; expected one of: {known}"
            ) from None


# Every member must appear here; a missing entry surfaces as a KeyError.
_TYPE_RELEVANCE: dict[StatisticalAnalysis, bool] = {
    StatisticalAnalysis.COUNT: False,
    StatisticalAnalysis.SUM: False,
    StatisticalAnalysis.MEAN: False,
    StatisticalAnalysis.MAXIMUM: False,
    StatisticalAnalysis.MINIMUM: False,
    StatisticalAnalysis.MEDIAN: False,
    StatisticalAnalysis.MODE: False,
    StatisticalAnalysis.TYPE: True,
    StatisticalAnalysis.POINTING_TO: True,
    StatisticalAnalysis.TOTAL_TRUE: False,
    StatisticalAnalysis.TOTAL_FALSE: False,
    StatisticalAnalysis.PERCENTAGE_TRUE: False,
    StatisticalAnalysis.PERCENTAGE_FALSE: False,
    StatisticalAnalysis.TOP_OCCURRENCES: False,
}
