"""Meta query module.

Exports the query parameter types, the ``StatisticalAnalysis`` tag set,
and the query loader.
"""
from __future__ import annotations

from metatype.query.analysis import StatisticalAnalysis
from metatype.query.loader import (
    QueryFormatError,
    load_query,
    parse_query,
    query_from_dict,
    query_to_dict,
)
from metatype.query.params import META_PROPERTY, MetaProperty, MetaQuery

__all__ = [
    "META_PROPERTY",
    "MetaProperty",
    "MetaQuery",
    "StatisticalAnalysis",
    "QueryFormatError",
    "load_query",
    "parse_query",
    "query_from_dict",
    "query_to_dict",
]
