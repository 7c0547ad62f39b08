"""End-to-end tests: schema file -> query file -> annotations."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import metatype
from metatype.inspector import TypeInspector
from metatype.query import MetaProperty, MetaQuery, StatisticalAnalysis
from metatype.sources import SchemaTypeSource

A = StatisticalAnalysis

_EXPECTED = {
    "InCountry": {"pointingTo": ["Country", "WeaviateB/Country"]},
    "population": {"type": "int"},
}


def _mixed_query() -> MetaQuery:
    return MetaQuery(
        class_name="City",
        properties=(
            MetaProperty(name="InCountry", analyses=(A.POINTING_TO, A.COUNT)),
            MetaProperty(name="population", analyses=(A.MEAN, A.TYPE, A.COUNT)),
        ),
    )


def test_files_to_annotations(city_schema_file: Path, tmp_path: Path) -> None:
    query_path = tmp_path / "query.json"
    query_path.write_text(
        '{"class": "City", "properties": ['
        '{"name": "InCountry", "analyses": ["pointingTo", "count"]},'
        '{"name": "population", "analyses": ["mean", "type", "count"]}]}',
        encoding="utf-8",
    )
    schema = metatype.load_schema(city_schema_file)
    query = metatype.load_query(query_path)
    assert metatype.inspect_types(query, schema) == _EXPECTED


def test_shared_inspector_across_threads(city_schema_file: Path) -> None:
    inspector = TypeInspector(SchemaTypeSource.from_path(city_schema_file))
    query = _mixed_query()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: inspector.process(query), range(64)))

    assert all(r == _EXPECTED for r in results)
    # Each call owns its output.
    assert len({id(r) for r in results}) == len(results)
