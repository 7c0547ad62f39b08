"""Shared test fixtures for metatype.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from metatype.schema.model import Schema, SchemaClass, SchemaProperty

CITY_SCHEMA_YAML = """\
classes:
  - class: City
    properties:
      - name: population
        dataType: [int]
      - name: name
        dataType: [string]
      - name: InCountry
        dataType: [Country, WeaviateB/Country]
  - class: Country
    properties:
      - name: name
        dataType: [string]
"""


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "metatype"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def city_schema() -> Schema:
    return Schema(
        classes=(
            SchemaClass(
                name="City",
                properties=(
                    SchemaProperty(name="population", data_type=("int",)),
                    SchemaProperty(name="name", data_type=("string",)),
                    SchemaProperty(name="InCountry", data_type=("Country", "WeaviateB/Country")),
                ),
            ),
            SchemaClass(
                name="Country",
                properties=(SchemaProperty(name="name", data_type=("string",)),),
            ),
        )
    )


@pytest.fixture()
def city_schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.yaml"
    path.write_text(CITY_SCHEMA_YAML, encoding="utf-8")
    return path
