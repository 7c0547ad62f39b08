"""Unit tests for metatype.cli.main — inspect, describe and version commands."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from metatype.cli.main import cli

QUERY_YAML = """\
class: City
properties:
  - name: InCountry
    analyses: [pointingTo, count]
  - name: population
    analyses: [mean, type, count]
  - name: meta
    analyses: [count]
"""


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def query_file(tmp_path: Path) -> Path:
    path = tmp_path / "query.yaml"
    path.write_text(QUERY_YAML, encoding="utf-8")
    return path


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# ===========================================================================
# inspect
# ===========================================================================


class TestInspectCommand:
    def test_json_output(self, city_schema_file: Path, query_file: Path) -> None:
        result = _make_runner().invoke(cli, ["inspect", str(city_schema_file), str(query_file)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "InCountry": {"pointingTo": ["Country", "WeaviateB/Country"]},
            "population": {"type": "int"},
        }

    def test_yaml_output(self, city_schema_file: Path, query_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["inspect", str(city_schema_file), str(query_file), "--format", "yaml"]
        )
        assert result.exit_code == 0, result.output
        assert yaml.safe_load(result.output)["population"] == {"type": "int"}

    def test_output_file(
        self, city_schema_file: Path, query_file: Path, tmp_path: Path
    ) -> None:
        out = tmp_path / "out.json"
        result = _make_runner().invoke(
            cli, ["inspect", str(city_schema_file), str(query_file), "-o", str(out)]
        )
        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8"))["InCountry"] == {
            "pointingTo": ["Country", "WeaviateB/Country"]
        }

    def test_show_query_goes_to_stderr(self, city_schema_file: Path, query_file: Path) -> None:
        result = _make_runner().invoke(
            cli,
            ["inspect", str(city_schema_file), str(query_file), "--format", "yaml", "--show-query"],
        )
        assert result.exit_code == 0, result.output
        assert "class: City" in result.stderr
        assert "pointingTo" in result.stderr
        # stdout carries only the annotations
        assert yaml.safe_load(result.stdout) == {
            "InCountry": {"pointingTo": ["Country", "WeaviateB/Country"]},
            "population": {"type": "int"},
        }

    def test_query_not_echoed_by_default(self, city_schema_file: Path, query_file: Path) -> None:
        result = _make_runner().invoke(cli, ["inspect", str(city_schema_file), str(query_file)])
        assert result.exit_code == 0
        assert result.stderr == ""

    def test_empty_result(self, city_schema_file: Path, tmp_path: Path) -> None:
        query = _write(tmp_path, "q.yaml", "class: City\nproperties: []\n")
        result = _make_runner().invoke(cli, ["inspect", str(city_schema_file), str(query)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {}

    def test_unknown_property_fails(self, city_schema_file: Path, tmp_path: Path) -> None:
        query = _write(
            tmp_path,
            "q.yaml",
            "class: City\nproperties:\n  - name: area\n    analyses: [type]\n",
        )
        result = _make_runner().invoke(cli, ["inspect", str(city_schema_file), str(query)])
        assert result.exit_code == 1

    def test_unknown_analysis_fails(self, city_schema_file: Path, tmp_path: Path) -> None:
        query = _write(
            tmp_path,
            "q.yaml",
            "class: City\nproperties:\n  - name: population\n    analyses: [variance]\n",
        )
        result = _make_runner().invoke(cli, ["inspect", str(city_schema_file), str(query)])
        assert result.exit_code == 1

    def test_missing_schema_file(self, query_file: Path, tmp_path: Path) -> None:
        result = _make_runner().invoke(
            cli, ["inspect", str(tmp_path / "absent.yaml"), str(query_file)]
        )
        assert result.exit_code == 1

    def test_malformed_schema(self, query_file: Path, tmp_path: Path) -> None:
        schema = _write(tmp_path, "s.yaml", "classes: {}\n")
        result = _make_runner().invoke(cli, ["inspect", str(schema), str(query_file)])
        assert result.exit_code == 1
        assert "Schema error" in result.stderr


# ===========================================================================
# describe
# ===========================================================================


class TestDescribeCommand:
    def test_lists_properties(self, city_schema_file: Path) -> None:
        result = _make_runner().invoke(cli, ["describe", str(city_schema_file)])
        assert result.exit_code == 0, result.output
        assert "population" in result.output
        assert "cref" in result.output

    def test_single_class(self, city_schema_file: Path) -> None:
        result = _make_runner().invoke(cli, ["describe", str(city_schema_file), "Country"])
        assert result.exit_code == 0
        assert "InCountry" not in result.output

    def test_unknown_class(self, city_schema_file: Path) -> None:
        result = _make_runner().invoke(cli, ["describe", str(city_schema_file), "Village"])
        assert result.exit_code == 1

    def test_invalid_data_type_fails(self, tmp_path: Path) -> None:
        schema = _write(
            tmp_path,
            "s.yaml",
            "classes:\n  - class: City\n    properties:\n"
            "      - name: in\n        dataType: [Region]\n",
        )
        result = _make_runner().invoke(cli, ["describe", str(schema)])
        assert result.exit_code == 1


# ===========================================================================
# version
# ===========================================================================


class TestVersionCommand:
    def test_version(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output

    def test_verbose_enables_debug_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        result = _make_runner().invoke(cli, ["-v", "version"])
        assert result.exit_code == 0
        assert calls and calls[0]["level"] == logging.DEBUG
