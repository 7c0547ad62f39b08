"""Reading YAML and JSON documents from disk.

JSON is a subset of YAML, so both formats go through ``yaml.safe_load``.
"""
from __future__ import annotations

import json
from pathlib import Path

import yaml


def read_document(path: str | Path, error_type: type[ValueError]) -> object:
    """Read and parse a YAML or JSON document.

    Parameters
    ----------
    path:
        File to read.
    error_type:
        ``ValueError`` subclass raised when the file cannot be parsed.

    Returns
    -------
    object
        The parsed document, usually a ``dict``.

    Raises
    ------
    OSError
        If the file cannot be read.
    ValueError
        An instance of ``error_type`` if the content is not valid YAML.
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse_document(text, error_type, source=str(path))


def parse_document(
    text: str, error_type: type[ValueError], source: str = "<string>"
) -> object:
    """Parse YAML or JSON ``text``, wrapping parser errors in ``error_type``."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise error_type(f"Cannot parse {source}: {exc}") from exc


def dump_document(data: object, output_format: str = "json") -> str:
    """Serialize ``data`` as ``"json"`` or ``"yaml"`` text."""
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)
