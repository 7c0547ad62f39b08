"""End-to-end tests for metatype.

These run schema and query documents from disk through the loaders,
the schema-backed type source and the inspector, including concurrent
use of one inspector from several threads. No network access or child
processes are involved. Run only the unit suite with ``pytest tests/unit/``.
"""
from __future__ import annotations
