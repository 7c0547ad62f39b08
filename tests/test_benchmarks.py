"""Structural tests for the metatype benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_process_latency")


def test_process_latency_returns_expected_keys() -> None:
    """Verify bench_process_latency returns expected result keys."""
    from bench_latency import bench_process_latency

    result = bench_process_latency(iterations=50, warmup=5)
    assert "operation" in result
    assert "iterations" in result
    assert "p50_ms" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]
