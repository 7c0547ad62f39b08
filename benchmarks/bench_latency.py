"""Benchmark: TypeInspector.process latency (p50/p95/mean).

Measures per-call latency of annotating a mixed meta query against a
schema-backed type source.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from metatype.inspector import TypeInspector
from metatype.query import parse_query
from metatype.schema import parse_schema
from metatype.sources import SchemaTypeSource

_WARMUP: int = 100
_ITERATIONS: int = 3_000

_SCHEMA = """
classes:
  - class: City
    properties:
      - name: name
        dataType: [string]
      - name: population
        dataType: [int]
      - name: isCapital
        dataType: [boolean]
      - name: InCountry
        dataType: [Country, WeaviateB/Country]
  - class: Country
    properties:
      - name: name
        dataType: [string]
"""

_QUERY = """
class: City
properties:
  - name: meta
    analyses: [count]
  - name: name
    analyses: [type, count, topOccurrences]
  - name: population
    analyses: [mean, type, count, sum]
  - name: isCapital
    analyses: [totalTrue, percentageTrue]
  - name: InCountry
    analyses: [pointingTo, type, count]
"""


def bench_process_latency(
    iterations: int = _ITERATIONS, warmup: int = _WARMUP
) -> dict[str, object]:
    """Benchmark ``TypeInspector.process`` on a five-property query.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    inspector = TypeInspector(SchemaTypeSource(parse_schema(_SCHEMA)))
    query = parse_query(_QUERY)

    for _ in range(warmup):
        inspector.process(query)

    latencies_ms: list[float] = []
    for _ in range(iterations):
        t0 = time.perf_counter()
        inspector.process(query)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "type_inspector_process_mixed",
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_process_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
