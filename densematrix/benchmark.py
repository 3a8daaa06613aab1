"""Latency benchmark comparing the matrix kernel backends."""

from __future__ import annotations

import json
import logging
import math
import os
import statistics
import time
from typing import Callable, Dict, List, Mapping, Sequence

import numpy as real_numpy

from . import backends
from .matrix import Matrix

LOGGER = logging.getLogger(__name__)

OPERATIONS: Dict[str, Callable[[Matrix, Matrix], Matrix]] = {
    "add": lambda a, b: a + b,
    "mul_scalar": lambda a, _b: a.mul_scalar(1.5),
    "transpose": lambda a, _b: a.transpose(),
    "multiply": lambda a, b: a * b,
}


def _percentile(values: Sequence[float], pct: float) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    k = (len(ordered) - 1) * pct / 100.0
    f = math.floor(k)
    c = math.ceil(k)
    if f == c:
        return ordered[int(k)]
    return ordered[f] + (ordered[c] - ordered[f]) * (k - f)


def _random_matrix(rng: real_numpy.random.Generator, size: int) -> Matrix:
    return Matrix(rng.standard_normal((size, size)).tolist())


def _time_operation(op: Callable[[Matrix, Matrix], Matrix], a: Matrix, b: Matrix, runs: int) -> List[float]:
    latencies: List[float] = []
    for _ in range(max(1, runs)):
        start = time.perf_counter()
        op(a, b)
        latencies.append((time.perf_counter() - start) * 1000.0)
    return latencies


def _summarise(latencies: Sequence[float]) -> Dict[str, float]:
    return {
        "samples": len(latencies),
        "mean": float(statistics.mean(latencies)) if latencies else 0.0,
        "p95": _percentile(latencies, 95.0),
        "max": max(latencies) if latencies else 0.0,
    }


def _available_backends() -> List[str]:
    names = ["python"]
    previous = backends.active_backend()
    previous_strict = backends.is_strict()
    if backends.configure(backend="numpy", strict=False) == "numpy":
        names.append("numpy")
    backends.configure(backend=previous, strict=previous_strict)
    return names


def run_benchmark(
    *,
    sizes: Sequence[int] = (8, 32, 64),
    runs: int = 5,
    seed: int = 0,
    output_dir: str | None = None,
) -> Dict[str, object]:
    """Time every operator under each available backend.

    Returns a metrics dictionary and, when ``output_dir`` is given, writes
    ``benchmark_report.json`` and ``benchmark_report.md`` there.
    """

    rng = real_numpy.random.default_rng(seed)
    names = _available_backends()
    previous = backends.active_backend()
    previous_strict = backends.is_strict()
    results: Dict[str, Dict[str, Dict[str, Dict[str, float]]]] = {name: {} for name in names}
    agreement: Dict[str, float] = {}

    try:
        for size in sizes:
            a = _random_matrix(rng, size)
            b = _random_matrix(rng, size)
            products: Dict[str, Matrix] = {}
            for name in names:
                backends.configure(backend=name, strict=False)
                per_op: Dict[str, Dict[str, float]] = {}
                for op_name, op in OPERATIONS.items():
                    per_op[op_name] = _summarise(_time_operation(op, a, b, runs))
                results[name][str(size)] = per_op
                products[name] = a * b
                LOGGER.debug("Benchmarked %s backend at size %d", name, size)
            if len(products) > 1:
                reference = real_numpy.asarray(products["python"].to_list())
                linf = 0.0
                for name, product in products.items():
                    diff = real_numpy.abs(reference - real_numpy.asarray(product.to_list()))
                    linf = max(linf, float(diff.max()))
                agreement[str(size)] = linf
    finally:
        backends.configure(backend=previous, strict=previous_strict)

    metrics: Dict[str, object] = {
        "backends": names,
        "sizes": [int(size) for size in sizes],
        "runs": int(runs),
        "latency_ms": results,
        "product_linf": agreement,
    }

    if output_dir is not None:
        os.makedirs(output_dir, exist_ok=True)
        json_path = os.path.join(output_dir, "benchmark_report.json")
        with open(json_path, "w", encoding="utf-8") as fh:
            json.dump(metrics, fh, indent=2)
        _write_markdown_report(metrics, os.path.join(output_dir, "benchmark_report.md"))
        LOGGER.info("Wrote benchmark report to %s", output_dir)

    return metrics


def _write_markdown_report(metrics: Mapping[str, object], path: str) -> None:
    latency = metrics.get("latency_ms", {})
    agreement = metrics.get("product_linf", {})

    lines = ["# densematrix Benchmark", ""]
    lines.append("## Latency (ms)")
    lines.append("| Backend | Size | Operation | Mean | p95 | Max |")
    lines.append("| --- | --- | --- | --- | --- | --- |")
    if isinstance(latency, Mapping):
        for backend, per_size in latency.items():
            for size, per_op in per_size.items():
                for op_name, info in per_op.items():
                    lines.append(
                        "| {backend} | {size} | {op} | {mean:.3f} | {p95:.3f} | {max:.3f} |".format(
                            backend=backend,
                            size=size,
                            op=op_name,
                            mean=info.get("mean", 0.0),
                            p95=info.get("p95", 0.0),
                            max=info.get("max", 0.0),
                        )
                    )
    lines.append("")

    if isinstance(agreement, Mapping) and agreement:
        lines.append("## Backend agreement (product L_inf)")
        for size, linf in agreement.items():
            lines.append(f"- {size}×{size}: {linf:.3e}")
        lines.append("")

    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines))


__all__ = ["OPERATIONS", "run_benchmark"]
