#!/usr/bin/env python3
"""Time the densematrix operators under each available kernel backend."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence


REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from densematrix.benchmark import run_benchmark


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory where the JSON and Markdown reports will be written.",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[8, 32, 64],
        help="Square matrix sizes to benchmark.",
    )
    parser.add_argument("--runs", type=int, default=5, help="Timed repetitions per operation.")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for the input matrices.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    metrics = run_benchmark(
        sizes=args.sizes,
        runs=args.runs,
        seed=args.seed,
        output_dir=str(args.output) if args.output is not None else None,
    )
    print(json.dumps({k: v for k, v in metrics.items() if k != "latency_ms"}, indent=2))


if __name__ == "__main__":
    main()
