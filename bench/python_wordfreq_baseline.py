#!/usr/bin/env python3
"""Python baseline for repeated word-frequency counting with span lookups."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from spanfreq.harness import BENCH_METHODS, load_text, run_benchmark, summarize


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", type=Path)
    parser.add_argument("--text", type=str)
    parser.add_argument("--rounds", type=int, default=5)
    parser.add_argument("--trials", type=int, default=10)
    parser.add_argument("--method", choices=BENCH_METHODS, default="scan")
    parser.add_argument("--ascii", action="store_true")
    parser.add_argument("--accumulate", action="store_true")
    parser.add_argument("--no-alloc", action="store_true")
    parser.add_argument("--top-k", type=int, default=10)
    args = parser.parse_args(argv)

    if args.text is not None:
        source = args.text
    elif args.input is not None:
        source = load_text(args.input)
    else:
        raise SystemExit("either --text or --input is required")

    rounds, table = run_benchmark(
        source,
        rounds=args.rounds,
        trials=args.trials,
        method=args.method,
        ascii_only=args.ascii,
        accumulate=args.accumulate,
        measure_alloc=not args.no_alloc,
    )
    for row in rounds:
        print(json.dumps(row))
    summary = {
        "method": args.method,
        "rounds": len(rounds),
        "total_ms": sum(row["elapsed_ms"] for row in rounds),
    }
    summary.update(summarize(table, args.top_k))
    print(json.dumps(summary))


if __name__ == "__main__":
    main()
