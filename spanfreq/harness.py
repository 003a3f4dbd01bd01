"""Bounded trial loop for word counting: wall-clock and traced allocation per round."""

from __future__ import annotations

import time
import tracemalloc
from pathlib import Path
from typing import Any

from nltk.probability import FreqDist

from .counter import METHODS, count_copying, count_into
from .table import FrequencyTable

BENCH_METHODS = METHODS + ("copy",)


def load_text(path: Path | str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _run_trials(text: str, trials: int, method: str, ascii_only: bool, table: FrequencyTable | None):
    if method == "copy":
        counts = None
        for _ in range(trials):
            counts = count_copying(text, ascii_only=ascii_only)
            if table is not None:
                table.update(counts)
        return counts if table is None else table
    if table is not None:
        for _ in range(trials):
            count_into(table, text, ascii_only=ascii_only, method=method)
        return table
    reused = FrequencyTable()
    for _ in range(trials):
        reused.clear()
        count_into(reused, text, ascii_only=ascii_only, method=method)
    return reused


def _traced_peak(text: str, trials: int, method: str, ascii_only: bool, table: FrequencyTable | None) -> int:
    tracing = tracemalloc.is_tracing()
    if not tracing:
        tracemalloc.start()
    try:
        tracemalloc.reset_peak()
        baseline, _ = tracemalloc.get_traced_memory()
        _run_trials(text, trials, method, ascii_only, table)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not tracing:
            tracemalloc.stop()
    return max(0, peak - baseline)


def run_round(
    text: str,
    trials: int,
    *,
    method: str = "scan",
    ascii_only: bool = False,
    table: FrequencyTable | None = None,
    measure_alloc: bool = True,
) -> tuple[dict[str, Any], Any]:
    """Time ``trials`` counting passes over ``text``; return ``(stats, counts)``.

    Without ``table`` each trial counts into the same cleared table. With a
    seeded ``table`` counts accumulate across trials (and across rounds, if
    the caller passes it again). Allocation is measured on a second, traced
    pass so tracing does not inflate ``elapsed_ms``.
    """
    if trials <= 0:
        raise ValueError("trials must be positive")
    if method not in BENCH_METHODS:
        raise ValueError(f"unknown method: {method!r}")

    before_total = table.total() if table is not None else 0
    before_keys = table.key_allocations if table is not None else 0
    started = time.perf_counter()
    result = _run_trials(text, trials, method, ascii_only, table)
    elapsed = time.perf_counter() - started

    alloc_bytes = None
    if measure_alloc:
        probe = None
        if table is not None:
            # warm copy; the caller's table is left untouched
            probe = FrequencyTable(len(table) * 2)
            probe.update(table)
        alloc_bytes = _traced_peak(text, trials, method, ascii_only, probe)

    if table is not None:
        word_total = table.total() - before_total
    elif method == "copy":
        word_total = sum(result.values()) * trials
    else:
        word_total = result.total() * trials
    if method == "copy":
        # one substring per match
        key_allocations = word_total
    elif table is not None:
        key_allocations = table.key_allocations - before_keys
    else:
        key_allocations = result.key_allocations * trials

    return {
        "method": method,
        "trials": trials,
        "elapsed_ms": elapsed * 1000.0,
        "alloc_mb": None if alloc_bytes is None else alloc_bytes / 1024.0 / 1024.0,
        "key_allocations": key_allocations,
        "unique_words": len(result),
        "word_total": word_total,
    }, result


def run_benchmark(
    text: str,
    *,
    rounds: int = 5,
    trials: int = 10,
    method: str = "scan",
    ascii_only: bool = False,
    accumulate: bool = False,
    measure_alloc: bool = True,
) -> tuple[list[dict[str, Any]], FrequencyTable]:
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    table = FrequencyTable() if accumulate else None
    results: list[dict[str, Any]] = []
    counts = None
    for i in range(rounds):
        row, counts = run_round(
            text,
            trials,
            method=method,
            ascii_only=ascii_only,
            table=table,
            measure_alloc=measure_alloc,
        )
        row["round"] = i
        results.append(row)
    if not isinstance(counts, FrequencyTable):
        merged = FrequencyTable()
        merged.update(counts)
        counts = merged
    return results, counts


def top_words(table: FrequencyTable, k: int) -> list[list[Any]]:
    if k < 0:
        raise ValueError("k must be non-negative")
    return [[word, n] for word, n in table.most_common(k)]


def summarize(table: FrequencyTable, top_k: int) -> dict[str, Any]:
    """Vocabulary statistics for the final table of a benchmark run."""
    dist: FreqDist = table.to_freqdist()
    return {
        "unique_words": dist.B(),
        "word_total": dist.N(),
        "hapaxes": len(dist.hapaxes()),
        "top": top_words(table, top_k),
    }
