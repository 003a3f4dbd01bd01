"""Word frequency counting over a text buffer."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .table import FrequencyTable
from .words import ASCII_WORD_RE, UNICODE_WORD_RE, iter_regex_spans, iter_word_spans

METHODS = ("scan", "regex")


def _span_source(method: str):
    if method == "scan":
        return iter_word_spans
    if method == "regex":
        return iter_regex_spans
    raise ValueError(f"unknown method: {method!r} (expected one of {', '.join(METHODS)})")


def count_into(table: FrequencyTable, text: str, *, ascii_only: bool = False, method: str = "scan") -> FrequencyTable:
    """Add every word of ``text`` to ``table`` and return it.

    Lookups use the borrowed span; a key is copied out of ``text`` only
    when the table has not seen its content before.
    """
    spans = _span_source(method)
    increment = table.increment_span
    for start, length in spans(text, ascii_only):
        increment(text, start, length)
    return table


def count(text: str, *, ascii_only: bool = False, method: str = "scan") -> FrequencyTable:
    return count_into(FrequencyTable(), text, ascii_only=ascii_only, method=method)


def count_copying(text: str, *, ascii_only: bool = False) -> Counter[str]:
    """Baseline that slices a new string for every match."""
    pattern = ASCII_WORD_RE if ascii_only else UNICODE_WORD_RE
    return Counter(pattern.findall(text))


def merge(tables: Iterable[FrequencyTable]) -> FrequencyTable:
    """Sum partial tables (e.g. one per shard) into a new table."""
    merged = FrequencyTable()
    for table in tables:
        merged.update(table)
    return merged
