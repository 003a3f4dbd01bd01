from .counter import count, count_copying, count_into, merge
from .table import FrequencyTable
from .words import iter_regex_spans, iter_word_spans, word_at

__all__ = [
    "FrequencyTable",
    "count",
    "count_copying",
    "count_into",
    "iter_regex_spans",
    "iter_word_spans",
    "merge",
    "word_at",
]
