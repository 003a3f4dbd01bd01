"""Word span scanning over an immutable text buffer.

A word is a maximal run of word characters. In the default Unicode mode a
word character is a letter (L*), a non-spacing mark (Mn), a decimal digit
(Nd) or a connector punctuation (Pc), i.e. the ``[\\p{L}\\p{Mn}\\p{Nd}\\p{Pc}]``
class; ``ascii_only`` narrows it to ``[A-Za-z0-9_]``. Spans are
``(start, length)`` pairs into the caller's buffer; no substring is created
while scanning.
"""

from __future__ import annotations

import string
import unicodedata
from typing import Iterator, Tuple

import regex

UNICODE_WORD_PATTERN = r"[\p{L}\p{Mn}\p{Nd}\p{Pc}]+"
ASCII_WORD_PATTERN = r"[A-Za-z0-9_]+"
ASCII_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
WORD_CATEGORIES = frozenset(["Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Nd", "Pc"])

WordSpan = Tuple[int, int]

UNICODE_WORD_RE = regex.compile(UNICODE_WORD_PATTERN)
ASCII_WORD_RE = regex.compile(ASCII_WORD_PATTERN)


def is_word_char(ch: str) -> bool:
    if ch in ASCII_WORD_CHARS:
        return True
    return unicodedata.category(ch) in WORD_CATEGORIES


def is_ascii_word_char(ch: str) -> bool:
    return ch in ASCII_WORD_CHARS


def iter_word_spans(text: str, ascii_only: bool = False) -> Iterator[WordSpan]:
    """Yield ``(start, length)`` for every word in ``text``, left to right."""
    is_word = is_ascii_word_char if ascii_only else is_word_char
    n = len(text)
    i = 0
    while i < n:
        while i < n and not is_word(text[i]):
            i += 1
        if i == n:
            return
        start = i
        i += 1
        while i < n and is_word(text[i]):
            i += 1
        yield start, i - start


def iter_regex_spans(text: str, ascii_only: bool = False) -> Iterator[WordSpan]:
    pattern = ASCII_WORD_RE if ascii_only else UNICODE_WORD_RE
    for m in pattern.finditer(text):
        start, end = m.span()
        yield start, end - start


def word_at(text: str, span: WordSpan) -> str:
    start, length = span
    return text[start : start + length]
