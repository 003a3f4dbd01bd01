import re

import pytest

from spanfreq.words import is_word_char, iter_regex_spans, iter_word_spans, word_at

ASCII_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)


def ascii_ref_spans(text):
    return [(m.start(), m.end() - m.start()) for m in ASCII_WORD_RE.finditer(text)]


def words(text, **kwargs):
    return [word_at(text, s) for s in iter_word_spans(text, **kwargs)]


def test_empty_buffer():
    assert list(iter_word_spans("")) == []


def test_no_word_chars():
    assert list(iter_word_spans("!!! ... ,,,")) == []
    assert list(iter_word_spans("   \n\t")) == []


def test_spans_are_offset_and_length():
    text = "the cat sat"
    assert list(iter_word_spans(text)) == [(0, 3), (4, 3), (8, 3)]
    assert words(text) == ["the", "cat", "sat"]


def test_runs_touching_buffer_edges():
    assert list(iter_word_spans("word")) == [(0, 4)]
    assert list(iter_word_spans("x")) == [(0, 1)]
    assert list(iter_word_spans("  lead, trail")) == [(2, 4), (8, 5)]


def test_underscore_and_digits_are_word_chars():
    assert words("snake_case x86_64 __init__ 42") == ["snake_case", "x86_64", "__init__", "42"]


def test_apostrophe_and_hyphen_split_words():
    assert words("Elizabeth's well-known") == ["Elizabeth", "s", "well", "known"]


def test_spans_are_lazy():
    spans = iter_word_spans("a b c")
    assert next(spans) == (0, 1)
    assert next(spans) == (2, 1)


def test_unicode_word_chars_by_default():
    assert words("naïve café München") == ["naïve", "café", "München"]


def test_combining_mark_stays_in_word():
    decomposed = "cafe\u0301 ok"
    assert words(decomposed) == ["cafe\u0301", "ok"]
    assert words(decomposed, ascii_only=True) == ["cafe", "ok"]


def test_vulgar_fraction_and_superscript_are_not_words():
    assert words("½ ² x² 3½") == ["x", "3"]


def test_connector_punctuation_joins_words():
    assert words("a\u203fb c") == ["a\u203fb", "c"]


def test_ascii_only_splits_on_non_ascii_letters():
    assert words("naïve café", ascii_only=True) == ["na", "ve", "caf"]


def test_is_word_char():
    assert is_word_char("_")
    assert is_word_char("é")
    assert is_word_char("7")
    assert is_word_char("\u0301")  # COMBINING ACUTE ACCENT, Mn
    assert is_word_char("٣")  # ARABIC-INDIC DIGIT THREE, Nd
    assert not is_word_char("½")
    assert not is_word_char("²")
    assert not is_word_char("-")
    assert not is_word_char(" ")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "the cat sat on the mat",
        "Hello, World! Hello world.",
        "It is a truth universally acknowledged, that a single man in possession of a good fortune...",
        "tab\tseparated\nlines\r\nand_underscores 2nd 3rd",
        "日本語のテキスト and ελληνικά, ½ ² done",
        "cafe\u0301 re\u0301sume\u0301",
        "caf\u00e9 x\u00b2 a\u203fb",
        "--leading and trailing--",
    ],
)
def test_scan_matches_regex(text):
    assert list(iter_word_spans(text)) == list(iter_regex_spans(text))
    assert list(iter_word_spans(text, ascii_only=True)) == ascii_ref_spans(text)
    assert list(iter_regex_spans(text, ascii_only=True)) == ascii_ref_spans(text)
