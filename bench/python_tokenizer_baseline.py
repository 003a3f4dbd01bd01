#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json

from spanfreq.words import iter_word_spans, word_at


def tokenize_spans(text: str, ascii_only: bool = False) -> dict:
    spans = [list(span) for span in iter_word_spans(text, ascii_only)]
    return {"spans": spans, "tokens": [word_at(text, span) for span in spans]}


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--text", required=True)
    parser.add_argument("--ascii", action="store_true")
    args = parser.parse_args()
    print(json.dumps(tokenize_spans(args.text, args.ascii)))


if __name__ == "__main__":
    main()
