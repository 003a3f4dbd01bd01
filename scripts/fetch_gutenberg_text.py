#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

import nltk


def fetch(fileid: str, out_dir: Path) -> Path:
    nltk.download("gutenberg", quiet=True)
    from nltk.corpus import gutenberg

    if fileid not in gutenberg.fileids():
        raise SystemExit(f"unknown gutenberg file id: {fileid} (have: {', '.join(gutenberg.fileids())})")

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / fileid
    path.write_text(gutenberg.raw(fileid), encoding="utf-8")
    return path


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--fileid", default="austen-emma.txt")
    parser.add_argument("--out-dir", type=Path, default=Path("bench/datasets"))
    args = parser.parse_args()

    path = fetch(args.fileid, args.out_dir)
    print(json.dumps({"ok": True, "path": str(path.resolve()), "bytes": path.stat().st_size}))


if __name__ == "__main__":
    main()
