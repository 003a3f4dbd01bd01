#!/usr/bin/env python3
"""Generate a reproducible prose-like corpus with a Zipf word distribution.

A few hundred distinct words repeat many thousands of times, which is the
shape that separates per-occurrence allocation from per-distinct-word
allocation when counting.
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path

SYLLABLES = [
    "al",
    "be",
    "con",
    "de",
    "ex",
    "for",
    "gen",
    "hy",
    "in",
    "jor",
    "ka",
    "lin",
    "mi",
    "ne",
    "op",
    "pre",
    "qua",
    "re",
    "syn",
    "tri",
]

FUNCTION_WORDS = ["the", "of", "and", "to", "a", "in", "was", "her", "she", "it", "that", "not", "be", "he", "his"]
ACCENTED = ["resumé", "naïve", "façade", "München", "España", "français"]
IDENTIFIERS = ["snake_case", "var_1", "__init__", "x86_64"]
PUNCT = [",", ".", ";", ":", "!", "?", " --", "'s"]


def build_vocabulary(rng: random.Random, size: int) -> list[str]:
    vocab = list(FUNCTION_WORDS)
    seen = set(vocab)
    while len(vocab) < size:
        word = "".join(rng.choice(SYLLABLES) for _ in range(rng.randint(1, 4)))
        if word not in seen:
            seen.add(word)
            vocab.append(word)
    return vocab


def zipf_weights(n: int, exponent: float) -> list[float]:
    return [1.0 / (rank**exponent) for rank in range(1, n + 1)]


def make_sentence(rng: random.Random, vocab: list[str], weights: list[float]) -> str:
    words = rng.choices(vocab, weights=weights, k=rng.randint(6, 30))
    if rng.random() < 0.05:
        words.insert(rng.randint(0, len(words)), rng.choice(ACCENTED))
    if rng.random() < 0.03:
        words.insert(rng.randint(0, len(words)), rng.choice(IDENTIFIERS))
    if rng.random() < 0.04:
        words.append(str(rng.randint(1, 1813)))
    words[0] = words[0].capitalize()
    for i in range(1, len(words) - 1, rng.randint(4, 9)):
        words[i] += rng.choice(PUNCT)
    return " ".join(words) + rng.choice([".", ".", ".", "!", "?"])


def generate(size_mb: float, seed: int, vocab_size: int, output: Path) -> None:
    rng = random.Random(seed)
    vocab = build_vocabulary(rng, vocab_size)
    weights = zipf_weights(len(vocab), 1.1)
    target_bytes = int(size_mb * 1024 * 1024)

    output.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with output.open("w", encoding="utf-8") as f:
        while written < target_bytes:
            paragraph = " ".join(make_sentence(rng, vocab, weights) for _ in range(rng.randint(2, 7)))
            f.write(paragraph)
            f.write("\n\n")
            written += len(paragraph.encode("utf-8")) + 2


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--size-mb", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=1337)
    parser.add_argument("--vocab-size", type=int, default=6000)
    parser.add_argument("--out", type=Path, default=Path("bench/datasets/synthetic.txt"))
    args = parser.parse_args()

    generate(args.size_mb, args.seed, args.vocab_size, args.out)
    print(f"generated: {args.out} ({args.size_mb} MB target)")
