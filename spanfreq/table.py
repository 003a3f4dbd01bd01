"""Frequency table probed by borrowed spans of a text buffer.

Python's ``dict`` can only be probed with a key object, which for a word
inside a larger buffer means slicing a new ``str`` for every occurrence.
``FrequencyTable`` keeps its own open-addressing slot array instead. The
hash is computed over the characters of ``text[start:start + length]`` in
place and candidates are compared with ``text.startswith(key, start)``, so
a hit costs no allocation. A key is sliced only when its content is new
to the table.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from nltk.probability import FreqDist

FNV_OFFSET_BASIS = 14695981039346656037
FNV_PRIME = 1099511628211
MASK_64 = (1 << 64) - 1

EMPTY = -1
MIN_CAPACITY = 8


def hash_span(text: str, start: int, length: int) -> int:
    h = FNV_OFFSET_BASIS
    for i in range(start, start + length):
        h ^= ord(text[i])
        h = (h * FNV_PRIME) & MASK_64
    return h


def hash_word(word: str) -> int:
    return hash_span(word, 0, len(word))


class FrequencyTable(Mapping):
    """Mapping of word -> occurrence count with zero-copy span lookup.

    Entries are stored densely in insertion order (``_keys``, ``_counts``,
    ``_hashes``); ``_slots`` holds indices into them, or ``EMPTY``.
    ``key_allocations`` counts the owned keys sliced from spans since the
    last ``clear()``.
    """

    def __init__(self, capacity: int = MIN_CAPACITY) -> None:
        size = MIN_CAPACITY
        while size < capacity:
            size <<= 1
        self._slots: list[int] = [EMPTY] * size
        self._mask = size - 1
        self._keys: list[str] = []
        self._counts: list[int] = []
        self._hashes: list[int] = []
        self.key_allocations = 0

    # -- span probes ----------------------------------------------------

    def _find_span(self, text: str, start: int, length: int, h: int) -> int:
        """Return the slot holding the span's content, or the empty slot where it belongs."""
        keys = self._keys
        hashes = self._hashes
        slots = self._slots
        mask = self._mask
        pos = h & mask
        while True:
            idx = slots[pos]
            if idx == EMPTY:
                return pos
            if hashes[idx] == h:
                key = keys[idx]
                if len(key) == length and text.startswith(key, start):
                    return pos
            pos = (pos + 1) & mask

    def increment_span(self, text: str, start: int, length: int, n: int = 1) -> int:
        """Add ``n`` to the count of ``text[start:start + length]`` and return the new count."""
        if n < 1:
            raise ValueError("n must be positive")
        h = hash_span(text, start, length)
        pos = self._find_span(text, start, length, h)
        idx = self._slots[pos]
        if idx != EMPTY:
            self._counts[idx] += n
            return self._counts[idx]
        self.key_allocations += 1
        self._insert(pos, text[start : start + length], h, n)
        return n

    def get_span(self, text: str, start: int, length: int, default: int = 0) -> int:
        h = hash_span(text, start, length)
        idx = self._slots[self._find_span(text, start, length, h)]
        if idx == EMPTY:
            return default
        return self._counts[idx]

    # -- owned-key operations -------------------------------------------

    def add(self, word: str, n: int = 1) -> int:
        """Add ``n`` to ``word``'s count, storing ``word`` itself on a miss."""
        if n < 1:
            raise ValueError("n must be positive")
        h = hash_word(word)
        pos = self._find_span(word, 0, len(word), h)
        idx = self._slots[pos]
        if idx != EMPTY:
            self._counts[idx] += n
            return self._counts[idx]
        self._insert(pos, word, h, n)
        return n

    def update(self, other: Mapping[str, int] | Iterable[tuple[str, int]]) -> None:
        """Sum counts by key from another table or mapping."""
        if isinstance(other, Mapping):
            items = list(other.items())
        elif isinstance(other, (str, bytes)) or not isinstance(other, Iterable):
            raise TypeError(f"cannot merge counts from {type(other).__name__}")
        else:
            items = list(other)
        if any(n < 1 for _, n in items):
            raise ValueError("n must be positive")
        for word, n in items:
            self.add(word, n)

    def clear(self) -> None:
        """Drop all entries, keeping the slot array at its current size."""
        self._slots = [EMPTY] * len(self._slots)
        self._keys.clear()
        self._counts.clear()
        self._hashes.clear()
        self.key_allocations = 0

    def _insert(self, pos: int, key: str, h: int, n: int) -> None:
        self._slots[pos] = len(self._keys)
        self._keys.append(key)
        self._counts.append(n)
        self._hashes.append(h)
        # keep load factor <= 2/3
        if 3 * len(self._keys) > 2 * len(self._slots):
            self._grow()

    def _grow(self) -> None:
        size = len(self._slots) << 1
        mask = size - 1
        slots = [EMPTY] * size
        for idx, h in enumerate(self._hashes):
            pos = h & mask
            while slots[pos] != EMPTY:
                pos = (pos + 1) & mask
            slots[pos] = idx
        self._slots = slots
        self._mask = mask

    # -- Mapping --------------------------------------------------------

    def __getitem__(self, word: str) -> int:
        if not isinstance(word, str):
            raise KeyError(word)
        idx = self._slots[self._find_span(word, 0, len(word), hash_word(word))]
        if idx == EMPTY:
            raise KeyError(word)
        return self._counts[idx]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return self._slots[self._find_span(word, 0, len(word), hash_word(word))] != EMPTY

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {c}" for k, c in zip(self._keys, self._counts))
        return f"{type(self).__name__}({{{body}}})"

    def total(self) -> int:
        return sum(self._counts)

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        ranked = sorted(zip(self._keys, self._counts), key=lambda kv: -kv[1])
        return ranked if n is None else ranked[:n]

    def to_freqdist(self) -> FreqDist:
        return FreqDist(dict(zip(self._keys, self._counts)))
