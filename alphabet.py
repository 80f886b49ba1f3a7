"""
Alphabet Ordering & Comparators
===============================

Contains: the character ordering table, the string comparator that walks
words through it, and a comparator wrapper that counts invocations.
"""

from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Tuple

Comparator = Callable[[str, str], int]


class InvalidCharacterError(ValueError):
    """A word contains a character that is not part of the alphabet."""

    def __init__(self, char: str, word: str):
        super().__init__(f"character {char!r} in {word!r} is not in the alphabet")
        self.char = char
        self.word = word


#Lookup table helpers

def _merge_sort_entries(entries, start, end):
    """
    Stable merge sort of (character, rank) pairs on character value,
    over the inclusive range [start, end].
    """
    if start >= end:
        return
    mid = (start + end) // 2
    _merge_sort_entries(entries, start, mid)
    _merge_sort_entries(entries, mid + 1, end)

    merged = []
    i, j = start, mid + 1
    while i <= mid and j <= end:
        if entries[i][0] <= entries[j][0]:
            merged.append(entries[i])
            i += 1
        else:
            merged.append(entries[j])
            j += 1
    merged.extend(entries[i:mid + 1])
    merged.extend(entries[j:end + 1])
    entries[start:end + 1] = merged


class Alphabet:
    """
    An ordering of characters that can be queried for the rank of a character.

    The lookup table holds (character, rank) pairs sorted by character, so a
    rank lookup is a binary search. Ranks are the positions in the ordering
    the table was built from.
    """

    def __init__(self, ordering: Iterable[str]):
        if ordering is None:
            raise TypeError("ordering must not be None")
        entries = []
        for i, c in enumerate(ordering):
            if not isinstance(c, str) or len(c) != 1:
                raise ValueError(f"alphabet entry {i} is {c!r}, expected a single character")
            entries.append((c, i))
        self._lookup: List[Tuple[str, int]] = self._build(entries)

    @classmethod
    def from_file(cls, path: str) -> "Alphabet":
        """Read one character per line; line order is the ordering."""
        if path is None:
            raise TypeError("path must not be None")
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()

        chars = []
        for lineno, line in enumerate(lines, 1):
            if not line:
                raise ValueError(f"{path}:{lineno}: blank line in alphabet file")
            chars.append(line[0])
        return cls(chars)

    @staticmethod
    def _build(entries):
        _merge_sort_entries(entries, 0, len(entries) - 1)
        for k in range(1, len(entries)):
            if entries[k - 1][0] == entries[k][0]:
                raise ValueError(f"duplicate character {entries[k][0]!r} in alphabet")
        return entries

    def _search(self, c: str) -> int:
        lo, hi = 0, len(self._lookup) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            ch, rank = self._lookup[mid]
            if ch < c:
                lo = mid + 1
            elif ch > c:
                hi = mid - 1
            else:
                return rank
        return -1

    def is_valid(self, c: str) -> bool:
        return self._search(c) >= 0

    def rank(self, c: str) -> int:
        """Rank of ``c`` in the ordering, or -1 if it is not present."""
        return self._search(c)

    def __contains__(self, c):
        return self.is_valid(c)

    def __len__(self):
        return len(self._lookup)

    def __repr__(self):
        ordered = sorted(self._lookup, key=lambda e: e[1])
        return f"Alphabet({''.join(c for c, _ in ordered)!r})"


class AlphabetComparator:
    """
    Compares strings character by character using an Alphabet's ranks.

    At each position both characters must be in the alphabet, even when the
    two strings are equal. The first differing rank decides; if one string
    is a prefix of the other, the shorter one is lesser.
    """

    def __init__(self, alphabet: Alphabet):
        if alphabet is None:
            raise TypeError("alphabet must not be None")
        self.alphabet = alphabet

    def compare(self, a: str, b: str) -> int:
        if a is None or b is None:
            raise TypeError("cannot compare None")

        rank = self.alphabet.rank
        for ca, cb in zip(a, b):
            ra, rb = rank(ca), rank(cb)
            if ra < 0:
                raise InvalidCharacterError(ca, a)
            if rb < 0:
                raise InvalidCharacterError(cb, b)
            if ra != rb:
                return -1 if ra < rb else 1

        if len(a) == len(b):
            return 0
        return -1 if len(a) < len(b) else 1

    __call__ = compare


class CountingComparator:
    """Wraps a comparator and counts how many times it is called."""

    def __init__(self, wrapped: Optional[Comparator]):
        if wrapped is None:
            raise TypeError("wrapped comparator must not be None")
        self.wrapped = wrapped
        self.count = 0

    def reset(self):
        self.count = 0

    def compare(self, a: str, b: str) -> int:
        self.count += 1
        return self.wrapped(a, b)

    __call__ = compare
