"""
Word lists and the comparison sorts that run over them.

Every sort here has the same shape: sort(words, comp) reorders a WordList
in place so it is non-decreasing under comp. comp is any callable
(a, b) -> int. If comp raises (an invalid character, say) the error
propagates and the list is left partially reordered.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List


class WordList:
    """
    A fixed-length list of words.

    get/set/swap are bounds checked. Sorts reach the backing list through
    ``array`` so the hot loops skip the per-call checks.
    """

    def __init__(self, contents: Iterable[str]):
        if contents is None:
            raise TypeError("contents must not be None")
        self._words: List[str] = list(contents)

    @classmethod
    def from_file(cls, path: str) -> "WordList":
        """Read one word per line, keeping the file's order."""
        if path is None:
            raise TypeError("path must not be None")
        with open(path, encoding="utf-8") as f:
            return cls(f.read().splitlines())

    def _check(self, idx):
        if not 0 <= idx < len(self._words):
            raise IndexError(f"index {idx} out of range for WordList of length {len(self._words)}")

    def get(self, idx: int) -> str:
        self._check(idx)
        return self._words[idx]

    def set(self, idx: int, value: str) -> None:
        self._check(idx)
        self._words[idx] = value

    def swap(self, i: int, j: int) -> None:
        self._check(i)
        self._check(j)
        a = self._words
        a[i], a[j] = a[j], a[i]

    @property
    def array(self) -> List[str]:
        return self._words

    def clone(self) -> "WordList":
        return WordList(self._words)

    def write(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            for w in self._words:
                f.write(w)
                f.write("\n")

    def __len__(self):
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other):
        if not isinstance(other, WordList):
            return NotImplemented
        return self._words == other._words

    def __repr__(self):
        return f"WordList({self._words!r})"


def _check_args(words, comp):
    if words is None:
        raise TypeError("words must not be None")
    if comp is None:
        raise TypeError("comparator must not be None")


def is_sorted(words, comp):
    """Return True if words is non-decreasing under comp."""
    _check_args(words, comp)
    a = words.array
    return all(comp(a[i], a[i + 1]) <= 0 for i in range(len(a) - 1))


#Quicksort

def _partition(a, comp, start, end):
    """
    Lomuto partition of a[start..end] around the pivot a[end].
    Returns the pivot's final index.
    """
    pivot = a[end]
    i = start - 1
    for j in range(start, end):
        if comp(a[j], pivot) < 0:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[i + 1], a[end] = a[end], a[i + 1]
    return i + 1


def quick_sort(words, comp):
    """
    In-place quicksort, last element of each range as pivot. Not stable.

    Recursion goes into the smaller side of each partition and the loop
    carries on with the larger one, so sorted input costs O(n^2) time but
    only O(log n) stack.
    """
    _check_args(words, comp)
    _quick_sort_range(words.array, comp, 0, len(words) - 1)


def _quick_sort_range(a, comp, start, end):
    while start < end:
        p = _partition(a, comp, start, end)
        if p - start < end - p:
            _quick_sort_range(a, comp, start, p - 1)
            start = p + 1
        else:
            _quick_sort_range(a, comp, p + 1, end)
            end = p - 1


#Mergesort

def merge_sort(words, comp):
    """In-place (from the caller's view) top-down mergesort. Stable."""
    _check_args(words, comp)
    _merge_sort_range(words.array, comp, 0, len(words) - 1)


def _merge_sort_range(a, comp, start, end):
    if start >= end:
        return
    mid = (start + end) // 2
    _merge_sort_range(a, comp, start, mid)
    _merge_sort_range(a, comp, mid + 1, end)
    _merge(a, comp, start, mid, end)


def _merge(a, comp, start, mid, end):
    """
    Merge sorted runs a[start..mid] and a[mid+1..end].
    Ties take from the left run, which is what keeps the sort stable.
    """
    left = a[start:mid + 1]
    right = a[mid + 1:end + 1]
    i = j = 0
    k = start
    while i < len(left) and j < len(right):
        if comp(left[i], right[j]) <= 0:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        k += 1

    #at most one of these has anything left
    while i < len(left):
        a[k] = left[i]
        i += 1
        k += 1
    while j < len(right):
        a[k] = right[j]
        j += 1
        k += 1


#Insertion sort

def insertion_sort(words, comp):
    """
    In-place insertion sort. Stable.
    Each word shifts left past every word strictly greater than it.
    """
    _check_args(words, comp)
    a = words.array
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0 and comp(a[j], key) > 0:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key
