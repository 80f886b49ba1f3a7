import random
import string
from collections import Counter
from functools import cmp_to_key

import pytest

from alphabet import Alphabet, AlphabetComparator, CountingComparator, InvalidCharacterError
from word_sorts import WordList, insertion_sort, is_sorted, merge_sort, quick_sort

ALL_SORTS = [quick_sort, merge_sort, insertion_sort]
STABLE_SORTS = [merge_sort, insertion_sort]


@pytest.fixture
def comp():
    return AlphabetComparator(Alphabet(string.ascii_lowercase))


def random_words(seed, n, letters="abcdefg"):
    rng = random.Random(seed)
    return [''.join(rng.choice(letters) for _ in range(rng.randint(0, 5))) for _ in range(n)]


# WordList

def test_wordlist_copies_contents():
    src = ["b", "a"]
    words = WordList(src)
    src[0] = "z"
    assert words.get(0) == "b"
    assert len(words) == 2


def test_wordlist_get_set_swap():
    words = WordList(["a", "b", "c"])
    words.set(1, "x")
    words.swap(0, 2)
    assert list(words) == ["c", "x", "a"]


@pytest.mark.parametrize("idx", [-1, 3, 10])
def test_wordlist_bounds(idx):
    words = WordList(["a", "b", "c"])
    with pytest.raises(IndexError):
        words.get(idx)
    with pytest.raises(IndexError):
        words.set(idx, "z")
    with pytest.raises(IndexError):
        words.swap(0, idx)
    assert list(words) == ["a", "b", "c"]


def test_wordlist_none():
    with pytest.raises(TypeError):
        WordList(None)


def test_clone_is_independent():
    original = WordList(["a", "b", "c"])
    copy = original.clone()
    assert copy == original
    assert copy.array is not original.array

    copy.swap(0, 2)
    assert list(original) == ["a", "b", "c"]
    original.set(1, "q")
    assert list(copy) == ["c", "b", "a"]


def test_wordlist_from_file_and_write(tmp_path):
    src = tmp_path / "words.txt"
    src.write_text("pear\n\napple\n", encoding="utf-8")
    words = WordList.from_file(str(src))
    assert list(words) == ["pear", "", "apple"]

    out = tmp_path / "out.txt"
    words.write(str(out))
    assert out.read_text(encoding="utf-8") == "pear\n\napple\n"


def test_wordlist_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordList.from_file(str(tmp_path / "missing.txt"))


# Sorts

@pytest.mark.parametrize("sort", ALL_SORTS)
def test_fruit_example(sort, comp):
    words = WordList(["banana", "apple", "cherry"])
    sort(words, comp)
    assert list(words) == ["apple", "banana", "cherry"]


@pytest.mark.parametrize("sort", ALL_SORTS)
@pytest.mark.parametrize("seed", range(4))
def test_sorts_random_words(sort, seed, comp):
    original = random_words(seed, 200)
    words = WordList(original)
    sort(words, comp)
    assert is_sorted(words, comp)
    assert Counter(words) == Counter(original)
    assert list(words) == sorted(original, key=cmp_to_key(comp))


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_sorts_custom_alphabet(sort):
    comp = AlphabetComparator(Alphabet("cba"))
    words = WordList(["a", "abc", "c", "bb", "ca", "b"])
    sort(words, comp)
    assert list(words) == ["c", "ca", "b", "bb", "a", "abc"]


@pytest.mark.parametrize("sort", ALL_SORTS)
@pytest.mark.parametrize("contents", [
    [],
    ["solo"],
    ["b", "a"],
    ["a", "a", "a", "a"],
    list("abcdefghij"),
    list("jihgfedcba"),
])
def test_sorts_edge_inputs(sort, contents, comp):
    words = WordList(contents)
    sort(words, comp)
    assert list(words) == sorted(contents)


@pytest.mark.parametrize("sort", [quick_sort, merge_sort])
def test_long_sorted_input_does_not_exhaust_stack(sort):
    contents = ["%04d" % i for i in range(1200)]
    digits = AlphabetComparator(Alphabet("0123456789"))
    words = WordList(contents)
    sort(words, digits)
    assert list(words) == contents


@pytest.mark.parametrize("sort", STABLE_SORTS)
def test_stable_sorts_keep_equal_order(sort):
    # compare on the first character only, so ties carry a tag
    def first_char(a, b):
        return (a[0] > b[0]) - (a[0] < b[0])

    rng = random.Random(3)
    contents = [rng.choice("abc") + str(i) for i in range(100)]
    words = WordList(contents)
    sort(words, first_char)
    assert list(words) == sorted(contents, key=lambda w: w[0])


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_sorts_propagate_invalid_character(sort, comp):
    words = WordList(["b", "a", "Z", "c"])
    with pytest.raises(InvalidCharacterError):
        sort(words, comp)
    assert Counter(words) == Counter(["b", "a", "Z", "c"])


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_sorts_reject_none(sort, comp):
    with pytest.raises(TypeError):
        sort(None, comp)
    with pytest.raises(TypeError):
        sort(WordList(["a"]), None)


@pytest.mark.parametrize("sort", ALL_SORTS)
def test_comparison_counts(sort, comp):
    for n, expect_zero in [(0, True), (1, True), (2, False), (50, False)]:
        counter = CountingComparator(comp)
        sort(WordList(random_words(n, n)), counter)
        assert (counter.count == 0) == expect_zero


def test_insertion_sort_sorted_input_is_linear(comp):
    counter = CountingComparator(comp)
    insertion_sort(WordList(list("abcdefghij")), counter)
    assert counter.count == 9


def test_quick_sort_sorted_input_is_quadratic(comp):
    counter = CountingComparator(comp)
    quick_sort(WordList(list("abcdefghij")), counter)
    assert counter.count == 45


def test_is_sorted(comp):
    assert is_sorted(WordList([]), comp)
    assert is_sorted(WordList(["a", "a", "b"]), comp)
    assert not is_sorted(WordList(["b", "a"]), comp)
