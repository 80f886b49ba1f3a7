"""
Word Sort Benchmark Suite - Core Module
=======================================

Contains: configuration, per-run statistics, sorter definitions, input
arrangements, the benchmark engine, and report generation.
"""

from __future__ import annotations
import gc, os, platform, random, statistics, sys, time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional, Sequence
from contextlib import contextmanager

from alphabet import CountingComparator
from word_sorts import WordList, insertion_sort, is_sorted, merge_sort, quick_sort

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_TOTAL_TO_SORT = 1_000_000

@dataclass(frozen=True)
class BenchmarkConfig:
    seed: int = 42
    warmup_runs: int = 0
    pause_gc: bool = True
    output_dir: Optional[str] = "."
    total_to_sort: int = DEFAULT_TOTAL_TO_SORT

class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        for a in ['HEADER','BLUE','CYAN','GREEN','YELLOW','RED','BOLD','UNDERLINE','END']:
            setattr(cls, a, '')

if not sys.stdout.isatty():
    Colors.disable()

# =============================================================================
# Statistics
# =============================================================================

@dataclass
class Statistics:
    """Summary of the per-run sort times of one benchmark run, in seconds."""
    n: int
    mean: float
    median: float
    std_dev: float
    min_val: float
    max_val: float
    p95: float
    raw_values: List[float] = field(default_factory=list, repr=False)

    @classmethod
    def from_samples(cls, samples: List[float]) -> "Statistics":
        if not samples:
            return cls(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, [])

        def pct(data, p):
            k = (len(data)-1) * p / 100
            f, c = int(k), min(int(k)+1, len(data)-1)
            return data[f] if f == c else data[f]*(c-k) + data[c]*(k-f)

        s = sorted(samples)
        n = len(s)
        return cls(n=n, mean=statistics.mean(s), median=statistics.median(s),
                   std_dev=statistics.stdev(s) if n > 1 else 0.0,
                   min_val=s[0], max_val=s[-1], p95=pct(s, 95),
                   raw_values=list(samples))

# =============================================================================
# Sorters
# =============================================================================

@dataclass
class SorterInfo:
    name: str
    function: Callable
    expected_complexity: str
    stable: bool
    description: str

    def __call__(self, words, comp):
        return self.function(words, comp)


SORTERS: Dict[str, SorterInfo] = {s.name: s for s in [
    SorterInfo("QuickSorter", quick_sort, "O(n log n), O(n^2) worst",
               False, "Lomuto quicksort, last element as pivot"),
    SorterInfo("MergeSorter", merge_sort, "O(n log n)",
               True, "Top-down mergesort with temporary buffers"),
    SorterInfo("InsertionSorter", insertion_sort, "O(n^2)",
               True, "Shift-based insertion sort"),
]}


def get_sorters(names: Optional[Sequence[str]] = None) -> Dict[str, SorterInfo]:
    """Sorters by name, in the order requested (all of them by default)."""
    if names is None:
        return dict(SORTERS)
    unknown = [n for n in names if n not in SORTERS]
    if unknown:
        raise ValueError(f"unknown sorter(s): {', '.join(unknown)}; "
                         f"choose from {', '.join(SORTERS)}")
    return {n: SORTERS[n] for n in names}

# =============================================================================
# Input Arrangements
# =============================================================================

class WordArrangement(ABC):
    """Reorders a loaded word list before it is handed to the benchmark."""

    @property
    @abstractmethod
    def name(self) -> str: pass

    @property
    @abstractmethod
    def description(self) -> str: pass

    @abstractmethod
    def arrange(self, words: WordList, comp, rng: random.Random) -> WordList: pass


class AsLoaded(WordArrangement):
    name = "file"
    description = "Word list in file order"
    def arrange(self, words, comp, rng):
        return words.clone()

class Shuffled(WordArrangement):
    name = "shuffled"
    description = "Seeded random permutation"
    def arrange(self, words, comp, rng):
        a = list(words)
        rng.shuffle(a)
        return WordList(a)

class AlreadySorted(WordArrangement):
    name = "sorted"
    description = "Already sorted under the alphabet"
    def arrange(self, words, comp, rng):
        return WordList(sorted(words, key=cmp_to_key(comp)))

class ReverseSorted(WordArrangement):
    name = "reversed"
    description = "Descending under the alphabet"
    def arrange(self, words, comp, rng):
        return WordList(sorted(words, key=cmp_to_key(comp), reverse=True))

class NearlySorted(WordArrangement):
    name = "nearly_sorted"
    description = "Sorted with ~1% swaps"
    def arrange(self, words, comp, rng):
        a = sorted(words, key=cmp_to_key(comp))
        n = len(a)
        if n > 1:
            for _ in range(max(1, n // 100)):
                i, j = rng.randrange(n), rng.randrange(n)
                a[i], a[j] = a[j], a[i]
        return WordList(a)


ARRANGEMENTS: Dict[str, WordArrangement] = {g.name: g for g in [
    AsLoaded(), Shuffled(), AlreadySorted(), ReverseSorted(), NearlySorted()
]}

# =============================================================================
# Result Types
# =============================================================================

@dataclass
class SortResult:
    sorter: str
    list_length: int
    total_words_sorted: int
    total_sorting_time: float
    total_comparisons: int
    runs: int
    stats: Statistics
    correct: Optional[bool] = None
    snapshot_path: Optional[str] = None

    def to_dict(self):
        return {
            "sorter": self.sorter,
            "list_length": self.list_length,
            "total_words_sorted": self.total_words_sorted,
            "total_sorting_time_seconds": self.total_sorting_time,
            "total_comparisons": self.total_comparisons,
            "runs": self.runs,
            "average_time_per_list_seconds": average_time_per_list(self),
            "comparisons_per_second": comparisons_per_second(self),
            "correct": self.correct,
            "snapshot_path": self.snapshot_path,
            "stats": {
                "n_samples": self.stats.n,
                "mean_seconds": self.stats.mean,
                "median_seconds": self.stats.median,
                "std_dev": self.stats.std_dev,
                "min": self.stats.min_val,
                "max": self.stats.max_val,
                "p95": self.stats.p95,
            }
        }


@dataclass
class BenchmarkReport:
    metadata: Dict[str, Any]
    sorter_info: Dict[str, Dict[str, Any]]
    results: List[SortResult]

    def to_dict(self):
        return {
            "metadata": self.metadata,
            "sorter_info": self.sorter_info,
            "results": [r.to_dict() for r in self.results],
        }

# =============================================================================
# Benchmark Engine
# =============================================================================

class BenchmarkEngine:
    """
    Runs sorters against copies of a baseline word list and gathers
    statistics. Holds no state between calls other than its config.

    Timing uses time.perf_counter (monotonic, sub-microsecond resolution);
    totals are reported in seconds.
    """

    def __init__(self, config: BenchmarkConfig = BenchmarkConfig()):
        self.config = config

    @contextmanager
    def _gc_pause(self):
        """Collect once, then keep the collector off for the whole block."""
        if self.config.pause_gc:
            gc.collect()
            gc.disable()
        try:
            yield
        finally:
            if self.config.pause_gc:
                gc.enable()

    def time_once(self, sorter, words, comp):
        t0 = time.perf_counter()
        sorter(words, comp)
        return time.perf_counter() - t0

    def snapshot_path(self, sorter: SorterInfo) -> Optional[str]:
        if self.config.output_dir is None:
            return None
        return os.path.join(self.config.output_dir, f"{sorter.name}.txt")

    def sort_with_statistics(self, sorter: SorterInfo, words: WordList, comp,
                             total_to_sort: int) -> SortResult:
        """
        Sort fresh clones of ``words`` until at least ``total_to_sort`` words
        have been sorted. ``words`` itself is never modified.

        Only the sort calls are timed. One counting wrapper is shared by
        every run, so the comparison total covers the whole benchmark. The
        last sorted clone is written to ``<output_dir>/<sorter name>.txt``
        once the loop ends, if any run happened.
        """
        if sorter is None:
            raise TypeError("sorter must not be None")
        if words is None:
            raise TypeError("words must not be None")
        if comp is None:
            raise TypeError("comparator must not be None")
        if total_to_sort < 0:
            raise ValueError(f"total_to_sort must be non-negative, got {total_to_sort}")
        n = len(words)
        if n == 0 and total_to_sort > 0:
            raise ValueError("cannot reach a positive word count with an empty word list")

        counter = CountingComparator(comp)
        words_sorted = 0
        total_time = 0.0
        samples = []
        last = None

        if total_to_sort > 0:
            with self._gc_pause():
                for _ in range(self.config.warmup_runs):
                    sorter(words.clone(), CountingComparator(comp))

                while words_sorted < total_to_sort:
                    last = words.clone()
                    t = self.time_once(sorter, last, counter)
                    total_time += t
                    samples.append(t)
                    words_sorted += n

        correct = None
        path = None
        if last is not None:
            correct = is_sorted(last, comp)
            path = self.snapshot_path(sorter)
            if path is not None:
                if self.config.output_dir:
                    os.makedirs(self.config.output_dir, exist_ok=True)
                last.write(path)

        return SortResult(sorter=sorter.name, list_length=n,
                          total_words_sorted=words_sorted,
                          total_sorting_time=total_time,
                          total_comparisons=counter.count,
                          runs=len(samples),
                          stats=Statistics.from_samples(samples),
                          correct=correct, snapshot_path=path)

    def run_all(self, sorters, words, comp, total_to_sort, on_result=None) -> List[SortResult]:
        """Benchmark each sorter in turn; on_result(result) is called after each."""
        results = []
        for sorter in sorters:
            result = self.sort_with_statistics(sorter, words, comp, total_to_sort)
            results.append(result)
            if on_result is not None:
                on_result(result)
        return results

# =============================================================================
# Formatting & Output
# =============================================================================

def average_time_per_list(result: SortResult) -> float:
    return result.total_sorting_time / result.runs if result.runs else 0.0


def comparisons_per_second(result: SortResult) -> float:
    if result.total_sorting_time <= 0:
        return 0.0
    return result.total_comparisons / result.total_sorting_time


def fmt_time(t):
    """Format time with appropriate units."""
    if t < 1e-6:
        return f"{t*1e9:.1f}ns"
    if t < 1e-3:
        return f"{t*1e6:.1f}us"
    if t < 1:
        return f"{t*1e3:.2f}ms"
    return f"{t:.3f}s"


def get_system_info():
    """Gather system information for reproducibility."""
    return {
        "timestamp": datetime.now().isoformat(),
        "python_version": sys.version,
        "platform": platform.platform(),
        "processor": platform.processor() or "unknown",
        "machine": platform.machine(),
    }


def print_header(text):
    print(f"\n{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{text.center(70)}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}\n")


def print_sorter_report(r: SortResult):
    """Print the per-sorter block: name, sizes, times and comparison counts."""
    print(f"Sorter: {r.sorter}")
    print(f"Word List Length: {r.list_length:,}")
    print(f"Words Sorted: {r.total_words_sorted:,}")
    print(f"Total Sorting Time: {r.total_sorting_time*1e3:.3f} ms")
    print(f"Average Time Per List: {average_time_per_list(r)*1e3:.3f} ms")
    print(f"Comparisons per Second: {comparisons_per_second(r):,.0f}")
    print(f"Total Number of Comparisons: {r.total_comparisons:,}")
    if r.snapshot_path:
        print(f"Sorted Output: {r.snapshot_path}")
    print()


def print_results_table(results, baseline="MergeSorter"):
    """Print a side-by-side summary of all sorters."""
    base = next((average_time_per_list(r) for r in results
                 if r.sorter == baseline and r.runs), None)

    hdr = (f"{'Sorter':<18} {'Avg/List':>10} {'Median':>10} {'Min':>10} "
           f"{'Cmp/sec':>14} {'Comparisons':>16} {'vs Base':>9} {'Status':>7}")
    print(f"{Colors.BOLD}{hdr}{Colors.END}")
    print("-" * len(hdr))

    for r in results:
        if not r.runs:
            print(f"{r.sorter:<18} {'-':>10} {'-':>10} {'-':>10} {'-':>14} {'-':>16} {'-':>9} {'-':>7}")
            continue

        avg = average_time_per_list(r)
        ratio = f"{avg/base:.2f}x" if base else "-"

        if base and avg <= base * 1.1:
            clr = Colors.GREEN
        elif base and avg <= base * 2:
            clr = Colors.YELLOW
        else:
            clr = Colors.RED

        status = f"{Colors.GREEN}OK{Colors.END}" if r.correct else f"{Colors.RED}FAIL{Colors.END}"
        print(f"{r.sorter:<18} {fmt_time(avg):>10} {fmt_time(r.stats.median):>10} "
              f"{fmt_time(r.stats.min_val):>10} {comparisons_per_second(r):>14,.0f} "
              f"{r.total_comparisons:>16,} {clr}{ratio:>9}{Colors.END} {status:>7}")


def build_report(config: BenchmarkConfig, sorters: Dict[str, SorterInfo],
                 results: List[SortResult], extra: Optional[Dict[str, Any]] = None) -> BenchmarkReport:
    """Build complete benchmark report."""
    metadata = get_system_info()
    metadata["config"] = {
        "seed": config.seed,
        "warmup_runs": config.warmup_runs,
        "pause_gc": config.pause_gc,
        "total_to_sort": config.total_to_sort,
    }
    if extra:
        metadata.update(extra)

    sorter_info = {
        name: {
            "expected_complexity": s.expected_complexity,
            "stable": s.stable,
            "description": s.description,
        }
        for name, s in sorters.items()
    }
    return BenchmarkReport(metadata=metadata, sorter_info=sorter_info, results=results)
