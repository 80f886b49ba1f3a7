#!/usr/bin/env python3
"""
Word Sort Benchmark Suite - Main Runner
=======================================

Sorts a word list with quicksort, mergesort and insertion sort under a
custom alphabet, and reports time and comparison counts for each.

Usage:
    python benchmark_sorts.py alphabet.txt words.txt
    python benchmark_sorts.py alphabet.txt words.txt --total 50000 --sorters MergeSorter
    python benchmark_sorts.py alphabet.txt words.txt --case sorted -o report.json
"""

import argparse
import json
import random
import sys

from alphabet import Alphabet, AlphabetComparator
from benchmark_core import (
    ARRANGEMENTS, DEFAULT_TOTAL_TO_SORT, SORTERS,
    BenchmarkConfig, BenchmarkEngine,
    build_report, get_sorters,
    print_header, print_results_table, print_sorter_report,
    Colors,
)
from word_sorts import WordList


def run_benchmark(config: BenchmarkConfig, sorters: dict, words: WordList,
                  comparator, quiet: bool = False):
    """Run every sorter against the word list and print the report."""
    engine = BenchmarkEngine(config)

    if not quiet:
        print_header("Word Sort Benchmark")
        print(f"  {len(words):,} words per list, at least {config.total_to_sort:,} words per sorter\n")

    def report(result):
        if quiet:
            return
        print_sorter_report(result)

    results = engine.run_all(sorters.values(), words, comparator,
                             config.total_to_sort, on_result=report)

    if not quiet:
        print_results_table(results)

    return results


def build_parser():
    parser = argparse.ArgumentParser(
        description="Word Sort Benchmark Suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s alphabet.txt words.txt                      All sorters, 1,000,000 words each
  %(prog)s alphabet.txt words.txt --total 20000        Shorter run
  %(prog)s alphabet.txt words.txt --case reversed      Descending input
  %(prog)s alphabet.txt words.txt -o report.json       JSON report
        """
    )

    parser.add_argument("alphabet", help="File with one character per line, in sort order")
    parser.add_argument("words", help="File with one word per line")
    parser.add_argument("--total", type=int, default=DEFAULT_TOTAL_TO_SORT,
                        help=f"Minimum words sorted per sorter (default: {DEFAULT_TOTAL_TO_SORT})")
    parser.add_argument("--sorters", nargs="+", choices=list(SORTERS.keys()),
                        help="Sorters to run (default: all)")
    parser.add_argument("--case", choices=list(ARRANGEMENTS.keys()), default="file",
                        help="Input arrangement (default: file)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--warmup", type=int, default=0, help="Untimed warmup sorts (default: 0)")
    parser.add_argument("--output-dir", default=".", help="Where sorted lists are written (default: .)")
    parser.add_argument("--no-dump", action="store_true", help="Do not write sorted lists")
    parser.add_argument("--output", "-o", type=str, help="JSON output path")
    parser.add_argument("--quiet", "-q", action="store_true", help="Minimal output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = BenchmarkConfig(
        seed=args.seed,
        warmup_runs=args.warmup,
        output_dir=None if args.no_dump else args.output_dir,
        total_to_sort=args.total,
    )

    try:
        alphabet = Alphabet.from_file(args.alphabet)
        comparator = AlphabetComparator(alphabet)
        loaded = WordList.from_file(args.words)
        arrangement = ARRANGEMENTS[args.case]
        words = arrangement.arrange(loaded, comparator, random.Random(config.seed))
        sorters = get_sorters(args.sorters)
        results = run_benchmark(config, sorters, words, comparator, args.quiet)
    except (OSError, ValueError) as e:
        print(f"{Colors.RED}error: {e}{Colors.END}", file=sys.stderr)
        return 1

    if args.output:
        report = build_report(config, sorters, results, extra={
            "alphabet_file": args.alphabet,
            "words_file": args.words,
            "alphabet_size": len(alphabet),
            "arrangement": arrangement.name,
        })
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, default=str)
        if not args.quiet:
            print(f"\n{Colors.GREEN}JSON report saved to {args.output}{Colors.END}")

    if not args.quiet:
        print(f"\n{Colors.CYAN}Benchmark complete.{Colors.END}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
