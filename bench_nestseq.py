# bench_nestseq.py
"""
Simple command-line benchmark for nestseq.

Right now this benchmarks:
  - destructure / restructure on a deeply nested chain, and
  - destructure / restructure on a wide, shallow structure.
"""

from __future__ import annotations
import argparse

from nestseq import destructure, restructure
from nestseq.bench import benchmark, build_deep, build_wide


def _print_stats(label: str, stats) -> None:
    print(f"--- {label} ---")
    print(f"repeats:    {stats['repeats']}")
    print(f"total:      {stats['total_s']:.6f} s")
    print(f"avg:        {stats['avg_s']:.6f} s")
    print(f"min:        {stats['min_s']:.6f} s")
    print(f"max:        {stats['max_s']:.6f} s")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the nestseq codec.")
    parser.add_argument(
        "--depth",
        type=int,
        default=150,
        help="Nesting depth of the deep structure (must not exceed NESTSEQ_MAX_DEPTH).",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=10_000,
        help="Number of groups in the wide structure.",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=20,
        help="Number of repetitions per measurement.",
    )
    args = parser.parse_args()

    def deep():
        return build_deep(args.depth)

    def wide():
        return build_wide(args.width)

    print("=== nestseq codec benchmark ===")
    print(f"depth: {args.depth}  width: {args.width}")
    _print_stats("destructure deep", benchmark(deep, destructure, repeats=args.repeats))
    _print_stats("destructure wide", benchmark(wide, destructure, repeats=args.repeats))
    _print_stats(
        "restructure deep",
        benchmark(lambda: destructure(deep()), restructure, repeats=args.repeats),
    )
    _print_stats(
        "restructure wide",
        benchmark(lambda: destructure(wide()), restructure, repeats=args.repeats),
    )


if __name__ == "__main__":
    main()
