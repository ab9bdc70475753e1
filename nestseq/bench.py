# nestseq/bench.py
"""
Tiny benchmarking helper for nestseq operations.

This is intentionally simple and does not depend on any external libs.

Usage:

    from nestseq.bench import benchmark
    from nestseq import destructure, from_py

    stats = benchmark(lambda: from_py([[1, 2], [3]]), destructure, repeats=20)
    print(stats)

You can also use the CLI helper in bench_nestseq.py
"""

from __future__ import annotations
import time
from typing import Any, Callable, Dict

from nestseq.core.structure import Seq


def benchmark(
    builder: Callable[[], Seq],
    fn: Callable[[Seq], Any],
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Run `fn(builder())` `repeats` times, timing only `fn`.

    Returns a small stats dict:
        {
            "repeats": N,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    times = []

    for _ in range(repeats):
        value = builder()
        t0 = time.perf_counter()
        _ = fn(value)
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }


def build_deep(depth: int, atom: Any = 0) -> Seq:
    """seq(atom, seq(atom, seq(...))) nested `depth` levels below the root."""
    s = Seq.from_iterable([atom])
    for _ in range(depth):
        s = Seq.from_iterable([atom, s])
    return s


def build_wide(width: int, fanout: int = 4) -> Seq:
    """`width` groups of `fanout` consecutive ints, one level deep."""
    return Seq.from_iterable(
        Seq.from_iterable(range(i * fanout, (i + 1) * fanout)) for i in range(width)
    )
