#!/usr/bin/env python3
"""
Performance benchmark for the heap-based median filter.

Compares medfilt1 against a sort-every-window baseline:
- signal length fixed, window n = 3, 7, 15, 31, ... 1023
- heap filter should grow roughly with log n, the baseline with n log n
"""

import logging
import math
import random
import time

import numpy as np

from medianFilter.config import LoggingSettings
from medianFilter.config import configure_logging
from medianFilter.medfilt import medfilt1

logger = logging.getLogger(__name__)


def sort_per_window(values: list[float], n: int) -> list[float]:
    """Zero-padded centered median, one full sort per output sample."""
    padded = [0.0] * (n // 2) + values + [0.0] * n
    out = []
    for i in range(len(values)):
        window = sorted(padded[i : i + n])
        mid = n // 2
        out.append(window[mid] if n % 2 else (window[mid - 1] + window[mid]) / 2)
    return out


def benchmark_window_scaling(length: int = 20_000):
    print(f"\n{'='*70}")
    print(f"Benchmark: Window Scaling (signal length {length:,})")
    print(f"{'='*70}")

    rng = random.Random(0)
    values = [rng.uniform(-100, 100) for _ in range(length)]

    print(f"\n{'Window':<10} {'Heap (ms)':<12} {'Sort (ms)':<12} {'Speedup':<10}")
    print(f"{'-'*45}")

    results = []
    for n in [3, 7, 15, 31, 63, 127, 255, 511, 1023]:
        start = time.perf_counter()
        heap_result = medfilt1(values, n=n)
        heap_ms = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        sort_result = sort_per_window(values, n)
        sort_ms = (time.perf_counter() - start) * 1000

        if not np.allclose(heap_result, sort_result):
            logger.error("Result mismatch for window %d", n)

        print(f"{n:<10,} {heap_ms:<12.1f} {sort_ms:<12.1f} {sort_ms / heap_ms:<10.1f}x")
        results.append((n, heap_ms))

    print(f"\nVerification: as the window doubles, heap time should grow by ~log ratio:")
    for i in range(1, len(results)):
        prev_n, prev_ms = results[i - 1]
        curr_n, curr_ms = results[i]
        log_ratio = math.log2(curr_n) / math.log2(prev_n)
        print(f"  {prev_n:,} -> {curr_n:,}: log n ×{log_ratio:.2f}, time ×{curr_ms / prev_ms:.2f}")


def benchmark_multi_axis(shape=(64, 2_000), n: int = 31):
    print(f"\n{'='*70}")
    print(f"Benchmark: 2-D input {shape}, window {n}")
    print(f"{'='*70}")

    data = np.random.default_rng(0).normal(size=shape)
    for padding in ("zeropad", "truncate"):
        start = time.perf_counter()
        medfilt1(data, n=n, padding=padding, axis=1)
        elapsed = time.perf_counter() - start
        per_sample = elapsed / data.size * 1_000_000
        print(f"  {padding:<9} {elapsed:.3f}s ({per_sample:.2f} μs per sample)")

    print(f"{'='*70}\n")


if __name__ == "__main__":
    configure_logging(LoggingSettings(file_enabled=False))
    benchmark_window_scaling()
    benchmark_multi_axis()
