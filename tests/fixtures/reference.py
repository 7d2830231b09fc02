"""
Brute-force median filter used as a test oracle.

Materialises every window and sorts it, O(L * n log n).
"""

import random


def sorted_median(window: list[float]) -> float:
    ordered = sorted(window)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def centered_window(values: list[float], i: int, n: int, padding: str) -> list[float]:
    """Samples of the length-n window centered on i, x[i - n//2 : i - n//2 + n]."""
    lo = i - n // 2
    window = []
    for j in range(lo, lo + n):
        if 0 <= j < len(values):
            window.append(values[j])
        elif padding == "zeropad":
            window.append(0)
    return window


def brute_force_medfilt(values: list[float], n: int, padding: str = "zeropad") -> list[float]:
    if n == 1 or len(values) <= 1:
        return list(values)
    return [sorted_median(centered_window(values, i, n, padding)) for i in range(len(values))]


def random_signal(rng: random.Random, length: int, low: int = -50, high: int = 50) -> list[float]:
    """Integer-valued floats, so medians compare exactly."""
    return [float(rng.randint(low, high)) for _ in range(length)]
