"""
Drives a MedianTracker across a 1-D signal and aligns the output.

Both edge policies emit one median per tracker update and then cut out the
``len(x)`` medians whose windows are centered on the input samples, matching
MATLAB's ``medfilt1``: output i is the median of x[i - n//2 : i - n//2 + n].
"""

import logging
import math
from collections.abc import Sequence

from medianFilter.median_tracker import MedianTracker
from medianFilter.models import Padding

logger = logging.getLogger(__name__)


class WindowRunner:
    """
    One-dimensional median filter with a fixed edge policy.

    Usage:
        runner = WindowRunner(window=3, padding=Padding.TRUNCATE)
        runner.run([5, 1, 9, 2, 8])  # [3.0, 5, 2, 8, 5.0]

    A new MedianTracker is created for every ``run`` call.
    """

    def __init__(self, window: int, padding: Padding = Padding.ZEROPAD, pad_value: float = 0):
        """
        Args:
            window: Window length n, must be positive
            padding: Edge policy
            pad_value: Value used for ZEROPAD padding samples
        """
        if window <= 0:
            raise ValueError("window must be positive")
        self._window = window
        self._padding = Padding(padding)
        self._pad_value = pad_value

    @property
    def window(self) -> int:
        return self._window

    @property
    def padding(self) -> Padding:
        return self._padding

    def run(self, values: Sequence[float]) -> list[float]:
        """Return the filtered signal, same length as ``values``."""
        values = list(values)
        if self._window == 1 or len(values) <= 1:
            return values

        if self._padding is Padding.ZEROPAD:
            medians = self._run_zeropad(values)
            start = self._window + math.ceil(self._window / 2) - 2
        else:
            medians = self._run_truncate(values)
            start = math.ceil(self._window / 2) - 1

        logger.debug(
            "%s pass: %d samples, window %d, %d medians emitted, keeping [%d:%d]",
            self._padding.value,
            len(values),
            self._window,
            len(medians),
            start,
            start + len(values),
        )
        return medians[start : start + len(values)]

    def _run_zeropad(self, values: list[float]) -> list[float]:
        pad = [self._pad_value] * (self._window - 1)
        tracker = MedianTracker(window_limit=self._window)
        return [tracker.observe(value) for value in pad + values + pad]

    def _run_truncate(self, values: list[float]) -> list[float]:
        """
        Grow the window from 1 to n, hold it while input remains, then shrink it
        one sample per step until a single sample is left.

        ``span`` counts update steps and reaches n exactly when the tracker's
        window fills up; while input remains, ``observe`` evicts on its own.
        """
        tracker = MedianTracker(window_limit=self._window)
        medians = [tracker.observe(values[0]), tracker.observe(values[1])]

        span = 2
        position = 2
        while len(tracker) > 1:
            if position < len(values):
                medians.append(tracker.observe(values[position]))
                position += 1
            elif span >= self._window:
                medians.append(tracker.evict())
            else:
                # Input shorter than the window: hold until the span catches up
                medians.append(tracker.median)
            span += 1
        return medians
