"""Tests for edge policies and output alignment of the 1-D runner."""

import random

import pytest

from fixtures.reference import brute_force_medfilt
from fixtures.reference import random_signal
from medianFilter.models import Padding
from medianFilter.window_runner import WindowRunner


def test_zeropad_ramp():
    runner = WindowRunner(window=3, padding=Padding.ZEROPAD)
    result = runner.run([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    assert result == [1, 2, 3, 4, 5, 6, 7, 8, 9, 9]


def test_truncate_example():
    runner = WindowRunner(window=3, padding=Padding.TRUNCATE)
    assert runner.run([5, 1, 9, 2, 8]) == [3, 5, 2, 8, 5]


def test_zeropad_constant_pulls_first_edge_down():
    result = WindowRunner(window=2).run([3.0, 3.0, 3.0, 3.0])
    assert result == [1.5, 3.0, 3.0, 3.0]
    assert all(value <= 3 for value in result)


def test_truncate_even_window():
    runner = WindowRunner(window=2, padding=Padding.TRUNCATE)
    assert runner.run([4.0, 8.0, 2.0]) == [4.0, 6.0, 5.0]


def test_window_longer_than_input():
    assert WindowRunner(5, Padding.TRUNCATE).run([2.0, 4.0]) == [3.0, 3.0]
    assert WindowRunner(5, Padding.ZEROPAD).run([2.0, 4.0]) == [0.0, 0.0]


def test_window_one_returns_input():
    values = [3.0, 1.0, 2.0]
    result = WindowRunner(1).run(values)
    assert result == values
    assert result is not values


@pytest.mark.parametrize("padding", list(Padding))
def test_short_inputs(padding):
    runner = WindowRunner(4, padding)
    assert runner.run([]) == []
    assert runner.run([7.5]) == [7.5]


def test_pad_value():
    runner = WindowRunner(3, Padding.ZEROPAD, pad_value=100)
    assert runner.run([1.0, 2.0, 3.0]) == [2.0, 2.0, 3.0]


def test_invalid_window():
    with pytest.raises(ValueError):
        WindowRunner(0)


def test_invalid_padding():
    with pytest.raises(ValueError):
        WindowRunner(3, "reflect")


@pytest.mark.parametrize("padding", ["zeropad", "truncate"])
def test_matches_brute_force(padding):
    rng = random.Random(2024)
    for length in range(1, 13):
        for _ in range(3):
            values = random_signal(rng, length)
            for window in range(1, length + 3):
                expected = brute_force_medfilt(values, window, padding)
                result = WindowRunner(window, Padding(padding)).run(values)
                assert len(result) == length
                assert result == pytest.approx(expected), (values, window)


@pytest.mark.parametrize("padding", list(Padding))
def test_constant_signal(padding):
    values = [2.5] * 9
    result = WindowRunner(5, padding).run(values)
    if padding is Padding.TRUNCATE:
        assert result == values
    else:
        assert result[2:-2] == values[2:-2]
        assert all(0 <= value <= 2.5 for value in result)
