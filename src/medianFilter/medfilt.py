"""
Median filtering along one axis of an array, with the calling convention of
MATLAB's ``medfilt1``.

Usage:
    from medianFilter.medfilt import medfilt1

    medfilt1([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], n=3)
    # array([1., 2., 3., 4., 5., 6., 7., 8., 9., 9.])

    medfilt1(image, n=5, padding="truncate", axis=1)
"""

import logging

import numpy as np
import numpy.typing as npt

from medianFilter.config import get_settings
from medianFilter.models import AUTO_AXIS
from medianFilter.models import FilterOptions
from medianFilter.models import InvalidArgumentError
from medianFilter.models import Padding
from medianFilter.window_runner import WindowRunner

logger = logging.getLogger(__name__)


def result_dtype(dtype: npt.DTypeLike) -> np.dtype:
    """Floating dtypes are kept, everything else is promoted to float64."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def resolve_axis(shape: tuple[int, ...], axis: int | str) -> int:
    """
    Return the non-negative axis to filter along.

    Raises:
        InvalidArgumentError: If no axis is longer than 1, or ``axis`` is out of range
    """
    if not shape or max(shape) <= 1:
        msg = f"There is no non singleton dimension in the input (shape {shape})."
        raise InvalidArgumentError(msg)

    if axis == AUTO_AXIS:
        return next(i for i, length in enumerate(shape) if length > 1)

    ndim = len(shape)
    if not -ndim <= axis < ndim:
        msg = f"The input has only {ndim} dimensions but axis = {axis}."
        raise InvalidArgumentError(msg)
    return axis % ndim


def medfilt1(
    x: npt.ArrayLike,
    n: int | None = None,
    padding: Padding | str | None = None,
    axis: int | str | None = None,
) -> np.ndarray:
    """
    Apply a median filter of window length ``n`` along one axis of ``x``.

    Output i along the axis is the median of the ``n`` samples centered on i
    (x[i - n//2 : i - n//2 + n]). Samples past either end are treated as zeros
    with ``padding="zeropad"`` and are left out with ``padding="truncate"``,
    so the window shrinks towards the edges.

    Args:
        x: Input values, anything ``numpy.asarray`` accepts
        n: Window length, defaults to ``settings.filter.window`` (1 returns ``x``)
        padding: 'zeropad' or 'truncate', defaults to ``settings.filter.padding``
        axis: Axis index or 'auto' (first axis longer than 1), defaults to
            ``settings.filter.axis``

    Returns:
        Array with the shape of ``x``. Floating input keeps its dtype, any other
        input is returned as float64.

    Raises:
        InvalidArgumentError: On a malformed window, padding mode or axis. Raised
            before any filtering happens.
    """
    defaults = get_settings().filter
    options = FilterOptions.parse(
        window=defaults.window if n is None else n,
        padding=defaults.padding if padding is None else padding,
        axis=defaults.axis if axis is None else axis,
    )

    data = np.asarray(x)
    dim = resolve_axis(data.shape, options.axis)

    if options.window == 1:
        return data

    dtype = result_dtype(data.dtype)
    runner = WindowRunner(options.window, options.padding)

    # Filter axis last, so each slice is one row of a 2-D view
    moved = np.moveaxis(data.astype(dtype, copy=False), dim, -1)
    rows = moved.reshape(-1, moved.shape[-1])
    out = np.empty(rows.shape, dtype=dtype)

    logger.debug(
        "medfilt1: shape=%s axis=%d window=%d padding=%s dtype=%s slices=%d",
        data.shape,
        dim,
        options.window,
        options.padding.value,
        dtype,
        rows.shape[0],
    )

    for i, row in enumerate(rows):
        out[i] = runner.run(row.tolist())

    return np.moveaxis(out.reshape(moved.shape), -1, dim)
