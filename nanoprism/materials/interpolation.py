"""
Local four-point interpolation of tabulated optical constants.
"""

import numpy as np


def interpolate(x_arr, y_arr, x_val):
    """
    Cubic Lagrange interpolation through four neighbouring samples.

    The bracket index ``i`` is the last abscissa not exceeding ``x_val``,
    clamped to ``[1, n - 3]``, and the cubic through the points
    ``i - 1, i, i + 1, i + 2`` is evaluated at ``x_val``.  Queries at or
    beyond the last abscissa find no bracket and fall back to the first
    window, queries below the first abscissa use the first window as well.
    No range check is made here.

    Parameters
    ----------
    x_arr : array_like, shape (n,)
        Strictly ascending abscissae, n >= 4
    y_arr : array_like, shape (n,)
        Function values
    x_val : float or array_like
        Argument(s) to interpolate for

    Returns
    -------
    y : float or ndarray
        Interpolated value(s), same shape as x_val
    """
    x_arr = np.asarray(x_arr, dtype=float)
    y_arr = np.asarray(y_arr, dtype=float)
    n = x_arr.size
    if n < 4:
        raise ValueError(f"Four-point interpolation needs at least 4 samples, got {n}")
    if y_arr.size != n:
        raise ValueError(f"Size mismatch: {n} abscissae, {y_arr.size} values")

    x = np.asarray(x_val, dtype=float)

    # first j >= 1 with x_arr[j] > x, j == n when there is none
    j = np.maximum(np.searchsorted(x_arr, x, side='right'), 1)
    i = np.where(j < n, j - 1, 0)
    i = np.clip(i, 1, n - 3)

    x0, x1, x2, x3 = x_arr[i - 1], x_arr[i], x_arr[i + 1], x_arr[i + 2]
    y0, y1, y2, y3 = y_arr[i - 1], y_arr[i], y_arr[i + 1], y_arr[i + 2]

    return ((x - x1) * (x - x2) * (x - x3) * y0 / ((x0 - x1) * (x0 - x2) * (x0 - x3))
            + (x - x0) * (x - x2) * (x - x3) * y1 / ((x1 - x0) * (x1 - x2) * (x1 - x3))
            + (x - x0) * (x - x1) * (x - x3) * y2 / ((x2 - x0) * (x2 - x1) * (x2 - x3))
            + (x - x0) * (x - x1) * (x - x2) * y3 / ((x3 - x0) * (x3 - x1) * (x3 - x2)))
