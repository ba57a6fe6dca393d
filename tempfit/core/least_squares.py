# tempfit/core/least_squares.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from .exceptions import InvalidSeries
from .fits import LEAST_SQUARES, DegenerateFit, FitResult, LinearFit, time_bound
from .series import Series


def least_squares(
    times: Sequence[float] | np.ndarray,
    values: Sequence[float] | np.ndarray,
) -> FitResult:
    """
    Ordinary least-squares line through all points.

    With Sx = sum(t), Sy = sum(v), Sxx = sum(t^2), Sxy = sum(t*v) and
    det = n*Sxx - Sx^2:

        slope     = (n*Sxy - Sx*Sy) / det
        intercept = (Sy*Sxx - Sx*Sxy) / det

    Returns a DegenerateFit when det == 0 (a single point, or all times equal).
    """
    t = np.asarray(times, dtype=float)
    v = np.asarray(values, dtype=float)
    if t.ndim != 1 or v.ndim != 1:
        raise InvalidSeries("`times` and `values` must be 1D.")
    if t.size != v.size:
        raise InvalidSeries(
            f"`times` and `values` must have same length, got {t.size} vs {v.size}"
        )
    if t.size == 0:
        raise InvalidSeries("least-squares fit needs at least one point.")

    n = float(t.size)
    sx = t.sum()
    sy = v.sum()
    sxx = (t * t).sum()
    sxy = (t * v).sum()
    det = n * sxx - sx * sx

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = (n * sxy - sx * sy) / det
        intercept = (sy * sxx - sx * sxy) / det

    bounds = np.asarray(times)
    x_lo, x_hi = time_bound(bounds[0]), time_bound(bounds[-1])
    if det == 0:
        return DegenerateFit(
            kind=LEAST_SQUARES,
            x_lo=x_lo,
            x_hi=x_hi,
            intercept=float(intercept),
            slope=float(slope),
            reason="zero determinant",
        )
    return LinearFit(x_lo=x_lo, x_hi=x_hi, intercept=float(intercept), slope=float(slope))


def fit_series(series: Series) -> FitResult:
    return least_squares(series.time, series.values)
