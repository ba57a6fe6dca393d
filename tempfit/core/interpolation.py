# tempfit/core/interpolation.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from .exceptions import InvalidSeries
from .fits import INTERPOLATION, DegenerateFit, FitResult, Segment, time_bound
from .series import Series


def piecewise_linear(
    times: Sequence[float] | np.ndarray,
    values: Sequence[float] | np.ndarray,
) -> list[FitResult]:
    """
    One linear piece per consecutive pair of points.

    For k in 0..n-2:
        slope     = (values[k+1] - values[k]) / (times[k+1] - times[k])
        intercept = values[k+1] - slope * times[k+1]

    Fewer than two points give an empty list. A zero time interval gives a
    DegenerateFit at that position instead of a Segment.
    """
    t = np.asarray(times)
    v = np.asarray(values, dtype=float)
    if t.ndim != 1 or v.ndim != 1:
        raise InvalidSeries("`times` and `values` must be 1D.")
    if t.size != v.size:
        raise InvalidSeries(
            f"`times` and `values` must have same length, got {t.size} vs {v.size}"
        )
    if t.size < 2:
        return []

    dt = np.diff(t).astype(float)
    dv = np.diff(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        slopes = dv / dt
        intercepts = v[1:] - slopes * t[1:]

    out: list[FitResult] = []
    for k in range(t.size - 1):
        x_lo, x_hi = time_bound(t[k]), time_bound(t[k + 1])
        if dt[k] == 0:
            out.append(
                DegenerateFit(
                    kind=INTERPOLATION,
                    x_lo=x_lo,
                    x_hi=x_hi,
                    intercept=float(intercepts[k]),
                    slope=float(slopes[k]),
                    reason="zero-length time interval",
                )
            )
            continue
        out.append(
            Segment(
                x_lo=x_lo,
                x_hi=x_hi,
                intercept=float(intercepts[k]),
                slope=float(slopes[k]),
            )
        )
    return out


def fit_series(series: Series) -> list[FitResult]:
    return piecewise_linear(series.time, series.values)
