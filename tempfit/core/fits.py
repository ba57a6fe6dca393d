# tempfit/core/fits.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

INTERPOLATION = "interpolation"
LEAST_SQUARES = "least-squares"


@dataclass(frozen=True, slots=True)
class Segment:
    """
    Piecewise-linear piece between two consecutive points.

    The intercept is taken at the right endpoint:
    intercept = y[k+1] - slope * x[k+1].
    """
    x_lo: float
    x_hi: float
    intercept: float
    slope: float

    @property
    def label(self) -> str:
        return INTERPOLATION

    def __call__(self, x: float) -> float:
        return self.intercept + self.slope * x


@dataclass(frozen=True, slots=True)
class LinearFit:
    """Least-squares line over a whole Series; x_lo/x_hi are its first and last time steps."""
    x_lo: float
    x_hi: float
    intercept: float
    slope: float

    @property
    def label(self) -> str:
        return LEAST_SQUARES

    def __call__(self, x: float) -> float:
        return self.intercept + self.slope * x


@dataclass(frozen=True, slots=True)
class DegenerateFit:
    """
    A fit whose denominator was zero.

    intercept/slope keep the non-finite values the raw arithmetic produced,
    so a caller may either reject the fit or write them out unchanged.
    """
    kind: str
    x_lo: float
    x_hi: float
    intercept: float
    slope: float
    reason: str

    @property
    def label(self) -> str:
        return self.kind

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.intercept) and math.isfinite(self.slope)


FitResult = Union[Segment, LinearFit, DegenerateFit]


def time_bound(x) -> float | int:
    # integer time steps stay integers so they print without a decimal part
    if isinstance(x, (int, np.integer)) and not isinstance(x, bool):
        return int(x)
    return float(x)


def is_degenerate(result: FitResult) -> bool:
    return isinstance(result, DegenerateFit)
