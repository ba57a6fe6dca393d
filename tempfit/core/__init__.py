# tempfit/core/__init__.py
"""
Core domain objects for tempfit.

This module defines the format-agnostic data model and the fitting routines:
- Sample: one parsed input line (time step + readings)
- Series: validated per-channel signal over time
- SeriesSet: all channels of one input on a shared time axis
- Segment / LinearFit / DegenerateFit: fit results

The core layer is independent from I/O and output formats.
"""

from .sample import Sample
from .series import CORE_COUNT, Series, SeriesSet, build_series
from .fits import (
    INTERPOLATION,
    LEAST_SQUARES,
    DegenerateFit,
    FitResult,
    LinearFit,
    Segment,
    is_degenerate,
)
from .interpolation import piecewise_linear
from .least_squares import least_squares
from .exceptions import (
    CoreError,
    InvalidSample,
    InvalidSeries,
    ChannelNotFound,
    InputReadError,
    OutputWriteError,
    DegenerateFitError,
)


__all__ = [
    # data model
    "Sample",
    "Series",
    "SeriesSet",
    "CORE_COUNT",
    "build_series",

    # fits
    "Segment",
    "LinearFit",
    "DegenerateFit",
    "FitResult",
    "INTERPOLATION",
    "LEAST_SQUARES",
    "is_degenerate",
    "piecewise_linear",
    "least_squares",

    # exceptions
    "CoreError",
    "InvalidSample",
    "InvalidSeries",
    "ChannelNotFound",
    "InputReadError",
    "OutputWriteError",
    "DegenerateFitError",
]
