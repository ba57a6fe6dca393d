# tempfit/core/exceptions.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .fits import DegenerateFit


class CoreError(Exception):
    """Base error for all core-domain exceptions."""


# ---- Validation / construction errors ----
class InvalidSample(CoreError):
    """Raised when a Sample is constructed with invalid inputs."""


class InvalidSeries(CoreError):
    """Raised when a Series / SeriesSet is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel index is not present."""


# ---- I/O errors (also behave like OSError) ----
class InputReadError(CoreError, OSError):
    """Raised when the temperature input cannot be opened or read."""


class OutputWriteError(CoreError, OSError):
    """Raised when a per-channel output file cannot be written."""


# ---- Numeric errors ----
class DegenerateFitError(CoreError, ArithmeticError):
    """Raised when a fit has a zero denominator and the caller rejects it."""

    def __init__(self, fit: "DegenerateFit", channel: int | None = None) -> None:
        self.fit = fit
        self.channel = channel
        where = f"channel {channel}: " if channel is not None else ""
        super().__init__(
            f"{where}degenerate {fit.kind} fit on "
            f"{fit.x_lo} <= x <= {fit.x_hi} ({fit.reason})"
        )
