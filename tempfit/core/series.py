# tempfit/core/series.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

import numpy as np

from .exceptions import ChannelNotFound, InvalidSeries
from .sample import Sample

logger = logging.getLogger(__name__)

CORE_COUNT = 4


def _validate_arrays(t: np.ndarray, v: np.ndarray) -> None:
    if t.ndim != 1:
        raise InvalidSeries(f"`time` must be 1D, got shape {t.shape}")
    if v.ndim != 1:
        raise InvalidSeries(f"`values` must be 1D, got shape {v.shape}")
    if t.size != v.size:
        raise InvalidSeries(
            f"`time` and `values` must have same length, got {t.size} vs {v.size}"
        )

    if t.size > 0:
        if not np.isfinite(t).all():
            raise InvalidSeries("`time` contains non-finite values (NaN/Inf).")
        if np.any(np.diff(t) < 0):
            raise InvalidSeries("`time` must be monotonic non-decreasing.")


@dataclass(frozen=True, slots=True)
class Series:
    """Immutable readings of one channel: 1D time vector + 1D values vector."""

    channel: int
    time: np.ndarray = field(repr=False)
    values: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.channel, bool) or not isinstance(self.channel, int) or self.channel < 0:
            raise InvalidSeries("Series.channel must be a non-negative integer.")

        t = np.asarray(self.time)
        v = np.asarray(self.values, dtype=float)
        _validate_arrays(t, v)

        object.__setattr__(self, "time", t)
        object.__setattr__(self, "values", v)

    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def t_start(self) -> float | None:
        return None if self.n == 0 else float(self.time[0])

    @property
    def t_end(self) -> float | None:
        return None if self.n == 0 else float(self.time[-1])

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.values.copy()
        return self.time, self.values


@dataclass(frozen=True, slots=True)
class SeriesSet:
    """
    All channel Series of one input, sharing a single time axis.

    Design goals:
    - easy access: series_set[2]
    - aligned: every Series has exactly the shared time vector
    - skipped: line indices that were too short to contribute
    """
    time: np.ndarray = field(repr=False)
    channels: Mapping[int, Series] = field(default_factory=dict, repr=False)
    skipped: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        t = np.asarray(self.time)
        if not isinstance(self.channels, Mapping):
            raise InvalidSeries("SeriesSet.channels must be a mapping (e.g., dict).")

        normalized: dict[int, Series] = {}
        for key, s in self.channels.items():
            if not isinstance(s, Series):
                raise InvalidSeries("SeriesSet.channels values must be Series instances.")
            if s.channel != key:
                raise InvalidSeries(
                    f"Channel mismatch: key {key} but Series.channel is {s.channel}."
                )
            if s.n != t.size or not np.array_equal(s.time, t):
                raise InvalidSeries(f"Series for channel {key} is not aligned with the shared time axis.")
            normalized[key] = s

        object.__setattr__(self, "time", t)
        object.__setattr__(self, "channels", dict(sorted(normalized.items())))
        object.__setattr__(self, "skipped", tuple(self.skipped))

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[int]:
        return iter(self.channels)

    def __contains__(self, channel: object) -> bool:
        return channel in self.channels

    def keys(self) -> Iterable[int]:
        return self.channels.keys()

    def items(self) -> Iterable[tuple[int, Series]]:
        return self.channels.items()

    def values(self) -> Iterable[Series]:
        return self.channels.values()

    def __getitem__(self, channel: int) -> Series:
        try:
            return self.channels[channel]
        except KeyError as e:
            raise ChannelNotFound(channel) from e

    @property
    def n(self) -> int:
        return int(self.time.size)


def build_series(samples: Iterable[Sample], channel_count: int = CORE_COUNT) -> SeriesSet:
    """
    Demultiplex Samples into one Series per channel.

    A Sample contributes to every channel only if it has at least
    `channel_count` readings; shorter Samples are logged and skipped for all
    channels. Readings past `channel_count` are ignored.
    """
    if isinstance(channel_count, bool) or not isinstance(channel_count, int) or channel_count < 1:
        raise InvalidSeries("channel_count must be a positive integer.")

    times: list[int] = []
    columns: list[list[float]] = [[] for _ in range(channel_count)]
    skipped: list[int] = []

    for position, sample in enumerate(samples):
        line_index = sample.line_index if sample.line_index is not None else position
        if not sample.is_complete(channel_count):
            logger.warning(
                "Incomplete temperature data on line %d: expected %d readings, got %d",
                line_index + 1,
                channel_count,
                sample.n,
                extra={"line_number": line_index + 1, "reading_count": sample.n},
            )
            skipped.append(line_index)
            continue

        times.append(sample.time_step)
        for c in range(channel_count):
            columns[c].append(sample.readings[c])

    time = np.asarray(times, dtype=np.int64)
    channels = {
        c: Series(channel=c, time=time, values=np.asarray(columns[c], dtype=float))
        for c in range(channel_count)
    }
    return SeriesSet(time=time, channels=channels, skipped=tuple(skipped))
