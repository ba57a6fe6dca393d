# tempfit/core/sample.py
from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidSample


@dataclass(frozen=True, slots=True)
class Sample:
    """
    One parsed input line.

    - time_step: seconds since the first line (derived from the line index)
    - readings: numeric tokens of the line, left to right
    - line_index: 0-based position of the line in the input
    """
    time_step: int
    readings: tuple[float, ...] = field(default_factory=tuple)
    line_index: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.time_step, bool) or not isinstance(self.time_step, int):
            raise InvalidSample("Sample.time_step must be an integer.")
        if self.time_step < 0:
            raise InvalidSample("Sample.time_step must be non-negative.")

        try:
            readings = tuple(float(r) for r in self.readings)
        except (TypeError, ValueError) as e:
            raise InvalidSample("Sample.readings must be a sequence of numbers.") from e
        object.__setattr__(self, "readings", readings)

    @property
    def n(self) -> int:
        return len(self.readings)

    def is_complete(self, channel_count: int) -> bool:
        return len(self.readings) >= channel_count
