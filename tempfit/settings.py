from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from tempfit.core import CORE_COUNT

DEFAULT_LOG_LEVEL = "INFO"


class DegeneratePolicy(str, Enum):
    error = "error"
    propagate = "propagate"


@dataclass(frozen=True)
class Settings:
    output_dir: Optional[Path] = None
    on_degenerate: DegeneratePolicy = DegeneratePolicy.error
    channel_count: int = CORE_COUNT
    log_level: str = DEFAULT_LOG_LEVEL


def _read_policy(value: DegeneratePolicy | str | None) -> DegeneratePolicy:
    if value is None:
        return DegeneratePolicy.error
    try:
        return DegeneratePolicy(value)
    except ValueError as e:
        choices = ", ".join(p.value for p in DegeneratePolicy)
        raise ValueError(f"on_degenerate must be one of: {choices}") from e


def _read_log_level(value: Optional[str]) -> str:
    if value is None:
        return DEFAULT_LOG_LEVEL
    candidate = value.strip().upper()
    if not candidate:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(candidate), int):
        raise ValueError(f"Unknown log level: {value!r}")
    return candidate


def load_settings(
    output_dir: str | Path | None = None,
    on_degenerate: DegeneratePolicy | str | None = None,
    channel_count: Optional[int] = None,
    log_level: Optional[str] = None,
) -> Settings:
    if channel_count is None:
        channel_count = CORE_COUNT
    elif channel_count < 1:
        raise ValueError("channel_count must be a positive integer.")
    return Settings(
        output_dir=Path(output_dir) if output_dir is not None else None,
        on_degenerate=_read_policy(on_degenerate),
        channel_count=channel_count,
        log_level=_read_log_level(log_level),
    )
