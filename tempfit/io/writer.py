from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

from tempfit.core import FitResult, OutputWriteError

LINE_FORMAT = "{x_lo:>6} <= x <= {x_hi:>6} ; y = {intercept:>10} + {slope:>10} x ; {label}"


def _bound(x: float) -> float | int:
    # 30.0 prints as "30"
    return int(x) if float(x).is_integer() else x


def _coefficient(x: float) -> str:
    # NaN is spelled "NaN"; "inf" and "-inf" keep Python's spelling
    return "NaN" if math.isnan(x) else f"{x:.4f}"


def format_line(result: FitResult) -> str:
    """Render one fit result as a fixed-width description line."""
    return LINE_FORMAT.format(
        x_lo=_bound(result.x_lo),
        x_hi=_bound(result.x_hi),
        intercept=_coefficient(result.intercept),
        slope=_coefficient(result.slope),
        label=result.label,
    )


def output_path(input_path: str | Path, channel: int, output_dir: str | Path | None = None) -> Path:
    """Output file for `channel`: <input stem>-core-0<channel>.txt."""
    base = Path(output_dir) if output_dir is not None else Path.cwd()
    return base / f"{Path(input_path).stem}-core-{channel:02d}.txt"


def write_channel_file(path: str | Path, lines: Iterable[str]) -> Path:
    """Write `lines` in order, one per line, replacing any existing file."""
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
    except OSError as e:
        raise OutputWriteError(f"Failed to write output file '{path}': {e}") from e
    return path
