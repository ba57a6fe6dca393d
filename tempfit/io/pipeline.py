# tempfit/io/pipeline.py
from __future__ import annotations

import logging
from pathlib import Path

from tempfit.core import DegenerateFitError, FitResult, Series, build_series, is_degenerate
from tempfit.core.interpolation import fit_series as fit_piecewise
from tempfit.core.least_squares import fit_series as fit_least_squares
from tempfit.io.parser import read_temperature_file
from tempfit.io.writer import format_line, output_path, write_channel_file
from tempfit.settings import DegeneratePolicy, Settings, load_settings

logger = logging.getLogger(__name__)


def _resolve(result: FitResult, channel: int, policy: DegeneratePolicy) -> FitResult:
    if not is_degenerate(result):
        return result
    if policy is DegeneratePolicy.error:
        raise DegenerateFitError(result, channel=channel)
    logger.warning(
        "Writing non-finite %s fit on %s <= x <= %s",
        result.kind,
        result.x_lo,
        result.x_hi,
        extra={"channel": channel, "reason": result.reason},
    )
    return result


def fit_channel(
    series: Series,
    on_degenerate: DegeneratePolicy | str = DegeneratePolicy.error,
) -> list[str]:
    """
    Fit one channel and render its output lines.

    Interpolation lines come first (one per consecutive pair), followed by a
    single least-squares line. An empty series yields no lines.
    """
    policy = DegeneratePolicy(on_degenerate)
    if series.n == 0:
        logger.warning(
            "No complete samples; nothing to fit",
            extra={"channel": series.channel},
        )
        return []

    lines = [
        format_line(_resolve(r, series.channel, policy))
        for r in fit_piecewise(series)
    ]
    lines.append(format_line(_resolve(fit_least_squares(series), series.channel, policy)))
    return lines


def process_file(path: str | Path, settings: Settings | None = None) -> list[Path]:
    """
    Parse `path`, fit every channel and write one output file per channel.

    Returns the written paths in channel order. Any I/O failure or (under the
    "error" policy) degenerate fit aborts the run.
    """
    settings = settings or load_settings()
    samples = read_temperature_file(path)
    series_set = build_series(samples, channel_count=settings.channel_count)
    logger.debug(
        "Parsed %d lines, %d complete",
        len(samples),
        series_set.n,
        extra={"path": str(path)},
    )

    written: list[Path] = []
    for channel, series in series_set.items():
        lines = fit_channel(series, settings.on_degenerate)
        target = output_path(path, channel, settings.output_dir)
        write_channel_file(target, lines)
        logger.info(
            "Wrote %s",
            target,
            extra={"channel": channel, "segment_count": max(len(lines) - 1, 0)},
        )
        written.append(target)
    return written
