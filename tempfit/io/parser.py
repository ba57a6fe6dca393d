from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, TextIO

from tempfit.core import InputReadError, Sample

TIME_STEP_SIZE = 30

# A delimiter is a run of non-digits ending in whitespace, or the trailing
# non-digit run of the line ("+61.0°C  +58.0°C" -> "+61.0", "+58.0").
_LINE_DELIM_RE = re.compile(r"[^0-9]*\s+|[^0-9]*$")

# ASCII decimal literal, optional sign and exponent; no "_" grouping or non-ASCII digits.
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def tokenize_line(line: str) -> tuple[float, ...]:
    """Split a raw line into its numeric readings.

    Tokens that are not plain decimal numbers are dropped.

    Examples
    --------
    "10 20 30 40"   -> (10.0, 20.0, 30.0, 40.0)
    "abc 10 def 20" -> (10.0, 20.0)
    ""              -> ()
    """
    readings: list[float] = []
    for token in _LINE_DELIM_RE.split(line.strip()):
        if _FLOAT_RE.fullmatch(token) is None:
            continue
        readings.append(float(token))
    return tuple(readings)


def parse_lines(lines: Iterable[str]) -> list[Sample]:
    """Turn raw lines into Samples, one per line, in input order.

    The time step is derived from the line position: index * TIME_STEP_SIZE.
    """
    return [
        Sample(time_step=idx * TIME_STEP_SIZE, readings=tokenize_line(line), line_index=idx)
        for idx, line in enumerate(lines)
    ]


def split_lines(text: str) -> list[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line.

    Other control characters (form feed, lone "\r", ...) stay inside the line,
    so line positions and time steps follow the "\n" count.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_temperatures(stream: TextIO) -> list[Sample]:
    """Read a text stream to the end and parse every line."""
    try:
        lines = split_lines(stream.read())
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read temperature data: {e}") from e
    return parse_lines(lines)


def read_temperature_file(path: str | Path) -> list[Sample]:
    """Open `path` and parse its temperature data.

    Raises InputReadError if the file cannot be opened or read.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return read_temperatures(f)
    except InputReadError:
        raise
    except OSError as e:
        raise InputReadError(f"Failed to open temperature file '{path}': {e}") from e
