from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from tempfit.core import CoreError
from tempfit.io.pipeline import process_file
from tempfit.logging_config import configure_logging
from tempfit.settings import DegeneratePolicy, load_settings

app = typer.Typer(
    help="Fit per-core temperature logs with piecewise-linear and least-squares lines.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


@app.command()
def main(
    input_file: Path = typer.Argument(..., dir_okay=False, help="Temperature log to process."),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        file_okay=False,
        help="Directory for the per-core output files (defaults to the current directory).",
    ),
    on_degenerate: DegeneratePolicy = typer.Option(
        DegeneratePolicy.error,
        "--on-degenerate",
        case_sensitive=False,
        help="Abort on a zero-denominator fit, or write its non-finite values.",
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Diagnostic log level."),
) -> None:
    """Write <input>-core-0N.txt for each core of INPUT_FILE."""
    try:
        settings = load_settings(
            output_dir=output_dir,
            on_degenerate=on_degenerate,
            log_level=log_level,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    configure_logging(settings.log_level)

    try:
        written = process_file(input_file, settings)
    except CoreError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    for path in written:
        typer.echo(str(path))


if __name__ == "__main__":
    app()
