from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from zvdo.options import DEFAULT_OUTPUT, DEFAULT_OVERLAY, DEFAULT_SEGMENT, resolve_options
from zvdo.pipeline import run_pipeline
from zvdo.util.assertx import ValidationError
from zvdo.util.logging import configure_logging

PROGRAM_NAME = "zvdo"
VERSION = "1.0.0"
# typer reports usage errors (unknown option, missing value) with status 2.
USAGE_ERROR_CODE = 2

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME}/{VERSION}")
        raise typer.Exit(code=0)


@app.command(
    help=f"{PROGRAM_NAME}/{VERSION}\n\n"
    "Convert numbered <index>-<title>.mp4 files into HLS segments "
    "and a _playlist.yml manifest.",
)
def main(
    cwd: Optional[Path] = typer.Argument(
        None, help="Current working directory, default is the process cwd"
    ),
    base: Optional[str] = typer.Option(
        None, "--base", "-b", help="Base URL for m3u8 files"
    ),
    output: str = typer.Option(
        DEFAULT_OUTPUT, "--output", "-o", help="Output directory for m3u8 files"
    ),
    segment: str = typer.Option(
        DEFAULT_SEGMENT, "--segment", "-s", help="Segment time for m3u8 files"
    ),
    watermark: Optional[str] = typer.Option(
        None, "--watermark", "-w", help="Watermark image path"
    ),
    overlay: str = typer.Option(
        DEFAULT_OVERLAY, "--overlay", help="Overlay position for watermark"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        is_eager=True,
        callback=_version_callback,
        help="Display version number",
    ),
) -> None:
    configure_logging()
    try:
        options = resolve_options(
            base=base,
            cwd=cwd,
            output=output,
            segment=segment,
            watermark=watermark,
            overlay=overlay,
        )
        run_pipeline(options)
    except ValidationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def run() -> None:
    """Console entry point; parser usage errors exit with status 1."""
    try:
        app()
    except SystemExit as exc:
        if exc.code == USAGE_ERROR_CODE:
            sys.exit(1)
        raise


if __name__ == "__main__":
    run()
