from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from zvdo.util.assertx import ValidationError, assert_dir_exists, assert_true

DEFAULT_OUTPUT = "output"
DEFAULT_SEGMENT = "30"
DEFAULT_OVERLAY = "1780:940"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConvertOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    working_dir: Path
    output_dir: Path
    base_url: str
    segment_seconds: int = Field(..., gt=0)
    watermark_path: Path | None = None
    overlay_position: str = DEFAULT_OVERLAY


def parse_segment_seconds(value: str) -> int:
    # Reads the leading integer like JavaScript parseInt: "30s" -> 30, "1.5" -> 1.
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValidationError("Invalid segment time")
    seconds = int(match.group(1))
    assert_true(seconds > 0, "Invalid segment time")
    return seconds


def _absolute(path: Path) -> Path:
    # Normalizes ".." without following symlinks, so a linked output dir stays a link.
    return Path(os.path.abspath(path))


def resolve_options(
    base: str | None,
    cwd: Path | None = None,
    output: str = DEFAULT_OUTPUT,
    segment: str = DEFAULT_SEGMENT,
    watermark: str | None = None,
    overlay: str = DEFAULT_OVERLAY,
) -> ConvertOptions:
    """Validate raw CLI values into run options.

    Nothing is created or removed here; every check runs before the output
    directory is touched.
    """
    if base is None:
        raise ValidationError("Missing base URL")
    segment_seconds = parse_segment_seconds(segment)

    working_dir = (cwd if cwd is not None else Path.cwd()).resolve()
    assert_dir_exists(working_dir, f"{cwd or working_dir} is not a directory")

    return ConvertOptions(
        working_dir=working_dir,
        output_dir=_absolute(working_dir / output),
        base_url=base,
        segment_seconds=segment_seconds,
        watermark_path=_absolute(working_dir / watermark) if watermark else None,
        overlay_position=overlay,
    )
