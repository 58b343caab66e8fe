from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from zvdo.util.assertx import ValidationError
from zvdo.util.media import SegmentRequest
from zvdo.util.process import run_process

LOGGER = logging.getLogger(__name__)


def build_probe_command(tool_name: str, path: Path) -> list[str]:
    return [
        tool_name,
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=noprint_wrappers=1:nokey=1",
        str(path),
    ]


def build_segment_command(tool_name: str, request: SegmentRequest) -> list[str]:
    command = [tool_name, "-i", str(request.source_path)]
    if request.watermark_path is not None:
        command += [
            "-i",
            str(request.watermark_path),
            "-filter_complex",
            f"overlay={request.overlay_position}",
            "-c:v",
            "h264_nvenc",
            "-c:a",
            "aac",
        ]
    else:
        command += ["-c", "copy"]
    command += [
        "-map",
        "0",
        "-f",
        "segment",
        "-segment_time",
        str(request.segment_seconds),
        "-segment_list",
        str(request.index_path),
        "-segment_format",
        "mpegts",
        str(request.segment_pattern),
    ]
    return command


def parse_duration(value: str) -> float:
    text = value.strip()
    try:
        duration = float(text)
    except ValueError as exc:
        raise ValidationError(f"Invalid ffprobe duration: {text}") from exc
    if not math.isfinite(duration) or duration < 0:
        raise ValidationError(f"Invalid ffprobe duration: {text}")
    return duration


@dataclass
class FfmpegMediaTool:
    ffprobe: str = "ffprobe"
    ffmpeg: str = "ffmpeg"

    def probe_duration(self, path: Path, cwd: Path) -> float:
        result = run_process(build_probe_command(self.ffprobe, path), cwd=cwd)
        return parse_duration(result.stdout)

    def segment(self, request: SegmentRequest, cwd: Path) -> None:
        command = build_segment_command(self.ffmpeg, request)
        LOGGER.debug("ffmpeg command: %s", " ".join(command))
        run_process(command, cwd=cwd)
