from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from zvdo.util.assertx import ValidationError
from zvdo.util.media import SegmentRequest


@dataclass
class FakeMediaTool:
    """Stands in for ffprobe/ffmpeg and writes placeholder HLS output."""

    durations: dict[str, float] = field(default_factory=dict)
    fail_on: str | None = None
    probed: list[Path] = field(default_factory=list)
    requests: list[SegmentRequest] = field(default_factory=list)

    def probe_duration(self, path: Path, cwd: Path) -> float:
        self.probed.append(path)
        return self.durations.get(path.name, 1.0)

    def segment(self, request: SegmentRequest, cwd: Path) -> None:
        self.requests.append(request)
        request.index_path.write_text("#EXTM3U\n", encoding="utf-8")
        (request.output_dir / f"{request.section_id}-000.ts").write_bytes(b"\x47")
        if request.source_path.name == self.fail_on:
            raise ValidationError(f"Command failed (1): ffmpeg -i {request.source_path}")


def make_sources(directory: Path, names: Iterable[str]) -> None:
    for name in names:
        (directory / name).write_bytes(b"")


def counter_ids(prefix: str = "id") -> Callable[[], str]:
    count = 0

    def next_id() -> str:
        nonlocal count
        count += 1
        return f"{prefix}{count}"

    return next_id
