from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class SegmentRequest:
    source_path: Path
    section_id: str
    output_dir: Path
    segment_seconds: int
    watermark_path: Path | None = None
    overlay_position: str = "1780:940"

    @property
    def index_path(self) -> Path:
        return self.output_dir / f"{self.section_id}.m3u8"

    @property
    def segment_pattern(self) -> Path:
        return self.output_dir / f"{self.section_id}-%03d.ts"


class MediaTool(Protocol):
    def probe_duration(self, path: Path, cwd: Path) -> float: ...

    def segment(self, request: SegmentRequest, cwd: Path) -> None: ...
