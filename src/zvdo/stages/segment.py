from __future__ import annotations

"""Stage C: segment.

Probes and segments each source video in order and derives its playlist
section. The first failing file stops the run; segments already written stay
on disk.
"""

import logging
from pathlib import Path
from typing import Callable

from zvdo.models.playlist import SectionModel
from zvdo.options import ConvertOptions
from zvdo.util.assertx import assert_in_out_dir
from zvdo.util.logging import log_indent
from zvdo.util.media import MediaTool, SegmentRequest
from zvdo.util.naming import new_section_id, parse_source_name

LOGGER = logging.getLogger(__name__)


def process_video(
    filename: str,
    options: ConvertOptions,
    media_tool: MediaTool,
    id_factory: Callable[[], str] = new_section_id,
) -> SectionModel:
    name = parse_source_name(filename)
    section_id = id_factory()
    source_path = options.working_dir / filename

    duration = int(media_tool.probe_duration(source_path, cwd=options.working_dir))
    LOGGER.info("duration: %ds", duration)

    request = SegmentRequest(
        source_path=source_path,
        section_id=section_id,
        output_dir=options.output_dir,
        segment_seconds=options.segment_seconds,
        watermark_path=options.watermark_path,
        overlay_position=options.overlay_position,
    )
    assert_in_out_dir(request.index_path, options.output_dir)
    media_tool.segment(request, cwd=options.working_dir)
    LOGGER.info("wrote %s", request.index_path.name)

    return SectionModel(
        title=name.title,
        slug=name.slug,
        description=name.title,
        duration=duration,
        source=f"{options.base_url}{section_id}.m3u8",
    )


def run(
    filenames: list[str],
    options: ConvertOptions,
    media_tool: MediaTool,
    id_factory: Callable[[], str] = new_section_id,
) -> list[SectionModel]:
    sections: list[SectionModel] = []
    for position, filename in enumerate(filenames, start=1):
        LOGGER.info("Section %d/%d: %s", position, len(filenames), filename)
        with log_indent():
            sections.append(
                process_video(filename, options, media_tool, id_factory=id_factory)
            )
    return sections
