from __future__ import annotations

import logging
from typing import Callable

from zvdo.backends.ffmpeg import FfmpegMediaTool
from zvdo.models.playlist import PlaylistModel
from zvdo.options import ConvertOptions
from zvdo.stages import (
    inputs as inputs_stage,
    playlist as playlist_stage,
    prepare as prepare_stage,
    segment as segment_stage,
)
from zvdo.util.media import MediaTool
from zvdo.util.naming import new_section_id

LOGGER = logging.getLogger(__name__)


def run_pipeline(
    options: ConvertOptions,
    media_tool: MediaTool | None = None,
    id_factory: Callable[[], str] = new_section_id,
) -> PlaylistModel:
    tool = media_tool if media_tool is not None else FfmpegMediaTool()

    LOGGER.info("Stage start: %s", "prepare")
    prepare_stage.run(options.output_dir)

    LOGGER.info("Stage start: %s", "inputs")
    filenames = inputs_stage.run(options.working_dir)

    LOGGER.info("Stage start: %s", "segment")
    sections = segment_stage.run(filenames, options, tool, id_factory=id_factory)

    LOGGER.info("Stage start: %s", "playlist")
    playlist = playlist_stage.run(sections, options.output_dir)
    LOGGER.info(
        "Wrote %d sections to %s",
        len(playlist.sections),
        options.output_dir / playlist_stage.PLAYLIST_NAME,
    )
    return playlist
