from __future__ import annotations

"""Stage B: inputs.

Lists the source videos of the working directory in processing order. The
order returned here is the order of the sections in the playlist.
"""

import logging
from pathlib import Path

from zvdo.util.assertx import ValidationError
from zvdo.util.naming import SOURCE_SUFFIX

LOGGER = logging.getLogger(__name__)


def list_source_videos(working_dir: Path) -> list[str]:
    names = [
        path.name
        for path in working_dir.iterdir()
        if path.name.endswith(SOURCE_SUFFIX) and path.is_file()
    ]
    return sorted(names)


def run(working_dir: Path) -> list[str]:
    names = list_source_videos(working_dir)
    if not names:
        raise ValidationError(f"No mp4 files found in {working_dir}")
    LOGGER.info("Found %d source videos in %s", len(names), working_dir)
    return names
