from __future__ import annotations

"""Stage A: prepare.

Empties the output directory before any conversion runs. Whatever was there
from an earlier run is discarded without prompting.
"""

import logging
import shutil
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def run(output_dir: Path) -> Path:
    if output_dir.is_symlink():
        LOGGER.info("Removing output link: %s", output_dir)
        output_dir.unlink()
    elif output_dir.is_dir():
        LOGGER.info("Removing previous output: %s", output_dir)
        shutil.rmtree(output_dir)
    elif output_dir.exists():
        output_dir.unlink()
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir
