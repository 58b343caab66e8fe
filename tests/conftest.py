from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import FakeMediaTool, make_sources


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    work = tmp_path / "videos"
    work.mkdir()
    make_sources(work, ["01-Intro.mp4", "02-Outro.mp4"])
    return work


@pytest.fixture
def fake_tool() -> FakeMediaTool:
    return FakeMediaTool(durations={"01-Intro.mp4": 12.7, "02-Outro.mp4": 5.2})
