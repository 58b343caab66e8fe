from __future__ import annotations

from pathlib import Path

import pytest

from zvdo.options import resolve_options
from zvdo.pipeline import run_pipeline
from zvdo.stages.playlist import PLAYLIST_NAME, read_playlist
from zvdo.util.assertx import ValidationError
from tests.helpers import FakeMediaTool, counter_ids, make_sources


def test_pipeline_stub_e2e(source_dir: Path, fake_tool: FakeMediaTool) -> None:
    options = resolve_options(base="https://cdn.example.com/", cwd=source_dir)
    (options.output_dir).mkdir()
    (options.output_dir / "leftover.ts").write_bytes(b"")

    playlist = run_pipeline(options, media_tool=fake_tool, id_factory=counter_ids())

    assert [section.model_dump() for section in playlist.sections] == [
        {
            "title": "Intro",
            "slug": "v01",
            "description": "Intro",
            "duration": 12,
            "source": "https://cdn.example.com/id1.m3u8",
        },
        {
            "title": "Outro",
            "slug": "v02",
            "description": "Outro",
            "duration": 5,
            "source": "https://cdn.example.com/id2.m3u8",
        },
    ]
    assert read_playlist(options.output_dir / PLAYLIST_NAME) == playlist
    assert sorted(path.name for path in options.output_dir.iterdir()) == [
        PLAYLIST_NAME,
        "id1-000.ts",
        "id1.m3u8",
        "id2-000.ts",
        "id2.m3u8",
    ]


def test_pipeline_rerun_changes_only_sources(
    source_dir: Path, fake_tool: FakeMediaTool
) -> None:
    options = resolve_options(base="/media/", cwd=source_dir)

    first = run_pipeline(options, media_tool=fake_tool)
    second = run_pipeline(options, media_tool=fake_tool)

    def stable(section):
        return section.model_dump(exclude={"source"})

    assert [stable(s) for s in first.sections] == [stable(s) for s in second.sections]
    assert {s.source for s in first.sections}.isdisjoint(s.source for s in second.sections)


def test_pipeline_sections_follow_filename_order(tmp_path: Path) -> None:
    make_sources(tmp_path, ["3-Three.mp4", "10-Ten.mp4", "02-Two.mp4", "cover.jpg"])
    options = resolve_options(base="/media/", cwd=tmp_path)

    playlist = run_pipeline(options, media_tool=FakeMediaTool())

    assert [section.slug for section in playlist.sections] == ["v02", "v10", "v03"]


def test_pipeline_without_sources_leaves_empty_output(tmp_path: Path) -> None:
    options = resolve_options(base="/media/", cwd=tmp_path)
    options.output_dir.mkdir()
    (options.output_dir / "old.m3u8").write_text("#EXTM3U\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="No mp4 files found"):
        run_pipeline(options, media_tool=FakeMediaTool())

    assert options.output_dir.is_dir()
    assert list(options.output_dir.iterdir()) == []


def test_pipeline_failure_writes_no_playlist(source_dir: Path) -> None:
    options = resolve_options(base="/media/", cwd=source_dir)
    tool = FakeMediaTool(fail_on="02-Outro.mp4")

    with pytest.raises(ValidationError):
        run_pipeline(options, media_tool=tool, id_factory=counter_ids())

    assert not (options.output_dir / PLAYLIST_NAME).exists()
    assert (options.output_dir / "id1.m3u8").is_file()
    assert (options.output_dir / "id2.m3u8").is_file()
