from __future__ import annotations

"""Stage D: playlist.

Writes the aggregated ``_playlist.yml`` once every section has been
segmented.
"""

from pathlib import Path

from zvdo.models.playlist import PlaylistModel, SectionModel
from zvdo.util.assertx import assert_in_out_dir
from zvdo.util.io import read_yaml, write_yaml

PLAYLIST_NAME = "_playlist.yml"


def run(sections: list[SectionModel], output_dir: Path) -> PlaylistModel:
    playlist = PlaylistModel(sections=sections)
    path = output_dir / PLAYLIST_NAME
    assert_in_out_dir(path, output_dir)
    write_yaml(path, playlist)
    return playlist


def read_playlist(path: Path) -> PlaylistModel:
    return read_yaml(path, PlaylistModel)
