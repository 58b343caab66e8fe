from __future__ import annotations

import uuid
from dataclasses import dataclass

from zvdo.util.assertx import ValidationError

SOURCE_SUFFIX = ".mp4"
INDEX_SEPARATOR = "-"


@dataclass(frozen=True)
class SourceName:
    filename: str
    index: str
    title: str

    @property
    def slug(self) -> str:
        return f"v{pad_index(self.index)}"


def pad_index(index: str, width: int = 2) -> str:
    # Pads the token as text: "7" -> "07", "123" -> "123", "a" -> "0a".
    return index.rjust(width, "0")


def parse_source_name(filename: str) -> SourceName:
    """Split ``<index>-<title>.mp4`` at the first separator."""
    index, separator, rest = filename.partition(INDEX_SEPARATOR)
    if not separator:
        raise ValidationError(f"Malformed source filename: {filename}")
    title = rest[: -len(SOURCE_SUFFIX)] if rest.endswith(SOURCE_SUFFIX) else rest
    return SourceName(filename=filename, index=index, title=title)


def new_section_id() -> str:
    return uuid.uuid4().hex
