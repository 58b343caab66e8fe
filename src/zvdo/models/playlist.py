from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    slug: str
    description: str
    duration: int = Field(..., ge=0, description="Whole seconds, truncated")
    source: str


class PlaylistModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sections: list[SectionModel] = Field(default_factory=list)
