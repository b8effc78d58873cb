"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from structgrid.core.records import GridConfig
from structgrid.models.analysis import WireModel


class GridConfigModel(WireModel):
    width: int = Field(default=12, ge=0, le=512, description="Grid width in cells")
    height: int = Field(default=8, ge=0, le=512, description="Grid height in cells")
    active_ratio: float = Field(default=0.4, ge=0.0, le=1.0)
    dropped_ratio: float = Field(default=0.2, ge=0.0, le=1.0)
    pointer_ratio: float = Field(default=0.2, ge=0.0, le=1.0)

    def to_config(self) -> GridConfig:
        return GridConfig(
            width=self.width,
            height=self.height,
            active_ratio=self.active_ratio,
            dropped_ratio=self.dropped_ratio,
            pointer_ratio=self.pointer_ratio,
        )


class AnalyzeRequest(WireModel):
    source: str = Field(..., description="Raw C/C++ source text")
    grid: GridConfigModel | None = Field(default=None, description="Grid override")
    seed: int | None = Field(default=None, ge=0, description="Seed override")
    structures: list[str] = Field(
        default_factory=list,
        description="Structure names to map onto the grid (empty = all)",
    )


class AnalyzeFileRequest(WireModel):
    grid: GridConfigModel | None = None
    seed: int | None = Field(default=None, ge=0)
    structures: list[str] = Field(default_factory=list)


class GridStructureIn(WireModel):
    name: str = Field(..., min_length=1)
    category: Literal["linked", "nested", "simple"] = "simple"
    instance_count: int = Field(default=1, ge=0)
    nesting_depth: int = Field(default=1, ge=1)


class GridRequest(WireModel):
    structures: list[GridStructureIn] = Field(default_factory=list)
    config: GridConfigModel = Field(default_factory=GridConfigModel)
    seed: int | None = Field(default=None, ge=0)


class FileCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, description="File name")
    content: str = Field(..., description="File contents")
