"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from structgrid.models.analysis import AnalysisOutput, CellModel, GridStats, WireModel


class HealthResponse(WireModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class AnalyzeResponse(WireModel):
    analysis_id: int
    analysis: AnalysisOutput
    processing_time_ms: float = 0.0
    stages_completed: int = 0
    stages_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)


class GridResponse(WireModel):
    grid: list[CellModel] = Field(default_factory=list)
    grid_text: str = ""
    stats: GridStats = Field(default_factory=GridStats)


class FileResponse(WireModel):
    id: int
    name: str
    content: str
    size: int
    uploaded_at: str


class FileSummary(WireModel):
    id: int
    name: str
    size: int
    uploaded_at: str


class AnalysisRecordResponse(WireModel):
    id: int
    file_id: int | None = None
    status: str = "completed"
    analysis: AnalysisOutput
    errors: dict[str, str] = Field(default_factory=dict)
    created_at: str = ""


class PlaybackResponse(WireModel):
    analysis_id: int
    step: int = 0
    total_steps: int = 0
    description: str = ""
    grid: list[CellModel] = Field(default_factory=list)
    grid_text: str = ""
    stats: GridStats = Field(default_factory=GridStats)


class MessageResponse(BaseModel):
    message: str
