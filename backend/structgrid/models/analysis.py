"""Wire models for analysis output: camelCase on the wire, snake_case in Python."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemberModel(WireModel):
    name: str
    declared_type: str
    is_pointer: bool = False
    line: int = 1


class MethodModel(WireModel):
    name: str
    return_type: str
    parameters: list[str] = Field(default_factory=list)
    line: int = 1


class StructureModel(WireModel):
    name: str
    kind: Literal["struct", "class", "union"] = "struct"
    start_line: int = 1
    end_line: int = 1
    members: list[MemberModel] = Field(default_factory=list)
    methods: list[MethodModel] = Field(default_factory=list)


class ClassifiedModel(StructureModel):
    category: Literal["linked", "nested", "simple"] = "simple"
    instance_count: int = 0
    nesting_depth: int = 1


class CellModel(WireModel):
    x: int
    y: int
    state: Literal["active", "dropped", "pointer", "empty"]
    label: str | None = None
    note: str | None = None


class StepModel(WireModel):
    source_line: int
    description: str
    kind: Literal["definition", "member-decl", "method-decl", "end"]


class GridStats(WireModel):
    total: int = 0
    active: int = 0
    pointer: int = 0
    dropped: int = 0
    empty: int = 0
    efficiency: int = 0
    utilization: int = 0


class AnalysisOutput(WireModel):
    """Everything one pipeline run produces."""

    structures: list[StructureModel] = Field(default_factory=list)
    classified: list[ClassifiedModel] = Field(default_factory=list)
    grid: list[CellModel] = Field(default_factory=list)
    grid_text: str = ""
    stats: GridStats = Field(default_factory=GridStats)
    steps: list[StepModel] = Field(default_factory=list)
    total_steps: int = 0
