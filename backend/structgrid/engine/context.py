"""AnalysisContext: the single mutable state object flowing through all stages.

Stages read the previous stage's output and replace their own field wholesale;
the core records they hold are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from structgrid.core.classifier import DEFAULT_SEED
from structgrid.core.records import (
    Cell,
    ClassifiedStructure,
    ExecutionStep,
    GridConfig,
    StructureRecord,
)


@dataclass
class AnalysisContext:
    """Shared state for one analysis run."""

    # Raw source text
    source: str = ""
    # Seed for classification numbers, grid sampling and step drift
    seed: int | None = DEFAULT_SEED
    grid_config: GridConfig = field(default_factory=GridConfig)
    # Structure names to map; empty = all
    selected: list[str] = field(default_factory=list)

    # --- Stage outputs ---
    records: list[StructureRecord] = field(default_factory=list)
    classified: list[ClassifiedStructure] = field(default_factory=list)
    # Subset of classified that actually goes onto the grid
    mapped: list[ClassifiedStructure] = field(default_factory=list)
    grid: list[Cell] = field(default_factory=list)
    grid_text: str = ""
    stats: dict[str, Any] = field(default_factory=dict)
    steps: list[ExecutionStep] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_structures(self) -> int:
        return len(self.records)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "structures": [r.to_dict() for r in self.records],
            "classified": [c.to_dict() for c in self.classified],
            "grid": [c.to_dict() for c in self.grid],
            "gridText": self.grid_text,
            "stats": dict(self.stats),
            "steps": [s.to_dict() for s in self.steps],
            "totalSteps": self.total_steps,
        }
