"""StructGrid core: scanner, classifier, grid mapper and step simulator."""

from structgrid.core.classifier import DEFAULT_SEED, classify, select_structures
from structgrid.core.grid import default_grid, map_to_grid
from structgrid.core.records import (
    Category,
    Cell,
    CellState,
    ClassifiedStructure,
    ExecutionStep,
    GridConfig,
    Member,
    Method,
    PlaybackState,
    StepKind,
    StructureKind,
    StructureRecord,
)
from structgrid.core.scanner import scan
from structgrid.core.simulator import StepSimulator, advance_step, retreat_step
from structgrid.core.steps import build_steps

__all__ = [
    "DEFAULT_SEED",
    "scan",
    "classify",
    "select_structures",
    "map_to_grid",
    "default_grid",
    "build_steps",
    "advance_step",
    "retreat_step",
    "StepSimulator",
    "Category",
    "Cell",
    "CellState",
    "ClassifiedStructure",
    "ExecutionStep",
    "GridConfig",
    "Member",
    "Method",
    "PlaybackState",
    "StepKind",
    "StructureKind",
    "StructureRecord",
]
