"""Core records: immutable values flowing between scanner, classifier, mapper and simulator.

Each record serializes to a plain dict with camelCase keys so it can go straight
onto the wire (``to_dict()``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class StructureKind(str, enum.Enum):
    STRUCT = "struct"
    CLASS = "class"
    UNION = "union"


class Category(str, enum.Enum):
    LINKED = "linked"
    NESTED = "nested"
    SIMPLE = "simple"


class CellState(str, enum.Enum):
    ACTIVE = "active"
    DROPPED = "dropped"
    POINTER = "pointer"
    EMPTY = "empty"


class StepKind(str, enum.Enum):
    DEFINITION = "definition"
    MEMBER = "member-decl"
    METHOD = "method-decl"
    END = "end"


@dataclass(frozen=True)
class Member:
    name: str
    declared_type: str
    is_pointer: bool
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "declaredType": self.declared_type,
            "isPointer": self.is_pointer,
            "line": self.line,
        }


@dataclass(frozen=True)
class Method:
    name: str
    return_type: str
    parameters: tuple[str, ...] = ()
    line: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "returnType": self.return_type,
            "parameters": list(self.parameters),
            "line": self.line,
        }


@dataclass(frozen=True)
class StructureRecord:
    """One struct/class/union recovered by a scan pass."""

    name: str
    kind: StructureKind
    start_line: int
    end_line: int
    members: tuple[Member, ...] = ()
    methods: tuple[Method, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "members": [m.to_dict() for m in self.members],
            "methods": [m.to_dict() for m in self.methods],
        }


@dataclass(frozen=True)
class ClassifiedStructure:
    """A StructureRecord plus its category and the synthetic sizing numbers."""

    record: StructureRecord
    category: Category
    instance_count: int
    nesting_depth: int

    @property
    def name(self) -> str:
        return self.record.name

    def to_dict(self) -> dict[str, Any]:
        data = self.record.to_dict()
        data.update({
            "category": self.category.value,
            "instanceCount": self.instance_count,
            "nestingDepth": self.nesting_depth,
        })
        return data


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    state: CellState
    label: str | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "state": self.state.value,
            "label": self.label,
            "note": self.note,
        }


@dataclass(frozen=True)
class ExecutionStep:
    source_line: int
    description: str
    kind: StepKind

    def to_dict(self) -> dict[str, Any]:
        return {
            "sourceLine": self.source_line,
            "description": self.description,
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class GridConfig:
    """Grid dimensions and per-state sampling probabilities.

    Ratios need not sum to 1; whatever is left over is the chance of ``empty``.
    """

    width: int = 12
    height: int = 8
    active_ratio: float = 0.4
    dropped_ratio: float = 0.2
    pointer_ratio: float = 0.2

    @property
    def size(self) -> int:
        if self.width <= 0 or self.height <= 0:
            return 0
        return self.width * self.height


@dataclass(frozen=True)
class PlaybackState:
    """Step cursor plus the grid snapshot it currently shows."""

    step: int = 0
    total_steps: int = 0
    grid: tuple[Cell, ...] = field(default_factory=tuple)
