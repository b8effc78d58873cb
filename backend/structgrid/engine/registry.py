"""Stage registry: every analysis stage is a standalone function registered via decorator.

Usage:
    @stage(id="S1.01", stage=Stage.CLASSIFICATION, dependencies=["S0.01"])
    def classify_structures(ctx: AnalysisContext) -> None:
        ctx.classified = classify(ctx.records, seed=ctx.seed)

Adding a new stage = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from structgrid.engine.context import AnalysisContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    SCANNING = 0
    CLASSIFICATION = 1
    MAPPING = 2
    PLAYBACK = 3


@dataclass
class StageSpec:
    id: str
    stage: Stage
    fn: Callable[["AnalysisContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of analysis stages, keyed by stage ID."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.stage.name)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort of every registered stage, ties broken by ID."""
        pool = self._stages

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted(sid for sid, d in in_degree.items() if d == 0)
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register an analysis stage."""

    def decorator(fn: Callable[["AnalysisContext"], None]):
        _registry.register(StageSpec(
            id=id,
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        ))
        return fn

    return decorator
