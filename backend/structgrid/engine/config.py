"""Engine configuration: defaults for a pipeline run, built from Settings."""

from __future__ import annotations

from dataclasses import dataclass

from structgrid.core.classifier import DEFAULT_SEED
from structgrid.core.records import GridConfig


@dataclass
class EngineConfig:
    """Defaults applied when a request does not override them."""

    # Grid
    grid_width: int = 12
    grid_height: int = 8
    active_ratio: float = 0.4
    dropped_ratio: float = 0.2
    pointer_ratio: float = 0.2

    # Randomness
    seed: int | None = DEFAULT_SEED

    # Playback drift
    mutation_probability: float = 0.05

    def grid_config(self) -> GridConfig:
        return GridConfig(
            width=self.grid_width,
            height=self.grid_height,
            active_ratio=self.active_ratio,
            dropped_ratio=self.dropped_ratio,
            pointer_ratio=self.pointer_ratio,
        )

    @classmethod
    def from_settings(cls, settings) -> EngineConfig:
        return cls(
            grid_width=settings.grid_width,
            grid_height=settings.grid_height,
            active_ratio=settings.active_ratio,
            dropped_ratio=settings.dropped_ratio,
            pointer_ratio=settings.pointer_ratio,
            seed=settings.structgrid_seed,
            mutation_probability=settings.mutation_probability,
        )
