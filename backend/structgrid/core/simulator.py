"""Step simulator: stochastic drift of grid cells during step playback.

Forward steps re-draw a small fraction of cells; backward steps only move the
cursor. There is no undo buffer, so going back leaves the drifted cells in
place.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

import numpy as np

from structgrid.core.classifier import DEFAULT_SEED
from structgrid.core.grid import sample_state
from structgrid.core.records import Cell, CellState, PlaybackState

logger = logging.getLogger(__name__)

MUTATION_PROBABILITY = 0.05
# (active, pointer, dropped); the remaining 20% is empty
DRIFT_RATIOS = (0.4, 0.2, 0.2)


def advance_step(
    grid: Sequence[Cell],
    step: int,
    seed: int | None = DEFAULT_SEED,
    mutation_probability: float = MUTATION_PROBABILITY,
) -> list[Cell]:
    """Return a new grid where each cell has a small chance of a fresh state.

    The generator is keyed on (seed, step), so replaying a step with the same
    seed drifts the same cells the same way.
    """
    rng = np.random.default_rng(None if seed is None else [seed, max(step, 0)])
    n = len(grid)
    mutate = rng.random(n) < mutation_probability
    draws = rng.random(n)

    drifted: list[Cell] = []
    for i, cell in enumerate(grid):
        if not mutate[i]:
            drifted.append(cell)
            continue
        state = sample_state(float(draws[i]), *DRIFT_RATIOS)
        label = None if state is CellState.EMPTY else cell.label
        drifted.append(dataclasses.replace(cell, state=state, label=label))
    return drifted


def retreat_step(step: int) -> int:
    """Move the cursor back one step, never below 0. The grid is not touched."""
    return max(0, step - 1)


class StepSimulator:
    """Clamped step cursor over a fixed number of execution steps."""

    def __init__(
        self,
        total_steps: int,
        seed: int | None = DEFAULT_SEED,
        mutation_probability: float = MUTATION_PROBABILITY,
    ) -> None:
        self.total_steps = max(0, total_steps)
        self.seed = seed
        self.mutation_probability = mutation_probability

    @property
    def last_step(self) -> int:
        return max(0, self.total_steps - 1)

    def clamp(self, step: int) -> int:
        return min(max(step, 0), self.last_step)

    def start(self, grid: Sequence[Cell]) -> PlaybackState:
        return PlaybackState(step=0, total_steps=self.total_steps, grid=tuple(grid))

    def forward(self, state: PlaybackState) -> PlaybackState:
        if state.step >= self.last_step:
            return state
        step = self.clamp(state.step + 1)
        grid = advance_step(state.grid, step, self.seed, self.mutation_probability)
        logger.debug("Advanced to step %d/%d", step, self.total_steps)
        return dataclasses.replace(state, step=step, grid=tuple(grid))

    def backward(self, state: PlaybackState) -> PlaybackState:
        if state.step <= 0:
            return state
        return dataclasses.replace(state, step=self.clamp(retreat_step(state.step)))

    def reset(self, state: PlaybackState) -> PlaybackState:
        if state.step == 0:
            return state
        return dataclasses.replace(state, step=0)
