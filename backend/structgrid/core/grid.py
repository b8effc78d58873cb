"""Grid mapper: project classified structures onto a fixed W×H grid of typed cells.

Every structure claims whole rows in proportion to its instance count; each of
its cells is drawn from the configured state ratios, skewed by the structure's
category. Cells are returned in row-major order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from structgrid.core.classifier import DEFAULT_SEED
from structgrid.core.records import Category, Cell, CellState, ClassifiedStructure, GridConfig

# (active, pointer, dropped) ratio multipliers per category
STATE_MULTIPLIERS: dict[Category, tuple[float, float, float]] = {
    Category.LINKED: (1.2, 1.5, 1.0),
    Category.NESTED: (1.0, 1.8, 1.3),
    Category.SIMPLE: (1.5, 0.5, 0.8),
}


def sample_state(draw: float, active: float, pointer: float, dropped: float) -> CellState:
    """Cumulative-threshold sampling of one uniform draw in [0, 1)."""
    if draw < active:
        return CellState.ACTIVE
    if draw < active + pointer:
        return CellState.POINTER
    if draw < active + pointer + dropped:
        return CellState.DROPPED
    return CellState.EMPTY


def default_grid(config: GridConfig | None = None, seed: int | None = DEFAULT_SEED) -> list[Cell]:
    """Demo grid used when there is nothing to map."""
    config = config or GridConfig()
    if config.size == 0:
        return []

    rng = np.random.default_rng(seed)
    draws = rng.random(config.size)
    cells: list[Cell] = []
    for y in range(config.height):
        for x in range(config.width):
            state = sample_state(
                float(draws[y * config.width + x]),
                config.active_ratio,
                config.pointer_ratio,
                config.dropped_ratio,
            )
            cells.append(Cell(
                x=x,
                y=y,
                state=state,
                label=f"Node_{y}_{x}" if state is not CellState.EMPTY else None,
                note=f"{state.value} cell at ({x}, {y})",
            ))
    return cells


def rows_for(structure: ClassifiedStructure, cells_per_instance: float, width: int) -> int:
    return math.ceil(structure.instance_count * cells_per_instance / width)


def map_to_grid(
    classified: Sequence[ClassifiedStructure],
    config: GridConfig | None = None,
    seed: int | None = DEFAULT_SEED,
) -> list[Cell]:
    """Map structures to a grid of exactly ``width*height`` cells.

    Non-positive dimensions give an empty grid. Rows left over once every
    structure is placed (or when instance counts are all zero) are ``empty``.
    """
    config = config or GridConfig()
    if config.size == 0:
        return []
    if not classified:
        return default_grid(config, seed)

    rng = np.random.default_rng(seed)
    width, height = config.width, config.height
    total_instances = sum(c.instance_count for c in classified) or 1
    cells_per_instance = config.size / total_instances

    cells: list[Cell] = []
    row_cursor = 0
    for structure in classified:
        if row_cursor >= height:
            break
        m_active, m_pointer, m_dropped = STATE_MULTIPLIERS[structure.category]
        active = config.active_ratio * m_active
        pointer = config.pointer_ratio * m_pointer
        dropped = config.dropped_ratio * m_dropped

        rows = rows_for(structure, cells_per_instance, width)
        for y in range(row_cursor, min(row_cursor + rows, height)):
            draws = rng.random(width)
            for x in range(width):
                state = sample_state(float(draws[x]), active, pointer, dropped)
                cells.append(Cell(
                    x=x,
                    y=y,
                    state=state,
                    label=f"{structure.name}_{x}_{y}" if state is not CellState.EMPTY else None,
                    note=f"{structure.name} {state.value} at ({x}, {y})",
                ))
        row_cursor += rows

    while len(cells) < config.size:
        index = len(cells)
        x, y = index % width, index // width
        cells.append(Cell(x=x, y=y, state=CellState.EMPTY, note=f"Empty cell at ({x}, {y})"))

    return cells
