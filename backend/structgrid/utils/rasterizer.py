"""Grid rendering utilities: cell list to state array, text grid, occupancy stats."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from structgrid.core.records import Cell, CellState

# Integer codes for the state array, in display order.
STATE_CODES: dict[CellState, int] = {
    CellState.EMPTY: 0,
    CellState.ACTIVE: 1,
    CellState.POINTER: 2,
    CellState.DROPPED: 3,
}

STATE_SYMBOLS: dict[CellState, str] = {
    CellState.EMPTY: ".",
    CellState.ACTIVE: "#",
    CellState.POINTER: ">",
    CellState.DROPPED: "x",
}


def grid_shape(cells: Sequence[Cell]) -> tuple[int, int]:
    """(height, width) implied by the cell coordinates."""
    if not cells:
        return (0, 0)
    return (max(c.y for c in cells) + 1, max(c.x for c in cells) + 1)


def grid_to_array(cells: Sequence[Cell]) -> NDArray[np.int8]:
    """Convert a row-major cell list to a height×width array of state codes."""
    height, width = grid_shape(cells)
    arr = np.zeros((height, width), dtype=np.int8)
    for c in cells:
        arr[c.y, c.x] = STATE_CODES[c.state]
    return arr


def grid_to_text(cells: Sequence[Cell]) -> str:
    """One text row per grid row: ``#`` active, ``>`` pointer, ``x`` dropped, ``.`` empty."""
    symbols = {code: STATE_SYMBOLS[state] for state, code in STATE_CODES.items()}
    rows = []
    for row in grid_to_array(cells):
        rows.append(" ".join(symbols[int(v)] for v in row))
    return "\n".join(rows)


def _percent(part: int, total: int) -> int:
    # Half-up, not banker's rounding
    return math.floor(part / total * 100 + 0.5)


def grid_stats(cells: Sequence[Cell]) -> dict[str, Any]:
    """Per-state counts plus efficiency and utilization percentages."""
    codes = np.array([STATE_CODES[c.state] for c in cells], dtype=np.int8)
    counts = {state.value: int(np.sum(codes == code)) for state, code in STATE_CODES.items()}
    total = len(cells)
    stats: dict[str, Any] = {"total": total, **counts}

    if total == 0:
        stats["efficiency"] = 0
        stats["utilization"] = 0
        return stats

    stats["efficiency"] = _percent(counts["active"] + counts["pointer"], total)
    stats["utilization"] = _percent(total - counts["empty"], total)
    return stats
