"""Tests for grid rendering utilities."""

from structgrid.core.grid import default_grid
from structgrid.core.records import Cell, CellState, GridConfig
from structgrid.utils.rasterizer import grid_shape, grid_stats, grid_to_array, grid_to_text


def _row(*states: CellState) -> list[Cell]:
    return [Cell(x=i, y=0, state=s) for i, s in enumerate(states)]


def test_grid_to_text_dimensions():
    text = grid_to_text(default_grid(GridConfig(width=5, height=3)))
    rows = text.split("\n")
    assert len(rows) == 3
    assert all(len(r.split(" ")) == 5 for r in rows)


def test_grid_to_text_symbols():
    cells = _row(CellState.ACTIVE, CellState.POINTER, CellState.DROPPED, CellState.EMPTY)
    assert grid_to_text(cells) == "# > x ."


def test_grid_to_array():
    arr = grid_to_array(_row(CellState.EMPTY, CellState.ACTIVE))
    assert arr.shape == (1, 2)
    assert arr.tolist() == [[0, 1]]


def test_empty_grid():
    assert grid_shape([]) == (0, 0)
    assert grid_to_text([]) == ""
    assert grid_stats([]) == {
        "total": 0, "empty": 0, "active": 0, "pointer": 0, "dropped": 0,
        "efficiency": 0, "utilization": 0,
    }


def test_grid_stats():
    cells = _row(CellState.ACTIVE, CellState.ACTIVE, CellState.POINTER, CellState.EMPTY)
    stats = grid_stats(cells)
    assert stats["total"] == 4
    assert stats["active"] == 2
    assert stats["pointer"] == 1
    assert stats["dropped"] == 0
    assert stats["empty"] == 1
    assert stats["efficiency"] == 75
    assert stats["utilization"] == 75


def test_grid_stats_rounds_half_up():
    cells = _row(CellState.ACTIVE, *[CellState.EMPTY] * 7)
    assert grid_stats(cells)["efficiency"] == 13
