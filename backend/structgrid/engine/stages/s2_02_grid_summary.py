"""S2.02: Grid Summary.

Occupancy statistics and the text rendering of the mapped grid.
"""

from __future__ import annotations

from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage
from structgrid.utils.rasterizer import grid_stats, grid_to_text


@stage(
    id="S2.02",
    stage=Stage.MAPPING,
    dependencies=["S2.01"],
    description="Compute grid statistics and text rendering",
)
def grid_summary(ctx: AnalysisContext) -> None:
    ctx.stats = grid_stats(ctx.grid)
    ctx.grid_text = grid_to_text(ctx.grid)
