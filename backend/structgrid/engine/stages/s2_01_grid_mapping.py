"""S2.01: Grid Mapping. PRIMARY

Project the selected structures onto the configured grid. With nothing to
map, the demo grid is produced instead.
"""

from __future__ import annotations

from structgrid.core.grid import map_to_grid
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage


@stage(
    id="S2.01",
    stage=Stage.MAPPING,
    dependencies=["S1.02"],
    description="Map structures onto the cell grid",
)
def grid_mapping(ctx: AnalysisContext) -> None:
    ctx.grid = map_to_grid(ctx.mapped, ctx.grid_config, seed=ctx.seed)
