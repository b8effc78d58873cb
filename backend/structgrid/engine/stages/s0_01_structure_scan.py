"""S0.01: Structure Scan. ALWAYS FIRST

Line-oriented scan of the raw source into StructureRecords.
"""

from __future__ import annotations

from structgrid.core.scanner import scan
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage


@stage(
    id="S0.01",
    stage=Stage.SCANNING,
    description="Scan source for struct/class/union declarations",
)
def structure_scan(ctx: AnalysisContext) -> None:
    ctx.records = scan(ctx.source)
