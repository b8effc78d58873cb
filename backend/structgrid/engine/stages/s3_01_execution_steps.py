"""S3.01: Execution Steps.

Flatten every scanned structure into line-ordered playback steps. Uses all
scanned records, not just the selected ones.
"""

from __future__ import annotations

from structgrid.core.steps import build_steps
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage


@stage(
    id="S3.01",
    stage=Stage.PLAYBACK,
    dependencies=["S0.01"],
    description="Build execution steps for playback",
)
def execution_steps(ctx: AnalysisContext) -> None:
    ctx.steps = build_steps(ctx.records)
