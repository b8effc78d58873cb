"""S1.01: Pattern Classification.

Label each structure linked / nested / simple and attach its synthetic
instance count and nesting depth.
"""

from __future__ import annotations

from structgrid.core.classifier import classify
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage


@stage(
    id="S1.01",
    stage=Stage.CLASSIFICATION,
    dependencies=["S0.01"],
    description="Classify structures as linked, nested or simple",
)
def pattern_classification(ctx: AnalysisContext) -> None:
    ctx.classified = classify(ctx.records, seed=ctx.seed)
