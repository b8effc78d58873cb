"""S1.02: Structure Selection.

Narrow the classified structures to the caller's selection before mapping.
Names that match nothing are ignored.
"""

from __future__ import annotations

import logging

from structgrid.core.classifier import select_structures
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import Stage, stage

logger = logging.getLogger(__name__)


@stage(
    id="S1.02",
    stage=Stage.CLASSIFICATION,
    dependencies=["S1.01"],
    description="Apply structure selection",
)
def structure_selection(ctx: AnalysisContext) -> None:
    ctx.mapped = select_structures(ctx.classified, ctx.selected)
    unknown = set(ctx.selected) - {c.name for c in ctx.classified}
    if unknown:
        logger.debug("Ignoring unknown structure names: %s", sorted(unknown))
