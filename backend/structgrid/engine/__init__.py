"""StructGrid analysis engine."""

from structgrid.engine.registry import stage, Stage, get_registry
from structgrid.engine.context import AnalysisContext
from structgrid.engine.pipeline import Pipeline

__all__ = [
    "stage",
    "Stage",
    "get_registry",
    "AnalysisContext",
    "Pipeline",
]
