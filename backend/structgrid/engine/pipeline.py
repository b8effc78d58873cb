"""Pipeline orchestrator: runs analysis stages in dependency order."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Iterable
from typing import Any

from structgrid.core.records import GridConfig
from structgrid.engine.config import EngineConfig
from structgrid.engine.context import AnalysisContext
from structgrid.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the analysis stages."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or EngineConfig()

    def new_context(
        self,
        source: str,
        *,
        seed: int | None = None,
        grid_config: GridConfig | None = None,
        selected: Iterable[str] | None = None,
    ) -> AnalysisContext:
        """Context for ``source`` with engine defaults for anything not given."""
        return AnalysisContext(
            source=source,
            seed=self.config.seed if seed is None else seed,
            grid_config=grid_config or self.config.grid_config(),
            selected=list(selected or []),
        )

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d stages queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_stages.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages, %d structures in %.0fms",
            len(ctx.completed_stages),
            len(ordered),
            ctx.num_structures,
            total,
        )
        return ctx

    def run_streaming(self, ctx: AnalysisContext) -> Generator[dict[str, Any], None, None]:
        """Run the pipeline, yielding a progress dict before and after each stage.

        The caller's ``ctx`` is mutated in-place, so after the generator is
        exhausted the context contains all results (same as ``run()``).
        """
        ordered = self.registry.resolve_order()
        total = len(ordered)

        for i, spec in enumerate(ordered):
            event = {
                "stage_id": spec.id,
                "description": spec.description,
                "stage": spec.stage.name,
                "index": i,
                "total": total,
                "elapsed_ms": 0.0,
                "status": "running",
                "error": "",
            }
            yield dict(event)

            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_stages.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                event["status"] = "error"
                event["error"] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
            else:
                event["status"] = "ok"

            event["elapsed_ms"] = round((time.perf_counter() - t0) * 1000, 1)
            yield event


def create_pipeline(config: EngineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)
