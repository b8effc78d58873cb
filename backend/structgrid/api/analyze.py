"""POST /api/analyze: full pipeline analysis."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from structgrid.config import settings
from structgrid.core.simulator import StepSimulator
from structgrid.dependencies import get_analysis_store, get_pipeline
from structgrid.engine.context import AnalysisContext
from structgrid.engine.pipeline import Pipeline
from structgrid.models.analysis import AnalysisOutput
from structgrid.models.requests import AnalyzeRequest
from structgrid.models.responses import AnalyzeResponse
from structgrid.store.memory import AnalysisStore, PlaybackSession

logger = logging.getLogger(__name__)

router = APIRouter()


_SENTINEL = object()  # marks end of queue


def check_source_size(source: str) -> None:
    size = len(source.encode("utf-8"))
    if size > settings.structgrid_max_source_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Source is {size} bytes; limit is {settings.structgrid_max_source_bytes}",
        )


def new_context(pipeline: Pipeline, source: str, req) -> AnalysisContext:
    return pipeline.new_context(
        source,
        seed=req.seed,
        grid_config=req.grid.to_config() if req.grid is not None else None,
        selected=req.structures,
    )


def store_analysis(
    ctx: AnalysisContext,
    pipeline: Pipeline,
    store: AnalysisStore,
    elapsed_ms: float,
    file_id: int | None = None,
) -> AnalyzeResponse:
    """Record the run and open a playback session for it."""
    result = ctx.to_dict()
    record = store.create_analysis(result, file_id=file_id, errors=ctx.errors)

    simulator = StepSimulator(
        ctx.total_steps,
        seed=ctx.seed,
        mutation_probability=pipeline.config.mutation_probability,
    )
    store.save_session(PlaybackSession(
        analysis_id=record.id,
        simulator=simulator,
        state=simulator.start(ctx.grid),
        steps=list(ctx.steps),
    ))

    return AnalyzeResponse(
        analysis_id=record.id,
        analysis=AnalysisOutput.model_validate(result),
        processing_time_ms=round(elapsed_ms, 1),
        stages_completed=len(ctx.completed_stages),
        stages_failed=len(ctx.errors),
        errors=ctx.errors,
    )


def run_analysis(
    ctx: AnalysisContext,
    pipeline: Pipeline,
    store: AnalysisStore,
    file_id: int | None = None,
) -> AnalyzeResponse:
    start = time.perf_counter()
    ctx = pipeline.run(ctx)
    elapsed = (time.perf_counter() - start) * 1000
    return store_analysis(ctx, pipeline, store, elapsed, file_id=file_id)


async def _stream_analyze(
    ctx: AnalysisContext,
    pipeline: Pipeline,
    store: AnalysisStore,
) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        """Sync pipeline in thread; pushes progress dicts onto the async queue."""
        try:
            for progress in pipeline.run_streaming(ctx):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        except Exception as e:
            # Stage failures are caught per stage; this is ordering or registry trouble
            logger.exception("Streaming pipeline aborted")
            ctx.errors["pipeline"] = str(e)
            loop.call_soon_threadsafe(
                queue.put_nowait, {"stage_id": "pipeline", "status": "error", "error": str(e)}
            )
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    worker = loop.run_in_executor(None, _run_pipeline)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"
    await worker

    elapsed = (time.perf_counter() - start) * 1000
    response = store_analysis(ctx, pipeline, store, elapsed)

    yield f"event: result\ndata: {response.model_dump_json(by_alias=True)}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/analyze/stream")
async def analyze_stream(
    req: AnalyzeRequest,
    pipeline: Pipeline = Depends(get_pipeline),
    store: AnalysisStore = Depends(get_analysis_store),
) -> StreamingResponse:
    check_source_size(req.source)
    ctx = new_context(pipeline, req.source, req)
    return StreamingResponse(
        _stream_analyze(ctx, pipeline, store),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    req: AnalyzeRequest,
    pipeline: Pipeline = Depends(get_pipeline),
    store: AnalysisStore = Depends(get_analysis_store),
) -> AnalyzeResponse:
    check_source_size(req.source)
    ctx = new_context(pipeline, req.source, req)
    return run_analysis(ctx, pipeline, store)
