"""GET/POST /api/playback/{analysis_id}: step playback over an analysis grid.

Backward and reset only move the cursor; drifted cells stay as they are.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from structgrid.dependencies import get_analysis_store
from structgrid.models.analysis import CellModel, GridStats
from structgrid.models.responses import PlaybackResponse
from structgrid.store.memory import AnalysisStore, PlaybackSession
from structgrid.utils.rasterizer import grid_stats, grid_to_text

router = APIRouter(prefix="/playback")


def _session_or_404(store: AnalysisStore, analysis_id: int) -> PlaybackSession:
    try:
        return store.get_session(analysis_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Playback session not found") from None


def _response(session: PlaybackSession) -> PlaybackResponse:
    grid = session.state.grid
    return PlaybackResponse(
        analysis_id=session.analysis_id,
        step=session.state.step,
        total_steps=session.state.total_steps,
        description=session.description,
        grid=[CellModel.model_validate(c.to_dict()) for c in grid],
        grid_text=grid_to_text(grid),
        stats=GridStats.model_validate(grid_stats(grid)),
    )


@router.get("/{analysis_id}", response_model=PlaybackResponse)
async def current(analysis_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> PlaybackResponse:
    return _response(_session_or_404(store, analysis_id))


@router.post("/{analysis_id}/forward", response_model=PlaybackResponse)
async def forward(analysis_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> PlaybackResponse:
    session = _session_or_404(store, analysis_id)
    session = store.update_state(analysis_id, session.simulator.forward(session.state))
    return _response(session)


@router.post("/{analysis_id}/backward", response_model=PlaybackResponse)
async def backward(analysis_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> PlaybackResponse:
    session = _session_or_404(store, analysis_id)
    session = store.update_state(analysis_id, session.simulator.backward(session.state))
    return _response(session)


@router.post("/{analysis_id}/reset", response_model=PlaybackResponse)
async def reset(analysis_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> PlaybackResponse:
    session = _session_or_404(store, analysis_id)
    session = store.update_state(analysis_id, session.simulator.reset(session.state))
    return _response(session)
