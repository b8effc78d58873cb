"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from structgrid.api import analyze, files, grid, health, playback

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(analyze.router)
api_router.include_router(grid.router)
api_router.include_router(files.router)
api_router.include_router(playback.router)
