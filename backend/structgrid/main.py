"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from structgrid.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.structgrid_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="StructGrid",
        description="C/C++ structure scanner and grid visualizer: structures, cells and step playback",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    register_stages()

    from structgrid.api.router import api_router

    app.include_router(api_router)

    return app


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("structgrid.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"structgrid.engine.stages.{module_name}")


app = create_app()
