"""FastAPI dependency injection."""

from __future__ import annotations

from structgrid.config import settings
from structgrid.engine.config import EngineConfig
from structgrid.engine.pipeline import Pipeline, create_pipeline
from structgrid.store.memory import AnalysisStore, get_store


def get_settings():
    return settings


def get_pipeline() -> Pipeline:
    return create_pipeline(EngineConfig.from_settings(settings))


def get_analysis_store() -> AnalysisStore:
    return get_store()
