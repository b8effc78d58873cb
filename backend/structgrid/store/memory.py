"""Analysis store: in-process key-value tables for files, analyses and playback sessions.

Nothing is persisted: a restart starts from empty tables. IDs auto-increment
from 1 per table.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from structgrid.core.records import ExecutionStep, PlaybackState
from structgrid.core.simulator import StepSimulator

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SourceFile:
    id: int
    name: str
    content: str
    size: int
    uploaded_at: str


@dataclass
class AnalysisRecord:
    """Stored result of one pipeline run."""

    id: int
    file_id: int | None
    result: dict[str, Any]
    status: str = "completed"
    errors: dict[str, str] = field(default_factory=dict)
    created_at: str = ""


@dataclass
class PlaybackSession:
    analysis_id: int
    simulator: StepSimulator
    state: PlaybackState
    steps: list[ExecutionStep] = field(default_factory=list)

    @property
    def description(self) -> str:
        if 0 <= self.state.step < len(self.steps):
            return self.steps[self.state.step].description
        return ""


class AnalysisStore:
    """Thread-safe in-memory tables. Lookups of unknown IDs raise KeyError."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[int, SourceFile] = {}
        self._analyses: dict[int, AnalysisRecord] = {}
        self._sessions: dict[int, PlaybackSession] = {}
        self._next_file_id = 1
        self._next_analysis_id = 1

    # --- files ---

    def create_file(self, name: str, content: str) -> SourceFile:
        with self._lock:
            f = SourceFile(
                id=self._next_file_id,
                name=name,
                content=content,
                size=len(content.encode("utf-8")),
                uploaded_at=_now(),
            )
            self._files[f.id] = f
            self._next_file_id += 1
        logger.info("Stored file %d (%s, %d bytes)", f.id, f.name, f.size)
        return f

    def get_file(self, file_id: int) -> SourceFile:
        with self._lock:
            return self._files[file_id]

    def list_files(self) -> list[SourceFile]:
        with self._lock:
            return list(self._files.values())

    def delete_file(self, file_id: int) -> None:
        with self._lock:
            del self._files[file_id]
        logger.info("Deleted file %d", file_id)

    # --- analyses ---

    def create_analysis(
        self,
        result: dict[str, Any],
        file_id: int | None = None,
        errors: dict[str, str] | None = None,
    ) -> AnalysisRecord:
        with self._lock:
            record = AnalysisRecord(
                id=self._next_analysis_id,
                file_id=file_id,
                result=result,
                status="failed" if errors else "completed",
                errors=dict(errors or {}),
                created_at=_now(),
            )
            self._analyses[record.id] = record
            self._next_analysis_id += 1
        return record

    def get_analysis(self, analysis_id: int) -> AnalysisRecord:
        with self._lock:
            return self._analyses[analysis_id]

    def latest_analysis_for_file(self, file_id: int) -> AnalysisRecord:
        with self._lock:
            for record in reversed(list(self._analyses.values())):
                if record.file_id == file_id:
                    return record
        raise KeyError(file_id)

    # --- playback ---

    def save_session(self, session: PlaybackSession) -> None:
        with self._lock:
            self._sessions[session.analysis_id] = session

    def get_session(self, analysis_id: int) -> PlaybackSession:
        with self._lock:
            return self._sessions[analysis_id]

    def update_state(self, analysis_id: int, state: PlaybackState) -> PlaybackSession:
        with self._lock:
            session = self._sessions[analysis_id]
            session.state = state
            return session

    def clear(self) -> None:
        with self._lock:
            self._files.clear()
            self._analyses.clear()
            self._sessions.clear()
            self._next_file_id = 1
            self._next_analysis_id = 1


_store: AnalysisStore | None = None


def get_store() -> AnalysisStore:
    """Get or create the global AnalysisStore singleton."""
    global _store
    if _store is None:
        _store = AnalysisStore()
    return _store
