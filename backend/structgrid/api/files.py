"""File and stored-analysis endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from structgrid.api.analyze import check_source_size, new_context, run_analysis
from structgrid.dependencies import get_analysis_store, get_pipeline
from structgrid.engine.pipeline import Pipeline
from structgrid.models.analysis import AnalysisOutput
from structgrid.models.requests import AnalyzeFileRequest, FileCreateRequest
from structgrid.models.responses import (
    AnalysisRecordResponse,
    AnalyzeResponse,
    FileResponse,
    FileSummary,
    MessageResponse,
)
from structgrid.store.memory import AnalysisRecord, AnalysisStore, SourceFile

router = APIRouter()


def _file_or_404(store: AnalysisStore, file_id: int) -> SourceFile:
    try:
        return store.get_file(file_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="File not found") from None


def _record_response(record: AnalysisRecord) -> AnalysisRecordResponse:
    return AnalysisRecordResponse(
        id=record.id,
        file_id=record.file_id,
        status=record.status,
        analysis=AnalysisOutput.model_validate(record.result),
        errors=record.errors,
        created_at=record.created_at,
    )


@router.post("/files", response_model=FileResponse)
async def create_file(
    req: FileCreateRequest,
    store: AnalysisStore = Depends(get_analysis_store),
) -> FileResponse:
    check_source_size(req.content)
    f = store.create_file(req.name, req.content)
    return FileResponse(**vars(f))


@router.get("/files", response_model=list[FileSummary])
async def list_files(store: AnalysisStore = Depends(get_analysis_store)) -> list[FileSummary]:
    return [
        FileSummary(id=f.id, name=f.name, size=f.size, uploaded_at=f.uploaded_at)
        for f in store.list_files()
    ]


@router.get("/files/{file_id}", response_model=FileResponse)
async def get_file(file_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> FileResponse:
    return FileResponse(**vars(_file_or_404(store, file_id)))


@router.delete("/files/{file_id}", response_model=MessageResponse)
async def delete_file(file_id: int, store: AnalysisStore = Depends(get_analysis_store)) -> MessageResponse:
    try:
        store.delete_file(file_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="File not found") from None
    return MessageResponse(message="File deleted successfully")


@router.post("/files/{file_id}/analyze", response_model=AnalyzeResponse)
async def analyze_file(
    file_id: int,
    req: AnalyzeFileRequest | None = None,
    pipeline: Pipeline = Depends(get_pipeline),
    store: AnalysisStore = Depends(get_analysis_store),
) -> AnalyzeResponse:
    f = _file_or_404(store, file_id)
    ctx = new_context(pipeline, f.content, req or AnalyzeFileRequest())
    return run_analysis(ctx, pipeline, store, file_id=file_id)


@router.get("/analysis/file/{file_id}", response_model=AnalysisRecordResponse)
async def get_analysis_for_file(
    file_id: int,
    store: AnalysisStore = Depends(get_analysis_store),
) -> AnalysisRecordResponse:
    try:
        record = store.latest_analysis_for_file(file_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Analysis not found for this file") from None
    return _record_response(record)


@router.get("/analysis/{analysis_id}", response_model=AnalysisRecordResponse)
async def get_analysis(
    analysis_id: int,
    store: AnalysisStore = Depends(get_analysis_store),
) -> AnalysisRecordResponse:
    try:
        record = store.get_analysis(analysis_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Analysis not found") from None
    return _record_response(record)
