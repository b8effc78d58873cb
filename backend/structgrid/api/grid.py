"""POST /api/grid: map caller-supplied structures onto a grid."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from structgrid.core.grid import map_to_grid
from structgrid.core.records import Category, ClassifiedStructure, StructureKind, StructureRecord
from structgrid.dependencies import get_pipeline
from structgrid.engine.pipeline import Pipeline
from structgrid.models.analysis import CellModel, GridStats
from structgrid.models.requests import GridRequest, GridStructureIn
from structgrid.models.responses import GridResponse
from structgrid.utils.rasterizer import grid_stats, grid_to_text

router = APIRouter()


def _to_classified(item: GridStructureIn) -> ClassifiedStructure:
    # Only name, category and instance count matter to the mapper
    record = StructureRecord(name=item.name, kind=StructureKind.STRUCT, start_line=1, end_line=1)
    return ClassifiedStructure(
        record=record,
        category=Category(item.category),
        instance_count=item.instance_count,
        nesting_depth=item.nesting_depth,
    )


@router.post("/grid", response_model=GridResponse)
async def grid(req: GridRequest, pipeline: Pipeline = Depends(get_pipeline)) -> GridResponse:
    seed = pipeline.config.seed if req.seed is None else req.seed
    cells = map_to_grid([_to_classified(s) for s in req.structures], req.config.to_config(), seed=seed)
    return GridResponse(
        grid=[CellModel.model_validate(c.to_dict()) for c in cells],
        grid_text=grid_to_text(cells),
        stats=GridStats.model_validate(grid_stats(cells)),
    )
