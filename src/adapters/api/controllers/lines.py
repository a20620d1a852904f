from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_transit_query_service
from src.adapters.api.mappers import line_to_schema, stop_to_schema
from src.adapters.api.schemas.base import ERROR_RESPONSES
from src.adapters.api.schemas.places import LineSchema, StopSchema
from src.app.services.transit_query_service import TransitQueryService

router = APIRouter(prefix="/lines", tags=["lines"], responses=ERROR_RESPONSES)


@router.get("/{line_id}", response_model=LineSchema)
async def get_line(
    line_id: int,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> LineSchema:
    return line_to_schema(await service.line(line_id=line_id))


@router.get("/{line_id}/stops", response_model=list[StopSchema])
async def get_line_stops(
    line_id: int,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[StopSchema]:
    return [stop_to_schema(s) for s in await service.stops_for_line(line_id=line_id)]
