from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_transit_query_service
from src.adapters.api.mappers import (
    board_to_schema,
    line_to_schema,
    location_from_schema,
    stop_to_schema,
)
from src.adapters.api.schemas.base import ERROR_RESPONSES
from src.adapters.api.schemas.places import (
    AreaStopsRequestSchema,
    ClosestStopsRequestSchema,
    LineSchema,
    StopSchema,
)
from src.adapters.api.schemas.realtime import RealtimeSchema, StopOverviewSchema
from src.app.services.transit_query_service import TransitQueryService
from src.domain.models import TransportationType

router = APIRouter(prefix="/stops", tags=["stops"], responses=ERROR_RESPONSES)


def _transportation_types(
    codes: list[int] | None, param: str
) -> list[TransportationType] | None:
    if not codes:
        return None
    try:
        return [TransportationType(c) for c in codes]
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid {param}: {exc}") from exc


@router.get("/{stop_id}", response_model=StopSchema)
async def get_stop(
    stop_id: int,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> StopSchema:
    return stop_to_schema(await service.stop(stop_id=stop_id))


@router.get("/{stop_id}/lines", response_model=list[LineSchema])
async def get_stop_lines(
    stop_id: int,
    transportation_type: list[int] | None = Query(default=None),
    line_id: list[int] | None = Query(default=None),
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[LineSchema]:
    lines = await service.lines_for_stop(
        stop_id=stop_id,
        transportation_types=_transportation_types(
            transportation_type, "transportation_type"
        ),
        line_ids=line_id,
    )
    return [line_to_schema(line) for line in lines]


@router.get("/{stop_id}/realtime", response_model=RealtimeSchema)
async def get_stop_realtime(
    stop_id: int,
    transport_type: list[int] | None = Query(default=None),
    line_name: list[str] | None = Query(default=None),
    direction: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    service: TransitQueryService = Depends(get_transit_query_service),
) -> RealtimeSchema:
    board = await service.realtime(
        stop_id=stop_id,
        transport_types=_transportation_types(transport_type, "transport_type"),
        line_names=line_name,
        direction=direction,
        limit=limit,
    )
    return board_to_schema(board)


@router.get("/{stop_id}/overview", response_model=StopOverviewSchema)
async def get_stop_overview(
    stop_id: int,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> StopOverviewSchema:
    overview = await service.stop_overview(stop_id=stop_id)
    return StopOverviewSchema(
        stop_id=overview.stop_id,
        stop=stop_to_schema(overview.stop) if overview.stop else None,
        lines=(
            [line_to_schema(line) for line in overview.lines]
            if overview.lines is not None
            else None
        ),
        realtime=board_to_schema(overview.realtime) if overview.realtime else None,
        errors=dict(overview.errors),
    )


@router.post("/closest", response_model=list[StopSchema])
async def closest_stops(
    req: ClosestStopsRequestSchema,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[StopSchema]:
    stops = await service.closest_stops(
        location=location_from_schema(req.location), max_distance=req.max_distance
    )
    return [stop_to_schema(s) for s in stops]


@router.post("/area", response_model=list[StopSchema])
async def area_stops(
    req: AreaStopsRequestSchema,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[StopSchema]:
    stops = await service.area_stops(
        sw=location_from_schema(req.sw), ne=location_from_schema(req.ne)
    )
    return [stop_to_schema(s) for s in stops]
