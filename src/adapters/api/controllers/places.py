from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_transit_query_service
from src.adapters.api.mappers import house_to_schema, place_to_schema
from src.adapters.api.schemas.base import ERROR_RESPONSES
from src.adapters.api.schemas.places import HouseSchema, PlaceSchema
from src.app.services.transit_query_service import TransitQueryService
from src.domain.models import PlaceType

router = APIRouter(tags=["places"], responses=ERROR_RESPONSES)


@router.get("/places", response_model=list[PlaceSchema])
async def search_places(
    name: str = Query(..., min_length=1),
    place_type: list[PlaceType] | None = Query(default=None, alias="type"),
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[PlaceSchema]:
    places = await service.places(name=name, place_types=place_type)
    return [place_to_schema(p) for p in places]


@router.get("/streets/{street_id}/houses", response_model=list[HouseSchema])
async def get_street_houses(
    street_id: int,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[HouseSchema]:
    houses = await service.street_houses(street_id=street_id)
    return [house_to_schema(h) for h in houses]
