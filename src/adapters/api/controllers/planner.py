from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_transit_query_service
from src.adapters.api.mappers import planner_location_from_schema, proposal_to_schema
from src.adapters.api.schemas.base import ERROR_RESPONSES
from src.adapters.api.schemas.places import TravelRequestSchema
from src.adapters.api.schemas.planner import TravelProposalSchema
from src.app.services.transit_query_service import TransitQueryService

router = APIRouter(tags=["planner"], responses=ERROR_RESPONSES)


@router.post("/travel", response_model=list[TravelProposalSchema])
async def plan_travel(
    req: TravelRequestSchema,
    service: TransitQueryService = Depends(get_transit_query_service),
) -> list[TravelProposalSchema]:
    proposals = await service.travel_plan(
        origin=planner_location_from_schema(req.origin),
        destination=planner_location_from_schema(req.destination),
        depart_at=req.depart_at,
    )
    return [proposal_to_schema(p) for p in proposals]
