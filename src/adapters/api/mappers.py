from __future__ import annotations

from src.adapters.api.schemas.base import (
    GeoLocationSchema,
    LocationInputSchema,
    PlannerLocationInputSchema,
    UtmLocationSchema,
)
from src.adapters.api.schemas.places import (
    AreaSchema,
    HouseSchema,
    LineSchema,
    OtherPlaceSchema,
    PlaceSchema,
    PoiSchema,
    StopSchema,
    StreetSchema,
)
from src.adapters.api.schemas.planner import (
    TransitStageSchema,
    TravelProposalSchema,
    TravelStageSchema,
    WalkingStageSchema,
)
from src.adapters.api.schemas.realtime import (
    DeviationSchema,
    RealtimeDestinationSchema,
    RealtimePlatformSchema,
    RealtimeSchema,
    RealtimeVisitSchema,
)
from src.app.services.transit_query_service import RealtimeBoard
from src.domain.algorithms.aggregation import (
    collect_unique_deviations,
    group_visits_by_destination,
)
from src.domain.models import (
    Area,
    Deviation,
    GeoLocation,
    House,
    Line,
    LocationInput,
    Place,
    PlannerLocationInput,
    Poi,
    RealtimeDestination,
    RealtimePlatform,
    RealtimeVisit,
    Stop,
    Street,
    TravelProposal,
    TravelStage,
    UtmLocation,
    WalkingStage,
)


def _hex(colour: str | None) -> str | None:
    return f"#{colour}" if colour else None


def geo_to_schema(loc: GeoLocation) -> GeoLocationSchema:
    return GeoLocationSchema(lat=loc.lat, lng=loc.lng)


def utm_to_schema(loc: UtmLocation) -> UtmLocationSchema:
    return UtmLocationSchema(x=loc.x, y=loc.y)


def line_to_schema(line: Line) -> LineSchema:
    return LineSchema(
        id=line.id,
        name=line.name,
        transportation_type=int(line.transportation_type),
        color=line.color,
    )


def stop_to_schema(stop: Stop) -> StopSchema:
    return StopSchema(
        id=stop.id,
        name=stop.name,
        district=stop.district,
        short_name=stop.short_name,
        zone=stop.zone,
        is_hub=stop.is_hub,
        geo_location=geo_to_schema(stop.geo_location),
        utm_location=utm_to_schema(stop.utm_location),
        walking_time_mins=stop.walking_time_mins,
    )


def place_to_schema(place: Place) -> PlaceSchema:
    if isinstance(place, Stop):
        return stop_to_schema(place)
    if isinstance(place, Poi):
        return PoiSchema(
            id=place.id,
            name=place.name,
            district=place.district,
            geo_location=geo_to_schema(place.geo_location),
            utm_location=utm_to_schema(place.utm_location),
            nearby_stops=[stop_to_schema(s) for s in place.nearby_stops],
        )
    if isinstance(place, Area):
        return AreaSchema(
            id=place.id,
            name=place.name,
            district=place.district,
            geo_location=geo_to_schema(place.geo_location),
            utm_location=utm_to_schema(place.utm_location),
            stops=[stop_to_schema(s) for s in place.stops],
        )
    if isinstance(place, Street):
        return StreetSchema(id=place.id, name=place.name, district=place.district)
    return OtherPlaceSchema(
        id=place.id,
        name=place.name,
        district=place.district,
        place_type=place.place_type,
    )


def house_to_schema(house: House) -> HouseSchema:
    return HouseSchema(
        street_name=house.street_name,
        street_id=house.street_id,
        district=house.district,
        name=house.name,
        geo_location=geo_to_schema(house.geo_location),
        utm_location=utm_to_schema(house.utm_location),
    )


def deviation_to_schema(deviation: Deviation) -> DeviationSchema:
    return DeviationSchema(id=deviation.id, header=deviation.header)


def visit_to_schema(visit: RealtimeVisit) -> RealtimeVisitSchema:
    return RealtimeVisitSchema(
        stop_id=visit.stop_id,
        line_id=visit.line_id,
        destination_name=visit.destination_name,
        name=visit.name,
        direction=visit.direction,
        recorded_at_time=visit.recorded_at_time,
        expected_arrival=visit.expected_arrival,
        deviations=[deviation_to_schema(d) for d in visit.deviations],
        line_colour=visit.line_colour,
        color=_hex(visit.line_colour),
        platform=visit.platform,
        in_congestion=visit.in_congestion,
        monitored=visit.monitored,
        transportation_type=int(visit.transportation_type),
        low_floor=visit.low_floor,
    )


def destination_to_schema(dest: RealtimeDestination) -> RealtimeDestinationSchema:
    return RealtimeDestinationSchema(
        stop_id=dest.stop_id,
        line_id=dest.line_id,
        name=dest.name,
        destination_name=dest.destination_name,
        line_colour=dest.line_colour,
        color=_hex(dest.line_colour),
        transportation_type=int(dest.transportation_type),
        visits=[visit_to_schema(v) for v in dest.visits],
        deviations=[
            deviation_to_schema(d) for d in collect_unique_deviations(dest.visits)
        ],
    )


def platform_to_schema(platform: RealtimePlatform) -> RealtimePlatformSchema:
    return RealtimePlatformSchema(
        name=platform.name,
        visits=[visit_to_schema(v) for v in platform.visits],
        destinations=[
            destination_to_schema(d)
            for d in group_visits_by_destination(platform.visits)
        ],
        deviations=[
            deviation_to_schema(d) for d in collect_unique_deviations(platform.visits)
        ],
    )


def board_to_schema(board: RealtimeBoard) -> RealtimeSchema:
    return RealtimeSchema(
        visits=[visit_to_schema(v) for v in board.visits],
        destinations=[destination_to_schema(d) for d in board.destinations],
        platforms=[platform_to_schema(p) for p in board.platforms],
        deviations=[deviation_to_schema(d) for d in board.deviations],
    )


def stage_to_schema(stage: TravelStage) -> TravelStageSchema:
    if isinstance(stage, WalkingStage):
        return WalkingStageSchema(
            departure_time=stage.departure_time,
            arrival_time=stage.arrival_time,
            travel_time_mins=stage.travel_time_mins,
            departure_geo_location=geo_to_schema(stage.departure_geo_location),
            departure_utm_location=utm_to_schema(stage.departure_utm_location),
            arrival_geo_location=geo_to_schema(stage.arrival_geo_location),
            arrival_utm_location=utm_to_schema(stage.arrival_utm_location),
        )
    return TransitStageSchema(
        departure_time=stage.departure_time,
        arrival_time=stage.arrival_time,
        travel_time_mins=stage.travel_time_mins,
        transportation_type=int(stage.transportation_type),
        line=stage.line,
        line_name=stage.line_name,
        destination_name=stage.destination_name,
        departure_stop=stop_to_schema(stage.departure_stop),
        arrival_stop=stop_to_schema(stage.arrival_stop),
        color=stage.color,
    )


def proposal_to_schema(proposal: TravelProposal) -> TravelProposalSchema:
    return TravelProposalSchema(
        departure_time=proposal.departure_time,
        arrival_time=proposal.arrival_time,
        travel_time_mins=proposal.travel_time_mins,
        remarks=list(proposal.remarks),
        zones=list(proposal.zones),
        stages=[stage_to_schema(s) for s in proposal.stages],
    )


def location_from_schema(loc: LocationInputSchema) -> LocationInput:
    return LocationInput(
        geo=(
            GeoLocation(lat=loc.geo_location.lat, lng=loc.geo_location.lng)
            if loc.geo_location
            else None
        ),
        utm=(
            UtmLocation(x=int(loc.utm_location.x), y=int(loc.utm_location.y))
            if loc.utm_location
            else None
        ),
    )


def planner_location_from_schema(
    loc: PlannerLocationInputSchema,
) -> PlannerLocationInput:
    return PlannerLocationInput(
        geo=GeoLocation(lat=loc.geo.lat, lng=loc.geo.lng) if loc.geo else None,
        utm=UtmLocation(x=int(loc.utm.x), y=int(loc.utm.y)) if loc.utm else None,
        stop_id=loc.stop.id if loc.stop else None,
        area_id=loc.area.id if loc.area else None,
    )
