from __future__ import annotations

from datetime import datetime
from typing import Literal, Union

from .base import (
    ApiModel,
    GeoLocationSchema,
    LocationInputSchema,
    PlannerLocationInputSchema,
    UtmLocationSchema,
)


class LineSchema(ApiModel):
    id: int
    name: str
    transportation_type: int
    color: str


class StopSchema(ApiModel):
    id: int
    name: str
    district: str | None = None
    place_type: Literal["Stop"] = "Stop"
    short_name: str | None = None
    zone: str | None = None
    is_hub: bool = False
    geo_location: GeoLocationSchema
    utm_location: UtmLocationSchema
    walking_time_mins: int | None = None


class PoiSchema(ApiModel):
    id: int
    name: str
    district: str | None = None
    place_type: Literal["POI"] = "POI"
    geo_location: GeoLocationSchema
    utm_location: UtmLocationSchema
    nearby_stops: list[StopSchema] = []


class AreaSchema(ApiModel):
    id: int
    name: str
    district: str | None = None
    place_type: Literal["Area"] = "Area"
    geo_location: GeoLocationSchema
    utm_location: UtmLocationSchema
    stops: list[StopSchema] = []


class StreetSchema(ApiModel):
    id: int
    name: str
    district: str | None = None
    place_type: Literal["Street"] = "Street"


class OtherPlaceSchema(ApiModel):
    id: int
    name: str
    district: str | None = None
    place_type: str


PlaceSchema = Union[StopSchema, PoiSchema, AreaSchema, StreetSchema, OtherPlaceSchema]


class HouseSchema(ApiModel):
    street_name: str
    street_id: int
    district: str | None = None
    name: str
    geo_location: GeoLocationSchema
    utm_location: UtmLocationSchema


class ClosestStopsRequestSchema(ApiModel):
    location: LocationInputSchema
    max_distance: int | None = None


class AreaStopsRequestSchema(ApiModel):
    sw: LocationInputSchema
    ne: LocationInputSchema


class TravelRequestSchema(ApiModel):
    origin: PlannerLocationInputSchema
    destination: PlannerLocationInputSchema
    depart_at: datetime | None = None
