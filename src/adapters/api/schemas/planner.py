from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from .base import ApiModel, GeoLocationSchema, UtmLocationSchema
from .places import StopSchema


class WalkingStageSchema(ApiModel):
    kind: Literal["walking"] = "walking"
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    transportation_type: int = 0
    departure_geo_location: GeoLocationSchema
    departure_utm_location: UtmLocationSchema
    arrival_geo_location: GeoLocationSchema
    arrival_utm_location: UtmLocationSchema


class TransitStageSchema(ApiModel):
    kind: Literal["transit"] = "transit"
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    transportation_type: int
    line: int
    line_name: str
    destination_name: str
    departure_stop: StopSchema
    arrival_stop: StopSchema
    color: str | None = None


TravelStageSchema = Union[WalkingStageSchema, TransitStageSchema]


class TravelProposalSchema(ApiModel):
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    remarks: list[str] = []
    zones: list[str] = []
    stages: list[Annotated[TravelStageSchema, Field(discriminator="kind")]] = []
