from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from .geo import GeoLocation, UtmLocation
from .line import TransportationType
from .place import Stop


@dataclass(frozen=True, slots=True)
class WalkingStage:
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    departure_geo_location: GeoLocation
    departure_utm_location: UtmLocation
    arrival_geo_location: GeoLocation
    arrival_utm_location: UtmLocation
    transportation_type: TransportationType = TransportationType.WALKING
    kind: Literal["walking"] = "walking"


@dataclass(frozen=True, slots=True)
class TransitStage:
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    transportation_type: TransportationType
    line: int
    line_name: str
    destination_name: str
    departure_stop: Stop
    arrival_stop: Stop
    color: str | None = None  # hex without '#'
    kind: Literal["transit"] = "transit"


TravelStage = Union[WalkingStage, TransitStage]


@dataclass(frozen=True, slots=True)
class TravelProposal:
    departure_time: str
    arrival_time: str
    travel_time_mins: int
    stages: tuple[TravelStage, ...] = ()
    remarks: tuple[str, ...] = ()
    # Never populated from upstream.
    zones: tuple[str, ...] = ()
