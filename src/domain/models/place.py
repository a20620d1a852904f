from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .geo import GeoLocation, UtmLocation


class PlaceType(str, Enum):
    STOP = "Stop"
    POI = "POI"
    AREA = "Area"
    STREET = "Street"


@dataclass(frozen=True, slots=True)
class Stop:
    id: int
    name: str
    geo_location: GeoLocation
    utm_location: UtmLocation
    district: str | None = None
    short_name: str | None = None
    zone: str | None = None
    is_hub: bool = False
    # Only set when the stop was returned as "nearby" another place.
    walking_time_mins: int | None = None
    place_type: PlaceType = PlaceType.STOP


@dataclass(frozen=True, slots=True)
class Poi:
    id: int
    name: str
    geo_location: GeoLocation
    utm_location: UtmLocation
    district: str | None = None
    nearby_stops: tuple[Stop, ...] = ()
    place_type: PlaceType = PlaceType.POI


@dataclass(frozen=True, slots=True)
class Area:
    id: int
    name: str
    geo_location: GeoLocation
    utm_location: UtmLocation
    district: str | None = None
    stops: tuple[Stop, ...] = ()
    place_type: PlaceType = PlaceType.AREA


@dataclass(frozen=True, slots=True)
class Street:
    """A street; its houses are fetched separately by street id."""

    id: int
    name: str
    district: str | None = None
    place_type: PlaceType = PlaceType.STREET


@dataclass(frozen=True, slots=True)
class OtherPlace:
    """Fallback for place types the upstream adds that we do not model."""

    id: int
    name: str
    place_type: str
    district: str | None = None


Place = Union[Stop, Poi, Area, Street, OtherPlace]


@dataclass(frozen=True, slots=True)
class House:
    street_name: str
    street_id: int
    name: str
    geo_location: GeoLocation
    utm_location: UtmLocation
    district: str | None = None
