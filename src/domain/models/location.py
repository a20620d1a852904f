from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoLocation, UtmLocation


@dataclass(frozen=True, slots=True)
class LocationInput:
    """Caller-supplied point, either geographic or grid."""

    geo: GeoLocation | None = None
    utm: UtmLocation | None = None


@dataclass(frozen=True, slots=True)
class PlannerLocationInput:
    """Travel planner endpoint: a point, or a stop/area reference."""

    geo: GeoLocation | None = None
    utm: UtmLocation | None = None
    stop_id: str | None = None
    area_id: str | None = None
