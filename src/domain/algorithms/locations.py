from __future__ import annotations

from src.domain.exceptions import (
    AmbiguousLocationInput,
    InvalidPlannerLocation,
    LocationOutOfRange,
)
from src.domain.models.geo import UtmLocation
from src.domain.models.location import LocationInput, PlannerLocationInput

from .coordinates import to_grid


def coordinate_string(loc: UtmLocation) -> str:
    """Upstream query form of a grid point, e.g. ``(X=597000,Y=6643000)``."""

    return f"(X={loc.x},Y={loc.y})"


def location_to_grid(loc: LocationInput) -> UtmLocation:
    """Resolve a geo-or-utm location input to a grid point.

    A grid location wins when both are present since it needs no conversion.
    """

    if loc.utm is not None:
        return UtmLocation(x=int(loc.utm.x), y=int(loc.utm.y))
    if loc.geo is not None:
        try:
            return to_grid(loc.geo.lat, loc.geo.lng)
        except ValueError as exc:
            # utm rejects latitudes beyond 84N and 80S.
            raise LocationOutOfRange(
                f"Location out of projection domain: {exc}"
            ) from exc
    raise AmbiguousLocationInput(
        "Location input must have either a utm or a geo location"
    )


def planner_location_to_query(loc: PlannerLocationInput) -> str:
    """Resolve a planner location to the upstream ``fromplace``/``toplace`` value."""

    if loc.stop_id:
        return str(loc.stop_id)
    if loc.area_id:
        return str(loc.area_id)
    if loc.utm is not None or loc.geo is not None:
        return coordinate_string(
            location_to_grid(LocationInput(geo=loc.geo, utm=loc.utm))
        )
    raise InvalidPlannerLocation(
        "Planner location must have one of geo, utm, stop or area"
    )
