from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from src.app.ports.output import ITransitProvider
from src.domain.algorithms.aggregation import (
    collect_unique_deviations,
    group_visits_by_destination,
    group_visits_by_platform,
)
from src.domain.algorithms.locations import (
    location_to_grid,
    planner_location_to_query,
)
from src.domain.models import (
    Deviation,
    House,
    Line,
    LocationInput,
    Place,
    PlaceType,
    PlannerLocationInput,
    RealtimeDestination,
    RealtimePlatform,
    RealtimeVisit,
    Stop,
    TransportationType,
    TravelProposal,
)


@dataclass(frozen=True, slots=True)
class RealtimeBoard:
    """Realtime views derived from one stop's visits."""

    visits: tuple[RealtimeVisit, ...]
    destinations: tuple[RealtimeDestination, ...]
    platforms: tuple[RealtimePlatform, ...]
    deviations: tuple[Deviation, ...]


@dataclass(frozen=True, slots=True)
class StopOverview:
    """A stop with its lines and realtime board.

    Each part is fetched independently; a failed part is ``None`` and its error
    message is recorded under the part name in ``errors``.
    """

    stop_id: int
    stop: Stop | None = None
    lines: tuple[Line, ...] | None = None
    realtime: RealtimeBoard | None = None
    errors: dict[str, str] = field(default_factory=dict)


def build_realtime_board(
    visits: Sequence[RealtimeVisit],
    *,
    direction: str | None = None,
    limit: int | None = None,
) -> RealtimeBoard:
    """Build the realtime views.

    ``direction`` and ``limit`` only narrow the listed visits; groupings and
    deviations are computed over every visit.
    """

    listed = list(visits)
    if direction:
        listed = [v for v in listed if v.direction == direction]
    if limit:
        listed = listed[:limit]

    return RealtimeBoard(
        visits=tuple(listed),
        destinations=group_visits_by_destination(visits),
        platforms=group_visits_by_platform(visits),
        deviations=collect_unique_deviations(visits),
    )


@dataclass(slots=True)
class TransitQueryService:
    """Application service behind the query API.

    Orchestrates the transit provider port; aggregation stays in the domain.
    """

    provider: ITransitProvider

    async def stop(self, *, stop_id: int) -> Stop:
        return await self.provider.fetch_stop(stop_id)

    async def line(self, *, line_id: int) -> Line:
        return await self.provider.fetch_line(line_id)

    async def stops_for_line(self, *, line_id: int) -> tuple[Stop, ...]:
        return await self.provider.fetch_stops_for_line(line_id)

    async def lines_for_stop(
        self,
        *,
        stop_id: int,
        transportation_types: Sequence[TransportationType] | None = None,
        line_ids: Sequence[int] | None = None,
    ) -> tuple[Line, ...]:
        lines = await self.provider.fetch_lines_for_stop(stop_id)
        if transportation_types:
            wanted_types = set(transportation_types)
            lines = tuple(ln for ln in lines if ln.transportation_type in wanted_types)
        if line_ids:
            wanted_ids = set(line_ids)
            lines = tuple(ln for ln in lines if ln.id in wanted_ids)
        return lines

    async def realtime(
        self,
        *,
        stop_id: int,
        transport_types: Sequence[TransportationType] | None = None,
        line_names: Sequence[str] | None = None,
        direction: str | None = None,
        limit: int | None = None,
    ) -> RealtimeBoard:
        visits = await self.provider.fetch_stop_visits(
            stop_id, transport_types=transport_types, line_names=line_names
        )
        return build_realtime_board(visits, direction=direction, limit=limit)

    async def stop_overview(self, *, stop_id: int) -> StopOverview:
        stop, lines, visits = await asyncio.gather(
            self.provider.fetch_stop(stop_id),
            self.provider.fetch_lines_for_stop(stop_id),
            self.provider.fetch_stop_visits(stop_id),
            return_exceptions=True,
        )

        errors: dict[str, str] = {}
        for part, result in (("stop", stop), ("lines", lines), ("realtime", visits)):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                errors[part] = str(result) or result.__class__.__name__

        return StopOverview(
            stop_id=stop_id,
            stop=None if "stop" in errors else stop,
            lines=None if "lines" in errors else lines,
            realtime=None if "realtime" in errors else build_realtime_board(visits),
            errors=errors,
        )

    async def places(
        self, *, name: str, place_types: Sequence[PlaceType] | None = None
    ) -> tuple[Place, ...]:
        return await self.provider.fetch_places_by_name(name, place_types=place_types)

    async def closest_stops(
        self, *, location: LocationInput, max_distance: int | None = None
    ) -> tuple[Stop, ...]:
        # Reject bad input before any upstream call.
        grid = LocationInput(utm=location_to_grid(location))
        return await self.provider.fetch_closest_stops(grid, max_distance=max_distance)

    async def area_stops(
        self, *, sw: LocationInput, ne: LocationInput
    ) -> tuple[Stop, ...]:
        return await self.provider.fetch_stops_in_area(
            LocationInput(utm=location_to_grid(sw)),
            LocationInput(utm=location_to_grid(ne)),
        )

    async def travel_plan(
        self,
        *,
        origin: PlannerLocationInput,
        destination: PlannerLocationInput,
        depart_at: datetime | None = None,
    ) -> tuple[TravelProposal, ...]:
        # Validation only; the provider builds the upstream query.
        planner_location_to_query(origin)
        planner_location_to_query(destination)
        return await self.provider.fetch_travel_plan(
            origin, destination, depart_at=depart_at
        )

    async def street_houses(self, *, street_id: int) -> tuple[House, ...]:
        return await self.provider.fetch_street_houses(street_id)
