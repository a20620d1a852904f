from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Sequence
from urllib.parse import quote

from src.app.ports.output import ITransitProvider
from src.domain.algorithms.locations import (
    coordinate_string,
    location_to_grid,
    planner_location_to_query,
)
from src.domain.models import (
    House,
    Line,
    LocationInput,
    Place,
    PlaceType,
    PlannerLocationInput,
    RealtimeVisit,
    Stop,
    TransportationType,
    TravelProposal,
)

from . import normalizer
from .http_client import RuterHttpClient
from .response_cache import ResponseCache, cache_key

logger = logging.getLogger(__name__)

# Upstream travel search time format: ddMMyyyyHHmmss.
TRAVEL_TIME_FORMAT = "%d%m%Y%H%M%S"


@dataclass(slots=True)
class RuterTransitProvider(ITransitProvider):
    """Ruter reisapi adapter.

    Every GET goes through the response cache, so overlapping identical
    requests share one upstream call. Raw JSON is cached; entities are
    normalized per call.
    """

    client: RuterHttpClient = field(default_factory=RuterHttpClient)
    cache: ResponseCache = field(default_factory=ResponseCache)

    async def _get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        key = cache_key(self.client.build_url(path), params)
        return await self.cache.get_or_fetch(
            key, lambda: self.client.get_json(path, params)
        )

    async def fetch_stop(self, stop_id: int) -> Stop:
        logger.debug("fetching stop info for %s", stop_id)
        data = await self._get_json(f"/Place/GetStop/{stop_id}")
        return normalizer.parse_stop_info(data)

    async def fetch_line(self, line_id: int) -> Line:
        logger.debug("fetching line info for %s", line_id)
        data = await self._get_json(f"/Line/GetDataByLineID/{line_id}")
        return normalizer.parse_line_info(data)

    async def fetch_lines_for_stop(self, stop_id: int) -> tuple[Line, ...]:
        logger.debug("fetching lines for stop %s", stop_id)
        data = await self._get_json(f"/Line/GetLinesByStopID/{stop_id}")
        return normalizer.parse_many(data, normalizer.parse_line_info, "line")

    async def fetch_stops_for_line(self, line_id: int) -> tuple[Stop, ...]:
        logger.debug("fetching stops for line %s", line_id)
        data = await self._get_json(f"/Line/GetStopsByLineID/{line_id}")
        return normalizer.parse_many(data, normalizer.parse_stop_info, "stop")

    async def fetch_stop_visits(
        self,
        stop_id: int,
        transport_types: Sequence[TransportationType] | None = None,
        line_names: Sequence[str] | None = None,
    ) -> tuple[RealtimeVisit, ...]:
        logger.debug("fetching stop visits for %s", stop_id)
        params = {
            "transporttypes": (
                [int(t) for t in transport_types] if transport_types else None
            ),
            "linenames": list(line_names) if line_names else None,
        }
        data = await self._get_json(f"/StopVisit/GetDepartures/{stop_id}", params)
        return normalizer.parse_many(data, normalizer.parse_visit, "visit")

    async def fetch_places_by_name(
        self, name: str, place_types: Sequence[PlaceType] | None = None
    ) -> tuple[Place, ...]:
        logger.debug("fetching places for %s", name)
        data = await self._get_json(f"/Place/GetPlaces/{quote(name, safe='')}")
        places = normalizer.parse_many(data, normalizer.parse_place, "place")
        if place_types:
            wanted = {PlaceType(t).value for t in place_types}
            places = tuple(p for p in places if p.place_type in wanted)
        return places

    async def fetch_closest_stops(
        self, location: LocationInput, max_distance: int | None = None
    ) -> tuple[Stop, ...]:
        point = location_to_grid(location)
        params = {"coordinates": coordinate_string(point), "maxdistance": max_distance}
        data = await self._get_json("/Place/GetClosestStops", params)
        return normalizer.parse_many(data, normalizer.parse_stop_info, "stop")

    async def fetch_stops_in_area(
        self, sw: LocationInput, ne: LocationInput
    ) -> tuple[Stop, ...]:
        sw_point = location_to_grid(sw)
        ne_point = location_to_grid(ne)
        params = {
            "xmin": sw_point.x,
            "ymin": sw_point.y,
            "xmax": ne_point.x,
            "ymax": ne_point.y,
        }
        data = await self._get_json("/Place/GetStopsByArea", params)
        return normalizer.parse_many(data, normalizer.parse_stop_info, "stop")

    async def fetch_travel_plan(
        self,
        origin: PlannerLocationInput,
        destination: PlannerLocationInput,
        depart_at: datetime | None = None,
    ) -> tuple[TravelProposal, ...]:
        params = {
            "fromplace": planner_location_to_query(origin),
            "toplace": planner_location_to_query(destination),
            "isafter": True,
            "time": (depart_at or datetime.now()).strftime(TRAVEL_TIME_FORMAT),
        }
        logger.debug("fetching travel plan %s -> %s", params["fromplace"], params["toplace"])
        data = await self._get_json("/Travel/GetTravels", params)
        return normalizer.parse_travel_plans(data)

    async def fetch_street_houses(self, street_id: int) -> tuple[House, ...]:
        logger.debug("fetching houses for street %s", street_id)
        data = await self._get_json(f"/Street/GetStreet/{street_id}")
        return normalizer.parse_street_houses(data)
