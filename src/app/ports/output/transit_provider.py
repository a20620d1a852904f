from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

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


class ITransitProvider(ABC):
    """Port for fetching normalized transit entities from the upstream API."""

    @abstractmethod
    async def fetch_stop(self, stop_id: int) -> Stop:
        raise NotImplementedError

    @abstractmethod
    async def fetch_line(self, line_id: int) -> Line:
        raise NotImplementedError

    @abstractmethod
    async def fetch_lines_for_stop(self, stop_id: int) -> tuple[Line, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_stops_for_line(self, line_id: int) -> tuple[Stop, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_stop_visits(
        self,
        stop_id: int,
        transport_types: Sequence[TransportationType] | None = None,
        line_names: Sequence[str] | None = None,
    ) -> tuple[RealtimeVisit, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_places_by_name(
        self, name: str, place_types: Sequence[PlaceType] | None = None
    ) -> tuple[Place, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_closest_stops(
        self, location: LocationInput, max_distance: int | None = None
    ) -> tuple[Stop, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_stops_in_area(
        self, sw: LocationInput, ne: LocationInput
    ) -> tuple[Stop, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_travel_plan(
        self,
        origin: PlannerLocationInput,
        destination: PlannerLocationInput,
        depart_at: datetime | None = None,
    ) -> tuple[TravelProposal, ...]:
        raise NotImplementedError

    @abstractmethod
    async def fetch_street_houses(self, street_id: int) -> tuple[House, ...]:
        raise NotImplementedError
