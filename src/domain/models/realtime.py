from __future__ import annotations

from dataclasses import dataclass

from .line import TransportationType


@dataclass(frozen=True, slots=True)
class Deviation:
    """Service disruption notice. Equality is on the (id, header) pair."""

    id: int
    header: str


@dataclass(frozen=True, slots=True)
class RealtimeVisit:
    """One scheduled/predicted arrival of a vehicle at a stop."""

    stop_id: int
    line_id: int
    destination_name: str
    name: str
    recorded_at_time: str
    expected_arrival: str
    transportation_type: TransportationType
    direction: str | None = None
    deviations: tuple[Deviation, ...] = ()
    line_colour: str | None = None  # hex without '#'
    platform: str | None = None
    in_congestion: bool = False
    monitored: bool = False
    low_floor: bool = False


@dataclass(frozen=True, slots=True)
class RealtimeDestination:
    stop_id: int
    line_id: int
    name: str
    destination_name: str
    line_colour: str | None
    transportation_type: TransportationType
    visits: tuple[RealtimeVisit, ...] = ()


@dataclass(frozen=True, slots=True)
class RealtimePlatform:
    name: str
    visits: tuple[RealtimeVisit, ...] = ()
