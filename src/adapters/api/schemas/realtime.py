from __future__ import annotations

from .base import ApiModel
from .places import LineSchema, StopSchema


class DeviationSchema(ApiModel):
    id: int
    header: str


class RealtimeVisitSchema(ApiModel):
    stop_id: int
    line_id: int
    destination_name: str
    name: str
    direction: str | None = None
    recorded_at_time: str
    expected_arrival: str
    deviations: list[DeviationSchema] = []
    line_colour: str | None = None
    # line_colour with a leading '#'
    color: str | None = None
    platform: str | None = None
    in_congestion: bool = False
    monitored: bool = False
    transportation_type: int
    low_floor: bool = False


class RealtimeDestinationSchema(ApiModel):
    stop_id: int
    line_id: int
    name: str
    destination_name: str
    line_colour: str | None = None
    color: str | None = None
    transportation_type: int
    visits: list[RealtimeVisitSchema] = []
    deviations: list[DeviationSchema] = []


class RealtimePlatformSchema(ApiModel):
    name: str
    visits: list[RealtimeVisitSchema] = []
    destinations: list[RealtimeDestinationSchema] = []
    deviations: list[DeviationSchema] = []


class RealtimeSchema(ApiModel):
    visits: list[RealtimeVisitSchema] = []
    destinations: list[RealtimeDestinationSchema] = []
    platforms: list[RealtimePlatformSchema] = []
    deviations: list[DeviationSchema] = []


class StopOverviewSchema(ApiModel):
    stop_id: int
    stop: StopSchema | None = None
    lines: list[LineSchema] | None = None
    realtime: RealtimeSchema | None = None
    errors: dict[str, str] = {}
