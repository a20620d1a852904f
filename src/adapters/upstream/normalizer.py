"""Mapping from raw upstream JSON records to domain entities.

Every function here is pure. A record missing a field the upstream format
guarantees raises ``MalformedUpstreamRecord``; only the optional fields read
with ``.get`` below may be absent. Collection helpers are all-or-nothing: one
malformed record fails the whole collection.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Iterable, Mapping

from src.domain.algorithms.coordinates import to_geo
from src.domain.exceptions import MalformedUpstreamRecord
from src.domain.models import (
    Area,
    Deviation,
    GeoLocation,
    House,
    Line,
    OtherPlace,
    Place,
    PlaceType,
    Poi,
    RealtimeVisit,
    Stop,
    Street,
    TransitStage,
    TransportationType,
    TravelProposal,
    TravelStage,
    UtmLocation,
    WalkingStage,
)

Record = Mapping[str, Any]

# Realtime VehicleMode codes use a different numbering than line
# Transportation codes.
VEHICLE_MODE_TO_TRANSPORTATION_TYPE: dict[int, TransportationType] = {
    0: TransportationType.BUS,
    1: TransportationType.BOAT,
    2: TransportationType.TRAIN,
    3: TransportationType.TRAM,
    4: TransportationType.METRO,
}

# Sentinel stop id meaning "no stop" in nested POI stop lists.
NO_STOP_ID = 0

DISPLAY_TIME_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z"
DISPLAY_TIME_FORMAT_NAIVE = "%a %b %d %Y %H:%M:%S"


def _require(record: Any, key: str, kind: str) -> Any:
    if not isinstance(record, Mapping):
        raise MalformedUpstreamRecord(kind, key, "record is not an object")
    if key not in record or record[key] is None:
        raise MalformedUpstreamRecord(kind, key)
    return record[key]


def _name(record: Any, kind: str) -> str:
    value = _require(record, "Name", kind)
    return str(value).strip()


def _int(value: Any, kind: str, key: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise MalformedUpstreamRecord(kind, key, f"not an integer: {value!r}") from exc


def _locations(record: Any, kind: str) -> tuple[GeoLocation, UtmLocation]:
    x = _int(_require(record, "X", kind), kind, "X")
    y = _int(_require(record, "Y", kind), kind, "Y")
    try:
        geo = to_geo(x, y)
    except ValueError as exc:
        raise MalformedUpstreamRecord(kind, "X/Y", str(exc)) from exc
    return geo, UtmLocation(x=x, y=y)


def _transportation_type(value: Any, kind: str, key: str) -> TransportationType:
    try:
        return TransportationType(_int(value, kind, key))
    except ValueError as exc:
        raise MalformedUpstreamRecord(kind, key, f"unknown code {value!r}") from exc


def _list(record: Any, key: str, kind: str) -> list[Any]:
    value = _require(record, key, kind)
    if not isinstance(value, list):
        raise MalformedUpstreamRecord(kind, key, "expected a list")
    return value


def parse_many(records: Any, parse: Callable[[Any], Any], kind: str) -> tuple:
    if not isinstance(records, list):
        raise MalformedUpstreamRecord(kind, "<root>", "expected a list")
    return tuple(parse(r) for r in records)


def format_display_time(raw: Any, kind: str, key: str) -> str:
    """Render an upstream ISO-8601 timestamp in human display form."""

    try:
        dt = datetime.fromisoformat(str(raw))
    except ValueError as exc:
        raise MalformedUpstreamRecord(kind, key, f"bad timestamp {raw!r}") from exc
    if dt.tzinfo is None:
        return dt.strftime(DISPLAY_TIME_FORMAT_NAIVE)
    return dt.strftime(DISPLAY_TIME_FORMAT)


# --- places ---


def parse_stop_info(info: Record) -> Stop:
    # Stop endpoints omit PlaceType; the tag defaults to Stop.
    geo, utm_loc = _locations(info, "stop")
    return Stop(
        id=_int(_require(info, "ID", "stop"), "stop", "ID"),
        name=_name(info, "stop"),
        geo_location=geo,
        utm_location=utm_loc,
        district=info.get("District"),
        short_name=info.get("ShortName"),
        zone=info.get("Zone"),
        is_hub=bool(info.get("IsHub", False)),
        walking_time_mins=info.get("WalkingMinutes") or None,
    )


def parse_poi_info(info: Record) -> Poi:
    geo, utm_loc = _locations(info, "poi")
    nearby = [
        s
        for s in _list(info, "Stops", "poi")
        if _require(s, "ID", "stop") != NO_STOP_ID
    ]
    return Poi(
        id=_int(_require(info, "ID", "poi"), "poi", "ID"),
        name=_name(info, "poi"),
        geo_location=geo,
        utm_location=utm_loc,
        district=info.get("District"),
        nearby_stops=tuple(parse_stop_info(s) for s in nearby),
    )


def parse_area_info(info: Record) -> Area:
    geo, utm_loc = _locations(_require(info, "Center", "area"), "area")
    return Area(
        id=_int(_require(info, "ID", "area"), "area", "ID"),
        name=_name(info, "area"),
        geo_location=geo,
        utm_location=utm_loc,
        district=info.get("District"),
        stops=tuple(parse_stop_info(s) for s in _list(info, "Stops", "area")),
    )


def parse_street_info(info: Record) -> Street:
    return Street(
        id=_int(_require(info, "ID", "street"), "street", "ID"),
        name=_name(info, "street"),
        district=info.get("District"),
    )


def _parse_other_place(info: Record) -> OtherPlace:
    return OtherPlace(
        id=_int(_require(info, "ID", "place"), "place", "ID"),
        name=_name(info, "place"),
        place_type=str(_require(info, "PlaceType", "place")),
        district=info.get("District"),
    )


_PLACE_PARSERS: dict[str, Callable[[Record], Place]] = {
    PlaceType.STOP.value: parse_stop_info,
    PlaceType.POI.value: parse_poi_info,
    PlaceType.AREA.value: parse_area_info,
    PlaceType.STREET.value: parse_street_info,
}


def parse_place(info: Record) -> Place:
    """Dispatch a mixed place-search record on its PlaceType tag."""

    place_type = _require(info, "PlaceType", "place")
    parser = _PLACE_PARSERS.get(place_type, _parse_other_place)
    return parser(info)


def parse_street_houses(street: Record) -> tuple[House, ...]:
    street_name = _name(street, "street")
    street_id = _int(_require(street, "ID", "street"), "street", "ID")
    district = street.get("District")

    houses: list[House] = []
    for h in _list(street, "Houses", "street"):
        geo, utm_loc = _locations(h, "house")
        houses.append(
            House(
                street_name=street_name,
                street_id=street_id,
                name=_name(h, "house"),
                geo_location=geo,
                utm_location=utm_loc,
                district=district,
            )
        )
    return tuple(houses)


# --- lines ---


def parse_line_info(info: Record) -> Line:
    return Line(
        id=_int(_require(info, "ID", "line"), "line", "ID"),
        name=_name(info, "line"),
        transportation_type=_transportation_type(
            _require(info, "Transportation", "line"), "line", "Transportation"
        ),
        color=str(_require(info, "LineColour", "line")),
    )


# --- realtime ---


def parse_deviation(e: Record) -> Deviation:
    return Deviation(
        id=_int(_require(e, "ID", "deviation"), "deviation", "ID"),
        header=str(_require(e, "Header", "deviation")),
    )


def parse_deviations(items: Iterable[Record] | None) -> tuple[Deviation, ...]:
    return tuple(parse_deviation(e) for e in items) if items else ()


def parse_visit(e: Record) -> RealtimeVisit:
    journey = _require(e, "MonitoredVehicleJourney", "visit")
    call = _require(journey, "MonitoredCall", "visit")
    extensions = e.get("Extensions") or {}

    mode = _int(_require(journey, "VehicleMode", "visit"), "visit", "VehicleMode")
    transportation_type = VEHICLE_MODE_TO_TRANSPORTATION_TYPE.get(mode)
    if transportation_type is None:
        raise MalformedUpstreamRecord("visit", "VehicleMode", f"unknown mode {mode}")

    feature_ref = journey.get("VehicleFeatureRef")

    return RealtimeVisit(
        stop_id=_int(_require(e, "MonitoringRef", "visit"), "visit", "MonitoringRef"),
        line_id=_int(_require(journey, "LineRef", "visit"), "visit", "LineRef"),
        destination_name=str(_require(journey, "DestinationName", "visit")),
        name=str(_require(journey, "PublishedLineName", "visit")),
        direction=journey.get("DirectionRef"),
        recorded_at_time=format_display_time(
            _require(e, "RecordedAtTime", "visit"), "visit", "RecordedAtTime"
        ),
        expected_arrival=format_display_time(
            _require(call, "ExpectedArrivalTime", "visit"),
            "visit",
            "ExpectedArrivalTime",
        ),
        deviations=parse_deviations(extensions.get("Deviations")),
        line_colour=extensions.get("LineColour"),
        platform=call.get("DeparturePlatformName"),
        in_congestion=bool(journey.get("InCongestion", False)),
        monitored=bool(journey.get("Monitored", False)),
        transportation_type=transportation_type,
        low_floor=feature_ref == "lowFloor",
    )


# --- travel planner ---


def parse_duration_string(duration: str) -> int:
    """``"HH:MM:SS"`` to whole minutes; seconds are discarded, not rounded."""

    parts = str(duration).split(":")
    if len(parts) != 3:
        raise MalformedUpstreamRecord("duration", "<value>", f"bad duration {duration!r}")
    hours = _int(parts[0], "duration", "hours")
    mins = _int(parts[1], "duration", "minutes")
    return hours * 60 + mins


def _parse_walking_stage(stage: Record, common: dict[str, Any]) -> WalkingStage:
    dep_geo, dep_utm = _locations(_require(stage, "DeparturePoint", "stage"), "stage")
    arr_geo, arr_utm = _locations(_require(stage, "ArrivalPoint", "stage"), "stage")
    return WalkingStage(
        departure_geo_location=dep_geo,
        departure_utm_location=dep_utm,
        arrival_geo_location=arr_geo,
        arrival_utm_location=arr_utm,
        **common,
    )


def _parse_transit_stage(stage: Record, common: dict[str, Any]) -> TransitStage:
    return TransitStage(
        line=_int(_require(stage, "LineId", "stage"), "stage", "LineId"),
        line_name=str(_require(stage, "LineName", "stage")),
        destination_name=str(_require(stage, "Destination", "stage")),
        departure_stop=parse_stop_info(_require(stage, "DepartureStop", "stage")),
        arrival_stop=parse_stop_info(_require(stage, "ArrivalStop", "stage")),
        color=stage.get("LineColour"),
        **common,
    )


def parse_travel_stage(stage: Record) -> TravelStage:
    transportation_type = _transportation_type(
        _require(stage, "Transportation", "stage"), "stage", "Transportation"
    )
    duration = stage.get("TravelTime") or stage.get("WalkingTime")
    if not duration:
        raise MalformedUpstreamRecord("stage", "TravelTime")

    common: dict[str, Any] = {
        "departure_time": str(_require(stage, "DepartureTime", "stage")),
        "arrival_time": str(_require(stage, "ArrivalTime", "stage")),
        "travel_time_mins": parse_duration_string(duration),
    }
    if transportation_type == TransportationType.WALKING:
        return _parse_walking_stage(stage, common)
    return _parse_transit_stage(
        stage, {**common, "transportation_type": transportation_type}
    )


def _remark_text(remark: Any) -> str:
    if isinstance(remark, Mapping):
        return str(remark.get("Header") or remark.get("Text") or "")
    return str(remark)


def parse_travel_plan(plan: Record) -> TravelProposal:
    return TravelProposal(
        departure_time=str(_require(plan, "DepartureTime", "proposal")),
        arrival_time=str(_require(plan, "ArrivalTime", "proposal")),
        travel_time_mins=parse_duration_string(
            _require(plan, "TotalTravelTime", "proposal")
        ),
        remarks=tuple(_remark_text(r) for r in (plan.get("Remarks") or ())),
        stages=tuple(parse_travel_stage(s) for s in _list(plan, "Stages", "proposal")),
    )


def parse_travel_plans(plans: Record) -> tuple[TravelProposal, ...]:
    return tuple(
        parse_travel_plan(p) for p in _list(plans, "TravelProposals", "travel")
    )
