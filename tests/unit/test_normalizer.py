from __future__ import annotations

from typing import Any

import pytest

from src.adapters.upstream import normalizer
from src.adapters.upstream.normalizer import (
    parse_area_info,
    parse_duration_string,
    parse_line_info,
    parse_place,
    parse_poi_info,
    parse_stop_info,
    parse_street_houses,
    parse_travel_plans,
    parse_visit,
)
from src.domain.algorithms.coordinates import to_geo
from src.domain.exceptions import MalformedUpstreamRecord
from src.domain.models import (
    Area,
    Deviation,
    OtherPlace,
    PlaceType,
    Poi,
    Stop,
    Street,
    TransitStage,
    TransportationType,
    UtmLocation,
    WalkingStage,
)


def _stop(stop_id: int = 3010011, **extra: Any) -> dict[str, Any]:
    record = {
        "ID": stop_id,
        "Name": "  Jernbanetorget ",
        "ShortName": "JERN",
        "Zone": "1",
        "IsHub": True,
        "District": "Oslo",
        "X": 597700,
        "Y": 6643100,
    }
    record.update(extra)
    return record


def _visit(**journey_extra: Any) -> dict[str, Any]:
    journey = {
        "LineRef": "17",
        "DestinationName": "Rikshospitalet",
        "PublishedLineName": "17",
        "DirectionRef": "1",
        "VehicleMode": 3,
        "InCongestion": False,
        "Monitored": True,
        "MonitoredCall": {
            "ExpectedArrivalTime": "2015-12-10T17:35:00+01:00",
            "DeparturePlatformName": "C",
        },
    }
    journey.update(journey_extra)
    return {
        "MonitoringRef": "3010011",
        "RecordedAtTime": "2015-12-10T17:30:00.123+01:00",
        "MonitoredVehicleJourney": journey,
        "Extensions": {
            "LineColour": "0B91EF",
            "Deviations": [{"ID": 7, "Header": "Sporarbeid"}],
        },
    }


def test_parse_stop_info_trims_name_and_derives_geo() -> None:
    stop = parse_stop_info(_stop())

    assert isinstance(stop, Stop)
    assert stop.name == "Jernbanetorget"
    assert stop.utm_location == UtmLocation(x=597700, y=6643100)
    assert stop.geo_location == to_geo(597700, 6643100)
    assert stop.is_hub is True
    assert stop.walking_time_mins is None


def test_parse_stop_info_defaults_place_type_to_stop() -> None:
    record = _stop()
    assert "PlaceType" not in record
    assert parse_stop_info(record).place_type == PlaceType.STOP


def test_parse_stop_info_requires_name() -> None:
    record = _stop()
    del record["Name"]

    with pytest.raises(MalformedUpstreamRecord) as excinfo:
        parse_stop_info(record)
    assert excinfo.value.field == "Name"


def test_parse_poi_info_drops_sentinel_stops() -> None:
    record = {
        "ID": 42,
        "Name": "Operaen",
        "District": "Oslo",
        "PlaceType": "POI",
        "X": 598000,
        "Y": 6642800,
        "Stops": [
            _stop(0),
            _stop(3010011, WalkingMinutes=4),
            _stop(3010013, WalkingMinutes=6),
        ],
    }

    poi = parse_poi_info(record)

    assert isinstance(poi, Poi)
    assert len(poi.nearby_stops) == 2
    assert [s.id for s in poi.nearby_stops] == [3010011, 3010013]
    assert [s.walking_time_mins for s in poi.nearby_stops] == [4, 6]


def test_parse_area_info_uses_center_point() -> None:
    record = {
        "ID": 1000013,
        "Name": "Oslo S (område)",
        "District": "Oslo",
        "PlaceType": "Area",
        "Center": {"X": 597800, "Y": 6643000},
        "Stops": [_stop()],
    }

    area = parse_area_info(record)

    assert isinstance(area, Area)
    assert area.utm_location == UtmLocation(x=597800, y=6643000)
    assert area.geo_location == to_geo(597800, 6643000)
    assert len(area.stops) == 1


def test_parse_place_dispatches_on_place_type() -> None:
    street = {"ID": 5, "Name": "Karl Johans gate ", "District": "Oslo", "PlaceType": "Street"}
    other = {"ID": 6, "Name": "Somewhere", "District": None, "PlaceType": "Address"}

    assert isinstance(parse_place({**_stop(), "PlaceType": "Stop"}), Stop)
    parsed_street = parse_place(street)
    assert isinstance(parsed_street, Street)
    assert parsed_street.name == "Karl Johans gate"

    parsed_other = parse_place(other)
    assert isinstance(parsed_other, OtherPlace)
    assert parsed_other.place_type == "Address"


def test_parse_place_requires_place_type() -> None:
    with pytest.raises(MalformedUpstreamRecord):
        parse_place(_stop())


def test_parse_line_info() -> None:
    line = parse_line_info(
        {"ID": 17, "Name": " 17 ", "Transportation": 7, "LineColour": "0B91EF"}
    )

    assert line.id == 17
    assert line.name == "17"
    assert line.transportation_type == TransportationType.TRAM
    assert line.color == "0B91EF"


def test_parse_visit_fields() -> None:
    visit = parse_visit(_visit())

    assert visit.stop_id == 3010011
    assert visit.line_id == 17
    assert visit.destination_name == "Rikshospitalet"
    assert visit.name == "17"
    assert visit.direction == "1"
    assert visit.platform == "C"
    assert visit.line_colour == "0B91EF"
    assert visit.monitored is True
    assert visit.in_congestion is False
    assert visit.transportation_type == TransportationType.TRAM
    assert visit.deviations == (Deviation(id=7, header="Sporarbeid"),)
    assert visit.recorded_at_time == "Thu Dec 10 2015 17:30:00 GMT+0100"
    assert visit.expected_arrival == "Thu Dec 10 2015 17:35:00 GMT+0100"


@pytest.mark.parametrize(
    ("vehicle_mode", "expected"),
    [
        (0, TransportationType.BUS),
        (1, TransportationType.BOAT),
        (2, TransportationType.TRAIN),
        (3, TransportationType.TRAM),
        (4, TransportationType.METRO),
    ],
)
def test_vehicle_mode_maps_to_transportation_type(
    vehicle_mode: int, expected: TransportationType
) -> None:
    visit = parse_visit(_visit(VehicleMode=vehicle_mode))
    assert visit.transportation_type == expected


def test_vehicle_mode_two_is_train() -> None:
    assert parse_visit(_visit(VehicleMode=2)).transportation_type == 6


def test_unknown_vehicle_mode_is_malformed() -> None:
    with pytest.raises(MalformedUpstreamRecord):
        parse_visit(_visit(VehicleMode=9))


@pytest.mark.parametrize(
    ("feature_ref", "expected"),
    [("lowFloor", True), ("LowFloor", False), ("", False), (None, False)],
)
def test_low_floor_only_for_exact_feature_ref(
    feature_ref: str | None, expected: bool
) -> None:
    record = _visit()
    if feature_ref is not None:
        record["MonitoredVehicleJourney"]["VehicleFeatureRef"] = feature_ref

    assert parse_visit(record).low_floor is expected


def test_visit_without_extensions_has_no_deviations() -> None:
    record = _visit()
    del record["Extensions"]

    visit = parse_visit(record)

    assert visit.deviations == ()
    assert visit.line_colour is None


def test_deviation_without_header_is_malformed() -> None:
    record = _visit()
    record["Extensions"]["Deviations"] = [{"ID": 7}]

    with pytest.raises(MalformedUpstreamRecord) as excinfo:
        parse_visit(record)
    assert excinfo.value.kind == "deviation"
    assert excinfo.value.field == "Header"


def test_visit_missing_journey_is_malformed() -> None:
    record = _visit()
    del record["MonitoredVehicleJourney"]

    with pytest.raises(MalformedUpstreamRecord):
        parse_visit(record)


@pytest.mark.parametrize(
    ("raw", "minutes"),
    [("01:23:45", 83), ("00:00:59", 0), ("00:07:00", 7), ("10:00:30", 600)],
)
def test_parse_duration_string_discards_seconds(raw: str, minutes: int) -> None:
    assert parse_duration_string(raw) == minutes


def test_parse_duration_string_rejects_garbage() -> None:
    with pytest.raises(MalformedUpstreamRecord):
        parse_duration_string("83")


def test_parse_travel_plans_dispatches_stage_kind() -> None:
    plans = {
        "TravelProposals": [
            {
                "DepartureTime": "2015-12-10T17:30:00",
                "ArrivalTime": "2015-12-10T17:52:00",
                "TotalTravelTime": "00:22:00",
                "Remarks": [],
                "Stages": [
                    {
                        "Transportation": 0,
                        "DepartureTime": "2015-12-10T17:30:00",
                        "ArrivalTime": "2015-12-10T17:34:00",
                        "WalkingTime": "00:04:10",
                        "DeparturePoint": {"X": 597000, "Y": 6643000},
                        "ArrivalPoint": {"X": 597700, "Y": 6643100},
                    },
                    {
                        "Transportation": 8,
                        "DepartureTime": "2015-12-10T17:36:00",
                        "ArrivalTime": "2015-12-10T17:52:00",
                        "TravelTime": "00:16:00",
                        "LineId": 5,
                        "LineName": "5",
                        "LineColour": "EC700C",
                        "Destination": "Vestli",
                        "DepartureStop": _stop(3010011),
                        "ArrivalStop": _stop(3012000),
                    },
                ],
            }
        ]
    }

    (proposal,) = parse_travel_plans(plans)

    assert proposal.travel_time_mins == 22
    assert proposal.zones == ()
    walking, transit = proposal.stages
    assert isinstance(walking, WalkingStage)
    assert walking.kind == "walking"
    assert walking.travel_time_mins == 4
    assert walking.transportation_type == TransportationType.WALKING
    assert walking.arrival_utm_location == UtmLocation(x=597700, y=6643100)

    assert isinstance(transit, TransitStage)
    assert transit.kind == "transit"
    assert transit.transportation_type == TransportationType.METRO
    assert transit.line == 5
    assert transit.departure_stop.id == 3010011
    assert transit.arrival_stop.id == 3012000
    assert transit.color == "EC700C"


def test_parse_street_houses() -> None:
    street = {
        "ID": 12345,
        "Name": "Karl Johans gate",
        "District": "Oslo",
        "Houses": [
            {"Name": "1", "X": 597600, "Y": 6643000},
            {"Name": "2 ", "X": 597610, "Y": 6643010},
        ],
    }

    houses = parse_street_houses(street)

    assert [h.name for h in houses] == ["1", "2"]
    assert all(h.street_id == 12345 for h in houses)
    assert all(h.street_name == "Karl Johans gate" for h in houses)
    assert houses[1].geo_location == to_geo(597610, 6643010)


def test_parse_many_is_all_or_nothing() -> None:
    good = _stop()
    bad = _stop()
    del bad["X"]

    with pytest.raises(MalformedUpstreamRecord):
        normalizer.parse_many([good, bad], parse_stop_info, "stop")
