from __future__ import annotations

import asyncio

import pytest

from src.app.services.transit_query_service import (
    TransitQueryService,
    build_realtime_board,
)
from src.domain.algorithms.coordinates import to_grid
from src.domain.exceptions import (
    AmbiguousLocationInput,
    InvalidPlannerLocation,
    UpstreamUnavailable,
)
from src.domain.models import (
    Deviation,
    GeoLocation,
    Line,
    LocationInput,
    PlannerLocationInput,
    TransportationType,
)
from tests.unit.fakes import FakeTransitProvider, make_stop, make_visit


def test_lines_for_stop_filters_by_type_and_id(tram_line: Line, bus_line: Line) -> None:
    provider = FakeTransitProvider(lines_by_stop={3010011: (tram_line, bus_line)})
    svc = TransitQueryService(provider=provider)

    by_type = asyncio.run(
        svc.lines_for_stop(
            stop_id=3010011, transportation_types=[TransportationType.BUS]
        )
    )
    assert [ln.id for ln in by_type] == [31]

    by_id = asyncio.run(svc.lines_for_stop(stop_id=3010011, line_ids=[17]))
    assert [ln.id for ln in by_id] == [17]

    unfiltered = asyncio.run(svc.lines_for_stop(stop_id=3010011))
    assert len(unfiltered) == 2


def test_realtime_board_filters_listed_visits_only() -> None:
    dev = Deviation(id=1, header="Sporarbeid")
    visits = (
        make_visit(17, "Rikshospitalet", direction="1", platform="A", deviations=(dev,)),
        make_visit(17, "Ljabru", direction="2", platform="B"),
        make_visit(18, "Rikshospitalet", direction="1", platform="A", deviations=(dev,)),
    )

    board = build_realtime_board(visits, direction="1", limit=1)

    assert [v.line_id for v in board.visits] == [17]
    assert len(board.destinations) == 3
    assert [p.name for p in board.platforms] == ["A", "B"]
    assert board.deviations == (dev,)


def test_realtime_passes_filters_to_provider() -> None:
    provider = FakeTransitProvider(visits_by_stop={3010011: (make_visit(),)})
    svc = TransitQueryService(provider=provider)

    board = asyncio.run(
        svc.realtime(
            stop_id=3010011,
            transport_types=[TransportationType.TRAM],
            line_names=["17"],
        )
    )

    assert len(board.visits) == 1
    assert provider.calls == [
        ("fetch_stop_visits", (3010011, [TransportationType.TRAM], ["17"]))
    ]


def test_stop_overview_reports_field_level_failures(tram_line: Line) -> None:
    provider = FakeTransitProvider(
        stops={3010011: make_stop()},
        lines_by_stop={3010011: (tram_line,)},
        failures={
            "fetch_stop_visits": UpstreamUnavailable(
                "https://reisapi.ruter.no/StopVisit/GetDepartures/3010011", 503
            )
        },
    )
    svc = TransitQueryService(provider=provider)

    overview = asyncio.run(svc.stop_overview(stop_id=3010011))

    assert overview.stop is not None
    assert overview.stop.id == 3010011
    assert overview.lines == (tram_line,)
    assert overview.realtime is None
    assert set(overview.errors) == {"realtime"}
    assert "503" in overview.errors["realtime"]


def test_stop_overview_all_parts(tram_line: Line) -> None:
    provider = FakeTransitProvider(
        stops={3010011: make_stop()},
        lines_by_stop={3010011: (tram_line,)},
        visits_by_stop={3010011: (make_visit(platform="A"),)},
    )
    svc = TransitQueryService(provider=provider)

    overview = asyncio.run(svc.stop_overview(stop_id=3010011))

    assert overview.errors == {}
    assert overview.realtime is not None
    assert [p.name for p in overview.realtime.platforms] == ["A"]


def test_closest_stops_rejects_bad_input_before_fetching() -> None:
    provider = FakeTransitProvider(stops={3010011: make_stop()})
    svc = TransitQueryService(provider=provider)

    with pytest.raises(AmbiguousLocationInput):
        asyncio.run(svc.closest_stops(location=LocationInput()))
    assert provider.calls == []


def test_closest_stops_passes_grid_point() -> None:
    provider = FakeTransitProvider(stops={3010011: make_stop()})
    svc = TransitQueryService(provider=provider)

    stops = asyncio.run(
        svc.closest_stops(
            location=LocationInput(geo=GeoLocation(lat=59.9111, lng=10.7503)),
            max_distance=300,
        )
    )

    assert [s.id for s in stops] == [3010011]
    (name, (location, max_distance)) = provider.calls[0]
    assert name == "fetch_closest_stops"
    assert location.geo is None
    assert location.utm == to_grid(59.9111, 10.7503)
    assert max_distance == 300


def test_travel_plan_rejects_empty_planner_location() -> None:
    provider = FakeTransitProvider()
    svc = TransitQueryService(provider=provider)

    with pytest.raises(InvalidPlannerLocation):
        asyncio.run(
            svc.travel_plan(
                origin=PlannerLocationInput(stop_id="3010011"),
                destination=PlannerLocationInput(),
            )
        )
    assert provider.calls == []
