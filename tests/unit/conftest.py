from __future__ import annotations

import pytest

from src.domain.models import Line, TransportationType


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def tram_line() -> Line:
    return Line(
        id=17, name="17", transportation_type=TransportationType.TRAM, color="0B91EF"
    )


@pytest.fixture
def bus_line() -> Line:
    return Line(
        id=31, name="31", transportation_type=TransportationType.BUS, color="E60000"
    )
