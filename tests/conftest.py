from datetime import datetime, timezone

import pytest

from flightinfo.models.aircraft import Aircraft, Position


@pytest.fixture
def anyio_backend():
    # The polling controller schedules asyncio tasks directly
    return "asyncio"


OBSERVED_AT = datetime(2024, 5, 3, 19, 40, tzinfo=timezone.utc)


def make_aircraft(
    icao: str = "abc123",
    *,
    label: str | None = None,
    lat: float = 40.0,
    lon: float = -95.0,
    altitude: int = 35000,
    speed: float = 450.0,
    heading: float = 90.0,
    on_ground: bool | None = None,
) -> Aircraft:
    if on_ground is None:
        on_ground = altitude < 100 and speed < 50
    return Aircraft(
        id=icao,
        label=label or icao.upper(),
        position=Position(lat=lat, lon=lon),
        altitude_feet=altitude,
        speed_knots=speed,
        heading_degrees=heading,
        on_ground=on_ground,
        observed_at=OBSERVED_AT,
    )


@pytest.fixture
def aircraft_factory():
    return make_aircraft
