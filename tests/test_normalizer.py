import logging
from datetime import datetime, timezone

import pytest

from flightinfo.ingestors.normalizer import (
    ALTITUDE_FIELDS,
    HEADING_FIELDS,
    VERTICAL_RATE_FIELDS,
    first_defined,
    normalize_aircraft,
    normalize_records,
)
from flightinfo.models.aircraft import UNKNOWN_COUNTRY, Position

OBSERVED_AT = datetime(2024, 5, 3, 19, 40, tzinfo=timezone.utc)


def test_normalize_cruising_aircraft():
    record = {"hex": "abc123", "alt_baro": 35000, "gs": 450, "lat": 40.0, "lon": -95.0}

    aircraft = normalize_aircraft(record, OBSERVED_AT)

    assert aircraft is not None
    assert aircraft.id == "abc123"
    assert aircraft.label == "ABC123"
    assert aircraft.altitude_feet == 35000
    assert aircraft.speed_knots == 450
    assert aircraft.on_ground is False
    assert aircraft.position == Position(lat=40.0, lon=-95.0)
    assert aircraft.heading_degrees == 0
    assert aircraft.vertical_rate_ft_min == 0
    assert aircraft.observed_at == OBSERVED_AT
    assert aircraft.country == UNKNOWN_COUNTRY
    assert aircraft.squawk_code is None


def test_normalize_parked_aircraft_is_on_ground():
    record = {"hex": "def456", "lat": 34.0, "lon": -118.0, "alt_baro": 0, "gs": 0}

    aircraft = normalize_aircraft(record)

    assert aircraft is not None
    assert aircraft.on_ground is True
    assert aircraft.observed_at.tzinfo is not None


@pytest.mark.parametrize(
    "record",
    [
        {"hex": "abc123"},
        {"hex": "abc123", "lat": 40.0},
        {"hex": "abc123", "lon": -95.0},
        {"hex": "abc123", "lat": None, "lon": None, "alt_baro": 1000},
    ],
)
def test_records_without_position_are_dropped(record):
    assert normalize_aircraft(record) is None


@pytest.mark.parametrize("record", [None, "abc123", ["abc123"], {"lat": 1.0, "lon": 2.0}])
def test_records_without_identity_are_dropped(record):
    assert normalize_aircraft(record) is None


def test_transponder_address_is_lowercased_and_callsign_trimmed():
    record = {"hex": "A1B2C3", "flight": "UAL123  ", "lat": 40.0, "lon": -95.0}

    aircraft = normalize_aircraft(record)

    assert aircraft.id == "a1b2c3"
    assert aircraft.label == "UAL123"


def test_blank_callsign_falls_back_to_address():
    record = {"hex": "a1b2c3", "flight": "   ", "lat": 40.0, "lon": -95.0}

    assert normalize_aircraft(record).label == "A1B2C3"


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"alt_baro": 12000, "alt_geom": 12500}, 12000),
        ({"alt_geom": 12500}, 12500),
        ({}, 0),
        ({"alt_baro": "ground", "alt_geom": 150}, 0),
        ({"alt_baro": None, "alt_geom": 800}, 800),
        ({"alt_baro": -75}, 0),
        ({"alt_baro": 1234.6}, 1235),
    ],
)
def test_altitude_fallback_chain(fields, expected):
    record = {"hex": "abc123", "lat": 40.0, "lon": -95.0, **fields}

    assert normalize_aircraft(record).altitude_feet == expected


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"track": 90.5, "true_heading": 100, "mag_heading": 110}, 90.5),
        ({"true_heading": 100, "mag_heading": 110}, 100),
        ({"mag_heading": 110}, 110),
        ({}, 0),
        ({"track": 0, "true_heading": 100}, 0),
        ({"track": 360}, 0),
    ],
)
def test_heading_fallback_chain(fields, expected):
    record = {"hex": "abc123", "lat": 40.0, "lon": -95.0, **fields}

    assert normalize_aircraft(record).heading_degrees == expected


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"baro_rate": -640, "geom_rate": -704}, -640),
        ({"geom_rate": 1216}, 1216),
        ({}, 0),
    ],
)
def test_vertical_rate_fallback_chain(fields, expected):
    record = {"hex": "abc123", "lat": 40.0, "lon": -95.0, **fields}

    assert normalize_aircraft(record).vertical_rate_ft_min == expected


def test_fallback_tables_are_ordered():
    assert ALTITUDE_FIELDS == ("alt_baro", "alt_geom")
    assert HEADING_FIELDS == ("track", "true_heading", "mag_heading")
    assert VERTICAL_RATE_FIELDS == ("baro_rate", "geom_rate")


def test_first_defined_skips_unusable_values():
    record = {"track": "n/a", "true_heading": True, "mag_heading": 42}

    assert first_defined(record, HEADING_FIELDS) == 42
    assert first_defined({}, HEADING_FIELDS, default=-1) == -1


@pytest.mark.parametrize(
    "altitude, speed, expected",
    [
        (0, 0, True),
        (99, 49, True),
        (100, 0, False),
        (0, 50, False),
        (50, 49.9, True),
        (35000, 450, False),
        (5, 120, False),
    ],
)
def test_on_ground_is_derived_from_altitude_and_speed(altitude, speed, expected):
    record = {
        "hex": "abc123",
        "lat": 40.0,
        "lon": -95.0,
        "alt_baro": altitude,
        "gs": speed,
    }

    aircraft = normalize_aircraft(record)

    assert aircraft.on_ground is expected
    assert aircraft.on_ground == (aircraft.altitude_feet < 100 and aircraft.speed_knots < 50)


def test_squawk_is_passed_through():
    record = {"hex": "abc123", "lat": 40.0, "lon": -95.0, "squawk": "7700"}

    assert normalize_aircraft(record).squawk_code == "7700"


def test_normalize_records_drops_positionless_entries():
    records = [
        {"hex": "aaa111", "lat": 40.0, "lon": -95.0},
        {"hex": "bbb222"},
        {"hex": "ccc333", "lat": 41.0, "lon": -96.0},
    ]

    aircraft = normalize_records(records, OBSERVED_AT)

    assert len(aircraft) == len(records) - 1
    assert [ac.id for ac in aircraft] == ["aaa111", "ccc333"]
    assert all(ac.observed_at == OBSERVED_AT for ac in aircraft)


def test_normalize_records_keeps_latest_duplicate(caplog):
    caplog.set_level(logging.WARNING, logger="flightinfo.ingestors.normalizer")
    records = [
        {"hex": "aaa111", "lat": 40.0, "lon": -95.0, "alt_baro": 1000},
        {"hex": "bbb222", "lat": 41.0, "lon": -96.0},
        {"hex": "AAA111", "lat": 40.5, "lon": -95.5, "alt_baro": 2000},
    ]

    aircraft = normalize_records(records)

    assert len(aircraft) == 2
    by_id = {ac.id: ac for ac in aircraft}
    assert by_id["aaa111"].altitude_feet == 2000
    assert by_id["aaa111"].position == Position(lat=40.5, lon=-95.5)
    assert "1 duplicate" in caplog.text
