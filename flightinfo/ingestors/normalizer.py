"""Map Airplanes.live aircraft records onto the canonical Aircraft model."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import math
from typing import Any, Iterable, Mapping, Optional

from flightinfo.models.aircraft import (
    UNKNOWN_COUNTRY,
    Aircraft,
    Position,
    is_on_ground,
)

logger = logging.getLogger("flightinfo.ingestors.normalizer")

# Ordered fallback chains: the first field holding a usable number wins, even
# when later fields are also present.
ALTITUDE_FIELDS = ("alt_baro", "alt_geom")
SPEED_FIELDS = ("gs",)
HEADING_FIELDS = ("track", "true_heading", "mag_heading")
VERTICAL_RATE_FIELDS = ("baro_rate", "geom_rate")

# readsb reports alt_baro as the string "ground" for surface traffic
_GROUND_ALTITUDE = "ground"


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _read_altitude(record: Mapping[str, Any], field: str) -> float | None:
    value = record.get(field)
    if isinstance(value, str) and value.strip().lower() == _GROUND_ALTITUDE:
        return 0.0
    return _as_number(value)


def first_defined(
    record: Mapping[str, Any],
    fields: Iterable[str],
    *,
    default: float = 0.0,
    reader=None,
) -> float:
    """Return the first usable numeric value among ``fields``, else ``default``."""

    for field in fields:
        value = reader(record, field) if reader else _as_number(record.get(field))
        if value is not None:
            return value
    return default


def _label(record: Mapping[str, Any], icao: str) -> str:
    flight = record.get("flight")
    if isinstance(flight, str) and flight.strip():
        return flight.strip()
    return icao.upper()


def normalize_aircraft(
    record: Any, observed_at: datetime | None = None
) -> Optional[Aircraft]:
    """Normalize one upstream record, or return None when it cannot be placed."""

    if not isinstance(record, Mapping):
        return None

    hex_code = record.get("hex")
    if not isinstance(hex_code, str) or not hex_code.strip():
        logger.debug("Skipping record without transponder address: %s", record)
        return None
    icao = hex_code.strip().lower()

    lat = _as_number(record.get("lat"))
    lon = _as_number(record.get("lon"))
    if lat is None or lon is None:
        logger.debug("Skipping %s without a position", icao)
        return None

    altitude = max(
        int(round(first_defined(record, ALTITUDE_FIELDS, reader=_read_altitude))), 0
    )
    speed = max(first_defined(record, SPEED_FIELDS), 0.0)
    heading = first_defined(record, HEADING_FIELDS) % 360
    if heading >= 360:
        # float modulo of tiny negative values rounds up to 360.0
        heading = 0.0
    vertical_rate = first_defined(record, VERTICAL_RATE_FIELDS)

    squawk = record.get("squawk")

    return Aircraft(
        id=icao,
        label=_label(record, icao),
        position=Position(lat=lat, lon=lon),
        altitude_feet=altitude,
        speed_knots=speed,
        heading_degrees=heading,
        vertical_rate_ft_min=vertical_rate,
        on_ground=is_on_ground(altitude, speed),
        observed_at=observed_at or datetime.now(timezone.utc),
        squawk_code=str(squawk) if squawk is not None else None,
        country=UNKNOWN_COUNTRY,
    )


def normalize_records(
    records: Iterable[Any], observed_at: datetime | None = None
) -> list[Aircraft]:
    """Normalize a poll result, keeping one aircraft per transponder address.

    Records without a position are dropped. When the same address appears more
    than once the later record replaces the earlier one.
    """

    observed_at = observed_at or datetime.now(timezone.utc)
    by_id: dict[str, Aircraft] = {}
    duplicates = 0
    for record in records:
        aircraft = normalize_aircraft(record, observed_at)
        if aircraft is None:
            continue
        if aircraft.id in by_id:
            duplicates += 1
        by_id[aircraft.id] = aircraft

    if duplicates:
        logger.warning(
            "Upstream returned %s duplicate transponder records; kept the latest",
            duplicates,
        )
    return list(by_id.values())


__all__ = [
    "ALTITUDE_FIELDS",
    "HEADING_FIELDS",
    "SPEED_FIELDS",
    "VERTICAL_RATE_FIELDS",
    "first_defined",
    "normalize_aircraft",
    "normalize_records",
]
