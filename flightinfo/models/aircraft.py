"""Canonical aircraft records shared by every downstream consumer."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ON_GROUND_MAX_ALTITUDE_FT = 100
ON_GROUND_MAX_SPEED_KT = 50
UNKNOWN_COUNTRY = "Unknown"


def is_on_ground(altitude_feet: float, speed_knots: float) -> bool:
    """Ground state is derived from altitude and speed, never transmitted."""

    return (
        altitude_feet < ON_GROUND_MAX_ALTITUDE_FT
        and speed_knots < ON_GROUND_MAX_SPEED_KT
    )


class Position(BaseModel):
    """Geographic position in decimal degrees."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class Aircraft(BaseModel):
    """Normalized representation of one tracked aircraft."""

    id: str = Field(..., description="Lowercase ICAO 24-bit transponder address")
    label: str = Field(
        ..., description="Callsign, or the uppercased transponder address"
    )
    position: Position = Field(..., description="Last reported position")
    altitude_feet: int = Field(default=0, ge=0, description="Altitude in feet")
    speed_knots: float = Field(default=0.0, ge=0, description="Ground speed in knots")
    heading_degrees: float = Field(
        default=0.0, ge=0, lt=360, description="Track or heading in degrees"
    )
    vertical_rate_ft_min: float = Field(
        default=0.0, description="Vertical rate in feet per minute"
    )
    on_ground: bool = Field(
        default=False, description="Derived from low altitude and low speed"
    )
    observed_at: datetime = Field(
        ..., description="Time the record was normalized (UTC)"
    )
    squawk_code: Optional[str] = Field(
        default=None, description="Mode A transponder code"
    )
    country: str = Field(
        default=UNKNOWN_COUNTRY, description="Registration country where known"
    )

    model_config = ConfigDict(frozen=True)


class AircraftStats(BaseModel):
    """Summary figures for a collection of aircraft."""

    total: int = Field(default=0, description="Number of aircraft")
    in_air: int = Field(default=0, description="Number of airborne aircraft")
    on_ground: int = Field(default=0, description="Number of grounded aircraft")
    avg_altitude: int = Field(
        default=0, description="Mean altitude of airborne aircraft in feet"
    )
    avg_speed: int = Field(
        default=0, description="Mean ground speed of airborne aircraft in knots"
    )
    max_altitude: int = Field(default=0, description="Highest altitude in feet")
    countries: int = Field(default=0, description="Distinct registration countries")


class MapMarker(BaseModel):
    """Point record consumed by the map widget."""

    id: str
    label: str
    position: Position
    heading_degrees: float
    on_ground: bool
    color: str = Field(..., description="Altitude band color as a hex string")


__all__ = [
    "Aircraft",
    "AircraftStats",
    "MapMarker",
    "ON_GROUND_MAX_ALTITUDE_FT",
    "ON_GROUND_MAX_SPEED_KT",
    "Position",
    "UNKNOWN_COUNTRY",
    "is_on_ground",
]
