"""Request and response models for the dashboard API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from flightinfo.models.aircraft import Aircraft
from flightinfo.models.poll import ErrorDescriptor, PollStatus
from flightinfo.services.poller import MIN_POLL_INTERVAL_MS


class AircraftListResponse(BaseModel):
    """Visible aircraft along with the size of the full fetched set."""

    aircraft: list[Aircraft] = Field(..., description="Aircraft passing all filters")
    total: int = Field(..., description="Aircraft in the latest poll result")
    visible: int = Field(..., description="Aircraft passing all filters")
    last_success_at: Optional[datetime] = Field(
        default=None, description="Completion time of the last successful poll"
    )


class AircraftDisplay(BaseModel):
    """Preformatted strings for the details panel."""

    altitude: str
    speed: str
    heading: str
    vertical_rate: str
    last_seen: str
    altitude_color: str
    speed_color: str


class AircraftDetailsResponse(BaseModel):
    """A single aircraft selected from the map."""

    aircraft: Aircraft
    display: AircraftDisplay


class PollStateResponse(BaseModel):
    """Poll lifecycle without the aircraft payload."""

    status: PollStatus
    loading: bool
    error: Optional[ErrorDescriptor] = None
    last_success_at: Optional[datetime] = None
    aircraft_count: int = Field(..., description="Aircraft in the latest poll result")
    auto_polling: bool
    poll_interval_ms: int


class PollingSettingsUpdate(BaseModel):
    """Runtime polling reconfiguration; omitted fields are left unchanged."""

    auto_polling: Optional[bool] = Field(default=None)
    poll_interval_ms: Optional[int] = Field(
        default=None,
        ge=MIN_POLL_INTERVAL_MS,
        description="Interval between scheduled polls in milliseconds",
    )


class SearchUpdate(BaseModel):
    query: str = Field(default="", description="Callsign or transponder fragment")


__all__ = [
    "AircraftDetailsResponse",
    "AircraftDisplay",
    "AircraftListResponse",
    "PollStateResponse",
    "PollingSettingsUpdate",
    "SearchUpdate",
]
