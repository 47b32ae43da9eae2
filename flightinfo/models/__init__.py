"""Pydantic models for the FlightInfo tracker."""

from .aircraft import Aircraft, AircraftStats, MapMarker, Position, is_on_ground
from .filters import US_BOUNDS, BoundingBox, FilterCriteria
from .poll import ErrorDescriptor, PollState, PollStatus

__all__ = [
    "Aircraft",
    "AircraftStats",
    "BoundingBox",
    "ErrorDescriptor",
    "FilterCriteria",
    "MapMarker",
    "PollState",
    "PollStatus",
    "Position",
    "US_BOUNDS",
    "is_on_ground",
]
