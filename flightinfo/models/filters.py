"""Filter inputs for deriving the visible aircraft subset."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BoundingBox(BaseModel):
    """Inclusive latitude/longitude rectangle."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon


# Continental United States
US_BOUNDS = BoundingBox(min_lat=24.5, max_lat=49.0, min_lon=-125.0, max_lon=-66.0)


class FilterCriteria(BaseModel):
    """User-controlled filters applied on top of the geographic bounds."""

    min_altitude: float = Field(default=0, description="Minimum altitude in feet")
    max_altitude: float = Field(default=50000, description="Maximum altitude in feet")
    min_speed: float = Field(default=0, description="Minimum ground speed in knots")
    max_speed: float = Field(default=1000, description="Maximum ground speed in knots")
    query: str = Field(
        default="", description="Case-insensitive callsign or transponder match"
    )
    on_ground_only: bool = Field(default=False, description="Keep grounded aircraft only")
    in_air_only: bool = Field(default=False, description="Keep airborne aircraft only")


__all__ = ["BoundingBox", "FilterCriteria", "US_BOUNDS"]
