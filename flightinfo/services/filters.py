"""Derive the visible aircraft subset from the fetched collection."""

from __future__ import annotations

from typing import Iterable

from flightinfo.models.aircraft import Aircraft
from flightinfo.models.filters import US_BOUNDS, BoundingBox, FilterCriteria


def within_bounds(aircraft: Aircraft, bounds: BoundingBox) -> bool:
    return bounds.contains(aircraft.position.lat, aircraft.position.lon)


def matches_query(aircraft: Aircraft, query: str) -> bool:
    """Case-insensitive substring match on callsign or transponder address."""

    if not query:
        return True
    needle = query.lower()
    return needle in aircraft.label.lower() or needle in aircraft.id.lower()


def within_altitude(aircraft: Aircraft, criteria: FilterCriteria) -> bool:
    return criteria.min_altitude <= aircraft.altitude_feet <= criteria.max_altitude


def within_speed(aircraft: Aircraft, criteria: FilterCriteria) -> bool:
    return criteria.min_speed <= aircraft.speed_knots <= criteria.max_speed


def matches_ground_state(aircraft: Aircraft, criteria: FilterCriteria) -> bool:
    # Each flag is an independent filter, so setting both excludes everything
    if criteria.on_ground_only and not aircraft.on_ground:
        return False
    if criteria.in_air_only and aircraft.on_ground:
        return False
    return True


def filter_aircraft(
    aircraft: Iterable[Aircraft],
    criteria: FilterCriteria,
    bounds: BoundingBox = US_BOUNDS,
) -> list[Aircraft]:
    """Return the aircraft passing every predicate, preserving input order."""

    return [
        ac
        for ac in aircraft
        if within_bounds(ac, bounds)
        and matches_query(ac, criteria.query)
        and within_altitude(ac, criteria)
        and within_speed(ac, criteria)
        and matches_ground_state(ac, criteria)
    ]


__all__ = [
    "filter_aircraft",
    "matches_ground_state",
    "matches_query",
    "within_altitude",
    "within_bounds",
    "within_speed",
]
