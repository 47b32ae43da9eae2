"""Read endpoints for the map, stats panel and details panel."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flightinfo.api.dependencies import get_dashboard
from flightinfo.formatting import (
    altitude_color,
    format_altitude,
    format_heading,
    format_speed,
    format_time_ago,
    format_vertical_rate,
    speed_color,
)
from flightinfo.models.aircraft import AircraftStats, MapMarker
from flightinfo.models.responses import (
    AircraftDetailsResponse,
    AircraftDisplay,
    AircraftListResponse,
)
from flightinfo.services.dashboard import Dashboard

router = APIRouter(prefix="/api/v1", tags=["aircraft"])

logger = logging.getLogger("flightinfo.api.aircraft")


@router.get(
    "/aircraft",
    response_model=AircraftListResponse,
    summary="List aircraft passing the current filters",
)
async def list_aircraft(dashboard: Dashboard = Depends(get_dashboard)) -> AircraftListResponse:
    state = dashboard.observe()
    visible = dashboard.visible_aircraft()
    return AircraftListResponse(
        aircraft=visible,
        total=len(state.data),
        visible=len(visible),
        last_success_at=state.last_success_at,
    )


@router.get(
    "/aircraft/{aircraft_id}",
    response_model=AircraftDetailsResponse,
    summary="Get details for one aircraft",
)
async def get_aircraft(
    aircraft_id: str, dashboard: Dashboard = Depends(get_dashboard)
) -> AircraftDetailsResponse:
    """Resolve a map marker click into the aircraft details panel payload."""

    aircraft = dashboard.select(aircraft_id)
    if aircraft is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Aircraft {aircraft_id} is not in the latest poll result",
        )

    return AircraftDetailsResponse(
        aircraft=aircraft,
        display=AircraftDisplay(
            altitude=format_altitude(aircraft.altitude_feet),
            speed=format_speed(aircraft.speed_knots),
            heading=format_heading(aircraft.heading_degrees),
            vertical_rate=format_vertical_rate(aircraft.vertical_rate_ft_min),
            last_seen=format_time_ago(aircraft.observed_at),
            altitude_color=altitude_color(aircraft.altitude_feet),
            speed_color=speed_color(aircraft.speed_knots),
        ),
    )


@router.get(
    "/markers",
    response_model=list[MapMarker],
    summary="Map markers for the visible aircraft",
)
async def list_markers(dashboard: Dashboard = Depends(get_dashboard)) -> list[MapMarker]:
    return dashboard.markers()


@router.get(
    "/stats",
    response_model=AircraftStats,
    summary="Summary statistics for the visible aircraft",
)
async def get_stats(dashboard: Dashboard = Depends(get_dashboard)) -> AircraftStats:
    return dashboard.stats()
