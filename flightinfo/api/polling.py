"""Poll lifecycle endpoints: state, manual refresh and reconfiguration."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from flightinfo.api.dependencies import get_dashboard
from flightinfo.models.responses import PollingSettingsUpdate, PollStateResponse
from flightinfo.services.dashboard import Dashboard

router = APIRouter(prefix="/api/v1", tags=["polling"])

logger = logging.getLogger("flightinfo.api.polling")


def _poll_state(dashboard: Dashboard) -> PollStateResponse:
    state = dashboard.observe()
    return PollStateResponse(
        status=state.status,
        loading=state.loading,
        error=state.error,
        last_success_at=state.last_success_at,
        aircraft_count=len(state.data),
        auto_polling=dashboard.controller.auto_polling,
        poll_interval_ms=dashboard.controller.poll_interval_ms,
    )


@router.get(
    "/poll-state",
    response_model=PollStateResponse,
    summary="Get the current poll lifecycle state",
)
async def get_poll_state(dashboard: Dashboard = Depends(get_dashboard)) -> PollStateResponse:
    return _poll_state(dashboard)


@router.post(
    "/refresh",
    response_model=PollStateResponse,
    summary="Fetch aircraft now",
)
async def refresh(dashboard: Dashboard = Depends(get_dashboard)) -> PollStateResponse:
    """Trigger a manual refresh and wait for it to settle.

    Failures are reported in the returned state rather than as an HTTP error.
    """

    await dashboard.refresh()
    return _poll_state(dashboard)


@router.put(
    "/polling",
    response_model=PollStateResponse,
    summary="Enable or disable auto-polling and change its interval",
)
async def update_polling(
    update: PollingSettingsUpdate, dashboard: Dashboard = Depends(get_dashboard)
) -> PollStateResponse:
    if update.poll_interval_ms is not None:
        dashboard.set_poll_interval_ms(update.poll_interval_ms)
    if update.auto_polling is not None:
        dashboard.set_auto_polling(update.auto_polling)
    logger.info(
        "Polling updated: auto=%s interval_ms=%s",
        dashboard.controller.auto_polling,
        dashboard.controller.poll_interval_ms,
    )
    return _poll_state(dashboard)
