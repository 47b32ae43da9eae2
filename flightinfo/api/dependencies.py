"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from flightinfo.services.dashboard import Dashboard


def get_dashboard(request: Request) -> Dashboard:
    """Return the dashboard session created during application startup."""

    dashboard: Dashboard | None = getattr(request.app.state, "dashboard", None)
    if dashboard is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard is not running",
        )
    return dashboard
