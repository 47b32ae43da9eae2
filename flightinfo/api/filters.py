"""Filter and search inputs for the visible aircraft subset."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flightinfo.api.dependencies import get_dashboard
from flightinfo.models.filters import FilterCriteria
from flightinfo.models.responses import SearchUpdate
from flightinfo.services.dashboard import Dashboard

router = APIRouter(prefix="/api/v1", tags=["filters"])


@router.get("/filters", response_model=FilterCriteria, summary="Get filter criteria")
async def get_filters(dashboard: Dashboard = Depends(get_dashboard)) -> FilterCriteria:
    return dashboard.criteria


@router.put("/filters", response_model=FilterCriteria, summary="Replace filter criteria")
async def put_filters(
    criteria: FilterCriteria, dashboard: Dashboard = Depends(get_dashboard)
) -> FilterCriteria:
    dashboard.set_filter_criteria(criteria)
    return dashboard.criteria


@router.put("/search", response_model=FilterCriteria, summary="Set the search query")
async def put_search(
    update: SearchUpdate, dashboard: Dashboard = Depends(get_dashboard)
) -> FilterCriteria:
    dashboard.set_search_query(update.query)
    return dashboard.criteria
