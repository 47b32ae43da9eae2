"""API routers for the FlightInfo tracker."""

from fastapi import APIRouter

from .aircraft import router as aircraft_router
from .filters import router as filters_router
from .health import router as health_router
from .polling import router as polling_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(aircraft_router)
api_router.include_router(polling_router)
api_router.include_router(filters_router)

__all__ = ["api_router"]
