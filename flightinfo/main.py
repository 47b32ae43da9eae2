from __future__ import annotations

import contextlib
import logging
import time

from fastapi import FastAPI, Request

from flightinfo.api import api_router
from flightinfo.config import settings
from flightinfo.services.dashboard import build_dashboard

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("flightinfo")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Start polling on startup and stop it on shutdown."""

    app.state.dashboard = build_dashboard()
    app.state.dashboard.start()
    logger.info(
        "Dashboard started (auto_polling=%s, interval_ms=%s)",
        settings.auto_polling,
        settings.poll_interval_ms,
    )

    try:
        yield
    finally:
        await app.state.dashboard.aclose()
        logger.info("Dashboard stopped")


app = FastAPI(title="FlightInfo Tracker", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "FlightInfo tracker is running"}
