"""Configuration settings for the FlightInfo tracker."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("flightinfo.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    flightinfo_env: str = os.getenv("FLIGHTINFO_ENV", "local")
    log_level: str = os.getenv("FLIGHTINFO_LOG_LEVEL", "INFO")

    # Airplanes.live feed
    feed_base_url: str = os.getenv("FEED_BASE_URL", "https://api.airplanes.live/v2")
    feed_timeout: float = float(os.getenv("FEED_TIMEOUT", "30.0"))
    # Centre of the continental US with a radius wide enough to cover it
    feed_center_lat: float = float(os.getenv("FEED_CENTER_LAT", "39.8"))
    feed_center_lon: float = float(os.getenv("FEED_CENTER_LON", "-98.5"))
    feed_radius_nm: float = float(os.getenv("FEED_RADIUS_NM", "1500"))

    # Polling
    poll_interval_ms: int = int(os.getenv("POLL_INTERVAL_MS", "15000"))
    auto_polling: bool = _get_bool("AUTO_POLLING", default=True)


settings = Settings()

if settings.poll_interval_ms < 1000:
    logger.warning(
        "POLL_INTERVAL_MS=%s is below the upstream rate limit; using 1000",
        settings.poll_interval_ms,
    )
    settings.poll_interval_ms = 1000

__all__ = ["settings", "Settings"]
