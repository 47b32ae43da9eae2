"""Airplanes.live client for live aircraft positions."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
from typing import Any

import httpx

from flightinfo.config import settings
from flightinfo.errors import (
    FeedTimeout,
    HttpError,
    MalformedPayload,
    RateLimited,
    ServiceUnavailable,
    TransportError,
)
from flightinfo.ingestors.normalizer import normalize_records
from flightinfo.models.aircraft import Aircraft

logger = logging.getLogger("flightinfo.ingestors.airplanes_live")

MAX_POINT_RADIUS_NM = 250.0


def parse_feed_payload(payload: Any) -> list[dict[str, Any]]:
    """Extract the aircraft array from a decoded response body."""

    if not isinstance(payload, dict):
        raise MalformedPayload("Response body is not a JSON object")
    records = payload.get("ac")
    if not isinstance(records, list):
        raise MalformedPayload("Invalid response format - no aircraft array")
    return records


class AirplanesLiveClient:
    """Fetch aircraft around a point from the Airplanes.live REST API.

    Each call issues exactly one request and never retries; retry pacing is
    left to the polling controller.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.feed_base_url).rstrip("/")
        self.timeout = timeout or settings.feed_timeout
        self.transport = transport

    def point_url(self, lat: float, lon: float, radius_nm: float) -> str:
        return f"{self.base_url}/point/{lat}/{lon}/{radius_nm:g}"

    async def fetch_records(self, url: str) -> list[dict[str, Any]]:
        """Perform one round trip and return the raw aircraft records.

        Raises a ``FeedError`` subclass for timeouts, transport failures and
        non-2xx responses. A body without an aircraft array yields ``[]``.
        """

        logger.debug("Fetching %s", url)
        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("Airplanes.live request timed out: %s", exc)
            raise FeedTimeout() from exc
        except httpx.RequestError as exc:
            logger.warning("Airplanes.live request failed: %s", exc)
            raise TransportError(f"Failed to reach Airplanes.live: {exc}") from exc

        if response.status_code == 429:
            logger.warning("Airplanes.live rate limit encountered: %s", response.text)
            raise RateLimited()
        if response.status_code == 503:
            logger.warning("Airplanes.live unavailable: %s", response.text)
            raise ServiceUnavailable()
        if not response.is_success:
            logger.warning(
                "Airplanes.live returned HTTP %s: %s",
                response.status_code,
                response.text,
            )
            raise HttpError(response.status_code)

        try:
            payload = response.json()
            records = parse_feed_payload(payload)
        except ValueError as exc:
            logger.warning("Failed to parse Airplanes.live JSON response: %s", exc)
            return []
        except MalformedPayload as exc:
            logger.warning("%s", exc.message)
            return []

        logger.debug(
            "Airplanes.live returned %s records (total=%s)",
            len(records),
            payload.get("total"),
        )
        return records

    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await client.get(url, headers={"Accept": "application/json"})

    async def get_aircraft_by_point(
        self, lat: float, lon: float, radius_nm: float = MAX_POINT_RADIUS_NM
    ) -> list[Aircraft]:
        """Aircraft within ``radius_nm`` of a point, capped at the API maximum."""

        if radius_nm > MAX_POINT_RADIUS_NM:
            logger.warning(
                "Radius %s nm clamped to %s nm (API maximum)",
                radius_nm,
                MAX_POINT_RADIUS_NM,
            )
            radius_nm = MAX_POINT_RADIUS_NM
        return await self._get_aircraft(self.point_url(lat, lon, radius_nm))

    async def get_us_aircraft(self) -> list[Aircraft]:
        """Aircraft over the continental US from a single wide point query."""

        url = self.point_url(
            settings.feed_center_lat, settings.feed_center_lon, settings.feed_radius_nm
        )
        return await self._get_aircraft(url)

    async def _get_aircraft(self, url: str) -> list[Aircraft]:
        records = await self.fetch_records(url)
        aircraft = normalize_records(records, observed_at=datetime.now(timezone.utc))
        logger.info(
            "Normalized %s aircraft from %s records", len(aircraft), len(records)
        )
        return aircraft


__all__ = [
    "AirplanesLiveClient",
    "MAX_POINT_RADIUS_NM",
    "parse_feed_payload",
]
