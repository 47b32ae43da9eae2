"""Dashboard session combining the poller with user filters."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from flightinfo.formatting import altitude_color
from flightinfo.ingestors.airplanes_live import AirplanesLiveClient
from flightinfo.models.aircraft import Aircraft, AircraftStats, MapMarker
from flightinfo.models.filters import US_BOUNDS, BoundingBox, FilterCriteria
from flightinfo.models.poll import PollState
from flightinfo.services.filters import filter_aircraft
from flightinfo.services.poller import PollingController
from flightinfo.services.stats import compute_stats

logger = logging.getLogger("flightinfo.dashboard")


class Dashboard:
    """Holds filter inputs and derives the visible aircraft for presentation.

    The visible subset is memoized and invalidated whenever the poll state or
    the filter inputs change. Readers never mutate what they receive.
    """

    def __init__(
        self,
        controller: PollingController,
        *,
        bounds: BoundingBox = US_BOUNDS,
        criteria: Optional[FilterCriteria] = None,
    ) -> None:
        self.controller = controller
        self.bounds = bounds
        self._criteria = criteria or FilterCriteria()
        self._visible: list[Aircraft] | None = None
        self._unsubscribe = controller.subscribe(self._on_state_change)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def observe(self) -> PollState:
        return self.controller.observe()

    def start(self) -> None:
        self.controller.start()

    async def aclose(self) -> None:
        self._unsubscribe()
        await self.controller.aclose()

    def refresh(self) -> asyncio.Future:
        return self.controller.refresh()

    def set_auto_polling(self, enabled: bool) -> None:
        self.controller.set_auto_polling(enabled)

    def set_poll_interval_ms(self, interval_ms: int) -> None:
        self.controller.set_poll_interval_ms(interval_ms)

    def set_filter_criteria(self, criteria: FilterCriteria) -> None:
        self._criteria = criteria
        self._visible = None

    def set_search_query(self, query: str) -> None:
        self.set_filter_criteria(self._criteria.model_copy(update={"query": query}))

    def visible_aircraft(self) -> list[Aircraft]:
        if self._visible is None:
            data = self.controller.observe().data
            self._visible = filter_aircraft(data, self._criteria, self.bounds)
            logger.debug(
                "Filtered %s visible aircraft from %s total",
                len(self._visible),
                len(data),
            )
        return self._visible

    def stats(self) -> AircraftStats:
        return compute_stats(self.visible_aircraft())

    def markers(self) -> list[MapMarker]:
        return [
            MapMarker(
                id=ac.id,
                label=ac.label,
                position=ac.position,
                heading_degrees=ac.heading_degrees,
                on_ground=ac.on_ground,
                color=altitude_color(ac.altitude_feet),
            )
            for ac in self.visible_aircraft()
        ]

    def select(self, aircraft_id: str) -> Aircraft | None:
        """Resolve a marker click to the aircraft in the latest poll result."""

        wanted = aircraft_id.strip().lower()
        for aircraft in self.controller.observe().data:
            if aircraft.id == wanted:
                return aircraft
        return None

    def _on_state_change(self, state: PollState) -> None:
        self._visible = None


def build_dashboard(client: AirplanesLiveClient | None = None) -> Dashboard:
    """Dashboard polling the continental US feed with configured settings."""

    client = client or AirplanesLiveClient()
    return Dashboard(PollingController(client.get_us_aircraft))


__all__ = ["Dashboard", "build_dashboard"]
