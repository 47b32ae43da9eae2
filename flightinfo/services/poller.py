"""Polling controller that owns the aircraft refresh lifecycle."""

from __future__ import annotations

import asyncio
import contextlib
from datetime import datetime, timezone
import logging
from typing import Awaitable, Callable, Optional

from flightinfo.config import settings
from flightinfo.errors import FeedError, TransportError
from flightinfo.models.aircraft import Aircraft
from flightinfo.models.poll import ErrorDescriptor, PollState, PollStatus

logger = logging.getLogger("flightinfo.poller")

# Airplanes.live allows roughly one request per second
MIN_POLL_INTERVAL_MS = 1000

FetchAircraft = Callable[[], Awaitable[list[Aircraft]]]
PollListener = Callable[[PollState], None]


class PollingController:
    """Run fetch attempts on demand and on a recurring timer.

    The controller is the single writer of :class:`PollState`. Every attempt,
    whether triggered by the timer or by :meth:`refresh`, is single-flight: a
    trigger that arrives while an attempt is running joins that attempt
    instead of issuing a second request. Failures are recorded in the state and
    never raised to callers; data from the last successful poll is kept.

    Must be driven from a running asyncio event loop.
    """

    def __init__(
        self,
        fetch: FetchAircraft,
        *,
        poll_interval_ms: int | None = None,
        auto_polling: bool | None = None,
        clock: Callable[[], datetime] | None = None,
        min_interval_ms: int = MIN_POLL_INTERVAL_MS,
    ) -> None:
        self._fetch = fetch
        self._min_interval_ms = min_interval_ms
        if poll_interval_ms is None:
            poll_interval_ms = settings.poll_interval_ms
        self._poll_interval_ms = self._check_interval(poll_interval_ms)
        self._auto_polling = (
            settings.auto_polling if auto_polling is None else auto_polling
        )
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._state = PollState()
        self._listeners: list[PollListener] = []
        self._started = False
        self._timer: Optional[asyncio.Task] = None
        self._inflight: Optional[asyncio.Task] = None
        self._status_before_attempt = PollStatus.IDLE
        self._error_before_attempt: Optional[ErrorDescriptor] = None

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def auto_polling(self) -> bool:
        return self._auto_polling

    @property
    def poll_interval_ms(self) -> int:
        return self._poll_interval_ms

    @property
    def is_fetching(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def observe(self) -> PollState:
        """Return the current state snapshot."""

        return self._state

    def subscribe(self, listener: PollListener) -> Callable[[], None]:
        """Call ``listener`` with every new state; returns an unsubscribe hook."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        """Begin polling if auto-polling is enabled; otherwise stay idle."""

        self._started = True
        if not self._auto_polling:
            logger.info("Auto-polling disabled; waiting for a manual refresh")
            return
        logger.info("Starting auto-polling every %s ms", self._poll_interval_ms)
        self._trigger()
        self._schedule()

    def refresh(self) -> asyncio.Future:
        """Trigger an out-of-band attempt and return an awaitable for it.

        The attempt is shielded: cancelling a caller that awaits the returned
        future leaves the shared attempt running for everyone else.
        """

        return asyncio.shield(self._trigger())

    def _trigger(self) -> asyncio.Task:
        if self.is_fetching:
            logger.debug("Refresh requested while fetching; joining in-flight attempt")
            return self._inflight  # type: ignore[return-value]

        self._status_before_attempt = self._state.status
        self._error_before_attempt = self._state.error
        self._update(status=PollStatus.FETCHING, loading=True, error=None)
        self._inflight = asyncio.create_task(self._attempt())
        return self._inflight

    def set_auto_polling(self, enabled: bool) -> None:
        if enabled == self._auto_polling:
            return
        self._auto_polling = enabled
        if not self._started:
            return
        if enabled:
            logger.info("Auto-polling enabled")
            self._trigger()
            self._schedule()
        else:
            # An attempt already in flight is allowed to finish
            logger.info("Auto-polling disabled")
            self._cancel_timer()

    def set_poll_interval_ms(self, interval_ms: int) -> None:
        self._poll_interval_ms = self._check_interval(interval_ms)
        logger.info("Poll interval set to %s ms", self._poll_interval_ms)
        if self._started and self._auto_polling:
            self._schedule()

    async def aclose(self) -> None:
        """Stop the timer and abandon any in-flight attempt."""

        self._started = False
        tasks = [task for task in (self._timer, self._inflight) if task is not None]
        self._timer = None
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        if self._state.loading:
            # The attempt was cancelled before it started running
            self._restore_previous_state()

    async def _attempt(self) -> None:
        try:
            aircraft = await self._fetch()
        except asyncio.CancelledError:
            self._restore_previous_state()
            raise
        except FeedError as exc:
            self._fail(exc)
        except Exception as exc:
            logger.exception("Unexpected error while fetching aircraft")
            self._fail(TransportError(str(exc) or "Failed to fetch aircraft data"))
        else:
            self._update(
                status=PollStatus.READY,
                data=list(aircraft),
                loading=False,
                last_success_at=self._clock(),
            )
            logger.info("Poll succeeded with %s aircraft", len(aircraft))

    def _fail(self, exc: FeedError) -> None:
        if self._state.data:
            logger.warning(
                "Poll failed (%s): %s; keeping %s aircraft from the last success",
                exc.kind.value,
                exc.message,
                len(self._state.data),
            )
        else:
            logger.warning("Poll failed (%s): %s", exc.kind.value, exc.message)
        self._update(
            status=PollStatus.FAILED,
            loading=False,
            error=ErrorDescriptor.from_error(exc),
        )

    def _restore_previous_state(self) -> None:
        self._update(
            status=self._status_before_attempt,
            loading=False,
            error=self._error_before_attempt,
        )

    def _schedule(self) -> None:
        self._cancel_timer()
        self._timer = asyncio.create_task(self._run_timer(self._poll_interval_ms))

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def _run_timer(self, interval_ms: int) -> None:
        interval = interval_ms / 1000
        while True:
            await asyncio.sleep(interval)
            logger.debug("Scheduled poll tick")
            self._trigger()

    def _check_interval(self, interval_ms: int) -> int:
        if interval_ms < self._min_interval_ms:
            raise ValueError(
                f"Poll interval must be at least {self._min_interval_ms} ms"
            )
        return int(interval_ms)

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("Poll state listener failed")


__all__ = [
    "FetchAircraft",
    "MIN_POLL_INTERVAL_MS",
    "PollListener",
    "PollingController",
]
