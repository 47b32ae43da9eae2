"""Service-layer helpers for the FlightInfo tracker."""

from .dashboard import Dashboard, build_dashboard
from .filters import filter_aircraft
from .poller import MIN_POLL_INTERVAL_MS, PollingController
from .stats import compute_stats

__all__ = [
    "Dashboard",
    "MIN_POLL_INTERVAL_MS",
    "PollingController",
    "build_dashboard",
    "compute_stats",
    "filter_aircraft",
]
