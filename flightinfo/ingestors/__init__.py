"""Upstream feed clients and record normalization."""

from .airplanes_live import AirplanesLiveClient, parse_feed_payload
from .normalizer import normalize_aircraft, normalize_records

__all__ = [
    "AirplanesLiveClient",
    "normalize_aircraft",
    "normalize_records",
    "parse_feed_payload",
]
