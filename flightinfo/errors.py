"""Typed failures raised while fetching the upstream aircraft feed."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed poll attempt."""

    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_PAYLOAD = "malformed_payload"


RATE_LIMIT_GUIDANCE = (
    "Rate limited by Airplanes.live (1 request per second). Wait 60 seconds, "
    "then increase the refresh interval to 20-30 seconds before resuming."
)
GENERIC_GUIDANCE = "Check your internet connection and try again in a moment."


class FeedError(Exception):
    """Base class for aircraft feed failures."""

    kind: ErrorKind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def guidance(self) -> str:
        return GENERIC_GUIDANCE


class RateLimited(FeedError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Rate limit exceeded for Airplanes.live API (1 req/sec). Please wait a moment.",
            status_code=429,
        )

    @property
    def guidance(self) -> str:
        return RATE_LIMIT_GUIDANCE


class ServiceUnavailable(FeedError):
    kind = ErrorKind.SERVICE_UNAVAILABLE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Airplanes.live API is temporarily unavailable. Please try again later.",
            status_code=503,
        )


class FeedTimeout(FeedError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Request timeout - Airplanes.live API is not responding"
        )


class HttpError(FeedError):
    """Any other non-2xx response; ``status_code`` is always set."""

    kind = ErrorKind.HTTP_ERROR

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Airplanes.live API error: HTTP {status_code}", status_code=status_code
        )


class TransportError(FeedError):
    kind = ErrorKind.TRANSPORT_ERROR


class MalformedPayload(FeedError):
    """Response decoded but did not carry the expected aircraft array."""

    kind = ErrorKind.MALFORMED_PAYLOAD


__all__ = [
    "ErrorKind",
    "FeedError",
    "FeedTimeout",
    "GENERIC_GUIDANCE",
    "HttpError",
    "MalformedPayload",
    "RATE_LIMIT_GUIDANCE",
    "RateLimited",
    "ServiceUnavailable",
    "TransportError",
]
