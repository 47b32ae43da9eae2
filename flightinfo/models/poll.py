"""Poll lifecycle state exposed to readers of the polling controller."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from flightinfo.errors import ErrorKind, FeedError
from flightinfo.models.aircraft import Aircraft


class PollStatus(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    READY = "ready"
    FAILED = "failed"


class ErrorDescriptor(BaseModel):
    """Structured, user-presentable description of a failed poll attempt."""

    kind: ErrorKind = Field(..., description="Failure classification")
    message: str = Field(..., description="Human-readable failure message")
    status_code: Optional[int] = Field(
        default=None, description="Upstream HTTP status code, when there was one"
    )
    guidance: str = Field(..., description="Suggested next step for the user")

    @classmethod
    def from_error(cls, exc: FeedError) -> "ErrorDescriptor":
        return cls(
            kind=exc.kind,
            message=exc.message,
            status_code=exc.status_code,
            guidance=exc.guidance,
        )


class PollState(BaseModel):
    """Snapshot of the polling controller."""

    model_config = ConfigDict(frozen=True)

    status: PollStatus = Field(default=PollStatus.IDLE)
    data: list[Aircraft] = Field(default_factory=list)
    loading: bool = Field(default=False)
    error: Optional[ErrorDescriptor] = Field(default=None)
    last_success_at: Optional[datetime] = Field(default=None)


__all__ = ["ErrorDescriptor", "PollState", "PollStatus"]
