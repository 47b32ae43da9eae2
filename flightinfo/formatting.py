"""Display strings and color bands for aircraft details and map markers."""

from __future__ import annotations

from datetime import datetime, timezone
import math

_COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# (exclusive upper bound, color); the last band is open-ended
_ALTITUDE_BANDS = ((10000, "#60a5fa"), (25000, "#34d399"), (40000, "#fbbf24"))
_SPEED_BANDS = ((100, "#94a3b8"), (250, "#60a5fa"), (400, "#34d399"), (500, "#fbbf24"))
_GROUND_COLOR = "#94a3b8"
_HIGH_COLOR = "#f87171"


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity, like JavaScript Math.round."""

    return math.floor(value + 0.5)


def format_altitude(altitude_feet: float) -> str:
    if altitude_feet == 0:
        return "Ground"
    return f"{altitude_feet:,} ft"


def format_speed(speed_knots: float) -> str:
    return f"{round_half_up(speed_knots)} kts"


def format_heading(heading_degrees: float) -> str:
    point = _COMPASS_POINTS[round_half_up(heading_degrees / 45) % 8]
    return f"{round_half_up(heading_degrees)}° {point}"


def format_vertical_rate(rate_ft_min: float) -> str:
    if rate_ft_min > 0:
        arrow = "↑"
    elif rate_ft_min < 0:
        arrow = "↓"
    else:
        arrow = "→"
    magnitude = abs(rate_ft_min)
    if magnitude == int(magnitude):
        magnitude = int(magnitude)
    return f"{arrow} {magnitude:,} ft/min"


def format_time_ago(when: datetime, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    seconds = math.floor((now - when).total_seconds())

    if seconds < 60:
        return f"{seconds}s ago"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def altitude_color(altitude_feet: float) -> str:
    if altitude_feet == 0:
        return _GROUND_COLOR
    for upper, color in _ALTITUDE_BANDS:
        if altitude_feet < upper:
            return color
    return _HIGH_COLOR


def speed_color(speed_knots: float) -> str:
    for upper, color in _SPEED_BANDS:
        if speed_knots < upper:
            return color
    return _HIGH_COLOR


__all__ = [
    "altitude_color",
    "format_altitude",
    "format_heading",
    "format_speed",
    "format_time_ago",
    "format_vertical_rate",
    "round_half_up",
    "speed_color",
]
