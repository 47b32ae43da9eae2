"""Summary statistics for the stats panel."""

from __future__ import annotations

from typing import Sequence

from flightinfo.formatting import round_half_up
from flightinfo.models.aircraft import Aircraft, AircraftStats


def compute_stats(aircraft: Sequence[Aircraft]) -> AircraftStats:
    """Averages cover airborne aircraft only; max altitude covers all."""

    if not aircraft:
        return AircraftStats()

    in_air = [ac for ac in aircraft if not ac.on_ground]
    on_ground_count = len(aircraft) - len(in_air)

    avg_altitude = avg_speed = 0
    if in_air:
        count = len(in_air)
        avg_altitude = round_half_up(sum(ac.altitude_feet for ac in in_air) / count)
        avg_speed = round_half_up(sum(ac.speed_knots for ac in in_air) / count)

    return AircraftStats(
        total=len(aircraft),
        in_air=len(in_air),
        on_ground=on_ground_count,
        avg_altitude=avg_altitude,
        avg_speed=avg_speed,
        max_altitude=max(max(ac.altitude_feet for ac in aircraft), 0),
        countries=len({ac.country for ac in aircraft}),
    )


__all__ = ["compute_stats"]
