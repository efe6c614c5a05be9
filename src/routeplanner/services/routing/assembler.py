"""Turn a visiting order into a timed route."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Sequence

from ...models.domain import Location, Route, Waypoint
from .distance import haversine_km, travel_time_minutes


def assemble_route(
    order: Sequence[int],
    locations: Sequence[Location],
    start_time: datetime,
    average_speed_kmh: float,
    algorithm: str,
    round_trip: bool = False,
    passes: int = 0,
) -> Route:
    """Compute per-leg distances and arrival times along ``order``.

    The first stop is reached exactly at ``start_time``; no dwell time is
    added at any stop. Round trips with more than one stop end with a return
    waypoint for the start location.
    """
    stops = [locations[idx] for idx in order]
    if round_trip and len(stops) > 1:
        stops.append(stops[0])

    waypoints: list[Waypoint] = []
    total_distance = 0.0
    total_duration = 0.0
    previous: Location | None = None

    for position, location in enumerate(stops):
        leg_distance = 0.0
        leg_duration = 0.0
        if previous is not None:
            leg_distance = haversine_km(previous, location)
            leg_duration = travel_time_minutes(leg_distance, average_speed_kmh)
        total_distance += leg_distance
        total_duration += leg_duration

        waypoints.append(
            Waypoint(
                location=location,
                position=position,
                arrival_time=start_time + timedelta(minutes=total_duration),
                cumulative_distance_km=total_distance,
                distance_from_previous_km=leg_distance,
                travel_time_from_previous_min=leg_duration,
            )
        )
        previous = location

    return Route(
        waypoints=waypoints,
        total_distance_km=total_distance,
        total_duration_min=total_duration,
        algorithm=algorithm,
        round_trip=round_trip and len(order) > 1,
        passes=passes,
    )
