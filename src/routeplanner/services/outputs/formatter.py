"""Serializers and display helpers for optimized routes."""

from __future__ import annotations

import csv
import io
from datetime import datetime

from ...models.domain import Route


def format_distance(distance_km: float) -> str:
    """Format a distance for display, e.g. ``"850 m"`` or ``"12.3 km"``."""
    if distance_km < 1.0:
        return f"{round(distance_km * 1000)} m"
    return f"{distance_km:.1f} km"


def format_duration(minutes: float) -> str:
    """Format a duration for display, e.g. ``"45 min"`` or ``"2 h 5 min"``."""
    if minutes < 60:
        return f"{round(minutes)} min"
    hours = int(minutes // 60)
    mins = round(minutes % 60)
    if mins == 60:
        hours, mins = hours + 1, 0
    return f"{hours} h {mins} min"


def format_time(value: datetime) -> str:
    """Format a timestamp as a 12-hour clock time, e.g. ``"9:30 AM"``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def route_summary(route: Route) -> dict[str, str]:
    summary = {
        "distance": format_distance(route.total_distance_km),
        "duration": format_duration(route.total_duration_min),
    }
    if route.waypoints:
        summary["departure"] = format_time(route.waypoints[0].arrival_time)
        summary["arrival"] = format_time(route.waypoints[-1].arrival_time)
    return summary


def route_to_json(route: Route) -> dict:
    return {
        "algorithm": route.algorithm,
        "round_trip": route.round_trip,
        "passes": route.passes,
        "total_distance_km": route.total_distance_km,
        "total_duration_min": route.total_duration_min,
        "waypoints": [
            {
                "position": waypoint.position,
                "id": waypoint.location.id,
                "name": waypoint.location.name,
                "latitude": waypoint.location.latitude,
                "longitude": waypoint.location.longitude,
                "arrival_time": waypoint.arrival_time.isoformat(),
                "cumulative_distance_km": waypoint.cumulative_distance_km,
                "distance_from_previous_km": waypoint.distance_from_previous_km,
                "travel_time_from_previous_min": waypoint.travel_time_from_previous_min,
            }
            for waypoint in route.waypoints
        ],
    }


def route_to_csv(route: Route) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "position",
        "id",
        "name",
        "latitude",
        "longitude",
        "arrival_time",
        "distance_from_previous_km",
        "travel_time_from_previous_min",
        "cumulative_distance_km",
        "algorithm",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for waypoint in route.waypoints:
        writer.writerow(
            {
                "position": waypoint.position,
                "id": waypoint.location.id,
                "name": waypoint.location.name,
                "latitude": waypoint.location.latitude,
                "longitude": waypoint.location.longitude,
                "arrival_time": waypoint.arrival_time.isoformat(),
                "distance_from_previous_km": waypoint.distance_from_previous_km,
                "travel_time_from_previous_min": waypoint.travel_time_from_previous_min,
                "cumulative_distance_km": waypoint.cumulative_distance_km,
                "algorithm": route.algorithm,
            }
        )
    return buffer.getvalue()
