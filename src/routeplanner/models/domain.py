"""Domain models for stops and optimized routes."""

from dataclasses import dataclass
from datetime import datetime
from typing import List


@dataclass(slots=True, frozen=True)
class Location:
    """A geocoded stop supplied by the caller."""

    id: str
    name: str
    latitude: float
    longitude: float


@dataclass(slots=True)
class Waypoint:
    """A location placed in an optimized route."""

    location: Location
    position: int
    arrival_time: datetime
    cumulative_distance_km: float
    distance_from_previous_km: float
    travel_time_from_previous_min: float


@dataclass(slots=True)
class Route:
    waypoints: List[Waypoint]
    total_distance_km: float
    total_duration_min: float
    algorithm: str
    round_trip: bool
    passes: int = 0
