"""Route optimization request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RouteOptimizationRequest(_CamelModel):
    # Loosely typed so rejected input is reported by the engine's own validation.
    locations: Any = Field(
        default=None,
        description="Geocoded stops: objects with id, name, latitude and longitude.",
    )
    start_location_index: Any = Field(default=0, alias="startLocationIndex")
    end_location_index: Any = Field(
        default=None,
        alias="endLocationIndex",
        description="Defaults to startLocationIndex (round trip).",
    )
    start_time: Any = Field(
        default=None,
        alias="startTime",
        description="ISO-8601 departure time. Defaults to the current time.",
    )
    algorithm: Any = Field(default=None, description="'2opt' or 'nearest-neighbor'.")
    average_speed_kmh: Any = Field(default=None, alias="averageSpeedKmh")


class WaypointModel(_CamelModel):
    id: str
    name: str
    latitude: float
    longitude: float
    position: int
    arrival_time: datetime = Field(alias="arrivalTime")
    cumulative_distance_km: float = Field(alias="cumulativeDistanceKm")
    distance_from_previous_km: float = Field(alias="distanceFromPreviousKm")
    travel_time_from_previous_min: float = Field(alias="travelTimeFromPreviousMinutes")


class RouteOptimizationResponse(_CamelModel):
    ordered_locations: List[WaypointModel] = Field(alias="orderedLocations")
    total_distance_km: float = Field(alias="totalDistanceKm")
    total_duration_minutes: float = Field(alias="totalDurationMinutes")
    algorithm: str
    round_trip: bool = Field(alias="roundTrip")
    passes: int
    summary: Dict[str, str] = Field(default_factory=dict)
