"""Distance and travel-time model shared by the ordering algorithms."""

from __future__ import annotations

import math
from typing import Sequence

from ...models.domain import Location
from ..geospatial import haversine_km as _haversine_coords
from .errors import NON_POSITIVE_SPEED, InvalidInputError

DistanceMatrix = list[list[float]]


def haversine_km(a: Location, b: Location) -> float:
    """Great-circle distance in kilometers between two locations."""
    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0
    return _haversine_coords(a.latitude, a.longitude, b.latitude, b.longitude)


def travel_time_minutes(distance_km: float, average_speed_kmh: float) -> float:
    """Estimated minutes to cover ``distance_km`` at a constant average speed."""
    if isinstance(average_speed_kmh, bool) or not isinstance(average_speed_kmh, (int, float)):
        raise InvalidInputError(NON_POSITIVE_SPEED, "averageSpeedKmh", "Average speed must be a number.")
    if not math.isfinite(average_speed_kmh) or average_speed_kmh <= 0:
        raise InvalidInputError(
            NON_POSITIVE_SPEED,
            "averageSpeedKmh",
            f"Average speed must be greater than 0 km/h (got {average_speed_kmh}).",
        )
    return distance_km / average_speed_kmh * 60.0


def build_distance_matrix(locations: Sequence[Location]) -> DistanceMatrix:
    """Symmetric pairwise haversine matrix with a zero diagonal."""
    n = len(locations)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            distance = haversine_km(locations[i], locations[j])
            matrix[i][j] = distance
            matrix[j][i] = distance
    return matrix


def path_length(order: Sequence[int], matrix: DistanceMatrix) -> float:
    """Sum of consecutive legs of an open path through ``order``."""
    return sum(matrix[order[k]][order[k + 1]] for k in range(len(order) - 1))
