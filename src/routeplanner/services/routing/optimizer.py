"""Route optimization entry point."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from ...config import settings
from ...models.domain import Route
from .assembler import assemble_route
from .distance import build_distance_matrix
from .nearest_neighbor import nearest_neighbor_order
from .two_opt import two_opt
from .validation import (
    coerce_locations,
    parse_start_time,
    validate_algorithm,
    validate_index,
    validate_speed,
)

logger = logging.getLogger(__name__)


def optimize_route(
    locations: Sequence[Any],
    start_location_index: int = 0,
    end_location_index: Optional[int] = None,
    start_time: datetime | str | None = None,
    algorithm: Optional[str] = None,
    average_speed_kmh: Optional[float] = None,
    max_passes: Optional[int] = None,
) -> Route:
    """Order ``locations`` into a single-vehicle route and estimate arrivals.

    Args:
        locations: Location values or mappings with id, name, latitude, longitude.
        start_location_index: Index of the first stop.
        end_location_index: Index of the last stop. Defaults to the start,
            which makes the route a round trip.
        start_time: Departure time (datetime or ISO-8601 string). Defaults to now (UTC).
        algorithm: ``"2opt"`` or ``"nearest-neighbor"``. Defaults to settings.
        average_speed_kmh: Constant travel speed. Defaults to settings.
        max_passes: Cap on 2-opt passes. Defaults to settings.

    Raises:
        InvalidInputError: if any input is rejected. Nothing is computed in that case.
    """
    stops = coerce_locations(locations)
    start = validate_index(start_location_index, len(stops), "startLocationIndex")
    end = start if end_location_index is None else validate_index(
        end_location_index, len(stops), "endLocationIndex"
    )
    departure = parse_start_time(start_time) if start_time is not None else datetime.now(timezone.utc)
    chosen_algorithm = validate_algorithm(algorithm if algorithm is not None else settings.default_algorithm)
    speed = validate_speed(average_speed_kmh if average_speed_kmh is not None else settings.default_average_speed_kmh)
    pass_cap = max_passes if max_passes is not None else settings.two_opt_max_passes

    round_trip = start == end
    matrix = build_distance_matrix(stops)
    order = nearest_neighbor_order(matrix, start, end)

    passes = 0
    if chosen_algorithm == "2opt":
        result = two_opt(
            order,
            matrix,
            round_trip=round_trip,
            epsilon=settings.two_opt_epsilon,
            max_passes=pass_cap,
        )
        order = result.order
        passes = result.passes

    route = assemble_route(
        order,
        stops,
        start_time=departure,
        average_speed_kmh=speed,
        algorithm=chosen_algorithm,
        round_trip=round_trip,
        passes=passes,
    )
    logger.info(
        "Optimized %d stops with %s: %.2f km, %.1f min (passes=%d, round_trip=%s)",
        len(stops),
        chosen_algorithm,
        route.total_distance_km,
        route.total_duration_min,
        passes,
        route.round_trip,
    )
    return route
