"""Input validation for route optimization requests.

Every check runs before any distance is computed, so a rejected request
never produces a partial route.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Sequence

from ...models.domain import Location
from ..geospatial import is_valid_coordinate
from .errors import (
    INDEX_OUT_OF_RANGE,
    INVALID_START_TIME,
    MALFORMED_LOCATION,
    MISSING_LOCATIONS,
    NON_POSITIVE_SPEED,
    UNKNOWN_ALGORITHM,
    InvalidInputError,
)

ALGORITHMS = ("2opt", "nearest-neighbor")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def coerce_location(raw: Any, index: int) -> Location:
    """Build a Location from a Location or a mapping with id/name/latitude/longitude."""
    field = f"locations[{index}]"
    if isinstance(raw, Location):
        values = {"id": raw.id, "name": raw.name, "latitude": raw.latitude, "longitude": raw.longitude}
    elif isinstance(raw, Mapping):
        values = raw
    else:
        raise InvalidInputError(MALFORMED_LOCATION, field, f"Location at index {index} must be an object.")

    for key in ("id", "name"):
        if not _is_non_empty_str(values.get(key)):
            raise InvalidInputError(
                MALFORMED_LOCATION,
                f"{field}.{key}",
                f"Location at index {index} is missing a non-empty '{key}'.",
            )
    for key in ("latitude", "longitude"):
        if not _is_number(values.get(key)):
            raise InvalidInputError(
                MALFORMED_LOCATION,
                f"{field}.{key}",
                f"Location at index {index} must have a numeric '{key}'.",
            )

    latitude = float(values["latitude"])
    longitude = float(values["longitude"])
    if not is_valid_coordinate(latitude, longitude):
        raise InvalidInputError(
            MALFORMED_LOCATION,
            field,
            f"Location at index {index} has coordinates out of range ({latitude}, {longitude}).",
        )
    return Location(id=values["id"], name=values["name"], latitude=latitude, longitude=longitude)


def coerce_locations(raw_locations: Any) -> list[Location]:
    if raw_locations is None or isinstance(raw_locations, (str, bytes, Mapping)):
        raise InvalidInputError(MISSING_LOCATIONS, "locations", "Locations array is required and must not be empty.")
    if not isinstance(raw_locations, Sequence) or len(raw_locations) == 0:
        raise InvalidInputError(MISSING_LOCATIONS, "locations", "Locations array is required and must not be empty.")

    locations = [coerce_location(raw, index) for index, raw in enumerate(raw_locations)]

    seen: dict[str, int] = {}
    for index, location in enumerate(locations):
        if location.id in seen:
            raise InvalidInputError(
                MALFORMED_LOCATION,
                f"locations[{index}].id",
                f"Location id '{location.id}' appears at both index {seen[location.id]} and {index}.",
            )
        seen[location.id] = index
    return locations


def validate_index(value: Any, count: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(INDEX_OUT_OF_RANGE, field, f"{field} must be an integer.")
    if value < 0 or value >= count:
        raise InvalidInputError(
            INDEX_OUT_OF_RANGE,
            field,
            f"Invalid {field} {value}: expected a value between 0 and {count - 1}.",
        )
    return value


def validate_speed(value: Any) -> float:
    if not _is_number(value) or value <= 0:
        raise InvalidInputError(
            NON_POSITIVE_SPEED,
            "averageSpeedKmh",
            f"averageSpeedKmh must be a positive number (got {value!r}).",
        )
    return float(value)


def validate_algorithm(value: Any) -> str:
    if value not in ALGORITHMS:
        raise InvalidInputError(
            UNKNOWN_ALGORITHM,
            "algorithm",
            f"Unknown algorithm {value!r}; expected one of {', '.join(ALGORITHMS)}.",
        )
    return value


def parse_start_time(value: Any) -> datetime:
    """Accept a datetime or an ISO-8601 string; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidInputError(
                INVALID_START_TIME, "startTime", f"startTime {value!r} is not an ISO-8601 timestamp."
            ) from exc
    else:
        raise InvalidInputError(INVALID_START_TIME, "startTime", "startTime must be an ISO-8601 timestamp.")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
