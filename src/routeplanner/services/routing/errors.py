"""Routing error types."""

from __future__ import annotations

MISSING_LOCATIONS = "missing_locations"
MALFORMED_LOCATION = "malformed_location"
INDEX_OUT_OF_RANGE = "index_out_of_range"
NON_POSITIVE_SPEED = "non_positive_speed"
UNKNOWN_ALGORITHM = "unknown_algorithm"
INVALID_START_TIME = "invalid_start_time"


class InvalidInputError(ValueError):
    """Raised when an optimization request is rejected before any computation."""

    def __init__(self, reason: str, field: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.field = field
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.reason, "field": self.field, "message": self.message}
