"""Routing orchestration service."""

from __future__ import annotations

import logging

from ...models.domain import Route
from ...schemas.routing import RouteOptimizationRequest, RouteOptimizationResponse, WaypointModel
from ..outputs.formatter import route_summary, route_to_csv
from .optimizer import optimize_route

logger = logging.getLogger(__name__)


def _run(payload: RouteOptimizationRequest) -> Route:
    return optimize_route(
        payload.locations,
        start_location_index=payload.start_location_index,
        end_location_index=payload.end_location_index,
        start_time=payload.start_time,
        algorithm=payload.algorithm,
        average_speed_kmh=payload.average_speed_kmh,
    )


def _to_response(route: Route) -> RouteOptimizationResponse:
    return RouteOptimizationResponse(
        ordered_locations=[
            WaypointModel(
                id=waypoint.location.id,
                name=waypoint.location.name,
                latitude=waypoint.location.latitude,
                longitude=waypoint.location.longitude,
                position=waypoint.position,
                arrival_time=waypoint.arrival_time,
                cumulative_distance_km=waypoint.cumulative_distance_km,
                distance_from_previous_km=waypoint.distance_from_previous_km,
                travel_time_from_previous_min=waypoint.travel_time_from_previous_min,
            )
            for waypoint in route.waypoints
        ],
        total_distance_km=route.total_distance_km,
        total_duration_minutes=route.total_duration_min,
        algorithm=route.algorithm,
        round_trip=route.round_trip,
        passes=route.passes,
        summary=route_summary(route),
    )


def optimize_route_request(payload: RouteOptimizationRequest) -> RouteOptimizationResponse:
    route = _run(payload)
    logger.info(
        "Route request served: %d waypoints, %s",
        len(route.waypoints),
        route.algorithm,
    )
    return _to_response(route)


def optimize_route_request_csv(payload: RouteOptimizationRequest) -> str:
    return route_to_csv(_run(payload))
