import pytest

from src.routeplanner.schemas.routing import RouteOptimizationRequest
from src.routeplanner.services.routing import service as routing_service
from src.routeplanner.services.routing.errors import InvalidInputError


def _location(lid: str, lat: float, lon: float) -> dict:
    return {"id": lid, "name": f"Job {lid}", "latitude": lat, "longitude": lon}


def _request(**overrides) -> RouteOptimizationRequest:
    body = {
        "locations": [
            _location("J1", 21.50, 39.20),
            _location("J2", 21.56, 39.24),
            _location("J3", 21.52, 39.21),
            _location("J4", 21.58, 39.19),
        ],
        "startTime": "2025-03-03T08:00:00Z",
        "averageSpeedKmh": 30,
    }
    body.update(overrides)
    return RouteOptimizationRequest.model_validate(body)


def test_optimize_route_request_builds_response():
    response = routing_service.optimize_route_request(_request(endLocationIndex=3))

    assert response.algorithm == "2opt"
    assert response.round_trip is False
    assert response.ordered_locations[0].id == "J1"
    assert response.ordered_locations[-1].id == "J4"
    assert [w.position for w in response.ordered_locations] == [0, 1, 2, 3]
    assert response.total_distance_km == pytest.approx(response.ordered_locations[-1].cumulative_distance_km)
    assert response.summary["departure"] == "8:00 AM"


def test_request_fields_are_passed_through(monkeypatch: pytest.MonkeyPatch):
    captured = {}
    real = routing_service.optimize_route

    def fake_optimize(locations, **kwargs):
        captured.update(kwargs)
        return real(locations, **kwargs)

    monkeypatch.setattr(routing_service, "optimize_route", fake_optimize)

    routing_service.optimize_route_request(
        _request(startLocationIndex=1, endLocationIndex=2, algorithm="nearest-neighbor", averageSpeedKmh=45)
    )

    assert captured == {
        "start_location_index": 1,
        "end_location_index": 2,
        "start_time": "2025-03-03T08:00:00Z",
        "algorithm": "nearest-neighbor",
        "average_speed_kmh": 45,
    }


def test_service_propagates_invalid_input():
    with pytest.raises(InvalidInputError):
        routing_service.optimize_route_request(_request(locations=[]))


def test_csv_export_has_one_row_per_waypoint():
    content = routing_service.optimize_route_request_csv(_request())
    lines = content.strip().splitlines()

    assert lines[0].startswith("position,id,name")
    # round trip: four stops plus the return to J1
    assert len(lines) == 1 + 5
