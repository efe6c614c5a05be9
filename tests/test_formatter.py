import csv
import io
from datetime import datetime, timezone

from src.routeplanner.services.outputs.formatter import (
    format_distance,
    format_duration,
    format_time,
    route_summary,
    route_to_csv,
    route_to_json,
)
from src.routeplanner.services.routing.optimizer import optimize_route


def _route():
    locations = [
        {"id": "J1", "name": "Depot", "latitude": 21.50, "longitude": 39.20},
        {"id": "J2", "name": "Villa 12", "latitude": 21.52, "longitude": 39.22},
        {"id": "J3", "name": "Office", "latitude": 21.55, "longitude": 39.18},
    ]
    return optimize_route(locations, start_time="2025-03-03T09:30:00+00:00")


def test_format_distance():
    assert format_distance(0.5) == "500 m"
    assert format_distance(0) == "0 m"
    assert format_distance(12.34) == "12.3 km"


def test_format_duration():
    assert format_duration(45) == "45 min"
    assert format_duration(125) == "2 h 5 min"
    assert format_duration(119.8) == "2 h 0 min"


def test_format_time():
    assert format_time(datetime(2025, 3, 3, 9, 30)) == "9:30 AM"
    assert format_time(datetime(2025, 3, 3, 13, 5)) == "1:05 PM"
    assert format_time(datetime(2025, 3, 3, 0, 0)) == "12:00 AM"
    assert format_time(datetime(2025, 3, 3, 12, 0, tzinfo=timezone.utc)) == "12:00 PM"


def test_route_summary():
    summary = route_summary(_route())

    assert summary["departure"] == "9:30 AM"
    assert summary["distance"].endswith("km")
    assert set(summary) == {"distance", "duration", "departure", "arrival"}


def test_route_to_json():
    route = _route()
    payload = route_to_json(route)

    assert payload["algorithm"] == "2opt"
    assert payload["round_trip"] is True
    assert [w["id"] for w in payload["waypoints"]][0] == "J1"
    assert payload["waypoints"][0]["arrival_time"] == "2025-03-03T09:30:00+00:00"
    assert payload["total_distance_km"] == route.total_distance_km


def test_route_to_csv():
    route = _route()
    rows = list(csv.DictReader(io.StringIO(route_to_csv(route))))

    assert len(rows) == len(route.waypoints)
    assert rows[0]["id"] == "J1"
    assert rows[0]["position"] == "0"
    assert rows[-1]["id"] == "J1"
    assert all(row["algorithm"] == "2opt" for row in rows)
