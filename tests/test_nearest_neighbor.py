import random

from src.routeplanner.models.domain import Location
from src.routeplanner.services.routing.distance import build_distance_matrix
from src.routeplanner.services.routing.nearest_neighbor import nearest_neighbor_order


def _location(lid: str, lat: float, lon: float) -> Location:
    return Location(id=lid, name=f"Stop {lid}", latitude=lat, longitude=lon)


def _scattered(count: int, seed: int = 7) -> list[Location]:
    rng = random.Random(seed)
    return [
        _location(f"S{i}", 40.60 + rng.random() * 0.25, -74.05 + rng.random() * 0.25)
        for i in range(count)
    ]


def test_single_location():
    matrix = build_distance_matrix([_location("A", 21.5, 39.2)])
    assert nearest_neighbor_order(matrix, 0) == [0]


def test_walks_a_line_greedily():
    locations = [
        _location("A", 0, 0),
        _location("FAR", 0, 3),
        _location("NEAR", 0, 1),
        _location("MID", 0, 2),
    ]
    matrix = build_distance_matrix(locations)

    assert nearest_neighbor_order(matrix, 0) == [0, 2, 3, 1]


def test_output_is_permutation_starting_at_start():
    locations = _scattered(12)
    matrix = build_distance_matrix(locations)

    for start in (0, 5, 11):
        order = nearest_neighbor_order(matrix, start)
        assert order[0] == start
        assert len(order) == len(locations)
        assert sorted(order) == list(range(len(locations)))


def test_ties_go_to_lowest_index():
    # B and D are both one degree from A on the equator
    locations = [_location("A", 0, 0), _location("B", 0, 1), _location("C", 1, 1), _location("D", 1, 0)]
    matrix = build_distance_matrix(locations)

    assert nearest_neighbor_order(matrix, 0) == [0, 1, 2, 3]


def test_pinned_end_is_held_back_and_appended():
    locations = [
        _location("A", 0, 0),
        _location("B", 0, 1),
        _location("C", 0, 2),
        _location("D", 0, 3),
    ]
    matrix = build_distance_matrix(locations)

    order = nearest_neighbor_order(matrix, 0, end_index=1)

    assert order == [0, 2, 3, 1]


def test_end_equal_to_start_is_ignored():
    locations = _scattered(6)
    matrix = build_distance_matrix(locations)

    assert nearest_neighbor_order(matrix, 2, end_index=2) == nearest_neighbor_order(matrix, 2)
