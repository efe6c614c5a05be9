"""Greedy nearest-neighbor tour construction."""

from __future__ import annotations

from typing import Optional

from .distance import DistanceMatrix


def nearest_neighbor_order(
    matrix: DistanceMatrix,
    start_index: int,
    end_index: Optional[int] = None,
) -> list[int]:
    """Build a visiting order that always moves to the closest unvisited stop.

    The order starts at ``start_index``. When ``end_index`` is given and differs
    from the start it is held back from the greedy walk and appended last, so
    the returned order already honors the pinned end. Ties go to the lowest
    input index.
    """
    n = len(matrix)
    pinned_end = end_index if end_index is not None and end_index != start_index else None

    unvisited = [idx for idx in range(n) if idx != start_index and idx != pinned_end]
    order = [start_index]
    current = start_index

    while unvisited:
        row = matrix[current]
        # unvisited stays sorted, so strict < keeps the lowest index on ties
        nearest_pos = 0
        nearest_distance = row[unvisited[0]]
        for pos in range(1, len(unvisited)):
            distance = row[unvisited[pos]]
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_pos = pos
        current = unvisited.pop(nearest_pos)
        order.append(current)

    if pinned_end is not None:
        order.append(pinned_end)
    return order
