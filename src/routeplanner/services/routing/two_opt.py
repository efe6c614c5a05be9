"""2-opt local search over a path with pinned endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .distance import DistanceMatrix, path_length

DEFAULT_EPSILON = 1e-9

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TwoOptMove:
    i: int
    j: int
    gain_km: float


@dataclass(slots=True)
class TwoOptResult:
    order: list[int]
    passes: int
    swaps: int
    converged: bool


def closed_path(order: Sequence[int], round_trip: bool) -> list[int]:
    """Return the path 2-opt works on; round trips repeat the start at the end."""
    path = list(order)
    if round_trip and len(path) > 1:
        path.append(path[0])
    return path


def best_two_opt_move(
    path: Sequence[int],
    matrix: DistanceMatrix,
    epsilon: float = DEFAULT_EPSILON,
) -> Optional[TwoOptMove]:
    """Scan every edge pair once and return the largest improving swap.

    Edges are ``(i, i+1)`` and ``(j, j+1)`` with ``i + 1 < j``. Reversing
    ``path[i+1..j]`` never touches index 0 or the last index, so both
    endpoints stay pinned. Returns None when no swap gains more than
    ``epsilon``.
    """
    last = len(path) - 1
    best: Optional[TwoOptMove] = None
    for i in range(0, last - 2):
        a, b = path[i], path[i + 1]
        d_ab = matrix[a][b]
        for j in range(i + 2, last):
            c, d = path[j], path[j + 1]
            gain = d_ab + matrix[c][d] - matrix[a][c] - matrix[b][d]
            if gain > epsilon and (best is None or gain > best.gain_km):
                best = TwoOptMove(i=i, j=j, gain_km=gain)
    return best


def apply_two_opt_move(path: list[int], move: TwoOptMove) -> None:
    path[move.i + 1 : move.j + 1] = reversed(path[move.i + 1 : move.j + 1])


def two_opt(
    order: Sequence[int],
    matrix: DistanceMatrix,
    round_trip: bool = False,
    epsilon: float = DEFAULT_EPSILON,
    max_passes: Optional[int] = None,
) -> TwoOptResult:
    """Refine ``order`` with best-improvement 2-opt until a local optimum.

    After each applied swap the scan restarts from the beginning of the
    changed path. ``max_passes`` caps the number of scans; hitting it returns
    the best order found so far.
    """
    path = closed_path(order, round_trip)
    passes = 0
    swaps = 0
    converged = False

    while True:
        if max_passes is not None and passes >= max_passes:
            if best_two_opt_move(path, matrix, epsilon) is None:
                converged = True
                break
            logger.warning(
                "2-opt stopped after %d passes without reaching a local optimum (%d stops)",
                passes,
                len(order),
            )
            break
        passes += 1
        move = best_two_opt_move(path, matrix, epsilon)
        if move is None:
            converged = True
            break
        apply_two_opt_move(path, move)
        swaps += 1
        logger.debug(
            "2-opt pass %d: reversed positions %d..%d, saved %.6f km (path %.3f km)",
            passes,
            move.i + 1,
            move.j,
            move.gain_km,
            path_length(path, matrix),
        )

    if round_trip and len(path) > 1:
        path = path[:-1]
    return TwoOptResult(order=path, passes=passes, swaps=swaps, converged=converged)
