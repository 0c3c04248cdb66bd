"""Remaining-distance estimates used by A* on terrain cells."""

import math
from typing import Callable, Dict

from .types import Cell, HeuristicId


def euclidean_distance(cell: Cell, target: Cell) -> float:
    """Straight-line distance between row/column positions."""
    return math.hypot(cell[0] - target[0], cell[1] - target[1])


def octile_distance(cell: Cell, target: Cell) -> float:
    """
    Cost of the cheapest obstacle-free 8-connected walk: diagonal steps
    while both offsets remain, then straight steps.
    """
    rows = abs(cell[0] - target[0])
    cols = abs(cell[1] - target[1])
    return min(rows, cols) * math.sqrt(2) + abs(rows - cols)


# Both never exceed the true route cost, so A* stays optimal with either
HEURISTICS: Dict[str, Callable[[Cell, Cell], float]] = {
    "euclidean": euclidean_distance,
    "octile": octile_distance,
}


def get_heuristic(heuristic_id: HeuristicId) -> Callable[[Cell, Cell], float]:
    """Get heuristic function by ID."""
    try:
        return HEURISTICS[heuristic_id]
    except KeyError:
        raise ValueError(f"Unknown heuristic '{heuristic_id}'") from None
