"""Neighbor generation for 8-connected terrain cells."""

import math
from typing import List, Tuple

import numpy as np

from .types import Cell

# The 3x3 block around a cell minus its center, row by row
OFFSETS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


def is_valid_cell(cell: Cell, blocked: np.ndarray) -> bool:
    """Check if a cell is within the terrain bounds."""
    row, col = cell
    n_rows, n_cols = blocked.shape
    return 0 <= row < n_rows and 0 <= col < n_cols


def get_neighbors(cell: Cell, blocked: np.ndarray) -> List[Cell]:
    """
    Get the passable cells surrounding a cell.
    Out-of-bounds and blocked cells are filtered out.
    """
    row, col = cell
    neighbors = []

    for dr, dc in OFFSETS:
        neighbor = (row + dr, col + dc)

        # Check bounds
        if not is_valid_cell(neighbor, blocked):
            continue

        if blocked[neighbor]:
            continue

        neighbors.append(neighbor)

    return neighbors


def get_movement_cost(from_cell: Cell, to_cell: Cell) -> float:
    """
    Calculate the cost of a move between two cells.
    Orthogonal steps cost 1, diagonal steps cost √2.
    """
    dr = to_cell[0] - from_cell[0]
    dc = to_cell[1] - from_cell[1]
    return math.sqrt(dr * dr + dc * dc)
