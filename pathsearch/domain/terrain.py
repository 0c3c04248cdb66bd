"""
Terrain map: an implicit grid graph derived from a blocked/open matrix.

Each cell connects to the passable cells of the 3x3 block around it, and a
step costs the Euclidean distance between row/column positions. Cells are
materialized lazily: a cell gets search state only the first time a route
reaches it as a neighbor, and every impassable cell is represented by the
single shared ``BLOCKED`` area.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

from .errors import GraphError, UnresolvedEndpointError
from .heuristics import get_heuristic
from .neighbors import get_movement_cost, get_neighbors, is_valid_cell
from .search import run_search
from .types import AlgoConfig, Cell, Costs, RouteAlgo, SearchOutcome

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class MapArea:
    """A materialized terrain cell and the state the last route left on it."""
    row: int
    col: int
    cost: Costs = field(default_factory=lambda: Costs(g=math.inf))
    previous: Optional[Cell] = None

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


# Shared marker for all impassable cells
BLOCKED = MapArea(-1, -1)


class TerrainMap:
    """
    Routing over a rectangular terrain where ``True`` marks a blocked cell.

    Attributes:
        queue_insertion_count: Queue additions made by the last route call
        traveled_distance: Length of the route found by the last route call
        last_outcome: Full outcome (including per-cell state) of the last call
    """

    def __init__(self, blocked: Union[np.ndarray, Sequence[Sequence[bool]]],
                 config: Optional[AlgoConfig] = None):
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2 or blocked.size == 0:
            raise GraphError(f"Terrain must be a non-empty 2-D matrix, got shape {blocked.shape}")

        self._blocked = blocked
        self.config = config or AlgoConfig()
        self.queue_insertion_count = 0
        self.traveled_distance = 0.0
        self.last_outcome: Optional[SearchOutcome[Cell]] = None

    @property
    def n_rows(self) -> int:
        return self._blocked.shape[0]

    @property
    def n_cols(self) -> int:
        return self._blocked.shape[1]

    @property
    def blocked(self) -> np.ndarray:
        """Read-only view of the blocked matrix."""
        view = self._blocked.view()
        view.flags.writeable = False
        return view

    def is_valid_cell(self, cell: Cell) -> bool:
        """Check if a cell is within the terrain bounds."""
        return is_valid_cell(cell, self._blocked)

    def is_blocked(self, cell: Cell) -> bool:
        return bool(self._blocked[cell])

    def cell_at_pixel(self, x: int, y: int, area_size: int) -> Cell:
        """
        Resolve the pixel (x, y) of the source image to the cell covering it.

        Raises:
            UnresolvedEndpointError: If the pixel falls outside the terrain
        """
        if area_size <= 0:
            raise ValueError(f"Area size must be positive, got {area_size}")
        cell = (y // area_size, x // area_size)
        if x < 0 or y < 0 or not self.is_valid_cell(cell):
            raise UnresolvedEndpointError(f"Pixel ({x}, {y}) is outside the terrain")
        return cell

    # Search space

    def neighbors(self, cell: Cell) -> List[Cell]:
        return get_neighbors(cell, self._blocked)

    def distance(self, a: Cell, b: Cell) -> float:
        return get_movement_cost(a, b)

    # State of the last route

    def area(self, row: int, col: int) -> Optional[MapArea]:
        """
        Get the area at (row, col) as left by the last route.

        Returns BLOCKED for impassable cells and None for cells the last
        route never reached.
        """
        cell = (row, col)
        if not self.is_valid_cell(cell):
            raise IndexError(f"Cell {cell} is out of bounds")
        if self._blocked[cell]:
            return BLOCKED
        if self.last_outcome is None:
            return None
        state = self.last_outcome.states.get(cell)
        if state is None:
            return None
        return MapArea(row, col, state.cost, state.previous)

    def materialized_cells(self) -> List[Cell]:
        """Cells that received search state during the last route."""
        if self.last_outcome is None:
            return []
        return list(self.last_outcome.states)

    def reset(self):
        """Clear the state and instrumentation of the last route call."""
        self.queue_insertion_count = 0
        self.traveled_distance = 0.0
        self.last_outcome = None

    # Routing

    def _check_endpoint(self, cell: Cell, role: str):
        if not self.is_valid_cell(cell):
            raise UnresolvedEndpointError(f"{role} cell {cell} is out of bounds")
        if self._blocked[cell]:
            raise UnresolvedEndpointError(f"{role} cell {cell} is blocked")

    def route(self, start: Cell, target: Cell,
              algorithm: Optional[RouteAlgo] = None) -> Optional[List[Cell]]:
        """
        Calculate a route between two passable cells.

        Args:
            start: (row, col) of the start cell
            target: (row, col) of the target cell
            algorithm: Algorithm to use, defaults to the configured one

        Returns:
            List of cells from start to target inclusive, or None if the
            target cannot be reached.
        """
        start, target = tuple(start), tuple(target)
        self._check_endpoint(start, "Start")
        self._check_endpoint(target, "Target")
        algorithm = algorithm or self.config.algorithm

        self.reset()
        heuristic_func = get_heuristic(self.config.heuristic)
        outcome = run_search(
            self,
            start,
            target,
            algorithm,
            heuristic=lambda cell: heuristic_func(cell, target),
        )

        self.last_outcome = outcome
        self.queue_insertion_count = outcome.queue_insertion_count
        self.traveled_distance = outcome.traveled_distance
        logger.debug("Materialized %d of %d cells", len(outcome.states), self._blocked.size)
        return outcome.path

    def route_first_path(self, start: Cell, target: Cell) -> Optional[List[Cell]]:
        """Route with the FirstPath (breadth-first) algorithm."""
        return self.route(start, target, RouteAlgo.FIRST_PATH)

    def route_dijkstra(self, start: Cell, target: Cell) -> Optional[List[Cell]]:
        """Route with the FIFO-relaxation Dijkstra algorithm."""
        return self.route(start, target, RouteAlgo.DIJKSTRA)

    def route_astar(self, start: Cell, target: Cell) -> Optional[List[Cell]]:
        """Route with the A* algorithm."""
        return self.route(start, target, RouteAlgo.ASTAR)

    def render(self, path: Optional[List[Cell]] = None) -> str:
        """
        Render the terrain as text: '#' blocked, '.' open, '*' route,
        'S' and 'T' the route endpoints.
        """
        rows = [["#" if b else "." for b in line] for line in self._blocked]
        if path:
            for row, col in path:
                rows[row][col] = "*"
            rows[path[0][0]][path[0][1]] = "S"
            rows[path[-1][0]][path[-1][1]] = "T"
        return "\n".join("".join(line) for line in rows)
