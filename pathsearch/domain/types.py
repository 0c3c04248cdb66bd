"""Core type definitions shared by the graph and terrain searches."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, Hashable, List, Literal, Optional, Tuple, TypeVar

# Cell position on the terrain grid
Cell = Tuple[int, int]

# Key identifying a node in a search space (a label or a cell)
K = TypeVar("K", bound=Hashable)

# Heuristic function identifiers
HeuristicId = Literal["euclidean", "octile"]


class RouteAlgo(Enum):
    """Routing algorithms supported by graphs and terrain maps."""
    FIRST_PATH = "first_path"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"


class Visit(Enum):
    """Tag of a visited entry in a run's state table."""
    START = "start"
    REACHED = "reached"


@dataclass(frozen=True)
class Point:
    """
    A labeled X,Y point in 2-D Euclidean space.

    Points compare by their distance to the origin, so a point is
    "smaller" than another if it lies closer to (0, 0).
    """
    label: str
    x: int
    y: int

    def distance(self, other: "Point") -> float:
        """Euclidean distance between this point and another."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def distance_to_origin(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __lt__(self, other: "Point") -> bool:
        return self.distance_to_origin() < other.distance_to_origin()

    def __str__(self) -> str:
        return f"{self.label} : {self.x},{self.y}"


@dataclass
class Costs:
    """Stores G, H, and F costs of a visited node."""
    g: float = 0.0  # Cost from start
    h: float = 0.0  # Heuristic estimate to target
    f: float = 0.0  # Total cost (g + h)

    def __post_init__(self):
        """Ensure f = g + h."""
        self.f = self.g + self.h


@dataclass
class SearchState(Generic[K]):
    """
    Transient state of one visited node during a single search run.

    Unvisited nodes have no entry at all. The start entry is tagged
    ``Visit.START`` and has no previous node.
    """
    kind: Visit
    previous: Optional[K]
    cost: Costs

    @property
    def distance_so_far(self) -> float:
        return self.cost.g

    @classmethod
    def start(cls, h: float = 0.0) -> "SearchState[K]":
        return cls(Visit.START, None, Costs(g=0.0, h=h))

    @classmethod
    def reached(cls, previous: K, g: float, h: float = 0.0) -> "SearchState[K]":
        return cls(Visit.REACHED, previous, Costs(g=g, h=h))


@dataclass
class AlgoConfig:
    """Configuration for a routing run."""
    algorithm: RouteAlgo = RouteAlgo.ASTAR
    heuristic: HeuristicId = "euclidean"


@dataclass
class SearchOutcome(Generic[K]):
    """Result and instrumentation of a single routing run."""
    algorithm: RouteAlgo
    path: Optional[List[K]] = None
    queue_insertion_count: int = 0
    traveled_distance: float = 0.0
    states: Dict[K, SearchState[K]] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Whether a route was found."""
        return self.path is not None
