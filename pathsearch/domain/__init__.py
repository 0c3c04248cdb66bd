"""Framework-agnostic routing core: points, graphs, terrain, heap and searches."""

from .errors import (
    AmbiguousGraphError,
    GraphError,
    GraphFormatError,
    MissingNodeError,
    UnresolvedEndpointError,
)
from .graph import Graph, Node
from .priority_queue import HeapPriorityQueue
from .terrain import BLOCKED, MapArea, TerrainMap
from .types import AlgoConfig, Point, RouteAlgo, SearchOutcome, SearchState, Visit

__all__ = [
    "AlgoConfig",
    "AmbiguousGraphError",
    "BLOCKED",
    "Graph",
    "GraphError",
    "GraphFormatError",
    "HeapPriorityQueue",
    "MapArea",
    "MissingNodeError",
    "Node",
    "Point",
    "RouteAlgo",
    "SearchOutcome",
    "SearchState",
    "TerrainMap",
    "UnresolvedEndpointError",
    "Visit",
]
