"""Labeled-point graph with directed edges and route searches."""

import logging
from typing import Dict, Iterator, List, Optional

from .errors import AmbiguousGraphError, MissingNodeError, UnresolvedEndpointError
from .search import run_search
from .types import Point, RouteAlgo, SearchOutcome

logger = logging.getLogger(__name__)


class Node:
    """
    A point in the graph plus references to its neighboring nodes.

    The neighbor mapping is indexed by label and keeps insertion order,
    which is also the order in which searches expand the neighbors.
    """

    def __init__(self, point: Point):
        self.point = point
        self._neighbors: Dict[str, "Node"] = {}

    @property
    def label(self) -> str:
        return self.point.label

    def add_neighbor(self, other: "Node"):
        self._neighbors[other.label] = other

    def remove_neighbor(self, other: "Node"):
        self._neighbors.pop(other.label, None)

    def has_neighbor(self, label: str) -> bool:
        return label in self._neighbors

    @property
    def neighbors(self) -> List["Node"]:
        return list(self._neighbors.values())

    @property
    def neighbor_labels(self) -> List[str]:
        return list(self._neighbors)

    def __str__(self) -> str:
        return f"{self.point} > " + " ".join(self._neighbors)

    def __repr__(self) -> str:
        return f"Node({self.point!r})"


class Graph:
    """
    A collection of labeled points and the directed edges between them.

    Akin to a road network: nodes are intersections and edges are street
    segments whose length is the Euclidean distance between their ends.

    Attributes:
        queue_insertion_count: Queue additions made by the last route call
        traveled_distance: Length of the route found by the last route call
        last_outcome: Full outcome (including per-node state) of the last call
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self.queue_insertion_count = 0
        self.traveled_distance = 0.0
        self.last_outcome: Optional[SearchOutcome[str]] = None

    def size(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: str) -> bool:
        return label in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def get_node(self, label: str) -> Optional[Node]:
        """Get node by label, returns None if absent."""
        return self._nodes.get(label)

    # Graph construction

    def add_node(self, point: Point):
        """Add a node for the point. Raises AmbiguousGraphError on a duplicate label."""
        if point.label in self._nodes:
            raise AmbiguousGraphError(f"Ambiguous graph: label '{point.label}' already exists")
        self._nodes[point.label] = Node(point)

    def remove_node(self, label: str) -> Point:
        """Remove a node and every edge pointing to it. Returns its point."""
        node = self._require(label)
        for other in self._nodes.values():
            other.remove_neighbor(node)
        del self._nodes[label]
        return node.point

    def add_edge(self, from_label: str, to_label: str):
        """Add the directed edge from_label -> to_label."""
        self._require(from_label).add_neighbor(self._require(to_label))

    def remove_edge(self, from_label: str, to_label: str):
        """Remove the directed edge from_label -> to_label, if present."""
        self._require(from_label).remove_neighbor(self._require(to_label))

    def _require(self, label: str) -> Node:
        node = self._nodes.get(label)
        if node is None:
            raise MissingNodeError(f"Node '{label}' is not in the graph")
        return node

    def __str__(self) -> str:
        return "\n".join(str(self._nodes[label]) for label in sorted(self._nodes))

    # Search space

    def neighbors(self, label: str) -> List[str]:
        return self._nodes[label].neighbor_labels

    def distance(self, a: str, b: str) -> float:
        return self._nodes[a].point.distance(self._nodes[b].point)

    # Routing

    def reset(self):
        """Clear the state and instrumentation of the last route call."""
        self.queue_insertion_count = 0
        self.traveled_distance = 0.0
        self.last_outcome = None

    def route(self, from_label: str, to_label: str, algorithm: RouteAlgo) -> Optional[List[str]]:
        """
        Calculate a route from from_label to to_label.

        Returns:
            List of labels from start to target inclusive, or None if the
            target cannot be reached.

        Raises:
            UnresolvedEndpointError: If either label is not in the graph
        """
        missing = [label for label in (from_label, to_label) if label not in self._nodes]
        if missing:
            raise UnresolvedEndpointError(f"Cannot resolve route endpoint(s): {', '.join(missing)}")

        self.reset()
        target_point = self._nodes[to_label].point
        outcome = run_search(
            self,
            from_label,
            to_label,
            algorithm,
            heuristic=lambda label: self._nodes[label].point.distance(target_point),
        )

        self.last_outcome = outcome
        self.queue_insertion_count = outcome.queue_insertion_count
        self.traveled_distance = outcome.traveled_distance
        if not outcome.found:
            logger.debug("No route from %s to %s (%s)", from_label, to_label, algorithm.value)
        return outcome.path

    def route_first_path(self, from_label: str, to_label: str) -> Optional[List[str]]:
        """Route with the FirstPath (breadth-first) algorithm."""
        return self.route(from_label, to_label, RouteAlgo.FIRST_PATH)

    def route_dijkstra(self, from_label: str, to_label: str) -> Optional[List[str]]:
        """Route with the FIFO-relaxation Dijkstra algorithm."""
        return self.route(from_label, to_label, RouteAlgo.DIJKSTRA)

    def route_astar(self, from_label: str, to_label: str) -> Optional[List[str]]:
        """Route with the A* algorithm guided by straight-line distance to the target."""
        return self.route(from_label, to_label, RouteAlgo.ASTAR)
