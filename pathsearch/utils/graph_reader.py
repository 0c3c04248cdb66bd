"""
Reader for the textual graph format.

Each non-empty line describes one node and its outgoing edges:

    A : 10,20 > B C D

Edges naming a label that no line defines are ignored.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Union

from ..domain.errors import AmbiguousGraphError, GraphFormatError
from ..domain.graph import Graph
from ..domain.types import Point

logger = logging.getLogger(__name__)

_POINT_REGEX = re.compile(r"(\w+)\s*:\s*(-?\d+)\s*,\s*(-?\d+)")


def parse_point(text: str) -> Point:
    """
    Parse a point descriptor such as ``"A : 10,20"``.

    Raises:
        GraphFormatError: If the text is not a point descriptor
    """
    match = _POINT_REGEX.fullmatch(text.strip())
    if not match:
        raise GraphFormatError(f"Invalid format: '{text}' is not a Point.")
    label, x, y = match.groups()
    return Point(label, int(x), int(y))


def parse_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from lines in the textual graph format."""
    points: Dict[str, Point] = {}
    links: Dict[str, List[str]] = {}

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        head, _, tail = line.partition(">")
        try:
            point = parse_point(head)
        except GraphFormatError as e:
            raise GraphFormatError(f"Line {line_number}: {e}") from e
        if point.label in points:
            raise AmbiguousGraphError(f"Line {line_number}: label '{point.label}' defined twice")
        points[point.label] = point
        links[point.label] = tail.split()

    graph = Graph()
    for point in points.values():
        graph.add_node(point)

    for label, neighbors in links.items():
        for neighbor in neighbors:
            if neighbor not in points:
                logger.debug("Ignoring edge %s -> %s to an undefined node", label, neighbor)
                continue
            graph.add_edge(label, neighbor)

    logger.debug("Parsed graph with %d nodes", graph.size())
    return graph


def read_graph(filepath: Union[str, Path]) -> Graph:
    """Read a graph from a file in the textual graph format."""
    with open(filepath, "r", encoding="utf-8") as f:
        return parse_graph(f)
