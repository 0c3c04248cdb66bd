"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathsearch.domain.graph import Graph
from pathsearch.domain.terrain import TerrainMap
from pathsearch.utils.graph_reader import read_graph
from pathsearch.utils.terrain_factory import read_terrain


@pytest.fixture
def data_dir() -> Path:
    """Return the directory holding graph and terrain fixtures."""
    return Path(__file__).parent / "data"


@pytest.fixture
def line_graph(data_dir: Path) -> Graph:
    """A(0,0) -> B(1,0) -> C(2,0)."""
    return read_graph(data_dir / "line.txt")


@pytest.fixture
def detour_graph(data_dir: Path) -> Graph:
    """
    Graph where the fewest-hops route S-A-T is much longer than S-B-C-T,
    with a dead-end branch S-D-E pointing away from the target.
    """
    return read_graph(data_dir / "detour.txt")


@pytest.fixture
def disconnected_graph(data_dir: Path) -> Graph:
    """A <-> B, plus Z which only has an outgoing edge to A."""
    return read_graph(data_dir / "disconnected.txt")


@pytest.fixture
def walled_terrain(data_dir: Path) -> TerrainMap:
    """3x3 terrain with the top two cells of the middle column blocked."""
    return TerrainMap(read_terrain(data_dir / "walled.txt"))


@pytest.fixture
def split_terrain(data_dir: Path) -> TerrainMap:
    """2x3 terrain cut in two by a blocked middle column."""
    return TerrainMap(read_terrain(data_dir / "split.txt"))
