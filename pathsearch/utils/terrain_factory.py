"""Terrain factory for reading, generating, and preparing blocked/open matrices."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .. import config
from ..domain.errors import GraphFormatError
from ..domain.types import Cell

logger = logging.getLogger(__name__)


def create_open_terrain(n_rows: int, n_cols: int) -> np.ndarray:
    """
    Create a terrain with no blocked cells.

    Raises:
        ValueError: If n_rows or n_cols <= 0
    """
    if n_rows <= 0 or n_cols <= 0:
        raise ValueError(f"Terrain dimensions must be positive, got {n_rows}x{n_cols}")
    return np.zeros((n_rows, n_cols), dtype=bool)


def parse_terrain(lines: Iterable[str]) -> np.ndarray:
    """
    Parse terrain text into a blocked matrix.

    Blocked cells are written as '#' or 'X', open cells as '.', 'o' or a
    space. Trailing newlines are ignored; all rows must have equal width.

    Raises:
        GraphFormatError: On unknown characters or ragged rows
    """
    rows = []
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        row = []
        for char in line:
            if char in config.TERRAIN_BLOCKED_CHARS:
                row.append(True)
            elif char in config.TERRAIN_OPEN_CHARS:
                row.append(False)
            else:
                raise GraphFormatError(f"Line {line_number}: unknown terrain character '{char}'")
        if rows and len(row) != len(rows[0]):
            raise GraphFormatError(
                f"Line {line_number}: expected {len(rows[0])} cells, got {len(row)}"
            )
        rows.append(row)

    if not rows:
        raise GraphFormatError("Terrain text has no rows")
    return np.array(rows, dtype=bool)


def read_terrain(filepath: Union[str, Path]) -> np.ndarray:
    """Read a blocked matrix from a terrain text file."""
    with open(filepath, "r", encoding="utf-8") as f:
        terrain = parse_terrain(f)
    logger.debug("Read %dx%d terrain from %s", terrain.shape[0], terrain.shape[1], filepath)
    return terrain


def generate_terrain(n_rows: int, n_cols: int,
                     density: float = config.DEFAULT_TERRAIN_DENSITY,
                     seed: Optional[int] = None,
                     keep_open: Iterable[Cell] = ()) -> np.ndarray:
    """
    Generate a random terrain.

    Args:
        n_rows: Number of rows (must be > 0)
        n_cols: Number of columns (must be > 0)
        density: Share of blocked cells (0.0 to 1.0)
        seed: Seed for reproducible terrain
        keep_open: Cells that must stay open, e.g. route endpoints

    Returns:
        Blocked matrix with exactly int(n_rows * n_cols * density) blocked
        cells, minus any cells forced open.
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    terrain = create_open_terrain(n_rows, n_cols)
    rng = np.random.default_rng(seed)

    num_blocked = int(terrain.size * density)
    blocked_indices = rng.choice(terrain.size, size=num_blocked, replace=False)
    terrain.flat[blocked_indices] = True

    for cell in keep_open:
        terrain[cell] = False

    return terrain
