"""
Configuration constants for the pathsearch project.

Defaults for the command line and the terrain readers are defined here.
The log level can be overridden from the environment.
"""

import os

from .domain.types import RouteAlgo

# =============================================================================
# Routing Configuration
# =============================================================================

# Algorithm used when none is requested
DEFAULT_ALGORITHM = RouteAlgo.ASTAR

# Heuristic used by A* on terrain maps (graphs always use straight-line distance)
DEFAULT_HEURISTIC = "euclidean"

# Absolute tolerance when comparing traveled distances
DISTANCE_TOLERANCE = 1e-3

# =============================================================================
# Terrain Configuration
# =============================================================================

# Side, in pixels, of the square image area covered by one terrain cell
TERRAIN_AREA_SIZE = 6

# Characters marking blocked and open cells in terrain text files
TERRAIN_BLOCKED_CHARS = "#X"
TERRAIN_OPEN_CHARS = ".o "

# Default share of blocked cells in generated terrain
DEFAULT_TERRAIN_DENSITY = 0.25

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("PATHSEARCH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
