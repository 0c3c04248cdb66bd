"""
Command-line entry point for pathsearch.

Usage:
    python -m pathsearch graph graph.txt A K --algo dijkstra
    python -m pathsearch terrain moon.txt --start 0,0 --target 9,14
    python -m pathsearch terrain moon.txt --start 3,3 --target 60,80 --pixels

Exit codes: 0 when a route is found, 1 when no route exists, 2 on invalid
input (unreadable file, malformed text, unresolvable endpoints).
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import config
from .domain.errors import GraphError, GraphFormatError, UnresolvedEndpointError
from .domain.heuristics import HEURISTICS
from .domain.terrain import TerrainMap
from .domain.types import AlgoConfig, Cell, RouteAlgo
from .utils.graph_reader import read_graph
from .utils.terrain_factory import read_terrain

logger = logging.getLogger("pathsearch")

EXIT_ROUTE = 0
EXIT_NO_ROUTE = 1
EXIT_INPUT_ERROR = 2


def parse_cell(text: str) -> Cell:
    """Parse a 'row,col' (or 'x,y' in pixel mode) pair."""
    try:
        first, second = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected two comma-separated integers, got '{text}'")
    return (first, second)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--algo",
        choices=[algo.value for algo in RouteAlgo],
        default=config.DEFAULT_ALGORITHM.value,
        help=f"Routing algorithm (default: {config.DEFAULT_ALGORITHM.value})",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        prog="pathsearch",
        description="Find routes over labeled-point graphs and terrain grids.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    graph_parser = subparsers.add_parser("graph", parents=[common], help="Route over a graph file")
    graph_parser.add_argument("file", help="Graph file ('A : x,y > B C' per line)")
    graph_parser.add_argument("start", help="Label of the start node")
    graph_parser.add_argument("target", help="Label of the target node")

    terrain_parser = subparsers.add_parser("terrain", parents=[common], help="Route over a terrain file")
    terrain_parser.add_argument("file", help="Terrain file ('#' blocked, '.' open)")
    terrain_parser.add_argument("--start", type=parse_cell, required=True,
                                help="Start cell as row,col")
    terrain_parser.add_argument("--target", type=parse_cell, required=True,
                                help="Target cell as row,col")
    terrain_parser.add_argument(
        "--pixels",
        action="store_true",
        help="Read --start/--target as x,y image pixels instead of row,col",
    )
    terrain_parser.add_argument(
        "--area-size",
        type=int,
        default=config.TERRAIN_AREA_SIZE,
        help=f"Pixel side of one cell in --pixels mode (default: {config.TERRAIN_AREA_SIZE})",
    )
    terrain_parser.add_argument(
        "--heuristic",
        choices=sorted(HEURISTICS),
        default=config.DEFAULT_HEURISTIC,
        help=f"A* heuristic (default: {config.DEFAULT_HEURISTIC})",
    )
    terrain_parser.add_argument(
        "--show",
        action="store_true",
        help="Print the terrain with the route drawn on it",
    )
    return parser.parse_args(argv)


def run_graph(args: argparse.Namespace) -> int:
    graph = read_graph(args.file)
    logger.info("Loaded graph with %d nodes from %s", graph.size(), args.file)

    path = graph.route(args.start, args.target, RouteAlgo(args.algo))
    print(f"Route:     {'[' + ', '.join(path) + ']' if path is not None else 'none'}")
    print(f"Distance:  {graph.traveled_distance:.3f}")
    print(f"Enqueued:  {graph.queue_insertion_count}")
    return EXIT_ROUTE if path is not None else EXIT_NO_ROUTE


def run_terrain(args: argparse.Namespace) -> int:
    algo_config = AlgoConfig(algorithm=RouteAlgo(args.algo), heuristic=args.heuristic)
    terrain = TerrainMap(read_terrain(args.file), algo_config)
    logger.info("Loaded %dx%d terrain from %s", terrain.n_rows, terrain.n_cols, args.file)

    start, target = args.start, args.target
    if args.pixels:
        start = terrain.cell_at_pixel(*start, args.area_size)
        target = terrain.cell_at_pixel(*target, args.area_size)

    path = terrain.route(start, target)
    if args.show:
        print(terrain.render(path))
    print(f"Route:     {len(path) if path is not None else 'no'} cells")
    print(f"Distance:  {terrain.traveled_distance:.3f}")
    print(f"Enqueued:  {terrain.queue_insertion_count}")
    return EXIT_ROUTE if path is not None else EXIT_NO_ROUTE


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT,
    )

    try:
        if args.command == "graph":
            return run_graph(args)
        return run_terrain(args)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
    except (GraphError, GraphFormatError, UnresolvedEndpointError) as e:
        print(f"Error: {e}", file=sys.stderr)
    return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
