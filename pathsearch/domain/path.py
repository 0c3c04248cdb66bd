"""Path reconstruction and validation for routing results."""

from typing import Callable, Iterable, List, Mapping, Optional

from .types import K, SearchState, Visit


def reconstruct_path(target: K, states: Mapping[K, SearchState[K]]) -> Optional[List[K]]:
    """
    Reconstruct the path from start to target by following previous links.
    Returns None if the target was never reached.
    """
    if target not in states:
        return None

    path = [target]
    current = states[target]
    while current.kind is not Visit.START:
        path.append(current.previous)
        current = states[current.previous]

    # Reverse to get path from start to target
    path.reverse()
    return path


def calculate_path_cost(path: List[K], distance: Callable[[K, K], float]) -> float:
    """Calculate the total cost of a path as the sum of its hop distances."""
    if len(path) < 2:
        return 0.0

    total_cost = 0.0
    for i in range(1, len(path)):
        total_cost += distance(path[i - 1], path[i])
    return total_cost


def validate_path(path: List[K], neighbors: Callable[[K], Iterable[K]]) -> bool:
    """
    Validate that a path is non-empty and every hop follows an existing edge.
    """
    if not path:
        return False

    for i in range(1, len(path)):
        if path[i] not in set(neighbors(path[i - 1])):
            return False
    return True
