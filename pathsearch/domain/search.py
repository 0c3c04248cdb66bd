"""
Routing algorithms shared by graphs and terrain maps.

All three algorithms run the same loop: seed the queue with the start,
pop the next key, stop when it is the target, otherwise run an admission
test on every neighbor and enqueue the admitted ones. They differ only in
the admission test and the queue discipline:

- FirstPath admits unvisited neighbors only, on a FIFO queue. The first
  path found to a node is final.
- Dijkstra admits unvisited neighbors and neighbors whose distance strictly
  improves, on a FIFO queue. Improved nodes are queued again and duplicate
  entries are expanded as they come. Like the others it stops the first time
  the target is popped, so a target first queued through a longer route can
  be reported before a shorter route to it is relaxed.
- A* uses the Dijkstra admission test on a binary heap ordered by
  ``g + h`` with insertion order breaking ties. Duplicate entries whose
  recorded ``g`` is worse than the node's best ``g`` are skipped when popped.

Per-node state lives in a side table owned by the run, so searches never
mutate the graph itself.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Optional, Protocol

from .path import reconstruct_path
from .priority_queue import HeapPriorityQueue
from .types import K, RouteAlgo, SearchOutcome, SearchState

logger = logging.getLogger(__name__)


class SearchSpace(Protocol[K]):
    """Anything a route can be searched over."""

    def neighbors(self, key: K) -> Iterable[K]:
        ...

    def distance(self, a: K, b: K) -> float:
        ...


@dataclass(order=True)
class QueueEntry(Generic[K]):
    """Heap entry ordered by priority, then by insertion sequence."""
    priority: float
    sequence: int
    key: K = field(compare=False)
    g: float = field(compare=False)


def _finish(outcome: SearchOutcome[K], target: K) -> SearchOutcome[K]:
    outcome.path = reconstruct_path(target, outcome.states)
    if outcome.path is not None:
        outcome.traveled_distance = outcome.states[target].distance_so_far
    logger.debug(
        "%s finished: %s, %d queue insertions, distance %.3f",
        outcome.algorithm.value,
        "route found" if outcome.found else "no route",
        outcome.queue_insertion_count,
        outcome.traveled_distance,
    )
    return outcome


def first_path(space: SearchSpace[K], start: K, target: K) -> SearchOutcome[K]:
    """Breadth-first frontier search; every node is admitted at most once."""
    outcome = SearchOutcome(RouteAlgo.FIRST_PATH)
    states = outcome.states
    states[start] = SearchState.start()

    queue = deque([start])
    outcome.queue_insertion_count = 1

    while queue:
        current = queue.popleft()
        if current == target:
            break
        g_current = states[current].distance_so_far
        for neighbor in space.neighbors(current):
            if neighbor in states:
                continue
            g = g_current + space.distance(current, neighbor)
            states[neighbor] = SearchState.reached(current, g)
            queue.append(neighbor)
            outcome.queue_insertion_count += 1

    return _finish(outcome, target)


def dijkstra(space: SearchSpace[K], start: K, target: K) -> SearchOutcome[K]:
    """Relaxation over a FIFO queue; a node is queued again whenever it improves."""
    outcome = SearchOutcome(RouteAlgo.DIJKSTRA)
    states = outcome.states
    states[start] = SearchState.start()

    queue = deque([start])
    outcome.queue_insertion_count = 1

    while queue:
        current = queue.popleft()
        if current == target:
            break
        g_current = states[current].distance_so_far
        for neighbor in space.neighbors(current):
            g = g_current + space.distance(current, neighbor)
            known = states.get(neighbor)
            if known is not None and known.distance_so_far <= g:
                continue
            states[neighbor] = SearchState.reached(current, g)
            queue.append(neighbor)
            outcome.queue_insertion_count += 1

    return _finish(outcome, target)


def astar(
    space: SearchSpace[K],
    start: K,
    target: K,
    heuristic: Callable[[K], float],
) -> SearchOutcome[K]:
    """
    Heuristic-guided search over the binary heap.

    Args:
        space: Search space providing neighbors and edge lengths
        start: Start key
        target: Target key
        heuristic: Estimate of the remaining distance from a key to the target

    Returns:
        SearchOutcome with the path (or None) and instrumentation
    """
    outcome = SearchOutcome(RouteAlgo.ASTAR)
    states = outcome.states
    states[start] = SearchState.start(h=heuristic(start))

    heap: HeapPriorityQueue[QueueEntry[K]] = HeapPriorityQueue()
    heap.add(QueueEntry(states[start].cost.f, 0, start, 0.0))
    outcome.queue_insertion_count = 1
    sequence = 1

    while not heap.is_empty():
        entry = heap.remove()
        current = states[entry.key]
        if entry.g > current.distance_so_far:
            # Superseded by a cheaper entry for the same key
            continue
        if entry.key == target:
            break
        for neighbor in space.neighbors(entry.key):
            g = current.distance_so_far + space.distance(entry.key, neighbor)
            known = states.get(neighbor)
            if known is not None and known.distance_so_far <= g:
                continue
            state = SearchState.reached(entry.key, g, heuristic(neighbor))
            states[neighbor] = state
            heap.add(QueueEntry(state.cost.f, sequence, neighbor, g))
            sequence += 1
            outcome.queue_insertion_count += 1

    return _finish(outcome, target)


def run_search(
    space: SearchSpace[K],
    start: K,
    target: K,
    algorithm: RouteAlgo,
    heuristic: Optional[Callable[[K], float]] = None,
) -> SearchOutcome[K]:
    """Dispatch to the requested algorithm. A* requires a heuristic."""
    logger.debug("Routing %r -> %r with %s", start, target, algorithm.value)
    if algorithm is RouteAlgo.FIRST_PATH:
        return first_path(space, start, target)
    if algorithm is RouteAlgo.DIJKSTRA:
        return dijkstra(space, start, target)
    if algorithm is RouteAlgo.ASTAR:
        if heuristic is None:
            raise ValueError("A* routing requires a heuristic")
        return astar(space, start, target, heuristic)
    raise ValueError(f"Unsupported algorithm {algorithm!r}")
