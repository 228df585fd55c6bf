"""Ice sliding puzzle solver."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gamesolver.slide import resolve_slide
from backend.models.grid import Direction, Grid, Position
from backend.models.route import Route

logger = logging.getLogger(__name__)

# Expansion order; fixed so that results are reproducible.
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class SearchOrder(StrEnum):
    UNIFORM_COST = "uniform"
    FIFO = "fifo"


@dataclass(frozen=True)
class SearchNode:
    """A landing position reached by a chain of slides."""

    position: Position
    steps: int
    parent: SearchNode | None = field(default=None, repr=False, compare=False)

    def path(self) -> tuple[Position, ...]:
        positions: list[Position] = []
        node: SearchNode | None = self
        while node is not None:
            positions.append(node.position)
            node = node.parent
        positions.reverse()
        return tuple(positions)


@dataclass(frozen=True)
class SolveResult:
    route: Route | None
    expanded: int
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.route is not None


# -- frontiers ----------------------------------------------------------------


class _PriorityFrontier:
    """Pops nodes by lowest step count, then by insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.steps, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


class _FifoFrontier:
    """Pops nodes in insertion order, ignoring step counts."""

    def __init__(self) -> None:
        self._queue: deque[SearchNode] = deque()

    def push(self, node: SearchNode) -> None:
        self._queue.append(node)

    def pop(self) -> SearchNode:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


_FRONTIERS = {
    SearchOrder.UNIFORM_COST: _PriorityFrontier,
    SearchOrder.FIFO: _FifoFrontier,
}


# -- solver -------------------------------------------------------------------


class Solver:
    """Finds a minimum-step route from start to finish.

    Edges of the search graph are whole slides, not single cells.  With
    ``SearchOrder.UNIFORM_COST`` (the default) the frontier is a priority
    queue and the route is optimal.  ``SearchOrder.FIFO`` expands nodes in
    discovery order, which finds *a* route but can miss the cheapest one
    because slides differ in cost.
    """

    def __init__(
        self, grid: Grid, order: SearchOrder = SearchOrder.UNIFORM_COST
    ) -> None:
        self.grid = grid
        self.order = order

    def solve(self) -> SolveResult:
        """Run the search.  No route is a result, not an error."""
        started = time.perf_counter()
        frontier = _FRONTIERS[self.order]()
        best: dict[Position, int] = {}
        expanded: set[Position] = set()

        root = SearchNode(self.grid.start, 0)
        frontier.push(root)
        best[root.position] = 0

        goal: SearchNode | None = None
        while frontier:
            node = frontier.pop()
            # Stale entries left behind by a later, cheaper admission.
            if node.position in expanded or node.steps > best[node.position]:
                continue
            expanded.add(node.position)

            if node.position == self.grid.finish:
                goal = node
                break

            for direction in DIRECTIONS:
                slide = resolve_slide(self.grid, node.position, direction)
                if slide.landing in expanded:
                    continue
                steps = node.steps + slide.cost
                known = best.get(slide.landing)
                if known is not None and steps >= known:
                    continue
                best[slide.landing] = steps
                frontier.push(SearchNode(slide.landing, steps, node))

        elapsed = time.perf_counter() - started
        route = Route(goal.path(), goal.steps) if goal is not None else None
        logger.debug(
            "%s search expanded %d nodes in %.3f ms: %s",
            self.order.value, len(expanded), elapsed * 1000,
            f"{route.steps} steps" if route else "no solution",
        )
        return SolveResult(route=route, expanded=len(expanded), elapsed=elapsed)

