"""Maze search algorithms: BFS, DFS, A* and Dijkstra."""

import logging
from collections import deque
from typing import Callable, Dict, List, Optional, Set, Tuple

from .grid import Grid
from .heuristics import get_heuristic
from .path import reconstruct_path
from .priority_queue import PriorityQueue
from .types import (
    Coord, SearchAlgorithm, SolveResult, SolverConfig, UnknownAlgorithm,
    SEARCH_ALGORITHMS, DEFAULT_SEARCH_ALGORITHM,
)

logger = logging.getLogger(__name__)

# Every move between adjacent cells costs the same
STEP_COST = 1


def resolve_search_algorithm(algorithm: str, strict: bool = False) -> SearchAlgorithm:
    """
    Map an algorithm id to a supported one.

    Unknown ids fall back to breadth-first search with a warning. With
    ``strict=True`` they raise ``UnknownAlgorithm`` instead.
    """
    if algorithm in SEARCH_ALGORITHMS:
        return algorithm
    if strict:
        raise UnknownAlgorithm(
            f"Unknown search algorithm {algorithm!r}, expected one of {', '.join(SEARCH_ALGORITHMS)}"
        )
    logger.warning("Unknown search algorithm %r, falling back to %s",
                   algorithm, DEFAULT_SEARCH_ALGORITHM)
    return DEFAULT_SEARCH_ALGORITHM


class PathfindingEngine:
    """
    Runs one of four search algorithms over a generated grid.

    All search state (frontier, parent map, trace) is created per ``solve``
    call and dropped on return, so one engine can be reused freely. The grid
    is only read.
    """

    def __init__(self, grid: Grid, max_iterations: Optional[int] = None):
        self.grid = grid
        self.config = SolverConfig(max_iterations=max_iterations)

    def solve(self, algorithm: str = DEFAULT_SEARCH_ALGORITHM,
              start: Optional[Coord] = None, end: Optional[Coord] = None) -> SolveResult:
        """
        Find a path from start to end.

        Args:
            algorithm: One of SEARCH_ALGORITHMS, unknown ids fall back to bfs
            start: Start coordinate (defaults to the grid's start)
            end: End coordinate (defaults to the grid's end)

        Returns:
            SolveResult with the path (empty if unreachable) and the
            visitation trace (never empty)
        """
        resolved = resolve_search_algorithm(algorithm)
        start = tuple(start) if start is not None else self.grid.start
        end = tuple(end) if end is not None else self.grid.end

        if not self.grid.is_valid_coord(start):
            logger.warning("Start %s is outside the %dx%d grid", start,
                           self.grid.size, self.grid.size)
            return SolveResult(path=[], visited=[start], algorithm=resolved)

        search = self._searches()[resolved]
        result = search(start, end)
        result.algorithm = resolved

        logger.debug("%s from %s to %s: path length %d, %d cells visited%s",
                     resolved, start, end, result.path_length, result.nodes_visited,
                     " (truncated)" if result.truncated else "")
        return result

    def _searches(self) -> Dict[str, Callable[[Coord, Coord], SolveResult]]:
        return {
            "bfs": self._bfs,
            "dfs": self._dfs,
            "astar": self._astar,
            "dijkstra": self._dijkstra,
        }

    def _budget_spent(self, pops: int) -> bool:
        """Whether the configured frontier-pop bound has been reached."""
        limit = self.config.max_iterations
        return limit is not None and pops >= limit

    def _bfs(self, start: Coord, end: Coord) -> SolveResult:
        """
        Breadth-first search.
        Cells are marked seen when discovered, so each enters the queue once;
        the trace records them as they are dequeued. Shortest path guaranteed.
        """
        queue = deque([start])
        seen: Set[Coord] = {start}
        parent: Dict[Coord, Optional[Coord]] = {start: None}
        visited: List[Coord] = []
        pops = 0

        while queue:
            if self._budget_spent(pops):
                return SolveResult(visited=visited, truncated=True)
            pops += 1

            current = queue.popleft()
            visited.append(current)

            if current == end:
                return SolveResult(path=reconstruct_path(parent, end), visited=visited)

            for neighbor in self.grid.neighbors(*current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    parent[neighbor] = current
                    queue.append(neighbor)

        return SolveResult(visited=visited)

    def _dfs(self, start: Coord, end: Coord) -> SolveResult:
        """
        Depth-first search.

        A cell may be pushed several times but is finalized only on its first
        pop. Neighbors are pushed in reverse N, E, S, W order so the stack
        explores north first. The path is not necessarily shortest.
        """
        # Each entry carries the cell it was pushed from
        stack: List[Tuple[Coord, Optional[Coord]]] = [(start, None)]
        finalized: Set[Coord] = set()
        parent: Dict[Coord, Optional[Coord]] = {}
        visited: List[Coord] = []
        pops = 0

        while stack:
            if self._budget_spent(pops):
                return SolveResult(visited=visited, truncated=True)
            pops += 1

            current, came_from = stack.pop()
            if current in finalized:
                continue
            finalized.add(current)
            parent[current] = came_from
            visited.append(current)

            if current == end:
                return SolveResult(path=reconstruct_path(parent, end), visited=visited)

            for neighbor in reversed(self.grid.neighbors(*current)):
                if neighbor not in finalized:
                    stack.append((neighbor, current))

        return SolveResult(visited=visited)

    def _astar(self, start: Coord, end: Coord) -> SolveResult:
        return self._cost_search(start, end, get_heuristic("manhattan"))

    def _dijkstra(self, start: Coord, end: Coord) -> SolveResult:
        return self._cost_search(start, end, get_heuristic("zero"))

    def _cost_search(self, start: Coord, end: Coord,
                     heuristic: Callable[[Coord, Coord], float]) -> SolveResult:
        """
        Best-first search ordered by f = g + h, shared by A* and Dijkstra.

        Cells can sit in the heap more than once; a cell is finalized (and
        added to the trace) the first time it pops. With an admissible
        heuristic the end's path is optimal when it is finalized.
        """
        open_set = PriorityQueue()
        g_score: Dict[Coord, float] = {start: 0}
        parent: Dict[Coord, Optional[Coord]] = {start: None}
        finalized: Set[Coord] = set()
        visited: List[Coord] = []
        pops = 0

        open_set.put(start, heuristic(start, end))

        while not open_set.is_empty():
            if self._budget_spent(pops):
                return SolveResult(visited=visited, truncated=True)
            pops += 1

            current = open_set.get().coord
            if current in finalized:
                continue
            finalized.add(current)
            visited.append(current)

            if current == end:
                return SolveResult(path=reconstruct_path(parent, end), visited=visited)

            tentative_g = g_score[current] + STEP_COST
            for neighbor in self.grid.neighbors(*current):
                if neighbor in finalized:
                    continue

                # Relax only on a strictly better cost
                if neighbor not in g_score or tentative_g < g_score[neighbor]:
                    g_score[neighbor] = tentative_g
                    parent[neighbor] = current
                    open_set.put(neighbor, tentative_g + heuristic(neighbor, end))

        return SolveResult(visited=visited)


def find_path(grid: Grid, algorithm: str = DEFAULT_SEARCH_ALGORITHM,
              start: Optional[Coord] = None, end: Optional[Coord] = None) -> SolveResult:
    """
    Convenience function to run one search over a grid.

    Args:
        grid: Grid to search in
        algorithm: Search algorithm id
        start: Start coordinate (defaults to the grid's start)
        end: End coordinate (defaults to the grid's end)

    Returns:
        SolveResult with path and visitation trace
    """
    return PathfindingEngine(grid).solve(algorithm, start, end)
