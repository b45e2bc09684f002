"""
Structural analysis of generated mazes: reachability, dead ends and
perfect-maze checks.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Set

import numpy as np

from ..domain.grid import Grid
from ..domain.types import Coord, CellKind


@dataclass
class MazeStats:
    """Summary of a maze's structure."""
    size: int
    algorithm: str
    walkable_cells: int
    logical_cells: int
    carved_logical_cells: int
    connections: int
    dead_ends: int
    solvable: bool
    perfect: bool

    @property
    def wall_density(self) -> float:
        """Fraction of the grid that is wall."""
        total = self.size * self.size
        return (total - self.walkable_cells) / total if total > 0 else 0.0


def reachable_cells(grid: Grid, origin: Optional[Coord] = None) -> Set[Coord]:
    """Flood fill over walkable cells from origin (defaults to the grid's start)."""
    origin = origin if origin is not None else grid.start
    if not grid.is_walkable(*origin):
        return set()

    reachable = {origin}
    queue = deque([origin])

    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors(*current):
            if neighbor not in reachable:
                reachable.add(neighbor)
                queue.append(neighbor)

    return reachable


def has_path(grid: Grid, start: Optional[Coord] = None, end: Optional[Coord] = None) -> bool:
    """Check if end can be reached from start through walkable cells."""
    end = end if end is not None else grid.end
    return end in reachable_cells(grid, start)


def logical_cell_count(size: int) -> int:
    """Number of logical (odd, odd) cells in a maze of the given size."""
    return ((size - 1) // 2) ** 2


def _walkable_mask(grid: Grid) -> np.ndarray:
    return grid.cells != int(CellKind.WALL)


def carved_logical_cells(grid: Grid) -> int:
    """Logical cells that are not walls."""
    return int(np.count_nonzero(_walkable_mask(grid)[1:-1:2, 1:-1:2]))


def carved_connections(grid: Grid) -> int:
    """Carved walls between horizontally or vertically adjacent logical cells."""
    walkable = _walkable_mask(grid)
    horizontal = walkable[1:-1:2, 2:-1:2]
    vertical = walkable[2:-1:2, 1:-1:2]
    return int(np.count_nonzero(horizontal) + np.count_nonzero(vertical))


def carved_pillars(grid: Grid) -> int:
    """Carved (even, even) interior cells, which no 2-stride algorithm should touch."""
    return int(np.count_nonzero(_walkable_mask(grid)[2:-1:2, 2:-1:2]))


def dead_end_count(grid: Grid) -> int:
    """Walkable cells with exactly one walkable neighbor."""
    walkable = np.pad(_walkable_mask(grid), 1, constant_values=False).astype(np.int8)
    neighbor_counts = (
        walkable[:-2, 1:-1] + walkable[2:, 1:-1] +
        walkable[1:-1, :-2] + walkable[1:-1, 2:]
    )
    centre = walkable[1:-1, 1:-1].astype(bool)
    return int(np.count_nonzero(centre & (neighbor_counts == 1)))


def has_cycle(grid: Grid) -> bool:
    """
    Check whether the walkable cells contain a loop.

    A forest has exactly (cells - components) edges; any extra adjacency
    closes a cycle. Components are counted by flood fill.
    """
    walkable = _walkable_mask(grid)
    edges = (np.count_nonzero(walkable[:, :-1] & walkable[:, 1:]) +
             np.count_nonzero(walkable[:-1, :] & walkable[1:, :]))

    remaining = {(int(x), int(y)) for y, x in zip(*np.nonzero(walkable))}
    components = 0
    while remaining:
        origin = next(iter(remaining))
        remaining -= reachable_cells(grid, origin)
        components += 1

    return int(edges) > int(np.count_nonzero(walkable)) - components


def is_perfect_maze(grid: Grid) -> bool:
    """
    Check that carved cells and connections form a spanning tree.

    Every logical cell is carved, no pillar is carved, there are exactly
    logical - 1 connections, everything is reachable from start and there
    is no loop.
    """
    logical = logical_cell_count(grid.size)
    if carved_logical_cells(grid) != logical or carved_pillars(grid) != 0:
        return False
    if carved_connections(grid) != logical - 1:
        return False
    if len(reachable_cells(grid)) != int(np.count_nonzero(_walkable_mask(grid))):
        return False
    return not has_cycle(grid)


def analyze_grid(grid: Grid) -> MazeStats:
    """Collect structural statistics for a grid."""
    return MazeStats(
        size=grid.size,
        algorithm=grid.algorithm,
        walkable_cells=int(np.count_nonzero(_walkable_mask(grid))),
        logical_cells=logical_cell_count(grid.size),
        carved_logical_cells=carved_logical_cells(grid),
        connections=carved_connections(grid),
        dead_ends=dead_end_count(grid),
        solvable=has_path(grid),
        perfect=is_perfect_maze(grid),
    )
