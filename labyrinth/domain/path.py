"""Path reconstruction and validation utilities."""

from typing import Dict, List, Optional, Tuple
from .types import Coord
from .grid import Grid


def reconstruct_path(parent: Dict[Coord, Optional[Coord]], end: Coord) -> List[Coord]:
    """
    Reconstruct the path from start to end using parent pointers.

    Walks the chain from ``end`` back to the coordinate whose parent is
    None, then reverses it. Returns an empty list if ``end`` was never reached.
    """
    if end not in parent:
        return []

    path = []
    current: Optional[Coord] = end
    while current is not None:
        path.append(current)
        current = parent[current]

    # Reverse to get path from start to end
    path.reverse()
    return path


def validate_path(path: List[Coord], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if every cell is walkable and consecutive cells are 4-adjacent.
    """
    if not path:
        return False

    for x, y in path:
        if not grid.is_walkable(x, y):
            return False

    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        if abs(x2 - x1) + abs(y2 - y1) != 1:
            return False

    return True


def path_cost(path: List[Coord]) -> int:
    """Number of unit steps along a path (0 for empty or single-cell paths)."""
    return max(len(path) - 1, 0)


def get_path_directions(path: List[Coord]) -> List[Tuple[int, int]]:
    """
    Get direction vectors for each segment of the path.
    Returns list of (dx, dy) tuples, each one of the four unit moves.
    """
    return [(x2 - x1, y2 - y1) for (x1, y1), (x2, y2) in zip(path, path[1:])]
