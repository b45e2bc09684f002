"""Heuristic functions for cost-based maze search."""

from typing import Callable, Dict, Literal
from .types import Coord

HeuristicId = Literal["manhattan", "zero"]


def manhattan_distance(start: Coord, target: Coord) -> float:
    """
    Manhattan (L1) distance heuristic.
    Admissible for 4-directional unit-cost movement, never overestimates.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])


def zero_heuristic(start: Coord, target: Coord) -> float:
    """No guidance at all; turns A* into Dijkstra's algorithm."""
    return 0.0


# Mapping from heuristic IDs to functions
HEURISTICS: Dict[HeuristicId, Callable[[Coord, Coord], float]] = {
    "manhattan": manhattan_distance,
    "zero": zero_heuristic,
}


def get_heuristic(heuristic_id: HeuristicId) -> Callable[[Coord, Coord], float]:
    """Get heuristic function by ID."""
    return HEURISTICS[heuristic_id]
