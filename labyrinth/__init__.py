"""Labyrinth - maze generation and pathfinding with replayable search traces.

Generate a grid with one of seven carving algorithms, then solve it with
BFS, DFS, A* or Dijkstra and replay the visitation order.
"""

from .domain.types import (
    Coord, CellKind, SolveResult, SolverConfig, InvalidConfiguration, UnknownAlgorithm,
    GENERATION_ALGORITHMS, SEARCH_ALGORITHMS, MIN_MAZE_SIZE,
)
from .domain.grid import Grid
from .domain.generation import MazeGenerator, generate_maze, get_algorithm_info
from .domain.pathfinding import PathfindingEngine, find_path
from .utils.rng import SeededRNG, set_global_seed, get_global_seed

__version__ = "1.0.0"
__author__ = "Labyrinth Maze Demo"

__all__ = [
    "Coord", "CellKind", "SolveResult", "SolverConfig",
    "InvalidConfiguration", "UnknownAlgorithm",
    "GENERATION_ALGORITHMS", "SEARCH_ALGORITHMS", "MIN_MAZE_SIZE",
    "Grid", "MazeGenerator", "generate_maze", "get_algorithm_info",
    "PathfindingEngine", "find_path",
    "SeededRNG", "set_global_seed", "get_global_seed",
]
