"""Core type definitions for maze generation and pathfinding."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Literal, Optional, Tuple

# Coordinate type for grid positions, (x, y)
Coord = Tuple[int, int]

# Generation algorithm identifiers
GenerationAlgorithm = Literal[
    "backtracking", "prims", "kruskals", "ellers",
    "binary", "sidewinder", "huntandkill"
]

# Search algorithm identifiers
SearchAlgorithm = Literal["bfs", "dfs", "astar", "dijkstra"]

GENERATION_ALGORITHMS: Tuple[str, ...] = (
    "backtracking", "prims", "kruskals", "ellers",
    "binary", "sidewinder", "huntandkill",
)
SEARCH_ALGORITHMS: Tuple[str, ...] = ("bfs", "dfs", "astar", "dijkstra")

DEFAULT_GENERATION_ALGORITHM: GenerationAlgorithm = "backtracking"
DEFAULT_SEARCH_ALGORITHM: SearchAlgorithm = "bfs"

# Smallest size that leaves distinct interior start and end cells
MIN_MAZE_SIZE = 5

# Neighbor order is North, East, South, West
NEIGHBOR_DELTAS: Tuple[Coord, ...] = (
    (0, -1),  # north
    (1, 0),   # east
    (0, 1),   # south
    (-1, 0),  # west
)

# Same directions at 2-cell stride, jumping from one logical cell to the next
CELL_STRIDES: Tuple[Coord, ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


class CellKind(IntEnum):
    """What occupies a grid cell."""
    WALL = 0
    PATH = 1
    START = 2
    END = 3


class InvalidConfiguration(ValueError):
    """Raised for configuration values with no sane fallback (e.g. maze size)."""


class UnknownAlgorithm(ValueError):
    """Raised only when an algorithm id is resolved in strict mode."""


@dataclass
class SolverConfig:
    """Configuration for a pathfinding run."""
    algorithm: SearchAlgorithm = DEFAULT_SEARCH_ALGORITHM
    max_iterations: Optional[int] = None  # Frontier pops allowed, None = unbounded

    def __post_init__(self):
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise InvalidConfiguration(
                f"max_iterations must be positive, got {self.max_iterations}"
            )


@dataclass
class SolveResult:
    """Result of a pathfinding operation."""
    path: List[Coord] = field(default_factory=list)
    visited: List[Coord] = field(default_factory=list)
    algorithm: SearchAlgorithm = DEFAULT_SEARCH_ALGORITHM
    truncated: bool = False  # Stopped by the iteration bound

    @property
    def found(self) -> bool:
        """Whether a path to the end was found."""
        return len(self.path) > 0

    @property
    def nodes_visited(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        return len(self.path)
