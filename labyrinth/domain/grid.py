"""Square maze grid shared by the generators and the pathfinding engine."""

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from .types import (
    Coord, CellKind, InvalidConfiguration, NEIGHBOR_DELTAS,
    DEFAULT_GENERATION_ALGORITHM, MIN_MAZE_SIZE,
)


@dataclass(eq=False)
class Grid:
    """
    Represents a square maze grid.

    Cells are stored as a ``size x size`` numpy array of ``CellKind`` values
    indexed ``[y, x]``; every public method takes ``(x, y)`` coordinates.
    Start is fixed at (1, 1) and end at (size-2, size-2).

    Generators mutate the grid through ``set_kind``; once ``generate``
    returns, callers treat the grid as read-only.
    """
    size: int
    cells: np.ndarray
    algorithm: str = DEFAULT_GENERATION_ALGORITHM

    def __post_init__(self):
        if self.size % 2 == 0 or self.size < MIN_MAZE_SIZE:
            raise InvalidConfiguration(
                f"Grid size must be odd and at least {MIN_MAZE_SIZE}, got {self.size}"
            )
        if self.cells.shape != (self.size, self.size):
            raise InvalidConfiguration(
                f"Cell array shape {self.cells.shape} does not match size {self.size}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    @property
    def start(self) -> Coord:
        return (1, 1)

    @property
    def end(self) -> Coord:
        return (self.size - 2, self.size - 2)

    def dimensions(self) -> int:
        """Side length of the grid."""
        return self.size

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def kind_at(self, x: int, y: int) -> CellKind:
        """Get the cell kind at (x, y); anything out of bounds is a wall."""
        if not self.is_valid_coord((x, y)):
            return CellKind.WALL
        return CellKind(int(self.cells[y, x]))

    def is_walkable(self, x: int, y: int) -> bool:
        return self.kind_at(x, y) != CellKind.WALL

    def neighbors(self, x: int, y: int) -> List[Coord]:
        """
        Get walkable 4-directional neighbors of (x, y).

        Order is always North, East, South, West; search algorithms rely on
        it for reproducible visitation traces.
        """
        result = []
        for dx, dy in NEIGHBOR_DELTAS:
            nx, ny = x + dx, y + dy
            if self.is_walkable(nx, ny):
                result.append((nx, ny))
        return result

    def set_kind(self, coord: Coord, kind: CellKind) -> None:
        """Set the kind of an in-bounds cell. Out-of-bounds coordinates are ignored."""
        if self.is_valid_coord(coord):
            x, y = coord
            self.cells[y, x] = int(kind)

    def count(self, kind: CellKind) -> int:
        """Number of cells of the given kind."""
        return int(np.count_nonzero(self.cells == int(kind)))

    def to_array(self) -> np.ndarray:
        """Copy of the cell array, safe for callers to modify."""
        return self.cells.copy()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the grid to plain data for serialization or rendering layers."""
        return {
            'size': self.size,
            'grid': self.cells.tolist(),
            'start': list(self.start),
            'end': list(self.end),
            'algorithm': self.algorithm,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Grid':
        """Create a grid from the output of ``to_dict``."""
        size = int(data['size'])
        cells = np.asarray(data['grid'], dtype=np.int8)
        if cells.shape != (size, size):
            raise InvalidConfiguration(
                f"Grid data has shape {cells.shape}, expected {size}x{size}"
            )
        valid_kinds = [int(kind) for kind in CellKind]
        if not np.isin(cells, valid_kinds).all():
            raise InvalidConfiguration("Grid data contains unknown cell kinds")
        return cls(size=size, cells=cells,
                   algorithm=data.get('algorithm', DEFAULT_GENERATION_ALGORITHM))
