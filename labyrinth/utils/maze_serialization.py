"""
Maze serialization utilities for saving and loading mazes.
Stores the cell array together with generation metadata as JSON.
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..domain.grid import Grid
from ..domain.types import Coord, InvalidConfiguration

logger = logging.getLogger(__name__)

FORMAT_VERSION = '1.0'


class MazeData:
    """Container for maze data with metadata."""

    def __init__(self, size: int, cells: List[List[int]], start: Coord, end: Coord,
                 name: str = "", description: str = "", algorithm: str = "",
                 seed: Optional[int] = None):
        self.size = size
        self.cells = cells
        self.start = start
        self.end = end
        self.name = name
        self.description = description
        self.algorithm = algorithm
        self.seed = seed
        self.created_at = datetime.now().isoformat()

    @classmethod
    def from_grid(cls, grid: Grid, name: str = "", description: str = "",
                  seed: Optional[int] = None) -> 'MazeData':
        """Capture a generated grid."""
        return cls(
            size=grid.size,
            cells=grid.cells.tolist(),
            start=grid.start,
            end=grid.end,
            name=name,
            description=description,
            algorithm=grid.algorithm,
            seed=seed,
        )

    def to_grid(self) -> Grid:
        """Rebuild the grid this data was captured from."""
        return Grid.from_dict({
            'size': self.size,
            'grid': self.cells,
            'algorithm': self.algorithm,
        })

    def to_dict(self) -> Dict[str, Any]:
        """Convert maze data to dictionary for serialization."""
        return {
            'size': self.size,
            'grid': self.cells,
            'start': list(self.start),
            'end': list(self.end),
            'name': self.name,
            'description': self.description,
            'algorithm': self.algorithm,
            'seed': self.seed,
            'created_at': self.created_at,
            'version': FORMAT_VERSION
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MazeData':
        """Create maze data from dictionary."""
        maze = cls(
            size=data['size'],
            cells=data['grid'],
            start=tuple(data['start']),
            end=tuple(data['end']),
            name=data.get('name', ''),
            description=data.get('description', ''),
            algorithm=data.get('algorithm', ''),
            seed=data.get('seed')
        )
        maze.created_at = data.get('created_at', datetime.now().isoformat())
        return maze


def save_maze(maze_data: MazeData, filepath: str) -> bool:
    """Save maze data to a JSON file. Returns False if the file could not be written."""
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(maze_data.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Error saving maze to %s: %s", filepath, e)
        return False


def load_maze(filepath: str) -> Optional[MazeData]:
    """Load maze data from a JSON file. Returns None if it is missing or malformed."""
    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
        maze = MazeData.from_dict(data)
        # Reject cell arrays that cannot form a grid
        maze.to_grid()
        return maze
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error("Error loading maze from %s: %s", filepath, e)
        return None


def load_grid(filepath: str) -> Grid:
    """
    Load a grid from a JSON file.

    Raises:
        InvalidConfiguration: If the file is missing or malformed
    """
    maze = load_maze(filepath)
    if maze is None:
        raise InvalidConfiguration(f"Could not load maze from {filepath}")
    return maze.to_grid()
