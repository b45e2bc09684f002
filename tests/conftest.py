"""Shared fixtures for the labyrinth test suite."""

from typing import Callable, List

import numpy as np
import pytest

from labyrinth.domain.grid import Grid
from labyrinth.domain.types import CellKind
from labyrinth.utils.rng import SeededRNG

ROW_CHARS = {
    '#': CellKind.WALL,
    ' ': CellKind.PATH,
    'S': CellKind.START,
    'E': CellKind.END,
}

# Two routes from S to E: 8 steps down the west side, 12 around the east side
LOOP_MAZE = [
    "#######",
    "#S    #",
    "# ### #",
    "# #   #",
    "# # ###",
    "#    E#",
    "#######",
]


class FirstChoiceRNG:
    """
    Scripted stand-in for SeededRNG: shuffles keep their order, choices take
    the first candidate, coins always land low.
    """

    def random(self) -> float:
        return 0.0

    def randint(self, a: int, b: int) -> int:
        return a

    def choice(self, seq):
        return seq[0]

    def pop_random(self, items: list):
        return items.pop(0)

    def shuffle(self, seq) -> None:
        pass


def grid_from_rows(rows: List[str]) -> Grid:
    """Build a grid from text rows using '#', ' ', 'S' and 'E'."""
    cells = np.array([[int(ROW_CHARS[ch]) for ch in row] for row in rows], dtype=np.int8)
    return Grid(size=len(rows), cells=cells)


@pytest.fixture
def make_grid() -> Callable[[List[str]], Grid]:
    return grid_from_rows


@pytest.fixture
def loop_grid() -> Grid:
    return grid_from_rows(LOOP_MAZE)


@pytest.fixture
def walled_off_grid() -> Grid:
    """Loop maze with the only cell next to End turned into a wall."""
    grid = grid_from_rows(LOOP_MAZE)
    grid.set_kind((4, 5), CellKind.WALL)
    return grid


@pytest.fixture
def first_choice_rng() -> FirstChoiceRNG:
    return FirstChoiceRNG()


@pytest.fixture
def seeded_rng() -> SeededRNG:
    return SeededRNG(1234)
