"""Plain-text rendering of mazes for terminals and logs."""

from typing import Dict, Iterable, Optional

from ..domain.grid import Grid
from ..domain.types import Coord, CellKind

CELL_CHARS: Dict[CellKind, str] = {
    CellKind.WALL: '#',
    CellKind.PATH: ' ',
    CellKind.START: 'S',
    CellKind.END: 'E',
}
PATH_CHAR = '*'
VISITED_CHAR = '.'


def render_grid(grid: Grid, path: Optional[Iterable[Coord]] = None,
                visited: Optional[Iterable[Coord]] = None) -> str:
    """
    Render a grid as text, one line per row.

    Visited cells are drawn under path cells; Start and End always keep
    their own characters.
    """
    overlay: Dict[Coord, str] = {}
    for coord in visited or ():
        overlay[tuple(coord)] = VISITED_CHAR
    for coord in path or ():
        overlay[tuple(coord)] = PATH_CHAR

    lines = []
    for y in range(grid.size):
        row = []
        for x in range(grid.size):
            kind = grid.kind_at(x, y)
            if kind == CellKind.PATH and (x, y) in overlay:
                row.append(overlay[(x, y)])
            else:
                row.append(CELL_CHARS[kind])
        lines.append(''.join(row))
    return '\n'.join(lines)
