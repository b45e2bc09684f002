"""Maze generation with seven interchangeable carving algorithms."""

import logging
from typing import Callable, Dict, List, Optional, Set, Tuple

import numpy as np

from .grid import Grid
from .types import (
    Coord, CellKind, GenerationAlgorithm, InvalidConfiguration, UnknownAlgorithm,
    CELL_STRIDES, GENERATION_ALGORITHMS, DEFAULT_GENERATION_ALGORITHM, MIN_MAZE_SIZE,
)
from .union_find import UnionFind
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)

# Eller's horizontal merge and binary tree / sidewinder coin threshold
COIN_THRESHOLD = 0.5


ALGORITHM_INFO: Dict[str, Dict[str, str]] = {
    "backtracking": {
        "name": "Recursive Backtracking",
        "description": "Long, winding corridors. Depth-first carving.",
        "complexity": "Medium",
    },
    "prims": {
        "name": "Prim's Algorithm",
        "description": "More branching and shorter dead ends. Minimum spanning tree based.",
        "complexity": "High",
    },
    "kruskals": {
        "name": "Kruskal's Algorithm",
        "description": "Uniformly random spanning tree. Uses Union-Find.",
        "complexity": "High",
    },
    "ellers": {
        "name": "Eller's Algorithm",
        "description": "Generates row by row, keeping only two rows of state.",
        "complexity": "Medium",
    },
    "binary": {
        "name": "Binary Tree",
        "description": "Very fast. Diagonal texture; every cell drains toward the north-west corner.",
        "complexity": "Low",
    },
    "sidewinder": {
        "name": "Sidewinder",
        "description": "Like Binary Tree with more variety. Horizontal runs joined northwards.",
        "complexity": "Low",
    },
    "huntandkill": {
        "name": "Hunt and Kill",
        "description": "Long passages like backtracking, with a different dead-end spread.",
        "complexity": "Medium",
    },
}


def get_algorithm_info(algorithm: str) -> Dict[str, str]:
    """Get display metadata for a generation algorithm (backtracking for unknown ids)."""
    return ALGORITHM_INFO.get(algorithm, ALGORITHM_INFO[DEFAULT_GENERATION_ALGORITHM])


def resolve_generation_algorithm(algorithm: str, strict: bool = False) -> GenerationAlgorithm:
    """
    Map an algorithm id to a supported one.

    Unknown ids fall back to recursive backtracking with a warning. With
    ``strict=True`` they raise ``UnknownAlgorithm`` instead.
    """
    if algorithm in GENERATION_ALGORITHMS:
        return algorithm
    if strict:
        raise UnknownAlgorithm(
            f"Unknown maze algorithm {algorithm!r}, expected one of {', '.join(GENERATION_ALGORITHMS)}"
        )
    logger.warning("Unknown maze algorithm %r, falling back to %s",
                   algorithm, DEFAULT_GENERATION_ALGORITHM)
    return DEFAULT_GENERATION_ALGORITHM


def normalize_size(size: int) -> int:
    """
    Round an even size up to the next odd number and validate it.

    Raises:
        InvalidConfiguration: If size is not an integer or is below the minimum
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidConfiguration(f"Maze size must be an integer, got {size!r}")

    size = int(size)
    if size % 2 == 0:
        size += 1

    if size < MIN_MAZE_SIZE:
        raise InvalidConfiguration(
            f"Maze size must be at least {MIN_MAZE_SIZE} after odd rounding, got {size}"
        )
    return size


def create_wall_grid(size: int) -> Grid:
    """Create a grid of the given (already normalized) size filled with walls."""
    cells = np.full((size, size), int(CellKind.WALL), dtype=np.int8)
    return Grid(size=size, cells=cells)


def ensure_end_reachable(grid: Grid) -> None:
    """
    Make sure the end cell touches a carved cell, then mark it as End.

    The end is forced to Path; if none of its neighbours (west, east, north,
    south) is Path, the first interior one is carved. End is marked last so
    nothing overwrites it.
    """
    ex, ey = grid.end
    grid.set_kind((ex, ey), CellKind.PATH)

    candidates = [(ex - 1, ey), (ex + 1, ey), (ex, ey - 1), (ex, ey + 1)]
    has_path_neighbor = any(
        _is_interior(grid, nx, ny) and grid.kind_at(nx, ny) == CellKind.PATH
        for nx, ny in candidates
    )

    if not has_path_neighbor:
        for nx, ny in candidates:
            if _is_interior(grid, nx, ny):
                logger.debug("End %s was isolated, carving %s", grid.end, (nx, ny))
                grid.set_kind((nx, ny), CellKind.PATH)
                break

    grid.set_kind((ex, ey), CellKind.END)


class MazeGenerator:
    """
    Produces carved maze grids.

    The random source is injectable so that a seed reproduces the same maze.
    Without one, the process-level default generator is used.
    """

    def __init__(self, rng: Optional[SeededRNG] = None, seed: Optional[int] = None):
        self.rng = resolve_rng(rng, seed)

    def generate(self, size: int, algorithm: str = DEFAULT_GENERATION_ALGORITHM,
                 rng: Optional[SeededRNG] = None) -> Grid:
        """
        Generate a maze.

        Args:
            size: Side length; even values are rounded up to the next odd one
            algorithm: One of GENERATION_ALGORITHMS, unknown ids fall back to backtracking
            rng: Random source for this call only (defaults to the generator's own)

        Returns:
            Grid with Start at (1, 1) and a reachable End at (size-2, size-2)

        Raises:
            InvalidConfiguration: If size is below the minimum after rounding
        """
        size = normalize_size(size)
        resolved = resolve_generation_algorithm(algorithm)
        rng = rng if rng is not None else self.rng

        grid = create_wall_grid(size)
        grid.algorithm = resolved

        GENERATORS[resolved](grid, rng)

        grid.set_kind(grid.start, CellKind.START)
        ensure_end_reachable(grid)

        logger.debug("Generated %dx%d maze with %s (%d walkable cells)",
                     size, size, resolved, size * size - grid.count(CellKind.WALL))
        return grid


def generate_maze(size: int, algorithm: str = DEFAULT_GENERATION_ALGORITHM,
                  seed: Optional[int] = None) -> Grid:
    """Convenience function to generate a maze with an optional seed."""
    return MazeGenerator(seed=seed).generate(size, algorithm)


# ==========================================
# Shared carving helpers
# ==========================================

def _is_interior(grid: Grid, x: int, y: int) -> bool:
    """Carving never touches the outer border ring."""
    return 0 < x < grid.size - 1 and 0 < y < grid.size - 1


def _logical_range(grid: Grid) -> range:
    """Odd coordinates holding logical cells, 1, 3, ..., size-2."""
    return range(1, grid.size - 1, 2)


def _carve(grid: Grid, coord: Coord) -> None:
    grid.set_kind(coord, CellKind.PATH)


def _connect(grid: Grid, a: Coord, b: Coord) -> None:
    """Carve cell b and the wall between logical cells a and b."""
    wall = ((a[0] + b[0]) // 2, (a[1] + b[1]) // 2)
    _carve(grid, wall)
    _carve(grid, b)


def _stride_neighbors(grid: Grid, x: int, y: int, kind: CellKind) -> List[Coord]:
    """Interior logical cells two steps away (N, E, S, W) that have the given kind."""
    result = []
    for dx, dy in CELL_STRIDES:
        nx, ny = x + dx, y + dy
        if _is_interior(grid, nx, ny) and grid.kind_at(nx, ny) == kind:
            result.append((nx, ny))
    return result


# ==========================================
# Generation algorithms
# ==========================================

def _generate_backtracking(grid: Grid, rng: SeededRNG) -> None:
    """
    Recursive backtracking (depth-first carving) from (1, 1).

    Each cell shuffles its four directions once and tries them in that order,
    descending into the first uncarved neighbour before trying the rest. An
    explicit stack of (cell, remaining directions) replaces the recursion.
    Produces a perfect maze with long corridors.
    """
    def shuffled_strides() -> List[Coord]:
        directions = list(CELL_STRIDES)
        rng.shuffle(directions)
        return directions

    _carve(grid, (1, 1))
    stack: List[Tuple[Coord, List[Coord]]] = [((1, 1), shuffled_strides())]

    while stack:
        (x, y), directions = stack[-1]
        if not directions:
            # Backtrack
            stack.pop()
            continue

        dx, dy = directions.pop(0)
        nx, ny = x + dx, y + dy
        if _is_interior(grid, nx, ny) and grid.kind_at(nx, ny) == CellKind.WALL:
            _connect(grid, (x, y), (nx, ny))
            stack.append(((nx, ny), shuffled_strides()))


def _generate_prims(grid: Grid, rng: SeededRNG) -> None:
    """
    Randomized Prim's algorithm.

    The frontier holds uncarved logical cells next to the carved region. A
    uniformly random frontier cell is joined to a uniformly random carved
    neighbour until the frontier is empty.
    """
    frontier: List[Coord] = []
    in_frontier: Set[Coord] = set()

    def add_frontier(x: int, y: int) -> None:
        for cell in _stride_neighbors(grid, x, y, CellKind.WALL):
            if cell not in in_frontier:
                in_frontier.add(cell)
                frontier.append(cell)

    _carve(grid, (1, 1))
    add_frontier(1, 1)

    while frontier:
        fx, fy = rng.pop_random(frontier)
        in_frontier.discard((fx, fy))

        carved = _stride_neighbors(grid, fx, fy, CellKind.PATH)
        if carved:
            neighbor = rng.choice(carved)
            _connect(grid, neighbor, (fx, fy))
            add_frontier(fx, fy)


def _generate_kruskals(grid: Grid, rng: SeededRNG) -> None:
    """
    Randomized Kruskal's algorithm.

    Every east and south edge between logical cells is shuffled and accepted
    only when it joins two different components, giving a uniformly random
    spanning tree.
    """
    cells: List[Coord] = []
    edges: List[Tuple[Coord, Coord]] = []
    last = grid.size - 2

    for y in _logical_range(grid):
        for x in _logical_range(grid):
            cells.append((x, y))
            _carve(grid, (x, y))
            if x + 2 <= last:
                edges.append(((x, y), (x + 2, y)))
            if y + 2 <= last:
                edges.append(((x, y), (x, y + 2)))

    sets = UnionFind(cells)
    rng.shuffle(edges)

    for a, b in edges:
        if sets.union(a, b):
            _connect(grid, a, b)


def _generate_ellers(grid: Grid, rng: SeededRNG) -> None:
    """
    Eller's algorithm, one row of logical cells at a time.

    Cells that did not inherit a set from a vertical connection get a fresh
    one. Adjacent cells in different sets merge on a fair coin, and always on
    the final row so the maze ends up connected. Every set then sends between
    one and all of its cells down to the next row. Only the current row's
    set membership is kept.
    """
    current_sets: Dict[int, int] = {}
    next_set_id = 0
    last_row = grid.size - 2
    columns = list(_logical_range(grid))

    for y in _logical_range(grid):
        for x in columns:
            _carve(grid, (x, y))
            if x not in current_sets:
                current_sets[x] = next_set_id
                next_set_id += 1

        is_last_row = y == last_row

        # Join horizontally adjacent cells from different sets
        for x in columns[:-1]:
            set_a = current_sets[x]
            set_b = current_sets[x + 2]
            if set_a != set_b and (is_last_row or rng.random() > COIN_THRESHOLD):
                _carve(grid, (x + 1, y))
                for cx, cs in current_sets.items():
                    if cs == set_b:
                        current_sets[cx] = set_a

        if is_last_row:
            break

        # Each set needs at least one connection to the row below
        groups: Dict[int, List[int]] = {}
        for x in columns:
            groups.setdefault(current_sets[x], []).append(x)

        next_sets: Dict[int, int] = {}
        for set_id, members in groups.items():
            rng.shuffle(members)
            connect_count = rng.randint(1, len(members))
            for x in members[:connect_count]:
                _connect(grid, (x, y), (x, y + 2))
                next_sets[x] = set_id

        current_sets = next_sets


def _generate_binary_tree(grid: Grid, rng: SeededRNG) -> None:
    """
    Binary tree algorithm: each cell carves north or west.

    The bias is intentional and kept: the first row and first column are
    unbroken corridors and every cell has a monotone route to (1, 1).
    """
    for y in _logical_range(grid):
        for x in _logical_range(grid):
            _carve(grid, (x, y))

            can_go_north = y > 1
            can_go_west = x > 1

            if can_go_north and can_go_west:
                if rng.random() > COIN_THRESHOLD:
                    _carve(grid, (x, y - 1))
                else:
                    _carve(grid, (x - 1, y))
            elif can_go_north:
                _carve(grid, (x, y - 1))
            elif can_go_west:
                _carve(grid, (x - 1, y))


def _generate_sidewinder(grid: Grid, rng: SeededRNG) -> None:
    """
    Sidewinder algorithm: horizontal runs closed by a single north passage.

    The first row has nothing to the north, so its run never closes early
    and it becomes one unbroken corridor.
    """
    for y in _logical_range(grid):
        run_start = 1

        for x in _logical_range(grid):
            _carve(grid, (x, y))

            at_eastern_boundary = x + 2 >= grid.size - 1
            at_northern_boundary = y <= 1
            should_close_run = at_eastern_boundary or (
                not at_northern_boundary and rng.random() > COIN_THRESHOLD
            )

            if should_close_run:
                if not at_northern_boundary:
                    run_x = rng.choice(range(run_start, x + 1, 2))
                    _carve(grid, (run_x, y - 1))
                run_start = x + 2
            else:
                _carve(grid, (x + 1, y))


def _generate_hunt_and_kill(grid: Grid, rng: SeededRNG) -> None:
    """
    Hunt-and-kill: random walk until stuck, then hunt in raster order for an
    uncarved cell beside the carved region and resume from there.
    """
    current = (1, 1)
    _carve(grid, current)

    while True:
        unvisited = _stride_neighbors(grid, current[0], current[1], CellKind.WALL)
        if unvisited:
            neighbor = rng.choice(unvisited)
            _connect(grid, current, neighbor)
            current = neighbor
            continue

        found = _hunt(grid, rng)
        if found is None:
            break
        current = found


def _hunt(grid: Grid, rng: SeededRNG) -> Optional[Coord]:
    """Connect the first uncarved cell with a carved neighbour; None when the maze is complete."""
    for y in _logical_range(grid):
        for x in _logical_range(grid):
            if grid.kind_at(x, y) != CellKind.WALL:
                continue
            carved = _stride_neighbors(grid, x, y, CellKind.PATH)
            if carved:
                _connect(grid, rng.choice(carved), (x, y))
                return (x, y)
    return None


GENERATORS: Dict[str, Callable[[Grid, SeededRNG], None]] = {
    "backtracking": _generate_backtracking,
    "prims": _generate_prims,
    "kruskals": _generate_kruskals,
    "ellers": _generate_ellers,
    "binary": _generate_binary_tree,
    "sidewinder": _generate_sidewinder,
    "huntandkill": _generate_hunt_and_kill,
}
