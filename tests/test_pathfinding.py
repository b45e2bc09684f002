"""Tests for the pathfinding engine."""

import logging

import pytest

from labyrinth.domain.generation import MazeGenerator
from labyrinth.domain.path import validate_path
from labyrinth.domain.pathfinding import PathfindingEngine, find_path, resolve_search_algorithm
from labyrinth.domain.types import (
    InvalidConfiguration, SolverConfig, UnknownAlgorithm,
    GENERATION_ALGORITHMS, SEARCH_ALGORITHMS,
)
from labyrinth.utils.maze_analysis import reachable_cells

SHORTEST_LOOP_PATH = [
    (1, 1), (1, 2), (1, 3), (1, 4), (1, 5), (2, 5), (3, 5), (4, 5), (5, 5),
]
EASTERN_LOOP_PATH = [
    (1, 1), (2, 1), (3, 1), (4, 1), (5, 1), (5, 2), (5, 3), (4, 3), (3, 3),
    (3, 4), (3, 5), (4, 5), (5, 5),
]


@pytest.mark.parametrize("algorithm", ["bfs", "astar", "dijkstra"])
def test_cost_optimal_searches_find_shortest_path(loop_grid, algorithm):
    result = PathfindingEngine(loop_grid).solve(algorithm, (1, 1), (5, 5))
    assert result.path == SHORTEST_LOOP_PATH
    assert result.algorithm == algorithm
    assert result.found


def test_dfs_explores_first_canonical_neighbor_first(loop_grid):
    # East comes before south, so depth-first takes the long way round
    result = PathfindingEngine(loop_grid).solve("dfs", (1, 1), (5, 5))
    assert result.path == EASTERN_LOOP_PATH
    assert result.visited == EASTERN_LOOP_PATH
    assert validate_path(result.path, loop_grid)
    assert len(result.path) >= len(SHORTEST_LOOP_PATH)


def test_bfs_trace_is_in_dequeue_order(loop_grid):
    result = PathfindingEngine(loop_grid).solve("bfs", (1, 1), (5, 5))
    assert result.visited[:5] == [(1, 1), (2, 1), (1, 2), (3, 1), (1, 3)]
    assert result.visited[-1] == (5, 5)
    assert len(result.visited) == len(set(result.visited))


def test_astar_finalizes_no_more_than_dijkstra(loop_grid):
    engine = PathfindingEngine(loop_grid)
    astar = engine.solve("astar", (1, 1), (5, 5))
    dijkstra = engine.solve("dijkstra", (1, 1), (5, 5))
    assert astar.nodes_visited <= dijkstra.nodes_visited


@pytest.mark.parametrize("generator", GENERATION_ALGORITHMS)
def test_all_searches_agree_on_generated_mazes(generator):
    grid = MazeGenerator(seed=17).generate(21, generator)
    engine = PathfindingEngine(grid)
    results = {name: engine.solve(name, grid.start, grid.end) for name in SEARCH_ALGORITHMS}

    shortest = len(results["bfs"].path)
    assert shortest > 0
    assert len(results["astar"].path) == shortest
    assert len(results["dijkstra"].path) == shortest
    assert len(results["dfs"].path) >= shortest

    for result in results.values():
        assert validate_path(result.path, grid)
        assert result.path[0] == grid.start
        assert result.path[-1] == grid.end
        assert result.visited[0] == grid.start


@pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS)
def test_solve_is_repeatable(algorithm):
    grid = MazeGenerator(seed=3).generate(31, "prims")
    engine = PathfindingEngine(grid)
    first = engine.solve(algorithm, grid.start, grid.end)
    second = engine.solve(algorithm, grid.start, grid.end)
    assert first.path == second.path
    assert first.visited == second.visited


@pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS)
def test_unreachable_end_returns_empty_path(walled_off_grid, algorithm):
    result = PathfindingEngine(walled_off_grid).solve(algorithm, (1, 1), (5, 5))

    assert result.path == []
    assert not result.found
    assert not result.truncated
    # Every reachable cell is finalized exactly once before giving up
    assert set(result.visited) == reachable_cells(walled_off_grid)
    assert len(result.visited) == 16


@pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS)
def test_start_equals_end(loop_grid, algorithm):
    result = PathfindingEngine(loop_grid).solve(algorithm, (3, 3), (3, 3))
    assert result.path == [(3, 3)]
    assert result.visited == [(3, 3)]


@pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS)
def test_out_of_bounds_start(loop_grid, algorithm):
    result = PathfindingEngine(loop_grid).solve(algorithm, (-1, 9), (5, 5))
    assert result.path == []
    assert result.visited == [(-1, 9)]


def test_defaults_to_grid_start_and_end(loop_grid):
    result = PathfindingEngine(loop_grid).solve()
    assert result.algorithm == "bfs"
    assert result.path == SHORTEST_LOOP_PATH


def test_accepts_list_coordinates(loop_grid):
    result = PathfindingEngine(loop_grid).solve("astar", [1, 1], [5, 5])
    assert result.path == SHORTEST_LOOP_PATH


def test_unknown_algorithm_falls_back_to_bfs(loop_grid, caplog):
    with caplog.at_level(logging.WARNING, logger="labyrinth.domain.pathfinding"):
        result = PathfindingEngine(loop_grid).solve("teleport", (1, 1), (5, 5))

    expected = PathfindingEngine(loop_grid).solve("bfs", (1, 1), (5, 5))
    assert result.algorithm == "bfs"
    assert result.path == expected.path
    assert result.visited == expected.visited
    assert "teleport" in caplog.text


def test_strict_resolution_raises():
    with pytest.raises(UnknownAlgorithm):
        resolve_search_algorithm("teleport", strict=True)


def test_iteration_bound_truncates(loop_grid):
    result = PathfindingEngine(loop_grid, max_iterations=3).solve("bfs", (1, 1), (5, 5))
    assert result.truncated
    assert result.path == []
    assert result.visited == [(1, 1), (2, 1), (1, 2)]


@pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS)
def test_generous_iteration_bound_changes_nothing(loop_grid, algorithm):
    bounded = PathfindingEngine(loop_grid, max_iterations=1000).solve(algorithm)
    unbounded = PathfindingEngine(loop_grid).solve(algorithm)
    assert not bounded.truncated
    assert bounded.path == unbounded.path
    assert bounded.visited == unbounded.visited


@pytest.mark.parametrize("limit", [0, -5])
def test_non_positive_iteration_bound_is_rejected(limit):
    with pytest.raises(InvalidConfiguration):
        SolverConfig(max_iterations=limit)


def test_solve_does_not_modify_grid(loop_grid):
    before = loop_grid.to_array()
    for algorithm in SEARCH_ALGORITHMS:
        PathfindingEngine(loop_grid).solve(algorithm)
    assert (loop_grid.cells == before).all()


def test_find_path_convenience(loop_grid):
    assert find_path(loop_grid, "dijkstra").path == SHORTEST_LOOP_PATH
