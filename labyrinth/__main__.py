"""Command-line entry point: generate, solve and analyze mazes."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from .domain.generation import MazeGenerator, get_algorithm_info, resolve_generation_algorithm
from .domain.grid import Grid
from .domain.path import validate_path
from .domain.pathfinding import PathfindingEngine, resolve_search_algorithm
from .domain.types import (
    InvalidConfiguration, UnknownAlgorithm,
    GENERATION_ALGORITHMS, SEARCH_ALGORITHMS,
    DEFAULT_GENERATION_ALGORITHM, DEFAULT_SEARCH_ALGORITHM,
)
from .utils.maze_analysis import analyze_grid
from .utils.maze_serialization import MazeData, save_maze, load_grid
from .utils.rng import SeededRNG
from .utils.text_render import render_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="labyrinth",
                                     description="Maze generation and pathfinding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a maze and print it")
    _add_maze_arguments(generate)
    generate.add_argument("--output", type=str, help="Save the maze as JSON to this path")
    generate.add_argument("--name", type=str, default="", help="Name stored with a saved maze")

    solve = subparsers.add_parser("solve", help="Generate (or load) a maze and solve it")
    _add_maze_arguments(solve)
    solve.add_argument("--input", type=str, help="Solve a saved maze instead of generating one")
    solve.add_argument("--solver", type=str, default=DEFAULT_SEARCH_ALGORITHM,
                       help=f"Search algorithm ({', '.join(SEARCH_ALGORITHMS)}) or 'all'")
    solve.add_argument("--max-iterations", type=int, help="Bound on frontier pops per search")
    solve.add_argument("--show", action="store_true", help="Print the maze with the path drawn in")

    analyze = subparsers.add_parser("analyze", help="Report structural statistics of a saved maze")
    analyze.add_argument("input", type=str, help="Path to a saved maze file")

    subparsers.add_parser("list", help="List available algorithms")
    return parser


def _add_maze_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--size", type=int, default=21, help="Maze side length (even sizes are rounded up)")
    parser.add_argument("--algorithm", type=str, default=DEFAULT_GENERATION_ALGORITHM,
                        help=f"Generation algorithm ({', '.join(GENERATION_ALGORITHMS)})")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible mazes")


def _generate(args: argparse.Namespace) -> Grid:
    algorithm = resolve_generation_algorithm(args.algorithm, strict=True)
    return MazeGenerator(rng=SeededRNG(args.seed)).generate(args.size, algorithm)


def cmd_generate(args: argparse.Namespace) -> int:
    grid = _generate(args)
    info = get_algorithm_info(grid.algorithm)

    print(f"🎲 {info['name']} maze, {grid.size}x{grid.size}" +
          (f" (seed {args.seed})" if args.seed is not None else ""))
    print(render_grid(grid))

    if args.output:
        maze_data = MazeData.from_grid(grid, name=args.name, seed=args.seed)
        if not save_maze(maze_data, args.output):
            print(f"❌ Failed to save maze to {args.output}")
            return 1
        print(f"✅ Maze saved: {args.output}")
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    grid = load_grid(args.input) if args.input else _generate(args)

    if args.solver == "all":
        solvers = list(SEARCH_ALGORITHMS)
    else:
        solvers = [resolve_search_algorithm(args.solver, strict=True)]

    engine = PathfindingEngine(grid, max_iterations=args.max_iterations)
    print(f"Maze: {grid.size}x{grid.size} ({grid.algorithm}), start {grid.start}, end {grid.end}")

    exit_code = 0
    for solver in solvers:
        started = time.perf_counter()
        result = engine.solve(solver, grid.start, grid.end)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if result.found:
            status = "✅ valid path" if validate_path(result.path, grid) else "⚠️  invalid path"
            print(f"{solver:>9}: {status}, length {result.path_length}, "
                  f"visited {result.nodes_visited}, {elapsed_ms:.2f} ms")
        else:
            reason = "iteration limit reached" if result.truncated else "no path"
            print(f"{solver:>9}: ❌ {reason}, visited {result.nodes_visited}, {elapsed_ms:.2f} ms")
            exit_code = 1

        if args.show:
            print(render_grid(grid, path=result.path, visited=result.visited))
            print()

    return exit_code


def cmd_analyze(args: argparse.Namespace) -> int:
    grid = load_grid(args.input)
    stats = analyze_grid(grid)

    print(f"Analyzing maze: {args.input}")
    print(f"Dimensions: {stats.size}x{stats.size}")
    print(f"Algorithm: {stats.algorithm}")
    print(f"Walkable cells: {stats.walkable_cells}")
    print(f"Logical cells carved: {stats.carved_logical_cells}/{stats.logical_cells}")
    print(f"Connections: {stats.connections}")
    print(f"Dead ends: {stats.dead_ends}")
    print(f"Wall density: {stats.wall_density:.1%}")
    print(f"Perfect maze: {'yes' if stats.perfect else 'no'}")

    if stats.solvable:
        print("✅ End is reachable from start")
        return 0
    print("❌ End is not reachable from start")
    return 1


def cmd_list(args: argparse.Namespace) -> int:
    print("Generation algorithms:")
    for algorithm in GENERATION_ALGORITHMS:
        info = get_algorithm_info(algorithm)
        print(f"  {algorithm:<13} {info['name']} [{info['complexity']}] - {info['description']}")
    print("Search algorithms:")
    print("  " + ", ".join(SEARCH_ALGORITHMS))
    return 0


COMMANDS = {
    "generate": cmd_generate,
    "solve": cmd_solve,
    "analyze": cmd_analyze,
    "list": cmd_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except (InvalidConfiguration, UnknownAlgorithm) as e:
        print(f"❌ {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
