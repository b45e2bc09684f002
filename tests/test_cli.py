"""Tests for the command-line interface."""

import json

from labyrinth.__main__ import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "huntandkill" in out
    assert "Hunt and Kill" in out
    assert "dijkstra" in out


def test_generate_prints_and_saves(tmp_path, capsys):
    filepath = tmp_path / "maze.json"
    assert main(["generate", "--size", "8", "--seed", "3", "--algorithm", "prims",
                 "--output", str(filepath)]) == 0

    out = capsys.readouterr().out
    assert "Prim's Algorithm maze, 9x9" in out
    assert "#S" in out
    assert json.loads(filepath.read_text())['algorithm'] == "prims"


def test_solve_all_on_saved_maze(tmp_path, capsys):
    filepath = tmp_path / "maze.json"
    main(["generate", "--size", "15", "--seed", "4", "--output", str(filepath)])
    capsys.readouterr()

    assert main(["solve", "--input", str(filepath), "--solver", "all", "--show"]) == 0
    out = capsys.readouterr().out
    for solver in ("bfs", "dfs", "astar", "dijkstra"):
        assert solver in out
    assert "valid path" in out


def test_solve_reports_iteration_limit(capsys):
    assert main(["solve", "--size", "21", "--seed", "1", "--solver", "bfs",
                 "--max-iterations", "2"]) == 1
    assert "iteration limit reached" in capsys.readouterr().out


def test_analyze(tmp_path, capsys):
    filepath = tmp_path / "maze.json"
    main(["generate", "--size", "11", "--seed", "9", "--algorithm", "ellers",
          "--output", str(filepath)])
    capsys.readouterr()

    assert main(["analyze", str(filepath)]) == 0
    out = capsys.readouterr().out
    assert "Dimensions: 11x11" in out
    assert "Perfect maze: yes" in out


def test_invalid_size_fails(capsys):
    assert main(["generate", "--size", "3"]) == 2
    assert "at least 5" in capsys.readouterr().out


def test_unknown_algorithm_fails_loudly(capsys):
    assert main(["generate", "--algorithm", "spiral"]) == 2
    assert "spiral" in capsys.readouterr().out


def test_missing_input_fails(tmp_path, capsys):
    assert main(["analyze", str(tmp_path / "nope.json")]) == 2
