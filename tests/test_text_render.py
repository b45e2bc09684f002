"""Tests for plain-text maze rendering."""

from labyrinth.utils.text_render import render_grid
from conftest import LOOP_MAZE


def test_render_matches_source_rows(loop_grid):
    assert render_grid(loop_grid).split('\n') == LOOP_MAZE


def test_render_overlays_path_over_visited(loop_grid):
    visited = [(1, 1), (2, 1), (1, 2), (3, 1)]
    path = [(1, 1), (1, 2), (1, 3)]
    lines = render_grid(loop_grid, path=path, visited=visited).split('\n')

    # Start keeps its own marker
    assert lines[1] == "#S..  #"
    assert lines[2] == "#*### #"
    assert lines[3] == "#*#   #"
