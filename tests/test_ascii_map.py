"""
Tests for ASCII map parsing and rendering.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gridpath.ascii_map import parse_ascii_map, load_ascii_map, render_ascii, save_ascii_map
from gridpath.pathfinding import SearchAlgorithm, run_search

SMALL_MAP = """
S..
.#.
..E
"""


class TestParseAsciiMap:
    """Test suite for reading map text."""

    def test_parses_layout(self):
        grid = parse_ascii_map(SMALL_MAP)
        assert grid.shape == (3, 3)
        assert grid.start == (0, 0)
        assert grid.end == (2, 2)
        assert grid.walls() == [(1, 1)]

    @pytest.mark.parametrize("text, message", [
        ("", "empty"),
        ("S..\n.E", "Row 1"),
        ("S.x\n..E", "Unknown map character"),
        ("...\n..E", "exactly one 'S'"),
        ("S.S\n..E", "exactly one 'S'"),
        ("S..\n...", "exactly one 'E'"),
    ])
    def test_rejects_malformed_maps(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_ascii_map(text)

    def test_save_and_load(self, tmp_path):
        grid = parse_ascii_map(SMALL_MAP)
        path = tmp_path / "small.txt"
        save_ascii_map(grid, path)

        loaded = load_ascii_map(path)
        assert loaded.walls() == grid.walls()
        assert loaded.start == grid.start
        assert loaded.end == grid.end


class TestRenderAscii:
    """Test suite for text rendering."""

    def test_plain_layout(self):
        grid = parse_ascii_map(SMALL_MAP)
        assert render_ascii(grid) == "S..\n.#.\n..E"

    def test_bfs_overlay(self):
        grid = parse_ascii_map(SMALL_MAP)
        result = run_search(SearchAlgorithm.BFS, grid)
        assert render_ascii(grid, result) == "Soo\n*#o\n**E"

    def test_dfs_overlay_has_no_path(self):
        grid = parse_ascii_map(SMALL_MAP)
        result = run_search(SearchAlgorithm.DFS, grid)
        assert render_ascii(grid, result) == "Soo\n.#o\n..E"

    def test_coordinates(self):
        grid = parse_ascii_map(SMALL_MAP)
        lines = render_ascii(grid, show_coords=True).splitlines()
        assert lines[0] == "    012"
        assert lines[1] == "  0 S.."
        assert len(lines) == 4
