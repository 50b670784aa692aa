#!/usr/bin/env python3
"""
Unit tests for the traversal strategies and path reconstruction.

Exact visitation orders are checked on a small 3x3 map:

    S..
    .#.
    ..E
"""

import math
import os
import sys
import unittest

import numpy as np

# Add the project root to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gridpath.grid import Grid
from gridpath.pathfinding.algorithms import dijkstra, bfs, dfs
from gridpath.pathfinding.path import shortest_path


def coords(nodes):
    return [node.coord for node in nodes]


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def small_grid():
    grid = Grid.build(3, 3, (0, 0), (2, 2))
    grid.set_wall((1, 1), True)
    return grid


def column_wall_grid():
    """Default grid with column 25 walled except for row 0."""
    grid = Grid.build()
    for row in range(1, grid.rows):
        grid.set_wall((row, 25), True)
    return grid


def enclosed_end_grid():
    grid = Grid.build()
    for coord in [(9, 45), (11, 45), (10, 44), (10, 46)]:
        grid.set_wall(coord, True)
    return grid


class TestDijkstra(unittest.TestCase):
    """Test cases for Dijkstra's algorithm."""

    def test_small_grid_visit_order(self):
        grid = small_grid()
        visited = dijkstra(grid, grid.start_node, grid.end_node)
        self.assertEqual(
            coords(visited),
            [(0, 0), (0, 1), (1, 0), (0, 2), (2, 0), (1, 2), (2, 1), (2, 2)],
        )

    def test_small_grid_path(self):
        grid = small_grid()
        dijkstra(grid, grid.start_node, grid.end_node)
        path = shortest_path(grid, grid.end_node)
        self.assertEqual(coords(path), [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)])

    def test_ties_go_to_row_major_order(self):
        grid = Grid.build()
        visited = dijkstra(grid, grid.start_node, grid.end_node)
        self.assertEqual(coords(visited[:5]), [(10, 5), (9, 5), (10, 4), (10, 6), (11, 5)])

    def test_open_grid_path_length_is_manhattan_distance(self):
        grid = Grid.build()
        visited = dijkstra(grid, grid.start_node, grid.end_node)
        path = shortest_path(grid, grid.end_node)

        self.assertIs(visited[-1], grid.end_node)
        self.assertEqual(len(path) - 1, 40)
        self.assertEqual(grid.end_node.distance, 40)

    def test_distances_are_nondecreasing(self):
        grid = column_wall_grid()
        visited = dijkstra(grid, grid.start_node, grid.end_node)
        distances = [node.distance for node in visited]
        self.assertEqual(distances, sorted(distances))

    def test_walls_are_never_visited(self):
        grid = column_wall_grid()
        visited = dijkstra(grid, grid.start_node, grid.end_node)
        self.assertFalse(any(node.is_wall for node in visited))
        self.assertFalse(any(node.is_visited for node in grid if node.is_wall))

    def test_unreachable_end_stops_early(self):
        grid = enclosed_end_grid()
        visited = dijkstra(grid, grid.start_node, grid.end_node)

        self.assertNotIn(grid.end_node, visited)
        self.assertFalse(grid.end_node.is_visited)
        self.assertEqual(grid.end_node.distance, math.inf)
        # Every open cell except the enclosed end
        self.assertEqual(len(visited), grid.rows * grid.cols - 4 - 1)

    def test_start_equals_end_position(self):
        grid = Grid.build(2, 2, (0, 0), (1, 1))
        visited = dijkstra(grid, grid.start_node, grid.start_node)
        self.assertEqual(coords(visited), [(0, 0)])


class TestBFS(unittest.TestCase):
    """Test cases for breadth-first search."""

    def test_small_grid_visit_order(self):
        grid = small_grid()
        visited = bfs(grid, grid.start_node, grid.end_node)
        self.assertEqual(
            coords(visited),
            [(0, 0), (1, 0), (0, 1), (2, 0), (0, 2), (2, 1), (1, 2), (2, 2)],
        )

    def test_small_grid_path(self):
        grid = small_grid()
        bfs(grid, grid.start_node, grid.end_node)
        path = shortest_path(grid, grid.end_node)
        self.assertEqual(coords(path), [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)])

    def test_first_ring_follows_neighbor_order(self):
        grid = Grid.build()
        visited = bfs(grid, grid.start_node, grid.end_node)
        self.assertEqual(coords(visited[:5]), [(10, 5), (9, 5), (11, 5), (10, 4), (10, 6)])

    def test_open_grid_path_length_is_manhattan_distance(self):
        grid = Grid.build()
        bfs(grid, grid.start_node, grid.end_node)
        path = shortest_path(grid, grid.end_node)
        self.assertEqual(len(path) - 1, manhattan(grid.start, grid.end))

    def test_path_routes_through_gap_in_wall_column(self):
        grid = column_wall_grid()
        bfs(grid, grid.start_node, grid.end_node)
        path = shortest_path(grid, grid.end_node)

        self.assertIn((0, 25), coords(path))
        self.assertEqual(len(path) - 1, 60)

    def test_unreachable_end(self):
        grid = enclosed_end_grid()
        visited = bfs(grid, grid.start_node, grid.end_node)
        self.assertNotIn(grid.end_node, visited)
        self.assertFalse(grid.end_node.is_visited)
        self.assertEqual(len(visited), grid.rows * grid.cols - 4 - 1)

    def test_each_node_visited_once(self):
        grid = column_wall_grid()
        visited = bfs(grid, grid.start_node, grid.end_node)
        self.assertEqual(len(coords(visited)), len(set(coords(visited))))


class TestDFS(unittest.TestCase):
    """Test cases for depth-first search."""

    def test_small_grid_visit_order(self):
        grid = small_grid()
        visited = dfs(grid, grid.start_node, grid.end_node)
        self.assertEqual(coords(visited), [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)])

    def test_open_grid_runs_straight_right(self):
        grid = Grid.build()
        visited = dfs(grid, grid.start_node, grid.end_node)
        self.assertEqual(coords(visited), [(10, col) for col in range(5, 46)])

    def test_end_behind_start_still_terminates(self):
        grid = Grid.build(5, 8, (2, 4), (2, 3))
        visited = dfs(grid, grid.start_node, grid.end_node)

        self.assertTrue(grid.end_node.is_visited)
        self.assertIs(visited[-1], grid.end_node)
        self.assertEqual(len(coords(visited)), len(set(coords(visited))))
        # Heads right first, so the neighbor on the left is not reached directly
        self.assertGreater(len(visited), 2)

    def test_walls_are_skipped(self):
        grid = column_wall_grid()
        visited = dfs(grid, grid.start_node, grid.end_node)
        self.assertTrue(grid.end_node.is_visited)
        self.assertFalse(any(node.is_wall for node in visited))

    def test_unreachable_end(self):
        grid = enclosed_end_grid()
        visited = dfs(grid, grid.start_node, grid.end_node)
        self.assertNotIn(grid.end_node, visited)
        self.assertEqual(len(visited), grid.rows * grid.cols - 4 - 1)

    def test_back_references_form_a_chain_to_start(self):
        grid = small_grid()
        dfs(grid, grid.start_node, grid.end_node)
        chain = shortest_path(grid, grid.end_node)
        self.assertEqual(chain[0].coord, (0, 0))
        self.assertEqual(chain[-1].coord, (2, 2))


class TestShortestPathProperties(unittest.TestCase):
    """Properties shared by Dijkstra and BFS paths."""

    def _random_grid(self, seed):
        rng = np.random.default_rng(seed)
        mask = rng.random((12, 18)) < 0.25
        return Grid.from_wall_mask(mask, start=(0, 0), end=(11, 17))

    def test_paths_are_contiguous_and_agree_in_length(self):
        for seed in range(10):
            lengths = []
            for strategy in (dijkstra, bfs):
                grid = self._random_grid(seed)
                strategy(grid, grid.start_node, grid.end_node)
                if not grid.end_node.is_visited:
                    continue

                path = shortest_path(grid, grid.end_node)
                self.assertIs(path[0], grid.start_node)
                self.assertIs(path[-1], grid.end_node)
                for a, b in zip(path, path[1:]):
                    self.assertEqual(manhattan(a.coord, b.coord), 1)
                    self.assertFalse(b.is_wall)
                lengths.append(len(path))

            if len(lengths) == 2:
                self.assertEqual(lengths[0], lengths[1], f"seed {seed}")

    def test_path_of_unvisited_start_is_itself(self):
        grid = Grid.build(2, 2, (0, 0), (1, 1))
        self.assertEqual(coords(shortest_path(grid, grid.start_node)), [(0, 0)])


if __name__ == '__main__':
    unittest.main()
