"""Orthogonal neighbor resolution on the grid."""

from typing import List

from ..grid import Grid, Node

# (d_row, d_col) in resolution order: up, down, left, right.
# The order decides tie-breaking in every traversal.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbors(grid: Grid, node: Node) -> List[Node]:
    """In-bounds orthogonal neighbors of node, ordered up, down, left, right."""
    result = []
    for d_row, d_col in NEIGHBOR_OFFSETS:
        coord = (node.row + d_row, node.col + d_col)
        if grid.in_bounds(coord):
            result.append(grid.node(coord))
    return result


def unvisited_neighbors(grid: Grid, node: Node) -> List[Node]:
    return [neighbor for neighbor in neighbors(grid, node) if not neighbor.is_visited]
