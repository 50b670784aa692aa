"""Shortest path reconstruction from back-references."""

from typing import List

from ..grid import Grid, Node


def shortest_path(grid: Grid, end_node: Node) -> List[Node]:
    """
    Follow back-references from end_node until one is unset.

    Returns nodes ordered from the start of the chain to end_node inclusive.
    Only meaningful after a Dijkstra or BFS run that actually visited
    end_node; a DFS back-reference chain is not a shortest path.
    """
    path = []
    current = end_node
    while current is not None:
        path.append(current)
        current = grid.node(current.previous) if current.previous is not None else None
    path.reverse()
    return path
