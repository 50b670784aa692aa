"""
Search entry point used by the presentation layer.

run_search() resets the grid, runs one traversal strategy and packages the
visited sequence together with the reconstructed path (when the strategy
guarantees a shortest path and the end node was reached).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..grid import Grid, Node
from .algorithms import dijkstra, bfs, dfs
from .path import shortest_path

logger = logging.getLogger(__name__)


class SearchAlgorithm(Enum):
    """
    Available traversal strategies.

    DIJKSTRA and BFS both return shortest paths on the uniform-cost grid;
    DFS only reports whether the end is reachable.
    """

    DIJKSTRA = "dijkstra"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def guarantees_shortest_path(self) -> bool:
        return self is not SearchAlgorithm.DFS

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "SearchAlgorithm":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(algorithm.value for algorithm in cls)
            raise ValueError(
                f"Unknown algorithm '{name}', expected one of: {choices}"
            ) from None


_LABELS = {
    SearchAlgorithm.DIJKSTRA: "Dijkstra",
    SearchAlgorithm.BFS: "Breadth-first search",
    SearchAlgorithm.DFS: "Depth-first search",
}

STRATEGIES: Dict[SearchAlgorithm, Callable[[Grid, Node, Node], List[Node]]] = {
    SearchAlgorithm.DIJKSTRA: dijkstra,
    SearchAlgorithm.BFS: bfs,
    SearchAlgorithm.DFS: dfs,
}


@dataclass
class SearchResult:
    """Outcome of one search run."""

    algorithm: SearchAlgorithm
    visited: List[Node]  # Nodes in the order they were finalized
    path: List[Node] = field(default_factory=list)  # Start to end, or empty
    found: bool = False

    @property
    def nodes_explored(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        """Number of edges on the path, -1 when there is none."""
        return len(self.path) - 1 if self.path else -1

    def summary(self) -> str:
        if not self.found:
            return f"{self.algorithm.label}: no path found after exploring {self.nodes_explored} nodes"
        if self.path:
            return (
                f"{self.algorithm.label}: path of length {self.path_length}, "
                f"{self.nodes_explored} nodes explored"
            )
        return f"{self.algorithm.label}: end reached after exploring {self.nodes_explored} nodes"


def run_search(
    algorithm: SearchAlgorithm,
    grid: Grid,
    start: Optional[Node] = None,
    end: Optional[Node] = None,
) -> SearchResult:
    """
    Reset the grid and run one search from start to end.

    Args:
        algorithm: Strategy to run
        grid: Grid to search; its wall layout is left untouched
        start: Start node, defaults to the grid's start marker
        end: End node, defaults to the grid's end marker

    Returns:
        SearchResult. When the end is unreachable, found is False and path
        is empty; no exception is raised.
    """
    start = start if start is not None else grid.start_node
    end = end if end is not None else grid.end_node

    grid.reset_for_search()
    visited = STRATEGIES[algorithm](grid, start, end)

    found = end.is_visited
    path = []
    if found and algorithm.guarantees_shortest_path:
        path = shortest_path(grid, end)

    result = SearchResult(algorithm=algorithm, visited=visited, path=path, found=found)
    if found:
        logger.debug(result.summary())
    else:
        logger.info(result.summary())
    return result
