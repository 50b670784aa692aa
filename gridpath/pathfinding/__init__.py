"""
Grid search: neighbor resolution, traversal strategies and path reconstruction.
"""

from .neighbors import neighbors, unvisited_neighbors
from .algorithms import dijkstra, bfs, dfs
from .path import shortest_path
from .engine import SearchAlgorithm, SearchResult, run_search

__all__ = [
    "neighbors",
    "unvisited_neighbors",
    "dijkstra",
    "bfs",
    "dfs",
    "shortest_path",
    "SearchAlgorithm",
    "SearchResult",
    "run_search",
]
