# Interactive grid pathfinding visualizer

from .grid import Grid, Node
from .pathfinding import SearchAlgorithm, SearchResult, run_search, shortest_path

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "Node",
    "SearchAlgorithm",
    "SearchResult",
    "run_search",
    "shortest_path",
]
