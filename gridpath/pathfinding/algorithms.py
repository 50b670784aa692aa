"""
Traversal strategies over the grid: Dijkstra, breadth-first and depth-first.

Every strategy takes (grid, start, end), mutates node search state in place
and returns the nodes in the order they were finalized as visited. All three
treat walls as impassable, but each checks for walls at a different moment:

DIJKSTRA:
    - Keeps every grid node (walls included) in an unvisited list and
      repeatedly extracts the one with the smallest distance. The list is
      re-sorted each iteration with a stable sort, so ties go to row-major
      order. Walls are skipped when extracted.
    - Stops as soon as the closest remaining node is unreachable (infinite
      distance) or the end node is finalized.
    - Neighbor relaxation is unconditional: with uniform edge cost and
      nondecreasing extraction order the first assignment is optimal.

BFS:
    - FIFO queue seeded with start, which is marked visited up front.
      Neighbors are marked visited when enqueued, and walls are never
      enqueued.

DFS:
    - LIFO stack seeded with start. Visited and wall checks happen when a
      node is popped, so a node's back-reference may be rewritten several
      times before it is finally visited. The result is not a shortest path.

None of the strategies raise when the end cannot be reached; callers check
end.is_visited after the run.
"""

import math
import logging
from collections import deque
from operator import attrgetter
from typing import List

from ..constants import EDGE_COST
from ..grid import Grid, Node
from .neighbors import unvisited_neighbors

logger = logging.getLogger(__name__)

_by_distance = attrgetter("distance")


def dijkstra(grid: Grid, start: Node, end: Node) -> List[Node]:
    visited = []
    start.distance = 0
    unvisited = grid.all_nodes()

    while unvisited:
        unvisited.sort(key=_by_distance)
        closest = unvisited.pop(0)

        if closest.is_wall:
            continue
        if closest.distance == math.inf:
            # Everything left is unreachable
            return visited

        closest.is_visited = True
        visited.append(closest)
        if closest is end:
            return visited

        _relax_unvisited_neighbors(grid, closest)

    return visited


def _relax_unvisited_neighbors(grid: Grid, node: Node):
    for neighbor in unvisited_neighbors(grid, node):
        neighbor.distance = node.distance + EDGE_COST
        neighbor.previous = node.coord


def bfs(grid: Grid, start: Node, end: Node) -> List[Node]:
    visited = []
    queue = deque([start])
    start.distance = 0
    start.is_visited = True

    while queue:
        current = queue.popleft()
        visited.append(current)
        if current is end:
            return visited

        for neighbor in unvisited_neighbors(grid, current):
            if neighbor.is_wall:
                continue
            neighbor.is_visited = True
            neighbor.distance = current.distance + EDGE_COST
            neighbor.previous = current.coord
            queue.append(neighbor)

    return visited


def dfs(grid: Grid, start: Node, end: Node) -> List[Node]:
    visited = []
    stack = [start]

    while stack:
        current = stack.pop()
        if current.is_visited or current.is_wall:
            continue

        current.is_visited = True
        visited.append(current)
        if current is end:
            return visited

        # Walls are pushed too; they are filtered when popped
        for neighbor in unvisited_neighbors(grid, current):
            neighbor.previous = current.coord
            stack.append(neighbor)

    return visited
