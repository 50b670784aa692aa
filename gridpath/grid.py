"""
Grid model for the pathfinding visualizer.

The grid is a fixed-size rectangle of Node records. It owns every piece of
traversal state the search algorithms read and write, so a single Grid
instance is passed explicitly to all edit and search operations.

Back-references between nodes are stored as (row, col) keys rather than
node references, which keeps a grid free of aliasing when it is rebuilt.
"""

import math
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from .constants import Coord, ROWS, COLS, DEFAULT_START, DEFAULT_END

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """One grid cell plus its traversal metadata."""

    row: int
    col: int
    is_start: bool = False
    is_end: bool = False
    is_wall: bool = False
    distance: float = math.inf
    is_visited: bool = False
    previous: Optional[Coord] = None  # Key of the node this one was reached from

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_marker(self) -> bool:
        return self.is_start or self.is_end

    def reset_search_state(self):
        self.is_visited = False
        self.distance = math.inf
        self.previous = None


class Grid:
    """
    Fixed-dimension container of Node records indexed by (row, col).

    Exactly one node holds the start flag and exactly one holds the end flag
    at all times, and neither is ever a wall. Edit requests that would break
    this (walling a marker, moving a marker onto a wall or onto the other
    marker, coordinates outside the grid) are ignored.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        start: Coord = DEFAULT_START,
        end: Coord = DEFAULT_END,
    ):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        start = tuple(start)
        end = tuple(end)
        for name, coord in (("start", start), ("end", end)):
            if not self.in_bounds(coord):
                raise ValueError(
                    f"{name} {coord} lies outside the {rows}x{cols} grid"
                )
        if start == end:
            raise ValueError(f"start and end must differ, both are {start}")

        self.nodes: List[List[Node]] = [
            [Node(row, col) for col in range(cols)] for row in range(rows)
        ]
        self._start = start
        self._end = end
        self.node(start).is_start = True
        self.node(end).is_end = True

    @classmethod
    def build(
        cls,
        rows: int = ROWS,
        cols: int = COLS,
        start: Coord = DEFAULT_START,
        end: Coord = DEFAULT_END,
    ) -> "Grid":
        """Create a fresh grid with no walls and no search state."""
        return cls(rows, cols, start, end)

    @classmethod
    def from_wall_mask(
        cls,
        mask: np.ndarray,
        start: Coord = DEFAULT_START,
        end: Coord = DEFAULT_END,
    ) -> "Grid":
        """
        Build a grid whose walls are the truthy cells of a 2D array.

        Wall bits that fall on the start or end cell are dropped.
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2:
            raise ValueError(f"Wall mask must be 2D, got shape {mask.shape}")

        grid = cls(mask.shape[0], mask.shape[1], start, end)
        for row, col in zip(*np.nonzero(mask)):
            grid.set_wall((int(row), int(col)), True)
        return grid

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, coord: Coord) -> Node:
        """Return the node at coord. Raises IndexError outside the grid."""
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} lies outside the {self.rows}x{self.cols} grid")
        row, col = coord
        return self.nodes[row][col]

    def __getitem__(self, coord: Coord) -> Node:
        return self.node(coord)

    def __iter__(self) -> Iterator[Node]:
        for row in self.nodes:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def all_nodes(self) -> List[Node]:
        """All nodes in row-major order."""
        return list(self)

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def start(self) -> Coord:
        return self._start

    @property
    def end(self) -> Coord:
        return self._end

    @property
    def start_node(self) -> Node:
        return self.node(self._start)

    @property
    def end_node(self) -> Node:
        return self.node(self._end)

    # ------------------------------------------------------------------
    # Search state
    # ------------------------------------------------------------------

    def reset_for_search(self):
        """Clear visited/distance/previous on every node, keeping the layout."""
        for node in self:
            node.reset_search_state()

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def set_wall(self, coord: Coord, value: bool):
        if not self.in_bounds(coord):
            logger.debug("Ignoring wall edit outside grid at %s", coord)
            return
        node = self.node(coord)
        if node.is_marker:
            logger.debug("Ignoring wall edit on marker at %s", coord)
            return
        node.is_wall = bool(value)

    def clear_walls(self):
        for node in self:
            node.is_wall = False

    def move_start(self, coord: Coord):
        self._start = self._move_marker(self._start, coord, "is_start", "is_end")

    def move_end(self, coord: Coord):
        self._end = self._move_marker(self._end, coord, "is_end", "is_start")

    def _move_marker(
        self, current: Coord, target: Coord, flag: str, other_flag: str
    ) -> Coord:
        target = tuple(target)
        if not self.in_bounds(target):
            logger.debug("Ignoring marker move outside grid to %s", target)
            return current

        new_node = self.node(target)
        if new_node.is_wall or getattr(new_node, other_flag):
            logger.debug("Ignoring marker move onto blocked cell %s", target)
            return current

        setattr(self.node(current), flag, False)
        setattr(new_node, flag, True)
        return target

    # ------------------------------------------------------------------
    # Array views
    # ------------------------------------------------------------------

    def wall_mask(self) -> np.ndarray:
        """Boolean (rows, cols) array, True where a wall stands."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for node in self:
            if node.is_wall:
                mask[node.row, node.col] = True
        return mask

    def distance_map(self) -> np.ndarray:
        """Float (rows, cols) array of current node distances (inf if unreached)."""
        distances = np.full((self.rows, self.cols), np.inf, dtype=float)
        for node in self:
            distances[node.row, node.col] = node.distance
        return distances

    def walls(self) -> List[Coord]:
        return [node.coord for node in self if node.is_wall]

    def __repr__(self) -> str:
        return (
            f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, "
            f"end={self._end}, walls={len(self.walls())})"
        )
