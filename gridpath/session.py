"""Mouse interaction modes for editing a grid.

The session only tracks which gesture is in progress; every change it makes
goes through the grid's own edit operations, so invalid edits stay no-ops.
"""

import logging
from enum import IntEnum

from .constants import Coord
from .grid import Grid

logger = logging.getLogger(__name__)


class EditMode(IntEnum):
    """Gesture currently driven by the held mouse button."""
    IDLE = 0
    PAINTING = 1        # Drawing or erasing walls
    DRAGGING_START = 2
    DRAGGING_END = 3


class EditSession:
    """Tracks a press-drag-release gesture over the grid."""

    def __init__(self):
        self.mode = EditMode.IDLE
        self.creating_walls = False  # Draw vs erase while painting

    @property
    def is_active(self) -> bool:
        return self.mode != EditMode.IDLE

    def mouse_down(self, grid: Grid, coord: Coord):
        if not grid.in_bounds(coord):
            return

        node = grid.node(coord)
        if node.is_start:
            self.mode = EditMode.DRAGGING_START
        elif node.is_end:
            self.mode = EditMode.DRAGGING_END
        else:
            self.mode = EditMode.PAINTING
            self.creating_walls = not node.is_wall
            grid.set_wall(coord, self.creating_walls)
        logger.debug("Gesture %s started at %s", self.mode.name, coord)

    def mouse_over(self, grid: Grid, coord: Coord):
        if not grid.in_bounds(coord):
            return

        if self.mode == EditMode.PAINTING:
            grid.set_wall(coord, self.creating_walls)
        elif self.mode == EditMode.DRAGGING_START:
            grid.move_start(coord)
        elif self.mode == EditMode.DRAGGING_END:
            grid.move_end(coord)

    def mouse_up(self):
        self.mode = EditMode.IDLE
