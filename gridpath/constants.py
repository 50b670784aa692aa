"""
Fixed configuration constants for the grid pathfinding visualizer.
"""

from typing import Tuple

Coord = Tuple[int, int]

# Grid dimensions
ROWS = 20
COLS = 50

# Default marker positions as (row, col)
DEFAULT_START: Coord = (10, 5)
DEFAULT_END: Coord = (10, 45)

# Uniform cost of moving between orthogonal neighbors
EDGE_COST = 1

# Animation timing (milliseconds between consecutive highlights)
VISITED_STEP_DELAY_MS = 10
PATH_STEP_DELAY_MS = 50

NO_PATH_MESSAGE = "No Path Found!"

# Text map glyphs
OPEN_CHAR = "."
WALL_CHAR = "#"
START_CHAR = "S"
END_CHAR = "E"
VISITED_CHAR = "o"
PATH_CHAR = "*"

# Where Ctrl+S writes the board when no --save-map path is given
DEFAULT_SAVE_PATH = "gridpath_map.txt"
