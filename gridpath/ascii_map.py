"""ASCII map loading and rendering for quick debugging and headless runs.

Map files use one character per cell:
    .  open cell
    #  wall
    S  start marker
    E  end marker

Rendered output additionally marks visited cells with 'o' and the shortest
path with '*'. Markers always keep their own glyph.
"""

from pathlib import Path
from typing import Union

import numpy as np

from .constants import (
    OPEN_CHAR,
    WALL_CHAR,
    START_CHAR,
    END_CHAR,
    VISITED_CHAR,
    PATH_CHAR,
)
from .grid import Grid


def parse_ascii_map(text: str) -> Grid:
    """Build a grid from map text. Blank lines are ignored."""
    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("Map is empty")

    width = len(lines[0])
    mask = np.zeros((len(lines), width), dtype=bool)
    starts = []
    ends = []

    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(
                f"Row {row} has {len(line)} cells, expected {width}"
            )
        for col, char in enumerate(line):
            if char == WALL_CHAR:
                mask[row, col] = True
            elif char == START_CHAR:
                starts.append((row, col))
            elif char == END_CHAR:
                ends.append((row, col))
            elif char != OPEN_CHAR:
                raise ValueError(f"Unknown map character {char!r} at ({row}, {col})")

    if len(starts) != 1:
        raise ValueError(f"Map needs exactly one '{START_CHAR}', found {len(starts)}")
    if len(ends) != 1:
        raise ValueError(f"Map needs exactly one '{END_CHAR}', found {len(ends)}")

    return Grid.from_wall_mask(mask, start=starts[0], end=ends[0])


def load_ascii_map(path: Union[str, Path]) -> Grid:
    return parse_ascii_map(Path(path).read_text())


def render_ascii(grid: Grid, result=None, show_coords: bool = False) -> str:
    """Render the grid, optionally overlaid with a SearchResult.

    Args:
        grid: Grid to render
        result: Optional SearchResult whose visited nodes and path are drawn
        show_coords: Whether to add column and row labels

    Returns:
        Multi-line string, one line per grid row
    """
    chars = np.full((grid.rows, grid.cols), OPEN_CHAR, dtype="<U1")
    chars[grid.wall_mask()] = WALL_CHAR

    if result is not None:
        for node in result.visited:
            chars[node.row, node.col] = VISITED_CHAR
        for node in result.path:
            chars[node.row, node.col] = PATH_CHAR

    chars[grid.start] = START_CHAR
    chars[grid.end] = END_CHAR

    lines = ["".join(row) for row in chars]
    if not show_coords:
        return "\n".join(lines)

    header = "    " + "".join(str(col % 10) for col in range(grid.cols))
    body = [f"{row:3d} {line}" for row, line in enumerate(lines)]
    return "\n".join([header] + body)


def save_ascii_map(grid: Grid, path: Union[str, Path]):
    Path(path).write_text(render_ascii(grid) + "\n")
