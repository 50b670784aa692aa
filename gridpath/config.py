"""Configuration and argument parsing for the visualizer."""

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import (
    ROWS,
    COLS,
    DEFAULT_START,
    DEFAULT_END,
    VISITED_STEP_DELAY_MS,
    PATH_STEP_DELAY_MS,
    DEFAULT_SAVE_PATH,
)
from .ascii_map import load_ascii_map
from .grid import Grid
from .pathfinding.engine import SearchAlgorithm


@dataclass
class VisualizerConfig:
    """Configuration for a visualizer session."""

    # Grid
    rows: int = ROWS
    cols: int = COLS
    start: Tuple[int, int] = DEFAULT_START
    end: Tuple[int, int] = DEFAULT_END
    map_path: Optional[str] = None
    save_map_path: Optional[str] = None  # Headless runs only save when set

    # Display
    tile_size: int = 24
    fps: int = 60
    visited_delay_ms: int = VISITED_STEP_DELAY_MS
    path_delay_ms: int = PATH_STEP_DELAY_MS

    # Run mode
    headless: bool = False
    algorithm: str = SearchAlgorithm.DIJKSTRA.value
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid size must be positive, got {self.rows}x{self.cols}")
        if self.tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {self.tile_size}")
        if self.fps <= 0:
            raise ValueError(f"FPS must be positive, got {self.fps}")
        if self.visited_delay_ms < 0 or self.path_delay_ms < 0:
            raise ValueError("Animation delays cannot be negative")

        self.start = tuple(self.start)
        self.end = tuple(self.end)
        # Marker bounds are only known here when no map file overrides them
        if self.map_path is None:
            for name, (row, col) in (("start", self.start), ("end", self.end)):
                if not (0 <= row < self.rows and 0 <= col < self.cols):
                    raise ValueError(
                        f"{name} ({row}, {col}) lies outside the {self.rows}x{self.cols} grid"
                    )
            if self.start == self.end:
                raise ValueError("start and end must differ")

        if isinstance(self.algorithm, SearchAlgorithm):
            self.algorithm = self.algorithm.value
        # Raises ValueError for unknown names
        self.algorithm = SearchAlgorithm.from_name(self.algorithm).value

    @property
    def search_algorithm(self) -> SearchAlgorithm:
        return SearchAlgorithm(self.algorithm)

    def build_grid(self) -> Grid:
        """Fresh grid from the map file if one is set, else from the dimensions."""
        if self.map_path is not None:
            return load_ascii_map(self.map_path)
        return Grid.build(self.rows, self.cols, self.start, self.end)


def parse_coord(text: str) -> Tuple[int, int]:
    """Parse 'ROW,COL' into a coordinate tuple."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL but got '{text}'"
        ) from None
    return (row, col)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for the visualizer.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Interactive grid pathfinding visualizer (Dijkstra, BFS, DFS)."
    )

    # Grid settings
    parser.add_argument(
        "--rows", type=int, default=ROWS, help=f"Number of grid rows (default: {ROWS})."
    )
    parser.add_argument(
        "--cols", type=int, default=COLS, help=f"Number of grid columns (default: {COLS})."
    )
    parser.add_argument(
        "--start",
        type=parse_coord,
        default=DEFAULT_START,
        help="Start marker as ROW,COL (default: %d,%d)." % DEFAULT_START,
    )
    parser.add_argument(
        "--end",
        type=parse_coord,
        default=DEFAULT_END,
        help="End marker as ROW,COL (default: %d,%d)." % DEFAULT_END,
    )
    parser.add_argument(
        "--map",
        type=str,
        default=None,
        help="ASCII map file to load (overrides --rows/--cols/--start/--end).",
    )
    parser.add_argument(
        "--save-map",
        type=str,
        default=None,
        help=f"Write the board layout here after a headless run, or on Ctrl+S (default for Ctrl+S: {DEFAULT_SAVE_PATH}).",
    )

    # Display settings
    parser.add_argument(
        "--tile-size", type=int, default=24, help="Cell size in pixels (default: 24)."
    )
    parser.add_argument(
        "--fps", type=int, default=60, help="Frame rate cap for the window (default: 60)."
    )
    parser.add_argument(
        "--visited-delay",
        type=int,
        default=VISITED_STEP_DELAY_MS,
        help=f"Milliseconds between visited highlights (default: {VISITED_STEP_DELAY_MS}).",
    )
    parser.add_argument(
        "--path-delay",
        type=int,
        default=PATH_STEP_DELAY_MS,
        help=f"Milliseconds between path highlights (default: {PATH_STEP_DELAY_MS}).",
    )

    # Run mode
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run one search without a window and print the result as text.",
    )
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in SearchAlgorithm],
        default=SearchAlgorithm.DIJKSTRA.value,
        help="Algorithm for headless runs (default: dijkstra).",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging."
    )

    return parser


def print_config_help(config: VisualizerConfig, grid: Grid):
    """Print the interactive controls banner.

    Args:
        config: Session configuration
        grid: The grid actually in use, which a map file may have sized
    """
    print("\n" + "=" * 60)
    print("GRID PATHFINDING VISUALIZER")
    print("=" * 60)
    print(f"• Grid: {grid.rows} rows x {grid.cols} columns")
    print(f"• Start: {grid.start}  End: {grid.end}")
    if config.map_path:
        print(f"• Map file: {config.map_path}")
    print("\nMouse:")
    print("  Click/drag on empty cells - Draw walls")
    print("  Click/drag on walls       - Erase walls")
    print("  Drag start/end marker     - Move marker")
    print("\nKeys:")
    print("  D - Visualize Dijkstra")
    print("  B - Visualize breadth-first search")
    print("  F - Visualize depth-first search")
    print("  C - Clear board")
    print("  W - Clear walls")
    print("  Space - Skip to the end of the replay")
    print(f"  Ctrl+S - Save board to {config.save_map_path or DEFAULT_SAVE_PATH}")
    print("  H - Toggle help overlay")
    print("  Esc - Quit")
    print("=" * 60 + "\n")


def parse_arguments(argv: Optional[List[str]] = None) -> VisualizerConfig:
    """Parse command-line arguments into a VisualizerConfig.

    Raises:
        ValueError: If the combination of arguments is invalid
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    return VisualizerConfig(
        rows=args.rows,
        cols=args.cols,
        start=args.start,
        end=args.end,
        map_path=args.map,
        save_map_path=args.save_map,
        tile_size=args.tile_size,
        fps=args.fps,
        visited_delay_ms=args.visited_delay,
        path_delay_ms=args.path_delay,
        headless=args.headless,
        algorithm=args.algorithm,
        debug=args.debug,
    )
