#!/usr/bin/env python3
"""
Command line entry point for the grid pathfinding visualizer.

Usage:
    python -m gridpath
    python -m gridpath --map maze.txt
    python -m gridpath --headless --algorithm bfs --map maze.txt
    python -m gridpath --headless --map maze.txt --save-map copy.txt
"""

import logging
import sys
from typing import List, Optional

from .ascii_map import render_ascii, save_ascii_map
from .config import VisualizerConfig, parse_arguments, print_config_help
from .pathfinding.engine import run_search

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def run_headless(config: VisualizerConfig) -> int:
    """Run one search, print the board and summary. Returns an exit status."""
    grid = config.build_grid()
    result = run_search(config.search_algorithm, grid)

    print(render_ascii(grid, result, show_coords=True))
    print(result.summary())
    if config.save_map_path:
        save_ascii_map(grid, config.save_map_path)
        logger.info("Saved board to %s", config.save_map_path)
    return 0 if result.found else 1


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = parse_arguments(argv)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        if config.headless:
            return run_headless(config)

        # pygame is only needed for the window
        from .visualization.app import PathfindingVisualizerApp

        app = PathfindingVisualizerApp(config)
        print_config_help(config, app.grid)
        app.run()
        return 0
    except (ValueError, OSError) as e:
        logger.error("Could not start visualizer: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
