"""
Interactive pygame front-end for the grid pathfinding visualizer.

The application owns one Grid, one EditSession for mouse gestures and the
animation player for the most recent search. Searches run to completion
synchronously; only their replay is spread over time. Clearing the board
drops any pending replay.
"""

import logging
from typing import Optional

import pygame

from ..animation import AnimationTimeline, TimelinePlayer
from ..ascii_map import save_ascii_map
from ..config import VisualizerConfig
from ..constants import DEFAULT_SAVE_PATH
from ..grid import Grid
from ..pathfinding.engine import SearchAlgorithm, SearchResult, run_search
from ..session import EditSession
from .constants import LayoutDefaults
from .controls import KeyboardController
from .renderer import GridRenderer, HighlightLayer

logger = logging.getLogger(__name__)

IDLE_STATUS = "D: Dijkstra   B: BFS   F: DFS   C: Clear   H: Help"


class PathfindingVisualizerApp:
    """Interactive visualizer application."""

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()
        self.grid: Grid = self.config.build_grid()
        self._initial_start = self.grid.start
        self._initial_end = self.grid.end

        self.session = EditSession()
        self.highlights = HighlightLayer()
        self.renderer = GridRenderer(
            self.config.tile_size, top_offset=LayoutDefaults.STATUS_BAR_HEIGHT
        )
        self.controller = KeyboardController()

        self.result: Optional[SearchResult] = None
        self.player: Optional[TimelinePlayer] = None
        self.show_help = False
        self.running = False

        self._setup_controls()

    def _setup_controls(self):
        register = self.controller.register_key
        register(pygame.K_d, lambda: self.run_algorithm(SearchAlgorithm.DIJKSTRA),
                 description="D - Visualize Dijkstra")
        register(pygame.K_b, lambda: self.run_algorithm(SearchAlgorithm.BFS),
                 description="B - Visualize breadth-first search")
        register(pygame.K_f, lambda: self.run_algorithm(SearchAlgorithm.DFS),
                 description="F - Visualize depth-first search")
        register(pygame.K_c, self.clear_board, description="C - Clear board")
        register(pygame.K_w, self.clear_walls, description="W - Clear walls")
        register(pygame.K_SPACE, self.skip_replay, description="Space - Skip replay")
        register(pygame.K_s, self.save_board, modifiers=(pygame.KMOD_CTRL,),
                 description="Ctrl+S - Save board")
        register(pygame.K_h, self.toggle_help, description="H - Toggle this help")
        register(pygame.K_ESCAPE, self.stop, description="Esc - Quit")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def run_algorithm(self, algorithm: SearchAlgorithm):
        """Run a search and start replaying it."""
        self.highlights.clear()
        self.result = run_search(algorithm, self.grid)
        timeline = AnimationTimeline.from_result(
            self.result,
            visited_delay_ms=self.config.visited_delay_ms,
            path_delay_ms=self.config.path_delay_ms,
        )
        self.player = TimelinePlayer(timeline)
        logger.debug(
            "Replaying %s: %d steps over %d ms",
            algorithm.value, len(timeline), timeline.duration_ms,
        )

    def clear_board(self):
        """Rebuild the grid with default markers and no walls."""
        self.session.mouse_up()
        self.grid = Grid.build(
            self.grid.rows, self.grid.cols, self._initial_start, self._initial_end
        )
        self._drop_replay()

    def clear_walls(self):
        self.grid.clear_walls()
        self._drop_replay()

    def skip_replay(self):
        """Show the rest of the current replay at once."""
        if self.player is not None:
            self.highlights.apply_all(self.player.skip_to_end())

    def save_board(self):
        """Write the current walls and markers as a text map."""
        path = self.config.save_map_path or DEFAULT_SAVE_PATH
        try:
            save_ascii_map(self.grid, path)
        except OSError as e:
            logger.error("Could not save board to %s: %s", path, e)
            return
        logger.info("Saved board to %s", path)

    def toggle_help(self):
        self.show_help = not self.show_help

    def stop(self):
        self.running = False

    def _drop_replay(self):
        self.result = None
        self.player = None
        self.highlights.clear()

    @property
    def animating(self) -> bool:
        return self.player is not None and not self.player.finished

    def status_text(self) -> str:
        if self.highlights.status_message:
            return self.highlights.status_message
        if self.result is None:
            return IDLE_STATUS
        if self.animating:
            return f"{self.result.algorithm.label}..."
        return self.result.summary()

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            self.controller.handle_keydown(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            coord = self.renderer.coord_at(self.grid, event.pos)
            if coord is not None:
                self.session.mouse_down(self.grid, coord)
        elif event.type == pygame.MOUSEMOTION and self.session.is_active:
            coord = self.renderer.coord_at(self.grid, event.pos)
            if coord is not None:
                self.session.mouse_over(self.grid, coord)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.session.mouse_up()

    def update(self, delta_ms: int):
        if self.player is not None:
            self.highlights.apply_all(self.player.advance(delta_ms))

    def draw(self, surface: pygame.Surface):
        surface.fill(self.renderer.colors.BACKGROUND_COLOR)
        self.renderer.draw_status(
            surface, self.status_text(), alert=self.highlights.status_message is not None
        )
        self.renderer.draw_grid(surface, self.grid, self.highlights)
        if self.show_help:
            self.renderer.draw_help(surface, self.controller.help_lines())

    def window_size(self):
        width, height = self.renderer.board_size(self.grid)
        return (width, height + LayoutDefaults.STATUS_BAR_HEIGHT)

    def run(self):
        """Open the window and process events until quit."""
        pygame.init()
        pygame.display.set_caption("Pathfinding Visualizer")
        screen = pygame.display.set_mode(self.window_size())
        clock = pygame.time.Clock()
        self.running = True
        logger.info("Visualizer started on a %dx%d grid", self.grid.rows, self.grid.cols)

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(clock.tick(self.config.fps))
                self.draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()
