"""
pygame rendering of the grid, search highlights and status line.

GridRenderer draws onto any pygame surface, so it works the same for the
interactive window and for off-screen surfaces.
"""

from typing import Dict, Iterable, Optional, Tuple

import pygame

from ..animation import AnimationStep, StepKind
from ..constants import Coord
from ..grid import Grid, Node
from .constants import ColorScheme, LayoutDefaults, RGB


class HighlightLayer:
    """Per-cell highlight state applied from animation steps."""

    def __init__(self):
        self.cells: Dict[Coord, StepKind] = {}
        self.status_message: Optional[str] = None

    def apply(self, step: AnimationStep):
        if step.kind == StepKind.NO_PATH:
            self.status_message = step.message
        else:
            self.cells[step.coord] = step.kind

    def apply_all(self, steps: Iterable[AnimationStep]):
        for step in steps:
            self.apply(step)

    def clear(self):
        self.cells.clear()
        self.status_message = None

    def get(self, coord: Coord) -> Optional[StepKind]:
        return self.cells.get(coord)


class GridRenderer:
    """Draws a Grid as a board of square cells."""

    def __init__(self, tile_size: int, colors: type = ColorScheme, top_offset: int = 0):
        self.tile_size = tile_size
        self.colors = colors
        self.top_offset = top_offset  # Pixels reserved above the board
        self._fonts: Dict[int, pygame.font.Font] = {}

    def board_size(self, grid: Grid) -> Tuple[int, int]:
        return (grid.cols * self.tile_size, grid.rows * self.tile_size)

    def cell_rect(self, coord: Coord) -> pygame.Rect:
        row, col = coord
        return pygame.Rect(
            col * self.tile_size,
            self.top_offset + row * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def coord_at(self, grid: Grid, pixel: Tuple[int, int]) -> Optional[Coord]:
        """Cell under a pixel position, or None outside the board."""
        x, y = pixel
        y -= self.top_offset
        if x < 0 or y < 0:
            return None
        coord = (y // self.tile_size, x // self.tile_size)
        return coord if grid.in_bounds(coord) else None

    def cell_color(self, node: Node, highlight: Optional[StepKind] = None) -> RGB:
        if node.is_start:
            return self.colors.START_COLOR
        if node.is_end:
            return self.colors.END_COLOR
        if node.is_wall:
            return self.colors.WALL_COLOR
        if highlight == StepKind.PATH:
            return self.colors.PATH_COLOR
        if highlight == StepKind.VISITED:
            return self.colors.VISITED_COLOR
        return self.colors.OPEN_COLOR

    def draw_grid(self, surface: pygame.Surface, grid: Grid, highlights: Optional[HighlightLayer] = None):
        for node in grid:
            highlight = highlights.get(node.coord) if highlights is not None else None
            rect = self.cell_rect(node.coord)
            pygame.draw.rect(surface, self.cell_color(node, highlight), rect)
            pygame.draw.rect(
                surface, self.colors.GRID_LINE_COLOR, rect, LayoutDefaults.GRID_LINE_WIDTH
            )

    def _get_font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw_status(self, surface: pygame.Surface, text: str, alert: bool = False):
        """Draw the status bar across the top of the surface."""
        bar = pygame.Rect(0, 0, surface.get_width(), LayoutDefaults.STATUS_BAR_HEIGHT)
        pygame.draw.rect(surface, self.colors.STATUS_BAR_COLOR, bar)
        font = self._get_font(LayoutDefaults.FONT_SIZE)
        color = self.colors.ALERT_COLOR if alert else self.colors.TEXT_COLOR
        text_surface = font.render(text, True, color)
        surface.blit(text_surface, (8, (bar.height - text_surface.get_height()) // 2))

    def draw_help(self, surface: pygame.Surface, lines: Iterable[str]):
        """Draw a translucent help panel in the top-left corner of the board."""
        font = self._get_font(LayoutDefaults.HELP_FONT_SIZE)
        rendered = [font.render(line, True, self.colors.TEXT_COLOR) for line in lines]
        if not rendered:
            return

        padding = LayoutDefaults.HELP_PANEL_PADDING
        width = max(text.get_width() for text in rendered) + 2 * padding
        height = sum(text.get_height() for text in rendered) + 2 * padding

        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 180))
        y = padding
        for text in rendered:
            panel.blit(text, (padding, y))
            y += text.get_height()
        surface.blit(panel, (padding, self.top_offset + padding))
