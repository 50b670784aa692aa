"""
Colours and layout constants for the pygame presentation layer.
"""

from typing import Tuple

RGB = Tuple[int, int, int]


class ColorScheme:
    """Color scheme for grid rendering."""

    BACKGROUND_COLOR: RGB = (20, 20, 30)
    GRID_LINE_COLOR: RGB = (60, 60, 70)
    TEXT_COLOR: RGB = (255, 255, 255)

    # Cell colors
    OPEN_COLOR: RGB = (245, 245, 245)
    WALL_COLOR: RGB = (12, 53, 71)
    START_COLOR: RGB = (0, 200, 80)
    END_COLOR: RGB = (220, 40, 40)
    VISITED_COLOR: RGB = (64, 206, 227)
    PATH_COLOR: RGB = (255, 254, 106)

    # Status line
    STATUS_BAR_COLOR: RGB = (35, 35, 50)
    ALERT_COLOR: RGB = (255, 120, 100)


class LayoutDefaults:
    """Window layout values, in pixels."""

    STATUS_BAR_HEIGHT: int = 32
    GRID_LINE_WIDTH: int = 1
    FONT_SIZE: int = 24
    HELP_FONT_SIZE: int = 20
    HELP_PANEL_PADDING: int = 12
