"""
pygame presentation layer: rendering, keyboard controls and the
interactive application.
"""

from .constants import ColorScheme, LayoutDefaults
from .controls import KeyboardController
from .renderer import GridRenderer, HighlightLayer
from .app import PathfindingVisualizerApp

__all__ = [
    "ColorScheme",
    "LayoutDefaults",
    "KeyboardController",
    "GridRenderer",
    "HighlightLayer",
    "PathfindingVisualizerApp",
]
