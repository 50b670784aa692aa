"""Keyboard controls for the interactive visualizer."""

import pygame
from typing import Callable, Dict, List, Optional


class KeyboardController:
    """Handles keyboard event processing for the visualizer.

    Routes KEYDOWN events to registered handlers. Handlers registered with
    modifier keys take precedence over plain handlers for the same key.
    """

    def __init__(self):
        """Initialize keyboard controller."""
        self.event_handlers: Dict[int, Callable] = {}
        self.modifier_handlers: Dict[tuple, Callable] = {}
        self.descriptions: List[str] = []

    def register_key(self, key: int, handler: Callable,
                     modifiers: Optional[tuple] = None,
                     description: Optional[str] = None):
        """Register a key handler.

        Args:
            key: pygame key constant (e.g., pygame.K_d)
            handler: Callback function to execute when key is pressed
            modifiers: Optional tuple of modifier keys (e.g., (pygame.KMOD_CTRL,))
            description: Optional help overlay line, e.g. "D - Visualize Dijkstra"
        """
        if modifiers:
            self.modifier_handlers[(key, modifiers)] = handler
        else:
            self.event_handlers[key] = handler
        if description:
            self.descriptions.append(description)

    def handle_keydown(self, event: pygame.event.Event) -> bool:
        """Handle KEYDOWN event.

        Args:
            event: pygame KEYDOWN event

        Returns:
            True if event was handled, False otherwise
        """
        for (key, modifiers), handler in self.modifier_handlers.items():
            if event.key == key:
                if all(event.mod & mod for mod in modifiers):
                    handler()
                    return True

        if event.key in self.event_handlers:
            self.event_handlers[event.key]()
            return True

        return False

    def help_lines(self) -> List[str]:
        return list(self.descriptions)
