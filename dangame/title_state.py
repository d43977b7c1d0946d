"""Title screen: a blinking prompt that starts the game on any key."""

from __future__ import annotations

from typing import Any

import pygame

from dangame.default_state import DefaultState
from dangame.identifiers import StateID


class TitleState(DefaultState):
    """Shows the title background and a blinking prompt."""

    TEXT = "Press any key to start"
    BLINK_INTERVAL = 0.5

    def __init__(self, stack: Any, context: Any) -> None:
        """Set up the title background and the centred prompt text."""
        super().__init__(stack, context)

    def draw(self) -> None:
        """Draw the background, and the prompt while it is visible."""
        super().draw()

    def update(self, dt: float) -> bool:
        """Toggle the prompt every half second; states below keep updating."""
        return super().update(dt)

    def handle_event(self, event: Any) -> bool:
        if event.type == pygame.KEYDOWN:
            self.request_stack_pop()
            self.request_stack_push(StateID.GAME)
        return False