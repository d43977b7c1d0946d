"""Fallback title screen with a blinking caption."""

from __future__ import annotations

from typing import Any

import pygame

from dangame.identifiers import FontID, TextureID
from dangame.state import Context, State, StateStack
from dangame.utility import center_origin


class DefaultState(State):
    """Shows the title background and a blinking caption; any key pops it."""

    TEXT = "DEFAULT SCREEN"
    TEXT_COLOR = (255, 255, 255)
    BLINK_INTERVAL = 0.2

    def __init__(self, stack: StateStack, context: Context) -> None:
        super().__init__(stack, context)
        font = context.fonts.get(FontID.MAIN)
        self.background = context.textures.get(TextureID.TITLE_SCREEN)
        self.text_surface = font.render(self.TEXT, True, self.TEXT_COLOR)
        origin = center_origin(self.text_surface.get_rect())
        width, height = context.window.get_size()
        self.text_position = pygame.Vector2(width / 2.0, height / 2.0) - origin
        self.show_text = True
        self._text_effect_time = 0.0

    def draw(self) -> None:
        window = self.context().window
        window.blit(self.background, (0, 0))
        if self.show_text:
            window.blit(self.text_surface, self.text_position)

    def update(self, dt: float) -> bool:
        self._text_effect_time += dt
        if self._text_effect_time >= self.BLINK_INTERVAL:
            self.show_text = not self.show_text
            self._text_effect_time = 0.0
        return True

    def handle_event(self, event: Any) -> bool:
        if event.type == pygame.KEYDOWN:
            self.request_stack_pop()
        return False