"""Pause overlay drawn over the game."""

from __future__ import annotations

from typing import Any

import pygame

from dangame.identifiers import FontID
from dangame.state import Context, State, StateStack
from dangame.utility import center_origin

DEFAULT_CHARACTER_SIZE = 30


def _render(font, text: str, color, character_size: int) -> pygame.Surface:
    surface = font.render(text, True, color)
    if character_size != DEFAULT_CHARACTER_SIZE:
        ratio = character_size / DEFAULT_CHARACTER_SIZE
        width, height = surface.get_size()
        surface = pygame.transform.scale(
            surface, (max(1, round(width * ratio)), max(1, round(height * ratio)))
        )
    return surface


class PauseState(State):
    """Darkens the screen; Escape resumes, Backspace clears every state."""

    PAUSED_TEXT = "Game Paused"
    INSTRUCTION_TEXT = "(Press Backspace to return to the main menu)"
    PAUSED_CHARACTER_SIZE = 70
    TEXT_COLOR = (255, 255, 255)
    OVERLAY_COLOR = (0, 0, 0, 180)

    def __init__(self, stack: StateStack, context: Context) -> None:
        super().__init__(stack, context)
        font = context.fonts.get(FontID.MAIN)
        width, height = context.window.get_size()

        self.paused_surface = _render(
            font, self.PAUSED_TEXT, self.TEXT_COLOR, self.PAUSED_CHARACTER_SIZE
        )
        self.paused_position = pygame.Vector2(0.5 * width, 0.4 * height) - center_origin(
            self.paused_surface.get_rect()
        )

        self.instruction_surface = _render(
            font, self.INSTRUCTION_TEXT, self.TEXT_COLOR, DEFAULT_CHARACTER_SIZE
        )
        self.instruction_position = pygame.Vector2(
            0.5 * width, 0.6 * height
        ) - center_origin(self.instruction_surface.get_rect())

    def draw(self) -> None:
        window = self.context().window
        overlay = pygame.Surface(window.get_size(), pygame.SRCALPHA)
        overlay.fill(self.OVERLAY_COLOR)
        window.blit(overlay, (0, 0))
        window.blit(self.paused_surface, self.paused_position)
        window.blit(self.instruction_surface, self.instruction_position)

    def update(self, dt: float) -> bool:
        return False

    def handle_event(self, event: Any) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        if event.key == pygame.K_ESCAPE:
            self.request_stack_pop()
        if event.key == pygame.K_BACKSPACE:
            self.request_state_clear()
        return False