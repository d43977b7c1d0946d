"""Loading screen with a progress bar fed by a background task."""

from __future__ import annotations

from typing import Any

import pygame

from dangame.identifiers import FontID, StateID
from dangame.parallel_task import ParallelTask
from dangame.state import Context, State, StateStack
from dangame.utility import center_origin


class LoadingState(State):
    """Shows progress of the loading task, then switches to the game."""

    TEXT = "Loading Resources"
    COLOR = (255, 255, 255)

    def __init__(self, stack: StateStack, context: Context) -> None:
        super().__init__(stack, context)
        font = context.fonts.get(FontID.MAIN)
        width, height = context.window.get_size()

        self.text_surface = font.render(self.TEXT, True, self.COLOR)
        anchor = pygame.Vector2(width / 2.0, height / 2.0 + 50.0)
        self.text_position = anchor - center_origin(self.text_surface.get_rect())

        self.progress_background = pygame.Rect(10, round(anchor.y + 40.0), round(width - 20), 10)
        self.progress_bar_size = pygame.Vector2(0.0, 0.0)
        self.set_completion(0.0)

        self.loading_task = ParallelTask()
        self.loading_task.execute()

    def draw(self) -> None:
        window = self.context().window
        window.blit(self.text_surface, self.text_position)
        pygame.draw.rect(window, self.COLOR, self.progress_background)
        width, height = self.progress_bar_size
        if width > 0 and height > 0:
            pygame.draw.rect(window, self.COLOR, pygame.Rect(0, 0, round(width), round(height)))

    def update(self, dt: float) -> bool:
        if self.loading_task.is_finished():
            self.request_stack_pop()
            self.request_stack_push(StateID.GAME)
        else:
            self.set_completion(self.loading_task.completion())
        return True

    def handle_event(self, event: Any) -> bool:
        return True

    def set_completion(self, percent: float) -> None:
        """Size the bar to ``percent`` of the background, capped at full."""
        percent = min(percent, 1.0)
        self.progress_bar_size = pygame.Vector2(
            self.progress_background.width * percent, self.progress_bar_size.y
        )