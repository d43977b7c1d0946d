"""Main loop driving the state stack at a fixed time step."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import pygame

from dangame.command import CommandQueue
from dangame.default_state import DefaultState
from dangame.identifiers import FontID, StateID, TextureID
from dangame.state import Context, StateStack
from dangame.utility import to_string

log = logging.getLogger(__name__)

FULLSCREEN = False


class PlayerAction(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"


class PlayerBase(ABC):
    """Turns input into commands for the scene."""

    @abstractmethod
    def handle_event(self, event: Any, commands: CommandQueue) -> None:
        """React to a single input event."""

    @abstractmethod
    def handle_realtime_input(self, commands: CommandQueue) -> None:
        """React to the current keyboard state."""


class Application:
    """Owns the state stack and runs the fixed-step game loop."""

    TIME_PER_FRAME = 1.0 / 60.0
    STATISTICS_POSITION = (10, 10)
    STATISTICS_COLOR = (255, 255, 255)

    def __init__(self) -> None:
        self.window: Optional[pygame.Surface] = None
        self.textures: Any = None
        self.fonts: Any = None
        self.context = Context()
        self.state_stack: Optional[StateStack] = None
        self.media_dir = Path("Media")
        self.is_open = False
        self.statistics_text = ""
        self._statistics_update_time = 0.0
        self._statistics_num_frames = 0

    def set_context(self, context: Context) -> None:
        """Take the shared objects, load core resources and push the title state."""
        if context.window is None:
            raise ValueError("application context has no window")
        self.context = context
        self.window = context.window
        self.textures = context.textures
        self.fonts = context.fonts
        self.state_stack = StateStack(context)
        self.register_states()
        pygame.key.set_repeat()
        self.fonts.load(FontID.MAIN, str(self.media_dir / "Sansation.ttf"))
        self.textures.load(
            TextureID.TITLE_SCREEN, str(self.media_dir / "Textures" / "TitleScreen.png")
        )
        self.is_open = True
        self.state_stack.push_state(StateID.TITLE)

    def close(self) -> None:
        self.is_open = False

    def run(self) -> None:
        if self.window is None or self.state_stack is None:
            raise RuntimeError("set_context must be called before run")
        last = time.perf_counter()
        since_last_update = 0.0
        while self.is_open:
            now = time.perf_counter()
            dt = now - last
            last = now
            since_last_update += dt
            while since_last_update > self.TIME_PER_FRAME:
                since_last_update -= self.TIME_PER_FRAME
                self.process_input()
                self.update(self.TIME_PER_FRAME)
                if self.state_stack.is_empty():
                    log.info("No more states")
                    self.close()
                    break
            self.update_statistics(dt)
            self.render()

    def register_states(self) -> None:
        self.state_stack.register_state(StateID.TITLE, DefaultState)

    def process_input(self) -> None:
        for event in pygame.event.get():
            self.state_stack.handle_event(event)
            if event.type == pygame.QUIT:
                self.close()

    def update(self, dt: float) -> None:
        self.state_stack.update(dt)

    def render(self) -> None:
        self.window.fill((0, 0, 0))
        self.state_stack.draw()
        if self.statistics_text:
            font = self.fonts.get(FontID.MAIN)
            surface = font.render(self.statistics_text, True, self.STATISTICS_COLOR)
            self.window.blit(surface, self.STATISTICS_POSITION)
        if pygame.display.get_init() and pygame.display.get_surface() is self.window:
            pygame.display.flip()

    def update_statistics(self, dt: float) -> None:
        self._statistics_update_time += dt
        self._statistics_num_frames += 1
        if self._statistics_update_time >= 1.0:
            self.statistics_text = "FPS = " + to_string(self._statistics_num_frames)
            self._statistics_update_time -= 1.0
            self._statistics_num_frames = 0