"""The game application: window, shared resources and registered screens."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from dangame.application import FULLSCREEN, Application
from dangame.identifiers import StateID
from dangame.pause_state import DEFAULT_CHARACTER_SIZE, PauseState
from dangame.resources import ResourceHolder
from dangame.state import Context
from dangame.title_state import TitleState
from dangame.world import SCALE_FACTOR

WINDOW_SIZE = (640, 480)
SCALED_WINDOW_SIZE = (int(WINDOW_SIZE[0] * SCALE_FACTOR), int(WINDOW_SIZE[1] * SCALE_FACTOR))
WINDOW_TITLE = "DanGame"


def _load_font(filename: str, size: int = DEFAULT_CHARACTER_SIZE) -> pygame.font.Font:
    return pygame.font.Font(filename, size)


class GameApp:
    """Creates the window and resources and runs the application loop."""

    def __init__(self) -> None:
        pygame.init()
        flags = pygame.FULLSCREEN if FULLSCREEN else 0
        self.window = pygame.display.set_mode(SCALED_WINDOW_SIZE, flags)
        pygame.display.set_caption(WINDOW_TITLE)
        self.textures = ResourceHolder(pygame.image.load)
        self.fonts = ResourceHolder(_load_font)
        self.context = Context()
        self.application = Application()

        self.create_context()
        self.application.set_context(self.context)
        self.register_states()

    def create_context(self) -> None:
        self.context.window = self.window
        self.context.textures = self.textures
        self.context.fonts = self.fonts

    def register_states(self) -> None:
        stack = self.application.state_stack
        stack.register_state(StateID.TITLE, TitleState)
        stack.register_state(StateID.PAUSE, PauseState)

    def run(self) -> None:
        self.application.run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dangame", description="Run the scrolling shooter.")
    parser.parse_args(argv)
    try:
        GameApp().run()
    finally:
        pygame.quit()
    print("Exiting NORMALLY")
    return 0