"""The scrolling world: scene layers, the player aircraft and the camera view."""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from pathlib import Path
from typing import Optional

import pygame

from dangame.aircraft import Aircraft, AircraftType
from dangame.command import CommandQueue
from dangame.identifiers import TextureID
from dangame.resources import ResourceHolder
from dangame.scene import SceneNode, SpriteNode, Transform

log = logging.getLogger(__name__)

SCALE_FACTOR = 1.0


class Layer(IntEnum):
    BACKGROUND = 0
    AIR = 1


class World:
    """Owns the scene graph and scrolls the view over a tall background."""

    WORLD_HEIGHT = 10000
    SCROLL_SPEED = -40.0
    BORDER_DISTANCE = 40.0

    def __init__(self, window, native_size, media_dir: Optional[Path] = None) -> None:
        self.window = window
        self.native_size = (int(native_size[0]), int(native_size[1]))
        self.media_dir = Path("Media") if media_dir is None else Path(media_dir)
        self.view_size = pygame.Vector2(self.native_size)
        self.world_bounds = pygame.Rect(0, 0, self.native_size[0], self.WORLD_HEIGHT)
        self.spawn_position = pygame.Vector2(
            self.view_size.x / 2.0, self.world_bounds.height - self.view_size.y / 2.0
        )
        self.scroll_speed = self.SCROLL_SPEED
        self.textures = ResourceHolder(pygame.image.load)
        self.scene_graph = SceneNode()
        self.scene_layers: list[SceneNode] = []
        self._command_queue = CommandQueue()
        self._render_texture = pygame.Surface(self.native_size)

        self._load_textures()
        self._build_scene()
        self.view_center = pygame.Vector2(self.spawn_position)

    def _load_textures(self) -> None:
        folder = self.media_dir / "Textures"
        self.textures.load(TextureID.EAGLE, str(folder / "Eagle.png"))
        self.textures.load(TextureID.RAPTOR, str(folder / "Raptor.png"))
        self.textures.load(TextureID.DESERT, str(folder / "Desert.png"))

    def _build_scene(self) -> None:
        for _ in Layer:
            layer = SceneNode()
            self.scene_layers.append(layer)
            self.scene_graph.attach_child(layer)

        log.debug("Setting background texture")
        background = SpriteNode(self.textures.get(TextureID.DESERT), self.world_bounds)
        background.position = self.world_bounds.topleft
        self.scene_layers[Layer.BACKGROUND].attach_child(background)

        log.debug("Loading planes")
        self.player = Aircraft(AircraftType.EAGLE, self.textures)
        self.player.position = self.spawn_position
        self.scene_layers[Layer.AIR].attach_child(self.player)

    def _view_top_left(self) -> pygame.Vector2:
        return self.view_center - self.view_size / 2.0

    def update(self, dt: float) -> None:
        self.view_center.y += self.scroll_speed * dt
        self.player.velocity = (0.0, 0.0)

        while not self._command_queue.is_empty():
            self.scene_graph.on_command(self._command_queue.pop(), dt)

        self.adapt_player_velocity()
        self.scene_graph.update(dt)
        self.adapt_player_position()

    def draw(self) -> None:
        self._render_texture.fill((0, 0, 0))
        left, top = self._view_top_left()
        self.scene_graph.draw(self._render_texture, Transform.translation(-left, -top))
        image = self._render_texture
        if SCALE_FACTOR != 1.0:
            width, height = self.native_size
            image = pygame.transform.scale(
                image, (round(width * SCALE_FACTOR), round(height * SCALE_FACTOR))
            )
        self.window.blit(image, (0, 0))

    def command_queue(self) -> CommandQueue:
        return self._command_queue

    def adapt_player_position(self) -> None:
        """Keep the player inside the view, at least the border distance from its edges."""
        left, top = self._view_top_left()
        width, height = self.view_size
        border = self.BORDER_DISTANCE
        x, y = self.player.position
        x = min(max(x, left + border), left + width - border)
        y = min(max(y, top + border), top + height - border)
        self.player.position = (x, y)

    def adapt_player_velocity(self) -> None:
        """Slow diagonal movement to straight-line speed, then add the scroll."""
        velocity = self.player.velocity
        if velocity.x != 0.0 and velocity.y != 0.0:
            self.player.velocity = velocity / math.sqrt(2.0)
        self.player.accelerate(0.0, self.scroll_speed)