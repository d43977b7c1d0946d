"""The player's aircraft: a moving entity drawn as a centred sprite."""

from __future__ import annotations

from enum import Enum

import pygame

from dangame.identifiers import Category, TextureID
from dangame.resources import ResourceHolder
from dangame.scene import Entity, Transform


class AircraftType(Enum):
    EAGLE = "eagle"
    RAPTOR = "raptor"


_TEXTURES = {
    AircraftType.EAGLE: TextureID.EAGLE,
    AircraftType.RAPTOR: TextureID.RAPTOR,
}


def texture_id_for(kind: AircraftType) -> TextureID:
    """Texture shown for an aircraft type; the eagle for anything unknown."""
    return _TEXTURES.get(kind, TextureID.EAGLE)


class Aircraft(Entity):
    """An aircraft whose sprite is centred on its position."""

    def __init__(self, kind: AircraftType, textures: ResourceHolder) -> None:
        super().__init__()
        self.kind = kind
        self.image: pygame.Surface = textures.get(texture_id_for(kind))
        width, height = self.image.get_size()
        self.sprite_origin = pygame.Vector2(width / 2.0, height / 2.0)

    def category(self) -> int:
        return Category.PLAYER_AIRCRAFT

    def name(self) -> str:
        return "Aircraft"

    def draw_current(self, target, transform: Transform) -> None:
        x, y = transform.apply((-self.sprite_origin.x, -self.sprite_origin.y))
        target.blit(self.image, (round(x), round(y)))