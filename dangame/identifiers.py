"""Identifiers shared across the game: node categories, states and resources."""

from enum import IntEnum, IntFlag


class Category(IntFlag):
    """Bit flags that classify scene nodes as command receivers."""

    NONE = 0
    ROOT = 1 << 0
    SCENE = 1 << 1
    PLAYER_AIRCRAFT = 1 << 2
    ALLIED_AIRCRAFT = 1 << 3
    ENEMY_AIRCRAFT = 1 << 4


class StateID(IntEnum):
    """Identifiers of the screens that can live on the state stack."""

    NONE = 0
    TITLE = 1
    MENU = 2
    GAME = 3
    LOADING = 4
    PAUSE = 5


class TextureID(IntEnum):
    """Identifiers of loadable textures."""

    EAGLE = 0
    RAPTOR = 1
    DESERT = 2
    TITLE_SCREEN = 3


class FontID(IntEnum):
    """Identifiers of loadable fonts."""

    MAIN = 0