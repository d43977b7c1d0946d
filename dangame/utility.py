"""Small helpers shared by the game screens."""

from __future__ import annotations

import math
from typing import Any

import pygame


def to_string(value: Any) -> str:
    """Format a value the way a default-configured text stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def center_origin(bounds) -> pygame.Vector2:
    """Return the whole-pixel centre of ``bounds`` given as (x, y, width, height)."""
    x, y, width, height = bounds
    return pygame.Vector2(math.floor(x + width / 2.0), math.floor(y + height / 2.0))