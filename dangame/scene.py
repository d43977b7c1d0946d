"""Scene graph: transforms, nodes, moving entities and sprite nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import pygame

from dangame.command import Command
from dangame.identifiers import Category


@dataclass(frozen=True)
class Transform:
    """2D affine transform: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translation(cls, x: float, y: float) -> Transform:
        return cls(c=x, f=y)

    def __mul__(self, other: object) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(
            a=self.a * other.a + self.b * other.d,
            b=self.a * other.b + self.b * other.e,
            c=self.a * other.c + self.b * other.f + self.c,
            d=self.d * other.a + self.e * other.d,
            e=self.d * other.b + self.e * other.e,
            f=self.d * other.c + self.e * other.f + self.f,
        )

    def apply(self, point) -> pygame.Vector2:
        x, y = point
        return pygame.Vector2(self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)


class SceneNode:
    """A node of the scene graph with a local transform and owned children."""

    def __init__(self) -> None:
        self._children: list[SceneNode] = []
        self._parent: Optional[SceneNode] = None
        self._position = pygame.Vector2()
        self._origin = pygame.Vector2()
        self._scale = pygame.Vector2(1.0, 1.0)
        self.rotation = 0.0

    @property
    def position(self) -> pygame.Vector2:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = pygame.Vector2(value)

    @property
    def origin(self) -> pygame.Vector2:
        return self._origin

    @origin.setter
    def origin(self, value) -> None:
        self._origin = pygame.Vector2(value)

    @property
    def scale(self) -> pygame.Vector2:
        return self._scale

    @scale.setter
    def scale(self, value) -> None:
        self._scale = pygame.Vector2(value)

    @property
    def parent(self) -> Optional[SceneNode]:
        return self._parent

    @property
    def children(self) -> tuple[SceneNode, ...]:
        return tuple(self._children)

    def local_transform(self) -> Transform:
        """Transform built from origin, scale, rotation (degrees) and position."""
        angle = -math.radians(self.rotation)
        cosine, sine = math.cos(angle), math.sin(angle)
        sxc = self._scale.x * cosine
        syc = self._scale.y * cosine
        sxs = self._scale.x * sine
        sys_ = self._scale.y * sine
        tx = -self._origin.x * sxc - self._origin.y * sys_ + self._position.x
        ty = self._origin.x * sxs - self._origin.y * syc + self._position.y
        return Transform(a=sxc, b=sys_, c=tx, d=-sxs, e=syc, f=ty)

    def move(self, offset) -> None:
        self._position += pygame.Vector2(offset)

    def attach_child(self, child: SceneNode) -> None:
        child._parent = self
        self._children.append(child)

    def detach_child(self, node: SceneNode) -> SceneNode:
        """Remove ``node`` from the children and return it; ValueError if absent."""
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                child._parent = None
                return child
        raise ValueError("node is not a child of this scene node")

    def update(self, dt: float) -> None:
        self.update_current(dt)
        for child in self._children:
            child.update(dt)

    def update_current(self, dt: float) -> None:
        """Per-node update; nothing by default."""

    def draw(self, target, transform: Optional[Transform] = None) -> None:
        combined = (transform or Transform.identity()) * self.local_transform()
        self.draw_current(target, combined)
        for child in self._children:
            child.draw(target, combined)

    def draw_current(self, target, transform: Transform) -> None:
        """Draw this node alone; nothing by default."""

    def world_transform(self) -> Transform:
        transform = Transform.identity()
        node: Optional[SceneNode] = self
        while node is not None:
            transform = node.local_transform() * transform
            node = node._parent
        return transform

    def world_position(self) -> pygame.Vector2:
        return self.world_transform().apply((0.0, 0.0))

    def on_command(self, command: Command, dt: float) -> None:
        """Run the command here if the category matches, then on every child."""
        if command.category & self.category():
            command.action(self, dt)
        for child in self._children:
            child.on_command(command, dt)

    def category(self) -> int:
        return Category.ROOT if self._parent is None else Category.SCENE

    def name(self) -> str:
        return "SceneNode"

    def scene_graph_lines(self, indent: int = 0) -> Iterator[str]:
        """Yield one description line per node, depth first."""
        yield (
            f"SCENE GRAPH:{'  ' * indent}Name: {self.name()} "
            f"Cat: {int(self.category())} Mem: {hex(id(self))}"
        )
        for child in self._children:
            yield from child.scene_graph_lines(indent + 1)

    def print_scene_graph(self, indent: int = 0) -> None:
        for line in self.scene_graph_lines(indent):
            print(line)


class Entity(SceneNode):
    """A scene node that moves with a velocity."""

    def __init__(self) -> None:
        super().__init__()
        self._velocity = pygame.Vector2()

    @property
    def velocity(self) -> pygame.Vector2:
        return pygame.Vector2(self._velocity)

    @velocity.setter
    def velocity(self, value) -> None:
        self._velocity = pygame.Vector2(value)

    def accelerate(self, dx: float, dy: float) -> None:
        self._velocity += pygame.Vector2(dx, dy)

    def update_current(self, dt: float) -> None:
        self.move(self._velocity * dt)


class SpriteNode(SceneNode):
    """A node showing a texture, optionally a (repeated) sub-rectangle of it."""

    def __init__(self, texture: pygame.Surface, rect=None) -> None:
        super().__init__()
        self.texture = texture
        self.image = texture if rect is None else _tile(texture, pygame.Rect(rect))

    def draw_current(self, target, transform: Transform) -> None:
        """Blit the image at the transformed node origin (translation only)."""
        x, y = transform.apply((0.0, 0.0))
        target.blit(self.image, (round(x), round(y)))

    def name(self) -> str:
        return "SpriteNode"


def _tile(texture: pygame.Surface, rect: pygame.Rect) -> pygame.Surface:
    image = pygame.Surface(rect.size)
    tw, th = texture.get_size()
    ox, oy = rect.x % tw, rect.y % th
    for y in range(-oy, rect.height, th):
        for x in range(-ox, rect.width, tw):
            image.blit(texture, (x, y))
    return image