"""Sprites, bounding rectangles and the game item hierarchy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from .constants import DEFAULT_TEXTURE_AMOUNT
from .movement import ClockMove, Move

DEFAULT_SIZE = (100.0, 100.0)


class Canvas(Protocol):
    """Anything sprites can be drawn onto."""

    def draw(self, sprite: "Sprite") -> None: ...


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: "Rect") -> bool:
        """True when the two rectangles overlap with positive area."""
        return (max(self.left, other.left) < min(self.right, other.right)
                and max(self.top, other.top) < min(self.bottom, other.bottom))

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; right and bottom edges excluded."""
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass
class Sprite:
    """A positioned, scaled and rotated image placeholder."""

    x: float = 0.0
    y: float = 0.0
    width: float = DEFAULT_SIZE[0]
    height: float = DEFAULT_SIZE[1]
    scale_x: float = 1.0
    scale_y: float = 1.0
    origin_x: float = 0.0
    origin_y: float = 0.0
    rotation: float = 0.0
    texture: tuple[str, int] | None = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = (float(v) for v in value)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def rotate(self, angle: float) -> None:
        self.rotation = (self.rotation + angle) % 360.0

    def set_texture(self, name: str, index: int) -> None:
        self.texture = (name, index)

    def global_bounds(self) -> Rect:
        """Bounding box of the transformed sprite in world coordinates."""
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        xs, ys = [], []
        for lx, ly in ((0.0, 0.0), (self.width, 0.0),
                       (0.0, self.height), (self.width, self.height)):
            px = (lx - self.origin_x) * self.scale_x
            py = (ly - self.origin_y) * self.scale_y
            xs.append(self.x + px * cos_t - py * sin_t)
            ys.append(self.y + px * sin_t + py * cos_t)
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)


class GameItem:
    """Anything on the board with a sprite and an animation state."""

    def __init__(self, position, texture_count: int = DEFAULT_TEXTURE_AMOUNT,
                 size=DEFAULT_SIZE):
        x, y = position
        self.position = (float(x), float(y))
        self.texture_index = 0
        self.texture_count = texture_count
        self.exists_on_screen = True
        self.collided = False
        self.duration = 0.0
        self.sprite = Sprite(x=float(x), y=float(y),
                             width=float(size[0]), height=float(size[1]))

    def reset_texture_index(self) -> None:
        self.texture_index = 0

    def reset_duration(self) -> None:
        self.duration = 0.0

    def draw(self, canvas: Canvas) -> None:
        """Draw the sprite unless the item has left the screen."""
        if self.exists_on_screen:
            canvas.draw(self.sprite)


class DynamicItem(GameItem):
    """An item that moves on its own."""


class StaticItem(GameItem):
    """An item that only scrolls with the world."""


class Gift(StaticItem):
    """A collectable that scrolls with the frame clock."""

    def __init__(self, position, texture_count: int = DEFAULT_TEXTURE_AMOUNT,
                 size=DEFAULT_SIZE):
        super().__init__(position, texture_count, size)
        self.movement: Move = ClockMove()

    def move(self) -> None:
        self.movement.manage_move(self)


class Enemy(DynamicItem):
    """A hostile item driven by a movement strategy."""

    def __init__(self, position, texture_count: int = DEFAULT_TEXTURE_AMOUNT,
                 size=DEFAULT_SIZE, movement: Move | None = None):
        super().__init__(position, texture_count, size)
        self.movement = movement

    def move(self) -> None:
        if self.movement is not None:
            self.movement.manage_move(self)


class Weapon(Gift):
    """A gift that can be fired with its own movement."""

    def __init__(self, position, movement: Move,
                 texture_count: int = DEFAULT_TEXTURE_AMOUNT, size=DEFAULT_SIZE):
        super().__init__(position, texture_count, size)
        self.weapon_movement = movement

    def activated_move(self) -> None:
        self.weapon_movement.manage_move(self)