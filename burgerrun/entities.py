"""Concrete board items: rocks, coins, clocks, enemies and the baguette weapon."""

from __future__ import annotations

import random

from .constants import (
    BAGUETTE_TEXTURE_AMOUNT,
    COIN_TEXTURE_AMOUNT,
    DEMON_TEXTURE_AMOUNT,
    THIEF_TEXTURE_AMOUNT,
)
from .factory import FACTORY
from .items import Canvas, Enemy, GameItem, Gift, StaticItem, Weapon
from .movement import BidirectionalMove, SpiralMove, StaticMove
from .textures import change_texture


class _World:
    """Shared scrolling switch: whether the ground and rocks currently scroll."""

    rocks_movable = True


def rocks_movable() -> bool:
    """True while the world (rocks, ground, coins) scrolls."""
    return _World.rocks_movable


def set_rocks_movable(flag: bool) -> None:
    """Start or stop the world scrolling."""
    _World.rocks_movable = bool(flag)


class Rock(StaticItem):
    """An obstacle the player can stand on or bump into."""

    def __init__(self, position, rng=None):
        super().__init__(position)
        rng = rng if rng is not None else random
        self.sprite.set_texture("Rock", rng.randrange(2))


class Coin(Gift):
    """A spinning coin worth one point."""

    def __init__(self, position):
        super().__init__(position, COIN_TEXTURE_AMOUNT)

    def move(self) -> None:
        self.movement.manage_move(self)

    def draw(self, canvas: Canvas) -> bool:
        """Animate and draw; returns True when a new frame was shown."""
        changed = change_texture(self, "Coin")
        GameItem.draw(self, canvas)
        return changed


class Clock(Gift):
    """A gift that adds time to the countdown."""

    def __init__(self, position):
        super().__init__(position)
        self.sprite.set_texture("Clock", 0)
        self.sprite.scale_x = self.sprite.scale_y = 0.7

    def move(self) -> None:
        self.movement.manage_move(self)


class Demon(Enemy):
    """An enemy that walks back and forth; touching it traps the player."""

    def __init__(self, position):
        super().__init__(position, DEMON_TEXTURE_AMOUNT,
                         movement=BidirectionalMove())
        self.sprite.position = (1000.0, 650.0)

    def move(self) -> None:
        self.movement.manage_move(self)

    def draw(self, canvas: Canvas) -> bool:
        """Animate and draw; returns True when a new frame was shown."""
        changed = change_texture(self, "Demon")
        GameItem.draw(self, canvas)
        return changed


class Thief(Enemy):
    """An enemy that drifts left and steals coins on contact."""

    def __init__(self, position):
        super().__init__(position, THIEF_TEXTURE_AMOUNT, movement=StaticMove())
        self.sprite.scale_x *= 0.8
        self.sprite.scale_y *= 0.8
        x, y = position
        self.sprite.position = (x, y + 60)

    def move(self) -> None:
        self.movement.manage_move(self)

    def draw(self, canvas: Canvas) -> bool:
        """Animate and draw; returns True when a new frame was shown."""
        changed = change_texture(self, "Thief")
        GameItem.draw(self, canvas)
        return changed


class Baguette(Weapon):
    """A collectable weapon that spins across the screen when fired."""

    def __init__(self, position):
        super().__init__(position, SpiralMove(), BAGUETTE_TEXTURE_AMOUNT)
        sprite = self.sprite
        sprite.set_texture("Baguette", 0)
        sprite.scale_x = sprite.scale_y = 0.5
        sprite.rotate(20)
        sprite.origin_x = sprite.width / 2
        sprite.origin_y = sprite.height / 2

    def move(self) -> None:
        self.movement.manage_move(self)

    def activated_move(self) -> None:
        self.weapon_movement.manage_move(self)


FACTORY.register("Rock", Rock)
FACTORY.register("Coin", Coin)
FACTORY.register_enemy(Demon)
FACTORY.register_enemy(Thief)
FACTORY.register_gift(Baguette)
FACTORY.register_gift(Clock)