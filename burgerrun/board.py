"""The scrolling background, ground and rocks."""

from __future__ import annotations

import random

from .constants import (
    MAX_HEIGHT_ROCK,
    MIN_HEIGHT_ROCK,
    NUM_OF_ROCKS,
    SIZE_OF_GROUND,
    WINDOW_SIZE_HEIGHT,
    WINDOW_SIZE_WIDTH,
)
from .entities import Rock, rocks_movable
from .factory import FACTORY
from .items import Canvas, Sprite

GROUND_Y = 800.0
GROUND_OVERLAP = 70.0
SCROLL_SPEED = 0.6
LAND_MARGIN = 100.0
ROCK_MARGIN = 20.0


class Board:
    """Background, two ground tiles that loop, and the rocks."""

    def __init__(self, factory=FACTORY, rng=None,
                 window_width: float = WINDOW_SIZE_WIDTH,
                 ground_size=(WINDOW_SIZE_WIDTH, SIZE_OF_GROUND)):
        self.factory = factory
        self.rng = rng if rng is not None else random.Random()
        self.window_width = float(window_width)
        self.counter = 0
        self.background = Sprite(width=WINDOW_SIZE_WIDTH,
                                 height=WINDOW_SIZE_HEIGHT,
                                 texture=("Background", 0))
        width, height = (float(v) for v in ground_size)
        first = Sprite(x=0.0, y=GROUND_Y, width=width, height=height,
                       texture=("Ground", 0))
        second = Sprite(x=first.global_bounds().width - GROUND_OVERLAP,
                        y=GROUND_Y, width=width, height=height,
                        texture=("Ground", 1))
        self.land = [first, second]
        self.rocks: list[Rock] = []

    def move_land(self, dt: float) -> None:
        """Scroll ground and rocks left by ``dt`` milliseconds' worth."""
        if not rocks_movable():
            return
        step = SCROLL_SPEED * dt
        for tile in self.land:
            tile.move(-step, 0.0)
            if tile.x < -tile.global_bounds().width + LAND_MARGIN:
                tile.position = (self.window_width, tile.y)
        for rock in self.rocks:
            sprite = rock.sprite
            sprite.move(-step, 0.0)
            if sprite.x < -sprite.global_bounds().width + ROCK_MARGIN:
                sprite.set_texture("Rock", self.rng.randrange(2))
                sprite.position = (self.window_width, sprite.y)

    def create_rocks(self) -> None:
        for i in range(1, NUM_OF_ROCKS + 1):
            position = (float(2000 // i), float(350 + i * 100))
            rock = self.factory.create("Rock", position)
            if rock is not None:
                self.rocks.append(rock)

    def restart(self) -> None:
        self.rocks.clear()
        self.create_rocks()
        self.background.set_texture("Background", 0)

    def toggle_background(self) -> None:
        """Alternate between the two background images."""
        self.counter += 1
        self.background.set_texture("Background", self.counter % 2)

    def is_rock_bounded(self, y: float) -> bool:
        return MIN_HEIGHT_ROCK < y < MAX_HEIGHT_ROCK

    def draw(self, canvas: Canvas) -> None:
        canvas.draw(self.background)
        for tile in self.land:
            canvas.draw(tile)
        for rock in self.rocks:
            rock.draw(canvas)