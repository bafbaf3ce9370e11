"""Movement strategies applied to game items each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import (
    END_LEFT_DIRECTION,
    START_LEFT_DIRECTION,
    START_RIGHT_DIRECTION,
    WINDOW_SIZE_WIDTH,
)


def _left_the_screen(mover) -> bool:
    sprite = mover.sprite
    return sprite.x < -sprite.global_bounds().width


class Move(ABC):
    """A strategy that moves an item's sprite."""

    @abstractmethod
    def manage_move(self, mover) -> None:
        """Advance ``mover`` by one frame."""


class StaticMove(Move):
    """Drifts one pixel to the left per frame."""

    def manage_move(self, mover) -> None:
        mover.sprite.move(-1.0, 0.0)
        if _left_the_screen(mover):
            mover.exists_on_screen = False


class ClockMove(Move):
    """Scrolls left in step with the elapsed frame time."""

    step: float = 0.0

    def manage_move(self, mover) -> None:
        mover.sprite.move(-0.6 * ClockMove.step, 0.0)
        if _left_the_screen(mover):
            mover.exists_on_screen = False


def set_clock_step(elapsed_ms) -> None:
    """Set the elapsed milliseconds used by every ClockMove."""
    ClockMove.step = float(elapsed_ms)


class BidirectionalMove(Move):
    """Walks right or left depending on the current animation frame."""

    def manage_move(self, mover) -> None:
        index = mover.texture_index
        if START_RIGHT_DIRECTION <= index <= 5:
            mover.sprite.move(1.0, 0.0)
        elif START_LEFT_DIRECTION <= index <= END_LEFT_DIRECTION:
            mover.sprite.move(-1.0, 0.0)
        if _left_the_screen(mover):
            mover.exists_on_screen = False


class SpiralMove(Move):
    """Spins while flying to the right."""

    ROTATION = 20.0
    SPEED = 2.0

    def manage_move(self, mover) -> None:
        mover.sprite.rotate(self.ROTATION)
        mover.sprite.move(self.SPEED, 0.0)
        if mover.sprite.x > WINDOW_SIZE_WIDTH:
            mover.exists_on_screen = False