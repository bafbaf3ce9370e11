"""The player's movement states: walking, jumping, hopping, ducking, frozen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .constants import (
    FALL_SPEED,
    HOP_SPEED,
    PLAYER_BUBBLE_HEIGHT,
    PLAYER_JUMP_HEIGHT,
    REGULAR_PLAYER_DUCK_TEXTURE_AMOUNT,
    REGULAR_PLAYER_FREEZE_TEXTURE_AMOUNT,
    REGULAR_PLAYER_HOP_TEXTURE_AMOUNT,
    REGULAR_PLAYER_JUMP_TEXTURE_AMOUNT,
    REGULAR_PLAYER_WALK_TEXTURE_AMOUNT,
    Input,
)
from .entities import set_rocks_movable

JUMP_STEP = 4.0
FREEZE_STEP = 1.0
DUCK_DROP = 80.0
BUBBLE_ORIGIN = (50.0, 50.0)


def _reset_origin(player) -> None:
    player.sprite.origin_x = player.sprite.origin_y = 0.0


def _set_animation(player, texture_count: int) -> None:
    player.texture_count = texture_count
    player.reset_texture_index()


class State(ABC):
    """One node of the player's state machine."""

    name: str = ""

    def __init__(self) -> None:
        self.jump_counter = 0.0
        self.freeze_counter = 0.0

    @abstractmethod
    def handle_input(self, event: Input) -> "State | None":
        """Return the next state for ``event``, or None to stay."""

    @abstractmethod
    def enter(self, player) -> None:
        """Prepare ``player`` on entering this state."""

    def move(self, player) -> None:
        """Advance ``player`` by one frame."""

    def reset_jump(self) -> None:
        """Forget any jump progress."""


class Walk(State):
    name = "PlayerWalk"

    def handle_input(self, event: Input) -> State | None:
        if event is Input.PRESS_UP:
            return Jump()
        if event is Input.PRESS_SPACE:
            return Duck()
        return None

    def enter(self, player) -> None:
        _reset_origin(player)
        player.sprite.position = player.walking_position()
        _set_animation(player, REGULAR_PLAYER_WALK_TEXTURE_AMOUNT)


class Jump(State):
    name = "PlayerJump"

    def handle_input(self, event: Input) -> State | None:
        if event is Input.PRESS_RIGHT:
            return Hop()
        if event in (Input.RELEASE_UP, Input.RELEASE_RIGHT):
            return Walk()
        return None

    def enter(self, player) -> None:
        _reset_origin(player)
        set_rocks_movable(True)
        _set_animation(player, REGULAR_PLAYER_JUMP_TEXTURE_AMOUNT)
        player.falling_speed = FALL_SPEED

    def move(self, player) -> None:
        self.jump_counter += JUMP_STEP
        if self.jump_counter < PLAYER_JUMP_HEIGHT and player.sprite.y > 0:
            player.sprite.move(0.0, -JUMP_STEP)
        else:
            player.falling = True

    def reset_jump(self) -> None:
        self.jump_counter = 0.0


class Hop(State):
    name = "PlayerHop"

    def handle_input(self, event: Input) -> State | None:
        if event is Input.RELEASE_RIGHT:
            return Walk()
        return None

    def enter(self, player) -> None:
        _reset_origin(player)
        _set_animation(player, REGULAR_PLAYER_HOP_TEXTURE_AMOUNT)
        player.falling_speed = HOP_SPEED

    def move(self, player) -> None:
        player.falling = True

    def reset_jump(self) -> None:
        self.jump_counter = 0.0


class Duck(State):
    name = "PlayerDuck"

    def handle_input(self, event: Input) -> State | None:
        if event is Input.RELEASE_SPACE:
            return Walk()
        return None

    def enter(self, player) -> None:
        set_rocks_movable(True)
        player.sprite.move(0.0, DUCK_DROP)
        _set_animation(player, REGULAR_PLAYER_DUCK_TEXTURE_AMOUNT)


class Freeze(State):
    """Trapped in a bubble: float up, then spin in place."""

    name = "PlayerFreeze"

    def __init__(self) -> None:
        super().__init__()
        self._entered = False

    def handle_input(self, event: Input) -> State | None:
        return None

    def enter(self, player) -> None:
        self._entered = True
        _set_animation(player, REGULAR_PLAYER_FREEZE_TEXTURE_AMOUNT)
        set_rocks_movable(False)

    def move(self, player) -> None:
        if not self._entered:
            self.enter(player)
        self.freeze_counter += FREEZE_STEP
        sprite = player.sprite
        if self.freeze_counter < PLAYER_BUBBLE_HEIGHT and sprite.y > 0:
            sprite.move(0.0, -FREEZE_STEP)
        else:
            sprite.origin_x, sprite.origin_y = BUBBLE_ORIGIN
            sprite.rotate(1.0)