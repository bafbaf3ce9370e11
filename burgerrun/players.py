"""The player character: the normal runner and the bubble-trapped variant."""

from __future__ import annotations

from .constants import (
    BUBBLE_PLAYER_TEXTURE_AMOUNT,
    REGULAR_PLAYER_WALK_TEXTURE_AMOUNT,
    SIZE_OF_GROUND,
    WINDOW_SIZE_HEIGHT,
    Input,
)
from .entities import set_rocks_movable
from .items import Canvas, DynamicItem, GameItem, Weapon
from .states import Freeze, State, Walk
from .textures import change_texture

WALKING_POSITION = (400.0, 610.0)
WEAPON_DROP = 50.0
LANDING_HEIGHT = WINDOW_SIZE_HEIGHT - SIZE_OF_GROUND - 200


class Player(DynamicItem):
    """The runner, driven by a state machine."""

    def __init__(self, position, texture_count: int, state: State):
        super().__init__(position, texture_count)
        self.state = state
        self.falling = False
        self.falling_speed = 0.0
        self.weapon: Weapon | None = None
        self.weapon_activated = False
        self.weapon_collected = False
        self.top_collide = False
        self.sprite.scale_x *= 0.7
        self.sprite.scale_y *= 0.7

    def handle_input(self, event: Input) -> None:
        """Feed an input to the current state, switching state if it asks."""
        new_state = self.state.handle_input(event)
        if new_state is not None:
            self.state = new_state
            self.state.enter(self)

    def walking_position(self) -> tuple[float, float]:
        return WALKING_POSITION

    def set_weapon(self, weapon: Weapon) -> None:
        """Hold ``weapon`` ready, hidden until fired."""
        self.weapon = weapon
        weapon.exists_on_screen = False

    def set_weapon_activated(self, active: bool) -> None:
        """Fire (or stop) the held weapon from just below the walking spot."""
        if self.weapon is None:
            raise ValueError("player holds no weapon")
        self.weapon_activated = active
        self.weapon.exists_on_screen = True
        x, y = self.walking_position()
        self.weapon.sprite.position = (x, y + WEAPON_DROP)

    def activate_weapon(self) -> None:
        """Advance a fired weapon by one frame."""
        if self.weapon_activated and self.weapon is not None:
            self.weapon.activated_move()

    def move(self) -> None:
        self.state.move(self)

    def draw(self, canvas: Canvas) -> bool:
        """Animate and draw the player and any held weapon.

        Returns True when a new animation frame was shown.
        """
        changed = change_texture(self, self.state.name)
        GameItem.draw(self, canvas)
        if self.weapon is not None:
            self.weapon.draw(canvas)
        return changed


class RegularPlayer(Player):
    """The normal runner, starting in the walking state."""

    def __init__(self, position):
        super().__init__(position, REGULAR_PLAYER_WALK_TEXTURE_AMOUNT, Walk())
        self.sprite.set_texture(self.state.name, 0)

    def move(self) -> None:
        self.state.move(self)
        if self.falling:
            self.manage_falling()

    def manage_falling(self) -> None:
        """Drop toward the ground; on landing go back to walking."""
        set_rocks_movable(True)
        if self.sprite.y < LANDING_HEIGHT:
            self.sprite.move(0.0, self.falling_speed * 2.0)
        else:
            self.falling = False
            self.state.reset_jump()
            self.state = Walk()
            self.state.enter(self)


class BubblePlayer(Player):
    """A runner trapped in a bubble: ignores input and cannot take weapons."""

    def __init__(self, position):
        super().__init__(position, BUBBLE_PLAYER_TEXTURE_AMOUNT, Freeze())

    def handle_input(self, event: Input) -> None:
        return None

    def set_weapon(self, weapon: Weapon) -> None:
        return None