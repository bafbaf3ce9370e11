import pytest

from burgerrun.constants import (
    FALL_SPEED,
    HOP_SPEED,
    PLAYER_JUMP_HEIGHT,
    REGULAR_PLAYER_FREEZE_TEXTURE_AMOUNT,
    REGULAR_PLAYER_JUMP_TEXTURE_AMOUNT,
    REGULAR_PLAYER_WALK_TEXTURE_AMOUNT,
    Input,
)
from burgerrun.entities import rocks_movable, set_rocks_movable
from burgerrun.items import Sprite
from burgerrun.states import Duck, Freeze, Hop, Jump, Walk


class StubPlayer:
    def __init__(self, y=610.0):
        self.sprite = Sprite(x=400.0, y=y)
        self.texture_count = 3
        self.texture_index = 2
        self.falling = False
        self.falling_speed = 0.0

    def walking_position(self):
        return (400.0, 610.0)

    def reset_texture_index(self):
        self.texture_index = 0


@pytest.fixture(autouse=True)
def _reset_world():
    set_rocks_movable(True)
    yield
    set_rocks_movable(True)


@pytest.mark.parametrize("state, event, expected, name", [
    (Walk, Input.PRESS_UP, Jump, "PlayerJump"),
    (Walk, Input.PRESS_SPACE, Duck, "PlayerDuck"),
    (Jump, Input.PRESS_RIGHT, Hop, "PlayerHop"),
    (Jump, Input.RELEASE_UP, Walk, "PlayerWalk"),
    (Jump, Input.RELEASE_RIGHT, Walk, "PlayerWalk"),
    (Hop, Input.RELEASE_RIGHT, Walk, "PlayerWalk"),
    (Duck, Input.RELEASE_SPACE, Walk, "PlayerWalk"),
])
def test_transitions(state, event, expected, name):
    result = state().handle_input(event)
    assert type(result) is expected
    assert result.name == name


@pytest.mark.parametrize("state, event", [
    (Walk, Input.RELEASE_RIGHT),
    (Walk, Input.BUBBLE_POP),
    (Jump, Input.PRESS_UP),
    (Hop, Input.PRESS_UP),
    (Duck, Input.PRESS_SPACE),
    (Freeze, Input.PRESS_UP),
    (Freeze, Input.RELEASE_SPACE),
])
def test_ignored_inputs(state, event):
    assert state().handle_input(event) is None


@pytest.mark.parametrize("state, name", [
    (Walk, "PlayerWalk"), (Jump, "PlayerJump"), (Hop, "PlayerHop"),
    (Duck, "PlayerDuck"), (Freeze, "PlayerFreeze"),
])
def test_state_names(state, name):
    assert state().name == name


def test_walk_enter_puts_player_on_ground():
    player = StubPlayer(y=100.0)
    player.sprite.origin_x = 50.0
    Walk().enter(player)
    assert player.sprite.position == player.walking_position()
    assert player.sprite.origin_x == 0.0
    assert player.texture_count == REGULAR_PLAYER_WALK_TEXTURE_AMOUNT
    assert player.texture_index == 0


def test_jump_enter_sets_speed_and_scroll():
    set_rocks_movable(False)
    player = StubPlayer()
    Jump().enter(player)
    assert rocks_movable() is True
    assert player.falling_speed == FALL_SPEED
    assert player.texture_count == REGULAR_PLAYER_JUMP_TEXTURE_AMOUNT


def test_jump_rises_then_falls():
    player = StubPlayer()
    jump = Jump()
    start = player.sprite.y
    jump.move(player)
    assert player.sprite.y < start
    assert player.falling is False
    frames = 1
    while not player.falling:
        jump.move(player)
        frames += 1
        assert frames < 1000
    assert 0 < start - player.sprite.y < PLAYER_JUMP_HEIGHT


def test_jump_reset_allows_rising_again():
    player = StubPlayer()
    jump = Jump()
    while not player.falling:
        jump.move(player)
    player.falling = False
    jump.reset_jump()
    y = player.sprite.y
    jump.move(player)
    assert player.sprite.y < y
    assert player.falling is False


def test_jump_at_top_of_screen_falls_immediately():
    player = StubPlayer(y=0.0)
    Jump().move(player)
    assert player.falling is True
    assert player.sprite.y == 0.0


def test_hop_enter_and_move():
    player = StubPlayer()
    hop = Hop()
    hop.enter(player)
    assert player.falling_speed == HOP_SPEED
    hop.move(player)
    assert player.falling is True


def test_duck_enter_lowers_player():
    set_rocks_movable(False)
    player = StubPlayer(y=610.0)
    Duck().enter(player)
    assert player.sprite.y == 690.0
    assert rocks_movable() is True
    assert player.texture_index == 0


def test_freeze_first_move_enters_and_floats():
    player = StubPlayer(y=500.0)
    freeze = Freeze()
    freeze.move(player)
    assert rocks_movable() is False
    assert player.texture_count == REGULAR_PLAYER_FREEZE_TEXTURE_AMOUNT
    assert player.sprite.y < 500.0


def test_freeze_spins_at_top():
    player = StubPlayer(y=0.0)
    freeze = Freeze()
    freeze.move(player)
    freeze.move(player)
    assert (player.sprite.origin_x, player.sprite.origin_y) == (50.0, 50.0)
    assert player.sprite.rotation == pytest.approx(2.0)
    assert player.sprite.y == 0.0