import random

import pytest

from burgerrun.constants import (
    BAGUETTE_TEXTURE_AMOUNT,
    COIN_TEXTURE_AMOUNT,
    DEMON_TEXTURE_AMOUNT,
    THIEF_TEXTURE_AMOUNT,
)
from burgerrun.entities import (
    Baguette,
    Clock,
    Coin,
    Demon,
    Rock,
    Thief,
    rocks_movable,
    set_rocks_movable,
)
from burgerrun.factory import FACTORY
from burgerrun.movement import set_clock_step


class RecordingCanvas:
    def __init__(self):
        self.drawn = []

    def draw(self, sprite):
        self.drawn.append(sprite)


@pytest.fixture(autouse=True)
def _reset_world():
    set_rocks_movable(True)
    set_clock_step(0)
    yield
    set_rocks_movable(True)
    set_clock_step(0)


def test_rocks_movable_switch():
    set_rocks_movable(False)
    assert rocks_movable() is False
    set_rocks_movable(True)
    assert rocks_movable() is True


def test_rock_texture_is_one_of_two():
    rock = Rock((0, 0), rng=random.Random(3))
    name, index = rock.sprite.texture
    assert name == "Rock"
    assert index in (0, 1)


def test_factory_builds_rock_and_coin_by_name():
    rock = FACTORY.create("Rock", (10.0, 20.0))
    coin = FACTORY.create("Coin", (30.0, 40.0))
    assert isinstance(rock, Rock)
    assert isinstance(coin, Coin)
    assert coin.sprite.position == (30.0, 40.0)
    assert coin.texture_count == COIN_TEXTURE_AMOUNT


def test_factory_enemies_are_demon_and_thief():
    built = {type(FACTORY.create_enemy(i, (0.0, 0.0))) for i in range(2)}
    assert built == {Demon, Thief}


def test_factory_gifts_cover_baguette_and_clock():
    built = {
        type(FACTORY.create_gift((0.0, 0.0), random.Random(seed)))
        for seed in range(40)
    }
    assert built == {Baguette, Clock}


def test_coin_draw_animates_after_interval():
    coin = Coin((0, 0))
    coin.duration = 0.5
    canvas = RecordingCanvas()
    assert coin.draw(canvas) is True
    assert coin.sprite.texture == ("Coin", 0)
    assert coin.texture_index == 1
    assert coin.duration == 0.0
    assert canvas.drawn == [coin.sprite]


def test_coin_not_drawn_when_off_screen():
    coin = Coin((0, 0))
    coin.exists_on_screen = False
    canvas = RecordingCanvas()
    assert coin.draw(canvas) is False
    assert canvas.drawn == []


def test_coin_moves_left_with_clock_step():
    coin = Coin((500.0, 100.0))
    set_clock_step(10)
    coin.move()
    assert coin.sprite.x < 500.0
    assert coin.sprite.y == 100.0


def test_clock_setup_and_still_without_step():
    clock = Clock((300.0, 50.0))
    assert clock.sprite.texture == ("Clock", 0)
    assert clock.sprite.scale_x == pytest.approx(0.7)
    clock.move()
    assert clock.sprite.position == (300.0, 50.0)


def test_demon_starts_at_fixed_spot():
    demon = Demon((1.0, 2.0))
    assert demon.sprite.position == (1000.0, 650.0)
    assert demon.texture_count == DEMON_TEXTURE_AMOUNT


def test_demon_walks_right_on_first_frames():
    demon = Demon((0.0, 0.0))
    x = demon.sprite.x
    demon.move()
    assert demon.sprite.x > x


def test_thief_offset_scale_and_drift():
    thief = Thief((5.0, 10.0))
    assert thief.sprite.position == (5.0, 70.0)
    assert thief.sprite.scale_x == pytest.approx(0.8)
    assert thief.texture_count == THIEF_TEXTURE_AMOUNT
    thief.move()
    assert thief.sprite.x == pytest.approx(4.0)


def test_thief_draw_records_sprite():
    thief = Thief((0.0, 0.0))
    canvas = RecordingCanvas()
    thief.draw(canvas)
    assert canvas.drawn == [thief.sprite]


def test_baguette_setup():
    baguette = Baguette((0.0, 0.0))
    sprite = baguette.sprite
    assert sprite.texture == ("Baguette", 0)
    assert sprite.rotation == pytest.approx(20.0)
    assert sprite.scale_x == pytest.approx(0.5)
    assert (sprite.origin_x, sprite.origin_y) == (sprite.width / 2, sprite.height / 2)
    assert baguette.texture_count == BAGUETTE_TEXTURE_AMOUNT


def test_baguette_activated_move_spins_right():
    baguette = Baguette((100.0, 0.0))
    baguette.activated_move()
    assert baguette.sprite.x > 100.0
    assert baguette.sprite.rotation == pytest.approx(40.0)


def test_baguette_leaves_screen_when_flying_far():
    baguette = Baguette((5000.0, 0.0))
    baguette.activated_move()
    assert baguette.exists_on_screen is False


def test_baguette_plain_move_uses_clock():
    baguette = Baguette((100.0, 0.0))
    baguette.move()
    assert baguette.sprite.x == 100.0