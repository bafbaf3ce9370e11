import pytest

from burgerrun.collision import process_collision
from burgerrun.constants import GAME_TIME
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
from burgerrun.level import Level
from burgerrun.players import BubblePlayer


@pytest.fixture(autouse=True)
def _movable():
    set_rocks_movable(True)
    yield
    set_rocks_movable(True)


@pytest.fixture
def level():
    return Level()


def test_coin_collected_once(level):
    coin = Coin((0, 0))
    assert process_collision(level.player, coin, level) is True
    assert level.coins_counter == 1
    assert coin.exists_on_screen is False
    process_collision(level.player, coin, level)
    assert level.coins_counter == 1


def test_thief_penalty_clamps_at_zero(level):
    thief = Thief((0, 0))
    level.add_coins(3)
    process_collision(level.player, thief, level)
    assert level.coins_counter == 0
    assert thief.collided is True
    assert level.minus_visible is True


def test_thief_hits_only_once(level):
    level.add_coins(25)
    thief = Thief((0, 0))
    process_collision(level.player, thief, level)
    process_collision(level.player, thief, level)
    assert level.coins_counter == 15


def test_clock_adds_time(level):
    clock = Clock((0, 0))
    process_collision(level.player, clock, level)
    assert level.time == GAME_TIME + 5
    assert level.show_time == GAME_TIME + 5
    assert clock.exists_on_screen is False


def test_demon_traps_player_in_bubble(level):
    old = level.player
    process_collision(old, Demon((0, 0)), level)
    assert isinstance(level.player, BubblePlayer)
    assert level.player.sprite.position == old.sprite.position


def test_hidden_demon_does_nothing(level):
    demon = Demon((0, 0))
    demon.exists_on_screen = False
    old = level.player
    process_collision(old, demon, level)
    assert level.player is old


def test_rock_below_player_lands_on_top(level):
    player = level.player
    player.falling = True
    rock = Rock((400, 700))
    process_collision(player, rock, level)
    assert player.top_collide is True
    assert player.falling is False
    height = player.sprite.global_bounds().height
    assert player.sprite.y == pytest.approx(rock.sprite.y - height + 60)


def test_rock_ahead_stops_world(level):
    rock = Rock((450, 610))
    process_collision(level.player, rock, level)
    assert rocks_movable() is False


def test_rock_above_makes_player_fall(level):
    rock = Rock((300, 500))
    process_collision(level.player, rock, level)
    assert level.player.falling is True
    assert rocks_movable() is True


def test_baguette_pickup(level):
    baguette = Baguette((0, 0))
    process_collision(level.player, baguette, level)
    assert baguette.exists_on_screen is False
    assert isinstance(level.player.weapon, Baguette)
    assert level.player.weapon_collected is True


@pytest.mark.parametrize("enemy_type", [Demon, Thief])
def test_weapon_kills_only_when_fired(level, enemy_type):
    enemy = enemy_type((0, 0))
    weapon = Baguette((0, 0))
    process_collision(enemy, weapon, level)
    assert enemy.exists_on_screen is True
    level.player.set_weapon(weapon)
    level.player.set_weapon_activated(True)
    process_collision(enemy, weapon, level)
    assert enemy.exists_on_screen is False


def test_unknown_pair_is_ignored(level):
    first, second = Coin((0, 0)), Coin((0, 0))
    assert process_collision(first, second, level) is False
    assert first.exists_on_screen and second.exists_on_screen