import random

import pytest

from burgerrun.constants import NUM_OF_DIFFICULTY_LEVELS
from burgerrun.factory import Factory


def tagged(tag):
    return lambda position: (tag, position)


def test_register_and_create():
    f = Factory()
    assert f.register("Coin", tagged("coin")) is True
    assert f.create("Coin", (1, 2)) == ("coin", (1, 2))


def test_create_unknown_returns_none():
    assert Factory().create("Rock", (0, 0)) is None


def test_register_keeps_first_creator():
    f = Factory()
    f.register("Rock", tagged("first"))
    f.register("Rock", tagged("second"))
    assert f.create("Rock", (0, 0))[0] == "first"


def test_create_enemy_by_difficulty():
    f = Factory()
    f.register_enemy(tagged("demon"))
    f.register_enemy(tagged("thief"))
    assert f.create_enemy(1, (5, 6)) == ("thief", (5, 6))
    assert f.create_enemy(0, (5, 6))[0] == "demon"


@pytest.mark.parametrize("difficulty", [-1, NUM_OF_DIFFICULTY_LEVELS])
def test_create_enemy_out_of_range(difficulty):
    f = Factory()
    f.register_enemy(tagged("demon"))
    assert f.create_enemy(difficulty, (0, 0)) is None


def test_create_enemy_unregistered_level_raises():
    f = Factory()
    f.register_enemy(tagged("demon"))
    with pytest.raises(IndexError):
        f.create_enemy(2, (0, 0))


def test_create_gift_chooses_registered():
    f = Factory()
    f.register_gift(tagged("clock"))
    f.register_gift(tagged("baguette"))
    rng = random.Random(3)
    results = {f.create_gift((0, 0), rng)[0] for _ in range(50)}
    assert results == {"clock", "baguette"}


def test_create_gift_passes_position():
    f = Factory()
    f.register_gift(tagged("clock"))
    assert f.create_gift((9, 9)) == ("clock", (9, 9))


def test_create_gift_empty_raises():
    with pytest.raises(ValueError):
        Factory().create_gift((0, 0))