"""Double dispatch of collisions between pairs of game items."""

from __future__ import annotations

from typing import Callable

from .constants import Input
from .entities import Baguette, Clock, Coin, Demon, Rock, Thief, set_rocks_movable
from .players import BubblePlayer, RegularPlayer

THIEF_PENALTY = -10
ROCK_TOP_OFFSET = 60.0


def _player_coin(player, coin, level) -> None:
    if coin.exists_on_screen:
        coin.exists_on_screen = False
        level.add_coins(1)


def _player_thief(player, thief, level) -> None:
    if thief.exists_on_screen and not thief.collided:
        thief.collided = True
        level.add_coins(THIEF_PENALTY)
        level.show_coins_minus()


def _player_clock(player, clock, level) -> None:
    if clock.exists_on_screen:
        clock.exists_on_screen = False
        level.more_time()


def _player_demon(player, demon, level) -> None:
    if demon.exists_on_screen:
        level.player = BubblePlayer(player.sprite.position)


def _player_rock(player, rock, level) -> None:
    current = level.player
    if player.sprite.y < rock.sprite.y:
        # Landed on top of the rock.
        current.top_collide = True
        current.falling = False
        current.handle_input(Input.RELEASE_RIGHT)
        height = current.sprite.global_bounds().height
        current.sprite.position = (current.sprite.x,
                                   rock.sprite.y - height + ROCK_TOP_OFFSET)
    elif player.sprite.x < rock.sprite.x:
        set_rocks_movable(False)
    elif player.sprite.y > rock.sprite.y:
        current.falling = True
    elif player.sprite.x > rock.sprite.x + rock.sprite.global_bounds().width:
        set_rocks_movable(False)


def _player_baguette(player, baguette, level) -> None:
    baguette.exists_on_screen = False
    level.player.set_weapon(Baguette((0.0, 0.0)))
    level.player.weapon_collected = True


def _enemy_baguette(enemy, baguette, level) -> None:
    if level.player.weapon_activated:
        enemy.exists_on_screen = False


_Handler = Callable[[object, object, object], None]

_HANDLERS: dict[tuple[type, type], _Handler] = {
    (RegularPlayer, Demon): _player_demon,
    (RegularPlayer, Thief): _player_thief,
    (RegularPlayer, Clock): _player_clock,
    (RegularPlayer, Coin): _player_coin,
    (RegularPlayer, Rock): _player_rock,
    (RegularPlayer, Baguette): _player_baguette,
    (Demon, Baguette): _enemy_baguette,
    (Thief, Baguette): _enemy_baguette,
}


def process_collision(first, second, level) -> bool:
    """Apply the effect of ``first`` touching ``second``.

    Returns True when the pair has a handler, False when it is ignored.
    """
    handler = _HANDLERS.get((type(first), type(second)))
    if handler is None:
        return False
    handler(first, second, level)
    return True