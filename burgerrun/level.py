"""A running level: the player, coins, enemies, gifts and the countdown."""

from __future__ import annotations

import random
import time
from enum import Enum, auto

from .collision import process_collision
from .constants import (
    EASY,
    GAME_TIME,
    HARD,
    MODERATE,
    NUM_OF_ENEMIES_PER_SCREEN,
    NUM_OF_GIFTS_PER_SCREEN,
    SIZE_OF_GROUND,
    WINDOW_SIZE_HEIGHT,
    WINDOW_SIZE_WIDTH,
    Input,
)
from .entities import rocks_movable
from .factory import FACTORY
from .items import Canvas, Sprite
from .movement import set_clock_step
from .players import RegularPlayer

START_POSITION = (400.0, 610.0)
MINUS_POSITION = (400.0, 400.0)
MINUS_SECONDS = 3
MINUS_RISE = 5.0
EXTRA_TIME = 5
COINS_ABOVE = 100.0
COIN_SPACING = 150.0
COINS_PER_ROCK = 3
COINS_ON_GROUND = 10
COIN_RESPAWN_OFFSET = 300.0
WRAP_MARGIN = 20.0


class Key(Enum):
    """Keyboard keys the game reacts to."""

    SPACE = auto()
    UP = auto()
    RIGHT = auto()
    B = auto()
    W = auto()
    ESCAPE = auto()
    OTHER = auto()


def identify_key(key: Key, release: bool) -> Input | None:
    """Translate a key press or release into a player input, if any."""
    if key is Key.SPACE:
        return Input.RELEASE_SPACE if release else Input.PRESS_SPACE
    if key is Key.UP:
        return Input.PRESS_UP
    if key is Key.RIGHT:
        return Input.RELEASE_RIGHT if release else Input.PRESS_RIGHT
    if key is Key.B and release:
        return Input.BUBBLE_POP
    return None


def _overlap(first, second) -> bool:
    return first.sprite.global_bounds().intersects(second.sprite.global_bounds())


class Level:
    """Owns every moving item of a game and the score and countdown."""

    def __init__(self, difficulty: int = EASY, factory=FACTORY, rng=None,
                 clock=time.monotonic):
        self.difficulty = difficulty
        self.factory = factory
        self.rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.player = RegularPlayer(START_POSITION)
        self.gifts: list = []
        self.enemies: list = []
        self.coins: list = []
        self.coins_counter = 0
        self.time = GAME_TIME
        self.show_time = GAME_TIME
        self.minus_visible = False
        self.minus_sprite = Sprite(x=MINUS_POSITION[0], y=MINUS_POSITION[1],
                                   texture=("CoinsMinus", 0))
        self._minus_ticks = 0
        self._minus_started = clock()
        self._duration = 0.0

    # creation ---------------------------------------------------------

    def complex(self) -> None:
        """Add enemies (and gifts from HARD on) for the current difficulty."""
        if self.difficulty == EASY:
            return
        if self.difficulty == MODERATE:
            self.create_enemies(self.difficulty)
        if self.difficulty >= HARD:
            self.create_gifts()
            self.create_enemies(self.difficulty)

    def create_enemies(self, difficulty: int) -> None:
        x, y = 1000.0, 470.0
        density = 500.0 - difficulty * 75.0
        for i in range(NUM_OF_ENEMIES_PER_SCREEN * difficulty):
            position = (x + density + i * 1000.0, y)
            enemy = self.factory.create_enemy(self.rng.randrange(2), position)
            if enemy is not None:
                self.enemies.append(enemy)

    def create_gifts(self) -> None:
        """Replace the gifts with a freshly chosen one off the right edge."""
        self.gifts.clear()
        x, y = 2300.0, 400.0
        density = 500.0 - self.difficulty * 75.0
        for i in range(NUM_OF_GIFTS_PER_SCREEN):
            gift = self.factory.create_gift((x + density + i * 1000.0, y),
                                            self.rng)
            if gift is not None:
                self.gifts.append(gift)

    def create_coins(self, rocks) -> None:
        """Put coins above every rock and a row along the ground."""
        for rock in rocks:
            self.create_coins_at(rock.sprite.position, COINS_PER_ROCK)
        self.create_coins_at((0.0, WINDOW_SIZE_HEIGHT - SIZE_OF_GROUND),
                             COINS_ON_GROUND)

    def create_coins_at(self, position, count: int) -> None:
        x, y = position
        y -= COINS_ABOVE
        for _ in range(count):
            x += COIN_SPACING
            coin = self.factory.create("Coin", (x, y))
            if coin is not None:
                self.coins.append(coin)

    # per-frame updates ----------------------------------------------

    def set_all_duration(self, duration: float) -> None:
        """Set the animation time of coins, enemies and the player."""
        self._duration = duration
        for item in (*self.coins, *self.enemies, self.player):
            item.duration = duration

    def move_game(self, elapsed_ms: float) -> None:
        """Advance everything by one frame lasting ``elapsed_ms``."""
        self.player.move()
        self._move_enemies()
        set_clock_step(elapsed_ms)
        self._move_gifts()
        self._move_coins()
        self.player.activate_weapon()

    def _move_enemies(self) -> None:
        for enemy in self.enemies:
            enemy.move()
            sprite = enemy.sprite
            if sprite.x < -sprite.global_bounds().width + WRAP_MARGIN:
                sprite.position = (WINDOW_SIZE_WIDTH, sprite.y)
                enemy.exists_on_screen = True
                enemy.collided = False

    def _move_coins(self) -> None:
        if not rocks_movable():
            return
        for coin in self.coins:
            coin.move()
            sprite = coin.sprite
            if sprite.x < -sprite.global_bounds().width:
                sprite.position = (WINDOW_SIZE_WIDTH + COIN_RESPAWN_OFFSET,
                                   sprite.y)
                coin.exists_on_screen = True

    def _move_gifts(self) -> None:
        if not rocks_movable():
            return
        gone = 0
        for gift in self.gifts:
            gift.move()
            sprite = gift.sprite
            if sprite.x < -sprite.global_bounds().width + WRAP_MARGIN:
                gone += 1
        if gone == len(self.gifts):
            self.create_gifts()

    def manage_collision(self, rocks) -> None:
        """Resolve every collision involving the player or a fired weapon."""
        missed = 0
        for rock in rocks:
            if _overlap(rock, self.player):
                process_collision(self.player, rock, self)
            else:
                missed += 1
        if missed == len(rocks) and self.player.top_collide:
            self.player.sprite.position = self.player.walking_position()
            self.player.top_collide = False

        for group in (self.gifts, self.enemies, self.coins):
            for item in group:
                if _overlap(item, self.player):
                    process_collision(self.player, item, self)

        for enemy in self.enemies:
            weapon = self.player.weapon
            if weapon is not None and _overlap(weapon, enemy):
                process_collision(enemy, weapon, self)

    # score and time -------------------------------------------------

    def add_coins(self, amount: int) -> None:
        """Change the coin count, never letting it drop below zero."""
        self.coins_counter = max(self.coins_counter + amount, 0)

    def more_time(self) -> None:
        self.time += EXTRA_TIME
        self.show_time += EXTRA_TIME

    def tick_time(self) -> None:
        """Count the displayed countdown down by one second."""
        self.show_time -= 1

    def show_coins_minus(self) -> None:
        """Start showing the floating coin penalty."""
        self.minus_visible = True
        self._minus_started = self._clock()

    def restart(self) -> None:
        self.end_game()
        self.player = RegularPlayer(self.player.walking_position())
        self.coins_counter = 0
        self.time = GAME_TIME
        self.show_time = GAME_TIME

    def end_game(self) -> None:
        """Remove every coin, enemy and gift."""
        self.coins.clear()
        self.enemies.clear()
        self.gifts.clear()

    # drawing --------------------------------------------------------

    def draw(self, canvas: Canvas) -> bool:
        """Draw the level; True when the player showed a new frame."""
        duration = self._duration
        changed = self.player.draw(canvas)
        if self.difficulty > 0:
            self.set_all_duration(duration)
            for enemy in self.enemies:
                enemy.draw(canvas)
            for gift in self.gifts:
                gift.draw(canvas)
        for coin in self.coins:
            coin.draw(canvas)
        self._draw_minus(canvas)
        return changed

    def _draw_minus(self, canvas: Canvas) -> None:
        if not self.minus_visible:
            return
        now = self._clock()
        if now - self._minus_started > 1:
            self._minus_ticks += 1
            self._minus_started = now
        if self._minus_ticks < MINUS_SECONDS:
            self.minus_sprite.move(0.0, -MINUS_RISE)
            canvas.draw(self.minus_sprite)
        else:
            self.minus_sprite.position = MINUS_POSITION
            self._minus_ticks = 0
            self.minus_visible = False