"""Game flow: the home screen, the in-game display, timing and the window loop."""

from __future__ import annotations

import argparse
import random
import zlib
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from .board import Board
from .commands import (
    HOME_BUTTON_SIZE,
    ExitCommand,
    ExitGameCommand,
    Menu,
    RestartCommand,
    StartCommand,
)
from .constants import (
    COINS_TO_WIN,
    EASY,
    GAME_TIME,
    LEVEL_COMPLEX_TIME,
    WINDOW_SIZE_HEIGHT,
    WINDOW_SIZE_WIDTH,
    Input,
)
from .entities import set_rocks_movable
from .items import Sprite
from .level import Key, Level, identify_key
from .players import RegularPlayer

ERROR_MESSAGE = ("A general error has occurred, therfore the game can not "
                 "be launched!")

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
HAZE = (253, 255, 242, 150)

STORE_Y = 200.0
STORE_STOP = 50.0
STORE_STEP = 6.0
SHOW_STORE_SECONDS = 2
END_SCREEN_SECONDS = 7
HELP_SECONDS = 10
DUCK_SECONDS = 1.0
LOW_TIME = 3
BUBBLE_ORIGIN_X = 50.0
HUD_SIZE = 120
TITLE = "Burger Run"

LOST_TEXT = ("        You Didn't Get Enough Coins \n  \n"
             "            GAME OVER!!!!!!")
EXPLANATION_TEXT = (
    "               INSTRUCTIONS\n\n\n\n\n\n"
    " The Objective of the game is to collect\n"
    " 150 coins by the time the store shuts.\n"
    "  Use the Up key to jump, \n"
    " Space key to duck,\n"
    " And the W key to shoot your weapon\n"
    " if collected."
)


class GameError(Exception):
    """Raised when the game cannot be launched."""

    def __init__(self, message: str = ERROR_MESSAGE):
        super().__init__(message)


class Screen(Protocol):
    """A drawing surface for sprites, text and full-screen tints."""

    def draw(self, sprite: Sprite) -> None: ...

    def write(self, text: str, x: float, y: float, size: int,
              color: tuple) -> None: ...

    def fill(self, color: tuple) -> None: ...


class Overlay(Enum):
    """What covers the game when time is up."""

    STORE = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class EndScreen:
    """The final picture shown after the store closes."""

    texture: str | None = None
    fill: tuple | None = None
    text: str = ""


class HomeScreen:
    """Title screen with play, exit and instructions buttons."""

    def __init__(self, controller):
        self.menu = Menu([StartCommand(controller), ExitGameCommand(controller)])
        self.background = Sprite(x=0.0, y=100.0, width=WINDOW_SIZE_WIDTH,
                                 height=WINDOW_SIZE_HEIGHT,
                                 texture=("HomeScreenBackground", 0))
        self.help_button = Sprite(x=1300.0, y=400.0,
                                  width=HOME_BUTTON_SIZE[0],
                                  height=HOME_BUTTON_SIZE[1],
                                  texture=("HomeScreenButtons", 0))
        self.help_window = Sprite(x=360.0, y=170.0, width=1200.0, height=740.0,
                                  texture=("Help", 0))
        self.help_visible = False
        self.help_seconds = 0
        self._help_elapsed = 0.0

    def click(self, x: float, y: float) -> bool:
        """Handle a click; True when a menu button was pressed."""
        if self.menu.execute_at(x, y):
            return True
        if self.help_button.global_bounds().contains(x, y):
            self.help_visible = True
        return False

    def help_tick(self, seconds: float) -> bool:
        """Advance the instructions timer; True while they are shown."""
        if not self.help_visible:
            return False
        self._help_elapsed += seconds
        if self._help_elapsed > 1:
            self.help_seconds += 1
            self._help_elapsed = 0.0
        if self.help_seconds < HELP_SECONDS:
            return True
        self.help_seconds = 0
        self.help_visible = False
        return False

    def end_message(self, won: bool) -> EndScreen:
        if won:
            return EndScreen(texture="Clock1")
        return EndScreen(fill=RED, text=LOST_TEXT)

    def draw_end(self, canvas: Screen, won: bool) -> None:
        end = self.end_message(won)
        if end.fill is not None:
            canvas.fill(end.fill)
        if end.texture is not None:
            canvas.draw(Sprite(width=WINDOW_SIZE_WIDTH,
                               height=WINDOW_SIZE_HEIGHT,
                               texture=(end.texture, 0)))
        if end.text:
            canvas.write(end.text, 220, 300, HUD_SIZE, BLACK)

    def draw(self, canvas: Screen) -> None:
        canvas.draw(self.background)
        canvas.fill(HAZE)
        self.menu.draw(canvas)
        canvas.draw(self.help_button)
        canvas.write("INSTRUCTIONS", 1360, 430, 80, WHITE)
        canvas.write("BURGER RUN", 200, 300, 260, RED)
        canvas.write("PLAY", 1450, 150, HUD_SIZE, WHITE)
        canvas.write("EXIT", 1450, 650, HUD_SIZE, WHITE)
        if self.help_visible:
            canvas.fill(HAZE)
            canvas.draw(self.help_window)
            canvas.write(EXPLANATION_TEXT, 480, 210, 44, BLACK)


class Controller:
    """Runs the game: home screen, level timing, difficulty and the ending."""

    def __init__(self, rng=None,
                 window_size=(WINDOW_SIZE_WIDTH, WINDOW_SIZE_HEIGHT)):
        self.rng = rng if rng is not None else random.Random()
        self.window_width, self.window_height = (float(v) for v in window_size)
        self.board = Board(rng=self.rng, window_width=self.window_width)
        self.level = Level(EASY, rng=self.rng)
        self.menu = Menu([ExitCommand(self), RestartCommand(self)])
        self.home_screen = HomeScreen(self)

        self.running = True
        self.game_started = False
        self.won = False
        self.count_down = GAME_TIME
        self.count = 0
        self.seconds = 0
        self.level_count = 0
        self.show_level_up = False
        self.duration = 0.0
        self.show_elapsed = 0.0
        self.complex_elapsed = 0.0
        self.end_elapsed = 0.0
        self.time_color = WHITE
        self.time_text = str(self.count_down)
        self.overlay: Overlay | None = None
        self.duck_pressed = False
        self.duck_elapsed = 0.0

        self.store = Sprite(x=self.window_width, y=STORE_Y,
                            width=WINDOW_SIZE_WIDTH, height=WINDOW_SIZE_HEIGHT,
                            texture=("HomeScreenBackground", 0))
        self.weapon_icon = Sprite(x=self.window_width - 1000, y=0.0,
                                  scale_x=0.5, scale_y=0.5,
                                  texture=("Baguette", 0))
        self.weapon_icon.rotate(50)

    @property
    def difficulty(self) -> int:
        return self.level.difficulty

    @difficulty.setter
    def difficulty(self, value: int) -> None:
        self.level.difficulty = value

    # screen switching ------------------------------------------------

    def start_game(self, start: bool) -> None:
        """Leave the home screen and set up a fresh run when ``start``."""
        self.game_started = start
        if start:
            self._begin()

    def _begin(self) -> None:
        self.show_elapsed = 0.0
        self.complex_elapsed = 0.0
        self.board.restart()
        self.level.restart()
        self.level.create_coins(self.board.rocks)

    def show_home(self) -> None:
        self.game_started = False

    def close(self) -> None:
        self.running = False

    def restart_game(self) -> None:
        self.count = 0
        self.level_count = 0
        self.seconds = 0
        self.difficulty = EASY
        self.board.restart()
        self.level.restart()
        self.level.create_coins(self.board.rocks)
        self.show_elapsed = 0.0
        self.complex_elapsed = 0.0
        self.level.complex()

    # timing ----------------------------------------------------------

    def manage_complex(self) -> None:
        """Raise the difficulty after each stretch of play."""
        if self.complex_elapsed < LEVEL_COMPLEX_TIME:
            return
        threshold = int(LEVEL_COMPLEX_TIME)
        if self.level_count in (threshold, threshold + 1):
            self.show_level_up = True
        else:
            self.board.toggle_background()
            self.level_count = 0
            self.show_level_up = False
            self.difficulty += 1
            self.level.complex()
            self.complex_elapsed = 0.0

    def check_winning(self) -> None:
        """Count down once a second; mark the run over when time is up."""
        if self.show_elapsed > 1:
            self.show_elapsed = 0.0
            self.count_down = self.level.show_time
            self.level.tick_time()
            self.level_count += 1
            self.count += 1
            if self.count_down <= LOW_TIME:
                self.time_color = RED
        if self.count == self.level.time:
            self.won = True

    def time_up(self, seconds: float) -> Overlay | None:
        """Run the closing sequence; return what should cover the game."""
        self.time_text = str(self.count_down) if self.count_down > 0 else "0"
        if not self.won:
            return None
        if self.store.x > STORE_STOP:
            self.store.move(-STORE_STEP, 0.0)
            return Overlay.STORE
        set_rocks_movable(False)
        self.level.end_game()
        self.time_text = "0"
        self.end_elapsed += seconds
        if self.end_elapsed > 1:
            self.end_elapsed = 0.0
            self.seconds += 1
        if self.seconds < SHOW_STORE_SECONDS:
            return Overlay.STORE
        if self.seconds < END_SCREEN_SECONDS:
            if self.level.coins_counter >= COINS_TO_WIN:
                return Overlay.WON
            return Overlay.LOST
        if self.seconds == END_SCREEN_SECONDS:
            self.set_winning()
            return None
        return Overlay.STORE

    def set_winning(self) -> None:
        """Reset after the ending and go back to the home screen."""
        self.store.position = (self.window_width, STORE_Y)
        self.won = False
        self.level.restart()
        self.difficulty = EASY
        self.time_color = WHITE
        self.count = 0
        self.seconds = 0
        self.count_down = GAME_TIME
        self.level_count = 0
        self.board.toggle_background()
        self.overlay = None
        self.show_home()

    def tick(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""
        if not self.game_started:
            self.home_screen.help_tick(dt)
            return
        self.show_elapsed += dt
        self.complex_elapsed += dt
        self.check_winning()
        self.manage_complex()
        self.duration += dt
        self.level.set_all_duration(self.duration)
        self._update_duck(dt)
        elapsed_ms = dt * 1000.0
        self.level.move_game(elapsed_ms)
        self.board.move_land(elapsed_ms)
        self.level.manage_collision(self.board.rocks)
        self.overlay = self.time_up(dt)

    def _update_duck(self, dt: float) -> None:
        if not self.duck_pressed:
            return
        self.duck_elapsed += dt
        if self.duck_elapsed > DUCK_SECONDS:
            self.level.player.handle_input(Input.RELEASE_SPACE)
            self.duck_pressed = False
            self.duck_elapsed = 0.0
        else:
            self.level.player.handle_input(Input.PRESS_SPACE)

    # input -----------------------------------------------------------

    def handle_key(self, key: Key, released: bool) -> None:
        """React to a key press or release during play."""
        if not self.game_started or self.duck_pressed:
            return
        if key is Key.ESCAPE and not released:
            self.close()
            return
        player = self.level.player
        if not released:
            if key is Key.W:
                if player.weapon_collected and player.weapon is not None:
                    player.set_weapon_activated(True)
                    player.weapon_collected = False
                return
            if key is Key.SPACE:
                self.duck_elapsed = 0.0
                self.duck_pressed = True
            event = identify_key(key, False)
        elif key is Key.SPACE:
            return
        else:
            event = identify_key(key, True)
        if event is not None:
            player.handle_input(event)

    def click(self, x: float, y: float) -> bool:
        """React to a left click; True when a button was pressed."""
        if not self.game_started:
            return self.home_screen.click(x, y)
        player = self.level.player
        if (player.sprite.origin_x == BUBBLE_ORIGIN_X
                and player.sprite.global_bounds().contains(x, y)):
            self.level.player = RegularPlayer(player.walking_position())
            set_rocks_movable(True)
        return self.menu.execute_at(x, y)

    # drawing ---------------------------------------------------------

    def draw(self, canvas: Screen) -> None:
        if not self.game_started:
            self.home_screen.draw(canvas)
            return
        width = self.window_width
        self.board.draw(canvas)
        self.menu.draw(canvas)
        canvas.write("Coins: ", width - 800, 0, HUD_SIZE, WHITE)
        canvas.write(str(self.level.coins_counter), width - 550, 0,
                     HUD_SIZE, WHITE)
        canvas.write(self.time_text, width - 150, 0, HUD_SIZE, self.time_color)
        canvas.write("Time:", width - 370, 0, HUD_SIZE, WHITE)
        if self.level.draw(canvas):
            self.duration = 0.0
        if self.level.player.weapon_collected:
            canvas.draw(self.weapon_icon)
        if self.show_level_up:
            canvas.write("LEVEL UP", 400, 200, 360, BLACK)
        if self.won:
            canvas.draw(self.store)
        if self.overlay in (Overlay.WON, Overlay.LOST):
            self.home_screen.draw_end(canvas, self.overlay is Overlay.WON)


class _PygameCanvas:
    """Draws sprites as coloured boxes and text with the default font."""

    def __init__(self, pygame, surface):
        self._pygame = pygame
        self.surface = surface
        self._fonts: dict[int, object] = {}

    @staticmethod
    def _colour(sprite: Sprite) -> tuple[int, int, int]:
        if sprite.texture is None:
            return (128, 128, 128)
        name, index = sprite.texture
        crc = zlib.crc32(f"{name}:{index}".encode())
        return (crc & 0xFF, (crc >> 8) & 0xFF, (crc >> 16) & 0xFF)

    def draw(self, sprite: Sprite) -> None:
        bounds = sprite.global_bounds()
        rect = self._pygame.Rect(int(bounds.left), int(bounds.top),
                                 int(bounds.width), int(bounds.height))
        self._pygame.draw.rect(self.surface, self._colour(sprite), rect)

    def write(self, text: str, x: float, y: float, size: int,
              color: tuple) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = self._pygame.font.Font(None, size)
        line_height = font.get_linesize()
        for number, line in enumerate(text.split("\n")):
            image = font.render(line, True, color)
            self.surface.blit(image, (x, y + number * line_height))

    def fill(self, color: tuple) -> None:
        layer = self._pygame.Surface(self.surface.get_size(),
                                     self._pygame.SRCALPHA)
        layer.fill(color)
        self.surface.blit(layer, (0, 0))


def _play_music(pygame) -> None:
    try:
        pygame.mixer.init()
        pygame.mixer.music.load("Daybreak.ogg")
        pygame.mixer.music.set_volume(0.4)
        pygame.mixer.music.play(loops=-1)
    except (pygame.error, FileNotFoundError):
        pass


def _run_window(controller: Controller, scale: float) -> None:
    import pygame

    try:
        pygame.init()
        size = (int(controller.window_width * scale),
                int(controller.window_height * scale))
        window = pygame.display.set_mode(size)
    except pygame.error as error:
        raise GameError() from error
    pygame.display.set_caption(TITLE)
    surface = pygame.Surface((int(controller.window_width),
                              int(controller.window_height)))
    canvas = _PygameCanvas(pygame, surface)
    keys = {
        pygame.K_SPACE: Key.SPACE,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_b: Key.B,
        pygame.K_w: Key.W,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    _play_music(pygame)
    frame_clock = pygame.time.Clock()
    try:
        while controller.running:
            dt = frame_clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    controller.close()
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    controller.handle_key(keys.get(event.key, Key.OTHER),
                                          event.type == pygame.KEYUP)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    x, y = event.pos
                    controller.click(x / scale, y / scale)
            controller.tick(dt)
            surface.fill(BLACK)
            controller.draw(canvas)
            pygame.transform.smoothscale(surface, window.get_size(), window)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(
        prog="burgerrun",
        description="Collect coins before the store shuts.")
    parser.add_argument("--scale", type=float, default=0.5,
                        help="window size relative to 1920x1080")
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")
    try:
        _run_window(Controller(), args.scale)
    except GameError as error:
        print(error)
    return 0