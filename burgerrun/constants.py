"""Game-wide constants and the player input enumeration."""

from enum import IntEnum

GROUND = 0
BACKGROUND = 1
ROCK = 2
CLOCK = 3
COIN = 4
PLAYER = 5

LEFT = 0
RIGHT = 1
UP = 2
DOWN = 3
NON_DIRECTION = 4

EASY = 0
MODERATE = 1
HARD = 2
SUPER_HARD = 3

MIN_HEIGHT_ROCK = 100
MAX_HEIGHT_ROCK = 610
WINDOW_SIZE_WIDTH = 1920
WINDOW_SIZE_HEIGHT = 1080

DEMON_TEXTURE_AMOUNT = 18
THIEF_TEXTURE_AMOUNT = 6
BUBBLE_PLAYER_TEXTURE_AMOUNT = 1
COIN_TEXTURE_AMOUNT = 6
CLOCK_TEXTURE_AMOUNT = 1
BAGUETTE_TEXTURE_AMOUNT = 4

REGULAR_PLAYER_WALK_TEXTURE_AMOUNT = 6
REGULAR_PLAYER_DUCK_TEXTURE_AMOUNT = 1
REGULAR_PLAYER_HOP_TEXTURE_AMOUNT = 1
REGULAR_PLAYER_JUMP_TEXTURE_AMOUNT = 1
REGULAR_PLAYER_FREEZE_TEXTURE_AMOUNT = 1

DEFAULT_TEXTURE_AMOUNT = 1

START_RIGHT_DIRECTION = 0
END_RIGHT_DIRECTION = 7
START_LEFT_DIRECTION = 8
END_LEFT_DIRECTION = 17

NUM_OF_ROCKS = 2
NUM_OF_ENEMIES_PER_SCREEN = 1
NUM_OF_DIFFICULTY_LEVELS = 4
NUM_OF_COINS_PER_SCREEN = 15
NUM_OF_GIFTS_PER_SCREEN = 1
LEVEL_COMPLEX_TIME = 30.0

SIZE_OF_GROUND = 280
COINS_TO_WIN = 150

PLAYER_JUMP_HEIGHT = 400.0
FALL_SPEED = 6.0
HOP_SPEED = 0.5
PLAYER_BUBBLE_HEIGHT = 360.0

GAME_TIME = 120


class Input(IntEnum):
    """Discrete input events fed to the player state machine."""

    PRESS_UP = 0
    PRESS_DOWN = 1
    RELEASE_RIGHT = 2
    PRESS_SPACE = 3
    PRESS_RIGHT = 4
    RELEASE_SPACE = 5
    RELEASE_UP = 6
    BUBBLE_POP = 7