# burgerrun

A side-scrolling runner. You race to the store before it shuts, collecting
coins on the way, picking up clocks for extra time, grabbing a baguette to
throw at your enemies, and avoiding the demons and thieves that appear as the
game gets harder.

## Installing

```
pip install .
```

This installs the game together with its one dependency, `pygame`.

## Playing

```
burgerrun
```

The window is drawn at 1920x1080 scaled by `--scale` (default `0.5`):

```
burgerrun --scale 1
```

You start on the home screen. Click **PLAY** to begin, **INSTRUCTIONS** to
show the rules for a few seconds, or **EXIT** to quit.

To win, have at least 150 coins when the countdown runs out. The starting
time is 120 seconds. When time is up the store slides in, then a win or
game-over screen is shown, and the game goes back to the home screen.

| Key    | Action                                         |
|--------|------------------------------------------------|
| Up     | jump                                           |
| Right  | hop forward while jumping                      |
| Space  | duck (for about a second)                      |
| W      | throw the baguette, once you have picked it up |
| Escape | quit                                           |

- A **coin** adds one to your score.
- A **clock** adds five seconds to the countdown.
- A **thief** takes ten coins from you (the score never goes below zero).
- A **demon** traps you in a bubble that floats up and spins. Click the
  bubble to get free.
- A thrown **baguette** removes any demon or thief it hits.
- Rocks can be stood on; running into their side stops the scrolling.

The difficulty goes up roughly every 30 seconds, and the background switches
each time. Enemies start to appear at the second level, and gifts (a clock or
a baguette) from the third. The two buttons in the top-left corner leave the
game for the home screen or start it over.

## What it does not do

The game has no artwork: every sprite is drawn as a box whose colour is
derived from its texture name, and text uses pygame's default font. No sound
effects are played. Background music is played only if a file named
`Daybreak.ogg` is found in the working directory; otherwise the game is
silent.

## Using the pieces

The game logic does not depend on a window, so it can be driven from code.
`burgerrun.level.Level` holds the player, coins, enemies and gifts, and
`burgerrun.board.Board` holds the scrolling ground and rocks.
`burgerrun.controller.Controller` ties them together; `Controller.tick(dt)`
advances the game by `dt` seconds, and `handle_key`, `click` and `draw` take
input and draw onto any object with `draw`, `write` and `fill` methods.

The player's state (`Walk`, `Jump`, `Hop`, `Duck`, `Freeze` in
`burgerrun.states`) changes through `Player.handle_input` with values of
`burgerrun.constants.Input`. Collisions between items are resolved by
`burgerrun.collision.process_collision`, and items are built through the
registries in `burgerrun.factory.Factory`.

```python
from burgerrun.board import Board
from burgerrun.level import Level

board = Board()
board.create_rocks()
level = Level()
level.restart()
level.create_coins(board.rocks)
level.move_game(16)
level.manage_collision(board.rocks)
print(level.coins_counter, level.show_time)
```

## Running the tests

```
pip install .[test]
pytest
```