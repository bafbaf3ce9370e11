"""Clickable buttons and the menus that hold them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from .items import DEFAULT_SIZE, Canvas, Sprite

HOME_BUTTON_SIZE = (600.0, 200.0)


class Command(ABC):
    """A button on screen that triggers an action on the controller."""

    texture: str = ""
    position: tuple[float, float] = (0.0, 0.0)
    scale: float = 1.0
    size: tuple[float, float] = DEFAULT_SIZE

    def __init__(self, controller):
        self.controller = controller
        x, y = self.position
        width, height = self.size
        self.sprite = Sprite(x=float(x), y=float(y),
                             width=float(width), height=float(height),
                             scale_x=self.scale, scale_y=self.scale,
                             texture=(self.texture, 0))

    def is_requested(self, x: float, y: float) -> bool:
        """True when the point lies on the button."""
        return self.sprite.global_bounds().contains(x, y)

    @abstractmethod
    def execute(self) -> None:
        """Perform the button's action."""

    def draw(self, canvas: Canvas) -> None:
        canvas.draw(self.sprite)


class ExitCommand(Command):
    """In-game button that leaves the game for the home screen."""

    texture = "ButtonExit"
    position = (30.0, 40.0)
    scale = 0.5

    def execute(self) -> None:
        self.controller.show_home()


class ExitGameCommand(Command):
    """Home-screen button that closes the window."""

    texture = "HomeScreenButtons"
    position = (1300.0, 650.0)
    size = HOME_BUTTON_SIZE

    def execute(self) -> None:
        self.controller.close()


class RestartCommand(Command):
    """In-game button that starts the game over."""

    texture = "ButtonReset"
    position = (150.0, 40.0)
    scale = 0.5

    def execute(self) -> None:
        self.controller.restart_game()


class StartCommand(Command):
    """Home-screen button that starts playing."""

    texture = "HomeScreenButtons"
    position = (1300.0, 150.0)
    size = HOME_BUTTON_SIZE

    def execute(self) -> None:
        self.controller.start_game(True)


class Menu:
    """An ordered collection of buttons."""

    def __init__(self, commands: Iterable[Command] = ()):
        self.commands: list[Command] = list(commands)

    def add(self, command: Command) -> None:
        self.commands.append(command)

    def execute_at(self, x: float, y: float) -> bool:
        """Run the first button under the point; False if there is none."""
        for command in self.commands:
            if command.is_requested(x, y):
                command.execute()
                return True
        return False

    def draw(self, canvas: Canvas) -> None:
        for command in self.commands:
            command.draw(canvas)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)