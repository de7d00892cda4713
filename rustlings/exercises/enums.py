"""Enum exercises: messages and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change to an RGB colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Quit():
                self.quit = True
            case Move(point=point):
                self.move_position(point)
            case _:
                raise TypeError(f"unknown message: {message!r}")