"""Reference solution for processing messages that update a state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")