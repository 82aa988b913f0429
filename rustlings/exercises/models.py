"""Solutions to the struct and enum exercises: packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass
class Package:
    """A package to ship between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        return cents_per_gram * self.weight_in_grams


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8("red", self.red)
        _check_u8("green", self.green)
        _check_u8("blue", self.blue)


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask to stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    should_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.should_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")