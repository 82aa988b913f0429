"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def calculate_price_of_apples(num_apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    price = 1 if num_apples > 40 else 2
    return num_apples * price


@dataclass(frozen=True)
class Uppercase:
    """Turn the string to upper case."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" a number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )