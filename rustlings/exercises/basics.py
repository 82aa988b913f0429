"""Solutions to the introductory exercises: if, functions, strings, vecs, options."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day, None for invalid hours."""
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None