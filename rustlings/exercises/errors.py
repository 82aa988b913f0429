"""Solutions to the error handling exercises: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_CREATION_KINDS = {"negative": "number is negative", "zero": "number is zero"}


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly, with the range of a bits-wide integer."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens to pay for the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    return qty * cost_per_item + processing_fee


class CreationError(ValueError):
    """A value that cannot become a positive non-zero integer."""

    def __init__(self, kind: str) -> None:
        if kind not in _CREATION_KINDS:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(_CREATION_KINDS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(("CreationError", self.kind))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError("negative")
        if self.value == 0:
            raise CreationError("zero")


class ParsePosNonzeroError(ValueError):
    """Text that does not hold a positive non-zero integer.

    cause is either the CreationError or the ValueError raised while parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return (type(self.cause), str(self.cause)) == (type(other.cause), str(other.cause))

    def __hash__(self) -> int:
        return hash((type(self.cause), str(self.cause)))


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc