"""Solutions to the trait exercises: appending "Bar" and shared licensing info."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Mixin giving software a default licensing text."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int


@dataclass
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both pieces of software carry the same licensing text."""
    return software.licensing_info() == software_two.licensing_info()