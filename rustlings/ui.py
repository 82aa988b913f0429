"""Coloured status lines for the terminal."""

import os
import sys

_RESET = "\x1b[0m"
_CODES = {"red": "31", "green": "32", "blue": "34", "bold": "1"}


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(text: object, *attrs: str) -> str:
    """Wrap text in ANSI attributes when standard output is a terminal."""
    text = str(text)
    if not attrs or not _colors_enabled():
        return text
    codes = ";".join(_CODES[attr] for attr in attrs)
    return f"\x1b[{codes}m{text}{_RESET}"


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{_style(marker, 'red')} {_style(message, 'red')}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{_style(marker, 'green')} {_style(message, 'green')}")