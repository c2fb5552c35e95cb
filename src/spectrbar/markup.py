"""Markup grammars for the host bar renderer.

The core produces an (id, color, value) triple per widget; how color and
value are serialized is up to the host, so each grammar is a separate
formatter that a Bar can be given.
"""

from abc import ABC, abstractmethod
from typing import Optional


class MarkupFormatter(ABC):
    """Serializes a colored value for a particular bar renderer."""

    name: str = ""

    @abstractmethod
    def format(self, color: int, value: str) -> str:
        """Wrap value in the escape sequences selecting color.

        Args:
            color: Host color code
            value: Already rendered value text

        Returns:
            Markup string understood by the host
        """
        pass


class SpectrwmMarkup(MarkupFormatter):
    """spectrwm bar_action markup: ``+@fg=N;value+@fg=0;``."""

    name = "spectrwm"

    def __init__(self, reset_color: int = 0) -> None:
        self.reset_color = reset_color

    def format(self, color: int, value: str) -> str:
        return f"+@fg={color};{value}+@fg={self.reset_color};"


class AnsiMarkup(MarkupFormatter):
    """256-color ANSI escapes, for terminals and tmux-style status lines."""

    name = "ansi"

    def format(self, color: int, value: str) -> str:
        if not value:
            return value
        return f"\033[38;5;{color}m{value}\033[0m"


class PlainMarkup(MarkupFormatter):
    """No color at all, just the value."""

    name = "plain"

    def format(self, color: int, value: str) -> str:
        return value


SPECTRWM = SpectrwmMarkup()

_MARKUPS: dict[str, MarkupFormatter] = {
    "spectrwm": SPECTRWM,
    "ansi": AnsiMarkup(),
    "plain": PlainMarkup(),
}


def get_markup(name: Optional[str]) -> MarkupFormatter:
    """Get a markup formatter by name.

    Args:
        name: Grammar name ("spectrwm", "ansi", "plain") or None for the default

    Returns:
        Markup formatter

    Raises:
        KeyError: If no grammar has that name
    """
    if not name:
        return SPECTRWM
    return _MARKUPS[name.lower()]
