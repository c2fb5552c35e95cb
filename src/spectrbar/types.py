"""Data types for sampled widget values."""

from dataclasses import dataclass

# Displayed in place of a value whose source could not be read
UNAVAILABLE = "N/A"


@dataclass(frozen=True)
class Data:
    """A sampled widget value, either a Number or a Text.

    Which variant a retriever produces depends only on the widget's numeric
    flag, never on what the source happened to return. A value marked
    ``available=False`` is the degraded placeholder produced when the source
    could not be read.
    """

    available: bool = True

    @property
    def is_numeric(self) -> bool:
        return isinstance(self, Number)

    @staticmethod
    def new(is_numeric: bool) -> "Data":
        """Default value: Number(0) in numeric mode, empty Text otherwise."""
        if is_numeric:
            return Number(0)
        return Text("")

    @staticmethod
    def unavailable(is_numeric: bool) -> "Data":
        """Degraded placeholder returned when a source cannot be read.

        Compares unequal to the valid default and displays as ``N/A``.
        """
        if is_numeric:
            return Number(0, available=False)
        return Text("", available=False)


@dataclass(frozen=True, init=False)
class Number(Data):
    """Whole number value."""

    value: int = 0

    def __init__(self, value: int = 0, available: bool = True) -> None:
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "available", available)

    def __str__(self) -> str:
        if not self.available:
            return UNAVAILABLE
        return str(self.value)


@dataclass(frozen=True, init=False)
class Text(Data):
    """Free text value, displayed verbatim."""

    value: str = ""

    def __init__(self, value: str = "", available: bool = True) -> None:
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "available", available)

    def __str__(self) -> str:
        if not self.available:
            return UNAVAILABLE
        return self.value
