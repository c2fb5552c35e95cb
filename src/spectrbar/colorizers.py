"""Color rules mapping sampled values to host color codes.

Colors are small integers (typically an 8-bit palette index) whose meaning
is defined by the host renderer, not interpreted here.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .types import Data, Number

# Global registry of colorizer kind -> colorizer class
_COLORIZER_REGISTRY: dict[str, type["Colorizer"]] = {}


def register_colorizer(kind: str) -> Callable[[type["Colorizer"]], type["Colorizer"]]:
    """Decorator to register colorizer classes under a kind name."""

    def decorator(cls: type["Colorizer"]) -> type["Colorizer"]:
        cls.kind = kind
        _COLORIZER_REGISTRY[kind] = cls
        return cls

    return decorator


def get_colorizer_class(kind: str) -> Optional[type["Colorizer"]]:
    """Get colorizer class by kind name, or None if not registered."""
    return _COLORIZER_REGISTRY.get(kind)


class Colorizer(ABC):
    """Strategy choosing a color for a sampled value. Must be side-effect free."""

    kind: str = ""

    @abstractmethod
    def get_color(self, data: Data) -> int:
        pass


@register_colorizer("constant")
class ConstantColorizer(Colorizer):
    """Always the same color, whatever the value."""

    def __init__(self, color: int) -> None:
        self.color = color

    def get_color(self, data: Data) -> int:
        return self.color

    def __repr__(self) -> str:
        return f"ConstantColorizer({self.color})"


@register_colorizer("binary")
class BinaryColorizer(Colorizer):
    """Null color when the displayed value equals null_value, active color otherwise.

    The comparison is made on the value's text rendering, so
    ``BinaryColorizer(0, 1, "0")`` treats both Number(0) and Text("0") as null.
    """

    def __init__(self, null_color: int, active_color: int, null_value: str) -> None:
        self.null_color = null_color
        self.active_color = active_color
        self.null_value = null_value

    def get_color(self, data: Data) -> int:
        if str(data) == self.null_value:
            return self.null_color
        return self.active_color

    def __repr__(self) -> str:
        return (
            f"BinaryColorizer({self.null_color}, {self.active_color}, "
            f"{self.null_value!r})"
        )


@register_colorizer("trinary")
class TrinaryColorizer(Colorizer):
    """Three colors split by two thresholds.

    Numbers below low_threshold get low_color, numbers below mid_threshold
    get mid_color, everything else gets high_color. Text (and unavailable
    numbers) always get mid_color.

    Thresholds are not checked against each other: with
    low_threshold >= mid_threshold the middle range is empty.
    """

    def __init__(
        self,
        low_color: int,
        mid_color: int,
        high_color: int,
        low_threshold: int,
        mid_threshold: int,
    ) -> None:
        self.low_color = low_color
        self.mid_color = mid_color
        self.high_color = high_color
        self.low_threshold = low_threshold
        self.mid_threshold = mid_threshold

    def get_color(self, data: Data) -> int:
        if not isinstance(data, Number) or not data.available:
            return self.mid_color
        if data.value < self.low_threshold:
            return self.low_color
        elif data.value < self.mid_threshold:
            return self.mid_color
        else:
            return self.high_color

    def __repr__(self) -> str:
        return (
            f"TrinaryColorizer({self.low_color}, {self.mid_color}, "
            f"{self.high_color}, {self.low_threshold}, {self.mid_threshold})"
        )
