"""Declarative bar configuration."""

from .builder import build_bar, build_colorizer, build_retriever
from .defaults import get_default_config
from .schema import BarConfig, WidgetConfigModel

__all__ = [
    "BarConfig",
    "WidgetConfigModel",
    "build_bar",
    "build_colorizer",
    "build_retriever",
    "get_default_config",
]
