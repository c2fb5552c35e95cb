"""Build bars from declarative configuration."""

from typing import Any, Union

from ..bar import Bar
from ..colorizers import Colorizer, get_colorizer_class
from ..markup import get_markup
from ..retrievers import DataRetriever, ExternRetriever, get_retriever_class
from .schema import BarConfig, WidgetConfigModel


def build_retriever(widget_config: WidgetConfigModel) -> DataRetriever:
    """Create the retriever described by a widget configuration."""
    retriever_cls = get_retriever_class(widget_config.source)
    if retriever_cls is None:
        raise ValueError(f"Unknown source kind: {widget_config.source}")

    if retriever_cls is ExternRetriever:
        return ExternRetriever(widget_config.target, timeout=widget_config.timeout)
    return retriever_cls(widget_config.target)  # type: ignore[call-arg]


def build_colorizer(widget_config: WidgetConfigModel) -> Colorizer:
    """Create the colorizer described by a widget configuration."""
    params = widget_config.colorizer.model_dump()
    kind = params.pop("type")

    colorizer_cls = get_colorizer_class(kind)
    if colorizer_cls is None:
        raise ValueError(f"Unknown colorizer kind: {kind}")
    return colorizer_cls(**params)


def build_bar(config: Union[BarConfig, dict[str, Any]]) -> Bar:
    """Build a Bar from a BarConfig or a plain dictionary.

    Args:
        config: Bar configuration; dictionaries are validated first

    Returns:
        Bar with one widget per configured entry, in order

    Raises:
        pydantic.ValidationError: If a dictionary config is invalid
    """
    if not isinstance(config, BarConfig):
        config = BarConfig(**config)

    bar = Bar(markup=get_markup(config.markup), separator=config.separator)
    for widget_config in config.widgets:
        bar.add_widget(
            widget_config.id,
            build_retriever(widget_config),
            build_colorizer(widget_config),
            widget_config.numeric,
        )
    return bar
