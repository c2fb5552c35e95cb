"""A single labeled, colorized status value."""

from typing import Optional

from .colorizers import Colorizer
from .markup import SPECTRWM, MarkupFormatter
from .retrievers.base import DataRetriever
from .types import Data


class Widget:
    """Binds an identifier to a retriever, a colorizer and a numeric flag.

    Nothing is sampled at construction; every render() re-reads the source.
    """

    __slots__ = ("_id", "_retriever", "_colorizer", "_is_numeric")

    def __init__(
        self,
        id: str,
        retriever: DataRetriever,
        colorizer: Colorizer,
        is_numeric: bool = False,
    ) -> None:
        self._id = id
        self._retriever = retriever
        self._colorizer = colorizer
        self._is_numeric = is_numeric

    @property
    def id(self) -> str:
        return self._id

    @property
    def retriever(self) -> DataRetriever:
        return self._retriever

    @property
    def colorizer(self) -> Colorizer:
        return self._colorizer

    @property
    def is_numeric(self) -> bool:
        return self._is_numeric

    def update(self) -> Data:
        """Sample the widget's source.

        Raises:
            NumericParseError: If a numeric widget's source has no usable integer
        """
        return self._retriever.retrieve(self._is_numeric)

    def render_data(self, data: Data, markup: Optional[MarkupFormatter] = None) -> str:
        """Format an already sampled value as ``id: <markup(color, value)>``."""
        markup = markup or SPECTRWM
        color = self._colorizer.get_color(data)
        return f"{self._id}: {markup.format(color, str(data))}"

    def render(self, markup: Optional[MarkupFormatter] = None) -> str:
        """Sample the source and format it.

        Args:
            markup: Host markup grammar, spectrwm by default

        Returns:
            Rendered widget

        Raises:
            NumericParseError: If a numeric widget's source has no usable integer
        """
        return self.render_data(self.update(), markup)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Widget({self._id!r}, {self._retriever!r}, {self._colorizer!r}, "
            f"is_numeric={self._is_numeric})"
        )
