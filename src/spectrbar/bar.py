"""Ordered collection of widgets rendered as one line."""

import time

from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional

from .colorizers import Colorizer
from .errors import NumericParseError
from .markup import SPECTRWM, MarkupFormatter
from .retrievers.base import DataRetriever
from .types import Data
from .utils.debug import debug_log
from .widget import Widget

DEFAULT_SEPARATOR = " | "

# Upper bound on threads used by parallel rendering
MAX_WORKERS = 8


class Bar:
    """Widgets in display order, left to right.

    Every widget is followed by the separator, including the last one, so a
    two-widget bar renders as ``"a: ... | b: ... | "``. Widgets can only be
    appended.
    """

    def __init__(
        self,
        markup: Optional[MarkupFormatter] = None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.markup = markup or SPECTRWM
        self.separator = separator
        self._widgets: list[Widget] = []

    def add_widget(
        self,
        id: str,
        retriever: DataRetriever,
        colorizer: Colorizer,
        is_numeric: bool = False,
    ) -> Widget:
        """Create a widget and append it to the bar.

        Identifiers need not be unique; duplicates render independently.

        Returns:
            The new widget
        """
        widget = Widget(id, retriever, colorizer, is_numeric)
        self._widgets.append(widget)
        return widget

    @property
    def widgets(self) -> tuple[Widget, ...]:
        return tuple(self._widgets)

    def _render_widget(self, widget: Widget) -> str:
        """Render one widget, substituting the placeholder on a parse failure."""
        start = time.monotonic()
        try:
            rendered = widget.render(self.markup)
        except NumericParseError as e:
            debug_log(f"Numeric parse failed: {e}", widget.id)
            rendered = widget.render_data(
                Data.unavailable(widget.is_numeric), self.markup
            )
        debug_log(f"Rendered in {time.monotonic() - start:.3f}s", widget.id)
        return rendered

    def render(self, parallel: bool = False) -> str:
        """Render every widget and join them with the separator.

        Args:
            parallel: Sample widgets concurrently; output order is unchanged

        Returns:
            Bar markup string
        """
        if parallel and len(self._widgets) > 1:
            with ThreadPoolExecutor(
                max_workers=min(len(self._widgets), MAX_WORKERS)
            ) as executor:
                rendered = list(executor.map(self._render_widget, self._widgets))
        else:
            rendered = [self._render_widget(w) for w in self._widgets]

        return "".join(r + self.separator for r in rendered)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[Widget]:
        return iter(self._widgets)
