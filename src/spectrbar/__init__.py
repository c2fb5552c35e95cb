"""spectrbar - widget based status bar text for panel renderers."""

from .bar import Bar
from .colorizers import BinaryColorizer, Colorizer, ConstantColorizer, TrinaryColorizer
from .errors import NumericParseError, SpectrbarError
from .markup import AnsiMarkup, MarkupFormatter, PlainMarkup, SpectrwmMarkup
from .retrievers import DataRetriever, ExternRetriever, FileRetriever
from .types import Data, Number, Text
from .widget import Widget

__version__ = "0.3.0"

__all__ = [
    "Bar",
    "Widget",
    "Data",
    "Number",
    "Text",
    "DataRetriever",
    "ExternRetriever",
    "FileRetriever",
    "Colorizer",
    "ConstantColorizer",
    "BinaryColorizer",
    "TrinaryColorizer",
    "MarkupFormatter",
    "SpectrwmMarkup",
    "AnsiMarkup",
    "PlainMarkup",
    "SpectrbarError",
    "NumericParseError",
]
