"""Retriever sampling the first line of a file."""

from ..parsers.digits import to_data
from ..types import Data
from ..utils.debug import debug_log
from .base import DataRetriever
from .registry import register_retriever


@register_retriever("file")
class FileRetriever(DataRetriever):
    """Sample the first line of a file such as /sys/class/power_supply/BAT0/capacity."""

    def __init__(self, path: str) -> None:
        self.path = path

    def describe(self) -> str:
        return self.path

    def retrieve(self, is_numeric: bool) -> Data:
        """Read the first line and parse it.

        A missing final newline is fine; only the first line is read and the
        handle is closed right after.
        """
        try:
            with open(self.path, encoding="utf-8", errors="replace") as f:
                line = f.readline()
        except (OSError, ValueError) as e:
            debug_log(f"Failed to read {self.path}: {e}")
            return Data.unavailable(is_numeric)

        return to_data(line, is_numeric, self.describe())
