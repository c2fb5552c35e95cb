"""Base retriever interface for widget data sources."""

from abc import ABC, abstractmethod

from ..types import Data


class DataRetriever(ABC):
    """Strategy that samples one source and converts it to a Data value.

    Retrievers hold only a static source descriptor; every call to
    retrieve() re-acquires the source from scratch.
    """

    # Class attribute set by @register_retriever decorator
    kind: str = ""

    @abstractmethod
    def retrieve(self, is_numeric: bool) -> Data:
        """Sample the source.

        Args:
            is_numeric: Parse the sample as an integer instead of keeping text

        Returns:
            Sampled value, or Data.unavailable() if the source cannot be read

        Raises:
            NumericParseError: If numeric parsing finds no usable integer
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human readable description of the source for logs and errors."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"
