"""Retriever registry for building retrievers by kind name."""

from typing import Callable, Optional

from .base import DataRetriever

# Global registry of retriever kind -> retriever class
_RETRIEVER_REGISTRY: dict[str, type[DataRetriever]] = {}


def register_retriever(
    kind: str,
) -> Callable[[type[DataRetriever]], type[DataRetriever]]:
    """Decorator to register retriever classes under a kind name.

    Usage:
        @register_retriever("file")
        class FileRetriever(DataRetriever):
            ...

    Args:
        kind: Source kind identifier (e.g., "extern", "file")
    """

    def decorator(cls: type[DataRetriever]) -> type[DataRetriever]:
        cls.kind = kind
        _RETRIEVER_REGISTRY[kind] = cls
        return cls

    return decorator


def get_retriever_class(kind: str) -> Optional[type[DataRetriever]]:
    """Get retriever class by kind name, or None if not registered."""
    return _RETRIEVER_REGISTRY.get(kind)


def get_all_retrievers() -> dict[str, type[DataRetriever]]:
    """Get all registered retriever classes keyed by kind."""
    return dict(_RETRIEVER_REGISTRY)
