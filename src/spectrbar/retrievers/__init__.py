"""Data retrievers.

Importing this module registers the built-in retrievers with the registry.
"""

from .base import DataRetriever
from .extern import ExternRetriever
from .file import FileRetriever
from .registry import get_all_retrievers, get_retriever_class, register_retriever

__all__ = [
    "DataRetriever",
    "ExternRetriever",
    "FileRetriever",
    "get_all_retrievers",
    "get_retriever_class",
    "register_retriever",
]
