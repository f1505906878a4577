"""Infrastructure layer implementations for vetbooking."""

from vetbooking.infrastructure.backends import InMemoryCacheBackend
from vetbooking.infrastructure.key_builders import DefaultKeyBuilder
from vetbooking.infrastructure.stores import InMemoryDocumentStore

__all__ = [
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "InMemoryDocumentStore",
]
