"""Document stores."""

from vetbooking.infrastructure.stores.memory import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
