"""Cache backends."""

from vetbooking.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
