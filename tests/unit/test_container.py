"""Tests for the composition root."""

from datetime import timedelta

from vetbooking import (
    CacheConfig,
    CachedAppointmentRepository,
    InMemoryCacheBackend,
    InMemoryDocumentStore,
    VeterinarianRepository,
    build_repositories,
)


class TestBuildRepositories:
    """Tests for build_repositories."""

    def test_defaults(self) -> None:
        """Test the default wiring."""
        repos = build_repositories(InMemoryDocumentStore())

        assert isinstance(repos.cache, InMemoryCacheBackend)
        assert isinstance(repos.appointments, CachedAppointmentRepository)
        assert isinstance(repos.veterinarians, VeterinarianRepository)
        assert repos.appointments.ttl == timedelta(seconds=30)
        assert repos.pets.ttl == timedelta(seconds=60)
        assert repos.users.ttl == timedelta(seconds=60)

    def test_config_sizes_backend(self) -> None:
        """Test the backend is sized from the config."""
        repos = build_repositories(
            InMemoryDocumentStore(), config=CacheConfig(max_size=10)
        )

        assert isinstance(repos.cache, InMemoryCacheBackend)
        assert repos.cache.maxsize == 10

    def test_custom_backend_is_shared(self) -> None:
        """Test every repository uses the injected backend."""
        backend = InMemoryCacheBackend(maxsize=5)
        repos = build_repositories(InMemoryDocumentStore(), backend=backend)

        assert repos.cache is backend
        assert repos.users._backend is backend
        assert repos.pets._backend is backend
        assert repos.appointments._backend is backend

    def test_separate_roots_do_not_share_cache(self) -> None:
        """Test two composition roots hold independent caches."""
        store = InMemoryDocumentStore()
        assert build_repositories(store).cache is not build_repositories(store).cache
