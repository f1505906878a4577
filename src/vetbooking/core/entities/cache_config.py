"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides the TTLs used by the cached repositories, the size bound of
    the in-memory backend, and feature toggles.

    Appointment lookups change often, so they use a shorter TTL than
    user and pet lookups.
    """

    enabled: bool = True
    max_size: int = 1000
    default_ttl: timedelta | None = None

    # Per-repository TTLs
    appointment_ttl: timedelta | None = None
    user_ttl: timedelta | None = None
    pet_ttl: timedelta | None = None

    # Share one backing fetch between concurrent misses for the same key
    single_flight: bool = True

    def __post_init__(self) -> None:
        """Fill in TTL defaults that were not provided."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(seconds=60)
        if self.appointment_ttl is None:
            self.appointment_ttl = timedelta(seconds=30)
        if self.user_ttl is None:
            self.user_ttl = timedelta(seconds=60)
        if self.pet_ttl is None:
            self.pet_ttl = timedelta(seconds=60)
