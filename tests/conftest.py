"""Pytest configuration for vetbooking tests."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from vetbooking.infrastructure.backends.memory import InMemoryCacheBackend
from vetbooking.infrastructure.stores.memory import InMemoryDocumentStore
from vetbooking.utils.ids import new_object_id

BASE_TIME = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeTimer:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class Seed:
    """Ids of the documents loaded into the seeded store."""

    owner_id: str
    other_owner_id: str
    vet_id: str
    unapproved_vet_id: str
    pet_id: str
    inactive_pet_id: str


@pytest.fixture
def timer() -> FakeTimer:
    """Create a fake timer starting at a fixed reading."""
    return FakeTimer()


@pytest.fixture
def backend(timer: FakeTimer) -> InMemoryCacheBackend:
    """Create a cache backend driven by the fake timer."""
    return InMemoryCacheBackend(maxsize=100, default_ttl=60.0, timer=timer)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Create an empty document store."""
    return InMemoryDocumentStore()


@pytest_asyncio.fixture
async def seed(store: InMemoryDocumentStore) -> Seed:
    """Load two owners, two veterinarians and two pets."""
    owner_id = new_object_id()
    other_owner_id = new_object_id()
    vet_id = new_object_id()
    unapproved_vet_id = new_object_id()
    pet_id = new_object_id()
    inactive_pet_id = new_object_id()

    await store.insert_one("User", {
        "_id": owner_id,
        "name": "Alice",
        "email": "alice@example.com",
        "contact": "555-0100",
        "password": "hashed",
        "createdAt": BASE_TIME,
    })
    await store.insert_one("User", {
        "_id": other_owner_id,
        "name": "Bob",
        "email": "bob@example.com",
        "contact": "555-0101",
        "password": "hashed",
        "createdAt": BASE_TIME + timedelta(days=1),
    })
    await store.insert_one("Veterinarian", {
        "_id": vet_id,
        "name": "Dr. Vega",
        "email": "vega@clinic.example",
        "specialization": "Surgery",
        "experience": 12,
        "consultationFeeRange": {"min": 50, "max": 120},
        "password": "hashed",
        "isApproved": True,
        "approvalStatus": "approved",
        "isBlocked": False,
        "createdAt": BASE_TIME,
    })
    await store.insert_one("Veterinarian", {
        "_id": unapproved_vet_id,
        "name": "Dr. Novak",
        "email": "novak@clinic.example",
        "specialization": "Dermatology",
        "password": "hashed",
        "isApproved": False,
        "approvalStatus": "pending",
        "isBlocked": False,
        "createdAt": BASE_TIME + timedelta(days=1),
    })
    await store.insert_one("Pet", {
        "_id": pet_id,
        "name": "Rex",
        "type": "Dog",
        "breed": "Beagle",
        "age": "4",
        "weight": 12.5,
        "color": "Tricolor",
        "medicalHistory": "None",
        "owner": owner_id,
        "isActive": True,
        "createdAt": BASE_TIME,
    })
    await store.insert_one("Pet", {
        "_id": inactive_pet_id,
        "name": "Old Tom",
        "type": "Cat",
        "owner": owner_id,
        "isActive": False,
        "createdAt": BASE_TIME + timedelta(days=1),
    })

    return Seed(
        owner_id=owner_id,
        other_owner_id=other_owner_id,
        vet_id=vet_id,
        unapproved_vet_id=unapproved_vet_id,
        pet_id=pet_id,
        inactive_pet_id=inactive_pet_id,
    )
