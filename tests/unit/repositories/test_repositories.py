"""Tests for the document-store repositories."""

from datetime import datetime, timedelta, timezone

import pytest

from tests.conftest import BASE_TIME, Seed
from vetbooking.core.entities.appointment import AppointmentStatus, Role
from vetbooking.core.exceptions import StoreError
from vetbooking.infrastructure.stores.memory import InMemoryDocumentStore
from vetbooking.repositories import (
    AppointmentRepository,
    PetRepository,
    UserRepository,
    VeterinarianRepository,
)
from vetbooking.utils.ids import new_object_id

SLOT_DATE = datetime(2030, 3, 1, tzinfo=timezone.utc)


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_id_hides_password(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test lookups never return the password."""
        user = await UserRepository(store).find_by_id(seed.owner_id)

        assert user is not None
        assert user["name"] == "Alice"
        assert "password" not in user

    @pytest.mark.asyncio
    async def test_find_by_id_missing(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test an unknown id returns None."""
        assert await UserRepository(store).find_by_id(new_object_id()) is None

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test the email is lowercased before lookup."""
        user = await UserRepository(store).find_by_email("ALICE@Example.com")

        assert user is not None
        assert user["_id"] == seed.owner_id
        assert "password" not in user

    @pytest.mark.asyncio
    async def test_list_newest_first(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test listing sorts by creation time, newest first."""
        users = await UserRepository(store).list()

        assert [u["name"] for u in users] == ["Bob", "Alice"]
        assert all("password" not in u for u in users)

    @pytest.mark.asyncio
    async def test_list_limit(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test the limit caps the result size."""
        users = await UserRepository(store).list(limit=1)
        assert [u["name"] for u in users] == ["Bob"]


class TestPetRepository:
    """Tests for PetRepository."""

    @pytest.mark.asyncio
    async def test_list_by_owner_skips_inactive(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test soft-deleted pets are not listed."""
        pets = await PetRepository(store).list_by_owner(seed.owner_id)
        assert [p["_id"] for p in pets] == [seed.pet_id]

    @pytest.mark.asyncio
    async def test_list_by_owner_newest_first(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test pets are listed newest first."""
        repo = PetRepository(store)
        newer = await repo.create({
            "name": "Bella",
            "owner": seed.owner_id,
            "createdAt": BASE_TIME + timedelta(days=3),
        })

        pets = await repo.list_by_owner(seed.owner_id)

        assert [p["_id"] for p in pets] == [newer["_id"], seed.pet_id]

    @pytest.mark.asyncio
    async def test_create_defaults_active(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test new pets are active."""
        pet = await PetRepository(store).create({"name": "Bella", "owner": seed.owner_id})
        assert pet["isActive"] is True

    @pytest.mark.asyncio
    async def test_find_owned(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test ownership lookups are scoped to the owner and active pets."""
        repo = PetRepository(store)

        assert await repo.find_owned(seed.pet_id, seed.owner_id) is not None
        assert await repo.find_owned(seed.pet_id, seed.other_owner_id) is None
        assert await repo.find_owned(seed.inactive_pet_id, seed.owner_id) is None

    @pytest.mark.asyncio
    async def test_update_by_id(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test soft deletion through update_by_id."""
        repo = PetRepository(store)

        updated = await repo.update_by_id(seed.pet_id, {"isActive": False})

        assert updated is not None
        assert updated["isActive"] is False
        assert await repo.list_by_owner(seed.owner_id) == []


class TestVeterinarianRepository:
    """Tests for VeterinarianRepository."""

    @pytest.mark.asyncio
    async def test_find_by_id(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test lookup by id hides the password."""
        vet = await VeterinarianRepository(store).find_by_id(seed.unapproved_vet_id)

        assert vet is not None
        assert vet["name"] == "Dr. Novak"
        assert "password" not in vet

    @pytest.mark.asyncio
    async def test_find_approved(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test only approved veterinarians are found."""
        repo = VeterinarianRepository(store)

        assert await repo.find_approved(seed.vet_id) is not None
        assert await repo.find_approved(seed.unapproved_vet_id) is None

    @pytest.mark.asyncio
    async def test_list_approved(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test blocked and unapproved veterinarians are left out."""
        await store.insert_one("Veterinarian", {
            "name": "Dr. Blocked",
            "approvalStatus": "approved",
            "isBlocked": True,
        })

        vets = await VeterinarianRepository(store).list_approved()

        assert [v["_id"] for v in vets] == [seed.vet_id]
        assert "password" not in vets[0]


class TestAppointmentRepository:
    """Tests for AppointmentRepository."""

    async def _book(
        self,
        repo: AppointmentRepository,
        seed: Seed,
        date: datetime = SLOT_DATE,
        time: str = "10:00",
        **fields: object,
    ) -> dict:
        return await repo.create({
            "user": seed.owner_id,
            "pet": seed.pet_id,
            "veterinarian": seed.vet_id,
            "date": date,
            "time": time,
            "reason": "Checkup",
            **fields,
        })

    @pytest.mark.asyncio
    async def test_create_defaults_pending(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test new appointments start out PENDING and keep bare references."""
        appointment = await self._book(AppointmentRepository(store), seed)

        assert appointment["status"] == AppointmentStatus.PENDING.value
        assert appointment["user"] == seed.owner_id

    @pytest.mark.asyncio
    async def test_find_by_user_expands_and_sorts(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test listings are date descending with summaries expanded."""
        repo = AppointmentRepository(store)
        early = await self._book(repo, seed, date=SLOT_DATE)
        late = await self._book(repo, seed, date=SLOT_DATE + timedelta(days=7))

        appointments = await repo.find_by_user(seed.owner_id)

        assert [a["_id"] for a in appointments] == [late["_id"], early["_id"]]
        first = appointments[0]
        assert first["user"] == {
            "_id": seed.owner_id,
            "name": "Alice",
            "email": "alice@example.com",
            "contact": "555-0100",
        }
        assert first["pet"] == {
            "_id": seed.pet_id,
            "name": "Rex",
            "type": "Dog",
            "breed": "Beagle",
            "age": "4",
            "weight": 12.5,
        }
        assert first["veterinarian"] == {
            "_id": seed.vet_id,
            "name": "Dr. Vega",
            "email": "vega@clinic.example",
            "specialization": "Surgery",
        }

    @pytest.mark.asyncio
    async def test_find_by_user_is_scoped(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test another user's listing does not include the appointment."""
        repo = AppointmentRepository(store)
        await self._book(repo, seed)

        assert await repo.find_by_user(seed.other_owner_id) == []
        assert len(await repo.find_by_veterinarian(seed.vet_id)) == 1

    @pytest.mark.asyncio
    async def test_missing_reference_expands_to_none(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test a dangling reference becomes None."""
        repo = AppointmentRepository(store)
        await self._book(repo, seed, pet=new_object_id())

        appointments = await repo.find_by_user(seed.owner_id)

        assert appointments[0]["pet"] is None

    @pytest.mark.asyncio
    async def test_find_by_id_for_role(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test by-id lookups are scoped by role and use detail views."""
        repo = AppointmentRepository(store)
        booked = await self._book(repo, seed)

        as_user = await repo.find_by_id_for_role(booked["_id"], seed.owner_id, Role.USER)
        as_vet = await repo.find_by_id_for_role(
            booked["_id"], seed.vet_id, Role.VETERINARIAN
        )

        assert as_user is not None
        assert as_vet is not None
        assert as_user["pet"]["color"] == "Tricolor"
        assert as_user["pet"]["medicalHistory"] == "None"
        assert as_user["veterinarian"]["experience"] == 12
        assert as_user["veterinarian"]["consultationFeeRange"] == {"min": 50, "max": 120}

    @pytest.mark.asyncio
    async def test_find_by_id_for_role_wrong_party(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test other users and mismatched roles see nothing."""
        repo = AppointmentRepository(store)
        booked = await self._book(repo, seed)

        assert await repo.find_by_id_for_role(
            booked["_id"], seed.other_owner_id, Role.USER
        ) is None
        assert await repo.find_by_id_for_role(
            booked["_id"], seed.owner_id, Role.VETERINARIAN
        ) is None

    @pytest.mark.asyncio
    async def test_find_conflict(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test a live booking in the same slot is found."""
        repo = AppointmentRepository(store)
        booked = await self._book(repo, seed)

        conflict = await repo.find_conflict(seed.vet_id, SLOT_DATE, "10:00")

        assert conflict is not None
        assert conflict["_id"] == booked["_id"]
        assert await repo.find_conflict(seed.vet_id, SLOT_DATE, "11:00") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status", [AppointmentStatus.CANCELLED, AppointmentStatus.REJECTED]
    )
    async def test_find_conflict_ignores_terminal(
        self,
        store: InMemoryDocumentStore,
        seed: Seed,
        status: AppointmentStatus,
    ) -> None:
        """Test cancelled and rejected bookings free the slot."""
        repo = AppointmentRepository(store)
        await self._book(repo, seed, status=status.value)

        assert await repo.find_conflict(seed.vet_id, SLOT_DATE, "10:00") is None

    @pytest.mark.asyncio
    async def test_find_conflict_excludes_self(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test the excluded appointment does not conflict with itself."""
        repo = AppointmentRepository(store)
        booked = await self._book(repo, seed)

        assert await repo.find_conflict(
            seed.vet_id, SLOT_DATE, "10:00", exclude_id=booked["_id"]
        ) is None

    @pytest.mark.asyncio
    async def test_find_conflict_ignores_malformed_exclude_id(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test a malformed exclude id is not applied."""
        repo = AppointmentRepository(store)
        await self._book(repo, seed)

        assert await repo.find_conflict(
            seed.vet_id, SLOT_DATE, "10:00", exclude_id="not-an-id"
        ) is not None

    @pytest.mark.asyncio
    async def test_update_by_id(self, store: InMemoryDocumentStore, seed: Seed) -> None:
        """Test updates return the expanded record."""
        repo = AppointmentRepository(store)
        booked = await self._book(repo, seed)

        updated = await repo.update_by_id(
            booked["_id"], {"status": AppointmentStatus.APPROVED.value}
        )

        assert updated is not None
        assert updated["status"] == AppointmentStatus.APPROVED.value
        assert updated["user"]["name"] == "Alice"

    @pytest.mark.asyncio
    async def test_update_by_id_missing(
        self, store: InMemoryDocumentStore, seed: Seed
    ) -> None:
        """Test updating an unknown appointment returns None."""
        repo = AppointmentRepository(store)
        assert await repo.update_by_id(new_object_id(), {"status": "APPROVED"}) is None


class FailingStore(InMemoryDocumentStore):
    """Store whose reads always fail."""

    async def find(self, *args: object, **kwargs: object) -> list:  # type: ignore[override]
        raise StoreError("connection lost")


class TestStoreErrors:
    """Tests for store error propagation."""

    @pytest.mark.asyncio
    async def test_store_error_propagates(self) -> None:
        """Test repositories pass store errors through unchanged."""
        with pytest.raises(StoreError, match="connection lost"):
            await AppointmentRepository(FailingStore()).find_by_user(new_object_id())
