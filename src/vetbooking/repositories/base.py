"""Shared plumbing for the document-store repositories."""

from collections.abc import Sequence

from vetbooking.core.interfaces.document_store import IDocumentStore
from vetbooking.core.types import Document, Projection
from vetbooking.utils.ids import ref_id

USER_COLLECTION = "User"
PET_COLLECTION = "Pet"
APPOINTMENT_COLLECTION = "Appointment"
VETERINARIAN_COLLECTION = "Veterinarian"

# Credentials never leave the repositories
WITHOUT_PASSWORD: Projection = {"password": 0}

NEWEST_FIRST = [("createdAt", -1)]


class BaseRepository:
    """Stateless façade over one collection of a document store."""

    collection: str

    def __init__(self, store: IDocumentStore) -> None:
        """Initialize the repository.

        Args:
            store: The document store to query.
        """
        self._store = store

    async def _expand(
        self,
        documents: Sequence[Document],
        field: str,
        collection: str,
        fields: Sequence[str],
    ) -> None:
        """Replace a reference field with a summary of the referenced document.

        References that no longer resolve become None. Documents are
        modified in place.

        Args:
            documents: Documents holding the reference.
            field: Name of the reference field.
            collection: Collection the reference points into.
            fields: Fields of the referenced document to keep.
        """
        ids = {ref_id(doc.get(field)) for doc in documents} - {None}
        related: dict[str, Document] = {}
        if ids:
            found = await self._store.find(
                collection,
                {"_id": {"$in": sorted(ids)}},
                projection={name: 1 for name in fields},
            )
            related = {doc["_id"]: doc for doc in found}

        for doc in documents:
            target = ref_id(doc.get(field))
            doc[field] = related.get(target) if target is not None else None
