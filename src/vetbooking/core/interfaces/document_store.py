"""Document store interface."""

from typing import Protocol

from vetbooking.core.types import Document, Filter, Projection, SortSpec


class IDocumentStore(Protocol):
    """Contract for the document database the repositories query.

    Filters use the Mongo query subset: equality, ``$ne``, ``$in`` and
    ``$nin``. Implementations raise ``StoreError`` on failure and assign
    ``_id``, ``createdAt`` and ``updatedAt`` on write.
    """

    async def find(
        self,
        collection: str,
        filter: Filter,
        *,
        projection: Projection | None = None,
        sort: SortSpec | None = None,
        limit: int | None = None,
    ) -> list[Document]:
        """Return all documents matching the filter.

        Args:
            collection: Collection name (e.g. ``Appointment``).
            filter: Query filter.
            projection: Fields to include (1) or exclude (0).
            sort: ``(field, direction)`` pairs, 1 ascending, -1 descending.
            limit: Maximum number of documents to return.

        Returns:
            Copies of the matching documents.
        """
        ...

    async def find_one(
        self,
        collection: str,
        filter: Filter,
        *,
        projection: Projection | None = None,
    ) -> Document | None:
        """Return the first document matching the filter, or None."""
        ...

    async def insert_one(self, collection: str, document: Document) -> Document:
        """Insert a document and return the stored copy."""
        ...

    async def update_one(
        self,
        collection: str,
        filter: Filter,
        changes: Document,
    ) -> Document | None:
        """Apply field changes to the first match.

        Returns:
            The updated document, or None if nothing matched.
        """
        ...
