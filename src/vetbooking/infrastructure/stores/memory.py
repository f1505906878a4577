"""In-memory document store implementation."""

import copy
from collections.abc import Callable
from datetime import datetime
from typing import Any

from vetbooking.core.exceptions import StoreError
from vetbooking.core.types import Document, Filter, Projection, SortSpec
from vetbooking.utils.dates import utcnow
from vetbooking.utils.ids import new_object_id

_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "$eq": lambda value, arg: value == arg,
    "$ne": lambda value, arg: value != arg,
    "$in": lambda value, arg: value in arg,
    "$nin": lambda value, arg: value not in arg,
    "$gt": lambda value, arg: value is not None and value > arg,
    "$gte": lambda value, arg: value is not None and value >= arg,
    "$lt": lambda value, arg: value is not None and value < arg,
    "$lte": lambda value, arg: value is not None and value <= arg,
}


def matches(document: Document, filter: Filter) -> bool:
    """Check a document against a Mongo-style filter.

    Args:
        document: The document to test.
        filter: Mapping of field to either a literal (equality) or an
            operator document such as ``{"$nin": [...]}``.

    Returns:
        True if every condition holds.

    Raises:
        StoreError: If the filter uses an unsupported operator.
    """
    for field, condition in filter.items():
        value = document.get(field)
        if isinstance(condition, dict) and condition and all(
            op.startswith("$") for op in condition
        ):
            for op, arg in condition.items():
                try:
                    check = _OPERATORS[op]
                except KeyError:
                    raise StoreError(f"Unsupported query operator: {op}") from None
                if not check(value, arg):
                    return False
        elif value != condition:
            return False
    return True


def project(document: Document, projection: Projection | None) -> Document:
    """Apply an inclusion or exclusion projection to a document copy."""
    if not projection:
        return copy.deepcopy(document)
    if any(projection.values()):
        fields = {"_id", *(name for name, flag in projection.items() if flag)}
        return {k: copy.deepcopy(v) for k, v in document.items() if k in fields}
    return {
        k: copy.deepcopy(v) for k, v in document.items() if k not in projection
    }


def _sort(documents: list[Document], sort: SortSpec) -> list[Document]:
    # Apply keys from least to most significant; sorted() is stable
    for field, direction in reversed(sort):
        documents = sorted(
            documents,
            key=lambda doc: (doc.get(field) is not None, doc.get(field)),
            reverse=direction < 0,
        )
    return documents


class InMemoryDocumentStore:
    """Document store kept in process memory.

    Implements the query subset the repositories rely on. Intended for
    development and tests; every read returns deep copies so callers
    can never mutate stored documents.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        """Initialize the store.

        Args:
            clock: Source of ``createdAt``/``updatedAt`` timestamps.
        """
        self._clock = clock
        self._collections: dict[str, list[Document]] = {}

    def _collection(self, name: str) -> list[Document]:
        return self._collections.setdefault(name, [])

    async def find(
        self,
        collection: str,
        filter: Filter,
        *,
        projection: Projection | None = None,
        sort: SortSpec | None = None,
        limit: int | None = None,
    ) -> list[Document]:
        """Return all documents matching the filter."""
        found = [doc for doc in self._collection(collection) if matches(doc, filter)]
        if sort:
            found = _sort(found, sort)
        if limit is not None:
            found = found[:limit]
        return [project(doc, projection) for doc in found]

    async def find_one(
        self,
        collection: str,
        filter: Filter,
        *,
        projection: Projection | None = None,
    ) -> Document | None:
        """Return the first document matching the filter, or None."""
        for doc in self._collection(collection):
            if matches(doc, filter):
                return project(doc, projection)
        return None

    async def insert_one(self, collection: str, document: Document) -> Document:
        """Insert a document and return the stored copy.

        Raises:
            StoreError: If a document with the same ``_id`` exists.
        """
        docs = self._collection(collection)
        stored = copy.deepcopy(document)
        stored.setdefault("_id", new_object_id())
        if any(doc["_id"] == stored["_id"] for doc in docs):
            raise StoreError(f"Duplicate _id {stored['_id']} in {collection}")
        now = self._clock()
        stored.setdefault("createdAt", now)
        stored.setdefault("updatedAt", now)
        docs.append(stored)
        return copy.deepcopy(stored)

    async def update_one(
        self,
        collection: str,
        filter: Filter,
        changes: Document,
    ) -> Document | None:
        """Set the given fields on the first match and return it."""
        for doc in self._collection(collection):
            if matches(doc, filter):
                doc.update(copy.deepcopy(changes))
                doc["updatedAt"] = self._clock()
                return copy.deepcopy(doc)
        return None

    def count(self, collection: str) -> int:
        """Return the number of documents in a collection."""
        return len(self._collection(collection))
