"""Generic async Firestore repository for top-level collections."""

from __future__ import annotations

from typing import Generic, TypeVar, Type

from airzone.contracts.common import FirestoreModel
from airzone.persistence.firestore_client import get_firestore_client

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """CRUD for a Firestore collection at ``/{collection_name}/``.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods — no extra mapping layer.
    """

    def __init__(self, model_class: Type[T], collection_name: str):
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self):
        return get_firestore_client().collection(self._collection_name)

    def _hydrate(self, doc) -> T:
        data = doc.to_dict()
        data["id"] = doc.id
        return self._model_class.from_firestore(data)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        doc = await self._collection_ref().document(str(doc_id)).get()
        if not doc.exists:
            return None
        return self._hydrate(doc)

    async def list_all(self) -> list[T]:
        """Stream every document in the collection."""
        results: list[T] = []
        async for doc in self._collection_ref().stream():
            results.append(self._hydrate(doc))
        return results

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, entity: T) -> str:
        """Create a document.

        If ``to_firestore()`` includes an ``id`` key it is used as the
        document ID. Otherwise Firestore auto-generates one.

        Returns the document ID.
        """
        data = entity.to_firestore()
        doc_id = data.pop("id", None)
        if doc_id is not None:
            await self._collection_ref().document(str(doc_id)).set(data)
            return str(doc_id)
        ref = await self._collection_ref().add(data)
        return ref[1].id  # (write_result, doc_ref) tuple

    async def replace(self, doc_id: str, entity: T) -> None:
        """Overwrite a document with the entity's full state."""
        data = entity.to_firestore()
        data.pop("id", None)
        await self._collection_ref().document(str(doc_id)).set(data)

    async def delete(self, doc_id: str) -> None:
        """Delete a document."""
        await self._collection_ref().document(str(doc_id)).delete()
