"""
Document store interface and in-memory implementation.

A document store keeps schemaless records in named collections, keyed by
string ids. Repositories depend only on this interface, so the backend can be
MongoDB in production and memory in development and tests.
"""
import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from worklog.core.errors import StoreError
from worklog.utils.id_handler import IdHandler


class DocumentSnapshot:
    """
    Read-only view of one stored document.

    Args:
        id: Document id
        data: Document fields (without the id)
        exists: Whether the document exists
    """

    def __init__(self, id: str, data: Optional[Dict[str, Any]], exists: bool = True):
        self.id = id
        self.exists = exists
        self._data = data or {}

    def data(self) -> Dict[str, Any]:
        """Return a copy of the document fields."""
        return dict(self._data)

    def __repr__(self) -> str:
        return f"DocumentSnapshot(id={self.id!r}, exists={self.exists})"


class DocumentStore(ABC):
    """
    Asynchronous create/read/update/delete over named collections.
    """

    @abstractmethod
    async def create_document(self, collection: str, data: Dict[str, Any], id: Optional[str] = None) -> str:
        """
        Create a document.

        Args:
            collection: Collection name
            data: Document fields
            id: Optional document id; generated when omitted

        Returns:
            Id of the created document
        """

    @abstractmethod
    async def get_documents(self, collection: str) -> List[DocumentSnapshot]:
        """Return every document in a collection, in store iteration order."""

    @abstractmethod
    async def get_document_by_id(self, collection: str, id: str) -> Optional[DocumentSnapshot]:
        """Return one document, or None if it does not exist."""

    @abstractmethod
    async def update_document(self, collection: str, id: str, data: Dict[str, Any]) -> None:
        """Merge the given fields into an existing document."""

    @abstractmethod
    async def delete_document(self, collection: str, id: str) -> None:
        """Delete a document."""


class InMemoryDocumentStore(DocumentStore):
    """
    Document store kept in process memory.
    Collections preserve insertion order. Stored data is copied on the way in
    and out so callers never share mutable state with the store.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def _collection(self, name: str) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(name, {})

    async def create_document(self, collection: str, data: Dict[str, Any], id: Optional[str] = None) -> str:
        document_id = id or IdHandler.generate_id()
        self._collection(collection)[document_id] = copy.deepcopy(data)
        return document_id

    async def get_documents(self, collection: str) -> List[DocumentSnapshot]:
        return [
            DocumentSnapshot(document_id, copy.deepcopy(data))
            for document_id, data in self._collection(collection).items()
        ]

    async def get_document_by_id(self, collection: str, id: str) -> Optional[DocumentSnapshot]:
        data = self._collection(collection).get(id)
        if data is None:
            return None
        return DocumentSnapshot(id, copy.deepcopy(data))

    async def update_document(self, collection: str, id: str, data: Dict[str, Any]) -> None:
        documents = self._collection(collection)
        if id not in documents:
            raise StoreError(f"No document {id} in collection {collection}")
        documents[id].update(copy.deepcopy(data))

    async def delete_document(self, collection: str, id: str) -> None:
        self._collection(collection).pop(id, None)
