"""
MongoDB connection management and the MongoDB document store.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from worklog.core.config import settings
from worklog.core.errors import StoreError
from worklog.db.document_store import DocumentSnapshot, DocumentStore, InMemoryDocumentStore
from worklog.utils.id_handler import IdHandler

logger = logging.getLogger(__name__)


class MongoDB:
    """
    MongoDB connection manager.
    Provides access to database and collections with connection management.
    """

    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

    @classmethod
    def connect_to_mongodb(cls):
        """
        Connect to MongoDB if not already connected.
        Motor connects lazily, so this does not block on the server.
        """
        if cls.client is None:
            logger.info(f"Connecting to MongoDB at {settings.MONGODB_URL} (database: {settings.MONGODB_DB})")

            # tz_aware makes stored datetimes come back as UTC instants
            cls.client = AsyncIOMotorClient(settings.MONGODB_URL, tz_aware=True)
            cls.db = cls.client[settings.MONGODB_DB]

    @classmethod
    async def close_mongodb_connection(cls):
        """
        Close MongoDB connection if open.
        """
        if cls.client is not None:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("Closed MongoDB connection")

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        """
        Get database instance.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if cls.db is None:
            cls.connect_to_mongodb()
        return cls.db

    @classmethod
    def get_collection(cls, collection_name: str):
        """
        Get collection by name.

        Args:
            collection_name: Name of collection

        Returns:
            AsyncIOMotorCollection instance
        """
        return cls.get_database()[collection_name]


mongodb = MongoDB()


@contextmanager
def _store_errors(operation: str):
    """Re-raise driver failures as StoreError."""
    try:
        yield
    except PyMongoError as e:
        raise StoreError(f"Document store {operation} failed: {str(e)}") from e


class MongoDocumentStore(DocumentStore):
    """
    Document store backed by MongoDB collections.
    New documents get a generated ObjectId string as their _id.
    """

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        """
        Initialize with a database.

        Args:
            database: Motor database; the shared connection is used when omitted
        """
        self._database = database

    def _collection(self, name: str):
        if self._database is not None:
            return self._database[name]
        return mongodb.get_collection(name)

    @staticmethod
    def _snapshot(document: Dict[str, Any]) -> DocumentSnapshot:
        data = dict(document)
        document_id = str(data.pop("_id"))
        return DocumentSnapshot(document_id, IdHandler.format_object_ids(data))

    async def create_document(self, collection: str, data: Dict[str, Any], id: Optional[str] = None) -> str:
        document = {**data, "_id": id or IdHandler.generate_id()}
        with _store_errors("insert"):
            result = await self._collection(collection).insert_one(document)
        return str(result.inserted_id)

    async def get_documents(self, collection: str) -> List[DocumentSnapshot]:
        snapshots = []
        with _store_errors("read"):
            async for document in self._collection(collection).find({}):
                snapshots.append(self._snapshot(document))
        return snapshots

    async def get_document_by_id(self, collection: str, id: str) -> Optional[DocumentSnapshot]:
        with _store_errors("read"):
            document, _ = await IdHandler.find_document_by_id(self._collection(collection), id)
        if not document:
            return None
        return self._snapshot(document)

    async def update_document(self, collection: str, id: str, data: Dict[str, Any]) -> None:
        update_data = {k: v for k, v in data.items() if k != "_id"}
        with _store_errors("update"):
            document, doc_id = await IdHandler.find_document_by_id(self._collection(collection), id)
            if not document:
                raise StoreError(f"No document {id} in collection {collection}")
            await self._collection(collection).update_one({"_id": doc_id}, {"$set": update_data})

    async def delete_document(self, collection: str, id: str) -> None:
        with _store_errors("delete"):
            document, doc_id = await IdHandler.find_document_by_id(self._collection(collection), id)
            if document:
                await self._collection(collection).delete_one({"_id": doc_id})


_document_store: Optional[DocumentStore] = None


def get_document_store() -> DocumentStore:
    """
    Get the configured document store.
    FastAPI dependency; the instance is created once per process.

    Returns:
        MongoDocumentStore or InMemoryDocumentStore depending on settings.DOCUMENT_STORE
    """
    global _document_store
    if _document_store is None:
        if settings.DOCUMENT_STORE == "memory":
            logger.info("Using in-memory document store")
            _document_store = InMemoryDocumentStore()
        elif settings.DOCUMENT_STORE == "mongodb":
            _document_store = MongoDocumentStore()
        else:
            raise ValueError(f"Unknown document store backend: {settings.DOCUMENT_STORE}")
    return _document_store
