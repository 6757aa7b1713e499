"""
Owner-scoped repository pattern over the document store.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from worklog.core.errors import NotFoundError
from worklog.db.document_store import DocumentSnapshot, DocumentStore
from worklog.models.owned_entity import OwnedEntity
from worklog.utils.datetime_handler import DateTimeHandler

EntityT = TypeVar("EntityT", bound=OwnedEntity)


class OwnedDocumentRepository(Generic[EntityT]):
    """
    Base repository implementing CRUD for records that belong to one user.

    Every read, update and delete checks that the record's owner is the caller.
    A record owned by someone else is reported exactly like a missing record.

    Subclasses set:
        model: Entity class
        collection_name: Document store collection
        entity_type: Name used in error messages ("Shift", "Employer", ...)
    """

    model: Type[EntityT]
    collection_name: str
    entity_type: str

    def __init__(self, store: DocumentStore):
        """
        Initialize repository with a document store.

        Args:
            store: Document store backend
        """
        self.store = store

    def normalize(self, snapshot: DocumentSnapshot) -> EntityT:
        """
        Convert a stored document into an entity.

        Time fields are coerced to UTC instants. No validation happens here:
        missing fields stay None and odd values pass through as stored.

        Args:
            snapshot: Stored document

        Returns:
            Entity instance
        """
        data = snapshot.data()
        values: Dict[str, Any] = {"id": snapshot.id}

        for name, field in self.model.model_fields.items():
            if name == "id":
                continue
            key = field.alias or name
            value = data.get(key)
            if name in self.model.time_fields:
                value = DateTimeHandler.coerce_to_instant(value)
            values[name] = value

        return self.model.model_construct(**values)

    def to_document(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """
        Map entity attribute names to stored field names.

        Args:
            values: Entity attribute values keyed by attribute name

        Returns:
            Document fields keyed by stored (camelCase) names
        """
        fields = self.model.model_fields
        document = {}
        for name, value in values.items():
            if name == "id":
                continue
            field = fields.get(name)
            key = field.alias if field is not None and field.alias else name
            document[key] = value
        return document

    async def find_all(self, owner_user_id: str, **filters: Optional[str]) -> List[EntityT]:
        """
        Get every record owned by the user, optionally filtered by attribute equality.

        Filtering happens here rather than in the store; records come back in
        store iteration order.

        Args:
            owner_user_id: Caller identity
            **filters: Attribute name to required value; None values are ignored

        Returns:
            List of entities
        """
        snapshots = await self.store.get_documents(self.collection_name)
        entities = [self.normalize(snapshot) for snapshot in snapshots]

        active_filters = {name: value for name, value in filters.items() if value}
        return [
            entity for entity in entities
            if entity.owner_user_id == owner_user_id
            and all(getattr(entity, name) == value for name, value in active_filters.items())
        ]

    async def get_by_id(self, owner_user_id: str, entity_id: str) -> EntityT:
        """
        Get a record by id if it belongs to the user.

        Args:
            owner_user_id: Caller identity
            entity_id: Record id

        Returns:
            Entity

        Raises:
            NotFoundError: If the record does not exist or belongs to another user
        """
        snapshot = await self.store.get_document_by_id(self.collection_name, entity_id)
        if snapshot is None or not snapshot.exists:
            raise NotFoundError(self.entity_type, entity_id)

        entity = self.normalize(snapshot)
        if entity.owner_user_id != owner_user_id:
            raise NotFoundError(self.entity_type, entity_id)

        return entity

    async def create(self, owner_user_id: str, values: Dict[str, Any]) -> EntityT:
        """
        Create a record owned by the user.

        Args:
            owner_user_id: Caller identity
            values: Entity attribute values (already converted to stored types)

        Returns:
            Created entity including its generated id
        """
        now = DateTimeHandler.get_current_datetime()
        entity_values = {
            **values,
            "owner_user_id": owner_user_id,
            "created_at": now,
            "updated_at": now,
        }

        created_id = await self.store.create_document(self.collection_name, self.to_document(entity_values))
        return self.model.model_construct(id=created_id, **entity_values)

    async def update(self, owner_user_id: str, entity_id: str, changes: Dict[str, Any]) -> EntityT:
        """
        Merge the given fields into a record owned by the user.

        Fields whose value is None are left unchanged; updated_at is always refreshed.
        The merged entity is returned without reading the record back.

        Args:
            owner_user_id: Caller identity
            entity_id: Record id
            changes: Entity attribute values to change

        Returns:
            Merged entity

        Raises:
            NotFoundError: If the record does not exist or belongs to another user
        """
        existing = await self.get_by_id(owner_user_id, entity_id)

        update_values = {
            name: value for name, value in changes.items()
            if value is not None and name not in ("id", "owner_user_id", "created_at")
        }
        update_values["updated_at"] = DateTimeHandler.get_current_datetime()

        await self.store.update_document(self.collection_name, existing.id, self.to_document(update_values))
        return existing.model_copy(update=update_values)

    async def delete(self, owner_user_id: str, entity_id: str) -> None:
        """
        Delete a record owned by the user.

        Raises:
            NotFoundError: If the record does not exist or belongs to another user
        """
        existing = await self.get_by_id(owner_user_id, entity_id)
        await self.store.delete_document(self.collection_name, existing.id)
