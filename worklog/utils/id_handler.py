"""
ObjectId helpers for the MongoDB document store.
"""
from typing import Any, Dict, List, Optional, Tuple, Union
from bson import ObjectId


class IdHandler:
    """
    ObjectId conversion and lookup helpers.
    Documents written by this application use the string form as _id; older
    documents may still carry a native ObjectId.
    """

    @staticmethod
    def ensure_object_id(id_value: Any) -> Optional[ObjectId]:
        """
        ObjectId for a 24-character hex string or an ObjectId; None otherwise.
        """
        if id_value is None:
            return None

        if isinstance(id_value, ObjectId):
            return id_value

        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)

        return None

    @staticmethod
    def format_object_ids(data: Union[Dict[str, Any], List[Any], Any]) -> Any:
        """
        Convert ObjectId values to strings in a document or list of documents.
        Works recursively for nested dictionaries and lists.

        Args:
            data: MongoDB document, list of documents or plain value

        Returns:
            Data with ObjectIds converted to strings
        """
        if isinstance(data, ObjectId):
            return str(data)
        if isinstance(data, list):
            return [IdHandler.format_object_ids(item) for item in data]
        if isinstance(data, dict):
            return {key: IdHandler.format_object_ids(value) for key, value in data.items()}
        return data

    @staticmethod
    async def find_document_by_id(collection, doc_id: str) -> Tuple[Any, Any]:
        """
        Find a document by ID, accepting both string ids and legacy ObjectId ids.
        Returns a tuple of (document, id_used_for_lookup), or (None, None) if not found.

        Args:
            collection: MongoDB collection to query
            doc_id: ID to look for

        Returns:
            Tuple of (document, id_used_for_lookup)
        """
        document = await collection.find_one({"_id": doc_id})
        if document:
            return document, doc_id

        obj_id = IdHandler.ensure_object_id(doc_id)
        if obj_id:
            document = await collection.find_one({"_id": obj_id})
            if document:
                return document, obj_id

        return None, None

    @staticmethod
    def generate_id() -> str:
        """
        Generate a new ObjectId as string

        Returns:
            String representation of a new ObjectId
        """
        return str(ObjectId())
