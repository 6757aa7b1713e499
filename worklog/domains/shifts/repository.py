"""
Shift repository for database operations.
"""
from worklog.db.base_repository import OwnedDocumentRepository
from worklog.models.shift import Shift


class ShiftRepository(OwnedDocumentRepository[Shift]):
    """
    Repository for shift data access.
    """
    model = Shift
    collection_name = "shifts"
    entity_type = "Shift"
