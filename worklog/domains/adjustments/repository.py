"""
Adjustment repository for database operations.
"""
from worklog.db.base_repository import OwnedDocumentRepository
from worklog.models.adjustment import Adjustment


class AdjustmentRepository(OwnedDocumentRepository[Adjustment]):
    """
    Repository for adjustment data access.
    """
    model = Adjustment
    collection_name = "adjustments"
    entity_type = "Adjustment"
