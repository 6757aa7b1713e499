"""
Employer repository for database operations.
"""
from worklog.db.base_repository import OwnedDocumentRepository
from worklog.models.employer import Employer


class EmployerRepository(OwnedDocumentRepository[Employer]):
    """
    Repository for employer data access.
    """
    model = Employer
    collection_name = "employers"
    entity_type = "Employer"
