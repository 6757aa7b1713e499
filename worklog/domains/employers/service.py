"""
Employer service for business logic.
"""
from typing import Any, Dict, List, Optional

from worklog.db.document_store import DocumentStore
from worklog.domains.employers.repository import EmployerRepository
from worklog.models.employer import Employer

EDITABLE_FIELDS = ("name", "hourly_rate")


class EmployerService:
    """
    Service for employer-related business logic.
    """

    def __init__(self, store: DocumentStore, employer_repo: Optional[EmployerRepository] = None):
        self.employer_repo = employer_repo or EmployerRepository(store)

    async def get_all_employers(self, owner_user_id: str) -> List[Employer]:
        """Get every employer owned by the user, in store order."""
        return await self.employer_repo.find_all(owner_user_id)

    async def get_employer_by_id(self, owner_user_id: str, employer_id: str) -> Employer:
        """
        Get an employer by ID.

        Raises:
            NotFoundError: If the employer does not exist or belongs to another user
        """
        return await self.employer_repo.get_by_id(owner_user_id, employer_id)

    async def create_employer(self, owner_user_id: str, employer_data: Dict[str, Any]) -> Employer:
        values = {name: employer_data.get(name) for name in EDITABLE_FIELDS}
        return await self.employer_repo.create(owner_user_id, values)

    async def update_employer(self, owner_user_id: str, employer_id: str, employer_data: Dict[str, Any]) -> Employer:
        """
        Update name and/or hourly rate. Shifts referencing the employer are untouched.

        Raises:
            NotFoundError: If the employer does not exist or belongs to another user
        """
        changes = {name: employer_data.get(name) for name in EDITABLE_FIELDS}
        return await self.employer_repo.update(owner_user_id, employer_id, changes)

    async def delete_employer(self, owner_user_id: str, employer_id: str) -> None:
        # No cascade: shifts and adjustments keep their employer_id
        await self.employer_repo.delete(owner_user_id, employer_id)
