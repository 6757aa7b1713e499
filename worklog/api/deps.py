"""
Shared route dependencies.
"""
from fastapi import Depends

from worklog.core.permissions import CurrentUser, authorize
from worklog.core.rate_limit import write_rate_limiter
from worklog.db.document_store import DocumentStore
from worklog.db.mongodb import get_document_store
from worklog.domains.adjustments.service import AdjustmentService
from worklog.domains.employers.service import EmployerService
from worklog.domains.shifts.service import ShiftService

WRITE_ROLES = ["user"]


async def get_writer(
        current_user: CurrentUser = Depends(authorize(has_role=WRITE_ROLES)),
        _: None = Depends(write_rate_limiter)
) -> CurrentUser:
    """Caller of a write route: authenticated, holding a write role, within the rate limit."""
    return current_user


def get_shift_service(store: DocumentStore = Depends(get_document_store)) -> ShiftService:
    return ShiftService(store)


def get_employer_service(store: DocumentStore = Depends(get_document_store)) -> EmployerService:
    return EmployerService(store)


def get_adjustment_service(store: DocumentStore = Depends(get_document_store)) -> AdjustmentService:
    return AdjustmentService(store)
