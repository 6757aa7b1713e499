"""
Employer API routes.
"""
from fastapi import APIRouter, Depends, status

from worklog.api.deps import get_employer_service, get_writer
from worklog.core.permissions import CurrentUser, authenticate
from worklog.domains.employers.service import EmployerService
from worklog.schemas.employer import EmployerCreate, EmployerUpdate
from worklog.schemas.response import success_response

router = APIRouter()


@router.get("")
async def list_employers(
        current_user: CurrentUser = Depends(authenticate),
        employer_service: EmployerService = Depends(get_employer_service)
):
    """List the caller's employers."""
    employers = await employer_service.get_all_employers(current_user.uid)
    return success_response(employers, "Employers successfully retrieved")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employer(
        employer_data: EmployerCreate,
        current_user: CurrentUser = Depends(get_writer),
        employer_service: EmployerService = Depends(get_employer_service)
):
    """Create a new employer for the caller."""
    created = await employer_service.create_employer(current_user.uid, employer_data.model_dump())
    return success_response(created, "Employer created successfully")


@router.get("/{employer_id}")
async def get_employer(
        employer_id: str,
        current_user: CurrentUser = Depends(authenticate),
        employer_service: EmployerService = Depends(get_employer_service)
):
    """Get one of the caller's employers by ID."""
    employer = await employer_service.get_employer_by_id(current_user.uid, employer_id)
    return success_response(employer, "Employer retrieved successfully")


@router.put("/{employer_id}")
async def update_employer(
        employer_id: str,
        employer_data: EmployerUpdate,
        current_user: CurrentUser = Depends(get_writer),
        employer_service: EmployerService = Depends(get_employer_service)
):
    """Update the name and/or hourly rate of one of the caller's employers."""
    updated = await employer_service.update_employer(
        current_user.uid,
        employer_id,
        employer_data.model_dump(exclude_unset=True)
    )
    return success_response(updated, "Employer updated successfully")


@router.delete("/{employer_id}")
async def delete_employer(
        employer_id: str,
        current_user: CurrentUser = Depends(get_writer),
        employer_service: EmployerService = Depends(get_employer_service)
):
    """Delete one of the caller's employers. Shifts referencing it are kept."""
    await employer_service.delete_employer(current_user.uid, employer_id)
    return success_response(None, "Employer deleted successfully")
