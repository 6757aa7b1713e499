"""
Shift API routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from worklog.api.deps import get_shift_service, get_writer
from worklog.core.permissions import CurrentUser, authenticate
from worklog.domains.shifts.service import ShiftService
from worklog.schemas.response import success_response
from worklog.schemas.shift import ShiftCreate, ShiftUpdate, parse_include_totals

router = APIRouter()


@router.get("")
async def get_all_shifts(
        employer_id: Optional[str] = Query(None, alias="employerId"),
        include_totals: Optional[str] = Query(None, alias="includeTotals"),
        current_user: CurrentUser = Depends(authenticate),
        shift_service: ShiftService = Depends(get_shift_service)
):
    """
    List the caller's shifts, each with computed hours and pay.

    Args:
        employer_id: Only shifts for this employer
        include_totals: "true" to add hours and pay per day and per month
        current_user: Current user from token

    Returns:
        Envelope with items and, when requested, totals
    """
    result = await shift_service.get_all_shifts(
        current_user.uid,
        employer_id=employer_id,
        include_totals=parse_include_totals(include_totals)
    )

    data = {"items": result.items}
    if result.totals is not None:
        data["totals"] = result.totals

    return success_response(data, "Shifts successfully retrieved")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_shift(
        shift_data: ShiftCreate,
        current_user: CurrentUser = Depends(get_writer),
        shift_service: ShiftService = Depends(get_shift_service)
):
    """
    Create a new shift for the caller.
    Times may be ISO-8601 or human-readable; they are stored as UTC instants.
    """
    created = await shift_service.create_shift(current_user.uid, shift_data.model_dump())
    return success_response(created, "Shift created successfully")


@router.get("/{shift_id}")
async def get_shift(
        shift_id: str,
        current_user: CurrentUser = Depends(authenticate),
        shift_service: ShiftService = Depends(get_shift_service)
):
    """Get one of the caller's shifts by ID."""
    shift = await shift_service.get_shift_by_id(current_user.uid, shift_id)
    return success_response(shift, "Shift successfully retrieved")


@router.put("/{shift_id}")
async def update_shift(
        shift_id: str,
        shift_data: ShiftUpdate,
        current_user: CurrentUser = Depends(get_writer),
        shift_service: ShiftService = Depends(get_shift_service)
):
    """Update only the provided fields of one of the caller's shifts."""
    updated = await shift_service.update_shift(
        current_user.uid,
        shift_id,
        shift_data.model_dump(exclude_unset=True)
    )
    return success_response(updated, "Shift updated successfully")


@router.delete("/{shift_id}")
async def delete_shift(
        shift_id: str,
        current_user: CurrentUser = Depends(get_writer),
        shift_service: ShiftService = Depends(get_shift_service)
):
    """Delete one of the caller's shifts."""
    await shift_service.delete_shift(current_user.uid, shift_id)
    return success_response(None, "Shift deleted successfully")
