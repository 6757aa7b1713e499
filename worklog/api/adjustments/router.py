"""
Adjustment API routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from worklog.api.deps import get_adjustment_service, get_writer
from worklog.core.permissions import CurrentUser, authenticate
from worklog.domains.adjustments.service import AdjustmentService
from worklog.schemas.adjustment import AdjustmentCreate, AdjustmentUpdate
from worklog.schemas.response import success_response

router = APIRouter()


@router.get("")
async def get_all_adjustments(
        employer_id: Optional[str] = Query(None, alias="employerId"),
        shift_id: Optional[str] = Query(None, alias="shiftId"),
        current_user: CurrentUser = Depends(authenticate),
        adjustment_service: AdjustmentService = Depends(get_adjustment_service)
):
    """
    List the caller's adjustments.

    Args:
        employer_id: Only adjustments linked to this employer
        shift_id: Only adjustments linked to this shift
        current_user: Current user from token
    """
    adjustments = await adjustment_service.get_all_adjustments(
        current_user.uid,
        employer_id=employer_id,
        shift_id=shift_id
    )
    return success_response(adjustments, "Adjustments successfully retrieved")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_adjustment(
        adjustment_data: AdjustmentCreate,
        current_user: CurrentUser = Depends(get_writer),
        adjustment_service: AdjustmentService = Depends(get_adjustment_service)
):
    """Create a new adjustment for the caller."""
    created = await adjustment_service.create_adjustment(current_user.uid, adjustment_data.model_dump())
    return success_response(created, "Adjustment created successfully")


@router.get("/{adjustment_id}")
async def get_adjustment(
        adjustment_id: str,
        current_user: CurrentUser = Depends(authenticate),
        adjustment_service: AdjustmentService = Depends(get_adjustment_service)
):
    """Get one of the caller's adjustments by ID."""
    adjustment = await adjustment_service.get_adjustment_by_id(current_user.uid, adjustment_id)
    return success_response(adjustment, "Adjustment successfully retrieved")


@router.put("/{adjustment_id}")
async def update_adjustment(
        adjustment_id: str,
        adjustment_data: AdjustmentUpdate,
        current_user: CurrentUser = Depends(get_writer),
        adjustment_service: AdjustmentService = Depends(get_adjustment_service)
):
    """Update only the provided fields of one of the caller's adjustments."""
    updated = await adjustment_service.update_adjustment(
        current_user.uid,
        adjustment_id,
        adjustment_data.model_dump(exclude_unset=True)
    )
    return success_response(updated, "Adjustment updated successfully")


@router.delete("/{adjustment_id}")
async def delete_adjustment(
        adjustment_id: str,
        current_user: CurrentUser = Depends(get_writer),
        adjustment_service: AdjustmentService = Depends(get_adjustment_service)
):
    """Delete one of the caller's adjustments."""
    await adjustment_service.delete_adjustment(current_user.uid, adjustment_id)
    return success_response(None, "Adjustment deleted successfully")
