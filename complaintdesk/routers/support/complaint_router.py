from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.db import get_db
from complaintdesk.models.enums.user_role import UserRole
from complaintdesk.utils.get_user import get_current_user
from complaintdesk.utils.check_roles import require_role
from complaintdesk.utils.response import success_response, APIResponse
from complaintdesk.schemas.support.complaint_schemas import (
    ComplaintCreate,
    ComplaintRespond,
    ComplaintStatusUpdate,
    ComplaintRate,
    ComplaintData,
    ComplaintListData,
)
from complaintdesk.services.support.complaint_service import (
    create_complaint,
    list_complaints,
    get_complaint,
    respond_to_complaint,
    set_status,
    rate_complaint,
)

router = APIRouter(prefix="/complaints", tags=["Complaints"])


@router.post("", status_code=201, response_model=APIResponse[ComplaintData])
async def create_complaint_api(
    payload: ComplaintCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    complaint = await create_complaint(
        db, current_user, payload.title, payload.description, payload.category
    )
    return success_response(
        "Complaint submitted successfully", ComplaintData(complaint=complaint)
    )


@router.get("", response_model=APIResponse[ComplaintListData])
async def list_complaints_api(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    complaints = await list_complaints(db, current_user)
    return success_response(
        "Complaints retrieved successfully",
        ComplaintListData(complaints=complaints),
    )


@router.get("/{complaint_id}", response_model=APIResponse[ComplaintData])
async def get_complaint_api(
    complaint_id: str,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    complaint = await get_complaint(db, complaint_id, current_user)
    return success_response(
        "Complaint retrieved successfully", ComplaintData(complaint=complaint)
    )


@router.post("/{complaint_id}/respond", response_model=APIResponse[ComplaintData])
async def respond_to_complaint_api(
    complaint_id: str,
    payload: ComplaintRespond,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    complaint = await respond_to_complaint(
        db, complaint_id, current_user, payload.response, payload.status
    )
    return success_response(
        "Response added successfully", ComplaintData(complaint=complaint)
    )


@router.patch("/{complaint_id}/status", response_model=APIResponse[ComplaintData])
async def update_complaint_status_api(
    complaint_id: str,
    payload: ComplaintStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(require_role([UserRole.ADMIN])),
):
    complaint = await set_status(db, complaint_id, payload.status)
    return success_response(
        "Complaint status updated successfully", ComplaintData(complaint=complaint)
    )


@router.post("/{complaint_id}/rate", response_model=APIResponse[ComplaintData])
async def rate_complaint_api(
    complaint_id: str,
    payload: ComplaintRate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    complaint = await rate_complaint(db, complaint_id, current_user, payload.rating)
    return success_response(
        "Complaint rated successfully", ComplaintData(complaint=complaint)
    )
