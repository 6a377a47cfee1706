import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.models.users.user_models import User
from complaintdesk.models.support.complaint_models import Complaint
from complaintdesk.models.enums.complaint_status import (
    ComplaintStatus,
    REPLY_LOCKED_STATUSES,
)
from complaintdesk.models.base.mixins import utcnow
from complaintdesk.repositories.complaint_repository import ComplaintRepository
from complaintdesk.schemas.support.complaint_schemas import ComplaintOut, ResponseEntry
from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode
from complaintdesk.constants.complaints import (
    MAX_CONSECUTIVE_CUSTOMER_REPLIES,
    MIN_RATING,
    MAX_RATING,
)
from complaintdesk.utils.validation import require_fields
from complaintdesk.utils.logger import get_logger

logger = get_logger(__name__)


# =====================================================
# HELPERS
# =====================================================

async def _get_or_404(repo: ComplaintRepository, complaint_id: str) -> Complaint:
    complaint = await repo.get_by_id(complaint_id)
    if not complaint:
        raise AppException(404, "Complaint not found", ErrorCode.COMPLAINT_NOT_FOUND)
    return complaint


def _ensure_owner(complaint: Complaint, user: User, message: str) -> None:
    if complaint.user_id != user.id:
        raise AppException(403, message, ErrorCode.PERMISSION_DENIED)


def trailing_customer_replies(responses: list[dict]) -> int:
    """Count customer replies at the end of a thread since the last admin message."""
    count = 0
    for entry in reversed(responses):
        if entry.get("admin_name"):
            break
        count += 1
    return count


def _append(complaint: Complaint, entry: ResponseEntry) -> list[dict]:
    # new list: the thread is append-only and replaced as a whole
    return [*(complaint.responses or []), entry.to_stored()]


# =====================================================
# CREATE
# =====================================================
async def create_complaint(
    db: AsyncSession,
    user: User,
    title: str,
    description: str,
    category: str,
) -> ComplaintOut:
    require_fields(
        "Title, description, and category are required",
        title=title,
        description=description,
        category=category,
    )

    now = utcnow()
    complaint = await ComplaintRepository(db).create(
        {
            "user_id": user.id,
            "user_name": user.name,
            "title": title,
            "description": description,
            "category": category,
            "status": ComplaintStatus.PENDING,
            "responses": [],
            "rating": 0,
            "created_at": now,
            "updated_at": now,
        }
    )

    logger.info(
        "Complaint created",
        extra={"complaint_id": complaint.id, "user_id": user.id},
    )
    return ComplaintOut.model_validate(complaint)


# =====================================================
# LIST / GET
# =====================================================
async def list_complaints(db: AsyncSession, user: User) -> list[ComplaintOut]:
    repo = ComplaintRepository(db)

    if user.is_admin:
        complaints = await repo.get_all()
    else:
        complaints = await repo.get_by_user(user.id)

    return [ComplaintOut.model_validate(c) for c in complaints]


async def get_complaint(
    db: AsyncSession,
    complaint_id: str,
    user: User,
) -> ComplaintOut:
    complaint = await _get_or_404(ComplaintRepository(db), complaint_id)

    if not user.is_admin:
        _ensure_owner(
            complaint,
            user,
            "You do not have permission to view this complaint",
        )

    return ComplaintOut.model_validate(complaint)


# =====================================================
# ADMIN RESPONSE
# =====================================================
async def respond_as_admin(
    db: AsyncSession,
    complaint_id: str,
    admin: User,
    message: str,
    new_status: Optional[ComplaintStatus] = None,
) -> ComplaintOut:
    repo = ComplaintRepository(db)
    complaint = await _get_or_404(repo, complaint_id)

    require_fields("Response message is required", message=message)

    now = utcnow()
    entry = ResponseEntry(
        id=str(uuid.uuid4()),
        admin_id=admin.id,
        admin_name=admin.name,
        message=message,
        status_change=new_status,
        created_at=now,
    )

    values = {"responses": _append(complaint, entry), "updated_at": now}
    if new_status is not None:
        values["status"] = new_status

    updated = await repo.update(complaint_id, values, complaint.version)

    logger.info(
        "Admin responded to complaint",
        extra={
            "complaint_id": complaint_id,
            "admin_id": admin.id,
            "status_change": new_status.value if new_status else None,
        },
    )
    return ComplaintOut.model_validate(updated)


# =====================================================
# CUSTOMER REPLY
# =====================================================
async def reply_as_customer(
    db: AsyncSession,
    complaint_id: str,
    user: User,
    message: str,
) -> ComplaintOut:
    repo = ComplaintRepository(db)
    complaint = await _get_or_404(repo, complaint_id)

    require_fields("Response message is required", message=message)
    _ensure_owner(complaint, user, "You can only reply to your own complaints")

    if complaint.status in REPLY_LOCKED_STATUSES:
        raise AppException(
            409,
            f"Cannot reply to a {complaint.status.value} complaint",
            ErrorCode.COMPLAINT_INVALID_STATE,
        )

    if trailing_customer_replies(complaint.responses or []) >= MAX_CONSECUTIVE_CUSTOMER_REPLIES:
        raise AppException(
            409,
            "You have reached the maximum number of consecutive replies. "
            "Please wait for a response.",
            ErrorCode.COMPLAINT_REPLY_LIMIT,
        )

    now = utcnow()
    entry = ResponseEntry(id=str(uuid.uuid4()), message=message, created_at=now)

    updated = await repo.update(
        complaint_id,
        {"responses": _append(complaint, entry), "updated_at": now},
        complaint.version,
    )

    logger.info(
        "Customer replied to complaint",
        extra={"complaint_id": complaint_id, "user_id": user.id},
    )
    return ComplaintOut.model_validate(updated)


async def respond_to_complaint(
    db: AsyncSession,
    complaint_id: str,
    user: User,
    message: str,
    new_status: Optional[ComplaintStatus] = None,
) -> ComplaintOut:
    """Single entry point for the conversation thread, routed by caller role."""
    if user.is_admin:
        return await respond_as_admin(db, complaint_id, user, message, new_status)

    if new_status is not None:
        raise AppException(
            403,
            "Only admins can change complaint status",
            ErrorCode.PERMISSION_DENIED,
        )
    return await reply_as_customer(db, complaint_id, user, message)


# =====================================================
# UPDATE STATUS
# =====================================================
async def set_status(
    db: AsyncSession,
    complaint_id: str,
    new_status,
) -> ComplaintOut:
    """Move a complaint to any status. No response is appended."""
    try:
        new_status = ComplaintStatus(new_status)
    except ValueError:
        raise AppException(
            400,
            "Valid status is required",
            ErrorCode.VALIDATION_ERROR,
            details={"valid_statuses": [s.value for s in ComplaintStatus]},
        )

    repo = ComplaintRepository(db)
    complaint = await _get_or_404(repo, complaint_id)
    old_status = complaint.status

    updated = await repo.update(
        complaint_id,
        {"status": new_status, "updated_at": utcnow()},
        complaint.version,
    )

    logger.info(
        "Complaint status updated",
        extra={
            "complaint_id": complaint_id,
            "old_status": old_status.value,
            "new_status": new_status.value,
        },
    )
    return ComplaintOut.model_validate(updated)


# =====================================================
# RATE
# =====================================================
async def rate_complaint(
    db: AsyncSession,
    complaint_id: str,
    user: User,
    rating,
) -> ComplaintOut:
    if (
        isinstance(rating, bool)
        or not isinstance(rating, int)
        or not MIN_RATING <= rating <= MAX_RATING
    ):
        raise AppException(
            400,
            f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}",
            ErrorCode.VALIDATION_ERROR,
        )

    repo = ComplaintRepository(db)
    complaint = await _get_or_404(repo, complaint_id)

    _ensure_owner(complaint, user, "You can only rate your own complaints")

    if complaint.status != ComplaintStatus.RESOLVED:
        raise AppException(
            409,
            "Only resolved complaints can be rated",
            ErrorCode.COMPLAINT_INVALID_STATE,
        )

    if complaint.rating:
        raise AppException(
            409,
            "Complaint has already been rated",
            ErrorCode.COMPLAINT_ALREADY_RATED,
        )

    updated = await repo.update(
        complaint_id,
        {"rating": rating, "updated_at": utcnow()},
        complaint.version,
    )

    logger.info(
        "Complaint rated",
        extra={"complaint_id": complaint_id, "rating": rating},
    )
    return ComplaintOut.model_validate(updated)
