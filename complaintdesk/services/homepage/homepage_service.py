from collections import Counter
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.models.support.complaint_models import Complaint
from complaintdesk.models.enums.complaint_status import ComplaintStatus
from complaintdesk.models.base.mixins import as_utc
from complaintdesk.repositories.complaint_repository import ComplaintRepository
from complaintdesk.schemas.support.complaint_schemas import ResponseEntry
from complaintdesk.schemas.homepage.homepage_schemas import (
    HomepageData,
    HomepageStats,
    PublicComplaint,
    TopRatedComplaint,
    StatusDistribution,
)
from complaintdesk.constants.complaints import RECENT_COMPLAINTS_LIMIT, TOP_RATED_LIMIT


# =====================================================
# HELPERS
# =====================================================

def _first_admin_reply_at(complaint: Complaint) -> Optional[datetime]:
    for entry in complaint.responses or []:
        if entry.get("admin_name"):
            return as_utc(ResponseEntry.model_validate(entry).created_at)
    return None


def average_response_time(complaints: list[Complaint]) -> Optional[str]:
    """Mean time to first admin response, in whole hours (``"5h"``)."""
    waits = []
    for c in complaints:
        replied_at = _first_admin_reply_at(c)
        if replied_at is not None:
            waits.append((replied_at - c.created_at).total_seconds())

    if not waits:
        return None

    return f"{round(sum(waits) / len(waits) / 3600)}h"


def average_rating(complaints: list[Complaint]) -> str:
    ratings = [c.rating for c in complaints if c.rating > 0]
    avg = sum(ratings) / len(ratings) if ratings else 0
    return f"{avg:.1f}"


# =====================================================
# HOMEPAGE DATA (PUBLIC)
# =====================================================
async def get_homepage_data(db: AsyncSession) -> HomepageData:
    complaints = await ComplaintRepository(db).get_all()

    by_status = Counter(c.status for c in complaints)

    # seq breaks timestamp ties in insertion order
    recent = sorted(
        complaints, key=lambda c: (c.created_at, c.seq), reverse=True
    )
    top_rated = sorted(
        (c for c in complaints if c.rating > 0),
        key=lambda c: c.rating,
        reverse=True,
    )

    return HomepageData(
        stats=HomepageStats(
            total=len(complaints),
            resolved=by_status[ComplaintStatus.RESOLVED],
            pending=by_status[ComplaintStatus.PENDING],
            in_progress=by_status[ComplaintStatus.IN_PROGRESS],
            satisfaction=average_rating(complaints),
            response_time=average_response_time(complaints),
        ),
        recent_complaints=[
            PublicComplaint.model_validate(c)
            for c in recent[:RECENT_COMPLAINTS_LIMIT]
        ],
        top_rated_complaints=[
            TopRatedComplaint.model_validate(c)
            for c in top_rated[:TOP_RATED_LIMIT]
        ],
        categories=dict(Counter(c.category for c in complaints)),
        status_distribution=StatusDistribution(
            pending=by_status[ComplaintStatus.PENDING],
            in_progress=by_status[ComplaintStatus.IN_PROGRESS],
            resolved=by_status[ComplaintStatus.RESOLVED],
            closed=by_status[ComplaintStatus.CLOSED],
        ),
    )
