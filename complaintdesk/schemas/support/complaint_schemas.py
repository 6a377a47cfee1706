from pydantic import BaseModel, StrictInt
from typing import Any, Dict, List, Optional
from datetime import datetime

from complaintdesk.models.enums.complaint_status import ComplaintStatus


class ComplaintCreate(BaseModel):
    title: str
    description: str
    category: str


class ComplaintRespond(BaseModel):
    response: str
    status: Optional[ComplaintStatus] = None


class ComplaintStatusUpdate(BaseModel):
    status: ComplaintStatus


class ComplaintRate(BaseModel):
    rating: StrictInt


class ResponseEntry(BaseModel):
    """One message of a complaint thread, as stored.

    Admin-authored entries carry ``admin_id`` and ``admin_name``; customer
    replies leave both out.
    """

    id: str
    message: str
    created_at: datetime
    admin_id: Optional[str] = None
    admin_name: Optional[str] = None
    status_change: Optional[ComplaintStatus] = None

    def to_stored(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class ComplaintOut(BaseModel):
    id: str
    user_id: str
    user_name: str
    title: str
    description: str
    category: str
    status: ComplaintStatus
    responses: List[Dict[str, Any]]
    rating: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ComplaintData(BaseModel):
    complaint: ComplaintOut


class ComplaintListData(BaseModel):
    complaints: List[ComplaintOut]
