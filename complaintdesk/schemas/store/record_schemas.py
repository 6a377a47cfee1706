"""Whole-record JSON shapes of the ``users`` and ``complaints`` collections.

These mirror the flat-file layout the service grew out of (camelCase keys,
password hash under ``password``) and are what ``read_all``/``write_all``
exchange.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

from complaintdesk.models.enums.complaint_status import ComplaintStatus
from complaintdesk.models.enums.user_role import UserRole


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserRecord(_Record):
    id: str
    username: str
    password_hash: str = Field(alias="password")
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None


class ResponseRecord(_Record):
    id: str
    message: str
    created_at: datetime
    admin_id: Optional[str] = None
    admin_name: Optional[str] = None
    status_change: Optional[ComplaintStatus] = None


class ComplaintRecord(_Record):
    id: str
    user_id: str
    user_name: str
    title: str
    description: str
    category: str
    status: ComplaintStatus
    responses: List[ResponseRecord] = []
    rating: int = 0
    created_at: datetime
    updated_at: datetime
