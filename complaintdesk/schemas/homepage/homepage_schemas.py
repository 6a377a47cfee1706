from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional
from datetime import datetime

from complaintdesk.models.enums.complaint_status import ComplaintStatus


# public payload keeps the camelCase keys the homepage has always served
class _PublicModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class HomepageStats(_PublicModel):
    total: int
    resolved: int
    pending: int
    in_progress: int
    satisfaction: str
    response_time: Optional[str]


class PublicComplaint(_PublicModel):
    id: str
    title: str
    category: str
    status: ComplaintStatus
    created_at: datetime
    updated_at: datetime
    rating: int


class TopRatedComplaint(_PublicModel):
    id: str
    title: str
    category: str
    status: ComplaintStatus
    rating: int


class StatusDistribution(_PublicModel):
    pending: int
    in_progress: int
    resolved: int
    closed: int


class HomepageData(_PublicModel):
    stats: HomepageStats
    recent_complaints: List[PublicComplaint]
    top_rated_complaints: List[TopRatedComplaint]
    categories: Dict[str, int]
    status_distribution: StatusDistribution
