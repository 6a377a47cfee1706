from sqlalchemy import select

from complaintdesk.models.support.complaint_models import Complaint
from complaintdesk.models.users.user_models import User
from complaintdesk.repositories.base_repository import BaseRepository
from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode


class ComplaintRepository(BaseRepository[Complaint]):
    model = Complaint
    label = "Complaint"
    not_found_code = ErrorCode.COMPLAINT_NOT_FOUND
    conflict_code = ErrorCode.COMPLAINT_VERSION_CONFLICT

    async def get_by_user(self, user_id: str) -> list[Complaint]:
        result = await self.db.execute(
            select(Complaint)
            .where(Complaint.user_id == user_id)
            .order_by(Complaint.seq)
        )
        return list(result.scalars().all())

    async def create(self, values: dict) -> Complaint:
        owner = await self.db.scalar(select(User.id).where(User.id == values["user_id"]))
        if not owner:
            raise AppException(
                400,
                "Complaint owner does not exist",
                ErrorCode.VALIDATION_ERROR,
            )

        complaint = Complaint(**values)
        self.db.add(complaint)
        await self.db.commit()
        await self.db.refresh(complaint)
        return complaint
