from sqlalchemy import Column, Integer, String, ForeignKey, JSON, Enum as SAEnum, Index
from complaintdesk.core.db import Base
from complaintdesk.models.base.mixins import TimestampMixin, VersionMixin
from complaintdesk.models.enums.complaint_status import ComplaintStatus
from complaintdesk.models.users.user_models import new_id


class Complaint(Base, TimestampMixin, VersionMixin):
    __tablename__ = "complaints"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=new_id)
    # checked at commit: a users rewrite may delete and re-insert owners
    user_id = Column(
        String(36),
        ForeignKey("users.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
        index=True,
    )
    # owner's name at submission time
    user_name = Column(String(150), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    status = Column(
        SAEnum(ComplaintStatus, name="complaint_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ComplaintStatus.PENDING,
        index=True,
    )
    # append-only conversation thread, replaced as a whole on update
    responses = Column(JSON, nullable=False, default=list)
    rating = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_complaint_user_seq", "user_id", "seq"),
    )

    def __repr__(self):
        return f"<Complaint id={self.id} status={self.status} rating={self.rating}>"
