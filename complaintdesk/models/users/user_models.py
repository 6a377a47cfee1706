import uuid

from sqlalchemy import Column, Integer, String, Enum as SAEnum
from complaintdesk.core.db import Base
from complaintdesk.models.base.mixins import TimestampMixin, VersionMixin
from complaintdesk.models.enums.user_role import UserRole


def new_id() -> str:
    return str(uuid.uuid4())


class User(Base, TimestampMixin, VersionMixin):
    __tablename__ = "users"

    # insertion order of the collection
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, nullable=False, index=True, default=new_id)
    username = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(
        SAEnum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.CUSTOMER,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self):
        return f"<User id={self.id} username={self.username} role={self.role}>"
