from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from complaintdesk.models.users.user_models import User
from complaintdesk.repositories.base_repository import BaseRepository
from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode
from complaintdesk.utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """User directory keyed by id and by unique username.

    Passwords arrive already hashed; the directory never hashes.
    """

    model = User
    label = "User"
    not_found_code = ErrorCode.USER_NOT_FOUND
    conflict_code = ErrorCode.USER_VERSION_CONFLICT

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self.db.scalar(select(User).where(User.username == username))

    async def create(self, values: dict) -> User:
        exists = await self.db.scalar(
            select(User.id).where(User.username == values["username"])
        )
        if exists:
            raise AppException(409, "Username already exists", ErrorCode.USERNAME_EXISTS)

        user = User(**values)
        self.db.add(user)

        try:
            await self.db.commit()
        except IntegrityError:
            # lost the race against a concurrent create of the same username
            await self.db.rollback()
            logger.warning("Duplicate username on insert", extra={"username": values["username"]})
            raise AppException(409, "Username already exists", ErrorCode.USERNAME_EXISTS)

        await self.db.refresh(user)
        return user
