from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.db import get_db
from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode
from complaintdesk.models.users.user_models import User
from complaintdesk.services.auth.auth_service import verify_token
from complaintdesk.utils.logger import get_logger

logger = get_logger("auth.guard")


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    if not authorization or not authorization.startswith("Bearer "):
        logger.warning("Missing bearer token", extra={"path": request.url.path})
        raise AppException(
            401,
            "Unauthorized: No token provided",
            ErrorCode.UNAUTHORIZED,
        )

    token = authorization.split("Bearer ", 1)[1].strip()
    user = await verify_token(db, token)

    # plain id: the ORM instance expires if the request rolls back
    request.state.user_id = user.id
    return user
