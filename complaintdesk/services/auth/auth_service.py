import secrets
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.models.users.user_models import User
from complaintdesk.models.enums.user_role import UserRole
from complaintdesk.models.base.mixins import utcnow
from complaintdesk.repositories.user_repository import UserRepository
from complaintdesk.schemas.auth.auth_schemas import AuthData, UserOut
from complaintdesk.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from complaintdesk.core.config import ADMIN_SECRET
from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode
from complaintdesk.utils.validation import require_fields
from complaintdesk.utils.logger import get_logger

logger = get_logger("auth.service")


def _issue_token(user: User) -> AuthData:
    token = create_access_token(
        user_id=user.id,
        username=user.username,
        role=user.role.value,
    )
    return AuthData(user=UserOut.model_validate(user), token=token)


async def _create_user(
    db: AsyncSession,
    *,
    username: str,
    password: str,
    name: str,
    email: str,
    role: UserRole,
) -> User:
    require_fields(
        "All fields are required",
        username=username,
        password=password,
        name=name,
        email=email,
    )

    return await UserRepository(db).create(
        {
            "username": username,
            "password_hash": hash_password(password),
            "name": name,
            "email": email,
            "role": role,
        }
    )


# =====================================================
# REGISTER
# =====================================================
async def register_user(
    db: AsyncSession,
    username: str,
    password: str,
    name: str,
    email: str,
) -> AuthData:
    logger.info("Registering customer", extra={"username": username})

    user = await _create_user(
        db,
        username=username,
        password=password,
        name=name,
        email=email,
        role=UserRole.CUSTOMER,
    )

    logger.info("Customer registered", extra={"user_id": user.id})
    return _issue_token(user)


# =====================================================
# LOGIN
# =====================================================
async def login_user(db: AsyncSession, username: str, password: str) -> AuthData:
    logger.info("Authenticating user", extra={"username": username})

    require_fields(
        "Username and password are required",
        username=username,
        password=password,
    )

    user = await UserRepository(db).get_by_username(username)

    if not user or not verify_password(password, user.password_hash):
        logger.warning("Invalid credentials", extra={"username": username})
        raise AppException(401, "Invalid credentials", ErrorCode.INVALID_CREDENTIALS)

    logger.info("Login successful", extra={"user_id": user.id})
    return _issue_token(user)


# =====================================================
# ADMIN PROVISIONING
# =====================================================
async def create_admin(
    db: AsyncSession,
    username: str,
    password: str,
    name: str,
    email: str,
    admin_secret: str,
) -> UserOut:
    if not secrets.compare_digest(
        (admin_secret or "").encode(), ADMIN_SECRET.encode()
    ):
        logger.warning("Admin creation with invalid secret", extra={"username": username})
        raise AppException(403, "Invalid admin secret", ErrorCode.ADMIN_SECRET_INVALID)

    admin = await _create_user(
        db,
        username=username,
        password=password,
        name=name,
        email=email,
        role=UserRole.ADMIN,
    )

    logger.info("Admin created", extra={"user_id": admin.id})
    return UserOut.model_validate(admin)


# =====================================================
# TOKEN VERIFICATION
# =====================================================
async def verify_token(db: AsyncSession, token: str) -> User:
    payload = decode_access_token(token)

    user = await UserRepository(db).get_by_id(payload["sub"])
    if not user:
        logger.warning("Token user not found", extra={"user_id": payload["sub"]})
        raise AppException(401, "User not found", ErrorCode.UNAUTHORIZED)

    return user


# =====================================================
# PROFILE
# =====================================================
def get_profile(user: User) -> UserOut:
    return UserOut.model_validate(user)


async def update_profile(
    db: AsyncSession,
    user_id: str,
    name: str,
    email: str,
    current_password: Optional[str] = None,
    new_password: Optional[str] = None,
) -> UserOut:
    require_fields("Name and email are required", name=name, email=email)

    repo = UserRepository(db)
    user = await repo.get_by_id(user_id)
    if not user:
        raise AppException(404, "User not found", ErrorCode.USER_NOT_FOUND)

    values: dict = {"name": name, "email": email}

    if new_password:
        if not current_password:
            raise AppException(
                400,
                "Current password is required to set a new password",
                ErrorCode.VALIDATION_ERROR,
            )

        if not verify_password(current_password, user.password_hash):
            logger.warning("Wrong current password", extra={"user_id": user_id})
            raise AppException(
                401,
                "Current password is incorrect",
                ErrorCode.INVALID_CREDENTIALS,
            )

        values["password_hash"] = hash_password(new_password)

    updated = await repo.update(user_id, {**values, "updated_at": utcnow()}, user.version)

    logger.info(
        "Profile updated",
        extra={"user_id": user_id, "password_changed": "password_hash" in values},
    )
    return UserOut.model_validate(updated)
