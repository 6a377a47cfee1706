from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from complaintdesk.core.db import get_db
from complaintdesk.schemas.auth.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    AdminCreateRequest,
    ProfileUpdateRequest,
    AuthData,
    UserData,
)
from complaintdesk.services.auth.auth_service import (
    register_user,
    login_user,
    create_admin,
    get_profile,
    update_profile,
)
from complaintdesk.utils.get_user import get_current_user
from complaintdesk.utils.response import success_response, APIResponse
from complaintdesk.utils.logger import get_logger

logger = get_logger("auth.router")

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", status_code=201, response_model=APIResponse[AuthData])
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Registration attempt", extra={"username": payload.username})

    data = await register_user(
        db, payload.username, payload.password, payload.name, payload.email
    )
    return success_response("User registered successfully", data)


@router.post("/login", response_model=APIResponse[AuthData])
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Login attempt", extra={"username": payload.username})

    data = await login_user(db, payload.username, payload.password)
    return success_response("Login successful", data)


@router.post("/admin/create", status_code=201, response_model=APIResponse[UserData])
async def create_admin_api(
    payload: AdminCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Admin creation attempt", extra={"username": payload.username})

    admin = await create_admin(
        db,
        payload.username,
        payload.password,
        payload.name,
        payload.email,
        payload.admin_secret,
    )
    return success_response("Admin user created successfully", UserData(user=admin))


@router.get("/profile", response_model=APIResponse[UserData])
async def profile(current_user=Depends(get_current_user)):
    return success_response(
        "Profile fetched", UserData(user=get_profile(current_user))
    )


@router.put("/profile", response_model=APIResponse[UserData])
async def update_profile_api(
    payload: ProfileUpdateRequest,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_user),
):
    logger.info("Profile update", extra={"user_id": current_user.id})

    user = await update_profile(
        db,
        current_user.id,
        payload.name,
        payload.email,
        payload.current_password,
        payload.new_password,
    )
    return success_response("Profile updated successfully", UserData(user=user))
