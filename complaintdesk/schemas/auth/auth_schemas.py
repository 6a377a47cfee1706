from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime

from complaintdesk.models.enums.user_role import UserRole


# =========================
# REQUESTS
# =========================
class RegisterRequest(BaseModel):
    username: str
    password: str
    name: str
    email: EmailStr


class LoginRequest(BaseModel):
    username: str
    password: str


class AdminCreateRequest(RegisterRequest):
    model_config = ConfigDict(populate_by_name=True)

    admin_secret: str = Field(alias="adminSecret")


class ProfileUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: EmailStr
    current_password: Optional[str] = Field(default=None, alias="currentPassword")
    new_password: Optional[str] = Field(default=None, alias="newPassword")


# =========================
# RESPONSES
# =========================
class UserOut(BaseModel):
    id: str
    username: str
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserData(BaseModel):
    user: UserOut


class AuthData(BaseModel):
    user: UserOut
    token: str
    token_type: str = "bearer"
