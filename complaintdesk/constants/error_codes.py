from enum import Enum


class ErrorCode(str, Enum):
    # ---------------- GENERIC ----------------
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    STORAGE_ERROR = "STORAGE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # ---------------- AUTH ----------------
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    ADMIN_SECRET_INVALID = "ADMIN_SECRET_INVALID"

    # ---------------- USERS ----------------
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USERNAME_EXISTS = "USERNAME_EXISTS"
    USER_VERSION_CONFLICT = "USER_VERSION_CONFLICT"

    # ---------------- COMPLAINTS ----------------
    COMPLAINT_NOT_FOUND = "COMPLAINT_NOT_FOUND"
    COMPLAINT_INVALID_STATE = "COMPLAINT_INVALID_STATE"
    COMPLAINT_ALREADY_RATED = "COMPLAINT_ALREADY_RATED"
    COMPLAINT_REPLY_LIMIT = "COMPLAINT_REPLY_LIMIT"
    COMPLAINT_VERSION_CONFLICT = "COMPLAINT_VERSION_CONFLICT"
