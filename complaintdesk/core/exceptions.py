from fastapi import HTTPException
from complaintdesk.constants.error_codes import ErrorCode


class AppException(HTTPException):
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = error_code
        self.details = details


class StorageError(AppException):
    """Backing store could not be read or written."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(500, message, ErrorCode.STORAGE_ERROR)
