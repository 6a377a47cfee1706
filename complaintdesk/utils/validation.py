from complaintdesk.core.exceptions import AppException
from complaintdesk.constants.error_codes import ErrorCode


def require_fields(error_message: str, /, **fields) -> None:
    """Raise a 400 naming every field that is missing or blank."""
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise AppException(
            400,
            error_message,
            ErrorCode.VALIDATION_ERROR,
            details={"missing": missing},
        )
