"""
Custom exception classes and error handling.

Provides consistent error responses across the API. Every error body carries
a machine-readable ``error_code`` next to the human-readable ``detail``.
"""
from fastapi import HTTPException, status
from typing import Optional, Dict, Any


class APIException(HTTPException):
    """Base API exception with consistent structure."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class ValidationError(APIException):
    """Request passed schema validation but the engine rejected a field."""

    def __init__(self, detail: str, field: Optional[str] = None):
        error_code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=error_code
        )
        self.field = field


class PayloadError(ValidationError):
    """
    A client-held payload (stored plan, daily log) could not be read back.

    Built from the exception the model layer raised while parsing it.
    """

    def __init__(self, what: str, field: str, cause: Exception):
        if isinstance(cause, KeyError):
            reason = f"missing {cause}"
        else:
            reason = str(cause) or type(cause).__name__
        super().__init__(f"Invalid {what}: {reason}", field=field)
