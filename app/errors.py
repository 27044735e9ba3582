# app/errors.py
from typing import Any, Dict, Optional
from fastapi import HTTPException
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ValidationFailure(Exception):
    """Bad input: missing field, bad enum value or a duplicate identity key."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class RecordNotFound(Exception):
    """No record matches the given identity key."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


def create_error_response(
    message: str,
    details: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a detailed error response"""
    return {
        "message": message,
        "details": details if details else message
    }


def request_failure(message: str, error: Exception, status_code: int = 500) -> HTTPException:
    """Wrap an unexpected error (driver failure, malformed stored document) raised while serving a request"""
    logger.exception("%s: %s", message, error)
    return HTTPException(
        status_code=status_code,
        detail=create_error_response(message=message, details=str(error))
    )
