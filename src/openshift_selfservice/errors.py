"""Exceptions raised by portal operations.

Every exception carries an ErrorCode and a localized message that can be shown
to the end user directly.
"""

from typing import Optional

from openshift_selfservice import messages
from openshift_selfservice.enums import ErrorCode


class SelfServiceError(Exception):
    """Base class for all structured portal failures."""

    code: ErrorCode = ErrorCode.REMOTE_API_ERROR

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(SelfServiceError):
    """Missing or out-of-range input, detected before any remote call."""

    code = ErrorCode.VALIDATION_ERROR


class PermissionDenied(SelfServiceError):
    """The acting user holds no admin rights on the project."""

    code = ErrorCode.PERMISSION_DENIED

    def __init__(self, message: str = messages.NO_ADMIN_RIGHTS, details: Optional[str] = None):
        super().__init__(message, details)


class Conflict(SelfServiceError):
    """The project already exists."""

    code = ErrorCode.CONFLICT

    def __init__(self, message: str = messages.PROJECT_ALREADY_EXISTS, details: Optional[str] = None):
        super().__init__(message, details)


class NotFound(SelfServiceError):
    """An expected remote document is missing."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, message: str = messages.PROJECT_NOT_FOUND, details: Optional[str] = None):
        super().__init__(message, details)


class RemoteAPIError(SelfServiceError):
    """Transport failure or unexpected non-success status from the platform."""

    code = ErrorCode.REMOTE_API_ERROR

    def __init__(self, message: str = messages.GENERIC_API_ERROR, details: Optional[str] = None):
        super().__init__(message, details)
