"""Error codes returned to portal callers."""

from enum import Enum


class ErrorCode(str, Enum):
    """Kinds of failure a portal operation can report."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    REMOTE_API_ERROR = "REMOTE_API_ERROR"
