"""Pydantic models for portal responses.

Every portal operation answers with an ApiResponse: a localized message and,
on failure, structured error information.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from openshift_selfservice.enums import ErrorCode
from openshift_selfservice.errors import SelfServiceError


class Error(BaseModel):
    """Error details model."""
    code: ErrorCode = Field(..., description="Error code indicating the type of error")
    message: str = Field(..., description="Localized, human-readable error message")
    details: Optional[str] = Field(None, description="Additional error details or context")

    model_config = ConfigDict(use_enum_values=True)


class ApiResponse(BaseModel):
    """Response returned to portal callers.

    Example:
        {
            'message': 'Du hast auf dem Projekt keine Admin-Rechte',
            'error': {
                'code': 'PERMISSION_DENIED',
                'message': 'Du hast auf dem Projekt keine Admin-Rechte',
                'details': 'Context: User: alice, Project: team-a'
            }
        }
    """
    message: str = Field(..., description="Localized message suitable for direct display")
    error: Optional[Error] = Field(None, description="Error information, unset on success")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str) -> "ApiResponse":
        return cls(message=message)

    @classmethod
    def from_exception(cls, exception: SelfServiceError, project: Optional[str] = None,
                       user: Optional[str] = None) -> "ApiResponse":
        """Create an ApiResponse from a portal exception.

        Args:
            exception: The raised portal error
            project: Current project context (optional)
            user: Current user context (optional)

        Returns:
            ApiResponse: Structured failure response
        """
        details = exception.details
        if project or user:
            context_parts = []
            if user:
                context_parts.append(f"User: {user}")
            if project:
                context_parts.append(f"Project: {project}")
            details = f"Context: {', '.join(context_parts)}"

        return cls(
            message=exception.message,
            error=Error(
                code=exception.code,
                message=exception.message,
                details=details,
            ),
        )

    def is_permission_error(self) -> bool:
        return self.error is not None and self.error.code == ErrorCode.PERMISSION_DENIED
