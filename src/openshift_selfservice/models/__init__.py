"""Pydantic payloads exchanged with portal callers."""

from .api_response import ApiResponse, Error
from .commands import EditBillingCommand, EditQuotaCommand, NewProjectCommand, NewTestProjectCommand

__all__ = [
    "ApiResponse",
    "Error",
    "EditBillingCommand",
    "EditQuotaCommand",
    "NewProjectCommand",
    "NewTestProjectCommand",
]
