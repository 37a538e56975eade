"""Input validation helpers."""

from typing import Optional

from openshift_selfservice.errors import ValidationError


def is_empty(value: Optional[str]) -> bool:
    """Check if a string is missing, empty or whitespace only."""
    return value is None or not value.strip()


def require_non_empty(value: Optional[str], message: str) -> str:
    """Return value unchanged or raise ValidationError with the given message.

    Args:
        value: Input to check
        message: Localized message reported when value is empty

    Raises:
        ValidationError: If value is empty or whitespace only
    """
    if is_empty(value):
        raise ValidationError(message)
    return value
