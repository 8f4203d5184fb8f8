"""Shared validation utilities"""

import uuid
from typing import Optional

from .exceptions import ValidationError


def generate_id() -> str:
    """Generate a new record identifier"""
    return str(uuid.uuid4())


def validate_uuid(value: Optional[str]) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False


def require_identifier(value: Optional[str], field: str) -> str:
    """
    Ensure ``value`` is a syntactically valid identifier.

    Args:
        value: Candidate identifier
        field: Request field name, used as the error path

    Returns:
        The identifier in canonical lowercase form

    Raises:
        ValidationError: If the identifier is missing or malformed
    """
    if not value or not validate_uuid(value):
        raise ValidationError.for_field(field, f"Invalid {field}")
    return str(uuid.UUID(value))
