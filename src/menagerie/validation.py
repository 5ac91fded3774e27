"""
Input validation for record mutations.

Both validators reject the whole operation when any required field is missing,
empty or not a string; nothing reaches the store in that case.
"""

from __future__ import annotations

from typing import Any

from .errors import ValidationError
from .logging import get_logger

logger = get_logger(__name__)


def _invalid_fields(fields: dict[str, Any]) -> list[str]:
    return [name for name, value in fields.items() if not isinstance(value, str) or not value]


def _require(operation: str, fields: dict[str, Any]) -> None:
    invalid = _invalid_fields(fields)
    if invalid:
        logger.info("Input validation failed", operation=operation, fields=invalid)
        raise ValidationError(invalid)


def validate_create(name: Any, category: Any, accessory: Any) -> None:
    """
    Validate the fields of a new record.

    Raises:
        ValidationError: If any of name, category or accessory is not a non-empty string
    """
    _require("create", {"name": name, "category": category, "accessory": accessory})


def validate_login(username: Any, password: Any) -> None:
    """
    Validate a login attempt.

    Raises:
        ValidationError: If username or password is not a non-empty string
    """
    _require("login", {"username": username, "password": password})
