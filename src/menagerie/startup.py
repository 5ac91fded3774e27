"""
Startup validation for the Menagerie application.

Checks run once when the API starts so that misconfiguration shows up in the
logs immediately rather than on the first request.
"""

from __future__ import annotations

from typing import Any

from .config import settings
from .database.connection import test_database_connection
from .logging import get_logger
from .store.base import RecordStore

logger = get_logger(__name__)


class ConfigurationError(Exception):
    """Raised when the application cannot start with its configuration."""

    pass


async def validate_database_connection() -> dict[str, Any]:
    """Validate that the database is accessible and responsive."""
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    success, error_message = await test_database_connection()
    if success:
        logger.info("Database connection validation successful")
    else:
        results["valid"] = False
        results["errors"].append(error_message)
        logger.error("Database connection validation failed", error=error_message)

    return results


async def validate_admin_record(store: RecordStore) -> dict[str, Any]:
    """
    Check that the configured admin record exists.

    A missing admin record is not fatal, but every delete will be refused.
    """
    results: dict[str, Any] = {"valid": True, "warnings": [], "errors": []}

    admin = await store.get_by_name(settings.admin_record_name)
    if admin is None:
        results["warnings"].append(
            f"Admin record '{settings.admin_record_name}' does not exist; "
            "deleteRecord will always be refused"
        )
        logger.warning("Admin record missing", admin_record_name=settings.admin_record_name)
    else:
        logger.info("Admin record found", admin_record_id=admin.id)

    return results


async def validate_startup_configuration(store: RecordStore) -> dict[str, Any]:
    """
    Run all startup checks.

    Returns:
        Dictionary with per-check results and ``overall_valid``

    Raises:
        ConfigurationError: If the database is unreachable in production
    """
    database = await validate_database_connection()

    if not database["valid"]:
        if settings.environment.lower() in ("production", "prod"):
            raise ConfigurationError("Database unavailable in production")
        admin = {"valid": False, "warnings": [], "errors": ["Skipped: database unavailable"]}
    else:
        admin = await validate_admin_record(store)

    overall_valid = database["valid"] and admin["valid"]

    return {"database": database, "admin": admin, "overall_valid": overall_valid}
