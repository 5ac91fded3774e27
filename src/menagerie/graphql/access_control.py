"""
Shared context access for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..auth.context import RequestAuthContext
from ..errors import ValidationError
from ..logging import get_logger

if TYPE_CHECKING:
    from ..store.base import RecordStore

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> "RecordStore":
    """Return the record store injected into the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        logger.error("Record store not found in GraphQL context")
        raise RuntimeError("Record store not configured")
    return store


def get_auth_context_from_info(info: strawberry.Info) -> RequestAuthContext:
    """
    Extract the request auth context from the GraphQL info object.

    Returns an anonymous context (no credential, no admin) if none was provided,
    so every authorization check fails closed.
    """
    auth_context = info.context.get("auth")
    if auth_context is None:
        logger.warning("Auth context not found in GraphQL context")
        return RequestAuthContext(credential=None, admin_identity=None)
    return auth_context


def parse_record_id(value: strawberry.ID | str | int) -> int:
    """Convert a GraphQL ID argument to an integer record id."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(["id"]) from None
