"""Authorization gate for destructive operations."""

from __future__ import annotations

from ..errors import AuthorizationError
from ..logging import get_logger

logger = get_logger(__name__)


def authorize_destructive(presented_credential: str | None, admin_identity: str | None) -> bool:
    """
    Check that the presented credential matches the admin identity.

    Fails closed: a missing credential, a missing admin identity and any
    mismatch are all refused.

    Args:
        presented_credential: Credential from the request cookie
        admin_identity: Name of the admin record, resolved for this request

    Returns:
        True when authorized

    Raises:
        AuthorizationError: When the credential does not authorize the operation
    """
    if not presented_credential or not admin_identity:
        logger.warning(
            "Destructive operation refused",
            has_credential=bool(presented_credential),
            has_admin=bool(admin_identity),
        )
        raise AuthorizationError("You are not authorized to delete this record")

    if presented_credential != admin_identity:
        logger.warning("Destructive operation refused: credential mismatch")
        raise AuthorizationError("You are not authorized to delete this record")

    return True
