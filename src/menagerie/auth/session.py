"""Stateless session credentials.

The credential is the claimed identity echoed back in a cookie. It is neither
signed nor tracked server-side, so any client able to set the cookie can claim
any identity.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)


def issue_credential(
    identity: str,
    *,
    cookie_name: str | None = None,
    max_age: int | None = None,
) -> str:
    """
    Build the serialized cookie carrying a session credential.

    Args:
        identity: The claimed identity (a record name)
        cookie_name: Cookie name; defaults to ``settings.session_cookie_name``
        max_age: Lifetime in seconds; defaults to ``settings.session_max_age``

    Returns:
        A ``Set-Cookie`` header value
    """
    name = cookie_name or settings.session_cookie_name
    age = settings.session_max_age if max_age is None else max_age

    logger.debug("Issuing session credential", identity=identity, max_age=age)
    return f"{name}={identity}; HttpOnly; SameSite=lax; Path=/; Max-Age={age}"


def read_credential(cookies: Mapping[str, str], cookie_name: str | None = None) -> str | None:
    """Return the credential presented in request cookies, or None when absent or empty."""
    value = cookies.get(cookie_name or settings.session_cookie_name)
    return value or None
