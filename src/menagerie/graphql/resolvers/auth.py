from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

import strawberry

from ...auth.session import issue_credential
from ...config import settings
from ...errors import AuthenticationRequired, InvalidCredentials
from ...logging import get_logger
from ...validation import validate_login
from ..access_control import get_store_from_info

if TYPE_CHECKING:
    from ..types.record import Record

logger = get_logger(__name__)


async def resolve_record_by_identity(info: strawberry.Info, name: str) -> Record | None:
    """Resolve the record a claimed identity refers to."""
    from ..types.record import Record

    if not name:
        raise AuthenticationRequired()

    store = get_store_from_info(info)
    data = await store.get_by_name(name)
    return Record.from_data(data) if data else None


def _matches_configured_login(username: str, password: str) -> bool:
    username_ok = hmac.compare_digest(username.encode(), settings.login_username.encode())
    password_ok = hmac.compare_digest(password.encode(), settings.login_password.encode())
    return username_ok and password_ok


async def login(info: strawberry.Info, username: str, password: str) -> Record | None:
    """
    Check the credential pair and issue a session cookie.

    The cookie is appended to the HTTP response held in the GraphQL context.
    Returns the record named after the user, or null if there is none.
    """
    from ..types.record import Record

    validate_login(username, password)

    if not _matches_configured_login(username, password):
        logger.info("Login rejected", username=username)
        raise InvalidCredentials()

    response = info.context.get("response")
    if response is not None:
        response.headers.append("set-cookie", issue_credential(username))
    else:
        logger.warning("No response in GraphQL context, session cookie not sent")

    logger.info("Login succeeded", username=username)

    store = get_store_from_info(info)
    data = await store.get_by_name(username)
    return Record.from_data(data) if data else None
