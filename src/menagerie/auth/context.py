"""Authorization context for request handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestAuthContext:
    """Per-request session state: what the caller claims and who the admin is.

    Built once per request by the GraphQL context getter; the authorization
    gate is the only place that compares the two values.
    """

    credential: str | None
    admin_identity: str | None
