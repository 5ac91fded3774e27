"""Session and authorization helpers for Menagerie."""

from .context import RequestAuthContext
from .gate import authorize_destructive
from .session import issue_credential, read_credential

__all__ = [
    "RequestAuthContext",
    "authorize_destructive",
    "issue_credential",
    "read_credential",
]
