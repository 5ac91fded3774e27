"""
Structured logging for Menagerie.

Request-scoped values (request id, GraphQL operation, presented session
identity) are bound through structlog's contextvars integration and merged
into every event logged while the request is being served.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars


def _level(debug: bool, log_level: str | None) -> int:
    if log_level:
        level = logging.getLevelName(log_level.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if debug else logging.INFO


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render colored console lines instead of JSON
        log_level: Explicit level name; overrides the level implied by ``debug``
    """
    logging.basicConfig(
        level=_level(debug, log_level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance (typically for ``__name__``)."""
    return structlog.get_logger(name)


def begin_request(request_id: str | None = None) -> str:
    """Start a fresh logging context for a request and return its id."""
    clear_contextvars()
    request_id = request_id or secrets.token_urlsafe(8)
    bind_contextvars(request_id=request_id)
    return request_id


def bind_operation(operation: str) -> None:
    """Tag subsequent events with the GraphQL operation being served."""
    bind_contextvars(graphql_operation=operation)


def bind_session(credential: str | None, admin_identity: str | None) -> None:
    """Tag subsequent events with who the caller claims to be.

    ``admin_resolved`` records whether the admin record was found, which
    decides whether any delete can succeed for this request.
    """
    bind_contextvars(identity=credential, admin_resolved=admin_identity is not None)


def end_request() -> None:
    """Drop all request-scoped logging context."""
    clear_contextvars()
