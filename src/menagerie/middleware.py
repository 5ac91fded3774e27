"""
Request logging middleware
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import begin_request, bind_operation, end_request, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SENSITIVE_KEYS = {"password", "token", "secret", "auth", "session", "cookie", "credential"}

# GraphQL payload fields never written to logs
GRAPHQL_PAYLOAD_KEYS = ("query", "variables", "extensions")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``params`` with credential-like values replaced by ``[REDACTED]``."""
    return {
        key: "[REDACTED]" if any(word in key.lower() for word in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def operation_name_from_query(query: str) -> str | None:
    """Derive a loggable operation name from a GraphQL document."""
    if not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = re.search(r"\b(query|mutation)\s+(\w+)", query)
    if not match:
        return "unnamed_operation"
    kind, name = match.groups()
    return f"mutation:{name}" if kind == "mutation" else name


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Name the GraphQL operation carried by a GET or POST to ``/graphql``."""
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        payload: Any = dict(request.query_params)
    elif request.method == "POST":
        try:
            payload = json.loads(await request.body() or b"{}")
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
    else:
        return None

    if not isinstance(payload, dict):
        return None

    name = payload.get("operationName")
    if isinstance(name, str) and name:
        return name
    query = payload.get("query")
    return operation_name_from_query(query) if isinstance(query, str) else None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Give each request an id, tag its logs with the GraphQL operation and log the outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = begin_request(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()

        operation = await extract_graphql_operation_name(request)
        if operation:
            bind_operation(operation)

        params = sanitize_query_params(dict(request.query_params))
        if request.url.path == "/graphql":
            params = {k: v for k, v in params.items() if k not in GRAPHQL_PAYLOAD_KEYS}

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed", method=request.method, path=request.url.path)
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request served",
                method=request.method,
                path=request.url.path,
                params=params or None,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            end_request()
