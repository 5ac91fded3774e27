"""Exceptions raised by the record management service.

Every exception carries a user-facing message; strawberry forwards it to the
client as a GraphQL error.
"""

from __future__ import annotations


class MenagerieError(Exception):
    """Base class for all service errors."""

    pass


class ValidationError(MenagerieError):
    """Raised when required input fields are missing or have the wrong type."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(f"All fields are required: {', '.join(self.fields)}")


class AuthenticationRequired(MenagerieError):
    """Raised when an identity query is made without an identity."""

    def __init__(self, message: str = "User must be logged in"):
        super().__init__(message)


class AuthorizationError(MenagerieError):
    """Raised when a presented credential does not authorize the operation."""

    pass


class InvalidCredentials(MenagerieError):
    """Raised when a login attempt does not match the configured credential pair."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class NotFoundError(MenagerieError):
    """Raised when a mutation targets a record that does not exist."""

    def __init__(self, record_id: int):
        self.record_id = record_id
        super().__init__(f"Record {record_id} not found")
