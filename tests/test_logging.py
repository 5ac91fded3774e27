"""Tests for request-scoped logging context."""

import pytest
from structlog.contextvars import get_contextvars

from menagerie.logging import begin_request, bind_operation, bind_session, end_request


@pytest.fixture(autouse=True)
def clean_context():
    end_request()
    yield
    end_request()


def test_begin_request_generates_unique_ids():
    ids = {begin_request() for _ in range(50)}

    assert len(ids) == 50
    assert get_contextvars()["request_id"] in ids


def test_begin_request_keeps_incoming_id():
    assert begin_request("req-1") == "req-1"
    assert get_contextvars() == {"request_id": "req-1"}


def test_begin_request_drops_previous_context():
    begin_request("req-1")
    bind_session("Lulu", "Ralph")

    begin_request("req-2")

    assert get_contextvars() == {"request_id": "req-2"}


def test_bind_operation():
    begin_request("req-1")
    bind_operation("mutation:DeleteOtto")

    assert get_contextvars()["graphql_operation"] == "mutation:DeleteOtto"


def test_bind_session_records_identity_and_admin_lookup():
    bind_session("Lulu", "Ralph")
    assert get_contextvars() == {"identity": "Lulu", "admin_resolved": True}

    bind_session(None, None)
    assert get_contextvars() == {"identity": None, "admin_resolved": False}


def test_end_request_clears_context():
    begin_request("req-1")
    bind_session("Ralph", "Ralph")

    end_request()

    assert get_contextvars() == {}
