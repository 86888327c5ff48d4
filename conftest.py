"""Shared fixtures for the Charify chat tests."""

import pytest
from fastapi.testclient import TestClient

from charify.models import HelpRequest, Role, UserIdentity
from charify.services import (
    ChatStore,
    InMemoryAttachmentStore,
    RequestStore,
    get_attachment_store,
    get_chat_store,
    get_request_store,
)


@pytest.fixture
def help_requests():
    return [
        HelpRequest(
            id=1,
            title="Groceries for an elderly neighbour",
            description="Flour, rice and lentils for the week.",
            city="Lahore",
            requester_id="u1",
            taker_id="u2",
        ),
        HelpRequest(
            id=2,
            title="School books",
            description="Class 5 textbooks.",
            city="Karachi",
            requester_id="u3",
        ),
    ]


@pytest.fixture
def request_store(help_requests):
    return RequestStore(help_requests)


@pytest.fixture
def chat_store():
    return ChatStore()


@pytest.fixture
def attachment_store():
    return InMemoryAttachmentStore(max_bytes=1024)


@pytest.fixture
def requester():
    return UserIdentity(user_id="u1", role=Role.REQUESTER)


@pytest.fixture
def taker():
    return UserIdentity(user_id="u2", role=Role.TAKER)


@pytest.fixture
def client(request_store, chat_store, attachment_store):
    """API client wired to per-test stores."""
    from charify.app import app

    app.dependency_overrides[get_request_store] = lambda: request_store
    app.dependency_overrides[get_chat_store] = lambda: chat_store
    app.dependency_overrides[get_attachment_store] = lambda: attachment_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
